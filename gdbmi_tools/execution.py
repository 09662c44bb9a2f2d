"""Execution-control tools: run, continue, stepping and reverse execution."""

from __future__ import annotations

from dataclasses import dataclass

from gdbmi_tools.command import MiCommand
from gdbmi_tools.spec import FULL_CORE, FULL_ONLY, make_specs

EXECUTION_CORE_TOOL_SPECS = make_specs(
    "execution",
    FULL_CORE,
    ["run", "cont", "step", "next", "finish", "interrupt", "until"],
)

EXECUTION_EXTENDED_TOOL_SPECS = make_specs(
    "execution",
    FULL_ONLY,
    ["step_instruction", "next_instruction", "return_from_function", "jump"],
)

EXECUTION_REVERSE_TOOL_SPECS = make_specs(
    "execution",
    FULL_ONLY,
    ["reverse_step", "reverse_next", "reverse_continue", "reverse_finish"],
)


@dataclass
class UntilArgs:
    """Location to run until; ``None`` means the next source line."""

    location: str | None = None


@dataclass
class JumpArgs:
    """Location to jump to."""

    location: str


@dataclass
class ReturnArgs:
    """Optional return value expression."""

    expression: str | None = None


@dataclass
class ReverseStepArgs:
    """Whether to execute in reverse; needs reverse-debugging support."""

    reverse: bool = False


def run() -> MiCommand:
    """Run the loaded program from the start."""
    return MiCommand("exec-run")


def cont() -> MiCommand:
    """Continue execution from the current stop."""
    return MiCommand("exec-continue")


def step() -> MiCommand:
    """Step into the next source line."""
    return MiCommand("exec-step")


def next_() -> MiCommand:
    """Execute the next source line, stepping over calls."""
    return MiCommand("exec-next")


def finish() -> MiCommand:
    """Run until the current function returns."""
    return MiCommand("exec-finish")


def interrupt() -> MiCommand:
    """Interrupt all running target threads."""
    return MiCommand("exec-interrupt").option("all")


def until(args: UntilArgs) -> MiCommand:
    """Run until a location, or the next source line if none is given."""
    cmd = MiCommand("exec-until")
    if args.location is not None:
        cmd = cmd.parameter(args.location)
    return cmd


def step_instruction() -> MiCommand:
    """Step one machine instruction, into calls."""
    return MiCommand("exec-step-instruction")


def next_instruction() -> MiCommand:
    """Step one machine instruction, over calls."""
    return MiCommand("exec-next-instruction")


def return_from_function(args: ReturnArgs) -> MiCommand:
    """Make the current function return, optionally with a value."""
    cmd = MiCommand("exec-return")
    if args.expression is not None:
        cmd = cmd.parameter(args.expression)
    return cmd


def jump(args: JumpArgs) -> MiCommand:
    """Jump to a location, skipping intervening code."""
    return MiCommand("exec-jump").parameter(args.location)


def _maybe_reverse(operation: str, args: ReverseStepArgs) -> MiCommand:
    cmd = MiCommand(operation)
    if args.reverse:
        cmd = cmd.option("reverse")
    return cmd


def reverse_step(args: ReverseStepArgs) -> MiCommand:
    """Step to the previous source line."""
    return _maybe_reverse("exec-step", args)


def reverse_next(args: ReverseStepArgs) -> MiCommand:
    """Step backward over the previous source line."""
    return _maybe_reverse("exec-next", args)


def reverse_continue(args: ReverseStepArgs) -> MiCommand:
    """Continue execution backward."""
    return _maybe_reverse("exec-continue", args)


def reverse_finish(args: ReverseStepArgs) -> MiCommand:
    """Run backward to the current function's caller."""
    return _maybe_reverse("exec-finish", args)