"""Thread, frame and stack inspection tools."""

from __future__ import annotations

from dataclasses import dataclass

from gdbmi_tools.command import MiCommand
from gdbmi_tools.mi_types import PrintValues
from gdbmi_tools.spec import FULL_CORE, FULL_ONLY, make_specs

_U32_MAX = 2**32 - 1

INSPECTION_TOOL_SPECS = make_specs(
    "inspection",
    FULL_CORE,
    ["backtrace", "list_threads", "select_frame", "select_thread"],
)

STACK_CORE_TOOL_SPECS = make_specs(
    "stack",
    FULL_CORE,
    ["frame_info", "stack_depth", "list_locals", "list_arguments", "list_variables"],
)

STACK_EXTENDED_TOOL_SPECS = make_specs("stack", FULL_ONLY, ["enable_frame_filters"])


def _require_u32(name: str, value: object, optional: bool = False) -> None:
    if optional and value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} out of range: {value}")


@dataclass
class SelectFrameArgs:
    """Frame level; 0 is the innermost."""

    level: int

    def __post_init__(self) -> None:
        _require_u32("level", self.level)


@dataclass
class BacktraceArgs:
    """At most ``limit`` innermost frames; ``None`` for the full stack."""

    limit: int | None = None

    def __post_init__(self) -> None:
        _require_u32("limit", self.limit, optional=True)


@dataclass
class StackListArgs:
    print_values: PrintValues
    skip_unavailable: bool = False

    def __post_init__(self) -> None:
        self.print_values = PrintValues(self.print_values)


@dataclass
class StackListArgumentsArgs:
    """Frame range is inclusive and used only when both ends are given."""

    print_values: PrintValues
    skip_unavailable: bool = False
    low_frame: int | None = None
    high_frame: int | None = None

    def __post_init__(self) -> None:
        self.print_values = PrintValues(self.print_values)
        _require_u32("low_frame", self.low_frame, optional=True)
        _require_u32("high_frame", self.high_frame, optional=True)


@dataclass
class StackDepthArgs:
    """Maximum depth to probe; ``None`` for unlimited."""

    max_depth: int | None = None

    def __post_init__(self) -> None:
        _require_u32("max_depth", self.max_depth, optional=True)


@dataclass
class ThreadSelectArgs:
    thread_id: str


@dataclass
class ThreadInfoArgs:
    """``None`` lists all threads."""

    thread_id: str | None = None


def backtrace(args: BacktraceArgs) -> MiCommand:
    """List the current thread's frames, optionally capped at ``limit``."""
    cmd = MiCommand("stack-list-frames")
    if args.limit is not None:
        high = max(args.limit, 1) - 1
        cmd = cmd.parameter("0").parameter(str(high))
    return cmd


def list_threads(args: ThreadInfoArgs) -> MiCommand:
    """List threads, or a single one when an id is given."""
    cmd = MiCommand("thread-info")
    if args.thread_id is not None:
        cmd = cmd.parameter(args.thread_id)
    return cmd


def select_frame(args: SelectFrameArgs) -> MiCommand:
    """Select a stack frame by level."""
    return MiCommand("stack-select-frame").parameter(str(args.level))


def select_thread(args: ThreadSelectArgs) -> MiCommand:
    """Select a thread by id."""
    return MiCommand("thread-select").parameter(args.thread_id)


def frame_info() -> MiCommand:
    """Info about the selected stack frame."""
    return MiCommand("stack-info-frame")


def stack_depth(args: StackDepthArgs) -> MiCommand:
    """Number of frames in the current stack."""
    cmd = MiCommand("stack-info-depth")
    if args.max_depth is not None:
        cmd = cmd.parameter(str(args.max_depth))
    return cmd


def _stack_list(operation: str, args: StackListArgs | StackListArgumentsArgs) -> MiCommand:
    cmd = MiCommand(operation)
    if args.skip_unavailable:
        cmd = cmd.option("skip-unavailable")
    return cmd.parameter(args.print_values.as_mi_arg())


def list_locals(args: StackListArgs) -> MiCommand:
    """List local variables of the selected frame."""
    return _stack_list("stack-list-locals", args)


def list_arguments(args: StackListArgumentsArgs) -> MiCommand:
    """List arguments of each frame."""
    cmd = _stack_list("stack-list-arguments", args)
    if args.low_frame is not None and args.high_frame is not None:
        cmd = cmd.parameter(str(args.low_frame)).parameter(str(args.high_frame))
    return cmd


def list_variables(args: StackListArgs) -> MiCommand:
    """List locals and arguments of the selected frame."""
    return _stack_list("stack-list-variables", args)


def enable_frame_filters() -> MiCommand:
    """Enable frame filter support in stack commands."""
    return MiCommand("enable-frame-filters")