"""Breakpoint, watchpoint and dprintf tools."""

from __future__ import annotations

from dataclasses import dataclass, field

from gdbmi_tools.command import MiCommand
from gdbmi_tools.mi_types import WatchType
from gdbmi_tools.spec import FULL_CORE, FULL_ONLY, make_specs

_U32_MAX = 2**32 - 1

BREAKPOINTS_CORE_TOOL_SPECS = make_specs(
    "breakpoints",
    FULL_CORE,
    [
        "set_breakpoint",
        "list_breakpoints",
        "delete_breakpoint",
        "enable_breakpoint",
        "disable_breakpoint",
        "break_condition",
        "break_after",
        "break_info",
        "set_watchpoint",
    ],
)

BREAKPOINTS_EXTENDED_TOOL_SPECS = make_specs(
    "breakpoints",
    FULL_ONLY,
    ["break_commands", "break_passcount", "dprintf_insert"],
)


def _require_u32(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} out of range: {value}")


@dataclass
class SetBreakpointArgs:
    """Location: function name, ``file:line`` or ``*address``."""

    location: str
    condition: str | None = None
    temporary: bool = False


@dataclass
class BreakpointIdArgs:
    id: str


@dataclass
class SetWatchpointArgs:
    expression: str
    watch_type: WatchType = WatchType.WRITE

    def __post_init__(self) -> None:
        self.watch_type = WatchType(self.watch_type)


@dataclass
class BreakConditionArgs:
    """An empty condition removes the existing one."""

    id: str
    condition: str


@dataclass
class BreakAfterArgs:
    """Ignore the next ``count`` hits."""

    id: str
    count: int

    def __post_init__(self) -> None:
        _require_u32("count", self.count)


@dataclass
class BreakCommandsArgs:
    """CLI commands to run when breakpoint ``id`` is hit."""

    id: str
    commands: list[str]


@dataclass
class BreakPasscountArgs:
    """Collect data ``passcount`` times before auto-stopping."""

    id: str
    passcount: int

    def __post_init__(self) -> None:
        _require_u32("passcount", self.passcount)


@dataclass
class DprintfInsertArgs:
    """Dynamic printf at ``location`` with a format string and arguments."""

    location: str
    format: str
    args: list[str] = field(default_factory=list)
    temporary: bool = False
    condition: str | None = None
    ignore_count: int | None = None
    thread_id: str | None = None

    def __post_init__(self) -> None:
        if self.ignore_count is not None:
            _require_u32("ignore_count", self.ignore_count)


def set_breakpoint(args: SetBreakpointArgs) -> MiCommand:
    """Insert a breakpoint; GDB replies with the id it assigned."""
    cmd = MiCommand("break-insert")
    if args.temporary:
        cmd = cmd.option("t")
    if args.condition is not None:
        cmd = cmd.option_with("c", args.condition)
    return cmd.parameter(args.location)


def list_breakpoints() -> MiCommand:
    """List all currently-defined breakpoints."""
    return MiCommand("break-list")


def delete_breakpoint(args: BreakpointIdArgs) -> MiCommand:
    """Delete a breakpoint by id."""
    return MiCommand("break-delete").parameter(args.id)


def enable_breakpoint(args: BreakpointIdArgs) -> MiCommand:
    """Enable a disabled breakpoint by id."""
    return MiCommand("break-enable").parameter(args.id)


def disable_breakpoint(args: BreakpointIdArgs) -> MiCommand:
    """Disable a breakpoint by id without deleting it."""
    return MiCommand("break-disable").parameter(args.id)


def break_condition(args: BreakConditionArgs) -> MiCommand:
    """Set or modify a breakpoint's condition expression."""
    return MiCommand("break-condition").parameter(args.id).parameter(args.condition)


def break_after(args: BreakAfterArgs) -> MiCommand:
    """Set a breakpoint's ignore count."""
    return MiCommand("break-after").parameter(args.id).parameter(str(args.count))


def break_info(args: BreakpointIdArgs) -> MiCommand:
    """Show info for a single breakpoint by id."""
    return MiCommand("break-info").parameter(args.id)


def set_watchpoint(args: SetWatchpointArgs) -> MiCommand:
    """Set a watchpoint on an expression."""
    cmd = MiCommand("break-watch")
    if args.watch_type is WatchType.READ:
        cmd = cmd.option("r")
    elif args.watch_type is WatchType.ACCESS:
        cmd = cmd.option("a")
    return cmd.parameter(args.expression)


def break_commands(args: BreakCommandsArgs) -> MiCommand:
    """Set CLI commands to execute when a breakpoint is hit."""
    cmd = MiCommand("break-commands").parameter(args.id)
    for command in args.commands:
        cmd = cmd.parameter(f'"{command}"')
    return cmd


def break_passcount(args: BreakPasscountArgs) -> MiCommand:
    """Set a tracepoint's passcount."""
    return (
        MiCommand("break-passcount").parameter(args.id).parameter(str(args.passcount))
    )


def dprintf_insert(args: DprintfInsertArgs) -> MiCommand:
    """Insert a dynamic printf breakpoint that prints without stopping."""
    cmd = MiCommand("dprintf-insert")
    if args.temporary:
        cmd = cmd.option("t")
    if args.condition is not None:
        cmd = cmd.option_with("c", args.condition)
    if args.ignore_count is not None:
        cmd = cmd.option_with("i", str(args.ignore_count))
    if args.thread_id is not None:
        cmd = cmd.option_with("p", args.thread_id)
    cmd = cmd.parameter(args.location).parameter(args.format)
    for arg in args.args:
        cmd = cmd.parameter(arg)
    return cmd