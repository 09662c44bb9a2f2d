"""Variable-object, expression, memory, register and disassembly tools."""

from __future__ import annotations

from dataclasses import dataclass, field

from gdbmi_tools.command import MiCommand
from gdbmi_tools.mi_types import (
    MemoryWordFormat,
    OpcodeMode,
    PrintValues,
    RegisterFormat,
    VarFormat,
)
from gdbmi_tools.spec import FULL_CORE, FULL_ONLY, make_specs

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

VARIABLES_CORE_TOOL_SPECS = make_specs(
    "variables",
    FULL_CORE,
    [
        "inspect",
        "watch_create",
        "watch_list",
        "watch_delete",
        "var_list_children",
        "var_evaluate_expression",
    ],
)

VARIABLES_EXTENDED_TOOL_SPECS = make_specs(
    "variables",
    FULL_ONLY,
    [
        "var_assign",
        "var_set_format",
        "var_show_format",
        "var_info_num_children",
        "var_info_type",
        "var_info_expression",
        "var_info_path_expression",
        "var_show_attributes",
        "var_set_frozen",
        "var_set_update_range",
        "var_set_visualizer",
        "enable_pretty_printing",
    ],
)

DATA_CORE_TOOL_SPECS = make_specs(
    "data",
    FULL_CORE,
    [
        "read_memory",
        "disassemble",
        "list_register_names",
        "read_registers",
        "list_changed_registers",
    ],
)

DATA_EXTENDED_TOOL_SPECS = make_specs(
    "data", FULL_ONLY, ["write_memory", "read_memory_deprecated"]
)


def _require_int(
    name: str, value: object, low: int, high: int, optional: bool = False
) -> None:
    if optional and value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range: {value}")


def _u32(name: str, value: object, optional: bool = False) -> None:
    _require_int(name, value, 0, _U32_MAX, optional)


def _u64(name: str, value: object, optional: bool = False) -> None:
    _require_int(name, value, 0, _U64_MAX, optional)


def _i64(name: str, value: object, optional: bool = False) -> None:
    _require_int(name, value, _I64_MIN, _I64_MAX, optional)


# --- variable-object arguments -------------------------------------------


@dataclass
class InspectArgs:
    """Expression to evaluate in the current frame."""

    expression: str


@dataclass
class WatchCreateArgs:
    """Expression to watch."""

    expression: str


@dataclass
class WatchDeleteArgs:
    """Variable-object name."""

    name: str


@dataclass
class VarNameArgs:
    """Variable-object name."""

    name: str


@dataclass
class VarListChildrenArgs:
    """Children range is used only when both ``from_`` and ``to`` are given."""

    name: str
    print_values: PrintValues | None = None
    from_: int | None = None
    to: int | None = None

    def __post_init__(self) -> None:
        if self.print_values is not None:
            self.print_values = PrintValues(self.print_values)
        _u32("from_", self.from_, optional=True)
        _u32("to", self.to, optional=True)


@dataclass
class VarAssignArgs:
    name: str
    expression: str


@dataclass
class VarSetFormatArgs:
    name: str
    format: VarFormat

    def __post_init__(self) -> None:
        self.format = VarFormat(self.format)


@dataclass
class VarSetFrozenArgs:
    """True freezes the object (stops updates), False thaws it."""

    name: str
    frozen: bool


@dataclass
class VarSetUpdateRangeArgs:
    """Child range that ``-var-update`` refreshes; ``to`` is exclusive."""

    name: str
    from_: int
    to: int

    def __post_init__(self) -> None:
        _u32("from_", self.from_)
        _u32("to", self.to)


@dataclass
class VarSetVisualizerArgs:
    """Visualizer name, or ``"None"`` to reset."""

    name: str
    visualizer: str


# --- data arguments ------------------------------------------------------


@dataclass
class ReadMemoryArgs:
    """Read ``count`` units starting at ``address`` plus ``offset``."""

    address: str
    count: int
    offset: int | None = None

    def __post_init__(self) -> None:
        _u64("count", self.count)
        _i64("offset", self.offset, optional=True)


@dataclass
class WriteMemoryArgs:
    """Hex-encoded ``contents``; a larger ``count`` repeats the pattern."""

    address: str
    contents: str
    count: int | None = None

    def __post_init__(self) -> None:
        _u64("count", self.count, optional=True)


@dataclass
class DisassembleArgs:
    start_addr: str
    end_addr: str
    opcodes: OpcodeMode | None = None
    source: bool = False

    def __post_init__(self) -> None:
        if self.opcodes is not None:
            self.opcodes = OpcodeMode(self.opcodes)


@dataclass
class RegisterValuesArgs:
    """Register numbers to read; empty means all."""

    format: RegisterFormat
    registers: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.format = RegisterFormat(self.format)
        for number in self.registers:
            _u32("register", number)


@dataclass
class RegisterNamesArgs:
    """Register numbers to name; empty means all."""

    registers: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        for number in self.registers:
            _u32("register", number)


@dataclass
class ReadMemoryDeprecatedArgs:
    address: str
    word_format: MemoryWordFormat
    word_size: int
    nr_rows: int
    nr_cols: int
    column_offset: int | None = None
    aschar: str | None = None

    def __post_init__(self) -> None:
        self.word_format = MemoryWordFormat(self.word_format)
        _u32("word_size", self.word_size)
        _u32("nr_rows", self.nr_rows)
        _u32("nr_cols", self.nr_cols)
        _i64("column_offset", self.column_offset, optional=True)


# --- variable-object tools -----------------------------------------------


def inspect(args: InspectArgs) -> MiCommand:
    """Evaluate an expression in the current frame."""
    return MiCommand("data-evaluate-expression").parameter(args.expression)


def watch_create(args: WatchCreateArgs) -> MiCommand:
    """Create a variable object watching an expression."""
    return (
        MiCommand("var-create")
        .parameter("-")
        .parameter("*")
        .parameter(args.expression)
    )


def watch_list() -> MiCommand:
    """Update and list all active variable objects."""
    return MiCommand("var-update").parameter("*")


def watch_delete(args: WatchDeleteArgs) -> MiCommand:
    """Delete a variable object by name."""
    return MiCommand("var-delete").parameter(args.name)


def var_list_children(args: VarListChildrenArgs) -> MiCommand:
    """List children of a variable object."""
    cmd = MiCommand("var-list-children")
    if args.print_values is not None:
        cmd = cmd.parameter(args.print_values.as_mi_arg())
    cmd = cmd.parameter(args.name)
    if args.from_ is not None and args.to is not None:
        cmd = cmd.parameter(str(args.from_)).parameter(str(args.to))
    return cmd


def var_evaluate_expression(args: VarNameArgs) -> MiCommand:
    """Current value of a variable object."""
    return MiCommand("var-evaluate-expression").parameter(args.name)


def var_assign(args: VarAssignArgs) -> MiCommand:
    """Assign a new value to a variable object."""
    return MiCommand("var-assign").parameter(args.name).parameter(args.expression)


def var_set_format(args: VarSetFormatArgs) -> MiCommand:
    """Set the display format of a variable object."""
    return (
        MiCommand("var-set-format")
        .parameter(args.name)
        .parameter(args.format.as_mi_arg())
    )


def var_show_format(args: VarNameArgs) -> MiCommand:
    """Show the display format of a variable object."""
    return MiCommand("var-show-format").parameter(args.name)


def var_info_num_children(args: VarNameArgs) -> MiCommand:
    """Number of children of a variable object."""
    return MiCommand("var-info-num-children").parameter(args.name)


def var_info_type(args: VarNameArgs) -> MiCommand:
    """Type of a variable object."""
    return MiCommand("var-info-type").parameter(args.name)


def var_info_expression(args: VarNameArgs) -> MiCommand:
    """Expression a variable object represents."""
    return MiCommand("var-info-expression").parameter(args.name)


def var_info_path_expression(args: VarNameArgs) -> MiCommand:
    """Full path expression for a variable object."""
    return MiCommand("var-info-path-expression").parameter(args.name)


def var_show_attributes(args: VarNameArgs) -> MiCommand:
    """Whether a variable object is editable."""
    return MiCommand("var-show-attributes").parameter(args.name)


def var_set_frozen(args: VarSetFrozenArgs) -> MiCommand:
    """Freeze or thaw a variable object."""
    flag = "1" if args.frozen else "0"
    return MiCommand("var-set-frozen").parameter(args.name).parameter(flag)


def var_set_update_range(args: VarSetUpdateRangeArgs) -> MiCommand:
    """Set the child range refreshed by updates."""
    return (
        MiCommand("var-set-update-range")
        .parameter(args.name)
        .parameter(str(args.from_))
        .parameter(str(args.to))
    )


def var_set_visualizer(args: VarSetVisualizerArgs) -> MiCommand:
    """Set a pretty-printer visualizer for a variable object."""
    return (
        MiCommand("var-set-visualizer")
        .parameter(args.name)
        .parameter(args.visualizer)
    )


def enable_pretty_printing() -> MiCommand:
    """Enable pretty-printing for variable objects globally."""
    return MiCommand("enable-pretty-printing")


# --- data tools ----------------------------------------------------------


def read_memory(args: ReadMemoryArgs) -> MiCommand:
    """Read raw memory bytes from the target."""
    cmd = MiCommand("data-read-memory-bytes")
    if args.offset is not None:
        cmd = cmd.option_with("o", str(args.offset))
    return cmd.parameter(args.address).parameter(str(args.count))


def disassemble(args: DisassembleArgs) -> MiCommand:
    """Disassemble a memory range."""
    cmd = (
        MiCommand("data-disassemble")
        .option_with("s", args.start_addr)
        .option_with("e", args.end_addr)
    )
    if args.opcodes is not None:
        cmd = cmd.option_with("opcodes", args.opcodes.as_mi_arg())
    if args.source:
        cmd = cmd.option("source")
    return cmd.parameter("--").parameter("0")


def list_register_names(args: RegisterNamesArgs) -> MiCommand:
    """List register names, all or the given numbers."""
    cmd = MiCommand("data-list-register-names")
    for number in args.registers:
        cmd = cmd.parameter(str(number))
    return cmd


def read_registers(args: RegisterValuesArgs) -> MiCommand:
    """Read register values in the given format."""
    cmd = MiCommand("data-list-register-values").parameter(args.format.as_mi_arg())
    for number in args.registers:
        cmd = cmd.parameter(str(number))
    return cmd


def list_changed_registers() -> MiCommand:
    """Register numbers that changed since the last stop."""
    return MiCommand("data-list-changed-registers")


def write_memory(args: WriteMemoryArgs) -> MiCommand:
    """Write hex-encoded bytes to target memory."""
    cmd = (
        MiCommand("data-write-memory-bytes")
        .parameter(args.address)
        .parameter(args.contents)
    )
    if args.count is not None:
        cmd = cmd.parameter(str(args.count))
    return cmd


def read_memory_deprecated(args: ReadMemoryDeprecatedArgs) -> MiCommand:
    """Read target memory in tabular form."""
    cmd = MiCommand("data-read-memory")
    if args.column_offset is not None:
        cmd = cmd.option_with("o", str(args.column_offset))
    cmd = (
        cmd.parameter(args.address)
        .parameter(args.word_format.as_mi_arg())
        .parameter(str(args.word_size))
        .parameter(str(args.nr_rows))
        .parameter(str(args.nr_cols))
    )
    if args.aschar is not None:
        cmd = cmd.parameter(args.aschar)
    return cmd