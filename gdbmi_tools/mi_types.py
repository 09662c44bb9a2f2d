"""Domain enumerations shared by the tool argument types."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U32_MAX = 2**32 - 1


class WatchType(str, enum.Enum):
    """Kind of memory access a watchpoint triggers on."""

    WRITE = "write"
    READ = "read"
    ACCESS = "access"


class PrintValues(str, enum.Enum):
    """How much of each variable's value to print."""

    NO_VALUES = "no-values"
    ALL_VALUES = "all-values"
    SIMPLE_VALUES = "simple-values"

    def as_mi_arg(self) -> str:
        return f"--{self.value}"


class RegisterFormat(str, enum.Enum):
    """Format for register values."""

    HEX = "hex"
    OCTAL = "octal"
    BINARY = "binary"
    DECIMAL = "decimal"
    RAW = "raw"
    NATURAL = "natural"

    def as_mi_arg(self) -> str:
        return _REGISTER_LETTERS[self]


_REGISTER_LETTERS = {
    RegisterFormat.HEX: "x",
    RegisterFormat.OCTAL: "o",
    RegisterFormat.BINARY: "t",
    RegisterFormat.DECIMAL: "d",
    RegisterFormat.RAW: "r",
    RegisterFormat.NATURAL: "N",
}


class VarFormat(str, enum.Enum):
    """Display format of a variable object."""

    BINARY = "binary"
    DECIMAL = "decimal"
    HEXADECIMAL = "hexadecimal"
    OCTAL = "octal"
    NATURAL = "natural"
    ZERO_HEXADECIMAL = "zero-hexadecimal"

    def as_mi_arg(self) -> str:
        return self.value


class OpcodeMode(str, enum.Enum):
    """How raw opcodes are shown in disassembly."""

    NONE = "none"
    BYTES = "bytes"
    DISPLAY = "display"

    def as_mi_arg(self) -> str:
        return self.value


class MemoryWordFormat(str, enum.Enum):
    """Word format for tabular memory reads."""

    HEX = "hex"
    DECIMAL = "decimal"
    UNSIGNED = "unsigned"
    OCTAL = "octal"
    BINARY = "binary"
    ADDRESS = "address"
    CHAR = "char"
    FLOAT = "float"

    def as_mi_arg(self) -> str:
        return _WORD_LETTERS[self]


_WORD_LETTERS = {
    MemoryWordFormat.HEX: "x",
    MemoryWordFormat.DECIMAL: "d",
    MemoryWordFormat.UNSIGNED: "u",
    MemoryWordFormat.OCTAL: "o",
    MemoryWordFormat.BINARY: "t",
    MemoryWordFormat.ADDRESS: "a",
    MemoryWordFormat.CHAR: "c",
    MemoryWordFormat.FLOAT: "f",
}


class TraceFindKind(str, enum.Enum):
    """Criterion used to select a trace frame."""

    NONE = "none"
    FRAME_NUMBER = "frame-number"
    TRACEPOINT_NUMBER = "tracepoint-number"
    PC = "pc"
    PC_INSIDE_RANGE = "pc-inside-range"
    PC_OUTSIDE_RANGE = "pc-outside-range"
    LINE = "line"


_TRACE_FIELDS: dict[TraceFindKind, tuple[str, ...]] = {
    TraceFindKind.NONE: (),
    TraceFindKind.FRAME_NUMBER: ("number",),
    TraceFindKind.TRACEPOINT_NUMBER: ("number",),
    TraceFindKind.PC: ("address",),
    TraceFindKind.PC_INSIDE_RANGE: ("start", "end"),
    TraceFindKind.PC_OUTSIDE_RANGE: ("start", "end"),
    TraceFindKind.LINE: ("location",),
}

_ALL_TRACE_FIELDS = ("number", "address", "start", "end", "location")


@dataclass(frozen=True)
class TraceFindMode:
    """A trace-frame selection: a kind plus exactly the fields it needs."""

    kind: TraceFindKind
    number: int | None = None
    address: str | None = None
    start: str | None = None
    end: str | None = None
    location: str | None = None

    def __post_init__(self) -> None:
        kind = TraceFindKind(self.kind)
        object.__setattr__(self, "kind", kind)
        required = _TRACE_FIELDS[kind]
        for name in _ALL_TRACE_FIELDS:
            present = getattr(self, name) is not None
            if name in required and not present:
                raise ValueError(f"trace-find mode {kind.value!r} requires {name!r}")
            if name not in required and present:
                raise ValueError(f"trace-find mode {kind.value!r} does not take {name!r}")
        if self.number is not None:
            if isinstance(self.number, bool) or not isinstance(self.number, int):
                raise TypeError("number must be an integer")
            if not 0 <= self.number <= _U32_MAX:
                raise ValueError(f"number out of range: {self.number}")