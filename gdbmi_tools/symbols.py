"""Symbol table tools."""

from __future__ import annotations

from dataclasses import dataclass

from gdbmi_tools.command import MiCommand
from gdbmi_tools.spec import FULL_ONLY, make_specs

SYMBOL_EXTENDED_TOOL_SPECS = make_specs("symbols", FULL_ONLY, ["symbol_list_lines"])


@dataclass
class SymbolListLinesArgs:
    """Source file name."""

    filename: str


def symbol_list_lines(args: SymbolListLinesArgs) -> MiCommand:
    """List line number entries for a source file."""
    return MiCommand("symbol-list-lines").parameter(args.filename)