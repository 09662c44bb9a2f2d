from gdbmi_tools import symbols
from gdbmi_tools.spec import FULL_ONLY, make_specs
from gdbmi_tools.symbols import SymbolListLinesArgs


def test_symbol_list_lines():
    cmd = symbols.symbol_list_lines(SymbolListLinesArgs(filename="hello.c"))
    assert cmd.operation == "symbol-list-lines"
    assert cmd.parameters == ("hello.c",)
    assert cmd.options == ()


def test_symbol_list_lines_is_full_only():
    expected = make_specs("symbols", FULL_ONLY, ["symbol_list_lines"])
    assert tuple(symbols.SYMBOL_EXTENDED_TOOL_SPECS) == expected
    (spec,) = symbols.SYMBOL_EXTENDED_TOOL_SPECS
    assert spec.in_core() is False