import pytest

from gdbmi_tools.mi_types import (
    MemoryWordFormat,
    OpcodeMode,
    PrintValues,
    RegisterFormat,
    TraceFindKind,
    TraceFindMode,
    VarFormat,
    WatchType,
)


def test_watch_type_lookup_by_value():
    assert WatchType("read") is WatchType.READ
    assert {w.value for w in WatchType} == {"write", "read", "access"}


def test_print_values_all_values_arg():
    assert PrintValues.ALL_VALUES.as_mi_arg() == "--all-values"


@pytest.mark.parametrize("value", [pv.value for pv in PrintValues])
def test_print_values_args_are_long_options(value):
    member = PrintValues(value)
    arg = member.as_mi_arg()
    assert arg.startswith("--")
    assert arg[2:] == value


def test_register_format_hex_letter():
    assert RegisterFormat.HEX.as_mi_arg() == "x"


@pytest.mark.parametrize("enum_cls", [RegisterFormat, MemoryWordFormat])
def test_letter_formats_are_distinct_single_chars(enum_cls):
    args = [m.as_mi_arg() for m in enum_cls]
    assert all(len(a) == 1 for a in args)
    assert len(set(args)) == len(args)


@pytest.mark.parametrize("enum_cls", [VarFormat, OpcodeMode])
def test_word_formats_roundtrip_through_value(enum_cls):
    for member in enum_cls:
        assert enum_cls(member.as_mi_arg()) is member


def test_trace_find_kind_values_match_mi_keywords():
    assert TraceFindKind("pc-inside-range") is TraceFindKind.PC_INSIDE_RANGE
    assert TraceFindKind("frame-number") is TraceFindKind.FRAME_NUMBER


def test_trace_find_mode_accepts_valid_fields():
    mode = TraceFindMode(TraceFindKind.PC_OUTSIDE_RANGE, start="0x10", end="0x20")
    assert (mode.start, mode.end) == ("0x10", "0x20")


def test_trace_find_mode_coerces_kind_string():
    mode = TraceFindMode("line", location="a.c:3")
    assert mode.kind is TraceFindKind.LINE


def test_trace_find_none_takes_no_fields():
    assert TraceFindMode(TraceFindKind.NONE).number is None
    with pytest.raises(ValueError):
        TraceFindMode(TraceFindKind.NONE, number=1)


def test_trace_find_missing_required_field():
    with pytest.raises(ValueError):
        TraceFindMode(TraceFindKind.PC_INSIDE_RANGE, start="0x10")


def test_trace_find_negative_number_rejected():
    with pytest.raises(ValueError):
        TraceFindMode(TraceFindKind.FRAME_NUMBER, number=-1)


def test_trace_find_non_int_number_rejected():
    with pytest.raises(TypeError):
        TraceFindMode(TraceFindKind.TRACEPOINT_NUMBER, number="3")