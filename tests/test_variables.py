import pytest

from gdbmi_tools import variables as v
from gdbmi_tools.mi_types import (
    MemoryWordFormat,
    OpcodeMode,
    PrintValues,
    RegisterFormat,
    VarFormat,
)
from gdbmi_tools.spec import FULL_CORE, FULL_ONLY, make_specs


def test_core_specs_names_and_profile():
    expected = make_specs(
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
    assert tuple(v.VARIABLES_CORE_TOOL_SPECS) == expected
    assert all(s.in_core() for s in v.VARIABLES_CORE_TOOL_SPECS)


def test_extended_specs_not_core():
    expected = make_specs(
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
    assert tuple(v.VARIABLES_EXTENDED_TOOL_SPECS) == expected
    assert not any(s.in_core() for s in v.VARIABLES_EXTENDED_TOOL_SPECS)


def test_data_specs():
    assert tuple(v.DATA_CORE_TOOL_SPECS) == make_specs(
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
    assert tuple(v.DATA_EXTENDED_TOOL_SPECS) == make_specs(
        "data", FULL_ONLY, ["write_memory", "read_memory_deprecated"]
    )
    assert all(s.in_core() for s in v.DATA_CORE_TOOL_SPECS)
    assert not any(s.in_core() for s in v.DATA_EXTENDED_TOOL_SPECS)


def test_inspect():
    cmd = v.inspect(v.InspectArgs("counter"))
    assert cmd.operation == "data-evaluate-expression"
    assert cmd.parameters == ("counter",)


def test_watch_create_matches_var_create_wire():
    cmd = v.watch_create(v.WatchCreateArgs("counter"))
    assert cmd.operation == "var-create"
    assert cmd.parameters == ("-", "*", "counter")
    assert cmd.encode(1) == b"1-var-create - * counter\n"


def test_watch_list_and_delete():
    assert v.watch_list().parameters == ("*",)
    assert v.watch_list().operation == "var-update"
    cmd = v.watch_delete(v.WatchDeleteArgs("var1"))
    assert cmd.encode(2) == b"2-var-delete var1\n"


def test_var_list_children_minimal():
    cmd = v.var_list_children(v.VarListChildrenArgs("var1"))
    assert cmd.operation == "var-list-children"
    assert cmd.parameters == ("var1",)


def test_var_list_children_full():
    args = v.VarListChildrenArgs(
        "var1", print_values="all-values", from_=2, to=5
    )
    assert args.print_values is PrintValues.ALL_VALUES
    cmd = v.var_list_children(args)
    assert cmd.parameters == (PrintValues.ALL_VALUES.as_mi_arg(), "var1", "2", "5")


def test_var_list_children_range_requires_both_ends():
    cmd = v.var_list_children(v.VarListChildrenArgs("var1", from_=2))
    assert cmd.parameters == ("var1",)


@pytest.mark.parametrize(
    "func, operation",
    [
        (v.var_evaluate_expression, "var-evaluate-expression"),
        (v.var_show_format, "var-show-format"),
        (v.var_info_num_children, "var-info-num-children"),
        (v.var_info_type, "var-info-type"),
        (v.var_info_expression, "var-info-expression"),
        (v.var_info_path_expression, "var-info-path-expression"),
        (v.var_show_attributes, "var-show-attributes"),
    ],
)
def test_single_name_tools(func, operation):
    cmd = func(v.VarNameArgs("var7"))
    assert cmd.operation == operation
    assert cmd.parameters == ("var7",)
    assert cmd.options == ()


def test_var_assign():
    cmd = v.var_assign(v.VarAssignArgs("var1", "42"))
    assert (cmd.operation, cmd.parameters) == ("var-assign", ("var1", "42"))


def test_var_set_format():
    args = v.VarSetFormatArgs("var1", "hexadecimal")
    assert args.format is VarFormat.HEXADECIMAL
    cmd = v.var_set_format(args)
    assert cmd.parameters == ("var1", VarFormat.HEXADECIMAL.as_mi_arg())


def test_var_set_format_rejects_unknown():
    with pytest.raises(ValueError):
        v.VarSetFormatArgs("var1", "roman")


@pytest.mark.parametrize("frozen, flag", [(True, "1"), (False, "0")])
def test_var_set_frozen(frozen, flag):
    cmd = v.var_set_frozen(v.VarSetFrozenArgs("var1", frozen))
    assert cmd.operation == "var-set-frozen"
    assert cmd.parameters == ("var1", flag)


def test_var_set_update_range():
    cmd = v.var_set_update_range(v.VarSetUpdateRangeArgs("var1", 0, 10))
    assert cmd.parameters == ("var1", "0", "10")


def test_var_set_update_range_rejects_negative():
    with pytest.raises(ValueError):
        v.VarSetUpdateRangeArgs("var1", -1, 10)


def test_var_set_visualizer():
    cmd = v.var_set_visualizer(v.VarSetVisualizerArgs("var1", "None"))
    assert cmd.parameters == ("var1", "None")
    assert cmd.operation == "var-set-visualizer"


def test_enable_pretty_printing():
    assert v.enable_pretty_printing().encode(3) == b"3-enable-pretty-printing\n"


def test_read_memory_without_offset():
    cmd = v.read_memory(v.ReadMemoryArgs("0x1000", 16))
    assert cmd.operation == "data-read-memory-bytes"
    assert cmd.options == ()
    assert cmd.parameters == ("0x1000", "16")


def test_read_memory_with_negative_offset():
    cmd = v.read_memory(v.ReadMemoryArgs("0x1000", 16, offset=-4))
    assert cmd.options == (("o", "-4"),)


def test_read_memory_rejects_bad_count():
    with pytest.raises(ValueError):
        v.ReadMemoryArgs("0x1000", -1)
    with pytest.raises(TypeError):
        v.ReadMemoryArgs("0x1000", "16")
    with pytest.raises(ValueError):
        v.ReadMemoryArgs("0x1000", 2**64)


def test_read_memory_rejects_offset_out_of_i64():
    with pytest.raises(ValueError):
        v.ReadMemoryArgs("0x1000", 1, offset=2**63)


def test_disassemble_minimal():
    cmd = v.disassemble(v.DisassembleArgs("0x1000", "0x1010"))
    assert cmd.operation == "data-disassemble"
    assert cmd.options == (("s", "0x1000"), ("e", "0x1010"))
    assert cmd.parameters == ("--", "0")


def test_disassemble_with_opcodes_and_source():
    args = v.DisassembleArgs("0x1000", "0x1010", opcodes="bytes", source=True)
    assert args.opcodes is OpcodeMode.BYTES
    cmd = v.disassemble(args)
    assert cmd.options == (
        ("s", "0x1000"),
        ("e", "0x1010"),
        ("opcodes", OpcodeMode.BYTES.as_mi_arg()),
        ("source", None),
    )


def test_list_register_names():
    assert v.list_register_names(v.RegisterNamesArgs()).parameters == ()
    cmd = v.list_register_names(v.RegisterNamesArgs([0, 1, 7]))
    assert cmd.parameters == ("0", "1", "7")


def test_read_registers():
    args = v.RegisterValuesArgs("hex", [3])
    assert args.format is RegisterFormat.HEX
    cmd = v.read_registers(args)
    assert cmd.operation == "data-list-register-values"
    assert cmd.parameters == (RegisterFormat.HEX.as_mi_arg(), "3")


def test_register_numbers_validated():
    with pytest.raises(ValueError):
        v.RegisterNamesArgs([-2])
    with pytest.raises(TypeError):
        v.RegisterValuesArgs(RegisterFormat.RAW, ["x"])


def test_list_changed_registers():
    cmd = v.list_changed_registers()
    assert cmd.operation == "data-list-changed-registers"
    assert cmd.parameters == ()


def test_write_memory():
    cmd = v.write_memory(v.WriteMemoryArgs("0x2000", "deadbeef"))
    assert cmd.parameters == ("0x2000", "deadbeef")
    cmd = v.write_memory(v.WriteMemoryArgs("0x2000", "ff", count=8))
    assert cmd.parameters == ("0x2000", "ff", "8")
    assert cmd.operation == "data-write-memory-bytes"


def test_read_memory_deprecated_full():
    args = v.ReadMemoryDeprecatedArgs(
        "0x3000", "hex", 4, 2, 8, column_offset=1, aschar="."
    )
    assert args.word_format is MemoryWordFormat.HEX
    cmd = v.read_memory_deprecated(args)
    assert cmd.operation == "data-read-memory"
    assert cmd.options == (("o", "1"),)
    assert cmd.parameters == (
        "0x3000",
        MemoryWordFormat.HEX.as_mi_arg(),
        "4",
        "2",
        "8",
        ".",
    )


def test_read_memory_deprecated_minimal():
    cmd = v.read_memory_deprecated(
        v.ReadMemoryDeprecatedArgs("0x3000", MemoryWordFormat.CHAR, 1, 1, 1)
    )
    assert cmd.options == ()
    assert len(cmd.parameters) == 5


def test_read_memory_deprecated_rejects_bad_size():
    with pytest.raises(ValueError):
        v.ReadMemoryDeprecatedArgs("0x3000", "hex", 2**32, 1, 1)
    with pytest.raises(ValueError):
        v.ReadMemoryDeprecatedArgs("0x3000", "words", 4, 1, 1)


def test_builders_do_not_share_state():
    first = v.watch_list()
    second = v.watch_list()
    assert first == second
    assert first.parameter("extra").parameters == ("*", "extra")
    assert first.parameters == ("*",)