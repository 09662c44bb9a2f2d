# gdbmi_tools

This package provides typed builders for GDB/MI commands. Each debugger action is a plain function, for example setting a breakpoint, stepping, listing locals or reading memory. The function takes a small dataclass of arguments and returns an `MiCommand`. You write that command to a GDB process that is running an MI interpreter.

The package does no I/O.

## Installing

```
pip install .
```

To get the test dependencies as well:

```
pip install ".[test]"
```

## Building commands

```python
from gdbmi_tools.breakpoints import SetBreakpointArgs, set_breakpoint
from gdbmi_tools.execution import interrupt, run
from gdbmi_tools.inspection import BacktraceArgs, backtrace

print(set_breakpoint(SetBreakpointArgs(location="hello.c:42", temporary=True)))
# -break-insert -t hello.c:42

print(run())                               # -exec-run
print(interrupt())                         # -exec-interrupt --all
print(backtrace(BacktraceArgs(limit=5)))   # -stack-list-frames 0 4
```

You can also assemble an `MiCommand` directly. Its builder methods are `option`, `option_with` and `parameter`. Each one returns a new command and leaves the original unchanged.

```python
from gdbmi_tools.command import MiCommand

cmd = (
    MiCommand("data-read-memory-bytes")
    .option_with("o", "8")
    .parameter("&buf")
    .parameter("16")
)
cmd.render()          # '-data-read-memory-bytes -o 8 &buf 16'
cmd.encode(token=7)   # b'7-data-read-memory-bytes -o 8 &buf 16\n'
```

Option names with one letter are written with a single dash. Longer names are written with two dashes.

An argument is written as an MI C-string when it is empty, or when it contains whitespace, quotes, backslashes or control characters. An argument that is already enclosed in double quotes is passed through unchanged.

An operation or option name that is empty or contains whitespace raises `ValueError`.

The argument dataclasses check their integer fields when they are built. A value that is not an integer raises `TypeError`. A value out of range raises `ValueError`.

## Argument enums

`gdbmi_tools.mi_types` defines the value choices that the commands accept:

- `WatchType`
- `PrintValues`
- `RegisterFormat`
- `VarFormat`
- `OpcodeMode`
- `MemoryWordFormat`
- `TraceFindMode` and `TraceFindKind`

For every enum except `WatchType`, `as_mi_arg()` returns the exact token that goes on the wire. For example, `PrintValues.ALL_VALUES.as_mi_arg()` is `"--all-values"` and `RegisterFormat.HEX.as_mi_arg()` is `"x"`.

`TraceFindMode` checks that it was given exactly the fields its kind needs:

```python
from gdbmi_tools.mi_types import TraceFindKind, TraceFindMode

TraceFindMode(TraceFindKind.PC_INSIDE_RANGE, start="0x1000", end="0x2000")
```

## Tool specs

`gdbmi_tools.spec` describes tools:

- A `ToolSpec` holds a tool's name, its category and its `Profile` flags.
- `FULL_CORE` marks tools in the core profile. `FULL_ONLY` marks tools in the full profile only.
- `ToolSpec.in_core()` reports whether a tool is in the core profile.
- `make_specs(category, profiles, names)` builds a tuple of specs.

Each tool module publishes its specs as module constants, for example `BREAKPOINTS_CORE_TOOL_SPECS`, `EXECUTION_REVERSE_TOOL_SPECS` and `DATA_CORE_TOOL_SPECS`.

```python
from gdbmi_tools.breakpoints import BREAKPOINTS_CORE_TOOL_SPECS

spec = BREAKPOINTS_CORE_TOOL_SPECS[0]
print(spec.name, spec.category, spec.in_core())   # set_breakpoint breakpoints True
```

## Modules

| Module | Contents |
| --- | --- |
| `command` | `MiCommand` and its wire encoding |
| `spec` | `Profile`, `ToolSpec`, `make_specs` |
| `mi_types` | argument enums and `TraceFindMode` |
| `breakpoints` | breakpoints, watchpoints, breakpoint commands, dprintf |
| `execution` | run, continue, step, next, finish, until, jump, reverse execution |
| `inspection` | backtraces, threads, frame selection, locals and arguments |
| `session` | version query, loading an executable, attach, detach |
| `symbols` | `symbol_list_lines` |
| `variables` | variable objects, expressions, memory, registers, disassembly |
| `environment` | arguments, working directory, search paths, files, targets, file transfer, feature queries, thread groups and other commands |

## What this package does not do

- It does not start GDB, talk to GDB, or parse GDB's replies.
- It does not track target, thread or breakpoint state.
- It has no builders for catchpoints or tracepoints.
- It has no symbol search commands other than `symbol_list_lines`.
- It has no single catalogue that gathers every tool spec. The specs live in the per-module constants.
- It does not check raw MI command lines.

## Running the tests

```
pytest
```