"""Session tools: version query, loading executables, attach and detach."""

from __future__ import annotations

from dataclasses import dataclass

from gdbmi_tools.command import MiCommand
from gdbmi_tools.spec import FULL_CORE, make_specs

SESSION_TOOL_SPECS = make_specs(
    "session", FULL_CORE, ["gdb_version", "load_file", "attach", "detach"]
)


@dataclass
class FilePathArgs:
    path: str


@dataclass
class AttachArgs:
    """OS process id to attach to."""

    pid: str


def gdb_version() -> MiCommand:
    """Query GDB's version banner."""
    return MiCommand("gdb-version")


def load_file(args: FilePathArgs) -> MiCommand:
    """Load an executable and its symbol table."""
    return MiCommand("file-exec-and-symbols").parameter(args.path)


def attach(args: AttachArgs) -> MiCommand:
    """Attach to a running process by PID."""
    return MiCommand("target-attach").parameter(args.pid)


def detach() -> MiCommand:
    """Detach from the attached process, leaving it running."""
    return MiCommand("target-detach")