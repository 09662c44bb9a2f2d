"""Context, file, target, file-transfer, support and miscellaneous tools."""

from __future__ import annotations

from dataclasses import dataclass, field

from gdbmi_tools.command import MiCommand
from gdbmi_tools.session import FilePathArgs
from gdbmi_tools.spec import FULL_CORE, FULL_ONLY, make_specs

CONTEXT_CORE_TOOL_SPECS = make_specs(
    "context", FULL_CORE, ["set_args", "set_cwd", "show_cwd"]
)

CONTEXT_EXTENDED_TOOL_SPECS = make_specs(
    "context",
    FULL_ONLY,
    [
        "set_inferior_tty",
        "show_inferior_tty",
        "environment_directory",
        "environment_path",
    ],
)

FILE_TOOL_SPECS = make_specs(
    "file",
    FULL_ONLY,
    [
        "exec_file",
        "symbol_file",
        "list_source_files",
        "list_shared_libraries",
        "list_exec_source_file",
    ],
)

TARGET_TOOL_SPECS = make_specs(
    "target",
    FULL_ONLY,
    ["target_select", "target_download", "target_disconnect", "target_flash_erase"],
)

FILE_TRANSFER_TOOL_SPECS = make_specs(
    "file-transfer",
    FULL_ONLY,
    ["target_file_put", "target_file_get", "target_file_delete"],
)

SUPPORT_CORE_TOOL_SPECS = make_specs(
    "support", FULL_CORE, ["list_features", "list_target_features"]
)

SUPPORT_EXTENDED_TOOL_SPECS = make_specs(
    "support", FULL_ONLY, ["info_mi_command", "gdb_set", "gdb_show"]
)

MISC_TOOL_SPECS = make_specs(
    "misc",
    FULL_ONLY,
    [
        "list_thread_groups",
        "info_os",
        "add_inferior",
        "remove_inferior",
        "thread_list_ids",
        "ada_task_info",
        "info_ada_exceptions",
        "enable_timings",
        "complete",
    ],
)


# --- context arguments ---------------------------------------------------


@dataclass
class SetArgsArgs:
    """Arguments for the inferior on the next ``-exec-run``."""

    args: str


@dataclass
class SetCwdArgs:
    """Working directory path."""

    directory: str


@dataclass
class SetInferiorTtyArgs:
    """TTY device path for the inferior."""

    tty: str


@dataclass
class EnvironmentPathArgs:
    """Directories to prepend to the executable search path."""

    directories: list[str]
    reset: bool = False


@dataclass
class EnvironmentDirectoryArgs:
    """Directories to add to the source search path."""

    directories: list[str]
    reset: bool = False


# --- file arguments ------------------------------------------------------


@dataclass
class ListSourceFilesArgs:
    group_by_objfile: bool = False
    regexp: str | None = None


@dataclass
class ListSharedLibrariesArgs:
    regexp: str | None = None


# --- target and file-transfer arguments ----------------------------------


@dataclass
class TargetSelectArgs:
    """Transport type (``remote``, ``extended-remote``, ...) and its parameters."""

    transport: str
    parameters: str


@dataclass
class FilePutArgs:
    host_file: str
    target_file: str


@dataclass
class FileGetArgs:
    target_file: str
    host_file: str


@dataclass
class FileDeleteArgs:
    target_file: str


# --- support arguments ---------------------------------------------------


@dataclass
class InfoMiCommandArgs:
    """MI command name, with or without the leading ``-``."""

    command: str


@dataclass
class GdbSetArgs:
    """GDB variable assignment, e.g. ``pagination off``."""

    variable: str


@dataclass
class GdbShowArgs:
    """GDB variable name to query."""

    variable: str


# --- misc arguments ------------------------------------------------------


@dataclass
class ListThreadGroupsArgs:
    """Thread groups to list; empty means all."""

    available: bool = False
    recurse: bool = False
    groups: list[str] = field(default_factory=list)


@dataclass
class InfoOsArgs:
    """OS info type; ``None`` lists the available types."""

    info_type: str | None = None


@dataclass
class RemoveInferiorArgs:
    """Inferior id to remove; it must have exited."""

    inferior_id: str


@dataclass
class CompleteArgs:
    """Partial CLI command to complete."""

    command: str


@dataclass
class EnableTimingsArgs:
    enable: bool


@dataclass
class InfoAdaExceptionsArgs:
    regexp: str | None = None


# --- context tools -------------------------------------------------------


def set_args(args: SetArgsArgs) -> MiCommand:
    """Set program arguments for the next run."""
    return MiCommand("exec-arguments").parameter(args.args)


def set_cwd(args: SetCwdArgs) -> MiCommand:
    """Change GDB's working directory."""
    return MiCommand("environment-cd").parameter(args.directory)


def show_cwd() -> MiCommand:
    """Show GDB's current working directory."""
    return MiCommand("environment-pwd")


def set_inferior_tty(args: SetInferiorTtyArgs) -> MiCommand:
    """Set the inferior's terminal device."""
    return MiCommand("inferior-tty-set").parameter(args.tty)


def show_inferior_tty() -> MiCommand:
    """Show the inferior's terminal device."""
    return MiCommand("inferior-tty-show")


def _path_command(
    operation: str, args: EnvironmentDirectoryArgs | EnvironmentPathArgs
) -> MiCommand:
    cmd = MiCommand(operation)
    if args.reset:
        cmd = cmd.option("r")
    for directory in args.directories:
        cmd = cmd.parameter(directory)
    return cmd


def environment_directory(args: EnvironmentDirectoryArgs) -> MiCommand:
    """Add directories to the source file search path."""
    return _path_command("environment-directory", args)


def environment_path(args: EnvironmentPathArgs) -> MiCommand:
    """Set the executable search path."""
    return _path_command("environment-path", args)


# --- file tools ----------------------------------------------------------


def exec_file(args: FilePathArgs) -> MiCommand:
    """Set the executable without loading symbols."""
    return MiCommand("file-exec-file").parameter(args.path)


def symbol_file(args: FilePathArgs) -> MiCommand:
    """Load a symbol file separately from the executable."""
    return MiCommand("file-symbol-file").parameter(args.path)


def list_source_files(args: ListSourceFilesArgs) -> MiCommand:
    """List source files known to GDB."""
    cmd = MiCommand("file-list-exec-source-files")
    if args.group_by_objfile:
        cmd = cmd.option("group-by-objfile")
    if args.regexp is not None:
        cmd = cmd.parameter(args.regexp)
    return cmd


def list_shared_libraries(args: ListSharedLibrariesArgs) -> MiCommand:
    """List shared libraries loaded by the target."""
    cmd = MiCommand("file-list-shared-libraries")
    if args.regexp is not None:
        cmd = cmd.parameter(args.regexp)
    return cmd


def list_exec_source_file() -> MiCommand:
    """Info about the currently executing source file."""
    return MiCommand("file-list-exec-source-file")


# --- target tools --------------------------------------------------------


def target_select(args: TargetSelectArgs) -> MiCommand:
    """Connect to a remote target such as gdbserver."""
    return MiCommand("target-select").parameter(args.transport).parameter(args.parameters)


def target_download() -> MiCommand:
    """Download the executable to the remote target."""
    return MiCommand("target-download")


def target_disconnect() -> MiCommand:
    """Disconnect from the remote target."""
    return MiCommand("target-disconnect")


def target_flash_erase() -> MiCommand:
    """Erase all known flash memory regions on the target."""
    return MiCommand("target-flash-erase")


# --- file-transfer tools -------------------------------------------------


def target_file_put(args: FilePutArgs) -> MiCommand:
    """Copy a file from the host to the remote target."""
    return MiCommand("target-file-put").parameter(args.host_file).parameter(args.target_file)


def target_file_get(args: FileGetArgs) -> MiCommand:
    """Copy a file from the remote target to the host."""
    return MiCommand("target-file-get").parameter(args.target_file).parameter(args.host_file)


def target_file_delete(args: FileDeleteArgs) -> MiCommand:
    """Delete a file on the remote target."""
    return MiCommand("target-file-delete").parameter(args.target_file)


# --- support tools -------------------------------------------------------


def list_features() -> MiCommand:
    """List MI interpreter features."""
    return MiCommand("list-features")


def list_target_features() -> MiCommand:
    """List target-specific features."""
    return MiCommand("list-target-features")


def info_mi_command(args: InfoMiCommandArgs) -> MiCommand:
    """Query whether a specific MI command exists."""
    return MiCommand("info-gdb-mi-command").parameter(args.command)


def gdb_set(args: GdbSetArgs) -> MiCommand:
    """Set a GDB variable."""
    return MiCommand("gdb-set").parameter(args.variable)


def gdb_show(args: GdbShowArgs) -> MiCommand:
    """Show a GDB variable's current value."""
    return MiCommand("gdb-show").parameter(args.variable)


# --- misc tools ----------------------------------------------------------


def list_thread_groups(args: ListThreadGroupsArgs) -> MiCommand:
    """List thread groups (inferiors) on the target."""
    cmd = MiCommand("list-thread-groups")
    if args.available:
        cmd = cmd.option("available")
    if args.recurse:
        cmd = cmd.option_with("recurse", "1")
    for group in args.groups:
        cmd = cmd.parameter(group)
    return cmd


def info_os(args: InfoOsArgs) -> MiCommand:
    """Query OS-level information."""
    cmd = MiCommand("info-os")
    if args.info_type is not None:
        cmd = cmd.parameter(args.info_type)
    return cmd


def add_inferior() -> MiCommand:
    """Add a new inferior."""
    return MiCommand("add-inferior")


def remove_inferior(args: RemoveInferiorArgs) -> MiCommand:
    """Remove an exited inferior by id."""
    return MiCommand("remove-inferior").parameter(args.inferior_id)


def thread_list_ids() -> MiCommand:
    """List thread ids in the target."""
    return MiCommand("thread-list-ids")


def ada_task_info() -> MiCommand:
    """Query Ada tasks."""
    return MiCommand("ada-task-info")


def info_ada_exceptions(args: InfoAdaExceptionsArgs) -> MiCommand:
    """List defined Ada exceptions, optionally filtered."""
    cmd = MiCommand("info-ada-exceptions")
    if args.regexp is not None:
        cmd = cmd.parameter(args.regexp)
    return cmd


def enable_timings(args: EnableTimingsArgs) -> MiCommand:
    """Enable or disable timing statistics for MI commands."""
    return MiCommand("enable-timings").parameter("yes" if args.enable else "no")


def complete(args: CompleteArgs) -> MiCommand:
    """Possible completions for a partial CLI command."""
    return MiCommand("complete").parameter(args.command)