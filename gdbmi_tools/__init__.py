"""Typed builders for GDB/MI commands, with per-module tool specs."""

__version__ = "0.1.0"

__all__ = [
    "breakpoints",
    "command",
    "environment",
    "execution",
    "inspection",
    "mi_types",
    "session",
    "spec",
    "symbols",
    "variables",
]