[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdbmi_tools"
version = "0.1.0"
description = "Typed builders for GDB/MI commands, grouped by debugger task"
requires-python = ">=3.10"
dependencies = []
keywords = ["gdb", "gdb-mi", "debugger", "machine-interface", "commands"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gdbmi_tools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
