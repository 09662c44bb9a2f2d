"""Builder for GDB/MI input commands and their wire encoding."""

from __future__ import annotations

from dataclasses import dataclass, replace

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _is_control(ch: str) -> bool:
    return ord(ch) < 0x20 or ord(ch) == 0x7F


def _quote(value: str) -> str:
    """Return ``value`` as an MI c-string literal."""
    pieces = []
    for ch in value:
        if ch in _ESCAPES:
            pieces.append(_ESCAPES[ch])
        elif _is_control(ch):
            pieces.append(f"\\{ord(ch):03o}")
        else:
            pieces.append(ch)
    return '"' + "".join(pieces) + '"'


def _needs_quoting(value: str) -> bool:
    return not value or any(
        ch.isspace() or ch in '"\\' or _is_control(ch) for ch in value
    )


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] == '"' and value[-1] == '"'


def _encode_arg(value: str) -> str:
    if _is_quoted(value):
        return value
    return _quote(value) if _needs_quoting(value) else value


def _check_word(kind: str, word: str) -> str:
    if not isinstance(word, str):
        raise TypeError(f"{kind} must be a string, got {type(word).__name__}")
    if not word or any(ch.isspace() for ch in word):
        raise ValueError(f"invalid {kind}: {word!r}")
    return word


@dataclass(frozen=True)
class MiCommand:
    """An MI command: operation name, options and positional parameters.

    Builder methods return a new command, leaving the original untouched.
    """

    operation: str
    options: tuple[tuple[str, str | None], ...] = ()
    parameters: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_word("operation", self.operation)

    def option(self, name: str) -> MiCommand:
        """Add a flag option with no value."""
        _check_word("option name", name)
        return replace(self, options=self.options + ((name, None),))

    def option_with(self, name: str, value: object) -> MiCommand:
        """Add an option followed by a value."""
        _check_word("option name", name)
        return replace(self, options=self.options + ((name, str(value)),))

    def parameter(self, value: object) -> MiCommand:
        """Append a positional parameter."""
        return replace(self, parameters=self.parameters + (str(value),))

    def render(self, token: int | None = None) -> str:
        """Render the command line without its trailing newline."""
        if token is None:
            prefix = ""
        elif isinstance(token, bool) or not isinstance(token, int) or token < 0:
            raise ValueError(f"token must be a non-negative integer, got {token!r}")
        else:
            prefix = str(token)
        parts = [f"{prefix}-{self.operation}"]
        for name, value in self.options:
            parts.append(("-" if len(name) == 1 else "--") + name)
            if value is not None:
                parts.append(_encode_arg(value))
        parts.extend(_encode_arg(p) for p in self.parameters)
        return " ".join(parts)

    def encode(self, token: int | None = None) -> bytes:
        """Return the newline-terminated wire bytes for this command."""
        return (self.render(token) + "\n").encode("utf-8")

    def __str__(self) -> str:
        return self.render()