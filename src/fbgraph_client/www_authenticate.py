"""Parse the ``WWW-Authenticate`` header Facebook sends on some auth failures.

The header looks like::

    OAuth "Facebook Platform" "invalid_token" "The access token is invalid"

The first quoted string is the error type and the second is the message.
Inside a quoted string a backslash makes the next character literal.
"""

from __future__ import annotations

from .exceptions import FacebookException, HeaderParseError

HEADER_PREFIX = 'OAuth "Facebook Platform" '


def parse_www_authenticate(text: str, *, status_code: int | None = None) -> FacebookException:
    """Return the `FacebookException` described by ``text``.

    Raises `HeaderParseError` unless both quoted strings are read completely.
    Anything after the second quoted string is ignored.
    """

    if not text.startswith(HEADER_PREFIX):
        raise HeaderParseError(f"Missing {HEADER_PREFIX.strip()!r} prefix")
    error_type, pos = _read_quoted(text, len(HEADER_PREFIX))
    if text[pos : pos + 1] != " ":
        raise HeaderParseError(f"Expected a space at offset {pos}")
    message, _ = _read_quoted(text, pos + 1)
    return FacebookException(error_type, message, status_code=status_code)


def format_www_authenticate(error_type: str, message: str) -> str:
    """Render a header value that `parse_www_authenticate` reads back exactly."""

    return f"{HEADER_PREFIX}{_quote(error_type)} {_quote(message)}"


def _read_quoted(text: str, pos: int) -> tuple[str, int]:
    """Read a quoted string starting at ``pos``; return it and the offset past it."""

    if text[pos : pos + 1] != '"':
        raise HeaderParseError(f"Expected '\"' at offset {pos}")
    pos += 1
    chars: list[str] = []
    while pos < len(text):
        char = text[pos]
        if char == '"':
            return "".join(chars), pos + 1
        if char == "\\":
            if pos + 1 >= len(text):
                break
            char = text[pos + 1]
            pos += 1
        chars.append(char)
        pos += 1
    raise HeaderParseError("Unterminated quoted string")


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


__all__ = ["parse_www_authenticate", "format_www_authenticate", "HEADER_PREFIX"]
