#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htom/utils/text.py
"""Text utilities for emitting Maud string literals."""

from __future__ import annotations

_SIMPLE_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
}


def escape_string_literal(text: str) -> str:
    r"""Escape text so it can sit between double quotes in a Rust string literal.

    Tab, carriage return, newline, backslash and both quote characters use
    their conventional backslash escapes. Remaining ASCII control characters
    become ``\xNN`` and non-printable characters outside ASCII become
    ``\u{XXXX}``. Printable characters, including non-ASCII letters, are kept
    as they are.

    Parameters
    ----------
    text : str
        Raw text content

    Returns
    -------
    str
        Escaped text, without surrounding quotes

    Examples
    --------
        >>> escape_string_literal('Say "hi"')
        'Say \\"hi\\"'
        >>> escape_string_literal("a\x01b")
        'a\\x01b'

    """
    parts: list[str] = []
    for char in text:
        simple = _SIMPLE_ESCAPES.get(char)
        if simple is not None:
            parts.append(simple)
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append(f"\\x{ord(char):02x}")
        else:
            parts.append(f"\\u{{{ord(char):x}}}")
    return "".join(parts)


def indent_lines(lines: list[str], width: int) -> list[str]:
    """Prefix every line with ``width`` spaces."""
    pad = " " * width
    return [f"{pad}{line}" for line in lines]
