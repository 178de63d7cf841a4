"""Quote-aware value reader for one line of the translation file.

Rules
-----
- A comma outside double quotes ends the value (the comma is consumed).
- A double quote toggles quoted mode and is not copied to the value.
- Inside quotes, ``""`` is one literal double quote and a comma is literal.
- Everything else, spaces included, is copied verbatim.

Lines are split before tokenizing, so a quoted value never spans lines.
"""
from __future__ import annotations

_QUOTE = '"'
_COMMA = ","


class LineCursor:
    """Read position within a single line."""

    __slots__ = ("line", "pos")

    def __init__(self, line: str, pos: int = 0) -> None:
        self.line = line
        self.pos = pos

    def read(self) -> str:
        """Return the next char and advance, or '' at end of line."""
        if self.pos >= len(self.line):
            return ""
        ch = self.line[self.pos]
        self.pos += 1
        return ch

    def peek(self) -> str:
        if self.pos >= len(self.line):
            return ""
        return self.line[self.pos]


def read_value(cursor: LineCursor) -> str:
    """Read one value from *cursor*; returns '' once the line is exhausted."""
    value, _ = _read_value(cursor)
    return value


def split_line(line: str) -> list[str]:
    """Return every value on *line* (a trailing comma yields a final '')."""
    cursor = LineCursor(line)
    values: list[str] = []
    more = True
    while more:
        value, more = _read_value(cursor)
        values.append(value)
    return values


def _read_value(cursor: LineCursor) -> tuple[str, bool]:
    """Return (value, ended_on_comma)."""
    chars: list[str] = []
    in_quotes = False
    ch = cursor.read()
    while ch:
        if ch == _QUOTE:
            if in_quotes:
                if cursor.peek() == _QUOTE:
                    cursor.read()
                    chars.append(_QUOTE)
                else:
                    in_quotes = False
            else:
                in_quotes = True
        elif ch == _COMMA and not in_quotes:
            return "".join(chars), True
        else:
            chars.append(ch)
        ch = cursor.read()
    return "".join(chars), False
