"""
Character cursor over an expression string.

The cursor is the only mutable state of an evaluation. It moves forward
only and never passes the end of the text.
"""

from __future__ import annotations

from exprsolve.errors import NumberFormatError, UnexpectedEndOfInputError

_WHITESPACE = frozenset(" \n\t\0")


def is_space(c: str) -> bool:
    """Space, newline, tab or NUL."""
    return c in _WHITESPACE


def is_letter(c: str) -> bool:
    """ASCII lowercase letter. Identifiers have no digits, capitals or ``_``."""
    return "a" <= c <= "z"


def is_number(c: str) -> bool:
    """ASCII digit or decimal point."""
    return "0" <= c <= "9" or c == "."


class Cursor:
    """Read position into an expression string."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def __repr__(self) -> str:
        return f"Cursor({self.text!r}, pos={self.pos})"

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        if self.at_end():
            raise UnexpectedEndOfInputError(self.pos, self.text)
        return self.text[self.pos]

    def try_consume(self, expected: str) -> bool:
        """Skip whitespace, then consume ``expected`` if it is next.

        The whitespace skip is kept even when ``expected`` does not match.
        """
        if self.at_end():
            return False

        while not self.at_end() and is_space(self.text[self.pos]):
            self.pos += 1

        if not self.at_end() and self.text[self.pos] == expected:
            self.pos += 1
            return True

        return False

    def parse_number(self) -> float:
        """Consume a run of digits and dots and parse it as a float.

        Dot count is not checked while scanning; ``1.2.3`` is rejected by
        the float conversion.
        """
        start = self.pos
        while not self.at_end() and is_number(self.text[self.pos]):
            self.pos += 1

        literal = self.text[start : self.pos]
        try:
            return float(literal)
        except ValueError as e:
            raise NumberFormatError(literal, start, self.text) from e

    def parse_identifier(self) -> str:
        """Consume a run of lowercase letters."""
        start = self.pos
        while not self.at_end() and is_letter(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]
