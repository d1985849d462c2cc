"""
Error types for expression evaluation.

Every failure aborts the whole ``solve()`` call and propagates to the caller;
there is no partial result and no retry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of evaluation failure kinds."""

    NUMBER_FORMAT = "number_format"
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNKNOWN_SYMBOL = "unknown_symbol"
    TRAILING_INPUT = "trailing_input"
    UNKNOWN_FUNCTION = "unknown_function"


@dataclass(frozen=True)
class ErrorContext:
    """
    Location of an error inside the expression text.

    Attributes:
        source: The full expression being evaluated
        offset: Zero-based character offset of the error
    """

    source: str
    offset: int

    def format(self) -> str:
        """
        Format the context as a snippet with a marker under the offset.

        Returns:
            Formatted string like::

                at offset 4
                  (2+3
                      ^
        """
        # Keep the marker aligned when the expression spans lines
        line = self.source.replace("\n", " ").replace("\t", " ")
        marker = " " * (self.offset + 2) + "^"
        return f"at offset {self.offset}\n  {line}\n{marker}"


class ExpressionError(Exception):
    """Base exception for all expression evaluation errors."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source: str | None = None,
    ):
        self.message = message
        self.offset = offset
        self.context = (
            ErrorContext(source=source, offset=offset)
            if source is not None and offset is not None
            else None
        )
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class NumberFormatError(ExpressionError):
    """
    Raised when a run of digits and dots is not a valid float literal.

    Examples:
    - ``.``
    - ``1.2.3``
    """

    kind = ErrorKind.NUMBER_FORMAT

    def __init__(self, literal: str, offset: int, source: str | None = None):
        self.literal = literal
        super().__init__(f"Wrong number format {literal!r} at {offset}", offset, source)


class UnexpectedCharacterError(ExpressionError):
    """Raised when a required closing parenthesis is missing."""

    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, found: str | None, offset: int, source: str | None = None):
        self.found = found
        super().__init__(self._describe(found, offset), offset, source)

    @staticmethod
    def _describe(found: str | None, offset: int) -> str:
        return f"Expected ')', instead found {found!r} at {offset}"


class UnexpectedEndOfInputError(UnexpectedCharacterError):
    """
    Raised when the expression ends where an operand or ``)`` is required.

    Examples:
    - ``2+``
    - ``(2+3``
    - an empty expression
    """

    kind = ErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(self, offset: int, source: str | None = None):
        super().__init__(None, offset, source)

    @staticmethod
    def _describe(found: str | None, offset: int) -> str:
        return f"Unexpected end of expression at {offset}"


class UnknownSymbolError(ExpressionError):
    """Raised when an identifier is neither a function nor a variable and no
    variable table was supplied."""

    kind = ErrorKind.UNKNOWN_SYMBOL

    def __init__(self, name: str, offset: int | None = None, source: str | None = None):
        self.name = name
        super().__init__(f"There is no function or variable with name {name!r}", offset, source)


class TrailingInputError(ExpressionError):
    """Raised when a valid prefix was evaluated but characters remain."""

    kind = ErrorKind.TRAILING_INPUT

    def __init__(self, offset: int, source: str | None = None):
        super().__init__(f"Unexpected input after expression at {offset}", offset, source)


class UnknownFunctionError(ExpressionError):
    """Raised when a function tag outside the built-in table is applied."""

    kind = ErrorKind.UNKNOWN_FUNCTION

    def __init__(self, function: object):
        self.function = function
        super().__init__(f"Unknown function type: {function!r}")
