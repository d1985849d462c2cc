"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest

from exprsolve.errors import (
    ErrorContext,
    ErrorKind,
    ExpressionError,
    NumberFormatError,
    TrailingInputError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    UnknownFunctionError,
    UnknownSymbolError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (NumberFormatError("1.2.3", 0), ErrorKind.NUMBER_FORMAT),
            (UnexpectedCharacterError("x", 3), ErrorKind.UNEXPECTED_CHARACTER),
            (UnexpectedEndOfInputError(4), ErrorKind.UNEXPECTED_END_OF_INPUT),
            (UnknownSymbolError("foo"), ErrorKind.UNKNOWN_SYMBOL),
            (TrailingInputError(2), ErrorKind.TRAILING_INPUT),
            (UnknownFunctionError("tan"), ErrorKind.UNKNOWN_FUNCTION),
        ],
    )
    def test_kinds(self, error: ExpressionError, kind: ErrorKind) -> None:
        assert isinstance(error, ExpressionError)
        assert error.kind == kind

    def test_end_of_input_is_unexpected_character(self) -> None:
        error = UnexpectedEndOfInputError(4)
        assert isinstance(error, UnexpectedCharacterError)
        assert error.found is None
        assert "end of expression" in str(error)


class TestContext:
    def test_without_source(self) -> None:
        error = TrailingInputError(2)
        assert error.context is None
        assert str(error) == "Unexpected input after expression at 2"

    def test_format(self) -> None:
        context = ErrorContext(source="(2+3", offset=4)
        assert context.format() == "at offset 4\n  (2+3\n      ^"

    def test_multiline_source_stays_aligned(self) -> None:
        context = ErrorContext(source="1\n+\t2 3", offset=6)
        assert context.format().splitlines()[1:] == ["  1 + 2 3", "        ^"]

    def test_attached_to_error(self) -> None:
        error = UnknownSymbolError("foo", 4, "1 + foo")
        assert error.offset == 4
        assert error.context == ErrorContext(source="1 + foo", offset=4)
        assert str(error).startswith("There is no function or variable with name 'foo'")
