"""
Recursive descent evaluator for arithmetic expressions.

Grammar (precedence low to high):
    expression  → term (("+" | "-") term)*
    term        → factor (("*" | "/") factor)*
    factor      → "+" factor
                | "-" factor
                | primary ("^" factor)?
    primary     → "(" expression ")"
                | NUMBER
                | FUNCTION expression
                | VARIABLE

Parsing and evaluation happen in the same pass: every rule returns the
numeric value of what it consumed and no syntax tree is built.

Usage:
    from exprsolve import ExpressionSolver, solve

    ExpressionSolver("2+3*4").solve()  # 14.0
    solve("x+1", {"x": 5})  # 6.0
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from exprsolve.config import SolverConfig, SymbolMode
from exprsolve.cursor import Cursor, is_letter, is_number
from exprsolve.errors import (
    ErrorKind,
    ExpressionError,
    TrailingInputError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    UnknownSymbolError,
)
from exprsolve.functions import apply_function, divide, lookup_function, power

logger = logging.getLogger(__name__)


class _Evaluation:
    """One pass over one expression."""

    def __init__(self, text: str, config: SolverConfig) -> None:
        self.cursor = Cursor(text)
        self.config = config

    # -- Grammar rules --

    def solve_expression(self) -> float:
        """term (('+' | '-') term)*"""
        result = self.solve_term()
        while True:
            if self.cursor.try_consume("+"):
                result += self.solve_term()
            elif self.cursor.try_consume("-"):
                result -= self.solve_term()
            else:
                return result

    def solve_term(self) -> float:
        """factor (('*' | '/') factor)*"""
        result = self.solve_factor()
        while True:
            if self.cursor.try_consume("*"):
                result *= self.solve_factor()
            elif self.cursor.try_consume("/"):
                result = divide(result, self.solve_factor())
            else:
                return result

    def solve_factor(self) -> float:
        """'+' factor | '-' factor | primary ('^' factor)?

        A signed operand returns before the '^' check, so ``-2^2`` is
        ``-(2^2)``.
        """
        cursor = self.cursor
        if cursor.try_consume("+"):
            return +self.solve_factor()
        if cursor.try_consume("-"):
            return -self.solve_factor()

        result = 0.0

        if cursor.try_consume("("):
            result = self.solve_expression()
            if not cursor.try_consume(")"):
                if cursor.at_end():
                    raise UnexpectedEndOfInputError(cursor.pos, cursor.text)
                raise UnexpectedCharacterError(cursor.peek(), cursor.pos, cursor.text)
        elif is_number(cursor.peek()):
            result = cursor.parse_number()
        elif is_letter(cursor.peek()):
            start = cursor.pos
            name = cursor.parse_identifier()

            function = lookup_function(name)
            if function is not None:
                # The argument is a whole expression: sqrt(16)+9 is sqrt(25)
                return apply_function(function, self.solve_expression())

            value = self.config.resolve(name)
            if value is None:
                raise UnknownSymbolError(name, start, cursor.text)
            result = value
        # Anything else leaves the operand at 0.0

        if cursor.try_consume("^"):
            result = power(result, self.solve_factor())

        return result


class ExpressionSolver:
    """Evaluates one arithmetic expression.

    Args:
        expression: Expression text, e.g. ``"2 * (x + 1)"``.
        variables: Optional variable table. Without one, any identifier that
            is not a function fails with ``UnknownSymbolError``; with one,
            names missing from it evaluate to 0.0.
        config: Explicit configuration; takes the place of ``variables``.
    """

    def __init__(
        self,
        expression: str,
        variables: Mapping[str, float] | None = None,
        *,
        config: SolverConfig | None = None,
    ) -> None:
        if config is not None and variables is not None:
            raise ValueError("Pass either variables or config, not both")
        self.expression = expression
        if config is None:
            config = (
                SolverConfig.strict() if variables is None else SolverConfig.tolerant(variables)
            )
        self.config = config

    def __repr__(self) -> str:
        return f"ExpressionSolver({self.expression!r}, mode={self.config.mode})"

    @property
    def mode(self) -> SymbolMode:
        return self.config.mode

    def solve(self) -> float:
        """Evaluate the expression.

        Returns:
            The value of the expression.

        Raises:
            NumberFormatError: A numeric literal is malformed.
            UnexpectedCharacterError: A closing parenthesis is missing.
            UnexpectedEndOfInputError: The expression ended early.
            UnknownSymbolError: An identifier is unknown and no variable
                table was supplied.
            TrailingInputError: Characters remain after a valid expression.
        """
        evaluation = _Evaluation(self.expression, self.config)
        result = evaluation.solve_expression()

        cursor = evaluation.cursor
        if not cursor.at_end():
            raise TrailingInputError(cursor.pos, cursor.text)

        logger.debug("Solved %r = %s", self.expression, result)
        return result


def solve(expression: str, variables: Mapping[str, float] | None = None) -> float:
    """Evaluate an expression string.

    Args:
        expression: Expression text (e.g., "sqrt(16) * 2").
        variables: Optional variable table, see ``ExpressionSolver``.

    Returns:
        The value of the expression.
    """
    return ExpressionSolver(expression, variables).solve()


class SolveOutcome(BaseModel):
    """Result of ``try_solve``: a value or the kind of failure."""

    value: float | None = Field(default=None, description="Result when evaluation succeeded")
    error: ErrorKind | None = Field(default=None, description="Failure kind")
    message: str | None = Field(default=None, description="Failure description")
    offset: int | None = Field(default=None, description="Offset the failure points at")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None


def try_solve(expression: str, variables: Mapping[str, float] | None = None) -> SolveOutcome:
    """Evaluate an expression, returning failures instead of raising them."""
    try:
        value = solve(expression, variables)
    except ExpressionError as e:
        return SolveOutcome(error=e.kind, message=e.message, offset=e.offset)
    return SolveOutcome(value=value)
