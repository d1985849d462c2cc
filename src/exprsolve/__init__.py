"""
exprsolve - single-pass arithmetic expression evaluator.

Evaluates text such as ``"2 * sqrt(x) - 3^2"`` directly while parsing it,
with an optional table of variables.

Usage:
    from exprsolve import ExpressionSolver, solve

    ExpressionSolver("(2+3)*4").solve()
    # 20.0
    solve("x+1", {"x": 5})
    # 6.0
"""

from __future__ import annotations

from ._version import get_version
from .config import SolverConfig, SymbolMode
from .errors import (
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
from .functions import FUNCTIONS, FunctionKind
from .solver import ExpressionSolver, SolveOutcome, solve, try_solve

__version__ = get_version()

__all__ = [
    "__version__",
    "ExpressionSolver",
    "solve",
    "try_solve",
    "SolveOutcome",
    "SolverConfig",
    "SymbolMode",
    "FUNCTIONS",
    "FunctionKind",
    "ErrorContext",
    "ErrorKind",
    "ExpressionError",
    "NumberFormatError",
    "TrailingInputError",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "UnknownFunctionError",
    "UnknownSymbolError",
]
