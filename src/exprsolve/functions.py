"""
Built-in single-argument functions and IEEE-754 arithmetic helpers.

Python's ``math`` module raises on domain and pole errors where plain
floating-point arithmetic produces ``nan`` or ``inf``. The helpers here
return the floating-point result instead, so malformed arithmetic never
fails an evaluation.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from exprsolve.errors import UnknownFunctionError

_INF = math.inf
_NAN = math.nan


class FunctionKind(StrEnum):
    """Built-in functions."""

    SIN = "sin"
    COS = "cos"
    SQRT = "sqrt"
    LOG = "log"
    ABS = "abs"


FUNCTIONS: Mapping[str, FunctionKind] = MappingProxyType(
    {
        "sin": FunctionKind.SIN,
        "cos": FunctionKind.COS,
        "sqrt": FunctionKind.SQRT,
        "log": FunctionKind.LOG,
        "abs": FunctionKind.ABS,
    }
)


def lookup_function(name: str) -> FunctionKind | None:
    return FUNCTIONS.get(name)


def apply_function(kind: FunctionKind, argument: float) -> float:
    """Apply a built-in function to its evaluated argument.

    Args:
        kind: Function tag from ``FUNCTIONS``.
        argument: Evaluated argument.

    Returns:
        The function value; ``nan`` outside the function's domain.

    Raises:
        UnknownFunctionError: If ``kind`` is not a built-in function.
    """
    if kind == FunctionKind.SIN:
        return math.sin(argument) if math.isfinite(argument) else _NAN
    if kind == FunctionKind.COS:
        return math.cos(argument) if math.isfinite(argument) else _NAN
    if kind == FunctionKind.SQRT:
        return _sqrt(argument)
    if kind == FunctionKind.LOG:
        return _log(argument)
    if kind == FunctionKind.ABS:
        return abs(argument)
    raise UnknownFunctionError(kind)


def _sqrt(x: float) -> float:
    if x < 0:
        return _NAN
    return math.sqrt(x)


def _log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return _NAN
    if x == 0:
        return -_INF
    return math.log(x)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


def divide(left: float, right: float) -> float:
    """``left / right`` with ``±inf`` or ``nan`` for a zero divisor."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return _NAN
        # Sign follows both operands, including a negative zero divisor
        return math.copysign(_INF, left) * math.copysign(1.0, right)
    return left / right


def power(base: float, exponent: float) -> float:
    """``base ^ exponent`` with floating-point overflow and domain results."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -_INF
        return _INF
    except ValueError:
        if base == 0:
            # Zero to a negative power
            if _is_odd_integer(exponent):
                return math.copysign(_INF, base)
            return _INF
        # Negative base with a non-integral exponent
        return _NAN


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1
