"""
Solver configuration.

How identifiers that are not functions get resolved depends on whether the
caller supplied a variable table:

    - strict (no table): an unknown identifier fails the evaluation
    - tolerant (table given): an unknown identifier evaluates to 0.0

Usage:
    from exprsolve.config import SolverConfig

    config = SolverConfig.tolerant({"x": 5})
    config.mode  # SymbolMode.TOLERANT
    config.resolve("x")  # 5.0
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"[a-z]+")


class SymbolMode(StrEnum):
    """How unmatched identifiers are treated."""

    STRICT = "strict"
    TOLERANT = "tolerant"


class SolverConfig(BaseModel):
    """Variable table and symbol resolution mode for one solver."""

    variables: dict[str, float] | None = Field(
        default=None,
        description="Variable name -> value; None disables variables entirely",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("variables")
    @classmethod
    def _warn_unreachable_names(cls, value: dict[str, float] | None) -> dict[str, float] | None:
        if value:
            for name in value:
                if not _NAME_RE.fullmatch(name):
                    logger.warning(
                        "Variable %r can never be referenced: names are lowercase a-z only",
                        name,
                    )
        return value

    @classmethod
    def strict(cls) -> SolverConfig:
        return cls(variables=None)

    @classmethod
    def tolerant(cls, variables: Mapping[str, float] | None = None) -> SolverConfig:
        return cls(variables=dict(variables or {}))

    @property
    def mode(self) -> SymbolMode:
        return SymbolMode.STRICT if self.variables is None else SymbolMode.TOLERANT

    def resolve(self, name: str) -> float | None:
        """Look up a variable.

        Returns:
            The variable value, 0.0 for an unknown name in tolerant mode,
            or None in strict mode.
        """
        if self.variables is None:
            return None
        value = self.variables.get(name)
        if value is None:
            logger.debug("Variable %r not in table, using 0.0", name)
            return 0.0
        return value
