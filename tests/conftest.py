"""Shared pytest fixtures for exprsolve tests."""

import pytest

from exprsolve import SolverConfig


@pytest.fixture
def variables() -> dict[str, float]:
    """Return a small variable table."""
    return {"x": 5.0, "rate": 0.5}


@pytest.fixture
def tolerant_config(variables: dict[str, float]) -> SolverConfig:
    """Return a configuration with the variable table attached."""
    return SolverConfig.tolerant(variables)
