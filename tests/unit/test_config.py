"""Tests for solver configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from exprsolve.config import SolverConfig, SymbolMode


class TestSolverConfig:
    def test_default_is_strict(self) -> None:
        config = SolverConfig()
        assert config.variables is None
        assert config.mode == SymbolMode.STRICT

    def test_named_constructors(self) -> None:
        assert SolverConfig.strict().mode == SymbolMode.STRICT
        assert SolverConfig.tolerant().mode == SymbolMode.TOLERANT
        assert SolverConfig.tolerant({"x": 1.0}).variables == {"x": 1.0}

    def test_values_coerced_to_float(self) -> None:
        config = SolverConfig(variables={"x": 5})
        assert config.variables is not None
        assert isinstance(config.variables["x"], float)

    def test_non_numeric_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SolverConfig(variables={"x": "five"})  # type: ignore[dict-item]

    def test_frozen(self) -> None:
        config = SolverConfig.strict()
        with pytest.raises(ValidationError):
            config.variables = {}  # type: ignore[misc]

    def test_unreachable_name_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="exprsolve.config"):
            SolverConfig.tolerant({"Rate": 1.0, "x1": 2.0, "ok": 3.0})
        assert "'Rate'" in caplog.text
        assert "'x1'" in caplog.text
        assert "'ok'" not in caplog.text


class TestResolve:
    def test_strict_resolves_nothing(self) -> None:
        assert SolverConfig.strict().resolve("x") is None

    def test_tolerant(self) -> None:
        config = SolverConfig.tolerant({"x": 2.5})
        assert config.resolve("x") == 2.5
        assert config.resolve("y") == 0.0
