"""Test configuration and shared fixtures."""

import pytest

from tapl.core.checker import TypeChecker
from tapl.eval.machine import Evaluator
from tapl.eval.strategy import Strategy


@pytest.fixture
def evaluator() -> Evaluator:
    return Evaluator()


@pytest.fixture
def checker() -> TypeChecker:
    return TypeChecker()


@pytest.fixture(params=list(Strategy), ids=str)
def strategy(request) -> Strategy:
    """Every evaluation strategy; tests using it run once per strategy."""
    return request.param


@pytest.fixture(autouse=True)
def _clean_tapl_env(monkeypatch):
    """Keep TAPL_* settings from the developer's shell out of tests."""
    for name in ("TAPL_STRATEGY", "TAPL_STEP_LIMIT", "TAPL_FRESH_NAME_SUFFIX", "TAPL_LOG_FILTER"):
        monkeypatch.delenv(name, raising=False)
