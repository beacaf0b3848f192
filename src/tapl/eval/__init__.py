"""Operational semantics: single-step and full-reduction evaluators."""

from tapl.eval.machine import Evaluator, evaluate, is_numeric_value, is_value
from tapl.eval.strategy import Semantics, Strategy

__all__ = [
    "Evaluator",
    "Semantics",
    "Strategy",
    "evaluate",
    "is_numeric_value",
    "is_value",
]
