"""Evaluation strategies and the strategy-driving base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from loguru import logger

from tapl.core.ast import Term
from tapl.core.errors import NoRuleApplies, StepLimitExceeded

C = TypeVar("C")


class Strategy(str, Enum):
    """How evaluate() reaches a normal form."""

    SINGLE_STEP = "single-step"
    FULL_REDUCTION = "full-reduction"

    def __str__(self) -> str:
        return self.value


class Semantics(ABC, Generic[C]):
    """Operational semantics over terms, parameterised by the context type.

    Subclasses provide the one-step relation and the direct full reducer;
    the single-step driver is derived here once for every calculus.
    """

    step_limit: int | None = None

    @abstractmethod
    def eval1(self, term: Term, ctx: C) -> Term:
        """Perform one reduction step.

        Raises:
            NoRuleApplies: If term is a value or stuck
        """

    @abstractmethod
    def eval_n(self, term: Term, ctx: C) -> Term:
        """Reduce term to its final form by direct recursion."""

    def steps(self, term: Term, ctx: C):
        """Yield term and every term it single-steps to, in order.

        Raises:
            StepLimitExceeded: If a step past step_limit would be yielded
        """
        yield term
        count = 0
        while True:
            try:
                term = self.eval1(term, ctx)
            except NoRuleApplies:
                return
            count += 1
            if self.step_limit is not None and count > self.step_limit:
                raise StepLimitExceeded(self.step_limit, term)
            yield term

    def evaluate(self, term: Term, ctx: C, strategy: Strategy = Strategy.FULL_REDUCTION) -> Term:
        """Evaluate term under the given strategy.

        Both strategies produce the same final term.

        Raises:
            StepLimitExceeded: If single-stepping passes step_limit
        """
        if strategy is Strategy.FULL_REDUCTION:
            logger.debug("eval.full_reduction term={}", term)
            return self.eval_n(term, ctx)

        count = 0
        result = term
        for count, result in enumerate(self.steps(term, ctx)):
            logger.debug("eval.step n={} term={}", count, result)
        logger.debug("eval.normal_form steps={} term={}", count, result)
        return result
