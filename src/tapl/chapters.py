"""Example programs for each calculus, with their expected outcomes.

Each chapter groups examples for one calculus: arithmetic expressions,
the untyped lambda calculus and the simply-typed lambda calculus. Running
a chapter checks every example under every evaluation strategy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from loguru import logger

from tapl.core.ast import (
    Abs,
    App,
    FalseLit,
    If,
    IsZero,
    Pred,
    Succ,
    Term,
    TrueLit,
    Var,
    Zero,
)
from tapl.core.checker import TypeChecker
from tapl.core.context import Context, NameBind
from tapl.core.errors import (
    ConditionalArmsMismatch,
    GuardNotBool,
    ParameterMismatch,
    TypeError,
    UnexpectedType,
    VariableNotFound,
)
from tapl.core.printer import show
from tapl.core.types import Type, TypeArrow, TypeBool, TypeNat
from tapl.eval.machine import Evaluator
from tapl.eval.strategy import Strategy


@dataclass(frozen=True)
class Example:
    """A term with what it should evaluate to, type to, or fail with.

    Unset expectations are not checked.
    """

    name: str
    term: Term
    ctx: Context = field(default_factory=Context.empty)
    result: Term | None = None
    ty: Type | None = None
    error: type[TypeError] | None = None


@dataclass(frozen=True)
class Chapter:
    name: str
    title: str
    examples: tuple[Example, ...]

    def find(self, name: str) -> Example:
        for example in self.examples:
            if example.name == name:
                return example
        raise KeyError(f"No example {name!r} in chapter {self.name!r}")


@dataclass(frozen=True)
class ExampleResult:
    """Outcome of one check of one example."""

    chapter: str
    example: str
    check: str
    passed: bool
    detail: str = ""


def _id(name: str) -> Abs:
    return Abs(name, TypeBool(), Var(0, 1))


ARITH = Chapter(
    name="arith",
    title="Untyped arithmetic expressions",
    examples=(
        Example("true", TrueLit(), result=TrueLit(), ty=TypeBool()),
        Example("false", FalseLit(), result=FalseLit(), ty=TypeBool()),
        Example("zero", Zero(), result=Zero(), ty=TypeNat()),
        Example("if-true", If(TrueLit(), Zero(), Succ(Zero())), result=Zero(), ty=TypeNat()),
        Example(
            "if-iszero-pred",
            If(IsZero(Pred(Succ(Zero()))), Succ(Succ(Zero())), Succ(Zero())),
            result=Succ(Succ(Zero())),
        ),
        Example("if-false", If(FalseLit(), Succ(Zero()), Zero()), result=Zero()),
        Example(
            "if-iszero-succ",
            If(IsZero(Succ(Succ(Zero()))), Pred(Zero()), Succ(Pred(Zero()))),
            result=Succ(Zero()),
        ),
        Example("succ-value", Succ(Succ(Succ(Zero()))), result=Succ(Succ(Succ(Zero())))),
        Example("pred-zero", Pred(Pred(Pred(Zero()))), result=Zero()),
        Example("pred-succ", Pred(Succ(Succ(Pred(Succ(Zero()))))), result=Succ(Zero())),
        Example("iszero-zero", IsZero(Pred(Succ(Zero()))), result=TrueLit(), ty=TypeBool()),
        Example("iszero-pred", IsZero(Pred(Succ(Pred(Pred(Zero()))))), result=TrueLit()),
        Example("iszero-succ", IsZero(Succ(Pred(Succ(Pred(Pred(Zero())))))), result=FalseLit()),
        Example("stuck-succ", Succ(TrueLit()), result=Succ(TrueLit())),
        Example("stuck-pred", Pred(IsZero(FalseLit())), result=Pred(IsZero(FalseLit()))),
    ),
)

_XY = Context.empty().extend("y", NameBind()).extend("x", NameBind())

UNTYPED = Chapter(
    name="untyped",
    title="Untyped lambda calculus",
    examples=(
        Example(
            "free-variable",
            Var(0, 1),
            ctx=Context.empty().extend("x", NameBind()),
            result=Var(0, 1),
        ),
        Example("identity", Abs("x", None, Var(0, 1)), result=Abs("x", None, Var(0, 1))),
        Example(
            "stuck-application",
            App(Var(0, 2), Var(1, 2)),
            ctx=_XY,
            result=App(Var(0, 2), Var(1, 2)),
        ),
        Example(
            "free-in-argument",
            App(Abs("x1", None, Var(0, 2)), Abs("x2", None, Var(1, 2))),
            ctx=Context.empty().extend("z", NameBind()),
            result=Abs("x2", None, Var(1, 2)),
        ),
        Example(
            "nested-beta",
            App(
                App(
                    Abs("x", None, Var(0, 1)),
                    Abs("x", None, App(Var(0, 1), Var(0, 1))),
                ),
                Abs(
                    "y",
                    None,
                    App(Abs("x", None, Var(0, 2)), Abs("x", None, Var(0, 2))),
                ),
            ),
            result=Abs("x", None, Var(0, 1)),
        ),
        Example(
            "tru-applied",
            App(
                App(Abs("t", None, Abs("f", None, Var(1, 2))), Abs("a", None, Var(0, 1))),
                Abs("b", None, Var(0, 1)),
            ),
            result=Abs("a", None, Var(0, 1)),
        ),
        Example(
            "shadowing",
            App(Abs("x", None, Abs("x", None, Var(1, 2))), Abs("x", None, Var(0, 1))),
            result=Abs("x", None, Abs("x", None, Var(0, 2))),
        ),
    ),
)

TYPED = Chapter(
    name="typed",
    title="Simply-typed lambda calculus with booleans",
    examples=(
        Example("true", TrueLit(), ty=TypeBool(), result=TrueLit()),
        Example("false", FalseLit(), ty=TypeBool(), result=FalseLit()),
        Example("if", If(TrueLit(), FalseLit(), TrueLit()), ty=TypeBool(), result=FalseLit()),
        Example("identity", _id("x"), ty=TypeArrow(TypeBool(), TypeBool()), result=_id("x")),
        Example("apply-identity", App(_id("x"), TrueLit()), ty=TypeBool(), result=TrueLit()),
        Example(
            "apply-if",
            App(If(FalseLit(), _id("x"), _id("y")), TrueLit()),
            ty=TypeBool(),
            result=TrueLit(),
        ),
        Example(
            "apply-nested-if",
            App(
                If(
                    App(If(TrueLit(), _id("x"), _id("y")), FalseLit()),
                    _id("x"),
                    _id("y"),
                ),
                TrueLit(),
            ),
            ty=TypeBool(),
            result=TrueLit(),
        ),
        Example(
            "higher-order",
            App(
                Abs("f", TypeArrow(TypeBool(), TypeBool()), App(Var(0, 1), FalseLit())),
                Abs("b", TypeBool(), If(Var(0, 1), FalseLit(), TrueLit())),
            ),
            ty=TypeBool(),
            result=TrueLit(),
        ),
        Example(
            "untyped-binding",
            Var(0, 1),
            ctx=Context.empty().extend("x", NameBind()),
            error=VariableNotFound,
        ),
        Example(
            "parameter-mismatch",
            App(Abs("x", TypeArrow(TypeBool(), TypeBool()), Var(0, 1)), TrueLit()),
            error=ParameterMismatch,
        ),
        Example("unexpected-type", App(TrueLit(), _id("x")), error=UnexpectedType),
        Example("arms-mismatch", If(TrueLit(), _id("x"), FalseLit()), error=ConditionalArmsMismatch),
        Example("guard-not-bool", If(_id("x"), TrueLit(), FalseLit()), error=GuardNotBool),
    ),
)

CHAPTERS: dict[str, Chapter] = {chapter.name: chapter for chapter in (ARITH, UNTYPED, TYPED)}


def get_chapter(name: str) -> Chapter:
    try:
        return CHAPTERS[name]
    except KeyError:
        raise KeyError(f"Unknown chapter {name!r}; expected one of {', '.join(CHAPTERS)}") from None


def run_example(
    chapter: str,
    example: Example,
    evaluator: Evaluator,
    checker: TypeChecker,
    strategies: Iterable[Strategy] = tuple(Strategy),
    suffix: str = "'",
) -> list[ExampleResult]:
    """Check an example's expectations; one result per check performed."""
    results: list[ExampleResult] = []

    if example.result is not None:
        for strategy in strategies:
            actual = evaluator.evaluate(example.term, example.ctx, strategy)
            passed = actual == example.result
            expected = show(example.result, example.ctx, suffix)
            detail = "" if passed else f"expected {expected}, got {show(actual, example.ctx, suffix)}"
            results.append(ExampleResult(chapter, example.name, f"eval:{strategy}", passed, detail))

    if example.ty is not None:
        try:
            actual_type = checker.infer(example.ctx, example.term)
        except TypeError as e:
            results.append(ExampleResult(chapter, example.name, "type", False, str(e)))
        else:
            passed = actual_type == example.ty
            detail = "" if passed else f"expected {example.ty}, got {actual_type}"
            results.append(ExampleResult(chapter, example.name, "type", passed, detail))

    if example.error is not None:
        expected = example.error.__name__
        try:
            actual_type = checker.infer(example.ctx, example.term)
        except TypeError as e:
            passed = isinstance(e, example.error)
            detail = "" if passed else f"expected {expected}, got {type(e).__name__}"
            results.append(ExampleResult(chapter, example.name, "type-error", passed, detail))
        else:
            detail = f"expected {expected}, got type {actual_type}"
            results.append(ExampleResult(chapter, example.name, "type-error", False, detail))

    return results


def run_chapter(
    chapter: Chapter,
    evaluator: Evaluator | None = None,
    checker: TypeChecker | None = None,
    strategies: Iterable[Strategy] = tuple(Strategy),
    suffix: str = "'",
) -> list[ExampleResult]:
    """Run every example of a chapter."""
    evaluator = evaluator if evaluator is not None else Evaluator()
    checker = checker if checker is not None else TypeChecker()
    strategies = tuple(strategies)

    results: list[ExampleResult] = []
    for example in chapter.examples:
        results.extend(run_example(chapter.name, example, evaluator, checker, strategies, suffix))

    failed = sum(1 for r in results if not r.passed)
    logger.debug("chapter.done name={} checks={} failed={}", chapter.name, len(results), failed)
    return results
