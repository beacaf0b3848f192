"""Tests for the chapter examples and their runner."""

import pytest

from tapl.chapters import ARITH, CHAPTERS, TYPED, UNTYPED, Chapter, Example, get_chapter, run_chapter, run_example
from tapl.core.ast import Abs, TrueLit, Var, Zero
from tapl.core.errors import GuardNotBool
from tapl.core.types import TypeBool, TypeNat
from tapl.eval.strategy import Strategy


@pytest.mark.parametrize("chapter", list(CHAPTERS.values()), ids=lambda c: c.name)
def test_every_chapter_passes(chapter):
    results = run_chapter(chapter)
    failures = [r for r in results if not r.passed]
    assert results
    assert failures == []


def test_eval_checks_run_per_strategy(evaluator, checker):
    example = ARITH.find("if-true")
    results = run_example("arith", example, evaluator, checker)
    assert [r.check for r in results] == ["eval:single-step", "eval:full-reduction", "type"]


def test_single_strategy(evaluator, checker):
    example = ARITH.find("if-true")
    results = run_example("arith", example, evaluator, checker, [Strategy.SINGLE_STEP])
    assert [r.check for r in results] == ["eval:single-step", "type"]


def test_failures_are_reported(evaluator, checker):
    wrong = Example("wrong", TrueLit(), result=Zero(), ty=TypeNat(), error=GuardNotBool)
    results = run_example("scratch", wrong, evaluator, checker)
    assert not any(r.passed for r in results)
    assert results[0].detail == "expected 0, got true"
    assert results[-1].detail == "expected GuardNotBool, got type Bool"


def test_failure_detail_uses_suffix(evaluator, checker):
    shadowed = Abs("x", None, Abs("x", None, Var(0, 2)))
    wrong = Example("wrong", shadowed, result=TrueLit())
    results = run_example("scratch", wrong, evaluator, checker, [Strategy.FULL_REDUCTION], suffix="_")
    assert results[0].detail == "expected true, got (lambda x. (lambda x_. x_))"


def test_shadowing_example_keeps_inner_binder(strategy, evaluator):
    example = UNTYPED.find("shadowing")
    assert evaluator.evaluate(example.term, example.ctx, strategy) == example.result


def test_wrong_error_kind(evaluator, checker):
    example = Example("wrong-kind", TYPED.find("unexpected-type").term, error=GuardNotBool)
    (result,) = run_example("scratch", example, evaluator, checker)
    assert not result.passed
    assert result.detail == "expected GuardNotBool, got UnexpectedType"


def test_typed_error_examples():
    chapter = Chapter("errors", "", tuple(e for e in TYPED.examples if e.error is not None))
    results = run_chapter(chapter)
    assert len(results) == 5
    assert all(r.check == "type-error" and r.passed for r in results)


def test_get_chapter():
    assert get_chapter("untyped") is UNTYPED
    with pytest.raises(KeyError):
        get_chapter("nope")


def test_find_missing_example():
    with pytest.raises(KeyError):
        ARITH.find("nope")


def test_arith_types():
    assert ARITH.find("iszero-zero").ty == TypeBool()
