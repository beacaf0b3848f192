"""Call-by-value small-step semantics and full reduction."""

from __future__ import annotations

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
    Zero,
)
from tapl.core.context import Context
from tapl.core.errors import NoRuleApplies
from tapl.core.shifting import substitute_top
from tapl.eval.strategy import Semantics, Strategy


def is_numeric_value(term: Term) -> bool:
    """0, succ 0, succ (succ 0), ..."""
    match term:
        case Zero():
            return True
        case Succ(inner):
            return is_numeric_value(inner)
        case _:
            return False


def is_value(term: Term) -> bool:
    match term:
        case Abs() | TrueLit() | FalseLit():
            return True
        case _:
            return is_numeric_value(term)


class Evaluator(Semantics[Context]):
    """Call-by-value evaluator for the untyped and simply-typed calculi.

    The context is threaded through for calculi with free variables; the
    reduction rules themselves never consult it.
    """

    def __init__(self, step_limit: int | None = None) -> None:
        self.step_limit = step_limit

    def eval1(self, term: Term, ctx: Context) -> Term:
        match term:
            case App(Abs(_, _, body), arg) if is_value(arg):
                return substitute_top(arg, body)
            case App(func, arg) if is_value(func):
                return App(func, self.eval1(arg, ctx))
            case App(func, arg):
                return App(self.eval1(func, ctx), arg)

            case If(TrueLit(), then, _):
                return then
            case If(FalseLit(), _, else_):
                return else_
            case If(cond, then, else_):
                return If(self.eval1(cond, ctx), then, else_)

            case Succ(inner):
                return Succ(self.eval1(inner, ctx))

            case Pred(Zero()):
                return Zero()
            case Pred(Succ(nv)) if is_numeric_value(nv):
                return nv
            case Pred(inner):
                return Pred(self.eval1(inner, ctx))

            case IsZero(Zero()):
                return TrueLit()
            case IsZero(Succ(nv)) if is_numeric_value(nv):
                return FalseLit()
            case IsZero(inner):
                return IsZero(self.eval1(inner, ctx))

            case _:
                raise NoRuleApplies(term)

    def eval_n(self, term: Term, ctx: Context) -> Term:
        match term:
            case App(func, arg):
                func_n = self.eval_n(func, ctx)
                if not is_value(func_n):
                    return App(func_n, arg)
                arg_n = self.eval_n(arg, ctx)
                match func_n:
                    case Abs(_, _, body) if is_value(arg_n):
                        return self.eval_n(substitute_top(arg_n, body), ctx)
                    case _:
                        return App(func_n, arg_n)

            case If(cond, then, else_):
                cond_n = self.eval_n(cond, ctx)
                match cond_n:
                    case TrueLit():
                        return self.eval_n(then, ctx)
                    case FalseLit():
                        return self.eval_n(else_, ctx)
                    case _:
                        return If(cond_n, then, else_)

            case Succ(inner):
                return Succ(self.eval_n(inner, ctx))

            case Pred(inner):
                inner_n = self.eval_n(inner, ctx)
                match inner_n:
                    case Zero():
                        return Zero()
                    case Succ(nv) if is_numeric_value(nv):
                        return nv
                    case _:
                        return Pred(inner_n)

            case IsZero(inner):
                inner_n = self.eval_n(inner, ctx)
                match inner_n:
                    case Zero():
                        return TrueLit()
                    case Succ(nv) if is_numeric_value(nv):
                        return FalseLit()
                    case _:
                        return IsZero(inner_n)

            case _:
                return term


def evaluate(term: Term, ctx: Context | None = None, strategy: Strategy | None = None) -> Term:
    """Evaluate term with the configured strategy and step limit.

    An explicit strategy overrides the TAPL_STRATEGY setting.
    """
    from tapl.config.settings import load_settings

    settings = load_settings()
    evaluator = Evaluator(step_limit=settings.step_limit)
    return evaluator.evaluate(
        term,
        ctx if ctx is not None else Context.empty(),
        strategy if strategy is not None else settings.strategy,
    )
