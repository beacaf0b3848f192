"""Shifting and substitution on de Bruijn terms.

Both operations walk the term while counting the binders crossed so far
(the cutoff). Variables with an index below the cutoff are bound inside
the walked term; the others are free relative to where the walk began.
"""

from __future__ import annotations

from typing import Callable

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

VarTransform = Callable[[Var, int], Term]


def map_vars(on_var: VarTransform, term: Term, cutoff: int = 0) -> Term:
    """Rebuild term, replacing every variable with on_var(var, cutoff)."""

    def walk(c: int, t: Term) -> Term:
        match t:
            case Var():
                return on_var(t, c)
            case Abs(name, var_type, body):
                return Abs(name, var_type, walk(c + 1, body))
            case App(func, arg):
                return App(walk(c, func), walk(c, arg))
            case If(cond, then, else_):
                return If(walk(c, cond), walk(c, then), walk(c, else_))
            case Succ(inner):
                return Succ(walk(c, inner))
            case Pred(inner):
                return Pred(walk(c, inner))
            case IsZero(inner):
                return IsZero(walk(c, inner))
            case TrueLit() | FalseLit() | Zero():
                return t
            case _:
                raise ValueError(f"Unknown term: {t!r}")

    return walk(cutoff, term)


def shift(d: int, term: Term) -> Term:
    """Add d to every free variable index (and every ctx_len) in term."""

    def on_var(var: Var, c: int) -> Term:
        if var.index >= c:
            return Var(var.index + d, var.ctx_len + d)
        return Var(var.index, var.ctx_len + d)

    return map_vars(on_var, term)


def substitute(j: int, s: Term, term: Term) -> Term:
    """Replace variable j with s in term: [j ↦ s] term."""

    def on_var(var: Var, c: int) -> Term:
        if var.index == j + c:
            return shift(c, s)
        return var

    return map_vars(on_var, term)


def substitute_top(s: Term, term: Term) -> Term:
    """Beta-reduce an abstraction body with argument s.

    s is shifted up to account for the abstraction's binder, and the result
    is shifted down once the binder is gone.
    """
    return shift(-1, substitute(0, shift(1, s), term))
