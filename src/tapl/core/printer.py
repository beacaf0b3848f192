"""Render de Bruijn terms with reconstructed variable names."""

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
    Var,
    Zero,
)
from tapl.core.context import Context
from tapl.core.errors import IndexOutOfRange

BAD_INDEX = "[bad index]"


def show(term: Term, ctx: Context | None = None, suffix: str = "'") -> str:
    """Print term using the name hints of ctx and of its own binders.

    Binders get a name not already used in the surrounding context (see
    Context.pick_fresh_name). A variable whose ctx_len disagrees with the
    printing context, or whose index is unbound, prints as `[bad index]`.
    """
    ctx = ctx if ctx is not None else Context.empty()

    match term:
        case Abs(name, var_type, body):
            inner_ctx, fresh = ctx.pick_fresh_name(name, suffix)
            annotation = "" if var_type is None else f":{var_type}"
            return f"(lambda {fresh}{annotation}. {show(body, inner_ctx, suffix)})"
        case App(func, arg):
            return f"({show(func, ctx, suffix)} {show(arg, ctx, suffix)})"
        case Var(index, ctx_len):
            if len(ctx) != ctx_len:
                return BAD_INDEX
            try:
                return ctx.name_at(index)
            except IndexOutOfRange:
                return BAD_INDEX
        case TrueLit():
            return "true"
        case FalseLit():
            return "false"
        case If(cond, then, else_):
            return (
                f"(if {show(cond, ctx, suffix)} "
                f"then {show(then, ctx, suffix)} "
                f"else {show(else_, ctx, suffix)})"
            )
        case Zero():
            return "0"
        case Succ(inner):
            return f"(succ {show(inner, ctx, suffix)})"
        case Pred(inner):
            return f"(pred {show(inner, ctx, suffix)})"
        case IsZero(inner):
            return f"(iszero {show(inner, ctx, suffix)})"
        case _:
            raise ValueError(f"Unknown term: {term!r}")
