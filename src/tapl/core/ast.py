"""Term AST shared by the arithmetic, untyped and simply-typed calculi."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from tapl.core.types import Type


class Term:
    """Base class for terms."""

    pass


@dataclass(frozen=True)
class Var(Term):
    """Variable reference using de Bruijn index.

    Index 0 refers to the nearest binder, 1 to the next, etc.
    ctx_len is the total binder depth the term was built under; the
    printer compares it with the printing context and renders
    `[bad index]` on mismatch.

    Example: λx.λy.x  =>  Abs("x", _, Abs("y", _, Var(1, 2)))
    """

    index: int
    ctx_len: int

    def __str__(self) -> str:
        return f"x{self.index}"


@dataclass(frozen=True)
class Abs(Term):
    """Lambda abstraction: λx.t or λ(x:σ).t

    name is a hint for printing only. var_type is None in the untyped
    calculus.
    """

    name: str
    var_type: Optional[Type]
    body: Term

    def __str__(self) -> str:
        if self.var_type is None:
            return f"λ{self.name}.{self.body}"
        return f"λ({self.name}:{self.var_type}).{self.body}"


@dataclass(frozen=True)
class App(Term):
    """Function application: f arg."""

    func: Term
    arg: Term

    def __str__(self) -> str:
        return f"({self.func} {self.arg})"


@dataclass(frozen=True)
class TrueLit(Term):
    def __str__(self) -> str:
        return "true"


@dataclass(frozen=True)
class FalseLit(Term):
    def __str__(self) -> str:
        return "false"


@dataclass(frozen=True)
class If(Term):
    """Conditional: if cond then t else e."""

    cond: Term
    then: Term
    else_: Term

    def __str__(self) -> str:
        return f"(if {self.cond} then {self.then} else {self.else_})"


@dataclass(frozen=True)
class Zero(Term):
    def __str__(self) -> str:
        return "0"


@dataclass(frozen=True)
class Succ(Term):
    term: Term

    def __str__(self) -> str:
        return f"(succ {self.term})"


@dataclass(frozen=True)
class Pred(Term):
    term: Term

    def __str__(self) -> str:
        return f"(pred {self.term})"


@dataclass(frozen=True)
class IsZero(Term):
    term: Term

    def __str__(self) -> str:
        return f"(iszero {self.term})"


def nat(n: int) -> Term:
    """Build the numeric value succ^n(0)."""
    if n < 0:
        raise ValueError(f"numeric values are non-negative, got {n}")
    term: Term = Zero()
    for _ in range(n):
        term = Succ(term)
    return term


# Export the term union for type checking
TermRepr = Union[Var, Abs, App, TrueLit, FalseLit, If, Zero, Succ, Pred, IsZero]
