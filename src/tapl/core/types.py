"""Type representations for the simply-typed lambda calculus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class Type:
    """Base class for types."""

    pass


@dataclass(frozen=True)
class TypeBool(Type):
    """The type of `true` and `false`."""

    def __str__(self) -> str:
        return "Bool"


@dataclass(frozen=True)
class TypeNat(Type):
    """The type of numeric values: 0, succ 0, ..."""

    def __str__(self) -> str:
        return "Nat"


@dataclass(frozen=True)
class TypeArrow(Type):
    """Function type: σ → τ."""

    arg: Type
    ret: Type

    def __str__(self) -> str:
        match self.arg:
            case TypeArrow():
                arg_str = f"({self.arg})"
            case _:
                arg_str = str(self.arg)
        return f"{arg_str} -> {self.ret}"


# Export the type union for type checking
TypeRepr = Union[TypeBool, TypeNat, TypeArrow]
