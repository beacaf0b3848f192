"""Core calculus: AST, types, contexts, shifting and the type checker."""

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
    nat,
)
from tapl.core.checker import TypeChecker, type_of
from tapl.core.context import Binding, Context, NameBind, VarBind
from tapl.core.errors import (
    ArgumentNotNat,
    ConditionalArmsMismatch,
    ContextError,
    GuardNotBool,
    IndexOutOfRange,
    MissingAnnotation,
    NoRuleApplies,
    NotATypeBinding,
    ParameterMismatch,
    StepLimitExceeded,
    TypeError,
    UnexpectedType,
    VariableNotFound,
)
from tapl.core.printer import show
from tapl.core.shifting import map_vars, shift, substitute, substitute_top
from tapl.core.types import Type, TypeArrow, TypeBool, TypeNat

__all__ = [
    # AST
    "Term",
    "Var",
    "Abs",
    "App",
    "TrueLit",
    "FalseLit",
    "If",
    "Zero",
    "Succ",
    "Pred",
    "IsZero",
    "nat",
    # Types
    "Type",
    "TypeBool",
    "TypeNat",
    "TypeArrow",
    # Context
    "Binding",
    "Context",
    "NameBind",
    "VarBind",
    # Shifting
    "map_vars",
    "shift",
    "substitute",
    "substitute_top",
    # Printing
    "show",
    # Errors
    "ContextError",
    "IndexOutOfRange",
    "NotATypeBinding",
    "NoRuleApplies",
    "StepLimitExceeded",
    "TypeError",
    "VariableNotFound",
    "ParameterMismatch",
    "UnexpectedType",
    "ConditionalArmsMismatch",
    "GuardNotBool",
    "ArgumentNotNat",
    "MissingAnnotation",
    # Type Checker
    "TypeChecker",
    "type_of",
]
