"""Error types for the calculus core: context lookups, evaluation, typing."""

from __future__ import annotations

from tapl.core.ast import Term
from tapl.core.types import Type


class ContextError(Exception):
    """Base class for context lookup failures."""


class IndexOutOfRange(ContextError, IndexError):
    """de Bruijn index past the end of the context."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Variable index {index} out of bounds in context with {length} bindings")


class NotATypeBinding(ContextError):
    """The binding at an index carries a name but no type."""

    def __init__(self, index: int, name: str):
        self.index = index
        self.name = name
        super().__init__(f"Binding {name!r} at index {index} has no type")


class NoRuleApplies(Exception):
    """No evaluation rule matches: the term is a value or stuck.

    This is a control signal for the single-step driver, not a user-facing error.
    """

    def __init__(self, term: Term):
        self.term = term
        super().__init__(f"No rule applies to {term}")


class StepLimitExceeded(Exception):
    """Single-step evaluation did not reach a normal form within the step limit."""

    def __init__(self, limit: int, term: Term):
        self.limit = limit
        self.term = term
        super().__init__(f"Evaluation did not terminate within {limit} steps")


class TypeError(Exception):
    """Base class for type errors."""

    term: Term | None

    def __init__(self, message: str, term: Term | None = None):
        super().__init__(message)
        self.term = term


class VariableNotFound(TypeError):
    """Variable index unbound, or bound without a type."""

    def __init__(self, index: int, term: Term | None = None):
        self.index = index
        super().__init__(f"No type for variable with de Bruijn index {index}", term)


class ParameterMismatch(TypeError):
    """Argument type differs from the function's declared domain."""

    def __init__(self, expected: Type, actual: Type, term: Term | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Parameter type mismatch: expected {expected}, but got {actual}", term)


class UnexpectedType(TypeError):
    """Application of a term whose type is not an arrow."""

    def __init__(self, actual: Type, term: Term | None = None):
        self.actual = actual
        super().__init__(f"Expected a function type, but got {actual}", term)


class ConditionalArmsMismatch(TypeError):
    """Branches of a conditional have different types."""

    def __init__(self, then_type: Type, else_type: Type, term: Term | None = None):
        self.then_type = then_type
        self.else_type = else_type
        super().__init__(f"Arms of conditional have different types: {then_type} and {else_type}", term)


class GuardNotBool(TypeError):
    """Guard of a conditional is not a boolean."""

    def __init__(self, actual: Type, term: Term | None = None):
        self.actual = actual
        super().__init__(f"Guard of conditional is not a Bool: {actual}", term)


class ArgumentNotNat(TypeError):
    """succ, pred or iszero applied to a non-numeric argument."""

    def __init__(self, actual: Type, term: Term | None = None):
        self.actual = actual
        super().__init__(f"Expected argument of type Nat, but got {actual}", term)


class MissingAnnotation(TypeError):
    """Abstraction without a parameter type in a typed context."""

    def __init__(self, name: str, term: Term | None = None):
        self.name = name
        super().__init__(f"Abstraction over {name!r} has no parameter type", term)
