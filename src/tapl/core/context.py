"""Naming and typing contexts for de Bruijn terms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tapl.core.errors import IndexOutOfRange, NotATypeBinding
from tapl.core.types import Type


@dataclass(frozen=True)
class NameBind:
    """Binding introduced by the untyped calculus: a name and nothing else."""

    def __str__(self) -> str:
        return "_"


@dataclass(frozen=True)
class VarBind:
    """Binding of a term variable to its type."""

    type: Type

    def __str__(self) -> str:
        return str(self.type)


Binding = Union[NameBind, VarBind]


@dataclass(frozen=True)
class Context:
    """Context Γ of (name, binding) pairs.

    Index 0 is the innermost (most recently introduced) binder. Contexts are
    immutable: extend() returns a new context and the receiver stays valid,
    which matters because sibling subterms keep using it.
    """

    bindings: tuple[tuple[str, Binding], ...] = ()

    @staticmethod
    def empty() -> "Context":
        """Create an empty context."""
        return Context()

    def extend(self, name: str, binding: Binding) -> "Context":
        """Prepend a binding; the new variable becomes index 0.

        Args:
            name: Name hint of the new variable
            binding: NameBind() or VarBind(type)

        Returns:
            A new context with the binding added
        """
        return Context(((name, binding),) + self.bindings)

    def _entry(self, index: int) -> tuple[str, Binding]:
        if index < 0 or index >= len(self.bindings):
            raise IndexOutOfRange(index, len(self.bindings))
        return self.bindings[index]

    def binding_at(self, index: int) -> Binding:
        """Look up the binding at a de Bruijn index.

        Raises:
            IndexOutOfRange: If index is out of bounds
        """
        return self._entry(index)[1]

    def name_at(self, index: int) -> str:
        return self._entry(index)[0]

    def type_at(self, index: int) -> Type:
        """Look up the type of a variable by de Bruijn index.

        Raises:
            IndexOutOfRange: If index is out of bounds
            NotATypeBinding: If the binding carries no type
        """
        name, binding = self._entry(index)
        match binding:
            case VarBind(ty):
                return ty
            case _:
                raise NotATypeBinding(index, name)

    def is_name_bound(self, name: str) -> bool:
        """Whether any binder in the context uses this name hint."""
        return any(bound == name for bound, _ in self.bindings)

    def pick_fresh_name(self, hint: str, suffix: str = "'") -> tuple["Context", str]:
        """Choose a display name not yet bound and bind it.

        The suffix is appended until the candidate is free. Only display
        names are affected; de Bruijn indices are not.

        Returns:
            (context extended with NameBind() under the chosen name, chosen name)
        """
        if not suffix:
            raise ValueError("fresh name suffix must be non-empty")
        name = hint
        while self.is_name_bound(name):
            name += suffix
        return self.extend(name, NameBind()), name

    def __len__(self) -> int:
        """Return the number of bindings in context."""
        return len(self.bindings)

    def __str__(self) -> str:
        entries = ", ".join(f"{name}:{binding}" for name, binding in self.bindings)
        return f"Context([{entries}])"
