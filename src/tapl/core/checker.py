"""Type checker for the simply-typed lambda calculus with booleans and Nat."""

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
from tapl.core.context import Context, VarBind
from tapl.core.errors import (
    ArgumentNotNat,
    ConditionalArmsMismatch,
    ContextError,
    GuardNotBool,
    MissingAnnotation,
    ParameterMismatch,
    UnexpectedType,
    VariableNotFound,
)
from tapl.core.types import Type, TypeArrow, TypeBool, TypeNat


class TypeChecker:
    """Context-driven type checker.

    Fails fast: the first ill-typed subterm aborts the whole check.
    """

    def infer(self, ctx: Context, term: Term) -> Type:
        """Compute the type of term in ctx.

        Args:
            ctx: Typing context
            term: Term to type

        Returns:
            The type of the term

        Raises:
            VariableNotFound: If a variable is unbound or bound without a type
            ParameterMismatch: If an argument does not match the function's domain
            UnexpectedType: If a non-function is applied
            ConditionalArmsMismatch: If the arms of an if disagree
            GuardNotBool: If the guard of an if is not a Bool
            ArgumentNotNat: If succ, pred or iszero gets a non-Nat
            MissingAnnotation: If an abstraction has no parameter type
        """
        match term:
            case Var(index, _):
                try:
                    return ctx.type_at(index)
                except ContextError as e:
                    raise VariableNotFound(index, term) from e

            case Abs(name, var_type, body):
                if var_type is None:
                    raise MissingAnnotation(name, term)
                body_type = self.infer(ctx.extend(name, VarBind(var_type)), body)
                return TypeArrow(var_type, body_type)

            case App(func, arg):
                func_type = self.infer(ctx, func)
                arg_type = self.infer(ctx, arg)
                match func_type:
                    case TypeArrow(param_type, ret_type) if param_type == arg_type:
                        return ret_type
                    case TypeArrow(param_type, _):
                        raise ParameterMismatch(param_type, arg_type, term)
                    case _:
                        raise UnexpectedType(func_type, term)

            case TrueLit() | FalseLit():
                return TypeBool()

            case If(cond, then, else_):
                cond_type = self.infer(ctx, cond)
                if cond_type != TypeBool():
                    raise GuardNotBool(cond_type, term)
                then_type = self.infer(ctx, then)
                else_type = self.infer(ctx, else_)
                if then_type != else_type:
                    raise ConditionalArmsMismatch(then_type, else_type, term)
                return then_type

            case Zero():
                return TypeNat()

            case Succ(inner) | Pred(inner):
                self._expect_nat(ctx, inner, term)
                return TypeNat()

            case IsZero(inner):
                self._expect_nat(ctx, inner, term)
                return TypeBool()

            case _:
                raise ValueError(f"Unknown term: {term!r}")

    def _expect_nat(self, ctx: Context, inner: Term, term: Term) -> None:
        inner_type = self.infer(ctx, inner)
        if inner_type != TypeNat():
            raise ArgumentNotNat(inner_type, term)


def type_of(term: Term, ctx: Context | None = None) -> Type:
    """Type a term, in the empty context unless one is given."""
    return TypeChecker().infer(ctx if ctx is not None else Context.empty(), term)
