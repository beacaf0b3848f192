"""Tests for type representations."""

from tapl.core.types import TypeArrow, TypeBool, TypeNat


class TestTypeStr:
    def test_base_types(self):
        assert str(TypeBool()) == "Bool"
        assert str(TypeNat()) == "Nat"

    def test_arrow_right_associative(self):
        """Bool -> Bool -> Bool needs no parentheses."""
        t = TypeArrow(TypeBool(), TypeArrow(TypeBool(), TypeBool()))
        assert str(t) == "Bool -> Bool -> Bool"

    def test_arrow_in_argument(self):
        t = TypeArrow(TypeArrow(TypeBool(), TypeNat()), TypeBool())
        assert str(t) == "(Bool -> Nat) -> Bool"


class TestTypeEquality:
    def test_structural(self):
        assert TypeArrow(TypeBool(), TypeBool()) == TypeArrow(TypeBool(), TypeBool())
        assert TypeArrow(TypeBool(), TypeBool()) != TypeArrow(TypeBool(), TypeNat())
        assert TypeBool() != TypeNat()
