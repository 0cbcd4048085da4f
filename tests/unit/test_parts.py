"""Unit tests for calculus part classification."""

from decimal import Decimal

import pytest

from fantasticcal import (
    LeftParenthesisPart,
    NumberPart,
    OperatorPart,
    RightParenthesisPart,
    UndefinedPart,
    classify,
    split_parts,
)


class TestClassify:
    """Tests for classify."""

    def test_number(self):
        assert classify("4.5") == NumberPart(Decimal("4.5"))

    def test_negative_number_is_a_number(self):
        assert classify("-5") == NumberPart(Decimal("-5"))

    def test_lone_minus_is_subtraction(self):
        part = classify("-")
        assert isinstance(part, OperatorPart)
        assert part.value.symbol == "-"

    def test_operator_keeps_bound_text(self):
        part = classify("log[2]")
        assert isinstance(part, OperatorPart)
        assert part.value.bound_text == "log[2]"

    def test_parentheses(self):
        assert classify("(") == LeftParenthesisPart()
        assert classify(")") == RightParenthesisPart()
        assert classify("(").value == "("

    @pytest.mark.parametrize("token", ["abc", "@", "Infinity", "NaN", "V[]"])
    def test_undefined(self, token):
        assert classify(token) == UndefinedPart(token)

    def test_parts_are_immutable(self):
        part = classify("1")
        with pytest.raises(AttributeError):
            part.value = Decimal(2)


class TestSplitParts:
    """Tests for split_parts."""

    def test_split_line(self):
        parts = split_parts("( 16 V[2] ) + 3 ?")
        assert [type(part) for part in parts] == [
            LeftParenthesisPart,
            NumberPart,
            OperatorPart,
            RightParenthesisPart,
            OperatorPart,
            NumberPart,
            UndefinedPart,
        ]

    def test_empty_line(self):
        assert split_parts("   ") == []
