"""Unit tests for validator functions."""

from decimal import Decimal

import pytest

from fantasticcal import InvalidInputError, parse_number, validate_number
from fantasticcal.validators import is_integral, validate_non_zero, validate_positive


class TestValidateNumber:
    """Tests for validate_number function."""

    def test_accepts_int(self):
        assert validate_number(42) == 42

    def test_accepts_float(self):
        assert validate_number(3.14) == 3.14

    def test_accepts_decimal(self):
        assert validate_number(Decimal("2.5")) == Decimal("2.5")

    def test_rejects_nan(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_number(float("nan"))
        assert "NaN" in str(exc_info.value)

    def test_rejects_positive_inf(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_number(float("inf"))
        assert "Infinity" in str(exc_info.value)

    def test_rejects_decimal_nan(self):
        with pytest.raises(InvalidInputError):
            validate_number(Decimal("NaN"))

    def test_rejects_decimal_inf(self):
        with pytest.raises(InvalidInputError):
            validate_number(Decimal("-Infinity"))

    def test_rejects_string(self):
        with pytest.raises(InvalidInputError):
            validate_number("42")  # type: ignore

    def test_rejects_bool(self):
        with pytest.raises(InvalidInputError):
            validate_number(True)  # type: ignore

    def test_rejects_none(self):
        with pytest.raises(InvalidInputError):
            validate_number(None)  # type: ignore


class TestParseNumber:
    """Tests for parse_number function."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("4", 4.0), ("-5.7", -5.7), (".5", 0.5), (" 12 \n", 12.0), ("1e3", 1000.0)],
    )
    def test_parses(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", [None, "", "  ", "four", "1,5", "nan", "inf", "sNaN"])
    def test_rejects(self, text):
        with pytest.raises(InvalidInputError):
            parse_number(text)


class TestGuards:
    """Tests for the small guards used by operations."""

    def test_non_zero(self):
        assert validate_non_zero(-1) == -1
        with pytest.raises(InvalidInputError):
            validate_non_zero(0.0)

    def test_positive(self):
        assert validate_positive(0.001) == 0.001
        assert validate_positive(0, allow_zero=True) == 0
        with pytest.raises(InvalidInputError):
            validate_positive(0)
        with pytest.raises(InvalidInputError):
            validate_positive(-1, allow_zero=True)

    def test_is_integral(self):
        assert is_integral(3.0)
        assert is_integral(0)
        assert not is_integral(2.5)
