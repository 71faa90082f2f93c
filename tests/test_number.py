"""Tests du formateur numérique EDIFACT.

FR: Vérifie le nombre fixe de décimales, l'arrondi au demi supérieur en
    valeur absolue, le signe et le rejet des valeurs non numériques.
EN: Verifies fixed decimals, half-away-from-zero rounding, sign handling
    and rejection of non-numeric input.
"""

from decimal import Decimal

import pytest

from edifact_generator.errors import InvalidNumericInputError
from edifact_generator.number import convert


class TestConvert:
    """Tests de convert()."""

    def test_rounds_half_away_from_zero(self) -> None:
        assert convert(12.345, 2) == "12.35"

    def test_negative_integer_without_decimals(self) -> None:
        assert convert(-5, 0) == "-5"

    def test_numeric_string_is_padded(self) -> None:
        assert convert("7", 3) == "7.000"

    @pytest.mark.parametrize(
        "value,decimals,expected",
        [
            (Decimal("2.5"), 0, "3"),
            (-2.5, 0, "-3"),
            (Decimal("-12.345"), 2, "-12.35"),
            (0.125, 2, "0.13"),
            (19.999, 2, "20.00"),
            (100, 3, "100.000"),
        ],
    )
    def test_rounding(self, value: object, decimals: int, expected: str) -> None:
        assert convert(value, decimals) == expected  # type: ignore[arg-type]

    def test_default_three_decimals(self) -> None:
        assert convert(1) == "1.000"

    def test_no_thousands_grouping(self) -> None:
        assert convert(1234567.891, 2) == "1234567.89"

    def test_no_negative_zero(self) -> None:
        assert convert(-0.001, 2) == "0.00"

    def test_no_positive_sign(self) -> None:
        assert not convert(5, 2).startswith("+")

    def test_string_is_stripped(self) -> None:
        assert convert(" 42 ", 2) == "42.00"

    def test_exponent_notation(self) -> None:
        assert convert(1e-7, 2) == "0.00"
        assert convert("1E3", 1) == "1000.0"

    def test_large_values(self) -> None:
        assert convert(1e27, 2) == "1" + "0" * 27 + ".00"
        assert convert(Decimal("1e30"), 2) == "1" + "0" * 30 + ".00"

    def test_large_value_rounding(self) -> None:
        value = "12345678901234567890123456789.125"
        assert convert(value, 2) == "12345678901234567890123456789.13"


class TestInvalidInput:
    """Tests des valeurs non numériques."""

    @pytest.mark.parametrize(
        "value",
        ["abc", "", "12,5", None, "NaN", float("inf"), True, [1]],
    )
    def test_raises_invalid_numeric_input(self, value: object) -> None:
        with pytest.raises(InvalidNumericInputError):
            convert(value, 2)  # type: ignore[arg-type]

    def test_error_keeps_value(self) -> None:
        with pytest.raises(InvalidNumericInputError) as exc_info:
            convert("douze", 2)
        assert exc_info.value.value == "douze"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            convert("abc", 2)

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError, match="négatif"):
            convert(1, -1)
