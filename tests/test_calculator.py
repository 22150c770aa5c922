"""
Test de la calculadora
======================

Aritmética entera asociativa por la izquierda construida con
`bind` + `repeat_and_fold_left`.
"""

import pytest

from propcomb.errors import CalculationError, InputParseError
from propcomb.services.calculator import calculate


@pytest.mark.parametrize("text, expected", [
    ("42", 42),
    ("1 + 2 * 3", 7),
    ("(1 + 2) * 3", 9),
    ("10 - 4 - 3", 3),
    ("100 / 10 / 5", 2),
    ("2 * (3 + 4) - 1", 13),
    ("(1 - 8) / 2", -3),
    ("  7 / 2  ", 3),
])
def test_calculate(text, expected):
    outcome = calculate(text)
    assert outcome.value == expected
    assert outcome.remaining is None


def test_remaining_input_is_reported():
    outcome = calculate("2 + 2 abc")
    assert outcome.value == 4
    assert outcome.remaining == "abc"

    outcome = calculate("3 +")
    assert outcome.value == 3
    assert outcome.remaining == "+"


def test_unreadable_input():
    with pytest.raises(InputParseError):
        calculate("abc")
    with pytest.raises(InputParseError):
        calculate("")


def test_division_by_zero():
    with pytest.raises(CalculationError):
        calculate("7 / (3 - 3)")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
