"""
calculator.py — Aritmética entera de primaria
=============================================

Gramática (asociativa por la izquierda, solo operadores binarios):

    Number        := [0-9]+
    Multiplicand  := Number | "(" Expression ")"
    Addend        := Multiplicand (("*" | "/") Multiplicand)*
    Expression    := Addend (("+" | "-") Addend)*

La asociatividad por la izquierda se obtiene con `bind` +
`repeat_and_fold_left`: el primer operando es la semilla del plegado y
cada par (operador, operando) se combina sobre el acumulado.
"""

from dataclasses import dataclass
from typing import Optional

from ..errors import CalculationError, InputParseError
from ..infrastructure.combinators import (
    Failure,
    Pair,
    Parser,
    ParseResult,
    and_then,
    bind,
    convert,
    first,
    or_else,
    repeat_and_fold_left,
    second,
)
from ..infrastructure.input_source import InputSource, remaining_text, string_to_input
from ..infrastructure.lexical import expect, expect_number, expect_spaces, skip_leading_spaces


@dataclass(frozen=True)
class CalcOutcome:
    """
    Resultado de evaluar una expresión.

    Atributos:
        value (int): valor calculado.
        remaining (Optional[str]): entrada sin consumir, None si no sobra nada.
    """
    value: int
    remaining: Optional[str] = None


def _truncating_div(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise CalculationError("Division by zero")
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs >= 0) == (rhs > 0) else -quotient


def _multiply(lhs: int, operation: Pair) -> int:
    if operation.first == "*":
        return lhs * operation.second
    return _truncating_div(lhs, operation.second)


def _add(lhs: int, operation: Pair) -> int:
    if operation.first == "+":
        return lhs + operation.second
    return lhs - operation.second


def multiplicand(source: Optional[InputSource]) -> ParseResult:
    number = skip_leading_spaces(convert(expect_number, int))
    parenthesized = second(first(and_then(
        and_then(expect("("), expression),
        expect(")"),
    )))
    return or_else(number, parenthesized)(source)


def addend(source: Optional[InputSource]) -> ParseResult:
    operation: Parser = and_then(or_else(expect("*"), expect("/")), multiplicand)
    return bind(
        multiplicand,
        lambda lhs: repeat_and_fold_left(operation, lhs, _multiply),
    )(source)


def expression(source: Optional[InputSource]) -> ParseResult:
    operation: Parser = and_then(or_else(expect("+"), expect("-")), addend)
    return bind(
        addend,
        lambda lhs: repeat_and_fold_left(operation, lhs, _add),
    )(source)


def calculate(text: str) -> CalcOutcome:
    """
    Evalúa una expresión aritmética.

    Args:
        text: Expresión a evaluar

    Returns:
        CalcOutcome con el valor y la entrada sobrante

    Raises:
        InputParseError: Si no se puede leer la expresión
        CalculationError: Si hay una división por cero
    """
    result = expression(string_to_input(text))
    if isinstance(result, Failure):
        raise InputParseError("Couldn't read the input!")
    rest = expect_spaces(result.remaining).remaining
    return CalcOutcome(value=result.value, remaining=remaining_text(rest))
