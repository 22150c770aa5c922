"""
grammar.py — Gramática de la lógica proposicional
=================================================

Este módulo implementa el parser descendente recursivo que convierte una
fórmula en un término del dominio (`domain/terms.py`). Se construye
únicamente con los combinadores de `infrastructure/combinators.py`.

Gramática
---------

    Atom      := Value | Ident | "(" Or ")"
    Equation  := Atom ("=" Atom)?
    Not       := "NOT"* Equation          (un número par de NOT se cancela)
    And       := Not ("AND" Not)*          (plegado por la derecha)
    Or        := And ("OR" And)*           (plegado por la derecha)
    Value     := Bool | String
    Bool      := "TRUE" | "FALSE"
    String    := '"' ( '\\"' | cualquier carácter excepto '"' )* '"'
    Ident     := identificador, excepto TRUE, FALSE, NOT, AND, OR

Reglas importantes
------------------

1. Sin recursión por la izquierda.
2. Sin alternativas solapadas: `or_else` se queda con la primera que
   funciona (paréntesis, literal, identificador y palabra clave empiezan
   con tokens distintos).
3. Palabras clave: `expect_string("TRUE")` aceptaría "TRUEfoo" como
   "TRUE" + "foo". Por eso siempre se parsea el identificador completo y
   después se compara el texto (`expect_ident`).
4. Cada token admite espacios delante (`skip_leading_spaces`).

Función pública
---------------

`parse_or(source)` es el símbolo inicial.
"""

import logging
from typing import Any, Callable, Optional

from ..domain.terms import And, Bool, Equation, Identifier, Not, Or, Str, Value
from ..infrastructure.combinators import (
    NOTHING,
    Pair,
    Parser,
    ParseResult,
    and_then,
    bind,
    convert,
    expect_code_point,
    expect_not_code_point,
    fail,
    first,
    optional,
    or_else,
    repeat_and_fold_left,
    repeated,
    second,
    succeed,
)
from ..infrastructure.input_source import InputSource
from ..infrastructure.lexical import expect, expect_identifier, skip_leading_spaces

__all__ = [
    "KEYWORDS",
    "keyword_advisory",
    "expect_ident",
    "parse_ident",
    "parse_bool",
    "parse_string",
    "parse_value",
    "parse_atom",
    "parse_equation",
    "parse_not",
    "parse_and",
    "parse_or",
]

logger = logging.getLogger(__name__)


# ============================================================================
# 1. PALABRAS CLAVE
# ============================================================================

KEYWORDS = frozenset({"TRUE", "FALSE", "NOT", "AND", "OR"})

# Variantes en minúsculas/capitalizadas que casi coinciden con una palabra clave
_NEAR_MISSES = frozenset({
    "true", "True", "false", "False",
    "not", "Not", "or", "Or", "and", "And",
})


def keyword_advisory(text: str) -> Optional[str]:
    """
    Devuelve un aviso si `text` casi coincide con una palabra clave.

    Es solo una ayuda para el usuario: el identificador sigue siendo
    válido.
    """
    if text not in _NEAR_MISSES:
        return None
    return (
        f'You probably don\'t want to use "{text}" as a variable name! '
        "This language is case sensitive. "
        "Use all upper case letters for logical expressions."
    )


def expect_ident(keyword: str) -> Parser:
    """Parsea un identificador completo y exige que sea exactamente `keyword`."""
    def check(text: str) -> Parser:
        if text == keyword:
            return succeed(text)
        return fail()

    return skip_leading_spaces(bind(expect_identifier, check))


# ============================================================================
# 2. TOKENS
# ============================================================================

def _identifier_or_fail(text: str) -> Parser:
    if text in KEYWORDS:
        return fail()
    advisory = keyword_advisory(text)
    if advisory is not None:
        logger.warning(advisory)
    return succeed(Identifier(name=text))


def _bool_or_fail(text: str) -> Parser:
    if text == "TRUE":
        return succeed(True)
    if text == "FALSE":
        return succeed(False)
    return fail()


parse_ident: Parser = bind(skip_leading_spaces(expect_identifier), _identifier_or_fail)

parse_bool: Parser = bind(skip_leading_spaces(expect_identifier), _bool_or_fail)

# \" es una comilla escapada; cualquier otra barra invertida es un carácter normal
_string_char: Parser = or_else(
    second(and_then(expect_code_point("\\"), expect_code_point('"'))),
    expect_not_code_point('"'),
)

parse_string: Parser = first(and_then(
    second(and_then(
        expect_code_point('"'),
        convert(repeated(_string_char), "".join),
    )),
    expect_code_point('"'),
))

parse_value: Parser = skip_leading_spaces(or_else(
    convert(parse_bool, lambda b: Value(literal=Bool(value=b))),
    convert(parse_string, lambda s: Value(literal=Str(value=s))),
))


# ============================================================================
# 3. REGLAS RECURSIVAS
# ============================================================================

def _binary(node: Callable[..., Any]) -> Callable[[Pair], Any]:
    """Construye `node(left, right)` o devuelve el lado izquierdo si falta el derecho."""
    def build(pair: Pair) -> Any:
        if pair.second is NOTHING:
            return pair.first
        return node(left=pair.first, right=pair.second)
    return build


def _fold_right(node: Callable[..., Any]) -> Callable[[Pair], Any]:
    """
    Pliega `primero, [op1, op2, ...]` por la derecha:
    `node(primero, node(op1, node(op2, ...)))`.

    La profundidad de la pila no depende del número de operandos.
    """
    def build(pair: Pair) -> Any:
        operands = [pair.first] + pair.second
        tree = operands[-1]
        for operand in reversed(operands[:-1]):
            tree = node(left=operand, right=tree)
        return tree
    return build


def _negate(pair: Pair) -> Any:
    if pair.first:
        return Not(arg=pair.second)
    return pair.second


def parse_atom(source: Optional[InputSource]) -> ParseResult:
    """Valores, identificadores y expresiones entre paréntesis."""
    parenthesized = second(first(and_then(
        and_then(expect("("), parse_or),
        expect(")"),
    )))
    return or_else(or_else(parse_value, parse_ident), parenthesized)(source)


def parse_equation(source: Optional[InputSource]) -> ParseResult:
    """Ecuaciones y átomos."""
    rhs = optional(second(and_then(expect("="), parse_atom)))
    return convert(and_then(parse_atom, rhs), _binary(Equation))(source)


def parse_not(source: Optional[InputSource]) -> ParseResult:
    """
    Negaciones. Los NOT se pliegan con XOR antes del operando, así que
    `NOT NOT NOT x` produce una sola negación de x.
    """
    negations = repeat_and_fold_left(
        expect_ident("NOT"), False, lambda negate, _: not negate
    )
    return convert(and_then(negations, parse_equation), _negate)(source)


def parse_and(source: Optional[InputSource]) -> ParseResult:
    """Conjunciones, asociativas por la derecha: `a AND b AND c` es `(a AND (b AND c))`."""
    rest = repeated(second(and_then(expect_ident("AND"), parse_not)))
    return convert(and_then(parse_not, rest), _fold_right(And))(source)


def parse_or(source: Optional[InputSource]) -> ParseResult:
    """Disyunciones; símbolo inicial de la gramática."""
    rest = repeated(second(and_then(expect_ident("OR"), parse_and)))
    return convert(and_then(parse_and, rest), _fold_right(Or))(source)
