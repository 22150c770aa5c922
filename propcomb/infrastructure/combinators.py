"""
combinators.py — Núcleo de combinadores de parsers
==================================================

Un parser es una función simple de una vista de entrada a un resultado:

    Parser = Callable[[Optional[InputSource]], ParseResult]

`None` se acepta como entrada y equivale a la entrada vacía. El resultado
es `Success(value, remaining)` o `Failure(remaining)`; un fallo siempre
devuelve la entrada que recibió, así el llamador puede probar otra
alternativa en la misma posición.

La alternativa es de elección comprometida: gana la primera que funciona
y no se reintenta nada. Las gramáticas construidas aquí no pueden tener
recursión por la izquierda y sus alternativas deben empezar con tokens
distintos.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Union

from .input_source import END_OF_INPUT, InputSource, advance, peek


# ============================================================================
# 1. TIPOS DE RESULTADO
# ============================================================================

@dataclass(frozen=True)
class Success:
    value: Any
    remaining: Optional[InputSource]


@dataclass(frozen=True)
class Failure:
    remaining: Optional[InputSource]


ParseResult = Union[Success, Failure]
Parser = Callable[[Optional[InputSource]], ParseResult]


@dataclass(frozen=True)
class Pair:
    """Resultado intermedio de `and_then`. Conviértelo en algo con sentido
    en cuanto sepas qué se parseó."""
    first: Any
    second: Any


@dataclass(frozen=True)
class Nothing:
    """Resultado de un `optional` cuyo parser interno no coincidió."""

    def __repr__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()


def get_first(value: Any) -> Any:
    if isinstance(value, Pair):
        return value.first
    return value


def get_second(value: Any) -> Any:
    if isinstance(value, Pair):
        return value.second
    return value


# ============================================================================
# 2. PARSERS PRIMITIVOS
# ============================================================================

def succeed(value: Any) -> Parser:
    """Tiene éxito con `value` sin consumir nada."""
    def parse(source: Optional[InputSource]) -> ParseResult:
        return Success(value, source)
    return parse


def fail() -> Parser:
    def parse(source: Optional[InputSource]) -> ParseResult:
        return Failure(source)
    return parse


def expect_code_point(expected: str) -> Parser:
    """Consume exactamente un code point igual a `expected`."""
    def parse(source: Optional[InputSource]) -> ParseResult:
        if source is not None and peek(source) == expected:
            return Success(expected, advance(source))
        return Failure(source)
    return parse


def expect_not_code_point(excluded: Iterable[str]) -> Parser:
    """Consume un code point cualquiera que no esté en `excluded`.

    El final de la entrada nunca coincide.
    """
    excluded = frozenset(excluded)

    def parse(source: Optional[InputSource]) -> ParseResult:
        code_point = peek(source)
        if source is None or code_point == END_OF_INPUT or code_point in excluded:
            return Failure(source)
        return Success(code_point, advance(source))
    return parse


def expect_code_points(expected: Iterable[str]) -> Parser:
    """Consume los code points de `expected` en orden.

    El resultado es la tupla de code points. Si falla no consume nada.
    """
    expected = tuple(expected)

    def parse(source: Optional[InputSource]) -> ParseResult:
        remaining = source
        for code_point in expected:
            result = expect_code_point(code_point)(remaining)
            if isinstance(result, Failure):
                return Failure(source)
            remaining = result.remaining
        return Success(expected, remaining)
    return parse


def expect_string(expected: str) -> Parser:
    return convert(expect_code_points(expected), lambda _: expected)


def expect_several(is_first: Callable[[str], bool],
                   is_later: Callable[[str], bool]) -> Parser:
    """
    Consumo máximo sobre una clase de caracteres.

    El primer code point debe cumplir `is_first`; después se toman todos
    los que cumplan `is_later`. El resultado es el texto consumido. Solo
    falla si se rechaza el primer code point.
    """
    def parse(source: Optional[InputSource]) -> ParseResult:
        code_point = peek(source)
        if source is None or code_point == END_OF_INPUT or not is_first(code_point):
            return Failure(source)
        chars = [code_point]
        remaining = advance(source)
        while remaining is not None:
            code_point = remaining.current_code_point()
            if code_point == END_OF_INPUT or not is_later(code_point):
                break
            chars.append(code_point)
            remaining = remaining.remaining_input()
        return Success("".join(chars), remaining)
    return parse


# ============================================================================
# 3. COMBINADORES
# ============================================================================

def and_then(first_parser: Parser, second_parser: Parser) -> Parser:
    """Ejecuta los dos parsers en secuencia y empareja sus resultados."""
    def parse(source: Optional[InputSource]) -> ParseResult:
        first_result = first_parser(source)
        if isinstance(first_result, Failure):
            return Failure(source)
        second_result = second_parser(first_result.remaining)
        if isinstance(second_result, Failure):
            return Failure(source)
        return Success(Pair(first_result.value, second_result.value),
                       second_result.remaining)
    return parse


def or_else(parser: Parser, alternative: Parser) -> Parser:
    """
    Elección comprometida: si `parser` funciona, `alternative` no se
    prueba aunque consumiera más. Usar solo con alternativas disjuntas.
    """
    def parse(source: Optional[InputSource]) -> ParseResult:
        result = parser(source)
        if isinstance(result, Success):
            return result
        return alternative(source)
    return parse


def convert(parser: Parser, converter: Callable[[Any], Any]) -> Parser:
    def parse(source: Optional[InputSource]) -> ParseResult:
        result = parser(source)
        if isinstance(result, Failure):
            return result
        return Success(converter(result.value), result.remaining)
    return parse


def first(parser: Parser) -> Parser:
    return convert(parser, get_first)


def second(parser: Parser) -> Parser:
    return convert(parser, get_second)


def optional(parser: Parser) -> Parser:
    """Cero o una coincidencia. Si no coincide da `NOTHING` y la entrada original."""
    def parse(source: Optional[InputSource]) -> ParseResult:
        result = parser(source)
        if isinstance(result, Failure):
            return Success(NOTHING, source)
        return result
    return parse


def repeat_and_fold_left(parser: Parser, seed: Any,
                         combine: Callable[[Any, Any], Any]) -> Parser:
    """
    Pliega cada coincidencia consecutiva de `parser` en un acumulador que
    empieza en `seed`. Nunca falla.

    Se detiene en la primera no coincidencia o cuando una coincidencia no
    consume nada (esa coincidencia sí se pliega). El parser se prueba
    también sobre la entrada agotada (`None`).
    """
    def parse(source: Optional[InputSource]) -> ParseResult:
        accumulator = seed
        remaining = source
        while True:
            result = parser(remaining)
            if isinstance(result, Failure):
                break
            accumulator = combine(accumulator, result.value)
            if result.remaining is remaining:
                break
            remaining = result.remaining
        return Success(accumulator, remaining)
    return parse


def repeated(parser: Parser) -> Parser:
    """Cero o más coincidencias, reunidas en una lista. Nunca falla."""
    def collect(results: List[Any], value: Any) -> List[Any]:
        results.append(value)
        return results

    def parse(source: Optional[InputSource]) -> ParseResult:
        return repeat_and_fold_left(parser, [], collect)(source)
    return parse


def once_or_more(parser: Parser) -> Parser:
    def parse(source: Optional[InputSource]) -> ParseResult:
        result = repeated(parser)(source)
        if not result.value:
            return Failure(source)
        return result
    return parse


def bind(parser: Parser, constructor: Callable[[Any], Parser]) -> Parser:
    """
    Construye el siguiente parser a partir del resultado del primero y lo
    ejecuta sobre la entrada restante. Permite gramáticas que dependen de
    lo ya parseado.
    """
    def parse(source: Optional[InputSource]) -> ParseResult:
        result = parser(source)
        if isinstance(result, Failure):
            return result
        next_result = constructor(result.value)(result.remaining)
        if isinstance(next_result, Failure):
            return Failure(source)
        return next_result
    return parse
