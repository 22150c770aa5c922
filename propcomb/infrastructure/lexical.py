"""
lexical.py — Parsers de tokens construidos con `expect_several`
==============================================================

    identifier   [A-Za-z_][A-Za-z0-9_]*
    number       [0-9]+              (resultado en texto, conviértelo tú)
    spaces       [ \\t\\r\\n]*          (siempre funciona, "" si no hay)

Cada parser de token de una gramática se envuelve en
`skip_leading_spaces`, que da la separación implícita entre tokens.
"""

from .combinators import (
    NOTHING,
    Parser,
    and_then,
    convert,
    expect_several,
    expect_string,
    optional,
    second,
)


def is_identifier_start_char(code_point: str) -> bool:
    return ("a" <= code_point <= "z"
            or "A" <= code_point <= "Z"
            or code_point == "_")


def is_digit(code_point: str) -> bool:
    return "0" <= code_point <= "9"


def is_identifier_char(code_point: str) -> bool:
    return is_identifier_start_char(code_point) or is_digit(code_point)


def is_space_char(code_point: str) -> bool:
    return code_point in (" ", "\n", "\r", "\t")


expect_identifier: Parser = expect_several(is_identifier_start_char, is_identifier_char)

expect_number: Parser = expect_several(is_digit, is_digit)

expect_spaces: Parser = convert(
    optional(expect_several(is_space_char, is_space_char)),
    lambda spaces: "" if spaces is NOTHING else spaces,
)


def skip_leading_spaces(parser: Parser) -> Parser:
    """Admite e ignora espacios antes de `parser`."""
    return second(and_then(expect_spaces, parser))


def expect(text: str) -> Parser:
    """Texto literal, con espacios opcionales delante."""
    return skip_leading_spaces(expect_string(text))
