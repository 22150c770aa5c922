from .terms import (
    TermModel, Bool, Str, LiteralValue,
    Value, Identifier, Equation, Not, And, Or,
    Term, Environment,
    lit, value, ident, TRUE, FALSE,
)

from .simplifier import simplify, bool_of

__all__ = [
    "TermModel", "Bool", "Str", "LiteralValue",
    "Value", "Identifier", "Equation", "Not", "And", "Or",
    "Term", "Environment",
    "lit", "value", "ident", "TRUE", "FALSE",
    "simplify", "bool_of",
]
