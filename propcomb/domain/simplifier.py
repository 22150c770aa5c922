"""
simplifier.py — Simplificación de términos
==========================================

Sustituye las variables del entorno y elimina subfórmulas redundantes:

    x=x            →  TRUE
    "a"="b"        →  FALSE        (dos valores distintos)
    NOT TRUE       →  FALSE
    NOT NOT x      →  x
    FALSE AND x    →  FALSE        TRUE AND x  →  x
    TRUE OR x      →  TRUE         FALSE OR x  →  x

Los nodos que no cambian se devuelven como el mismo objeto.
"""

from __future__ import annotations

from typing import Optional, Type, Union

from .terms import (
    And,
    Bool,
    Environment,
    Equation,
    Identifier,
    Not,
    Or,
    Term,
    Value,
    value,
)


def simplify(term: Term, env: Environment) -> Term:
    """
    Sustituye las variables de `env` en `term` y simplifica.

    Es pura: `term` nunca se modifica. Cada nodo se visita una sola vez,
    así que el coste es lineal en el tamaño del árbol, y el resultado es
    un punto fijo (`simplify(simplify(t, env), env) == simplify(t, env)`).

    Args:
        term: Término a simplificar
        env: Entorno nombre → literal

    Returns:
        Término simplificado

    Raises:
        TypeError: Si `term` no es un término
    """
    if isinstance(term, Value):
        return term
    if isinstance(term, Identifier):
        return _simplify_identifier(term, env)
    if isinstance(term, Equation):
        return _simplify_equation(term, env)
    if isinstance(term, Not):
        return _simplify_not(term, env)
    if isinstance(term, And):
        return _simplify_chain(term, env, And, absorbing=False)
    if isinstance(term, Or):
        return _simplify_chain(term, env, Or, absorbing=True)
    raise TypeError(f"not a term: {term!r}")


def bool_of(term: Term) -> Optional[bool]:
    """El booleano de un término `Value(Bool)`; None para cualquier otro."""
    if isinstance(term, Value) and isinstance(term.literal, Bool):
        return term.literal.value
    return None


def _simplify_identifier(term: Identifier, env: Environment) -> Term:
    bound = env.get(term.name)
    if bound is None:
        return term
    return Value(literal=bound)


def _simplify_equation(term: Equation, env: Environment) -> Term:
    left = simplify(term.left, env)
    right = simplify(term.right, env)
    if left == right:
        return value(True)
    if isinstance(left, Value) and isinstance(right, Value):
        return value(False)
    if left is term.left and right is term.right:
        return term
    return Equation(left=left, right=right)


def _simplify_not(term: Not, env: Environment) -> Term:
    arg = simplify(term.arg, env)
    b = bool_of(arg)
    if b is not None:
        return value(not b)
    # doble negación
    if isinstance(arg, Not):
        return arg.arg
    if arg is term.arg:
        return term
    return Not(arg=arg)


def _simplify_chain(term: Union[And, Or], env: Environment,
                    node: Type[Union[And, Or]], absorbing: bool) -> Term:
    """
    Simplifica una cadena `a OP (b OP (c ...))` de nodos del mismo tipo.

    La espina derecha se recorre con un bucle y se reconstruye desde el
    final, así que la pila no crece con la longitud de la cadena.
    `absorbing` es el booleano que decide el resultado (FALSE para AND,
    TRUE para OR); el otro es el neutro.
    """
    spine = []
    while isinstance(term, node):
        spine.append(term)
        term = term.right

    result = simplify(term, env)
    for link in reversed(spine):
        result = _combine(link, simplify(link.left, env), result, absorbing)
    return result


def _combine(link: Union[And, Or], left: Term, right: Term, absorbing: bool) -> Term:
    b = bool_of(left)
    if b is not None:
        return left if b == absorbing else right

    b = bool_of(right)
    if b is not None:
        return right if b == absorbing else left

    if left is link.left and right is link.right:
        return link
    return type(link)(left=left, right=right)
