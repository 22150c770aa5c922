"""
prop_service.py — Servicio principal de lógica proposicional
============================================================

Responsabilidad: orquestar el flujo completo parseo → simplificación.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.simplifier import simplify
from ..domain.terms import And, Environment, Equation, Identifier, Not, Or, Term
from ..errors import InputParseError
from ..infrastructure.combinators import Failure
from ..infrastructure.input_source import remaining_text, string_to_input
from ..infrastructure.lexical import expect_spaces
from .environment import Issue
from .grammar import keyword_advisory, parse_or

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedFormula:
    term: Term
    remaining: Optional[str] = None


@dataclass(frozen=True)
class PropReport:
    """
    Resultado completo de evaluar una fórmula.

    Atributos:
        parsed: término tal como se parseó
        simplified: término tras sustituir el entorno y simplificar
        remaining: entrada sin consumir (None si se consumió todo)
        issues: avisos sobre identificadores sospechosos
    """
    parsed: Term
    simplified: Term
    remaining: Optional[str] = None
    issues: List[Issue] = field(default_factory=list)


def identifiers_of(term: Term) -> List[str]:
    """Nombres de variables en orden de aparición (con repeticiones)."""
    names: List[str] = []
    stack = [term]
    while stack:
        node = stack.pop()
        if isinstance(node, Identifier):
            names.append(node.name)
        elif isinstance(node, Not):
            stack.append(node.arg)
        elif isinstance(node, (Equation, And, Or)):
            stack.append(node.right)
            stack.append(node.left)
    return names


class PropService:
    """
    Servicio que orquesta todo el flujo.

    Flujo:
    1. Gramática de combinadores → término
    2. Simplificador → término reducido
    3. Avisos sobre identificadores parecidos a palabras clave
    """

    def parse(self, text: str) -> ParsedFormula:
        """
        Parsea una fórmula.

        Args:
            text: Fórmula a parsear

        Returns:
            ParsedFormula con el término y la entrada sobrante

        Raises:
            InputParseError: Si no se puede parsear la entrada
        """
        try:
            result = parse_or(string_to_input(text))
        except RecursionError as e:
            # anidamiento de paréntesis más profundo que la pila de Python
            logger.warning("Formula nested too deeply to parse")
            raise InputParseError("Can't parse the input!") from e
        if isinstance(result, Failure):
            raise InputParseError("Can't parse the input!")
        rest = expect_spaces(result.remaining).remaining
        return ParsedFormula(term=result.value, remaining=remaining_text(rest))

    def simplify(self, term: Term, env: Environment) -> Term:
        return simplify(term, env)

    def evaluate(self, text: str, env: Environment) -> PropReport:
        parsed = self.parse(text)
        issues = []
        for name in dict.fromkeys(identifiers_of(parsed.term)):
            advisory = keyword_advisory(name)
            if advisory is not None:
                issues.append(Issue(severity="warning", msg=advisory, where=name))
        return PropReport(
            parsed=parsed.term,
            simplified=self.simplify(parsed.term, env),
            remaining=parsed.remaining,
            issues=issues,
        )


# Instancia singleton para uso en routes
_prop_service = None


def get_prop_service() -> PropService:
    """Factory para obtener instancia singleton del servicio."""
    global _prop_service
    if _prop_service is None:
        _prop_service = PropService()
    return _prop_service
