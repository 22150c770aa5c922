"""Modelos de términos de la lógica proposicional.

Define las clases Pydantic que representan la estructura de una fórmula:
- Literales: Bool, Str
- Términos: Value, Identifier, Equation, Not, And, Or

Todos los modelos son inmutables (frozen). La igualdad es estructural:
compara la variante y los campos, sin coerción entre variantes.

`str(term)` produce la forma textual canónica, que el parser vuelve a
aceptar:
    Not       →  (NOT x)
    And / Or  →  (l AND r) / (l OR r)
    Equation  →  l=r
    Str       →  "..." con las comillas internas escapadas como \\"
    Bool      →  TRUE / FALSE
"""

from typing import Annotated, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class TermModel(BaseModel):
    """Clase base inmutable de literales y términos."""
    model_config = ConfigDict(frozen=True)


# LITERALES

class Bool(TermModel):
    """Literal booleano (TRUE / FALSE)."""
    kind: Literal["bool"] = "bool"
    value: StrictBool

    def __str__(self) -> str:
        return "TRUE" if self.value else "FALSE"


class Str(TermModel):
    """Literal de texto."""
    kind: Literal["str"] = "str"
    value: StrictStr

    def __str__(self) -> str:
        return '"' + self.value.replace('"', '\\"') + '"'


LiteralValue = Annotated[Union[Bool, Str], Field(discriminator="kind")]


# TÉRMINOS

class Value(TermModel):
    """Envuelve un literal; no se puede simplificar más."""
    kind: Literal["value"] = "value"
    literal: LiteralValue

    def __str__(self) -> str:
        return str(self.literal)


class Identifier(TermModel):
    """
    Variable de la fórmula.

    Atributos:
        name (str): clave con la que se busca su valor en el entorno.
    """
    kind: Literal["identifier"] = "identifier"
    name: str

    def __str__(self) -> str:
        return self.name


class Equation(TermModel):
    """Ecuación de la forma X=Y."""
    kind: Literal["equation"] = "equation"
    left: "Term"
    right: "Term"

    def __str__(self) -> str:
        return _equation_side(self.left) + "=" + _equation_side(self.right)


class Not(TermModel):
    """Negación."""
    kind: Literal["not"] = "not"
    arg: "Term"

    def __str__(self) -> str:
        return f"(NOT {self.arg})"


class And(TermModel):
    """Conjunción."""
    kind: Literal["and"] = "and"
    left: "Term"
    right: "Term"

    def __str__(self) -> str:
        return _render_chain(self, "AND")


class Or(TermModel):
    """Disyunción."""
    kind: Literal["or"] = "or"
    left: "Term"
    right: "Term"

    def __str__(self) -> str:
        return _render_chain(self, "OR")


# Conjunto total de términos válidos
Term = Annotated[
    Union[Value, Identifier, Equation, Not, And, Or],
    Field(discriminator="kind"),
]

# Entorno: nombre de variable → literal
Environment = Mapping[str, Union[Bool, Str]]


def _render_chain(term: "Term", operator: str) -> str:
    # recorre la espina derecha de nodos del mismo tipo sin recursión
    kind = type(term)
    parts = []
    while isinstance(term, kind):
        parts.append(f"({term.left} {operator} ")
        term = term.right
    return "".join(parts) + str(term) + ")" * len(parts)


def _equation_side(term: "Term") -> str:
    # a=b=c no se puede volver a parsear; la ecuación anidada va entre paréntesis
    if isinstance(term, Equation):
        return f"({term})"
    return str(term)


# RECONSTRUCCIÓN DE REFERENCIAS CIRCULARES

for _M in (Equation, Not, And, Or):
    _M.model_rebuild()


# FÁBRICAS

def lit(x: Union[bool, str]) -> Union[Bool, Str]:
    if isinstance(x, bool):
        return Bool(value=x)
    return Str(value=x)


def value(x: Union[bool, str]) -> Value:
    return Value(literal=lit(x))


def ident(name: str) -> Identifier:
    return Identifier(name=name)


TRUE = value(True)
FALSE = value(False)
