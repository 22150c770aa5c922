"""Excepciones del dominio.

Los fallos de parseo dentro del motor son valores (`Failure`), nunca
excepciones. Solo en la frontera de los servicios se convierten en
`InputParseError`, igual que los errores de sintaxis se convierten en
`ValueError`.
"""


class InputParseError(ValueError):
    """No se pudo parsear la entrada."""


class CalculationError(ValueError):
    """Error aritmético al evaluar una expresión (p. ej. división por cero)."""
