"""Esquemas de entrada/salida de la API.

Define los modelos de petición y respuesta para los endpoints:
- `/prop`: parseo y simplificación de fórmulas proposicionales
- `/calculate`: evaluación de expresiones aritméticas

Utiliza Pydantic para validación automática y serialización JSON.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .config import settings
from .services.environment import Issue


def _check_length(v: str) -> str:
    if len(v) > settings.MAX_INPUT_LENGTH:
        raise ValueError(
            f"input longer than {settings.MAX_INPUT_LENGTH} characters"
        )
    return v


# MODELOS DE PETICIÓN

class PropReq(BaseModel):
    """
    Modelo de solicitud para el endpoint `/prop`.

    Atributos:
        formula (str): fórmula a parsear.
        environment (Dict[str, Any]): objeto plano nombre → bool | str.
            Los valores de otro tipo se omiten con una advertencia.
    """
    formula: str
    environment: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("formula")
    @classmethod
    def limit_formula(cls, v: str) -> str:
        return _check_length(v)


class CalcReq(BaseModel):
    """
    Modelo de solicitud para el endpoint `/calculate`.

    Atributos:
        expression (str): expresión aritmética.
    """
    expression: str

    @field_validator("expression")
    @classmethod
    def limit_expression(cls, v: str) -> str:
        return _check_length(v)


# MODELOS DE RESPUESTA

class PropResp(BaseModel):
    """
    Respuesta del endpoint `/prop`.

    Atributos:
        ok (bool): indica si el parseo fue exitoso.
        parsed (Optional[str]): forma canónica del término parseado.
        simplified (Optional[str]): forma canónica del término simplificado.
        parsed_ast / simplified_ast: términos serializados.
        remaining (Optional[str]): entrada sin consumir.
        errors (List[str]): errores (vacía si ok=True).
        warnings (List[Issue]): advertencias no fatales.
    """
    ok: bool
    parsed: Optional[str] = None
    simplified: Optional[str] = None
    parsed_ast: Optional[Dict[str, Any]] = None
    simplified_ast: Optional[Dict[str, Any]] = None
    remaining: Optional[str] = None
    errors: List[str] = Field(default_factory=list)
    warnings: List[Issue] = Field(default_factory=list)


class CalcResp(BaseModel):
    """
    Respuesta del endpoint `/calculate`.

    Atributos:
        ok (bool): indica si la expresión se pudo evaluar.
        result (Optional[int]): valor calculado.
        remaining (Optional[str]): entrada sin consumir.
        errors (List[str]): errores (vacía si ok=True).
    """
    ok: bool
    result: Optional[int] = None
    remaining: Optional[str] = None
    errors: List[str] = Field(default_factory=list)
