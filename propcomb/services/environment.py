"""
environment.py — Carga del entorno de variables
===============================================

Responsabilidad única: convertir un objeto JSON plano en el entorno
(nombre → literal) que usa el simplificador.

    {"x": true, "name": "熊猫"}  →  {"x": Bool(True), "name": Str("熊猫")}

Los valores que no son booleanos ni cadenas se omiten con una
advertencia; la carga continúa con el resto de claves.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import BaseModel

from ..domain.terms import Bool, Str

logger = logging.getLogger(__name__)


class Issue(BaseModel):
    """Advertencia no fatal.

    Attributes:
        severity: Nivel de severidad (error, warning)
        msg: Mensaje descriptivo
        where: Ubicación opcional del problema
    """
    severity: str
    msg: str
    where: str | None = None


EnvDict = Dict[str, Union[Bool, Str]]


def environment_from_mapping(data: Any) -> Tuple[EnvDict, List[Issue]]:
    """
    Construye el entorno a partir de un objeto JSON ya decodificado.

    Args:
        data: Objeto decodificado (se espera un dict plano)

    Returns:
        (entorno, advertencias)
    """
    env: EnvDict = {}
    issues: List[Issue] = []

    if not isinstance(data, dict):
        issues.append(_warn("The environment must be a JSON object", None))
        return env, issues

    for key, raw in data.items():
        if isinstance(raw, bool):
            env[key] = Bool(value=raw)
        elif isinstance(raw, str):
            env[key] = Str(value=raw)
        else:
            issues.append(_warn(f"Invalid value type for key '{key}'!", key))
    return env, issues


def load_environment(path: Union[str, Path]) -> Tuple[EnvDict, List[Issue]]:
    """
    Lee el entorno desde un archivo JSON.

    Args:
        path: Ruta del archivo

    Returns:
        (entorno, advertencias)

    Raises:
        FileNotFoundError: Si no se encuentra el archivo
        OSError: Si el archivo no se puede abrir
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Environment file not found: {path}")

    with open(path, "rb") as f:
        raw = f.read()

    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        return {}, [_warn(f"Environment file {path.name} is not valid UTF-8: {e}", None)]
    except json.JSONDecodeError as e:
        return {}, [_warn(f"Malformed JSON in {path.name}: {e}", None)]

    return environment_from_mapping(data)


def _warn(msg: str, where: str | None) -> Issue:
    logger.warning(msg)
    return Issue(severity="warning", msg=msg, where=where)
