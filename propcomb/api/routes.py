"""Endpoints del servicio propcomb.

Responsabilidad única: manejar HTTP requests/responses.
"""

from fastapi import APIRouter

from .. import __version__
from ..schemas import CalcReq, CalcResp, PropReq, PropResp
from ..services.calculator import calculate
from ..services.environment import environment_from_mapping
from ..services.prop_service import get_prop_service

router = APIRouter()


@router.post("/prop", response_model=PropResp)
def prop(req: PropReq) -> PropResp:
    """Parsea una fórmula y la simplifica con el entorno recibido.

    Args:
        req: Solicitud con la fórmula y el entorno

    Returns:
        PropResp con ok=True + términos si éxito, ok=False + errors si fallo
    """
    env, env_issues = environment_from_mapping(req.environment)
    try:
        report = get_prop_service().evaluate(req.formula, env)

        return PropResp(
            ok=True,
            parsed=str(report.parsed),
            simplified=str(report.simplified),
            parsed_ast=report.parsed.model_dump(),
            simplified_ast=report.simplified.model_dump(),
            remaining=report.remaining,
            warnings=env_issues + report.issues,
        )

    except ValueError as e:
        return PropResp(ok=False, errors=[str(e)], warnings=env_issues)

    except Exception as e:
        return PropResp(
            ok=False,
            errors=[f"internal-error: {e}"],
            warnings=env_issues,
        )


@router.post("/calculate", response_model=CalcResp)
def calculate_expression(req: CalcReq) -> CalcResp:
    """Evalúa una expresión aritmética entera."""
    try:
        outcome = calculate(req.expression)
        return CalcResp(ok=True, result=outcome.value, remaining=outcome.remaining)

    except ValueError as e:
        return CalcResp(ok=False, errors=[str(e)])

    except Exception as e:
        return CalcResp(ok=False, errors=[f"internal-error: {e}"])


@router.get("/health")
def health():
    """Endpoint de salud del servicio."""
    return {
        "status": "ok",
        "service": "propcomb",
        "version": __version__,
    }
