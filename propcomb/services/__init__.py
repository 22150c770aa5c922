"""Services layer - grammars and business logic orchestration."""

from .prop_service import PropService, PropReport, ParsedFormula, get_prop_service
from .grammar import parse_or, keyword_advisory
from .calculator import CalcOutcome, calculate
from .environment import Issue, environment_from_mapping, load_environment

__all__ = [
    "PropService",
    "PropReport",
    "ParsedFormula",
    "get_prop_service",
    "parse_or",
    "keyword_advisory",
    "CalcOutcome",
    "calculate",
    "Issue",
    "environment_from_mapping",
    "load_environment",
]
