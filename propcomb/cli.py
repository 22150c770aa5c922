"""
Línea de comandos de propcomb.

Usage:
  prop [environment.json] 'expression'
      Simplifica una fórmula proposicional. El archivo JSON (opcional) es
      un objeto plano cuyos valores son booleanos o cadenas.

  calc 'expression'
      Evalúa aritmética entera (+ - * /, paréntesis).
"""

import argparse
import logging
from typing import List, Optional

from .config import settings
from .errors import CalculationError, InputParseError
from .services.calculator import calculate
from .services.environment import load_environment
from .services.prop_service import get_prop_service

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(levelname)s: %(message)s",
    )


def _print_remaining(remaining: Optional[str]) -> None:
    if remaining is not None:
        print(f"There's some remaining input: {remaining}")


def build_prop_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prop",
        description="Basic boolean expression simplifier. "
                    "Evaluates boolean expressions in an environment.",
    )
    parser.add_argument(
        "environment", nargs="?", default=None,
        help="JSON object mapping variable names to booleans or strings",
    )
    parser.add_argument("formula", help="formula, e.g. 'NOT (a AND b)'")
    return parser


def build_calc_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Evaluate primary school arithmetic expressions.",
    )
    parser.add_argument("expression", help="expression, e.g. '1 + 2 * (3 - 4)'")
    return parser


def prop_main(argv: Optional[List[str]] = None) -> int:
    args = build_prop_parser().parse_args(argv)
    _setup_logging()

    env = {}
    if args.environment is not None:
        try:
            env, _ = load_environment(args.environment)
        except OSError as e:
            logger.error(f"Can't open the environment file: {e}")
            return 1

    try:
        report = get_prop_service().evaluate(args.formula, env)
    except InputParseError:
        print("Can't parse the input!")
        return 1

    print(f"parsed expression = {report.parsed}")
    print(f"simplified result = {report.simplified}")
    _print_remaining(report.remaining)
    return 0


def calc_main(argv: Optional[List[str]] = None) -> int:
    args = build_calc_parser().parse_args(argv)
    _setup_logging()

    try:
        outcome = calculate(args.expression)
    except InputParseError:
        print("Couldn't read the input!")
        return 1
    except CalculationError as e:
        print(f"Error: {e}")
        return 1

    print(f"result = {outcome.value}")
    _print_remaining(outcome.remaining)
    return 0


if __name__ == "__main__":
    raise SystemExit(prop_main())
