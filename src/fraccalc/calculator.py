"""
Calculator entry points.

``evaluate`` runs one input line through the pipeline:

1. Percentage phrase ("what percent of 25 is 5?")
2. Tokenizer and shunting-yard conversion to postfix
3. Postfix evaluation
4. Rounding and fraction formatting

``try_evaluate`` wraps it and returns an explicit outcome instead of raising,
for use at the prompt boundary.
"""

import math
import re

import structlog

from fraccalc import config
from fraccalc.config import Settings
from fraccalc.errors import CalculatorError, DivisionAnomalyError, NullInputError
from fraccalc.evaluator import evaluate_postfix
from fraccalc.formatter import format_decimal, format_result, round_result
from fraccalc.models import EvaluationOutcome, EvaluationResult
from fraccalc.tokenizer import to_postfix

logger = structlog.get_logger()

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"

PERCENT_PATTERN = re.compile(
    rf"what\s+percent\s+of\s+{_NUMBER}\s+is\s+{_NUMBER}",
    re.IGNORECASE,
)


def match_percentage(expression: str, precision: int = 2) -> EvaluationResult | None:
    """
    Answer "what percent of <whole> is <part>" queries.

    Returns None when the expression is not such a query.
    """
    match = PERCENT_PATTERN.search(expression)
    if not match:
        return None

    whole = float(match.group(1))
    part = float(match.group(2))
    if whole == 0:
        raise DivisionAnomalyError(f"Cannot take a percentage of {format_decimal(whole)}")

    percent = round_result((part / whole) * 100, precision)
    if not math.isfinite(percent):
        raise DivisionAnomalyError(f"Percentage is not finite (result is {percent})")
    return EvaluationResult(
        value=percent,
        fraction_text=format_decimal(percent),
        is_percent=True,
    )


def evaluate(expression: str | None, settings: Settings | None = None) -> EvaluationResult:
    """
    Evaluate one input line.

    Raises a CalculatorError subclass when the line cannot be evaluated.
    """
    settings = settings or config.settings

    if expression is None:
        raise NullInputError("No input")

    percent = match_percentage(expression, settings.precision)
    if percent is not None:
        return percent

    had_fraction = "/" in expression
    postfix = to_postfix(expression, strict=settings.strict_tokens)
    raw = evaluate_postfix(postfix)

    if not math.isfinite(raw):
        raise DivisionAnomalyError(f"Division by zero (result is {raw})")

    value = round_result(raw, settings.precision)
    return EvaluationResult(
        value=value,
        fraction_text=format_result(value, had_fraction, settings.max_denominator),
        is_percent=False,
    )


def try_evaluate(expression: str | None, settings: Settings | None = None) -> EvaluationOutcome:
    """Evaluate one input line, returning the error instead of raising it."""
    try:
        result = evaluate(expression, settings)
    except CalculatorError as e:
        logger.warning(
            "Evaluation failed",
            expression=expression,
            error_type=type(e).__name__,
            error=str(e),
        )
        return EvaluationOutcome(
            expression=expression,
            error=str(e),
            error_type=type(e).__name__,
        )
    return EvaluationOutcome(expression=expression, result=result)
