"""
fraccalc - Fraction/Decimal Calculator

An interactive command-line calculator for decimals and simple fractions.
Expressions are tokenized, converted to postfix with the shunting-yard
algorithm, evaluated on a stack, and the result is shown as the closest
fraction when the input used fraction syntax.
"""

from fraccalc.calculator import evaluate, match_percentage, try_evaluate
from fraccalc.errors import (
    CalculatorError,
    DivisionAnomalyError,
    MalformedExpressionError,
    NullInputError,
    ResultOverflowError,
    ParseError,
    StackUnderflowError,
)
from fraccalc.models import EvaluationOutcome, EvaluationResult

__version__ = "1.0.0"
__author__ = "fraccalc Team"

__all__ = [
    "evaluate",
    "try_evaluate",
    "match_percentage",
    "EvaluationResult",
    "EvaluationOutcome",
    "CalculatorError",
    "ParseError",
    "MalformedExpressionError",
    "StackUnderflowError",
    "DivisionAnomalyError",
    "NullInputError",
    "ResultOverflowError",
]
