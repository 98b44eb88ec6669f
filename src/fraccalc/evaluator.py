"""
Postfix (Reverse Polish) evaluator.

Consumes the token sequence produced by ``tokenizer.to_postfix`` with a
single operand stack. All arithmetic is double precision; dividing by zero
gives an infinite or nan value rather than an exception.
"""

import structlog

from fraccalc.errors import MalformedExpressionError, ParseError, StackUnderflowError
from fraccalc.models import Token
from fraccalc.operators import OPERATORS

logger = structlog.get_logger()


def parse_number(text: str) -> float:
    """
    Parse a number literal.

    A literal with a single '/' is an inline fraction and evaluates to
    numerator / denominator. Literals with more than one '/' are rejected.
    """
    parts = text.split("/")
    if len(parts) > 2:
        raise ParseError(f"Invalid number: {text!r} has more than one '/'")

    try:
        values = [float(part) for part in parts]
    except ValueError:
        raise ParseError(f"Invalid number: {text!r}") from None

    if len(values) == 2:
        return OPERATORS["/"].apply(values[0], values[1])
    return values[0]


def _pop(stack: list[float], token: Token) -> float:
    if not stack:
        raise StackUnderflowError(
            f"Missing operand for {token.text!r} at column {token.position + 1}"
        )
    return stack.pop()


def evaluate_postfix(postfix: list[Token]) -> float:
    """Evaluate a postfix token sequence to a single value."""
    stack: list[float] = []

    for token in postfix:
        if token.is_operator:
            b = _pop(stack, token)
            a = _pop(stack, token)
            stack.append(OPERATORS[token.text].apply(a, b))
        else:
            stack.append(parse_number(token.text))

    if not stack:
        raise StackUnderflowError("Empty expression")
    if len(stack) > 1:
        raise MalformedExpressionError(
            f"Missing operator: {len(stack)} values left after evaluation"
        )

    logger.debug("Evaluated postfix", tokens=len(postfix), value=stack[0])
    return stack[0]
