"""
Core data models for fraccalc.

Defines the tokens produced by the tokenizer and the result schemas
returned by the calculator entry points.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


# =============================================================================
# Tokens
# =============================================================================

class TokenKind(str, Enum):
    """Lexical class of a token."""
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


@dataclass(frozen=True)
class Token:
    """A single lexeme of an expression."""
    kind: TokenKind
    text: str
    position: int = 0  # 0-based column in the input line

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Results
# =============================================================================

class EvaluationResult(BaseModel):
    """
    Result of evaluating one input line.

    For the percentage-query path ``is_percent`` is set and ``fraction_text``
    is the decimal text of ``value``. Otherwise ``fraction_text`` is either a
    rational approximation ("3/4") or the decimal text of ``value``.
    """
    model_config = ConfigDict(frozen=True)

    value: float
    fraction_text: str
    is_percent: bool = False


class EvaluationOutcome(BaseModel):
    """Either a result or the error that prevented one."""
    model_config = ConfigDict(frozen=True)

    expression: str | None
    result: EvaluationResult | None = None
    error: str | None = None
    error_type: str | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "EvaluationOutcome":
        if (self.result is None) == (self.error is None):
            raise ValueError("Outcome must carry exactly one of result or error")
        return self

    @property
    def ok(self) -> bool:
        return self.result is not None
