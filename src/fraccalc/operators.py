"""
Binary operator table.

Each operator kind maps to a fixed precedence, associativity and a pure
numeric function. The table is built once at import time and exposed as a
read-only mapping keyed by the operator symbol.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping


class OperatorKind(str, Enum):
    """The five supported binary operators, valued by their symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    PERCENT_OF = "%"


def divide(a: float, b: float) -> float:
    """IEEE 754 division: a zero divisor gives +/-inf or nan instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def percent_of(a: float, b: float) -> float:
    """Express a as a percentage of b."""
    return divide(a, b) * 100


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


@dataclass(frozen=True)
class OperatorDescriptor:
    """Precedence, associativity and implementation of one operator."""
    kind: OperatorKind
    precedence: int
    left_associative: bool
    apply: Callable[[float, float], float]

    @property
    def symbol(self) -> str:
        return self.kind.value


_DISPATCH: dict[OperatorKind, tuple[int, Callable[[float, float], float]]] = {
    OperatorKind.ADD: (1, add),
    OperatorKind.SUBTRACT: (1, subtract),
    OperatorKind.MULTIPLY: (2, multiply),
    OperatorKind.DIVIDE: (2, divide),
    OperatorKind.PERCENT_OF: (2, percent_of),
}

OPERATORS: Mapping[str, OperatorDescriptor] = MappingProxyType({
    kind.value: OperatorDescriptor(
        kind=kind,
        precedence=precedence,
        left_associative=True,
        apply=func,
    )
    for kind, (precedence, func) in _DISPATCH.items()
})


def is_operator(symbol: str) -> bool:
    """Check whether a symbol names a binary operator."""
    return symbol in OPERATORS


def get_operator(symbol: str) -> OperatorDescriptor:
    """Look up the descriptor for an operator symbol."""
    return OPERATORS[symbol]
