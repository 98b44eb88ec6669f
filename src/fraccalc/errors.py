"""
Exceptions raised while evaluating an expression.

Every error raised by the tokenizer, evaluator and formatter derives from
CalculatorError, so callers can catch a single type at the prompt boundary.
"""


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    pass


class ParseError(CalculatorError):
    """Raised when a token cannot be read as a number or symbol."""
    pass


class MalformedExpressionError(CalculatorError):
    """Raised when operands and operators do not form a single value."""
    pass


class StackUnderflowError(MalformedExpressionError):
    """Raised when an operand or a matching '(' is missing from its stack."""
    pass


class DivisionAnomalyError(CalculatorError):
    """Raised when a division by zero leaves a non-finite result."""
    pass


class NullInputError(CalculatorError):
    """Raised when there is no input to evaluate."""
    pass


class ResultOverflowError(CalculatorError):
    """Raised when a result is too large to format."""
    pass
