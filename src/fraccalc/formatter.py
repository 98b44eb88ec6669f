"""
Result formatting.

Results are rounded to a fixed number of decimal places. When the input used
fraction syntax, the rounded value is shown as its best rational
approximation with a bounded denominator.
"""

import math

from fraccalc.errors import ResultOverflowError

DEFAULT_PRECISION = 2
DEFAULT_MAX_DENOMINATOR = 5000


def round_result(value: float, digits: int = DEFAULT_PRECISION) -> float:
    """Round half to even to the given number of decimal places."""
    return round(value, digits)


def format_decimal(value: float) -> str:
    """Shortest decimal text for a value, without a trailing '.0'."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def to_fraction(value: float, max_denominator: int = DEFAULT_MAX_DENOMINATOR) -> str:
    """
    Best rational approximation of value as "numerator/denominator".

    Scans every denominator from 1 to max_denominator and keeps the first
    candidate with the smallest error, so ties go to the smallest
    denominator. The sign is carried on the numerator.
    """
    sign = -1 if value < 0 else 1
    value = abs(value)
    if not math.isfinite(value * max_denominator):
        raise ResultOverflowError(f"Result is too large to show as a fraction: {value!r}")

    best_n, best_d = 1, 1
    best_err = abs(value - 1)

    for d in range(1, max_denominator + 1):
        n = round(value * d)
        err = abs(value - n / d)
        if err < best_err:
            best_err = err
            best_n = n
            best_d = d

    return f"{sign * best_n}/{best_d}"


def format_result(
    value: float,
    had_fraction: bool,
    max_denominator: int = DEFAULT_MAX_DENOMINATOR,
) -> str:
    """Fraction text when the input used '/', plain decimal text otherwise."""
    if had_fraction:
        return to_fraction(value, max_denominator)
    return format_decimal(value)
