"""
Formatting helpers for showing answers and errors.

Answers are rounded to a fixed number of decimal places before display,
and very large magnitudes switch to scientific notation.
"""

import math

import numpy as np

from .evaluator.builtins import round_half_away_from_zero
from .lexer.errors import CalculationError

SCIENTIFIC_THRESHOLD = 1E9


def to_fixed(value: float, places: int = 7) -> float:
    """Round to ``places`` decimals, halves away from zero."""
    if not math.isfinite(value):
        return value
    scale = 10.0 ** places
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    return float(round_half_away_from_zero(np.float64(scaled)) / scale)


def format_answer(value: float, places: int = 7) -> str:
    """
    Render an answer for display.

    >>> format_answer(3.0)
    '3'
    >>> format_answer(1 / 3)
    '0.3333333'
    >>> format_answer(2.5e10)
    '2.5E10'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    fixed = to_fixed(value, places)
    if fixed == 0:
        fixed = 0.0  # drop the sign of negative zero

    if abs(fixed) > SCIENTIFIC_THRESHOLD:
        mantissa, exponent = f"{fixed:.{places}E}".split("E")
        if "." in mantissa:
            mantissa = mantissa.rstrip("0").rstrip(".")
        return f"{mantissa}E{int(exponent)}"

    text = f"{fixed:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def describe_error(error: CalculationError) -> str:
    """One-line human-readable message for an error."""
    return error.message
