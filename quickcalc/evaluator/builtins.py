"""
Named constants and functions available to expressions.

Both tables are fixed and read-only. Functions take and return
numpy.float64 values; domain checks are separate so the evaluator can
report a violation before anything is computed.

Author: xwest
"""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from ..config import AngleMode


CONSTANTS = {
    "pi": np.pi,
    "π": np.pi,
    "e": np.e,
}


def round_half_away_from_zero(x):
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = np.floor(np.abs(x))
    if np.abs(x) - magnitude >= 0.5:
        magnitude += 1
    return np.copysign(magnitude, x)


@dataclass(frozen=True)
class MathFunction:
    """
    A single-argument function callable from an expression.

    Attributes:
        name: Name used in expressions
        apply: The numpy implementation, always working in radians
        description: One-line summary for help output
        angle: "argument" if the input is an angle, "result" if the output
            is, None otherwise
        domain: Predicate the argument must satisfy, if restricted
        domain_reason: Explanation reported when the predicate fails
    """
    name: str
    apply: Callable
    description: str
    angle: Optional[str] = None
    domain: Optional[Callable[[float], bool]] = None
    domain_reason: str = ""

    def domain_violation(self, argument) -> Optional[str]:
        """Return why the argument is outside the domain, or None."""
        if self.domain is not None and not self.domain(argument):
            return self.domain_reason
        return None

    def __call__(self, argument, angle_mode: AngleMode = AngleMode.RADIANS):
        if self.angle == "argument" and angle_mode.is_degrees:
            argument = np.deg2rad(argument)
        result = self.apply(argument)
        if self.angle == "result" and angle_mode.is_degrees:
            result = np.rad2deg(result)
        return np.float64(result)


def _unit_interval(x) -> bool:
    return -1.0 <= x <= 1.0


FUNCTIONS = {
    fn.name: fn for fn in [
        MathFunction("sin", np.sin, "sine", angle="argument"),
        MathFunction("cos", np.cos, "cosine", angle="argument"),
        MathFunction("tan", np.tan, "tangent", angle="argument"),
        MathFunction("asin", np.arcsin, "inverse sine", angle="result",
                     domain=_unit_interval,
                     domain_reason="inverse sine is only defined on [-1, 1]"),
        MathFunction("acos", np.arccos, "inverse cosine", angle="result",
                     domain=_unit_interval,
                     domain_reason="inverse cosine is only defined on [-1, 1]"),
        MathFunction("atan", np.arctan, "inverse tangent", angle="result"),
        MathFunction("sqrt", np.sqrt, "square root",
                     domain=lambda x: x >= 0,
                     domain_reason="square root of a negative number"),
        MathFunction("ln", np.log, "natural logarithm",
                     domain=lambda x: x > 0,
                     domain_reason="logarithm of a non-positive number"),
        MathFunction("log", np.log10, "base-10 logarithm",
                     domain=lambda x: x > 0,
                     domain_reason="logarithm of a non-positive number"),
        MathFunction("abs", np.abs, "absolute value"),
        MathFunction("floor", np.floor, "round down"),
        MathFunction("ceil", np.ceil, "round up"),
        MathFunction("round", round_half_away_from_zero, "round to nearest, halves away from zero"),
    ]
}


def known_names():
    """All names an expression may refer to."""
    return list(CONSTANTS) + list(FUNCTIONS)
