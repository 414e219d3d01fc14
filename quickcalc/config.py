"""
Configuration for the quickcalc pipeline.

A single frozen dataclass carries every knob the lexer, parser and
evaluator understand. Instances are immutable, so one config can be
shared freely between calls and threads.

Author: xwest
"""

from dataclasses import dataclass, replace
from enum import Enum


class AngleMode(Enum):
    """Unit used by the trigonometric functions."""
    RADIANS = "Rad"
    DEGREES = "Deg"

    @property
    def is_degrees(self) -> bool:
        return self is AngleMode.DEGREES

    def toggled(self) -> "AngleMode":
        """Return the other mode (the Deg/Rad switch)."""
        if self is AngleMode.DEGREES:
            return AngleMode.RADIANS
        return AngleMode.DEGREES

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Options shared by every stage of an evaluation.

    Attributes:
        angle_mode: Unit for sin/cos/tan arguments and asin/acos/atan results
        negation_binds_tighter: If True, unary minus binds tighter than '^'
            so that -2^2 == 4. The default keeps -2^2 == -(2^2) == -4.
        implicit_multiplication: Read juxtaposition such as 2pi or 3(4)
            as a product
        allow_infinity: If False, an infinite intermediate or final value
            is reported as a domain error instead of being returned
        max_depth: Deepest nesting of parentheses, signs and exponents
            accepted; flat chains such as 1 + 1 + ... + 1 are not limited
    """
    angle_mode: AngleMode = AngleMode.RADIANS
    negation_binds_tighter: bool = False
    implicit_multiplication: bool = True
    allow_infinity: bool = True
    max_depth: int = 100

    def __post_init__(self):
        if not isinstance(self.angle_mode, AngleMode):
            raise TypeError(f"angle_mode must be an AngleMode, got {self.angle_mode!r}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    def with_options(self, **changes) -> "CalculatorConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = CalculatorConfig()
