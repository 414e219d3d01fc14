"""
quickcalc Evaluator Package

Reduces expression trees to numbers:
- IEEE-754 binary64 arithmetic (numpy.float64)
- Built-in constants (pi, e) and functions (sin, sqrt, log, ...)
- Degree / radian angle modes
- Division-by-zero and domain checks, NaN never returned

Author: xwest
"""

from .evaluator import Evaluator, evaluate_expression
from .builtins import CONSTANTS, FUNCTIONS, MathFunction
from .errors import (
    SemanticError, EvaluationError, UnknownIdentifier, DomainError, DivisionByZero,
)

__all__ = [
    # Main evaluator
    "Evaluator",
    "evaluate_expression",

    # Built-in tables
    "CONSTANTS", "FUNCTIONS", "MathFunction",

    # Error handling
    "SemanticError", "EvaluationError",
    "UnknownIdentifier", "DomainError", "DivisionByZero",
]
