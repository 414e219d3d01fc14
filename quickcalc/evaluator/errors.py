"""
Evaluation error handling for quickcalc.

Semantic errors (a name that means nothing, a function applied outside
its domain) and runtime errors (division by zero) found while reducing
an expression tree.

Author: xwest
"""

from typing import Optional, Iterable

from ..lexer.errors import CalculationError, ErrorKind, ErrorRecovery


class SemanticError(CalculationError):
    """Raised when a well-formed expression has no meaning."""
    category = "semantic"


class EvaluationError(CalculationError):
    """Raised when an arithmetic operation cannot be carried out."""
    category = "runtime"


class UnknownIdentifier(SemanticError):
    """A constant or function name that is not in the built-in tables."""
    kind = ErrorKind.UNKNOWN_IDENTIFIER

    def __init__(
        self,
        name: str,
        position: Optional[int] = None,
        candidates: Iterable[str] = (),
        help_text: Optional[str] = None
    ):
        self.name = name
        suggestions = [f"Did you mean '{candidate}'?"
                       for candidate in ErrorRecovery.suggest_corrections(name, candidates)]
        super().__init__(
            message=f"Unknown identifier \"{name}\"",
            position=position,
            code="S010",
            help_text=help_text or f"'{name}' is not a known constant or function.",
            suggestions=suggestions
        )


class DomainError(SemanticError):
    """An operation applied to a value outside its mathematical domain."""
    kind = ErrorKind.DOMAIN_ERROR

    def __init__(self, reason: str, position: Optional[int] = None):
        self.reason = reason
        super().__init__(
            message=f"Domain error: {reason}",
            position=position,
            code="S080",
            help_text="The operation has no real-valued result for this input."
        )


class DivisionByZero(EvaluationError):
    """The right operand of '/' evaluated to zero."""
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, position: Optional[int] = None):
        super().__init__(
            message="Division by zero",
            position=position,
            code="R001",
            help_text="The divisor evaluated to exactly zero."
        )
