"""
Single entry point for front ends.

evaluate() runs lexer, parser and evaluator and hands back an
EvaluationResult instead of raising, so a shell can show the error and
carry on. Errors outside the CalculationError hierarchy are bugs and
propagate.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import CalculatorConfig, DEFAULT_CONFIG
from .lexer import Lexer, Token, CalculationError
from .parser import Parser, Expression
from .evaluator import Evaluator

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Outcome of evaluating one input string: a value or the first error."""
    expression: str
    value: Optional[float] = None
    error: Optional[CalculationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def has_errors(self) -> bool:
        """Check if evaluation failed."""
        return self.error is not None

    def unwrap(self) -> float:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


class Calculator:
    """
    Stateless evaluation front end.

    Holds only an immutable config; every call builds fresh tokens and a
    fresh tree, so one instance can serve any number of callers.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._evaluator = Evaluator(self.config)

    def tokenize(self, text: str) -> List[Token]:
        return Lexer(text).tokenize()

    def parse(self, text: str) -> Expression:
        return Parser(self.tokenize(text), self.config).parse()

    def calculate(self, text: str) -> float:
        """
        Evaluate text, raising on failure.

        Raises:
            CalculationError: The first lexical, syntax, semantic or
                runtime error
        """
        return self._evaluator.evaluate(self.parse(text))

    def evaluate(self, text: str) -> EvaluationResult:
        """Evaluate text and return the value or the error as data."""
        logger.debug("evaluating %r", text)
        try:
            value = self.calculate(text)
        except CalculationError as e:
            logger.debug("evaluation of %r failed: %s %s", text, e.kind.value, e.message)
            return EvaluationResult(text, error=e)
        return EvaluationResult(text, value=value)


def evaluate(text: str, config: Optional[CalculatorConfig] = None) -> EvaluationResult:
    """
    Evaluate an expression string.

    Args:
        text: Expression as typed by the user; surrounding whitespace is fine
        config: Evaluation options, DEFAULT_CONFIG if omitted

    Returns:
        EvaluationResult holding either the value or the first error
    """
    return Calculator(config).evaluate(text)


def calculate(text: str, config: Optional[CalculatorConfig] = None) -> float:
    """
    Evaluate an expression string, raising the first error.

    Raises:
        CalculationError: If the input is invalid or cannot be evaluated
    """
    return Calculator(config).calculate(text)
