"""
Error handling for the quickcalc lexer.

Also home of the pieces every stage shares: the Diagnostic record, the
ErrorKind tags and the CalculationError base class that the parser and
evaluator errors extend.

Author: xwest
"""

from typing import Optional, List, Iterable
from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Tag identifying each concrete error the pipeline can report."""
    UNEXPECTED_CHARACTER = "UnexpectedCharacter"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNCLOSED_PARENTHESIS = "UnclosedParenthesis"
    EMPTY_EXPRESSION = "EmptyExpression"
    NESTING_TOO_DEEP = "NestingTooDeep"
    DIVISION_BY_ZERO = "DivisionByZero"
    UNKNOWN_IDENTIFIER = "UnknownIdentifier"
    DOMAIN_ERROR = "DomainError"


@dataclass
class Diagnostic:
    """Structured description of an error (or warning) for display."""
    message: str
    position: Optional[int]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.position is not None:
            result += f"  --> column {self.position + 1}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class CalculationError(Exception):
    """
    Base class of every error raised while evaluating an expression.

    Subclasses set ``kind`` and ``category``; the instance carries the
    position (0-based index into the input, when one applies) and a
    Diagnostic for rendering.
    """

    kind: ErrorKind
    category = "error"

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.position = position
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(CalculationError):
    """Raised when the input text cannot be split into tokens."""
    category = "lexical"


class UnexpectedCharacter(LexerError):
    """A character that cannot start or continue any token."""
    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, character: str, position: int, help_text: Optional[str] = None):
        self.character = character
        if help_text is None:
            if character.isprintable():
                help_text = f"The character '{character}' is not valid in an expression."
            else:
                help_text = f"Non-printable character (Unicode: U+{ord(character):04X}) is not allowed."
        super().__init__(
            message=f"Unexpected character '{character}' at index {position}",
            position=position,
            code="L001",
            help_text=help_text,
            suggestions=ErrorRecovery.suggest_operator_alternatives(character)
        )


class ErrorRecovery:
    """
    Helpers for building suggestions.

    Nothing here resumes lexing; it only finds likely intended input for
    the help section of a diagnostic.
    """

    @staticmethod
    def suggest_corrections(word: str, candidates: Iterable[str], max_distance: int = 2) -> List[str]:
        """Suggest close names from candidates using edit distance."""
        scored = []
        for candidate in candidates:
            distance = ErrorRecovery._edit_distance(word.lower(), candidate)
            if distance <= max_distance:
                scored.append((distance, candidate))
        return [candidate for _, candidate in sorted(scored)][:3]

    @staticmethod
    def suggest_operator_alternatives(char: str) -> List[str]:
        """Suggest ASCII operators for common look-alike characters."""
        alternatives = {
            '×': ['*'],
            '⋅': ['*'],
            '·': ['*'],
            '÷': ['/'],
            '−': ['-'],
            '[': ['('],
            ']': [')'],
            '{': ['('],
            '}': [')'],
            ',': ['.'],
        }
        return alternatives.get(char, [])

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]
