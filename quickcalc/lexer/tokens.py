"""
Token definitions for the quickcalc lexer.

The token set is deliberately closed: numbers, the five arithmetic
operators, parentheses, identifiers and the end-of-input marker.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """Enumeration of all token types understood by the parser."""

    # Special
    EOF = auto()                    # End of input, always the last token

    # Literals and names
    NUMBER = auto()                 # 42, 3.14, 8E3, 1.5E-2
    IDENTIFIER = auto()             # pi, e, sqrt, sin

    # Operators
    PLUS = auto()                   # +
    MINUS = auto()                  # - (binary or unary, decided by the parser)
    STAR = auto()                   # *
    SLASH = auto()                  # /
    CARET = auto()                  # ^ (exponentiation)

    # Delimiters
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Carries the token type, the raw lexeme, the semantic value (a float for
    numbers, the name for identifiers) and the 0-based index of its first
    character in the input.
    """
    type: TokenType
    lexeme: str
    value: Any
    position: int

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return "EOF"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.value!r}, {self.position})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a numeric literal."""
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    def describe(self) -> str:
        """Short human description used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        if self.type == TokenType.NUMBER:
            return f"number {self.lexeme}"
        if self.type == TokenType.IDENTIFIER:
            return f"identifier '{self.lexeme}'"
        if self.is_operator:
            return f"operator '{self.lexeme}'"
        return f"'{self.lexeme}'"


# Single-character operators and delimiters
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

OPERATOR_TYPES = frozenset({
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.STAR,
    TokenType.SLASH,
    TokenType.CARET,
})

# Exponent marker in numeric literals; lower-case 'e' is Euler's number
EXPONENT_MARKER = "E"
