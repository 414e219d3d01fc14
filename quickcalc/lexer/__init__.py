"""
quickcalc Lexer Package

Splits calculator input into tokens: numbers (with optional fraction and
upper-case exponent), the operators + - * / ^, parentheses, identifiers
for constants and functions, and a closing EOF marker.

Key Features:
- Fail-fast error reporting with the offending character and its index
- No semantic knowledge: unknown names are left for the evaluator

Author: xwest
"""

from .tokens import Token, TokenType
from .lexer import Lexer, tokenize_string
from .errors import (
    CalculationError, Diagnostic, ErrorKind, LexerError, UnexpectedCharacter,
)

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "CalculationError",
    "Diagnostic",
    "ErrorKind",
    "LexerError",
    "UnexpectedCharacter",
]
