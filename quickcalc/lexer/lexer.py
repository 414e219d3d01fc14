"""
quickcalc Lexer - turns calculator input into tokens

Single pass, fail fast: the first character that does not fit a token
raises UnexpectedCharacter and nothing after it is looked at.

xwest
"""

import logging
import re
from typing import List

from .tokens import Token, TokenType, OPERATORS, EXPONENT_MARKER
from .errors import UnexpectedCharacter

logger = logging.getLogger(__name__)


class Lexer:
    """
    quickcalc lexical analyzer.

    Converts an expression string into a list of tokens that always ends
    with an EOF token.
    """

    # Digits, an optional fraction with at least one digit, an optional
    # upper-case exponent with at least one digit
    number_pattern = re.compile(r'[0-9]+(?:\.[0-9]+)?(?:E[+-]?[0-9]+)?')

    def __init__(self, source: str):
        """
        Initialize the lexer with the input text.

        Args:
            source: Expression text as typed by the user
        """
        self.source = source
        self.pos = 0
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire input.

        Returns:
            List of tokens, terminated by an EOF token

        Raises:
            UnexpectedCharacter: On the first character no token accepts
        """
        self.pos = 0
        self.tokens = []

        while True:
            self._skip_whitespace()
            if self.pos >= len(self.source):
                break
            self.tokens.append(self._next_token())

        self.tokens.append(Token(TokenType.EOF, "", None, len(self.source)))
        logger.debug("tokenized %r into %d tokens", self.source, len(self.tokens))
        return self.tokens

    def _next_token(self) -> Token:
        """Read the token starting at the current position."""
        start_pos = self.pos
        current_char = self.source[self.pos]

        if current_char in "0123456789":
            return self._tokenize_number(start_pos)

        if self._is_identifier_start(current_char):
            return self._tokenize_identifier(start_pos)

        token_type = OPERATORS.get(current_char)
        if token_type is not None:
            self._advance()
            return Token(token_type, current_char, None, start_pos)

        raise UnexpectedCharacter(current_char, start_pos)

    def _tokenize_number(self, start_pos: int) -> Token:
        """Tokenize a numeric literal such as 42, 3.14 or 1.5E-3."""
        match = self.number_pattern.match(self.source, start_pos)
        lexeme = match.group(0)
        self.pos = match.end()

        # The pattern stops short of a dangling '.' or 'E'; both are errors
        # rather than the start of the next token
        following = self._current()
        if following == '.':
            raise UnexpectedCharacter(
                following, self.pos,
                help_text="A decimal point must be followed by digits and may appear only once in a number."
            )
        if following == EXPONENT_MARKER:
            raise UnexpectedCharacter(
                following, self.pos,
                help_text="An exponent marker 'E' must be followed by digits, as in 8E3 or 1.5E-2."
            )

        return Token(TokenType.NUMBER, lexeme, float(lexeme), start_pos)

    def _tokenize_identifier(self, start_pos: int) -> Token:
        """Tokenize a constant or function name."""
        # First character is already validated as identifier start
        self._advance()

        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.IDENTIFIER, lexeme, lexeme, start_pos)

    def _is_identifier_start(self, char: str) -> bool:
        """Check if character can start an identifier."""
        return char.isalpha() or char == '_'

    def _is_identifier_continue(self, char: str) -> bool:
        """Check if character can continue an identifier."""
        return char.isalpha() or char in "0123456789_"

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _advance(self):
        self.pos += 1

    def _current(self) -> str:
        """Character at the current position, or '' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''


def tokenize_string(source: str) -> List[Token]:
    """
    Convenience function to tokenize an expression string.

    Args:
        source: Expression text

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source).tokenize()
