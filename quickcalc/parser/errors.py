"""
Error handling for the quickcalc parser.

Syntax errors carry the offending token or the index where the problem
was detected, plus a diagnostic with help text.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import CalculationError, ErrorKind


class ParseError(CalculationError):
    """Raised when the token stream does not form a valid expression."""
    category = "syntax"


class UnexpectedToken(ParseError):
    """A token that does not fit the grammar where it appears."""
    kind = ErrorKind.UNEXPECTED_TOKEN

    def __init__(self, token: Token, expected: Optional[str] = None):
        self.token = token
        self.expected = expected

        if expected:
            message = f"Expected {expected}, found {token.describe()}"
        else:
            message = f"Unexpected {token.describe()}"
        if token.type != TokenType.EOF:
            message += f" at index {token.position}"

        super().__init__(
            message=message,
            position=token.position,
            code="P010" if token.type == TokenType.EOF else "P001",
            help_text=_help_for(token),
            suggestions=SyntaxErrorRecovery.suggest_for(token)
        )


class UnclosedParenthesis(ParseError):
    """An opening parenthesis with no matching close before end of input."""
    kind = ErrorKind.UNCLOSED_PARENTHESIS

    def __init__(self, position: int):
        super().__init__(
            message=f"Unclosed parenthesis opened at index {position}",
            position=position,
            code="P004",
            help_text=f"The '(' at index {position} was never closed.",
            suggestions=["Add a closing ')'"]
        )


class EmptyExpression(ParseError):
    """The input contained no tokens at all."""
    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self):
        super().__init__(
            message="Empty expression",
            position=None,
            code="P011",
            help_text="Type a number or an expression such as 2 + 3 * 4."
        )


class NestingTooDeep(ParseError):
    """Parentheses, signs or powers nested beyond the configured limit."""
    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, position: int, limit: int):
        self.limit = limit
        super().__init__(
            message=f"Expression nested too deeply at index {position} (limit {limit})",
            position=position,
            code="P013",
            help_text="Simplify the expression or remove redundant parentheses."
        )


class SyntaxErrorRecovery:
    """
    Suggestion helpers for syntax errors.

    Parsing never resumes after an error; these only fill the
    suggestions of a diagnostic.
    """

    @staticmethod
    def suggest_for(token: Token) -> List[str]:
        if token.type == TokenType.EOF:
            return ["Complete the expression", "Check for a trailing operator"]
        if token.type == TokenType.RIGHT_PAREN:
            return ["Remove the unmatched ')'", "Put an expression inside the parentheses"]
        if token.type == TokenType.PLUS:
            return ["Unary '+' is not supported; drop the sign"]
        if token.is_operator:
            return [f"Put an operand before '{token.lexeme}'"]
        if token.type == TokenType.NUMBER:
            return [f"Insert an operator before {token.lexeme}"]
        return []


def _help_for(token: Token) -> str:
    if token.type == TokenType.EOF:
        return "The expression ended while an operand was still expected."
    return f"The parser did not expect {token.describe()} at this position."
