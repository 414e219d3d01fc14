"""
quickcalc Recursive Descent Parser

One method per precedence level, weakest binding first:

    sum     := term (("+" | "-") term)*
    term    := unary (("*" | "/") unary | <implicit> unary)*
    unary   := "-" unary | power
    power   := operand ("^" unary)?
    operand := primary
    primary := NUMBER | IDENTIFIER "(" sum ")" | IDENTIFIER | "(" sum ")"

Each binary level takes the operators whose Operator.precedence matches
it. Unary minus sits between '*' and '^', so -2^2 is -(2^2). With
``negation_binds_tighter`` the minus moves down into ``operand``
(operand := "-" operand | primary) and -2^2 becomes (-2)^2. The exponent
of '^' is parsed as ``unary``, which makes '^' right-associative and
accepts 2^-1.

Only real nesting counts against ``max_depth``: parentheses, chained
signs and exponents. Flat chains such as 1 + 1 + ... + 1 are loops here
and in the evaluator, so their length is unbounded.

Author: xwest
"""

import logging
from typing import List, Optional

from ..config import CalculatorConfig, DEFAULT_CONFIG
from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Expression, Literal, Identifier, UnaryOp, BinaryOp, FunctionCall,
    Grouping, Operator, Precedence, SourceSpan,
)
from .errors import (
    UnexpectedToken, UnclosedParenthesis, EmptyExpression, NestingTooDeep,
)

logger = logging.getLogger(__name__)


BINARY_OPERATORS = {
    TokenType.PLUS: Operator.ADD,
    TokenType.MINUS: Operator.SUBTRACT,
    TokenType.STAR: Operator.MULTIPLY,
    TokenType.SLASH: Operator.DIVIDE,
    TokenType.CARET: Operator.POWER,
}


class Parser:
    """
    quickcalc expression parser.

    Consumes a token list produced by the lexer and builds an expression
    tree. Parsing stops at the first error; no partial tree is returned.
    """

    def __init__(self, tokens: List[Token], config: Optional[CalculatorConfig] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the lexer, ending with EOF
            config: Parsing options (negation precedence, implicit
                multiplication, depth limit)
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")

        self.tokens = tokens
        self.config = config or DEFAULT_CONFIG
        self.current = 0
        self._depth = 0

        if self.config.negation_binds_tighter:
            self.negation_precedence = Precedence.OPERAND
        else:
            self.negation_precedence = Operator.NEGATE.precedence

    def parse(self) -> Expression:
        """
        Parse the token list into a single expression.

        Returns:
            Root node of the expression tree

        Raises:
            ParseError: On the first syntax error
        """
        self.current = 0
        self._depth = 0

        if self._is_at_end():
            raise EmptyExpression()

        expression = self._parse_sum()

        # Everything up to EOF must belong to the expression
        if not self._is_at_end():
            raise UnexpectedToken(self._peek())

        logger.debug("parsed %d tokens into a tree of depth %d", len(self.tokens), expression.depth)
        return expression

    # Precedence levels

    def _parse_sum(self) -> Expression:
        """Parse '+' and '-' chains (left-associative)."""
        expr = self._parse_term()

        while True:
            operator = self._binary_operator(Precedence.SUM)
            if operator is None:
                return expr
            operator_token = self._advance()
            right = self._parse_term()
            expr = self._binary(expr, operator, right, operator_token.position)

    def _parse_term(self) -> Expression:
        """Parse '*' and '/' chains and implicit products (left-associative)."""
        expr = self._parse_unary()

        while True:
            operator = self._binary_operator(Precedence.TERM)
            if operator is not None:
                operator_token = self._advance()
                right = self._parse_unary()
                expr = self._binary(expr, operator, right, operator_token.position)
            elif self._starts_implicit_product():
                right = self._parse_unary()
                expr = self._binary(expr, Operator.MULTIPLY, right, right.span.start)
            else:
                return expr

    def _parse_unary(self) -> Expression:
        """Parse a leading minus that binds looser than '^'."""
        if self.negation_precedence == Precedence.UNARY and self._check(TokenType.MINUS):
            return self._parse_negation(self._parse_unary)
        return self._parse_power()

    def _parse_power(self) -> Expression:
        """Parse exponentiation."""
        expr = self._parse_operand()

        while True:
            operator = self._binary_operator(Precedence.POWER)
            if operator is None:
                return expr
            operator_token = self._advance()
            self._descend(operator_token)
            try:
                # A right-associative operator takes the rest of the chain,
                # sign included, as its right operand
                if operator.right_associative:
                    right = self._parse_unary()
                else:
                    right = self._parse_operand()
            finally:
                self._ascend()
            expr = self._binary(expr, operator, right, operator_token.position)

    def _parse_operand(self) -> Expression:
        """Parse the base of a power, with the minus here when it binds tighter."""
        if self.negation_precedence == Precedence.OPERAND and self._check(TokenType.MINUS):
            return self._parse_negation(self._parse_operand)
        return self._parse_primary()

    def _parse_primary(self) -> Expression:
        """Parse a number, a name, a function call or a parenthesized expression."""
        token = self._peek()

        if token.is_literal:
            self._advance()
            return Literal(token.value, self._token_span(token))

        if token.is_identifier:
            self._advance()
            if self._check(TokenType.LEFT_PAREN):
                argument, closing = self._parse_parenthesized()
                span = SourceSpan(token.position, closing.position + 1)
                return FunctionCall(token.lexeme, argument, span)
            return Identifier(token.lexeme, self._token_span(token))

        if token.type == TokenType.LEFT_PAREN:
            inner, closing = self._parse_parenthesized()
            span = SourceSpan(token.position, closing.position + 1)
            return Grouping(inner, span)

        raise UnexpectedToken(token, expected="a number, a name or '('")

    # Helpers for building nodes

    def _parse_negation(self, parse_operand) -> Expression:
        operator_token = self._advance()
        self._descend(operator_token)
        try:
            operand = parse_operand()
        finally:
            self._ascend()
        span = SourceSpan(operator_token.position, operand.span.end)
        return UnaryOp(Operator.NEGATE, operand, span)

    def _parse_parenthesized(self):
        """Parse '(' sum ')' and return the inner expression and the ')' token."""
        opening = self._advance()
        self._descend(opening)
        try:
            inner = self._parse_sum()
        finally:
            self._ascend()

        # An operand still missing at EOF ("(", "(1 +") was already
        # reported as UnexpectedToken by the inner parse
        if self._check(TokenType.RIGHT_PAREN):
            return inner, self._advance()
        if self._is_at_end():
            raise UnclosedParenthesis(opening.position)
        raise UnexpectedToken(self._peek(), expected="')'")

    def _binary(self, left: Expression, operator: Operator, right: Expression,
                operator_position: int) -> BinaryOp:
        span = SourceSpan(left.span.start, right.span.end)
        return BinaryOp(left, operator, right, span, operator_position)

    def _binary_operator(self, precedence: Precedence) -> Optional[Operator]:
        """Operator for the current token if it belongs to this level."""
        operator = BINARY_OPERATORS.get(self._peek().type)
        if operator is not None and operator.precedence == precedence:
            return operator
        return None

    def _descend(self, token: Token):
        self._depth += 1
        if self._depth > self.config.max_depth:
            raise NestingTooDeep(token.position, self.config.max_depth)

    def _ascend(self):
        self._depth -= 1

    def _starts_implicit_product(self) -> bool:
        """Check if the next token begins an operand written without '*'."""
        if not self.config.implicit_multiplication:
            return False

        token = self._peek()
        if token.is_identifier or token.type == TokenType.LEFT_PAREN:
            return True
        # Two numbers in a row ("2 2") are never a product
        return token.is_literal and not self._previous().is_literal

    @staticmethod
    def _token_span(token: Token) -> SourceSpan:
        return SourceSpan(token.position, token.position + len(token.lexeme))

    # Utility methods

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]

    def _previous(self) -> Token:
        """Return the most recently consumed token."""
        return self.tokens[self.current - 1]


def parse_string(source: str, config: Optional[CalculatorConfig] = None) -> Expression:
    """
    Convenience function to parse an expression string.

    Args:
        source: Expression text
        config: Parsing options

    Returns:
        Expression tree

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source)
    return Parser(tokens, config).parse()
