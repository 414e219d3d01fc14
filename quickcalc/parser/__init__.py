"""
quickcalc Parser Package

Recursive descent parser that turns a token list into an expression tree.

Key Features:
- One parsing method per precedence level
- Right-associative '^', configurable unary minus precedence
- Implicit multiplication (2pi, 3(4))
- Fail-fast syntax errors with positions and help text

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, Expression, Literal, Identifier, UnaryOp,
    BinaryOp, FunctionCall, Grouping, Operator, Precedence, SourceSpan,
)
from .parser import Parser, parse_string
from .errors import (
    ParseError, UnexpectedToken, UnclosedParenthesis, EmptyExpression, NestingTooDeep,
)

__all__ = [
    # Core parser
    "Parser", "parse_string",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "Expression",
    "Literal", "Identifier", "UnaryOp", "BinaryOp", "FunctionCall", "Grouping",
    "Operator", "Precedence", "SourceSpan",

    # Error handling
    "ParseError", "UnexpectedToken", "UnclosedParenthesis",
    "EmptyExpression", "NestingTooDeep",
]
