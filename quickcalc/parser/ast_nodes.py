"""
Abstract Syntax Tree node definitions for quickcalc.

A closed set of expression nodes. Each node owns its children outright
(there are no parent links), so a tree can never contain a cycle. Every
node records its source span and its depth, the number of nodes on the
longest path down to a leaf.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Any
from dataclasses import dataclass
from enum import Enum, IntEnum


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    IDENTIFIER = "Identifier"
    UNARY_OP = "UnaryOp"
    BINARY_OP = "BinaryOp"
    FUNCTION_CALL = "FunctionCall"
    GROUPING = "Grouping"


class Precedence(IntEnum):
    """Binding strength of operators, weakest first."""
    SUM = 1             # +, -
    TERM = 2            # *, / (and implicit multiplication)
    UNARY = 3           # unary -
    POWER = 4           # ^
    OPERAND = 5         # unary - when it binds tighter than ^


class Operator(Enum):
    """
    Arithmetic operators.

    Each member is (symbol, precedence, right_associative). The parser
    reads both: a level consumes the operators whose precedence matches
    it, and a right-associative operator takes the rest of the chain as
    its right operand. NEGATE sits at UNARY by default; the parser moves
    it to OPERAND when the config asks for -2^2 == 4.
    """
    ADD = ("+", Precedence.SUM, False)
    SUBTRACT = ("-", Precedence.SUM, False)
    MULTIPLY = ("*", Precedence.TERM, False)
    DIVIDE = ("/", Precedence.TERM, False)
    POWER = ("^", Precedence.POWER, True)
    NEGATE = ("neg", Precedence.UNARY, False)

    def __init__(self, symbol: str, precedence: Precedence, right_associative: bool):
        self.symbol = symbol
        self.precedence = precedence
        self.right_associative = right_associative

    @property
    def is_unary(self) -> bool:
        return self is Operator.NEGATE

    def __str__(self) -> str:
        return self.symbol


BINARY_OPERATORS = frozenset(op for op in Operator if not op.is_unary)


@dataclass(frozen=True)
class SourceSpan:
    """Half-open range [start, end) of input indices covered by a node."""
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'Expression') -> Any:
        """Visit a node."""
        pass


def _format_number(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class Expression(ABC):
    """Base class for all expression nodes."""

    node_type: ASTNodeType

    def __init__(self, span: SourceSpan):
        self.span = span
        self.depth = 1 + max((child.depth for child in self.children()), default=0)

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass

    def walk(self):
        """Yield this node and every descendant, parents before children."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self}, span={self.span})"


class Literal(Expression):
    """Numeric literal."""
    node_type = ASTNodeType.LITERAL

    def __init__(self, value: float, span: SourceSpan):
        self.value = value
        super().__init__(span)

    def children(self) -> List[Expression]:
        return []

    def __str__(self) -> str:
        return _format_number(self.value)


class Identifier(Expression):
    """Bare name, resolved against the constant table at evaluation."""
    node_type = ASTNodeType.IDENTIFIER

    def __init__(self, name: str, span: SourceSpan):
        self.name = name
        super().__init__(span)

    def children(self) -> List[Expression]:
        return []

    def __str__(self) -> str:
        return self.name


class UnaryOp(Expression):
    """Unary operation (negation)."""
    node_type = ASTNodeType.UNARY_OP

    def __init__(self, operator: Operator, operand: Expression, span: SourceSpan):
        if not operator.is_unary:
            raise ValueError(f"{operator.name} is not a unary operator")
        self.operator = operator
        self.operand = operand
        super().__init__(span)

    def children(self) -> List[Expression]:
        return [self.operand]

    def __str__(self) -> str:
        return f"({self.operator} {self.operand})"


class BinaryOp(Expression):
    """Binary operation."""
    node_type = ASTNodeType.BINARY_OP

    def __init__(self, left: Expression, operator: Operator, right: Expression,
                 span: SourceSpan, operator_position: int = None):
        if operator.is_unary:
            raise ValueError(f"{operator.name} is not a binary operator")
        self.left = left
        self.operator = operator
        self.right = right
        # Where the operator sits in the input; implicit products point at
        # the start of the right operand
        self.operator_position = right.span.start if operator_position is None else operator_position
        super().__init__(span)

    def children(self) -> List[Expression]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return f"({self.operator} {self.left} {self.right})"


class FunctionCall(Expression):
    """Call of a named function with a single argument."""
    node_type = ASTNodeType.FUNCTION_CALL

    def __init__(self, name: str, argument: Expression, span: SourceSpan):
        self.name = name
        self.argument = argument
        super().__init__(span)

    def children(self) -> List[Expression]:
        return [self.argument]

    def __str__(self) -> str:
        return f"({self.name} {self.argument})"


class Grouping(Expression):
    """Parenthesized expression."""
    node_type = ASTNodeType.GROUPING

    def __init__(self, inner: Expression, span: SourceSpan):
        self.inner = inner
        super().__init__(span)

    def children(self) -> List[Expression]:
        return [self.inner]

    def __str__(self) -> str:
        return f"(group {self.inner})"
