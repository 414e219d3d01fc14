"""
Expression evaluator for quickcalc.

Reduces an expression tree to a number, children before parents. All
arithmetic is IEEE-754 binary64 through numpy.float64 with numpy's
floating-point warnings silenced; the evaluator makes its own checks:

- a zero divisor raises DivisionByZero instead of producing inf or NaN
- a negative base with a fractional exponent raises DomainError
- NaN never escapes: any step that yields NaN raises DomainError
- infinity from overflow is a valid value unless the config forbids it

Left-deep chains of binary operators are folded in a loop, so only real
nesting (bounded by the parser) costs recursion.

Author: xwest
"""

import logging
import operator
from typing import Optional

import numpy as np

from ..config import CalculatorConfig, DEFAULT_CONFIG
from ..parser.ast_nodes import (
    ASTVisitor, ASTNodeType, Expression, Literal, Identifier, UnaryOp,
    BinaryOp, FunctionCall, Grouping, Operator, BINARY_OPERATORS,
)
from .builtins import CONSTANTS, FUNCTIONS, known_names
from .errors import UnknownIdentifier, DomainError, DivisionByZero

logger = logging.getLogger(__name__)


_BINARY_OPERATIONS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
    Operator.POWER: operator.pow,
}


class Evaluator(ASTVisitor):
    """
    Tree-walking evaluator.

    Dispatches on the node type through a handler table. The table and
    the binary operation table are checked against their enums when the
    evaluator is created, so a node type or operator without a handler
    fails immediately rather than on some later input.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._handlers = {
            ASTNodeType.LITERAL: self._evaluate_literal,
            ASTNodeType.IDENTIFIER: self._evaluate_identifier,
            ASTNodeType.UNARY_OP: self._evaluate_unary,
            ASTNodeType.BINARY_OP: self._evaluate_binary,
            ASTNodeType.FUNCTION_CALL: self._evaluate_call,
            ASTNodeType.GROUPING: self._evaluate_grouping,
        }

        missing = set(ASTNodeType) - set(self._handlers)
        if missing:
            raise TypeError(f"no evaluation handler for {sorted(t.name for t in missing)}")
        missing = BINARY_OPERATORS - set(_BINARY_OPERATIONS)
        if missing:
            raise TypeError(f"no binary operation for {sorted(op.name for op in missing)}")

    def evaluate(self, node: Expression) -> float:
        """
        Evaluate an expression tree.

        Args:
            node: Root of the tree

        Returns:
            The value as a Python float (possibly infinite)

        Raises:
            SemanticError: Unknown identifier or domain error
            EvaluationError: Division by zero
        """
        with np.errstate(all="ignore"):
            value = node.accept(self)
        logger.debug("evaluated %s spanning %s = %r", node.node_type.value, node.span, value)
        return float(value)

    def visit(self, node: Expression):
        return self._handlers[node.node_type](node)

    # Node handlers

    def _evaluate_literal(self, node: Literal):
        return self._checked(np.float64(node.value), node)

    def _evaluate_identifier(self, node: Identifier):
        if node.name in CONSTANTS:
            return np.float64(CONSTANTS[node.name])

        help_text = None
        if node.name in FUNCTIONS:
            help_text = f"'{node.name}' is a function; call it as {node.name}(x)."
        raise UnknownIdentifier(node.name, node.span.start, known_names(), help_text)

    def _evaluate_unary(self, node: UnaryOp):
        operand = self.visit(node.operand)
        # NEGATE is the only unary operator
        return -operand

    def _evaluate_binary(self, node: BinaryOp):
        # Walk down the left spine of a chain such as 1 + 2 + ... + n and
        # fold back up, so chain length costs no recursion
        spine = [node]
        while spine[-1].left.node_type == ASTNodeType.BINARY_OP:
            spine.append(spine[-1].left)

        value = self.visit(spine[-1].left)
        for step in reversed(spine):
            value = self._apply(step, value, self.visit(step.right))
        return value

    def _apply(self, node: BinaryOp, left, right):
        """Apply one binary operator to already evaluated operands."""
        if node.operator is Operator.DIVIDE and right == 0:
            raise DivisionByZero(node.operator_position)

        if node.operator is Operator.POWER:
            if left < 0 and not float(right).is_integer():
                raise DomainError("fractional power of a negative number", node.operator_position)
            if left == 0 and right < 0:
                raise DivisionByZero(node.operator_position)

        result = _BINARY_OPERATIONS[node.operator](left, right)
        return self._checked(
            result, node,
            f"'{node.operator}' has no defined result for {float(left)!r} and {float(right)!r}"
        )

    def _evaluate_call(self, node: FunctionCall):
        argument = self.visit(node.argument)

        function = FUNCTIONS.get(node.name)
        if function is None:
            if node.name in CONSTANTS:
                # pi(2) reads as pi * 2 when juxtaposition means multiplication
                if self.config.implicit_multiplication:
                    return self._checked(np.float64(CONSTANTS[node.name]) * argument, node)
                raise UnknownIdentifier(
                    node.name, node.span.start, FUNCTIONS,
                    help_text=f"'{node.name}' is a constant, not a function."
                )
            raise UnknownIdentifier(node.name, node.span.start, known_names())

        reason = function.domain_violation(argument)
        if reason:
            raise DomainError(f"{node.name}: {reason}", node.span.start)

        result = function(argument, self.config.angle_mode)
        return self._checked(result, node, f"{node.name} is undefined for {float(argument)!r}")

    def _evaluate_grouping(self, node: Grouping):
        return self.visit(node.inner)

    def _checked(self, value, node: Expression, nan_reason: str = "result is not a number"):
        """Reject NaN always and infinity when the config asks for finite results."""
        if np.isnan(value):
            raise DomainError(nan_reason, node.span.start)
        if np.isinf(value) and not self.config.allow_infinity:
            raise DomainError("result is not finite", node.span.start)
        return value


def evaluate_expression(node: Expression, config: Optional[CalculatorConfig] = None) -> float:
    """
    Convenience function to evaluate a parsed expression.

    Raises:
        SemanticError: Unknown identifier or domain error
        EvaluationError: Division by zero
    """
    return Evaluator(config).evaluate(node)
