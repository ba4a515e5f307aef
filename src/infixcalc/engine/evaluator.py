"""
Expression tree evaluator for infixcalc.

Folds an expression tree to a single float64. Arithmetic follows IEEE-754:
dividing by zero gives ``inf``, ``-inf`` or ``nan`` instead of raising, so
evaluation never fails on a well-formed tree.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from infixcalc.engine.ast_nodes import (
    ASTVisitor,
    BinaryExpression,
    BinaryOperator,
    Expression,
    NumberLiteral,
    iter_postorder,
)

BINARY_OPS: dict[BinaryOperator, Callable[[np.float64, np.float64], np.float64]] = {
    BinaryOperator.ADD: np.add,
    BinaryOperator.SUB: np.subtract,
    BinaryOperator.MUL: np.multiply,
    BinaryOperator.DIV: np.divide,
}


class Evaluator(ASTVisitor):
    """
    Evaluates expression trees.

    Nodes are visited in post-order; each visit pushes its value onto an
    operand stack, and a binary node pops its two operands from it.

    Usage:
        value = Evaluator().evaluate(expr)
    """

    def __init__(self) -> None:
        self._values: list[np.float64] = []

    def evaluate(self, expr: Expression) -> float:
        """Evaluate a tree and return its value as a Python float."""
        self._values = []
        # Silence numpy's divide-by-zero and invalid-value warnings
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            for node in iter_postorder(expr):
                self._values.append(self.visit(node))
        return float(self._values.pop())

    def visit_number_literal(self, node: NumberLiteral) -> np.float64:
        return np.float64(node.value)

    def visit_binary_expression(self, node: BinaryExpression) -> np.float64:
        right = self._values.pop()
        left = self._values.pop()
        return BINARY_OPS[node.operator](left, right)


def evaluate(expr: Expression) -> float:
    """
    Convenience function to evaluate an expression tree.

    Args:
        expr: Root of the tree

    Returns:
        The value of the expression
    """
    return Evaluator().evaluate(expr)
