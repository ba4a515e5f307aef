"""
Debug rendering of expression trees.

Produces nested constructor notation, e.g. ``Div(Number(6), Mul(Number(2),
Add(Number(1), Number(2))))`` for ``6/2(1+2)``.
"""

from typing import Union

from infixcalc.engine.ast_nodes import (
    ASTVisitor,
    BinaryExpression,
    BinaryOperator,
    Expression,
    NumberLiteral,
)

OPERATOR_NAMES: dict[BinaryOperator, str] = {
    BinaryOperator.ADD: "Add",
    BinaryOperator.SUB: "Sub",
    BinaryOperator.MUL: "Mul",
    BinaryOperator.DIV: "Div",
}


class ExpressionPrinter(ASTVisitor):
    """
    Renders a tree in constructor notation.

    Each visit returns the pieces of its rendering: text, or child nodes
    still to be rendered. The pieces are expanded with an explicit stack,
    so deep trees render without recursion.
    """

    def render(self, expr: Expression) -> str:
        pieces: list[str] = []
        stack: list[Union[str, Expression]] = [expr]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                pieces.append(item)
            else:
                stack.extend(reversed(self.visit(item)))
        return "".join(pieces)

    def visit_number_literal(self, node: NumberLiteral) -> list[Union[str, Expression]]:
        return [f"Number({node.value:g})"]

    def visit_binary_expression(self, node: BinaryExpression) -> list[Union[str, Expression]]:
        name = OPERATOR_NAMES[node.operator]
        return [f"{name}(", node.left, ", ", node.right, ")"]


def format_expression(expr: Expression) -> str:
    """Render an expression tree as ``Add(Number(1), Number(2))`` text."""
    return ExpressionPrinter().render(expr)
