"""
Abstract Syntax Tree (AST) node definitions for infixcalc.

An expression tree is either a number literal or a binary operation that
owns exactly two sub-expressions. Nodes are immutable and carry the source
location of the token they were built from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator, Optional

from infixcalc.utils.errors import SourceLocation


class ASTNode(ABC):
    """Base class for all AST nodes."""

    location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: "ASTVisitor") -> Any:
        """Accept a visitor for tree traversal."""
        pass


class ASTVisitor(ABC):
    """
    Visitor pattern base class for AST traversal.

    Every node type has an abstract ``visit_*`` method, so a visitor that
    forgets a node type cannot be instantiated.
    """

    def visit(self, node: ASTNode) -> Any:
        """Dispatch to the appropriate visit method."""
        return node.accept(self)

    @abstractmethod
    def visit_number_literal(self, node: "NumberLiteral") -> Any:
        pass

    @abstractmethod
    def visit_binary_expression(self, node: "BinaryExpression") -> Any:
        pass


class Expression(ASTNode):
    """Base class for all expressions."""

    pass


@dataclass(frozen=True, slots=True)
class NumberLiteral(Expression):
    """A numeric literal."""

    value: float
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number_literal(self)


class BinaryOperator(Enum):
    """Binary operator types."""

    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()


@dataclass(frozen=True, slots=True)
class BinaryExpression(Expression):
    """
    A binary operation expression.

    Example:
        a + b, a / (b * c)
    """

    left: Expression
    operator: BinaryOperator
    right: Expression
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_expression(self)


def iter_postorder(expr: Expression) -> Iterator[Expression]:
    """
    Yield every node of a tree after its children, left subtree first.

    Uses an explicit stack, so trees of any depth can be walked.
    """
    stack: list[tuple[Expression, bool]] = [(expr, False)]
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, BinaryExpression) and not expanded:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
        else:
            yield node
