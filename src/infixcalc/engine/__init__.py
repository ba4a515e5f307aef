"""
infixcalc Engine Package.

This package contains the evaluation pipeline:
- Lexer: Tokenizes expression text
- Parser: Produces an expression tree from tokens
- AST: Node definitions for the tree
- Evaluator: Folds the tree to a number
- Printer: Renders trees for debugging

Each stage runs to completion before the next one starts, so a failure is
always attributable to exactly one stage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from infixcalc.engine.ast_nodes import (
    ASTVisitor,
    BinaryExpression,
    BinaryOperator,
    Expression,
    NumberLiteral,
    iter_postorder,
)
from infixcalc.engine.evaluator import Evaluator, evaluate
from infixcalc.engine.lexer import Lexer, tokenize
from infixcalc.engine.parser import Parser, parse
from infixcalc.engine.printer import ExpressionPrinter, format_expression
from infixcalc.engine.tokens import Token, TokenType, format_tokens

logger = logging.getLogger(__name__)


@dataclass
class CalculationResult:
    """
    Every intermediate product of evaluating one expression.

    Attributes:
        source: The expression text
        tokens: Token list produced by the lexer
        ast: Tree produced by the parser
        value: Result of evaluating the tree
    """

    source: str
    tokens: list[Token]
    ast: Expression
    value: float


def analyze_source(source: str) -> CalculationResult:
    """
    Run the full pipeline and keep the intermediate results.

    Args:
        source: Expression text

    Returns:
        CalculationResult with tokens, tree and value

    Raises:
        LexerError: If the text cannot be tokenized
        ParserError: If the tokens do not form an expression
    """
    debug = logger.isEnabledFor(logging.DEBUG)

    tokens = Lexer(source).tokenize()
    if debug:
        logger.debug("Lexed %d tokens: %s", len(tokens), format_tokens(tokens))

    ast = Parser(tokens, source).parse()
    if debug:
        logger.debug("Parsed tree: %s", format_expression(ast))

    value = Evaluator().evaluate(ast)
    logger.debug("Evaluated to %r", value)

    return CalculationResult(source=source, tokens=tokens, ast=ast, value=value)


def evaluate_source(source: str) -> float:
    """
    Evaluate expression text to a number.

    Args:
        source: Expression text

    Returns:
        The value of the expression
    """
    return analyze_source(source).value


__all__ = [
    # Pipeline
    "CalculationResult",
    "analyze_source",
    "evaluate_source",
    # Stages
    "Lexer",
    "tokenize",
    "Parser",
    "parse",
    "Evaluator",
    "evaluate",
    # Tokens
    "Token",
    "TokenType",
    "format_tokens",
    # Tree
    "ASTVisitor",
    "Expression",
    "NumberLiteral",
    "BinaryExpression",
    "BinaryOperator",
    "iter_postorder",
    "ExpressionPrinter",
    "format_expression",
]
