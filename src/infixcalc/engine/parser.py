"""
infixcalc Parser.

A recursive descent parser that turns a token list into an expression tree.
Instead of one grammar layer per precedence level, each token range is split
at its loosest-binding operators: additive splits are tried before
multiplicative ones. All operators of that class outside parentheses are
folded from the left, which makes ``a - b - c`` group as ``(a - b) - c``.
Recursion only happens per parenthesis level, never per operator.
"""

from typing import Optional

from infixcalc.engine.ast_nodes import (
    BinaryExpression,
    BinaryOperator,
    Expression,
    NumberLiteral,
)
from infixcalc.engine.tokens import Token, TokenType
from infixcalc.utils.errors import ParserError, display_line

TOKEN_TO_BINARY_OP: dict[TokenType, BinaryOperator] = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
}


class Parser:
    """
    Parser for infixcalc token lists.

    Usage:
        parser = Parser(tokens)
        expr = parser.parse()
    """

    def __init__(self, tokens: list[Token], source: str = "") -> None:
        """
        Initialize the parser.

        Args:
            tokens: Token list from the lexer
            source: Original expression text, used in error messages
        """
        self.tokens = tokens
        self.source = source

        # Index of each "(" mapped to the index of its matching ")"
        self._closing: dict[int, int] = {}

    def _error(self, message: str, index: int) -> ParserError:
        """Create a ParserError located at the token with the given index."""
        location = None
        if self.tokens:
            location = self.tokens[min(index, len(self.tokens) - 1)].location
        source_line = display_line(self.source) if self.source and location else None
        return ParserError(message, location, source_line)

    def _check_balance(self) -> None:
        """Pair up parentheses, rejecting token lists where that fails."""
        self._closing = {}
        open_indices: list[int] = []
        for index, token in enumerate(self.tokens):
            if token.type == TokenType.LPAREN:
                open_indices.append(index)
            elif token.type == TokenType.RPAREN:
                if not open_indices:
                    raise self._error("Unmatched ')'", index)
                self._closing[open_indices.pop()] = index

        if open_indices:
            raise self._error("Unclosed '('", open_indices[-1])

    def parse(self) -> Expression:
        """
        Parse the whole token list.

        Returns:
            The root of the expression tree.

        Raises:
            ParserError: If the tokens do not form a single expression.
        """
        self._check_balance()
        try:
            return self._parse_range(0, len(self.tokens))
        except RecursionError:
            raise self._error("Expression too deeply nested", 0) from None

    def _parse_range(self, begin: int, end: int) -> Expression:
        """Parse the half-open token range ``[begin, end)``."""
        while (
            end - begin >= 2
            and self.tokens[begin].type == TokenType.LPAREN
            and self.tokens[end - 1].type == TokenType.RPAREN
            and self._is_lone_group(begin, end)
        ):
            begin += 1
            end -= 1

        if begin >= end:
            raise self._error("Expected an expression", begin)

        first = self.tokens[begin]
        if end - begin == 1 and first.type == TokenType.NUMBER:
            return NumberLiteral(first.value, first.location)

        splits = self._find_splits(begin, end, additive=True)
        if not splits:
            splits = self._find_splits(begin, end, additive=False)
        if not splits:
            raise self._error("Expected an operator between operands", begin)

        expr = self._parse_range(begin, splits[0])
        for position, split in enumerate(splits):
            operand_end = splits[position + 1] if position + 1 < len(splits) else end
            operator_token = self.tokens[split]
            expr = BinaryExpression(
                expr,
                TOKEN_TO_BINARY_OP[operator_token.type],
                self._parse_range(split + 1, operand_end),
                operator_token.location,
            )
        return expr

    def _is_lone_group(self, begin: int, end: int) -> bool:
        """
        Check whether the opening and closing parentheses of the range
        belong to each other, as in ``(1+2)`` but not ``(1)+(2)``.
        """
        return self._closing.get(begin) == end - 1

    def _find_splits(self, begin: int, end: int, additive: bool) -> list[int]:
        """
        Find the operators of one precedence class that are not nested in
        parentheses.

        Args:
            begin: Start of the range (inclusive)
            end: End of the range (exclusive)
            additive: Look for ``+``/``-`` if True, ``*``/``/`` otherwise

        Returns:
            Indices of the operator tokens in input order; empty if none.
        """
        splits: list[int] = []
        depth = 0

        for index in range(begin, end):
            token = self.tokens[index]
            is_candidate = token.is_additive if additive else token.is_multiplicative

            if is_candidate and depth == 0:
                splits.append(index)
            elif token.type == TokenType.LPAREN:
                depth += 1
            elif token.type == TokenType.RPAREN:
                depth -= 1

        return splits


def parse(tokens: list[Token], source: str = "") -> Expression:
    """
    Convenience function to parse a token list.

    Args:
        tokens: Token list from the lexer
        source: Original expression text for error messages

    Returns:
        Root of the expression tree
    """
    return Parser(tokens, source).parse()
