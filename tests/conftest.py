"""
Pytest configuration and shared fixtures for infixcalc tests.
"""

import pytest

from infixcalc.engine import analyze_source, evaluate_source
from infixcalc.engine.ast_nodes import Expression
from infixcalc.engine.lexer import Lexer
from infixcalc.engine.parser import Parser
from infixcalc.engine.tokens import Token


@pytest.fixture
def lexer_factory():
    """Factory fixture for creating lexers."""

    def _create_lexer(source: str) -> Lexer:
        return Lexer(source)

    return _create_lexer


@pytest.fixture
def parser_factory(lexer_factory):
    """Factory fixture for creating parsers from expression text."""

    def _create_parser(source: str) -> Parser:
        lexer = lexer_factory(source)
        tokens = lexer.tokenize()
        return Parser(tokens, source)

    return _create_parser


@pytest.fixture
def tokenize(lexer_factory):
    """Fixture to tokenize expression text."""

    def _tokenize(source: str) -> list[Token]:
        lexer = lexer_factory(source)
        return lexer.tokenize()

    return _tokenize


@pytest.fixture
def parse(parser_factory):
    """Fixture to parse expression text into a tree."""

    def _parse(source: str) -> Expression:
        parser = parser_factory(source)
        return parser.parse()

    return _parse


@pytest.fixture
def calculate():
    """Fixture to evaluate expression text through the whole pipeline."""
    return evaluate_source


@pytest.fixture
def analyze():
    """Fixture returning every intermediate result of the pipeline."""
    return analyze_source
