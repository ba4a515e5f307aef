"""
Token definitions for the infixcalc lexer.

This module defines the token types recognized in arithmetic expressions
and how a token stream is printed back to expression text.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

import numpy as np

from infixcalc.utils.errors import SourceLocation


class TokenType(Enum):
    """Enumeration of all token types in an expression."""

    # Literals
    NUMBER = auto()

    # Arithmetic operators
    STAR = auto()          # *
    SLASH = auto()         # /
    PLUS = auto()          # +
    MINUS = auto()         # -

    # Delimiters
    LPAREN = auto()        # (
    RPAREN = auto()        # )


# Single character operators
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

# Text each token type prints as; binary operators are padded with spaces
TOKEN_TEXT: dict[TokenType, str] = {
    TokenType.STAR: " * ",
    TokenType.SLASH: " / ",
    TokenType.PLUS: " + ",
    TokenType.MINUS: " - ",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
}


# Adjacent token pairs that need a space between them: printed without one
# they would read back as a single numeral or as an implicit multiplication
SPACED_PAIRS: set[tuple[TokenType, TokenType]] = {
    (TokenType.NUMBER, TokenType.NUMBER),
    (TokenType.NUMBER, TokenType.LPAREN),
    (TokenType.RPAREN, TokenType.LPAREN),
}


def format_number(value: float) -> str:
    """
    Render a number as the shortest positional decimal that reads back
    to the same float (``3.0`` -> ``3``, ``1e16`` -> ``10000000000000000``).
    """
    return np.format_float_positional(value, trim="-")


@dataclass(slots=True)
class Token:
    """
    Represents a single token from the expression text.

    Attributes:
        type: The type of this token
        value: The numeric value for NUMBER tokens, None otherwise
        location: Location of the character that produced this token
    """

    type: TokenType
    value: Optional[float]
    location: Optional[SourceLocation] = None

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r}, {self.location})"
        return f"Token({self.type.name}, {self.location})"

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return format_number(self.value)
        return TOKEN_TEXT[self.type]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Token):
            return self.type == other.type and self.value == other.value
        if isinstance(other, TokenType):
            return self.type == other
        return NotImplemented

    @property
    def is_additive(self) -> bool:
        """Check if this token is a ``+`` or ``-`` operator."""
        return self.type in {TokenType.PLUS, TokenType.MINUS}

    @property
    def is_multiplicative(self) -> bool:
        """Check if this token is a ``*`` or ``/`` operator."""
        return self.type in {TokenType.STAR, TokenType.SLASH}


def format_tokens(tokens: Iterable[Token]) -> str:
    """
    Print a token stream back to expression text.

    The output lexes back to an equal token stream. Synthetic tokens are
    printed as if they had been typed, so an implicit multiplication shows
    up as an explicit ``*``.
    """
    parts: list[str] = []
    previous: Optional[Token] = None
    for token in tokens:
        if previous is not None and (previous.type, token.type) in SPACED_PAIRS:
            parts.append(" ")
        parts.append(str(token))
        previous = token
    return "".join(parts)
