"""
infixcalc Lexer (Tokenizer).

Transforms expression text into a stream of tokens. Two ambiguities of the
input notation are settled here rather than in the parser:

- whether a ``-`` is a sign or a subtraction, and
- where an implicit multiplication (``2(3)``, ``(1)(2)``) belongs, including
  the rule that ``a/b(c)`` groups as ``a/(b*(c))``.
"""

from typing import Iterator, Optional

from infixcalc.engine.tokens import SINGLE_CHAR_TOKENS, Token, TokenType
from infixcalc.utils.errors import LexerError, SourceLocation, display_line

DIGITS = "0123456789"
WHITESPACE = " \t\r\n"


class Lexer:
    """
    Tokenizer for arithmetic expressions.

    The lexer supports:
    - Decimal literals (``42``, ``3.14``, ``.5``, ``5.``)
    - Signed literals where the ``-`` cannot be a subtraction (``-3 + 5``)
    - Operators ``+ - * /`` and parentheses
    - Implicit multiplication before an opening parenthesis

    Usage:
        lexer = Lexer("6/2(1+2)")
        tokens = lexer.tokenize()
        # or iterate: for token in lexer: ...
    """

    def __init__(self, source: str) -> None:
        """
        Initialize the lexer with expression text.

        Args:
            source: The expression to tokenize
        """
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []

        # Characters of the numeric literal being accumulated
        self._number_chars: list[str] = []
        self._number_start: Optional[SourceLocation] = None

        # Literal parenthesis depth, and the depths at which each pending
        # division grouping has to be closed again
        self._depth = 0
        self._group_depths: list[int] = []

    @property
    def _current_char(self) -> Optional[str]:
        """Return the current character or None if at end."""
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    @property
    def _peek_char(self) -> Optional[str]:
        """Return the next character without consuming it."""
        peek_pos = self.pos + 1
        if peek_pos >= len(self.source):
            return None
        return self.source[peek_pos]

    @property
    def _previous_char(self) -> Optional[str]:
        """Return the raw character before the current one."""
        if self.pos == 0:
            return None
        return self.source[self.pos - 1]

    @property
    def _last_type(self) -> Optional[TokenType]:
        """Return the type of the most recently emitted token."""
        if not self.tokens:
            return None
        return self.tokens[-1].type

    def _location(self) -> SourceLocation:
        """Create a SourceLocation for the current position."""
        return SourceLocation(column=self.pos + 1, offset=self.pos)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.pos]
        self.pos += 1
        return char

    def _emit(self, token_type: TokenType, location: SourceLocation,
              value: Optional[float] = None) -> None:
        self.tokens.append(Token(token_type, value, location))

    def _is_sign(self) -> bool:
        """
        Decide whether the ``-`` at the current position is a sign.

        It is a sign when it is followed by a digit or ``(``, is not glued to
        the end of a numeral, and does not follow a complete operand.
        """
        following = self._peek_char
        if following is None or not (following in DIGITS or following == "("):
            return False

        previous = self._previous_char
        if previous is not None and previous in DIGITS:
            return False

        return self._last_type not in (TokenType.NUMBER, TokenType.RPAREN)

    def _is_number_char(self, char: str) -> bool:
        """Check if the character extends the pending numeric literal."""
        if char in DIGITS or char == ".":
            return True
        return char == "-" and self._is_sign()

    def _flush_number(self, trigger: Optional[str]) -> None:
        """
        Emit the pending numeric literal as a NUMBER token.

        Args:
            trigger: The character that ended the literal, None at end of input
        """
        text = "".join(self._number_chars)
        location = self._number_start
        self._number_chars = []
        self._number_start = None

        # A bare sign negates the parenthesized group that follows it
        if text == "-":
            text = "-1"

        try:
            value = float(text)
        except ValueError:
            raise LexerError(
                f"Invalid number: {text!r}",
                location,
                display_line(self.source),
            ) from None

        if trigger != "(":
            self._emit(TokenType.NUMBER, location, value)
            return

        # Implicit multiplication directly after a division binds tighter
        # than the division: a/b(c) -> a/(b*(c))
        if self._last_type == TokenType.SLASH:
            self._emit(TokenType.LPAREN, location)
            self._group_depths.append(self._depth)

        self._emit(TokenType.NUMBER, location, value)
        self._emit(TokenType.STAR, self._location())

    def _read_operator(self, char: str) -> None:
        """Emit the token for an operator or parenthesis character."""
        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is None:
            raise LexerError(
                f"Unexpected character: {char!r}",
                self._location(),
                display_line(self.source),
            )

        location = self._location()

        if token_type == TokenType.LPAREN:
            self._depth += 1
            self._emit(token_type, location)
        elif token_type == TokenType.RPAREN:
            self._depth -= 1
            self._emit(token_type, location)
            if self._group_depths and self._group_depths[-1] == self._depth:
                self._group_depths.pop()
                self._emit(TokenType.RPAREN, location)
        else:
            self._emit(token_type, location)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire expression.

        Returns:
            A list of all tokens in input order.

        Raises:
            LexerError: On an unknown character or an unparsable number.
        """
        self.tokens = []
        self.pos = 0
        self._number_chars = []
        self._number_start = None
        self._depth = 0
        self._group_depths = []

        while self._current_char is not None:
            char = self._current_char

            if self._is_number_char(char):
                if not self._number_chars:
                    self._number_start = self._location()
                self._number_chars.append(char)
                self._advance()
                continue

            if self._number_chars:
                self._flush_number(char)
            elif char == "(" and self._previous_char == ")":
                # (a)(b) -> (a)*(b)
                self._emit(TokenType.STAR, self._location())

            if char not in WHITESPACE:
                self._read_operator(char)

            self._advance()

        if self._number_chars:
            self._flush_number(None)

        return self.tokens

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens (re-tokenizes if necessary)."""
        if not self.tokens:
            self.tokenize()
        return iter(self.tokens)


def tokenize(source: str) -> list[Token]:
    """
    Convenience function to tokenize an expression.

    Args:
        source: Expression text

    Returns:
        List of tokens
    """
    return Lexer(source).tokenize()
