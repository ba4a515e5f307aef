"""
Error types and source location tracking for the infixcalc engine.
"""

import re
from dataclasses import dataclass
from typing import Optional

_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a position in the expression text.

    Attributes:
        column: 1-indexed column number
        offset: 0-indexed character offset from start of source
    """

    column: int
    offset: int = 0

    def __str__(self) -> str:
        return f"column {self.column}"


def display_line(source: str) -> str:
    """
    Render expression text on one line for error messages.

    Every whitespace character becomes a single space, so a caret placed by
    column still lines up when the input contains tabs or newlines.
    """
    return _WHITESPACE.sub(" ", source)


class CalcError(Exception):
    """Base exception for all lexing and parsing failures."""

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.location:
            parts.append(f"[{self.location}]")

        parts.append(self.message)

        if self.source_line is not None and self.location:
            parts.append(f"\n    {self.source_line}")
            # Caret under the offending column
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"\n{padding}^")
            return parts[0] + " " + "".join(parts[1:])

        return " ".join(parts)


class LexerError(CalcError):
    """Raised when the lexer meets an unknown character or a malformed number."""

    pass


class ParserError(CalcError):
    """Raised when no grammar rule matches a token range."""

    pass
