"""
infixcalc Utilities Package.

Error types and source locations shared by every pipeline stage.
"""

from infixcalc.utils.errors import (
    CalcError,
    LexerError,
    ParserError,
    SourceLocation,
    display_line,
)

__all__ = [
    "CalcError",
    "LexerError",
    "ParserError",
    "SourceLocation",
    "display_line",
]
