"""
infixcalc - An evaluator for single infix arithmetic expressions.

Supports ``+ - * /``, parentheses, signed decimal literals and implicit
multiplication, where ``6/2(1+2)`` groups as ``6/(2*(1+2))``.
"""

from infixcalc.engine import analyze_source, evaluate_source
from infixcalc.engine.lexer import Lexer
from infixcalc.engine.parser import Parser
from infixcalc.engine.evaluator import Evaluator

__version__ = "0.1.0"

calculate = evaluate_source

__all__ = [
    "calculate",
    "evaluate_source",
    "analyze_source",
    "Lexer",
    "Parser",
    "Evaluator",
]
