"""
Frontend module for funclang.

This module provides the lexer, the operator precedence table and the
parser components of the funclang front end.
"""

from .lexer import Lexer, Token, TokenType, tokenize_source
from .precedence import PrecedenceTable, DEFAULT_OPERATORS, UNKNOWN_PRECEDENCE
from .parser import Parser, ParseError, UnimplementedFeatureError

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenType",
    "tokenize_source",
    # Operator precedence
    "PrecedenceTable",
    "DEFAULT_OPERATORS",
    "UNKNOWN_PRECEDENCE",
    # Parser components
    "Parser",
    "ParseError",
    "UnimplementedFeatureError",
]
