"""
funclang - front end for a small expression-oriented language

Converts funclang source text into tokens and then into an abstract syntax
tree of numbers, binary operators, variables, calls, prototypes and function
definitions. Top-level expressions are wrapped in anonymous functions so
every parsed unit has the same shape.

Example:
    >>> from funclang import parse_source
    >>> result = parse_source("func add(a, b) a + b")
    >>> if result.success:
    ...     print(result.definitions[0].prototype.params)
    ('a', 'b')

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "funclang Team"

from .frontend import (
    Lexer, Token, TokenType, Parser, ParseError, UnimplementedFeatureError,
    PrecedenceTable,
)
from .core import Driver, DriveResult, parse_source
from .syntax import format_node

__all__ = [
    "__version__",
    "__author__",
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "ParseError",
    "UnimplementedFeatureError",
    "PrecedenceTable",
    "Driver",
    "DriveResult",
    "parse_source",
    "format_node",
]
