"""
Test suite for funclang.

This package contains tests for the funclang front end including:
- Unit tests for the lexer, precedence table, parser and AST nodes
- Driver and CLI tests for whole-program parsing and error recovery
- Fixture tests comparing parser output to expected dumps
"""

__version__ = "0.1.0"
