"""
Abstract syntax tree module for funclang.

This module defines the node types produced by the parser and a printer
that renders them as S-expressions.
"""

from .nodes import (
    ANONYMOUS_FUNCTION_NAME,
    # Expressions
    NumberLiteral,
    VariableRef,
    BinaryOp,
    FunctionCall,
    Expr,
    # Functions
    FunctionPrototype,
    FunctionDefinition,
    Node,
)
from .printer import format_node, format_number

__all__ = [
    "ANONYMOUS_FUNCTION_NAME",
    # Expressions
    "NumberLiteral",
    "VariableRef",
    "BinaryOp",
    "FunctionCall",
    "Expr",
    # Functions
    "FunctionPrototype",
    "FunctionDefinition",
    "Node",
    # Rendering
    "format_node",
    "format_number",
]
