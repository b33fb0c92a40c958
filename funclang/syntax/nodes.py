"""
AST node definitions for funclang.

This module contains the data classes that represent the abstract syntax
tree produced by the parser. Nodes are immutable and own their children.
"""

from dataclasses import dataclass
from typing import Tuple, Union

# Reserved prototype name for top-level expressions
ANONYMOUS_FUNCTION_NAME = "__anon_func__"


# ==================== Expressions ====================

@dataclass(frozen=True)
class NumberLiteral:
    """Numeric literal expression.

    Attributes:
        value: The literal value (always a float)
    """
    value: float


@dataclass(frozen=True)
class VariableRef:
    """Variable reference expression.

    Attributes:
        name: The variable name
    """
    name: str


@dataclass(frozen=True)
class BinaryOp:
    """Binary operation expression.

    Attributes:
        op: The operator character
        left: Left operand expression
        right: Right operand expression
    """
    op: str
    left: "Expr"
    right: "Expr"


@dataclass(frozen=True)
class FunctionCall:
    """Function call expression.

    Attributes:
        callee: Name of the called function
        args: Argument expressions in source order
    """
    callee: str
    args: Tuple["Expr", ...] = ()


Expr = Union[NumberLiteral, VariableRef, BinaryOp, FunctionCall]


# ==================== Functions ====================

@dataclass(frozen=True)
class FunctionPrototype:
    """Function signature.

    Attributes:
        name: Function name
        params: Parameter names in declaration order
    """
    name: str
    params: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FunctionDefinition:
    """Function definition: a prototype and a single body expression.

    Top-level expressions are also represented this way, with an anonymous
    nullary prototype.

    Attributes:
        prototype: The function signature
        body: The body expression
    """
    prototype: FunctionPrototype
    body: Expr


Node = Union[NumberLiteral, VariableRef, BinaryOp, FunctionCall,
             FunctionPrototype, FunctionDefinition]
