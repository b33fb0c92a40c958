"""
S-expression rendering of funclang AST nodes.

Used by the CLI and the fixture runner to give every tree a stable,
human-readable text form.
"""

from .nodes import (
    BinaryOp, FunctionCall, FunctionDefinition, FunctionPrototype,
    Node, NumberLiteral, VariableRef,
)


def format_number(value: float) -> str:
    """Format a float without a trailing '.0' for integral values."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_node(node: Node) -> str:
    """Render a node as an S-expression.

    Example:
        >>> format_node(BinaryOp('+', VariableRef('a'), NumberLiteral(1.0)))
        '(+ a 1)'
    """
    if isinstance(node, NumberLiteral):
        return format_number(node.value)
    if isinstance(node, VariableRef):
        return node.name
    if isinstance(node, BinaryOp):
        return f"({node.op} {format_node(node.left)} {format_node(node.right)})"
    if isinstance(node, FunctionCall):
        parts = ["call", node.callee] + [format_node(arg) for arg in node.args]
        return "(" + " ".join(parts) + ")"
    if isinstance(node, FunctionPrototype):
        return f"(proto {node.name} ({' '.join(node.params)}))"
    if isinstance(node, FunctionDefinition):
        proto = node.prototype
        return f"(def {proto.name} ({' '.join(proto.params)}) {format_node(node.body)})"
    raise TypeError(f"Not an AST node: {node!r}")
