"""
Unit tests for S-expression rendering.
"""

import pytest
from funclang.syntax import (
    BinaryOp, FunctionCall, FunctionDefinition, FunctionPrototype,
    NumberLiteral, VariableRef, format_node, format_number,
)


class TestFormatNumber:
    """Tests for number formatting."""

    @pytest.mark.parametrize("value, expected", [
        (3.0, "3"),
        (0.0, "0"),
        (2.5, "2.5"),
        (0.125, "0.125"),
    ])
    def test_values(self, value, expected):
        assert format_number(value) == expected


class TestFormatNode:
    """Tests for node rendering."""

    def test_expressions(self):
        """Test expression nodes."""
        node = BinaryOp('+', VariableRef("a"), BinaryOp('*', NumberLiteral(2.0), VariableRef("c")))
        assert format_node(node) == "(+ a (* 2 c))"

    def test_call(self):
        """Test calls with and without arguments."""
        assert format_node(FunctionCall("f", (VariableRef("x"), NumberLiteral(1.5)))) == "(call f x 1.5)"
        assert format_node(FunctionCall("g")) == "(call g)"

    def test_prototype(self):
        """Test prototypes."""
        assert format_node(FunctionPrototype("add", ("a", "b"))) == "(proto add (a b))"

    def test_definition(self):
        """Test definitions."""
        node = FunctionDefinition(
            FunctionPrototype("add", ("a", "b")),
            BinaryOp('+', VariableRef("a"), VariableRef("b")),
        )
        assert format_node(node) == "(def add (a b) (+ a b))"

    def test_anonymous_definition(self):
        """Test a definition with no parameters."""
        node = FunctionDefinition(FunctionPrototype("__anon_func__"), NumberLiteral(1.0))
        assert format_node(node) == "(def __anon_func__ () 1)"

    def test_rejects_non_nodes(self):
        """Test that arbitrary values are rejected."""
        with pytest.raises(TypeError):
            format_node("x")
