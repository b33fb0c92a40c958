"""
Unit tests for the binary operator precedence table.
"""

import pytest
from funclang.frontend import PrecedenceTable, DEFAULT_OPERATORS, UNKNOWN_PRECEDENCE


class TestPrecedenceLookup:
    """Tests for precedence lookups."""

    @pytest.fixture
    def table(self):
        return PrecedenceTable.default()

    def test_default_operators(self, table):
        """Test the conventional operator set is present."""
        assert set(table) == {'<', '+', '-', '*', '/'}
        assert len(table) == len(DEFAULT_OPERATORS)

    def test_multiplicative_binds_tighter(self, table):
        """Test that '*' and '/' bind tighter than '+' and '-'."""
        assert table.get('*') > table.get('+')
        assert table.get('/') > table.get('-')
        assert table.get('+') == table.get('-')
        assert table.get('*') == table.get('/')

    def test_comparison_binds_loosest(self, table):
        """Test that '<' is below the additive operators."""
        assert 0 <= table.get('<') < table.get('+')

    @pytest.mark.parametrize("char", [')', ',', ';', '(', '@', 'x', ''])
    def test_unknown_characters(self, table, char):
        """Test that non-operators resolve to the sentinel."""
        assert table.get(char) == UNKNOWN_PRECEDENCE

    def test_non_string_lookup(self, table):
        """Test that number values resolve to the sentinel."""
        assert table.get(1.0) == UNKNOWN_PRECEDENCE
        assert table.get(None) == UNKNOWN_PRECEDENCE

    def test_sentinel_below_every_precedence(self, table):
        """Test that the sentinel is lower than any defined precedence."""
        assert all(UNKNOWN_PRECEDENCE < prec for _, prec in table.items())

    def test_empty_table(self):
        """Test that an explicitly empty table knows no operators."""
        table = PrecedenceTable()
        assert len(table) == 0
        assert table.get('+') == UNKNOWN_PRECEDENCE


class TestPrecedenceUpdate:
    """Tests for adding and validating operators."""

    def test_set_new_operator(self):
        """Test adding an operator."""
        table = PrecedenceTable.default()
        table.set('%', 40)
        assert '%' in table
        assert table.get('%') == 40

    def test_override_operator(self):
        """Test replacing an existing precedence."""
        table = PrecedenceTable.default()
        table.set('+', 50)
        assert table.get('+') > table.get('*')

    def test_copy_is_independent(self):
        """Test that copies do not share storage."""
        table = PrecedenceTable.default()
        clone = table.copy()
        clone.set('^', 60)
        assert '^' in clone
        assert '^' not in table

    def test_default_is_fresh(self):
        """Test that default() does not return a shared instance."""
        PrecedenceTable.default().set('^', 60)
        assert '^' not in PrecedenceTable.default()

    @pytest.mark.parametrize("op", ['', '++', 'a', '7', ' ', '(', ')', ',', ';', '#', '.'])
    def test_rejects_invalid_operator(self, op):
        """Test that unusable operator characters are rejected."""
        with pytest.raises(ValueError):
            PrecedenceTable().set(op, 10)

    @pytest.mark.parametrize("precedence", [-1, 1.5, "10", True])
    def test_rejects_invalid_precedence(self, precedence):
        """Test that precedences must be non-negative integers."""
        with pytest.raises(ValueError):
            PrecedenceTable().set('+', precedence)

    def test_constructor_validates(self):
        """Test that the constructor validates its mapping."""
        with pytest.raises(ValueError):
            PrecedenceTable({'+': 10, '(': 5})

    def test_zero_precedence_allowed(self):
        """Test that zero is a valid precedence."""
        table = PrecedenceTable({'|': 0})
        assert table.get('|') == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
