"""
Binary operator precedence table for funclang.

The parser consults this table to decide how binary expressions group.
Characters that are not in the table resolve to ``UNKNOWN_PRECEDENCE``,
which is lower than any valid precedence and ends the climbing loop.
"""

from typing import Dict, Iterator, Mapping, Optional, Tuple

UNKNOWN_PRECEDENCE = -1

# Characters the grammar already gives a meaning to
_RESERVED = frozenset("(),;#.")

DEFAULT_OPERATORS: Dict[str, int] = {
    '<': 10,
    '+': 20,
    '-': 20,
    '*': 40,
    '/': 40,
}


class PrecedenceTable:
    """Mapping from single-character operator to binding power.

    Example:
        >>> table = PrecedenceTable.default()
        >>> table.get('*') > table.get('+')
        True
        >>> table.get(')')
        -1
    """

    def __init__(self, operators: Optional[Mapping[str, int]] = None):
        """Initialize the table.

        Args:
            operators: Optional initial operator -> precedence mapping

        Raises:
            ValueError: If any entry is not a valid operator/precedence pair
        """
        self._table: Dict[str, int] = {}
        for op, precedence in (operators or {}).items():
            self.set(op, precedence)

    @classmethod
    def default(cls) -> "PrecedenceTable":
        """Return a table with the conventional arithmetic operators."""
        return cls(DEFAULT_OPERATORS)

    def get(self, op) -> int:
        """Look up the precedence of ``op``.

        Args:
            op: Operator character (any value is accepted)

        Returns:
            The precedence, or UNKNOWN_PRECEDENCE if ``op`` is not an operator
        """
        if not isinstance(op, str):
            return UNKNOWN_PRECEDENCE
        return self._table.get(op, UNKNOWN_PRECEDENCE)

    def set(self, op: str, precedence: int) -> None:
        """Add or replace an operator.

        Raises:
            ValueError: If ``op`` is not a usable operator character or
                ``precedence`` is not a non-negative integer
        """
        if not isinstance(op, str) or len(op) != 1:
            raise ValueError(f"Operator must be a single character: {op!r}")
        if op.isalnum() or op.isspace() or op in _RESERVED:
            raise ValueError(f"Character cannot be used as an operator: {op!r}")
        if isinstance(precedence, bool) or not isinstance(precedence, int) or precedence < 0:
            raise ValueError(f"Precedence must be a non-negative integer: {precedence!r}")
        self._table[op] = precedence

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._table.items())

    def copy(self) -> "PrecedenceTable":
        return PrecedenceTable(self._table)

    def __contains__(self, op) -> bool:
        return op in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __repr__(self) -> str:
        return f"PrecedenceTable({self._table!r})"
