"""
Configuration settings for funclang.

This module contains default configuration values and settings used
by the parser and the top-level driver.
"""

from dataclasses import dataclass
from typing import Dict

from ..frontend.precedence import DEFAULT_OPERATORS, PrecedenceTable


@dataclass
class Settings:
    """Parser settings and configuration.

    Attributes:
        operators: Binary operator -> precedence mapping
        allow_duplicate_params: Accept repeated parameter names in a prototype
        max_errors: Stop the top-level loop after this many failed units
                    (0 means never stop early)
    """
    operators: Dict[str, int] = None
    allow_duplicate_params: bool = False
    max_errors: int = 0

    def __post_init__(self):
        if self.operators is None:
            self.operators = dict(DEFAULT_OPERATORS)

    def precedence_table(self) -> PrecedenceTable:
        """Build a precedence table from the configured operators."""
        return PrecedenceTable(self.operators)


# Global default settings instance
DEFAULT_SETTINGS = Settings()
