"""
Top-level driver for funclang.

This module provides the loop that repeatedly asks the parser for one
top-level construct (function definition, import, or bare expression),
reports failures and resynchronizes by skipping a single token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TextIO, Union

from ..frontend.lexer import TokenType
from ..frontend.parser import Parser, ParseError
from ..syntax import FunctionDefinition, format_node
from ..utils.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)


@dataclass
class TopLevelResult:
    """Outcome of parsing one top-level unit.

    Attributes:
        node: The parsed definition, or None if parsing failed
        error: The error that stopped parsing, or None on success
        lineno: Line on which the unit started
    """
    node: Optional[FunctionDefinition] = None
    error: Optional[ParseError] = None
    lineno: int = 0

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class DriveResult:
    """Result of driving a parser to the end of its input.

    Attributes:
        definitions: Successfully parsed definitions in source order
        errors: Errors reported for failed units, in source order
        aborted: True if parsing stopped early because of max_errors
    """
    definitions: List[FunctionDefinition] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)
    aborted: bool = False

    @property
    def success(self) -> bool:
        return not self.errors and not self.aborted


class Driver:
    """Top-level parse loop with one-token error recovery.

    Example:
        >>> driver = Driver(Parser("func sq(x) x * x; sq(4)"))
        >>> result = driver.run()
        >>> [d.prototype.name for d in result.definitions]
        ['sq', '__anon_func__']
    """

    def __init__(self, parser: Parser, settings: Optional[Settings] = None):
        """Initialize the driver.

        Args:
            parser: Parser positioned at the first token of the input
            settings: Optional settings (max_errors is honoured here)
        """
        self.parser = parser
        self.settings = settings or DEFAULT_SETTINGS

    @classmethod
    def from_source(cls, source: Union[str, TextIO], settings: Optional[Settings] = None) -> Driver:
        """Build a driver and parser for ``source`` using ``settings``."""
        settings = settings or DEFAULT_SETTINGS
        parser = Parser(
            source,
            precedence=settings.precedence_table(),
            allow_duplicate_params=settings.allow_duplicate_params,
        )
        return cls(parser, settings)

    def _parse_unit(self) -> FunctionDefinition:
        token = self.parser.current
        if token.type == TokenType.FUNC:
            return self.parser.parse_definition()
        if token.type == TokenType.IMPORT:
            return self.parser.parse_import()
        return self.parser.parse_top_level_expression()

    def units(self) -> Iterator[TopLevelResult]:
        """Parse top-level units until end of input.

        Yields:
            One TopLevelResult per attempted unit. Separators (';') are
            skipped without producing a result.
        """
        failures = 0
        while self.parser.current.type != TokenType.EOF:
            token = self.parser.current

            if token.is_char(';'):
                self.parser.next_token()
                continue

            try:
                node = self._parse_unit()
            except ParseError as e:
                error = e
            except RecursionError:
                error = ParseError("Expression nesting too deep", token.lineno, token.col_offset)
            else:
                logger.debug("Parsed %s", format_node(node))
                yield TopLevelResult(node=node, lineno=token.lineno)
                continue

            logger.error("Error: %s", error)
            # Resynchronize by skipping one token
            self.parser.next_token()
            yield TopLevelResult(error=error, lineno=token.lineno)

            failures += 1
            if self.settings.max_errors and failures >= self.settings.max_errors:
                logger.error("Too many errors (%d), giving up", failures)
                return

    def run(self) -> DriveResult:
        """Parse the whole input.

        Returns:
            DriveResult with every definition and error
        """
        result = DriveResult()
        for unit in self.units():
            if unit.success:
                result.definitions.append(unit.node)
            else:
                result.errors.append(unit.error)

        if self.parser.current.type != TokenType.EOF:
            result.aborted = True
        return result


def parse_source(source: Union[str, TextIO], settings: Optional[Settings] = None) -> DriveResult:
    """Convenience function to parse a whole program.

    Args:
        source: Source code string or readable text stream
        settings: Optional settings

    Returns:
        DriveResult for the program
    """
    return Driver.from_source(source, settings).run()
