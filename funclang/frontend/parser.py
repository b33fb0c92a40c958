"""
Parser module for funclang.

This module provides a recursive descent parser with operator-precedence
climbing for binary expressions. It pulls tokens from the Lexer one at a
time and builds AST nodes.
"""

from typing import List, Optional, TextIO, Union

from ..syntax import (
    ANONYMOUS_FUNCTION_NAME,
    BinaryOp, Expr, FunctionCall, FunctionDefinition, FunctionPrototype,
    NumberLiteral, VariableRef,
)
from .lexer import Lexer, Token, TokenType
from .precedence import PrecedenceTable, UNKNOWN_PRECEDENCE


class ParseError(Exception):
    """Exception raised for syntax errors."""

    def __init__(self, message: str, lineno: int = 0, col_offset: int = 0):
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.lineno > 0:
            return f"Line {self.lineno}, col {self.col_offset}: {self.message}"
        return self.message


class UnimplementedFeatureError(ParseError):
    """Raised for constructs the language reserves but does not support yet."""


class Parser:
    """Recursive descent parser for funclang.

    The parser owns its lexer and the current token; nothing is shared
    between instances.

    Example:
        >>> parser = Parser("a + b * c")
        >>> parser.parse_expression()
        BinaryOp(op='+', left=VariableRef(name='a'), right=BinaryOp(...))
    """

    def __init__(
        self,
        source: Union[str, TextIO, Lexer],
        precedence: Optional[PrecedenceTable] = None,
        allow_duplicate_params: bool = False,
    ):
        """Initialize the parser and read the first token.

        Args:
            source: Source string, readable text stream, or an existing Lexer
            precedence: Operator precedence table (defaults to the
                        conventional arithmetic table)
            allow_duplicate_params: Accept repeated parameter names
        """
        self._lexer = source if isinstance(source, Lexer) else Lexer(source)
        self.precedence = precedence if precedence is not None else PrecedenceTable.default()
        self.allow_duplicate_params = allow_duplicate_params
        self._current: Token = self._lexer.next_token()

    @property
    def current(self) -> Token:
        """The token currently being looked at."""
        return self._current

    def next_token(self) -> Token:
        """Consume the current token and return the new current one."""
        self._current = self._lexer.next_token()
        return self._current

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self._current.lineno, self._current.col_offset)

    def _expect_char(self, char: str, message: str) -> None:
        if not self._current.is_char(char):
            raise self._error(message)
        self.next_token()

    def _token_precedence(self) -> int:
        if self._current.type != TokenType.CHAR:
            return UNKNOWN_PRECEDENCE
        return self.precedence.get(self._current.value)

    # ==================== Expressions ====================

    def parse_primary(self) -> Expr:
        """Parse a number, variable, call, or parenthesized expression."""
        token = self._current

        if token.type == TokenType.NUMBER:
            self.next_token()
            return NumberLiteral(token.value)

        if token.type == TokenType.IDENTIFIER:
            return self._parse_identifier()

        if token.is_char('('):
            return self._parse_paren_expr()

        raise self._error("Expected an expression")

    def _parse_identifier(self) -> Expr:
        name = self._current.value
        self.next_token()

        if not self._current.is_char('('):
            return VariableRef(name)

        self.next_token()  # eat '('
        args: List[Expr] = []
        if not self._current.is_char(')'):
            while True:
                args.append(self.parse_expression())
                if self._current.is_char(')'):
                    break
                self._expect_char(',', "Expected ')' or ',' in argument list")
        self.next_token()  # eat ')'

        return FunctionCall(name, tuple(args))

    def _parse_paren_expr(self) -> Expr:
        self.next_token()  # eat '('
        expr = self.parse_expression()
        self._expect_char(')', "Expected ')'")
        return expr

    def parse_bin_op_rhs(self, min_precedence: int, left: Expr) -> Expr:
        """Fold binary operators onto ``left`` by precedence climbing.

        Args:
            min_precedence: Smallest operator precedence this call may consume
            left: Expression already parsed to the left of the operator

        Returns:
            The combined expression. ``left`` is returned unchanged when the
            current token is not an operator binding at least as tightly as
            ``min_precedence``.
        """
        while True:
            token_precedence = self._token_precedence()
            if token_precedence < min_precedence:
                return left

            op = self._current.value
            self.next_token()

            right = self.parse_primary()

            if token_precedence < self._token_precedence():
                right = self.parse_bin_op_rhs(token_precedence + 1, right)

            left = BinaryOp(op, left, right)

    def parse_expression(self) -> Expr:
        """Parse a full expression."""
        left = self.parse_primary()
        return self.parse_bin_op_rhs(0, left)

    # ==================== Functions ====================

    def parse_prototype(self) -> FunctionPrototype:
        """Parse ``name(param, ...)``; the 'func' keyword is already consumed."""
        if self._current.type != TokenType.IDENTIFIER:
            raise self._error("Expected function name in prototype")
        name = self._current.value
        self.next_token()

        self._expect_char('(', "Expected '(' in prototype")

        params: List[str] = []
        while True:
            token = self._current
            if token.type != TokenType.IDENTIFIER:
                raise self._error("Expected parameter name in prototype")
            if token.value in params and not self.allow_duplicate_params:
                raise self._error(f"Duplicate parameter name '{token.value}' in prototype")
            params.append(token.value)
            self.next_token()
            if not self._current.is_char(','):
                break
            self.next_token()

        self._expect_char(')', "Expected ')' in prototype")
        return FunctionPrototype(name, tuple(params))

    def parse_definition(self) -> FunctionDefinition:
        """Parse ``func name(params) body``."""
        if self._current.type != TokenType.FUNC:
            raise self._error("Expected 'func'")
        self.next_token()  # eat 'func'
        proto = self.parse_prototype()
        body = self.parse_expression()
        return FunctionDefinition(proto, body)

    def parse_top_level_expression(self) -> FunctionDefinition:
        """Parse a bare expression as an anonymous nullary function."""
        body = self.parse_expression()
        proto = FunctionPrototype(ANONYMOUS_FUNCTION_NAME, ())
        return FunctionDefinition(proto, body)

    def parse_import(self):
        """Parse an import statement.

        Raises:
            UnimplementedFeatureError: Always; imports are not supported
        """
        token = self._current
        raise UnimplementedFeatureError("Import not implemented.", token.lineno, token.col_offset)
