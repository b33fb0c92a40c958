"""
Lexer module for funclang.

This module provides a pull-based scanner that converts funclang source text
into a stream of tokens for the parser. One token is produced per call to
``Lexer.next_token``; the lexer keeps a single look-ahead character between
calls.
"""

import io
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, TextIO, Union


class TokenType(Enum):
    """Token types for the funclang language."""
    EOF = auto()         # End of input
    FUNC = auto()        # 'func' keyword
    IMPORT = auto()      # 'import' keyword
    IDENTIFIER = auto()  # [A-Za-z][A-Za-z0-9]*
    NUMBER = auto()      # Run of [0-9.]
    CHAR = auto()        # Any other single character (operators, punctuation)


@dataclass(frozen=True)
class Token:
    """Represents a token in the source code.

    Attributes:
        type: The token type
        value: Identifier/keyword text, float value for numbers,
               the character itself for CHAR tokens, "" for EOF
        lineno: Line number (1-indexed)
        col_offset: Column offset (0-indexed)
    """
    type: TokenType
    value: Union[str, float]
    lineno: int = 0
    col_offset: int = 0

    def is_char(self, char: str) -> bool:
        """Check whether this is the CHAR token for ``char``."""
        return self.type == TokenType.CHAR and self.value == char

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, line={self.lineno})"


# Longest prefix of a [0-9.]+ run that strtod() would accept
_FLOAT_PREFIX = re.compile(r"\d+\.?\d*|\.\d+")


def _to_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))


class Lexer:
    """Lexer for tokenizing funclang source code.

    Accepts either a source string or a text stream (anything with a
    ``read(n)`` method). Each instance owns its own cursor state, so separate
    lexers over separate inputs never interfere.

    Example:
        >>> lexer = Lexer("func add(a, b) a + b")
        >>> lexer.next_token()
        Token(FUNC, 'func', line=1)
    """

    _KEYWORDS = {
        'func': TokenType.FUNC,
        'import': TokenType.IMPORT,
    }

    _COMMENT_START = '#'
    _COMMENT_END = ('\n', '\r')

    def __init__(self, source: Union[str, TextIO]):
        """Initialize the lexer.

        Args:
            source: Source code string or readable text stream
        """
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source
        self._last_char = ' '
        self._lineno = 1
        self._col = -1

    def _read_char(self) -> str:
        """Read one character, returning '' at end of input."""
        char = self._stream.read(1)
        # A '\r' ends a line unless it is the first half of '\r\n'.
        if self._last_char == '\n' or (self._last_char == '\r' and char != '\n'):
            self._lineno += 1
            self._col = 0
        elif char:
            self._col += 1
        self._last_char = char
        return char

    @staticmethod
    def _is_alpha(char: str) -> bool:
        return char.isascii() and char.isalpha()

    @staticmethod
    def _is_digit(char: str) -> bool:
        return '0' <= char <= '9'

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns:
            The next Token. Once the input is exhausted every call
            returns an EOF token.
        """
        while True:
            char = self._last_char

            while char and char.isspace():
                char = self._read_char()

            lineno, col = self._lineno, self._col

            if self._is_alpha(char):
                text = char
                char = self._read_char()
                while self._is_alpha(char) or self._is_digit(char):
                    text += char
                    char = self._read_char()
                token_type = self._KEYWORDS.get(text, TokenType.IDENTIFIER)
                return Token(token_type, text, lineno, col)

            if self._is_digit(char) or char == '.':
                text = ''
                while self._is_digit(char) or char == '.':
                    text += char
                    char = self._read_char()
                return Token(TokenType.NUMBER, _to_float(text), lineno, col)

            if char == self._COMMENT_START:
                while char and char not in self._COMMENT_END:
                    char = self._read_char()
                continue

            if not char:
                return Token(TokenType.EOF, '', lineno, col)

            self._read_char()
            return Token(TokenType.CHAR, char, lineno, col)

    def tokenize(self) -> List[Token]:
        """Tokenize the remaining input.

        Returns:
            List of Token objects, ending with a single EOF token
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return


def tokenize_source(source: Union[str, TextIO]) -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: Source code string or readable text stream

    Returns:
        List of Token objects ending with EOF
    """
    return Lexer(source).tokenize()
