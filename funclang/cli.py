"""
Command-line interface for funclang.

Provides the main entry point with subcommands for parsing funclang
source into AST dumps and for listing its tokens.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, TextIO, Tuple

from .core import Driver
from .frontend import Lexer, TokenType
from .syntax import format_node, format_number
from .utils.settings import Settings

logger = logging.getLogger(__name__)


def parse_operator(text: str) -> Tuple[str, int]:
    """Parse a ``CHAR=PRECEDENCE`` operator override.

    Raises:
        argparse.ArgumentTypeError: If the text is malformed
    """
    op, sep, precedence = text.rpartition("=")
    if not sep or len(op) != 1:
        raise argparse.ArgumentTypeError(f"expected CHAR=PRECEDENCE, got {text!r}")
    try:
        return op, int(precedence)
    except ValueError:
        raise argparse.ArgumentTypeError(f"precedence must be an integer, got {precedence!r}")


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        type=str,
        help="Input source file ('-' reads standard input)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )


def _add_parse_arguments(parser: argparse.ArgumentParser) -> None:
    _add_input_arguments(parser)
    parser.add_argument(
        "--op",
        dest="operators",
        action="append",
        type=parse_operator,
        default=[],
        metavar="CHAR=PRECEDENCE",
        help="Add or override a binary operator (repeatable)"
    )
    parser.add_argument(
        "--allow-duplicate-params",
        action="store_true",
        help="Accept repeated parameter names in function prototypes"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="funclang",
        description="funclang: parser front end for a small expression language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m funclang parse program.fl
  python -m funclang parse - --op '%=40' < program.fl
  python -m funclang tokens program.fl
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a source file and print its syntax tree"
    )
    _add_parse_arguments(parse_parser)

    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the tokens of a source file"
    )
    _add_input_arguments(tokens_parser)

    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings(allow_duplicate_params=args.allow_duplicate_params)
    operators: Dict[str, int] = dict(settings.operators)
    operators.update(dict(args.operators))
    settings.operators = operators
    return settings


def _open_input(name: str) -> TextIO:
    if name == "-":
        return sys.stdin
    return Path(name).open("r", encoding="utf-8")


def handle_parse(args: argparse.Namespace) -> int:
    """Handle the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 if every unit parsed, 1 otherwise)
    """
    settings = _build_settings(args)
    logger.debug("Parsing: %s", args.input)
    logger.debug("Operators: %s", settings.operators)

    stream = _open_input(args.input)
    try:
        result = Driver.from_source(stream, settings).run()
    finally:
        if stream is not sys.stdin:
            stream.close()

    for definition in result.definitions:
        print(format_node(definition))

    logger.debug("%d definition(s), %d error(s)", len(result.definitions), len(result.errors))
    return 0 if result.success else 1


def format_token(token) -> str:
    """Render a token as ``TYPE value line:col``."""
    value = token.value
    if token.type == TokenType.NUMBER:
        value = format_number(value)
    elif token.type == TokenType.EOF:
        value = "<eof>"
    return f"{token.type.name} {value} {token.lineno}:{token.col_offset}"


def handle_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 once the input is readable)
    """
    stream = _open_input(args.input)
    try:
        lines: List[str] = [format_token(token) for token in Lexer(stream)]
    finally:
        if stream is not sys.stdin:
            stream.close()

    for line in lines:
        print(line)
    return 0


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"funclang version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: list = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        return handle_version(args)

    _configure_logging(args.verbose)

    try:
        if args.command == "parse":
            return handle_parse(args)
        elif args.command == "tokens":
            return handle_tokens(args)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read input: %s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
