"""
Main entry point for minisql

Usage:
    python -m minisql [--execute SQL | --file FILE] [--tokens] [--debug]

Example:
    python -m minisql -e "SELECT a, b FROM t WHERE a > 1 ORDER BY b DESC;"
"""

import argparse
import logging
import sys
from typing import List

from . import config
from .errors import SQLError
from .parser import Parser
from .pretty import format_tree, format_tokens
from .repl import REPL
from .tokenizer import tokenize
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    """Configure the root logger from config"""
    level = logging.DEBUG if (debug or config.DEBUG) else (
        logging.INFO if config.VERBOSE else logging.WARNING
    )
    logging.basicConfig(level=level, format=config.LOG_FORMAT, filename=config.LOG_FILE)


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='minisql - SELECT / CREATE TABLE parser',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive shell
  python -m minisql

  # Parse one statement
  python -m minisql --execute "CREATE TABLE t (id INT PRIMARY KEY);"

  # Parse every statement in a file
  python -m minisql --file queries.sql
        """
    )

    parser.add_argument(
        '--execute', '-e',
        metavar='SQL',
        help='Parse SQL statement and exit'
    )

    parser.add_argument(
        '--file', '-f',
        metavar='FILE',
        help='Parse SQL statements from file'
    )

    parser.add_argument(
        '--tokens',
        action='store_true',
        help='Print the token stream instead of the syntax tree'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)
    setup_logging(args.debug)

    if args.execute:
        return execute_sql(args.execute, args.tokens)

    if args.file:
        return execute_file(args.file, args.tokens)

    repl = REPL()
    repl.start()

    return 0


def execute_sql(sql: str, show_tokens: bool = False) -> int:
    """Parse a single statement and print its tree"""
    try:
        tokens = tokenize(sql)
        if show_tokens:
            print(format_tokens(tokens))
            return 0
        statement = Parser(tokens).parse()
        print(format_tree(statement))
        return 0

    except SQLError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def execute_file(filename: str, show_tokens: bool = False) -> int:
    """Parse every ';'-terminated statement of a file"""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            sql = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {filename}: {e}", file=sys.stderr)
        return 1

    try:
        tokens = tokenize(sql)
    except SQLError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if show_tokens:
        print(format_tokens(tokens))
        return 0

    statements = split_statements(tokens)
    logger.debug("Found %d statements in %s", len(statements), filename)

    for statement_tokens in statements:
        try:
            statement = Parser(statement_tokens).parse()
        except SQLError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(format_tree(statement))

    return 0


def split_statements(tokens: List[Token]) -> List[List[Token]]:
    """Split a token list after each ';', giving each part its own EOF"""
    statements = []
    current = []

    for token in tokens:
        if token.type == TokenType.EOF:
            if current:
                statements.append(current + [token])
            break
        current.append(token)
        if token.type == TokenType.SEMICOLON:
            end = Token(TokenType.EOF, None, token.position + 1, token.line, token.column + 1)
            statements.append(current + [end])
            current = []

    return statements


if __name__ == '__main__':
    sys.exit(main())
