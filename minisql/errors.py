"""
Error types raised while scanning and parsing SQL text.

Both derive from the builtin SyntaxError so callers can catch either
domain with a single except clause.
"""

from typing import Optional

from . import config


class SQLError(SyntaxError):
    """Base class for lexical and syntax errors"""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if config.PARSER_DETAILED_ERRORS and self.line is not None:
            return f"{self.message} at line {self.line}, column {self.column}"
        return self.message

    def __str__(self):
        return self._format()


class LexError(SQLError):
    """Raised by the tokenizer; no partial token list is returned"""
    pass


class ParseError(SQLError):
    """Raised by the parser at the first grammar mismatch"""
    pass
