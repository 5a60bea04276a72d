"""
Token model - the closed set of lexical units produced by the tokenizer
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class TokenType(Enum):
    """Token types for SQL lexical analysis"""
    # Punctuation
    LPAREN = auto()      # (
    RPAREN = auto()      # )
    COMMA = auto()       # ,
    SEMICOLON = auto()   # ;

    # Operators
    PLUS = auto()        # +
    MINUS = auto()       # -
    STAR = auto()        # *  (multiplication or wildcard)
    DIVIDE = auto()      # /
    EQ = auto()          # = or ==
    NEQ = auto()         # !=
    GT = auto()          # >
    GTE = auto()         # >=
    LT = auto()          # <
    LTE = auto()         # <=

    # Literals
    NUMBER = auto()
    STRING = auto()

    # Words
    IDENTIFIER = auto()
    KEYWORD = auto()

    # Special
    INVALID = auto()
    EOF = auto()


class Keyword(Enum):
    """Reserved words, matched case-insensitively"""
    SELECT = auto()
    CREATE = auto()
    TABLE = auto()
    WHERE = auto()
    ORDER = auto()
    BY = auto()
    ASC = auto()
    DESC = auto()
    FROM = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    TRUE = auto()
    FALSE = auto()
    PRIMARY = auto()
    KEY = auto()
    CHECK = auto()
    INT = auto()
    BOOL = auto()
    VARCHAR = auto()
    NULL = auto()

    @classmethod
    def lookup(cls, word: str):
        """Return the keyword spelled by word, or None"""
        return cls.__members__.get(word.upper())


# Canonical spelling of the fixed-text tokens
SYMBOLS = {
    TokenType.LPAREN: '(',
    TokenType.RPAREN: ')',
    TokenType.COMMA: ',',
    TokenType.SEMICOLON: ';',
    TokenType.PLUS: '+',
    TokenType.MINUS: '-',
    TokenType.STAR: '*',
    TokenType.DIVIDE: '/',
    TokenType.EQ: '=',
    TokenType.NEQ: '!=',
    TokenType.GT: '>',
    TokenType.GTE: '>=',
    TokenType.LT: '<',
    TokenType.LTE: '<=',
}


@dataclass(frozen=True)
class Token:
    """Represents a single token in SQL input"""
    type: TokenType
    value: Any     # int for NUMBER, str for STRING/IDENTIFIER/INVALID, Keyword for KEYWORD
    position: int  # Character position in input
    line: int      # Line number (for error messages)
    column: int    # Column number (for error messages)

    def is_keyword(self, keyword: Keyword) -> bool:
        return self.type == TokenType.KEYWORD and self.value == keyword

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"

    def __str__(self):
        if self.type == TokenType.EOF:
            return "end of input"
        if self.type == TokenType.KEYWORD:
            return f"keyword {self.value.name}"
        if self.type == TokenType.IDENTIFIER:
            return f"identifier '{self.value}'"
        if self.type == TokenType.NUMBER:
            return f"number {self.value}"
        if self.type == TokenType.STRING:
            return f"string {self.value!r}"
        if self.type == TokenType.INVALID:
            return f"invalid character '{self.value}'"
        return f"'{SYMBOLS[self.type]}'"
