"""
Tokenizer - lexical analysis (SQL text -> tokens)

Scans the input once, left to right, without backtracking. Lexical errors
(unterminated string, oversized number, lone '!') abort the scan; any other
unknown character is passed on as an INVALID token for the parser to reject.
"""

import logging
from typing import List

from . import config
from .errors import LexError
from .tokens import Token, TokenType, Keyword

logger = logging.getLogger(__name__)

DIGITS = '0123456789'
QUOTES = ('"', "'")


def _is_word_start(char: str) -> bool:
    return char == '_' or (char.isascii() and char.isalpha())


def _is_word_char(char: str) -> bool:
    return char == '_' or (char.isascii() and char.isalnum())


class Tokenizer:
    """Lexical analyzer - converts SQL text to tokens"""

    # Characters that always form a token on their own
    SINGLE_CHARS = {
        '(': TokenType.LPAREN,
        ')': TokenType.RPAREN,
        ',': TokenType.COMMA,
        ';': TokenType.SEMICOLON,
        '+': TokenType.PLUS,
        '-': TokenType.MINUS,
        '*': TokenType.STAR,
        '/': TokenType.DIVIDE,
    }

    def __init__(self, sql: str):
        self.sql = sql
        self.position = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """Convert SQL string to list of tokens, always ending with EOF"""
        self.position = 0
        self.line = 1
        self.column = 1
        self.tokens = []

        while not self._at_end():
            char = self._current_char()

            if char in config.WHITESPACE:
                self._advance()
                continue

            if char in QUOTES:
                self._read_string()
                continue

            if char in DIGITS:
                self._read_number()
                continue

            if _is_word_start(char):
                self._read_identifier_or_keyword()
                continue

            if self._try_operator():
                continue

            # Unknown character, left for the parser to report
            start = self._mark()
            self._add(TokenType.INVALID, self._advance(), start)

        self.tokens.append(Token(TokenType.EOF, None, self.position, self.line, self.column))
        logger.debug("Tokenized %d characters into %d tokens", len(self.sql), len(self.tokens))
        return self.tokens

    def _at_end(self) -> bool:
        return self.position >= len(self.sql)

    def _current_char(self) -> str:
        """Get current character ('' at end of input)"""
        if self._at_end():
            return ''
        return self.sql[self.position]

    def _advance(self) -> str:
        """Move to next character"""
        char = self._current_char()
        self.position += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _add(self, token_type: TokenType, value, start):
        """Append a token starting at start (position, line, column)"""
        self.tokens.append(Token(token_type, value, *start))

    def _mark(self):
        return (self.position, self.line, self.column)

    def _read_string(self):
        """Read string literal enclosed in matching single or double quotes"""
        start = self._mark()
        quote = self._advance()

        value = ''
        while not self._at_end() and self._current_char() != quote:
            value += self._advance()

        if self._at_end():
            raise LexError(f"Unterminated string starting with {quote}{value}", start[1], start[2])

        self._advance()  # Skip closing quote
        self._add(TokenType.STRING, value, start)

    def _read_number(self):
        """Read unsigned base-10 integer literal"""
        start = self._mark()

        digits = ''
        while not self._at_end() and self._current_char() in DIGITS:
            digits += self._advance()

        # Reject long runs before int(), which caps string conversion length
        significant = digits.lstrip('0') or '0'
        if len(significant) > len(str(config.MAX_NUMBER)):
            raise LexError("Invalid number", start[1], start[2])

        value = int(significant)
        if value > config.MAX_NUMBER:
            raise LexError("Invalid number", start[1], start[2])

        self._add(TokenType.NUMBER, value, start)

    def _read_identifier_or_keyword(self):
        """Read identifier or keyword"""
        start = self._mark()

        word = ''
        while not self._at_end() and _is_word_char(self._current_char()):
            word += self._advance()

        keyword = Keyword.lookup(word)
        if keyword is not None:
            self._add(TokenType.KEYWORD, keyword, start)
        else:
            self._add(TokenType.IDENTIFIER, word, start)

    def _try_operator(self) -> bool:
        """Try to read operator or punctuation"""
        start = self._mark()
        char = self._current_char()

        if char in self.SINGLE_CHARS:
            self._advance()
            self._add(self.SINGLE_CHARS[char], char, start)
            return True

        if char == '=':
            self._advance()
            # '==' is the same operator as '='
            if self._current_char() == '=':
                self._advance()
            self._add(TokenType.EQ, '=', start)
            return True

        if char == '!':
            self._advance()
            if self._current_char() != '=':
                raise LexError("Unexpected character '!'", start[1], start[2])
            self._advance()
            self._add(TokenType.NEQ, '!=', start)
            return True

        if char in '<>':
            self._advance()
            if self._current_char() == '=':
                self._advance()
                token_type = TokenType.GTE if char == '>' else TokenType.LTE
                self._add(token_type, char + '=', start)
            else:
                token_type = TokenType.GT if char == '>' else TokenType.LT
                self._add(token_type, char, start)
            return True

        return False


def tokenize(sql: str) -> List[Token]:
    """Tokenize SQL text, raising LexError on the first lexical error"""
    return Tokenizer(sql).tokenize()
