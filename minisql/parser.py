"""
SQL Parser - recursive descent over the token list

This module provides:
- Parser: Syntax analysis (tokens -> Statement objects)
- parse_sql: tokenize and parse in one call

Expressions are delegated to the precedence-climbing functions in
minisql.pratt. Parsing stops at the first error; nothing is recovered.
"""

import logging
from typing import List

from .errors import ParseError
from .pratt import parse_expression
from .statement import (
    Statement, SelectStatement, CreateTableStatement, TableColumn,
    Expression, AllColumns, UnaryOperation, UnaryOperator,
    DBType, IntType, BoolType, VarcharType,
    Constraint, NotNull, PrimaryKey, Check,
)
from .tokenizer import tokenize
from .tokens import Token, TokenType, Keyword

logger = logging.getLogger(__name__)


class Parser:
    """Syntax analyzer - converts tokens to statement objects"""

    def __init__(self, tokens: List[Token]):
        self.tokens = list(tokens)
        if not self.tokens:
            self.tokens.append(Token(TokenType.EOF, None, 0, 1, 1))
        elif self.tokens[-1].type != TokenType.EOF:
            last = self.tokens[-1]
            self.tokens.append(Token(TokenType.EOF, None, last.position + 1, last.line, last.column + 1))
        self.position = 0

    def parse(self) -> Statement:
        """Main entry point - parse one ';'-terminated statement"""
        self.position = 0
        token = self.peek()

        try:
            # Dispatch based on first keyword
            if token.is_keyword(Keyword.SELECT):
                logger.debug("Parsing SELECT statement")
                return self._parse_select()
            elif token.is_keyword(Keyword.CREATE):
                logger.debug("Parsing CREATE TABLE statement")
                return self._parse_create_table()
            else:
                raise ParseError("Expected SELECT or CREATE statement", token.line, token.column)
        except RecursionError:
            token = self.peek()
            raise ParseError("Expression nested too deeply", token.line, token.column) from None

    # ========================================================================
    # Helper methods for token navigation
    # ========================================================================

    def peek(self) -> Token:
        """Get current token without consuming it (EOF once exhausted)"""
        if self.position >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[self.position]

    def advance(self) -> Token:
        """Move to next token and return current"""
        token = self.peek()
        if token.type != TokenType.EOF:
            self.position += 1
        return token

    def _match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types"""
        return self.peek().type in token_types

    def _match_keyword(self, *keywords: Keyword) -> bool:
        token = self.peek()
        return token.type == TokenType.KEYWORD and token.value in keywords

    def _expect_token(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error"""
        token = self.peek()
        if token.type != token_type:
            raise ParseError(
                f"Expected token {token_type.name}, got {token}", token.line, token.column
            )
        return self.advance()

    def _expect_keyword(self, keyword: Keyword) -> Token:
        """Consume the expected keyword or raise error"""
        token = self.peek()
        if not token.is_keyword(keyword):
            raise ParseError(
                f"Expected keyword {keyword.name}, got {token}", token.line, token.column
            )
        return self.advance()

    def _expect_identifier(self, message: str) -> str:
        token = self.advance()
        if token.type != TokenType.IDENTIFIER:
            raise ParseError(message, token.line, token.column)
        return token.value

    def _expect_semicolon(self):
        token = self.peek()
        if token.type != TokenType.SEMICOLON:
            raise ParseError(f"Expected semicolon, found {token}", token.line, token.column)
        self.advance()

    # ========================================================================
    # SELECT parsing
    # ========================================================================

    def _parse_select(self) -> SelectStatement:
        """Parse SELECT statement"""
        self._expect_keyword(Keyword.SELECT)

        columns = self._parse_select_columns()

        # FROM clause
        self._expect_keyword(Keyword.FROM)
        from_table = self._expect_identifier("Expected table name after FROM")

        # Optional WHERE clause
        where = None
        if self._match_keyword(Keyword.WHERE):
            self.advance()
            where = parse_expression(self)

        # Optional ORDER BY clause
        order_by = ()
        if self._match_keyword(Keyword.ORDER):
            order_by = self._parse_order_by()

        self._expect_semicolon()

        return SelectStatement(tuple(columns), from_table, where, tuple(order_by))

    def _parse_select_columns(self) -> List[Expression]:
        """Parse the column list up to (not including) FROM"""
        columns = []

        while True:
            token = self.peek()
            if token.type == TokenType.STAR:
                self.advance()
                columns.append(AllColumns())
            elif token.is_keyword(Keyword.FROM):
                # Only reachable before the first column
                raise ParseError(
                    "Expected at least one column before FROM", token.line, token.column
                )
            else:
                columns.append(parse_expression(self))

            # Each column is followed by ',' or FROM
            token = self.peek()
            if token.type == TokenType.COMMA:
                self.advance()
                if self._match_keyword(Keyword.FROM):
                    token = self.peek()
                    raise ParseError(
                        "Trailing comma before FROM is not allowed", token.line, token.column
                    )
            elif token.is_keyword(Keyword.FROM):
                return columns
            else:
                raise ParseError(f"Expected ',' or FROM, found {token}", token.line, token.column)

    def _parse_order_by(self) -> List[Expression]:
        """Parse ORDER BY clause; ASC/DESC wrap the term in a unary marker"""
        self._expect_keyword(Keyword.ORDER)
        self._expect_keyword(Keyword.BY)

        order_by = []
        while True:
            expr = parse_expression(self)

            if self._match_keyword(Keyword.ASC):
                self.advance()
                expr = UnaryOperation(UnaryOperator.ASC, expr)
            elif self._match_keyword(Keyword.DESC):
                self.advance()
                expr = UnaryOperation(UnaryOperator.DESC, expr)

            order_by.append(expr)

            if not self._match(TokenType.COMMA):
                return order_by
            self.advance()

    # ========================================================================
    # CREATE TABLE parsing
    # ========================================================================

    def _parse_create_table(self) -> CreateTableStatement:
        """Parse CREATE TABLE statement"""
        self._expect_keyword(Keyword.CREATE)
        self._expect_keyword(Keyword.TABLE)
        table_name = self._expect_identifier("Expected table name after CREATE TABLE")

        self._expect_token(TokenType.LPAREN)

        if self._match(TokenType.RPAREN):
            token = self.peek()
            raise ParseError(
                "Expected at least one column definition", token.line, token.column
            )

        column_list = []
        while True:
            column_list.append(self._parse_column_definition())

            token = self.peek()
            if token.type == TokenType.COMMA:
                self.advance()
            elif token.type == TokenType.RPAREN:
                self.advance()
                break
            else:
                raise ParseError(
                    "Expected ',' or ')' in column definition list", token.line, token.column
                )

        self._expect_semicolon()

        return CreateTableStatement(table_name, tuple(column_list))

    def _parse_column_definition(self) -> TableColumn:
        """Parse column_name type [constraints...]"""
        column_name = self._expect_identifier("Expected column name")
        column_type = self._parse_column_type()
        constraints = self._parse_constraints()
        return TableColumn(column_name, column_type, tuple(constraints))

    def _parse_column_type(self) -> DBType:
        """Parse INT, BOOL or VARCHAR [(n)]"""
        token = self.advance()

        if token.is_keyword(Keyword.INT):
            return IntType()
        if token.is_keyword(Keyword.BOOL):
            return BoolType()
        if token.is_keyword(Keyword.VARCHAR):
            if not self._match(TokenType.LPAREN):
                return VarcharType()
            self.advance()
            length = self.advance()
            if length.type != TokenType.NUMBER:
                raise ParseError("Expected number in VARCHAR(n)", length.line, length.column)
            self._expect_token(TokenType.RPAREN)
            return VarcharType(length.value)

        raise ParseError("Expected column type (INT, BOOL, VARCHAR)", token.line, token.column)

    def _parse_constraints(self) -> List[Constraint]:
        """Collect NOT NULL, PRIMARY KEY and CHECK (expr) in any order"""
        constraints = []

        while True:
            if self._match_keyword(Keyword.NOT):
                self.advance()
                self._expect_keyword(Keyword.NULL)
                constraints.append(NotNull())
            elif self._match_keyword(Keyword.PRIMARY):
                self.advance()
                self._expect_keyword(Keyword.KEY)
                constraints.append(PrimaryKey())
            elif self._match_keyword(Keyword.CHECK):
                self.advance()
                self._expect_token(TokenType.LPAREN)
                expr = parse_expression(self)
                self._expect_token(TokenType.RPAREN)
                constraints.append(Check(expr))
            else:
                return constraints


# ============================================================================
# Convenience function
# ============================================================================

def parse_sql(sql: str) -> Statement:
    """Parse SQL string to statement object"""
    tokens = tokenize(sql)
    parser = Parser(tokens)
    return parser.parse()
