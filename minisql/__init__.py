"""
minisql - SQL front end for SELECT and CREATE TABLE

Turns a single ';'-terminated statement into a syntax tree, reporting the
first lexical or syntax error.
"""

__version__ = '0.1.0'

from minisql.errors import SQLError, LexError, ParseError
from minisql.tokens import Token, TokenType, Keyword
from minisql.tokenizer import Tokenizer, tokenize
from minisql.parser import Parser, parse_sql
from minisql.statement import (
    Statement, SelectStatement, CreateTableStatement, TableColumn,
    Expression, Identifier, Number, String, Bool, AllColumns,
    UnaryOperation, BinaryOperation, UnaryOperator, BinaryOperator,
    DBType, IntType, BoolType, VarcharType,
    Constraint, NotNull, PrimaryKey, Check,
)
from minisql.pretty import format_tree

__all__ = [
    'SQLError', 'LexError', 'ParseError',
    'Token', 'TokenType', 'Keyword',
    'Tokenizer', 'tokenize',
    'Parser', 'parse_sql',
    'Statement', 'SelectStatement', 'CreateTableStatement', 'TableColumn',
    'Expression', 'Identifier', 'Number', 'String', 'Bool', 'AllColumns',
    'UnaryOperation', 'BinaryOperation', 'UnaryOperator', 'BinaryOperator',
    'DBType', 'IntType', 'BoolType', 'VarcharType',
    'Constraint', 'NotNull', 'PrimaryKey', 'Check',
    'format_tree',
]
