"""
Syntax tree produced by the parser

Every node is a frozen dataclass that owns its children; a tree is built
once per parse call and never modified afterwards.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from . import config


# ============================================================================
# Expression Tree
# ============================================================================

class BinaryOperator(Enum):
    OR = auto()
    AND = auto()
    EQUAL = auto()
    NOT_EQUAL = auto()
    GREATER_THAN = auto()
    GREATER_THAN_OR_EQUAL = auto()
    LESS_THAN = auto()
    LESS_THAN_OR_EQUAL = auto()
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()


class UnaryOperator(Enum):
    """Prefix operators; ASC and DESC only mark ORDER BY terms"""
    MINUS = auto()
    ASC = auto()
    DESC = auto()


class Expression:
    """Base class for expression nodes"""
    pass


@dataclass(frozen=True)
class Identifier(Expression):
    """Reference to a column or other named object"""
    name: str


@dataclass(frozen=True)
class Number(Expression):
    """Unsigned integer literal"""
    value: int


@dataclass(frozen=True)
class String(Expression):
    value: str


@dataclass(frozen=True)
class Bool(Expression):
    value: bool


@dataclass(frozen=True)
class AllColumns(Expression):
    """The '*' wildcard in a SELECT column list"""
    pass


@dataclass(frozen=True)
class UnaryOperation(Expression):
    """Unary operation: op operand"""
    operator: UnaryOperator
    operand: Expression


@dataclass(frozen=True)
class BinaryOperation(Expression):
    """Binary operation: left op right"""
    left: Expression
    operator: BinaryOperator
    right: Expression


# ============================================================================
# Column Definitions
# ============================================================================

class DBType:
    """Base class for column types"""
    pass


@dataclass(frozen=True)
class IntType(DBType):
    pass


@dataclass(frozen=True)
class BoolType(DBType):
    pass


@dataclass(frozen=True)
class VarcharType(DBType):
    length: int = config.DEFAULT_VARCHAR_LENGTH


class Constraint:
    """Base class for column constraints"""
    pass


@dataclass(frozen=True)
class NotNull(Constraint):
    pass


@dataclass(frozen=True)
class PrimaryKey(Constraint):
    pass


@dataclass(frozen=True)
class Check(Constraint):
    """CHECK (expression)"""
    expression: Expression


@dataclass(frozen=True)
class TableColumn:
    """column_name column_type [constraints...]"""
    column_name: str
    column_type: DBType
    constraints: Tuple[Constraint, ...] = ()


# ============================================================================
# Statements
# ============================================================================

class Statement:
    """Base class for parsed statements"""
    pass


@dataclass(frozen=True)
class SelectStatement(Statement):
    """SELECT columns FROM table_name [WHERE expr] [ORDER BY expr [ASC|DESC], ...];"""
    columns: Tuple[Expression, ...]
    from_table: str
    where: Optional[Expression] = None
    order_by: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class CreateTableStatement(Statement):
    """CREATE TABLE table_name (column definitions...);"""
    table_name: str
    column_list: Tuple[TableColumn, ...]
