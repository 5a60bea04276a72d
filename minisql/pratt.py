"""
Expression parsing by precedence climbing

parse_binary_expression() takes a minimum precedence; operators binding
less tightly end the loop and are left for an outer call. The right-hand
side of an operator is parsed with that operator's precedence + 1, which
makes chains of equal precedence group to the left.
"""

from .errors import ParseError
from .statement import (
    Expression, BinaryOperator, UnaryOperator,
    Identifier, Number, String, Bool, UnaryOperation, BinaryOperation,
)
from .tokens import TokenType, Keyword


# Token types that act as binary operators
BINARY_OPERATORS = {
    TokenType.EQ: BinaryOperator.EQUAL,
    TokenType.NEQ: BinaryOperator.NOT_EQUAL,
    TokenType.GT: BinaryOperator.GREATER_THAN,
    TokenType.GTE: BinaryOperator.GREATER_THAN_OR_EQUAL,
    TokenType.LT: BinaryOperator.LESS_THAN,
    TokenType.LTE: BinaryOperator.LESS_THAN_OR_EQUAL,
    TokenType.PLUS: BinaryOperator.PLUS,
    TokenType.MINUS: BinaryOperator.MINUS,
    TokenType.STAR: BinaryOperator.MULTIPLY,
    TokenType.DIVIDE: BinaryOperator.DIVIDE,
}

# Keywords that act as binary operators
KEYWORD_OPERATORS = {
    Keyword.AND: BinaryOperator.AND,
    Keyword.OR: BinaryOperator.OR,
}

# Binding strength, lowest first
PRECEDENCE = {
    BinaryOperator.OR: 1,
    BinaryOperator.AND: 2,
    BinaryOperator.EQUAL: 3,
    BinaryOperator.NOT_EQUAL: 3,
    BinaryOperator.GREATER_THAN: 4,
    BinaryOperator.GREATER_THAN_OR_EQUAL: 4,
    BinaryOperator.LESS_THAN: 4,
    BinaryOperator.LESS_THAN_OR_EQUAL: 4,
    BinaryOperator.PLUS: 5,
    BinaryOperator.MINUS: 5,
    BinaryOperator.MULTIPLY: 6,
    BinaryOperator.DIVIDE: 6,
}


def parse_expression(parser) -> Expression:
    """Parse a full expression, starting at the lowest precedence"""
    return parse_binary_expression(parser, 0)


def parse_binary_expression(parser, min_precedence: int) -> Expression:
    """Parse operators binding at least as tightly as min_precedence"""
    left = parse_unary_expression(parser)

    while True:
        op = peek_binary_operator(parser)
        if op is None:
            break
        precedence = PRECEDENCE[op]
        if precedence < min_precedence:
            break

        parser.advance()
        right = parse_binary_expression(parser, precedence + 1)
        left = BinaryOperation(left, op, right)

    return left


def parse_unary_expression(parser) -> Expression:
    """Parse prefix '-' (kept in the tree) and '+' (dropped)"""
    token = parser.peek()

    if token.type == TokenType.MINUS:
        parser.advance()
        operand = parse_unary_expression(parser)
        return UnaryOperation(UnaryOperator.MINUS, operand)

    if token.type == TokenType.PLUS:
        parser.advance()
        return parse_unary_expression(parser)

    return parse_primary_expression(parser)


def parse_primary_expression(parser) -> Expression:
    """Parse primary expression (literals, identifiers, parentheses)"""
    token = parser.advance()

    if token.type == TokenType.LPAREN:
        expr = parse_expression(parser)
        closing = parser.advance()
        if closing.type != TokenType.RPAREN:
            raise ParseError(
                f"Expected ')' after expression, found {closing}", closing.line, closing.column
            )
        return expr

    if token.type == TokenType.IDENTIFIER:
        return Identifier(token.value)
    if token.type == TokenType.NUMBER:
        return Number(token.value)
    if token.type == TokenType.STRING:
        return String(token.value)
    if token.is_keyword(Keyword.TRUE):
        return Bool(True)
    if token.is_keyword(Keyword.FALSE):
        return Bool(False)

    raise ParseError(
        f"Unexpected token {token} - expected primary expression", token.line, token.column
    )


def peek_binary_operator(parser):
    """Return the binary operator at the cursor without consuming it, or None"""
    token = parser.peek()
    if token.type == TokenType.KEYWORD:
        return KEYWORD_OPERATORS.get(token.value)
    return BINARY_OPERATORS.get(token.type)
