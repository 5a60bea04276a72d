"""
Tests for expression parsing: precedence, associativity, unary prefixes
"""

import unittest

from minisql.errors import ParseError
from minisql.parser import Parser, parse_sql
from minisql.pratt import parse_expression, PRECEDENCE
from minisql.statement import (
    BinaryOperation, BinaryOperator as Op, UnaryOperation, UnaryOperator,
    Identifier, Number, String, Bool,
)
from minisql.tokenizer import tokenize
from minisql.tokens import TokenType


def expr(sql):
    """Parse sql as a single expression that must consume all input"""
    parser = Parser(tokenize(sql))
    result = parse_expression(parser)
    assert parser.peek().type == TokenType.EOF, f"leftover input: {parser.peek()!r}"
    return result


def num(n):
    return Number(n)


def ident(name):
    return Identifier(name)


class TestPrimaryExpressions(unittest.TestCase):

    def test_literals(self):
        self.assertEqual(expr("42"), Number(42))
        self.assertEqual(expr("'abc'"), String('abc'))
        self.assertEqual(expr("TRUE"), Bool(True))
        self.assertEqual(expr("false"), Bool(False))
        self.assertEqual(expr("name"), Identifier('name'))

    def test_parentheses(self):
        self.assertEqual(expr("(1)"), num(1))
        self.assertEqual(expr("((a))"), ident('a'))

    def test_unclosed_parenthesis(self):
        with self.assertRaises(ParseError) as ctx:
            expr("(1 + 2")
        self.assertEqual(ctx.exception.message, "Expected ')' after expression, found end of input")

    def test_wrong_closing_token(self):
        with self.assertRaises(ParseError) as ctx:
            expr("(1 ,")
        self.assertIn("Expected ')' after expression, found ','", ctx.exception.message)

    def test_unexpected_token(self):
        with self.assertRaises(ParseError) as ctx:
            expr(")")
        self.assertEqual(ctx.exception.message, "Unexpected token ')' - expected primary expression")

    def test_keyword_is_not_primary(self):
        with self.assertRaises(ParseError) as ctx:
            expr("NULL")
        self.assertIn("keyword NULL", ctx.exception.message)

    def test_invalid_character_rejected(self):
        with self.assertRaises(ParseError) as ctx:
            expr("a + #")
        self.assertIn("invalid character '#'", ctx.exception.message)

    def test_empty_expression(self):
        with self.assertRaises(ParseError) as ctx:
            expr("")
        self.assertIn("end of input", ctx.exception.message)


class TestPrecedence(unittest.TestCase):

    def test_multiplication_binds_tighter(self):
        self.assertEqual(
            expr("1 + 2 * 3"),
            BinaryOperation(num(1), Op.PLUS, BinaryOperation(num(2), Op.MULTIPLY, num(3)))
        )
        self.assertEqual(
            expr("1 * 2 + 3"),
            BinaryOperation(BinaryOperation(num(1), Op.MULTIPLY, num(2)), Op.PLUS, num(3))
        )

    def test_left_associative_subtraction(self):
        self.assertEqual(
            expr("10 - 3 - 2"),
            BinaryOperation(BinaryOperation(num(10), Op.MINUS, num(3)), Op.MINUS, num(2))
        )

    def test_left_associative_division(self):
        self.assertEqual(
            expr("a / b / c"),
            BinaryOperation(BinaryOperation(ident('a'), Op.DIVIDE, ident('b')), Op.DIVIDE, ident('c'))
        )

    def test_mixed_additive_chain(self):
        self.assertEqual(
            expr("a - b + c"),
            BinaryOperation(BinaryOperation(ident('a'), Op.MINUS, ident('b')), Op.PLUS, ident('c'))
        )

    def test_parentheses_override(self):
        self.assertEqual(
            expr("(1 + 2) * 3"),
            BinaryOperation(BinaryOperation(num(1), Op.PLUS, num(2)), Op.MULTIPLY, num(3))
        )

    def test_and_binds_tighter_than_or(self):
        self.assertEqual(
            expr("a OR b AND c"),
            BinaryOperation(ident('a'), Op.OR, BinaryOperation(ident('b'), Op.AND, ident('c')))
        )

    def test_comparison_below_arithmetic(self):
        self.assertEqual(
            expr("a + 1 > b * 2"),
            BinaryOperation(
                BinaryOperation(ident('a'), Op.PLUS, num(1)),
                Op.GREATER_THAN,
                BinaryOperation(ident('b'), Op.MULTIPLY, num(2)),
            )
        )

    def test_equality_below_ordering(self):
        self.assertEqual(
            expr("a < b = c >= d"),
            BinaryOperation(
                BinaryOperation(ident('a'), Op.LESS_THAN, ident('b')),
                Op.EQUAL,
                BinaryOperation(ident('c'), Op.GREATER_THAN_OR_EQUAL, ident('d')),
            )
        )

    def test_full_where_clause(self):
        self.assertEqual(
            expr("age >= 18 AND name != 'bob' OR admin = TRUE"),
            BinaryOperation(
                BinaryOperation(
                    BinaryOperation(ident('age'), Op.GREATER_THAN_OR_EQUAL, num(18)),
                    Op.AND,
                    BinaryOperation(ident('name'), Op.NOT_EQUAL, String('bob')),
                ),
                Op.OR,
                BinaryOperation(ident('admin'), Op.EQUAL, Bool(True)),
            )
        )

    def test_less_than_or_equal(self):
        self.assertEqual(
            expr("x <= 5"),
            BinaryOperation(ident('x'), Op.LESS_THAN_OR_EQUAL, num(5))
        )

    def test_precedence_table_covers_all_operators(self):
        self.assertEqual(set(PRECEDENCE), set(Op))
        self.assertLess(PRECEDENCE[Op.OR], PRECEDENCE[Op.AND])
        self.assertLess(PRECEDENCE[Op.AND], PRECEDENCE[Op.EQUAL])
        self.assertLess(PRECEDENCE[Op.EQUAL], PRECEDENCE[Op.LESS_THAN])
        self.assertLess(PRECEDENCE[Op.LESS_THAN], PRECEDENCE[Op.PLUS])
        self.assertLess(PRECEDENCE[Op.PLUS], PRECEDENCE[Op.MULTIPLY])

    def test_stops_at_non_operator(self):
        parser = Parser(tokenize("a + b DESC"))
        result = parse_expression(parser)
        self.assertEqual(result, BinaryOperation(ident('a'), Op.PLUS, ident('b')))
        self.assertEqual(parser.peek().value.name, 'DESC')

    def test_missing_right_operand(self):
        with self.assertRaises(ParseError):
            expr("1 +")


class TestUnary(unittest.TestCase):

    def test_negation(self):
        self.assertEqual(expr("-5"), UnaryOperation(UnaryOperator.MINUS, num(5)))

    def test_double_negation_preserved(self):
        self.assertEqual(
            expr("- - 5"),
            UnaryOperation(UnaryOperator.MINUS, UnaryOperation(UnaryOperator.MINUS, num(5)))
        )

    def test_unary_plus_dropped(self):
        self.assertEqual(expr("+5"), num(5))
        self.assertEqual(expr("++x"), ident('x'))

    def test_unary_binds_tighter_than_binary(self):
        self.assertEqual(
            expr("-a * b"),
            BinaryOperation(UnaryOperation(UnaryOperator.MINUS, ident('a')), Op.MULTIPLY, ident('b'))
        )

    def test_binary_minus_then_unary(self):
        self.assertEqual(
            expr("a - -b"),
            BinaryOperation(ident('a'), Op.MINUS, UnaryOperation(UnaryOperator.MINUS, ident('b')))
        )

    def test_deeply_nested_parentheses(self):
        with self.assertRaises(ParseError) as ctx:
            parse_sql("SELECT " + "(" * 1000 + "1" + ")" * 1000 + " FROM t;")
        self.assertEqual(ctx.exception.message, "Expression nested too deeply")

    def test_deeply_stacked_negation(self):
        with self.assertRaises(ParseError) as ctx:
            parse_sql("SELECT a FROM t WHERE " + "-" * 5000 + "a;")
        self.assertEqual(ctx.exception.message, "Expression nested too deeply")

    def test_moderate_nesting_still_parses(self):
        cmd = parse_sql("SELECT " + "(" * 30 + "1" + ")" * 30 + " FROM t;")
        self.assertEqual(cmd.columns, (num(1),))

    def test_negated_group(self):
        self.assertEqual(
            expr("-(1 + 2)"),
            UnaryOperation(UnaryOperator.MINUS, BinaryOperation(num(1), Op.PLUS, num(2)))
        )


if __name__ == '__main__':
    unittest.main()
