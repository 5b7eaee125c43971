"""Tests for the ICalc parser."""

import pytest

from icalc import (
    ICalcASTBinaryOp, ICalcASTNumber, ICalcASTUnaryOp, ICalcOperator, ICalcParseError, ICalcParser,
    ICalcTokenError, ICalcTokenType
)


PLUS = ICalcOperator.PLUS
MINUS = ICalcOperator.MINUS
MULTIPLY = ICalcOperator.MULTIPLY
INT_DIVIDE = ICalcOperator.INT_DIVIDE


def parse(expression: str, **kwargs):
    return ICalcParser(expression, **kwargs).parse()


class TestParserStructure:
    """Test the shape of the trees built by the parser."""

    def test_number(self):
        assert parse("42") == ICalcASTNumber(42)

    def test_binary_operation(self):
        assert parse("1 + 2") == ICalcASTBinaryOp(ICalcASTNumber(1), PLUS, ICalcASTNumber(2))

    def test_multiplication_binds_tighter(self):
        """Test that term is nested below expr."""
        assert parse("2 + 3 * 4") == ICalcASTBinaryOp(
            ICalcASTNumber(2),
            PLUS,
            ICalcASTBinaryOp(ICalcASTNumber(3), MULTIPLY, ICalcASTNumber(4))
        )

    def test_left_associativity(self):
        """Test that chains fold to the left."""
        assert parse("10 - 2 - 3") == ICalcASTBinaryOp(
            ICalcASTBinaryOp(ICalcASTNumber(10), MINUS, ICalcASTNumber(2)),
            MINUS,
            ICalcASTNumber(3)
        )
        assert parse("8 / 4 * 2") == ICalcASTBinaryOp(
            ICalcASTBinaryOp(ICalcASTNumber(8), INT_DIVIDE, ICalcASTNumber(4)),
            MULTIPLY,
            ICalcASTNumber(2)
        )

    def test_parentheses_are_structural_only(self):
        """Test that parentheses change grouping but leave no node behind."""
        assert parse("(2 + 3) * 4") == ICalcASTBinaryOp(
            ICalcASTBinaryOp(ICalcASTNumber(2), PLUS, ICalcASTNumber(3)),
            MULTIPLY,
            ICalcASTNumber(4)
        )
        assert parse("((7))") == ICalcASTNumber(7)

    def test_unary_chain(self):
        assert parse("-+5") == ICalcASTUnaryOp(MINUS, ICalcASTUnaryOp(PLUS, ICalcASTNumber(5)))

    def test_unary_binds_tighter_than_multiplication(self):
        assert parse("-2 * 3") == ICalcASTBinaryOp(
            ICalcASTUnaryOp(MINUS, ICalcASTNumber(2)),
            MULTIPLY,
            ICalcASTNumber(3)
        )

    def test_unary_after_binary_operator(self):
        assert parse("1 - -1") == ICalcASTBinaryOp(
            ICalcASTNumber(1),
            MINUS,
            ICalcASTUnaryOp(MINUS, ICalcASTNumber(1))
        )

    @pytest.mark.parametrize("expression", ["1+2*3", "1 + 2 * 3", "  1 +  2*3  ", "\n1\t+\n2 *\r3\n"])
    def test_whitespace_does_not_change_tree(self, expression):
        """Test that whitespace, including leading whitespace, is skipped uniformly."""
        assert parse(expression).describe() == "(1 + (2 * 3))"

    def test_positions_are_recorded(self):
        """Test that nodes remember the source position of their token."""
        tree = parse("1 + -2")
        assert tree.position == 2
        assert tree.left.position == 0
        assert tree.right.position == 4
        assert tree.right.operand.position == 5

    def test_parser_consumes_all_input(self):
        """Test that the lookahead reaches EOF after a complete parse."""
        parser = ICalcParser("(1 + 2) * 3  ")
        parser.parse()
        assert parser.current_token.type == ICalcTokenType.EOF


class TestParserErrors:
    """Test parse failures."""

    @pytest.mark.parametrize("expression", ["(1 + 2", "((1)", "2 * (3 + 4"])
    def test_unbalanced_parenthesis(self, expression):
        """Test that a missing ')' is an unexpected-token error."""
        with pytest.raises(ICalcParseError) as exc_info:
            parse(expression)

        assert exc_info.value.expected == "')'"

    def test_unbalanced_parenthesis_lenient(self):
        """Test that the lenient policy still requires balanced parentheses."""
        with pytest.raises(ICalcParseError):
            parse("(1 + 2", strict=False)

    def test_unexpected_token_reports_position(self):
        with pytest.raises(ICalcParseError) as exc_info:
            parse("(1 + 2 3")

        assert exc_info.value.position == 7
        assert "integer 3" in exc_info.value.received

    @pytest.mark.parametrize("expression,position", [
        ("1 +", 3),
        ("* 2", 0),
        ("()", 1),
        ("1 + )", 4),
        ("-", 1),
    ])
    def test_missing_operand(self, expression, position):
        """Test that a factor with nothing parseable is rejected."""
        with pytest.raises(ICalcParseError) as exc_info:
            parse(expression)

        assert exc_info.value.position == position

    @pytest.mark.parametrize("expression", ["1 2", "1)", "(1) (2)"])
    def test_trailing_input(self, expression):
        with pytest.raises(ICalcParseError, match="Unexpected token after complete expression"):
            parse(expression)

    def test_invalid_character_surfaces_from_lexer(self):
        with pytest.raises(ICalcTokenError):
            parse("1 + a")

    def test_empty_expression(self):
        with pytest.raises(ICalcTokenError):
            ICalcParser("")

    def test_nesting_limit(self, helpers):
        """Test that deep nesting fails cleanly instead of overflowing the stack."""
        with pytest.raises(ICalcParseError, match="too deeply nested"):
            parse(helpers.build_nested_parens(11), max_depth=10)

        with pytest.raises(ICalcParseError, match="too deeply nested"):
            parse("-" * 11 + "1", max_depth=10)

    def test_nesting_at_limit(self, helpers):
        assert parse(helpers.build_nested_parens(10), max_depth=10) == ICalcASTNumber(1)

