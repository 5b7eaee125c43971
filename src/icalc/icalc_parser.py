"""Recursive-descent parser for ICalc expressions with detailed error messages."""

import logging

from icalc.icalc_ast import ICalcASTBinaryOp, ICalcASTNode, ICalcASTNumber, ICalcASTUnaryOp
from icalc.icalc_error import ICalcParseError
from icalc.icalc_lexer import ICalcLexer
from icalc.icalc_token import ICalcOperator, ICalcToken, ICalcTokenType


class ICalcParser:
    """
    Parses an ICalc expression into an Abstract Syntax Tree.

    Tokens are pulled from the lexer one at a time; the parser never holds more
    than a single lookahead token.  Grammar, highest precedence innermost:

        expr   := term (('+'|'-') term)*
        term   := factor (('*'|'/') factor)*
        factor := ('+'|'-') factor | INTEGER | '(' expr ')'
    """

    def __init__(self, expression: str, strict: bool = True, max_depth: int = 100):
        """
        Initialize parser and prime the lookahead token.

        Args:
            expression: Expression string to parse
            strict: If True, unparseable factors and trailing input raise errors;
                otherwise they fall back to a zero leaf and are ignored
            max_depth: Maximum nesting of signs and parentheses

        Raises:
            ICalcTokenError: If the expression is empty or the first token is invalid
        """
        self.expression = expression
        self.strict = strict
        self.max_depth = max_depth
        self._logger = logging.getLogger("ICalcParser")
        self._lexer = ICalcLexer(expression, strict)
        self.current_token = self._next_significant_token()

    def parse(self) -> ICalcASTNode:
        """
        Parse the expression.

        Returns:
            Root node of the expression tree

        Raises:
            ICalcParseError: If parsing fails with detailed context
            ICalcTokenError: If the lexer finds an invalid character
        """
        try:
            node = self._parse_expr(0)

        except RecursionError as e:
            raise ICalcParseError(
                message="Expression too deeply nested for the Python stack",
                found_token=self.current_token,
                expression=self.expression,
                suggestion="Reduce the nesting of parentheses and signs or lower max_depth"
            ) from e

        if self.current_token.type != ICalcTokenType.EOF:
            if self.strict:
                raise ICalcParseError(
                    message="Unexpected token after complete expression",
                    found_token=self.current_token,
                    expression=self.expression,
                    expected="End of expression",
                    example="Correct: (1 + 2) * 3\nIncorrect: (1 + 2) 3",
                    suggestion="Add an operator between the operands or remove the extra input"
                )

            self._logger.debug(
                "Ignoring trailing input at position %d in '%s'", self.current_token.position, self.expression
            )

        self._logger.debug("Parsed '%s'", self.expression)
        return node

    def _next_significant_token(self) -> ICalcToken:
        """Fetch the next token from the lexer, skipping a whitespace run."""
        token = self._lexer.next_token()
        if token.type == ICalcTokenType.WHITESPACE:
            token = self._lexer.next_token()

        return token

    def _eat(self, expected: ICalcToken) -> None:
        """
        Consume the lookahead token if it matches the expected token.

        Args:
            expected: Token the grammar requires at this point

        Raises:
            ICalcParseError: If the lookahead token does not match
        """
        if self.current_token != expected:
            raise ICalcParseError(
                message=f"Unexpected {self.current_token.describe()}",
                found_token=self.current_token,
                expected_token=expected,
                expression=self.expression,
                example="Correct: (1 + 2)\nIncorrect: (1 + 2",
                suggestion="Check that every '(' has a matching ')'"
                    if expected.type == ICalcTokenType.RPAREN else None
            )

        self.current_token = self._next_significant_token()

    def _parse_expr(self, depth: int) -> ICalcASTNode:
        """Parse an addition/subtraction chain."""
        node = self._parse_term(depth)

        while self.current_token.is_operator(ICalcOperator.PLUS, ICalcOperator.MINUS):
            token = self.current_token
            self._eat(token)
            node = ICalcASTBinaryOp(node, token.value, self._parse_term(depth), position=token.position)

        return node

    def _parse_term(self, depth: int) -> ICalcASTNode:
        """Parse a multiplication/division chain."""
        node = self._parse_factor(depth)

        while self.current_token.is_operator(ICalcOperator.MULTIPLY, ICalcOperator.INT_DIVIDE):
            token = self.current_token
            self._eat(token)
            node = ICalcASTBinaryOp(node, token.value, self._parse_factor(depth), position=token.position)

        return node

    def _parse_factor(self, depth: int) -> ICalcASTNode:
        """Parse a signed factor, an integer literal or a parenthesized expression."""
        token = self.current_token

        if depth > self.max_depth:
            raise ICalcParseError(
                message=f"Expression too deeply nested (max depth: {self.max_depth})",
                found_token=token,
                expression=self.expression,
                suggestion="Reduce the nesting of parentheses and signs or increase max_depth",
                example="Instead of ((((1)))) write 1"
            )

        if token.is_operator(ICalcOperator.PLUS, ICalcOperator.MINUS):
            self._eat(token)
            return ICalcASTUnaryOp(token.value, self._parse_factor(depth + 1), position=token.position)

        if token.type == ICalcTokenType.INTEGER:
            self._eat(token)
            return ICalcASTNumber(token.value, position=token.position)

        if token.type == ICalcTokenType.LPAREN:
            self._eat(token)
            node = self._parse_expr(depth + 1)
            self._eat(ICalcToken.rparen())
            return node

        if self.strict:
            raise ICalcParseError(
                message=f"Unexpected {token.describe()}",
                found_token=token,
                expression=self.expression,
                expected="Integer, '+', '-' or '('",
                example="Correct: 1 + 2\nIncorrect: 1 +, * 2, ()",
                suggestion="Every operator needs an operand on its right"
            )

        # Lenient mode: a missing operand reads as zero
        return ICalcASTNumber(0, position=token.position)
