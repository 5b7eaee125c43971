"""Main ICalc (Integer Calculator) class and module-level convenience API."""

import logging

from icalc.icalc_ast import ICalcASTNode
from icalc.icalc_error import ICalcError
from icalc.icalc_evaluator import ICalcEvaluator
from icalc.icalc_parser import ICalcParser
from icalc.icalc_value import ICalcValue


class ICalc:
    """
    Integer arithmetic calculator.

    Supports +, -, *, / (integer division truncating toward zero), unary signs
    and parentheses with the usual precedence rules.  Every call builds a fresh
    parser and evaluator, so one instance can be reused freely.
    """

    def __init__(self, max_depth: int = 100, strict: bool = True):
        """
        Initialize calculator.

        Args:
            max_depth: Maximum nesting depth for parsing and evaluation
            strict: If True, invalid characters, missing operands and trailing
                input raise errors.  If False, an invalid character ends the
                input, a missing operand reads as 0 and trailing input is ignored.
        """
        self.max_depth = max_depth
        self.strict = strict
        self._logger = logging.getLogger("ICalc")

    def parse(self, expression: str) -> ICalcASTNode:
        """
        Parse an expression into an AST.

        Args:
            expression: Expression string to parse

        Returns:
            Root node of the expression tree

        Raises:
            ICalcTokenError: If tokenization fails
            ICalcParseError: If parsing fails
        """
        parser = ICalcParser(expression, strict=self.strict, max_depth=self.max_depth)
        return parser.parse()

    def evaluate_value(self, expression: str) -> ICalcValue:
        """
        Evaluate an expression, returning the tagged ICalc value.

        Args:
            expression: Expression string to evaluate

        Returns:
            Result of the evaluation

        Raises:
            ICalcTokenError: If tokenization fails
            ICalcParseError: If parsing fails
            ICalcEvalError: If evaluation fails
        """
        self._logger.debug("Evaluating expression: %s", expression)

        try:
            tree = self.parse(expression)
            evaluator = ICalcEvaluator(max_depth=self.max_depth)
            evaluator.set_expression_context(expression)
            result = evaluator.evaluate(tree)

        except ICalcError as e:
            self._logger.warning("Failed to evaluate '%s': %s", expression, e.message)
            raise

        self._logger.debug("Expression evaluation successful: %s = %s", expression, result.describe())
        return result

    def evaluate(self, expression: str) -> int | bool | str | None:
        """
        Evaluate an expression, returning the result as a Python value.

        Args:
            expression: Expression string to evaluate

        Returns:
            The result converted to a Python value (an int for any valid expression)

        Raises:
            ICalcTokenError: If tokenization fails
            ICalcParseError: If parsing fails
            ICalcEvalError: If evaluation fails
        """
        return self.evaluate_value(expression).to_python()

    def evaluate_and_format(self, expression: str) -> str:
        """
        Evaluate an expression and return the formatted result.

        Args:
            expression: Expression string to evaluate

        Returns:
            String representation of the result

        Raises:
            ICalcTokenError: If tokenization fails
            ICalcParseError: If parsing fails
            ICalcEvalError: If evaluation fails
        """
        result = self.evaluate_value(expression)
        return ICalcEvaluator.format_result(result)


def parse(expression: str, strict: bool = True) -> ICalcASTNode:
    """Parse an expression into an AST using default settings."""
    return ICalc(strict=strict).parse(expression)


def evaluate(node: ICalcASTNode) -> ICalcValue:
    """Evaluate a parsed AST using default settings."""
    return ICalcEvaluator().evaluate(node)
