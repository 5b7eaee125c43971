"""Evaluator for ICalc Abstract Syntax Trees with detailed error messages."""

from typing import ClassVar, Dict, List

from icalc.icalc_ast import ICalcASTBinaryOp, ICalcASTNode, ICalcASTNumber, ICalcASTUnaryOp
from icalc.icalc_error import ICalcEvalError
from icalc.icalc_token import ICalcOperator
from icalc.icalc_value import ICalcNone, ICalcNumber, ICalcValue


class ICalcEvaluator:
    """
    Evaluates ICalc Abstract Syntax Trees bottom-up.

    Nesting depth is measured the way the parser measures it: one level per
    unary sign and one per subexpression that needs parentheses.  The left spine
    of an operator chain such as 1 + 2 + 3 is walked iteratively, so flat
    chains of any length evaluate without deepening the Python stack.
    """

    _PRECEDENCE: ClassVar[Dict[ICalcOperator, int]] = {
        ICalcOperator.PLUS: 1,
        ICalcOperator.MINUS: 1,
        ICalcOperator.MULTIPLY: 2,
        ICalcOperator.INT_DIVIDE: 2,
    }

    def __init__(self, max_depth: int = 100):
        """
        Initialize evaluator.

        Args:
            max_depth: Maximum nesting of signs and parenthesized subexpressions
        """
        self.max_depth = max_depth
        self.current_expression = ""

    def set_expression_context(self, expression: str) -> None:
        """Set the source expression used to point at errors."""
        self.current_expression = expression

    def evaluate(self, node: ICalcASTNode) -> ICalcValue:
        """
        Evaluate an AST.

        Args:
            node: Root of the tree to evaluate

        Returns:
            Evaluation result as ICalcValue

        Raises:
            ICalcEvalError: If evaluation fails
        """
        try:
            return self._evaluate_node(node, 0)

        except RecursionError as e:
            raise self._error(
                "Expression too deeply nested for the Python stack",
                node,
                suggestion="Reduce the nesting of the expression or lower max_depth"
            ) from e

    def _evaluate_node(self, node: ICalcASTNode, depth: int) -> ICalcValue:
        if depth > self.max_depth:
            raise self._error(
                f"Expression too deeply nested (max depth: {self.max_depth})",
                node,
                suggestion="Reduce the nesting of parentheses and signs or increase max_depth"
            )

        if isinstance(node, ICalcASTNumber):
            return ICalcNumber(node.value)

        if isinstance(node, ICalcASTUnaryOp):
            return self._evaluate_unary_op(node, depth)

        if isinstance(node, ICalcASTBinaryOp):
            return self._evaluate_binary_op(node, depth)

        return ICalcNone()

    def _evaluate_unary_op(self, node: ICalcASTUnaryOp, depth: int) -> ICalcNumber:
        operand_depth = depth + 1
        if isinstance(node.operand, ICalcASTBinaryOp):
            operand_depth += 1

        operand = self._ensure_number(self._evaluate_node(node.operand, operand_depth), node)

        if node.operator == ICalcOperator.MINUS:
            return ICalcNumber(-operand)

        return ICalcNumber(operand)

    def _evaluate_binary_op(self, node: ICalcASTBinaryOp, depth: int) -> ICalcNumber:
        # Collect the left spine, outermost operation first
        spine: List[ICalcASTBinaryOp] = []
        spine_depths: List[int] = []
        current: ICalcASTNode = node
        while isinstance(current, ICalcASTBinaryOp):
            if depth > self.max_depth:
                raise self._error(
                    f"Expression too deeply nested (max depth: {self.max_depth})",
                    current,
                    suggestion="Reduce the nesting of parentheses and signs or increase max_depth"
                )

            spine.append(current)
            spine_depths.append(depth)
            if self._needs_grouping(current.left, current, is_right=False):
                depth += 1

            current = current.left

        result = self._ensure_number(self._evaluate_node(current, depth), spine[-1])

        for binary, binary_depth in zip(reversed(spine), reversed(spine_depths)):
            right_depth = binary_depth + 1 if self._needs_grouping(binary.right, binary, is_right=True) else binary_depth
            right = self._ensure_number(self._evaluate_node(binary.right, right_depth), binary)
            result = self._apply(binary, result, right)

        return ICalcNumber(result)

    def _needs_grouping(self, child: ICalcASTNode, parent: ICalcASTBinaryOp, is_right: bool) -> bool:
        """Check whether a child of a binary operation could only have come from parentheses."""
        if not isinstance(child, ICalcASTBinaryOp):
            return False

        child_precedence = self._PRECEDENCE[child.operator]
        parent_precedence = self._PRECEDENCE[parent.operator]
        if is_right:
            return child_precedence <= parent_precedence

        return child_precedence < parent_precedence

    def _apply(self, node: ICalcASTBinaryOp, left: int, right: int) -> int:
        if node.operator == ICalcOperator.PLUS:
            return left + right

        if node.operator == ICalcOperator.MINUS:
            return left - right

        if node.operator == ICalcOperator.MULTIPLY:
            return left * right

        if right == 0:
            raise self._error(
                "Division by zero",
                node,
                received=f"Attempted: {left} / 0",
                expected="Non-zero divisor",
                suggestion="Check the right-hand side of the division"
            )

        return self._truncating_divide(left, right)

    def _ensure_number(self, value: ICalcValue, node: ICalcASTNode) -> int:
        """Check that an operand evaluated to a number and unwrap it."""
        if not isinstance(value, ICalcNumber):
            raise self._error(
                f"Arithmetic operand is not a number while evaluating {node.describe()}",
                node,
                received=f"Operand: {value.describe()} ({value.type_name()})",
                expected="integer"
            )

        return value.value

    def _error(self, message: str, node: ICalcASTNode, **kwargs) -> ICalcEvalError:
        return ICalcEvalError(
            message=message,
            position=node.position,
            expression=self.current_expression or None,
            **kwargs
        )

    @staticmethod
    def _truncating_divide(dividend: int, divisor: int) -> int:
        """Integer division rounding toward zero."""
        quotient = abs(dividend) // abs(divisor)
        if (dividend < 0) != (divisor < 0):
            return -quotient

        return quotient

    @staticmethod
    def format_result(result: ICalcValue) -> str:
        """
        Format a result for display.

        Args:
            result: Value to format

        Returns:
            Display string
        """
        return result.describe()
