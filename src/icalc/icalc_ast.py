"""ICalc AST node hierarchy.

The node set is closed: an expression tree is built only from numbers, unary
operations and binary operations. Nodes are immutable and carry the source
position of the token that introduced them for error reporting; the position
takes no part in equality, so two trees parsed from differently spaced input
compare equal when their structure does.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from icalc.icalc_token import ICalcOperator


@dataclass(frozen=True)
class ICalcASTNode(ABC):
    """Abstract base class for all ICalc AST nodes."""
    position: int | None = field(default=None, kw_only=True, compare=False)

    @abstractmethod
    def describe(self) -> str:
        """Render the node as fully parenthesized infix text."""


@dataclass(frozen=True)
class ICalcASTNumber(ICalcASTNode):
    """Integer literal leaf."""
    value: int

    def describe(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ICalcASTUnaryOp(ICalcASTNode):
    """Unary sign applied to a single operand."""
    operator: ICalcOperator
    operand: ICalcASTNode

    def __post_init__(self) -> None:
        if self.operator not in (ICalcOperator.PLUS, ICalcOperator.MINUS):
            raise ValueError(f"Unary operator must be '+' or '-', not '{self.operator.value}'")

    def describe(self) -> str:
        return f"({self.operator.value}{self.operand.describe()})"


@dataclass(frozen=True)
class ICalcASTBinaryOp(ICalcASTNode):
    """Binary arithmetic operation."""
    left: ICalcASTNode
    operator: ICalcOperator
    right: ICalcASTNode

    def describe(self) -> str:
        return f"({self.left.describe()} {self.operator.value} {self.right.describe()})"
