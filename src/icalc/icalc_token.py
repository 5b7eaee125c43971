"""Token types and token representation for ICalc expressions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ICalcOperator(Enum):
    """Arithmetic operators understood by ICalc."""
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    INT_DIVIDE = "/"


class ICalcTokenType(Enum):
    """Token types for ICalc expressions."""
    INTEGER = "INTEGER"
    OPERATOR = "OPERATOR"
    LPAREN = "("
    RPAREN = ")"
    EOF = "EOF"
    WHITESPACE = "WHITESPACE"


@dataclass(frozen=True)
class ICalcToken:
    """
    Represents a single token in an ICalc expression.

    Tokens compare by type and value only; the source position and length are
    carried for error reporting.
    """
    type: ICalcTokenType
    value: Any = None
    position: int = field(default=0, compare=False)
    length: int = field(default=1, compare=False)

    @classmethod
    def integer(cls, value: int, position: int = 0, length: int = 1) -> 'ICalcToken':
        """Create an integer literal token."""
        return cls(ICalcTokenType.INTEGER, value, position, length)

    @classmethod
    def operator(cls, op: ICalcOperator, position: int = 0) -> 'ICalcToken':
        """Create an operator token."""
        return cls(ICalcTokenType.OPERATOR, op, position)

    @classmethod
    def lparen(cls, position: int = 0) -> 'ICalcToken':
        return cls(ICalcTokenType.LPAREN, '(', position)

    @classmethod
    def rparen(cls, position: int = 0) -> 'ICalcToken':
        return cls(ICalcTokenType.RPAREN, ')', position)

    @classmethod
    def eof(cls, position: int = 0) -> 'ICalcToken':
        return cls(ICalcTokenType.EOF, None, position, 0)

    @classmethod
    def whitespace(cls, position: int = 0, length: int = 1) -> 'ICalcToken':
        return cls(ICalcTokenType.WHITESPACE, None, position, length)

    def is_operator(self, *operators: ICalcOperator) -> bool:
        """Check if this token is one of the given operators."""
        return self.type == ICalcTokenType.OPERATOR and self.value in operators

    def describe(self) -> str:
        """Describe the token for error messages."""
        if self.type == ICalcTokenType.INTEGER:
            return f"integer {self.value}"

        if self.type == ICalcTokenType.OPERATOR:
            return f"operator '{self.value.value}'"

        if self.type in (ICalcTokenType.LPAREN, ICalcTokenType.RPAREN):
            return f"'{self.value}'"

        if self.type == ICalcTokenType.EOF:
            return "end of input"

        return "whitespace"

    def __repr__(self) -> str:
        return f"ICalcToken({self.type.name}, {self.value!r}, pos={self.position})"
