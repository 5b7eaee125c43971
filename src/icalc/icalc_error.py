"""Exception classes for ICalc (Integer Calculator).

Every error records where in the expression it was detected.  When the
expression text is available the message also reproduces the offending line
with a caret under that position:

    Error: Unexpected end of input
    Position: 6
      (1 + 2
            ^
    Expected: ')'
"""

from typing import List, Optional

from icalc.icalc_token import ICalcToken


class ICalcError(Exception):
    """Base exception for ICalc errors."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None
    ):
        """
        Initialize error.

        Args:
            message: Core error description
            position: Character offset in the expression where the error was found
            expression: Expression being processed, used to show a source pointer
            expected: What the calculator needed at this point
            received: What it actually found
            suggestion: Suggestion for fixing the expression
            example: Example of correct and incorrect input
        """
        self.message = message
        self.position = position
        self.expression = expression
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")
            if self.expression:
                parts.extend(self._source_pointer())

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        if self.example:
            parts.append(f"Example: {self.example}")

        return "\n".join(parts)

    def _source_pointer(self) -> List[str]:
        """Render the line containing the error position with a caret beneath it."""
        assert self.expression is not None and self.position is not None
        position = min(self.position, len(self.expression))
        line_start = self.expression.rfind('\n', 0, position) + 1
        line_end = self.expression.find('\n', position)
        if line_end == -1:
            line_end = len(self.expression)

        # Tabs become single spaces so the caret column still lines up
        line = self.expression[line_start:line_end].replace('\t', ' ').replace('\r', ' ')
        return [f"  {line}", f"  {' ' * (position - line_start)}^"]


class ICalcTokenError(ICalcError):
    """Raised by the lexer for empty input, invalid characters and oversized literals."""

    def __init__(self, message: str, character: Optional[str] = None, **kwargs):
        self.character = character
        super().__init__(message, **kwargs)


class ICalcParseError(ICalcError):
    """
    Raised by the parser when the token stream does not fit the grammar.

    Attributes:
        found_token: Lookahead token at the point of failure, if any
        expected_token: Token the grammar required, when a single one was required
    """

    def __init__(
        self,
        message: str,
        found_token: Optional[ICalcToken] = None,
        expected_token: Optional[ICalcToken] = None,
        **kwargs
    ):
        self.found_token = found_token
        self.expected_token = expected_token

        if found_token is not None:
            kwargs.setdefault('position', found_token.position)
            kwargs.setdefault('received', found_token.describe())

        if expected_token is not None:
            kwargs.setdefault('expected', expected_token.describe())

        super().__init__(message, **kwargs)


class ICalcEvalError(ICalcError):
    """Raised while evaluating a tree: type mismatches, division by zero, excessive depth."""
