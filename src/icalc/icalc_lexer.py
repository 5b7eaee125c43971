"""Lexer for ICalc expressions producing tokens on demand."""

from typing import ClassVar, Dict, Iterator, Set

from icalc.icalc_error import ICalcTokenError
from icalc.icalc_token import ICalcOperator, ICalcToken, ICalcTokenType


class ICalcLexer:
    """
    Converts an expression string into a lazy sequence of tokens.

    Whitespace runs are consumed internally but still reported as a single
    WHITESPACE token so the parser can discard them.
    """

    _DIGIT_CHARS: ClassVar[Set[str]] = set("0123456789")

    _OPERATORS: ClassVar[Dict[str, ICalcOperator]] = {
        '+': ICalcOperator.PLUS,
        '-': ICalcOperator.MINUS,
        '*': ICalcOperator.MULTIPLY,
        '/': ICalcOperator.INT_DIVIDE,
    }

    def __init__(self, expression: str, strict: bool = True):
        """
        Initialize the lexer.

        Args:
            expression: The expression string to tokenize
            strict: If True, unrecognized characters raise an error; otherwise
                they end the token stream

        Raises:
            ICalcTokenError: If the expression is empty
        """
        if not expression:
            raise ICalcTokenError(
                message="Empty expression",
                expected="Non-empty arithmetic expression",
                example="1 + 2",
                suggestion="Provide an expression to evaluate"
            )

        self._expression = expression
        self._strict = strict
        self._position = 0
        self._current_char: str | None = expression[0]

    @property
    def position(self) -> int:
        """Current cursor position."""
        return self._position

    def next_token(self) -> ICalcToken:
        """
        Produce the next token from the input.

        Returns:
            The next token; EOF once the input is exhausted

        Raises:
            ICalcTokenError: If an unrecognized character is found in strict mode
        """
        char = self._current_char
        start = self._position

        if char is None:
            return ICalcToken.eof(start)

        if char.isspace():
            self._skip_whitespace()
            return ICalcToken.whitespace(start, self._position - start)

        if char in self._DIGIT_CHARS:
            return self._read_integer()

        op = self._OPERATORS.get(char)
        if op is not None:
            self._advance()
            return ICalcToken.operator(op, start)

        if char == '(':
            self._advance()
            return ICalcToken.lparen(start)

        if char == ')':
            self._advance()
            return ICalcToken.rparen(start)

        if self._strict:
            raise ICalcTokenError(
                message=f"Invalid character: {char}",
                character=char,
                position=start,
                expression=self._expression,
                received=f"Character: {char!r} (code {ord(char)})",
                expected="Digits, whitespace, +, -, *, /, ( or )",
                example="Valid: (1 + 2) * 3\nInvalid: 1 + x, 2 ^ 3, 1.5",
                suggestion=f"Remove '{char}' from the expression"
            )

        # Lenient mode: anything unrecognized terminates the token stream
        self._advance()
        return ICalcToken.eof(start)

    def tokens(self) -> Iterator[ICalcToken]:
        """Yield tokens lazily, up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == ICalcTokenType.EOF:
                return

    def _read_integer(self) -> ICalcToken:
        """Read the maximal run of decimal digits."""
        start = self._position
        while self._current_char is not None and self._current_char in self._DIGIT_CHARS:
            self._advance()

        text = self._expression[start:self._position]
        try:
            value = int(text)

        except ValueError as e:
            # Python caps the number of digits it will convert
            raise ICalcTokenError(
                message="Integer literal too long",
                position=start,
                expression=self._expression,
                received=f"Literal with {len(text)} digits",
                suggestion="Use a shorter integer literal"
            ) from e

        return ICalcToken.integer(value, start, len(text))

    def _skip_whitespace(self) -> None:
        while self._current_char is not None and self._current_char.isspace():
            self._advance()

    def _advance(self) -> None:
        self._position += 1
        if self._position >= len(self._expression):
            self._current_char = None
            return

        self._current_char = self._expression[self._position]
