"""Shared fixtures and utilities for ICalc tests."""

import pytest
from typing import Any, List

from icalc import ICalc, ICalcLexer, ICalcToken


@pytest.fixture
def icalc():
    """Create a fresh strict ICalc instance for each test."""
    return ICalc()


@pytest.fixture
def icalc_lenient():
    """Create a fresh ICalc instance using the permissive error policy."""
    return ICalc(strict=False)


@pytest.fixture
def icalc_custom():
    """Factory for ICalc instances with custom configuration."""
    def _create_icalc(max_depth: int = 100, strict: bool = True) -> ICalc:
        return ICalc(max_depth=max_depth, strict=strict)
    return _create_icalc


class ICalcTestHelpers:
    """Helper utilities for ICalc testing."""

    @staticmethod
    def collect_tokens(expression: str, strict: bool = True) -> List[ICalcToken]:
        """Lex an expression completely, including the final EOF token."""
        return list(ICalcLexer(expression, strict).tokens())

    @staticmethod
    def assert_python_result(icalc: ICalc, expression: str, expected: Any) -> None:
        """Assert that expression evaluates to expected Python object."""
        result = icalc.evaluate(expression)
        assert result == expected, f"Expected {expected!r} for {expression!r}, got {result!r}"

    @staticmethod
    def build_nested_parens(depth: int, base_value: str = "1") -> str:
        """Build an expression wrapped in depth pairs of parentheses."""
        return "(" * depth + base_value + ")" * depth


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return ICalcTestHelpers
