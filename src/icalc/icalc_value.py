"""ICalc Value hierarchy - immutable results of evaluation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class ICalcValue(ABC):
    """
    Abstract base class for all ICalc values.

    All ICalc values are immutable.
    """

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to Python value."""

    @abstractmethod
    def type_name(self) -> str:
        """Return ICalc type name for error messages."""

    @abstractmethod
    def describe(self) -> str:
        """Describe the value."""


@dataclass(frozen=True)
class ICalcNumber(ICalcValue):
    """Represents integer values."""
    value: int

    def to_python(self) -> int:
        return self.value

    def type_name(self) -> str:
        return "integer"

    def describe(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ICalcBoolean(ICalcValue):
    """
    Represents boolean values.

    The arithmetic grammar never produces these.
    """
    value: bool

    def to_python(self) -> bool:
        return self.value

    def type_name(self) -> str:
        return "boolean"

    def describe(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class ICalcString(ICalcValue):
    """
    Represents string values.

    The arithmetic grammar never produces these.
    """
    value: str

    def to_python(self) -> str:
        return self.value

    def type_name(self) -> str:
        return "string"

    def describe(self) -> str:
        escaped = self.value.replace('\\', '\\\\').replace('"', '\\"')
        return f'"{escaped}"'


@dataclass(frozen=True)
class ICalcNone(ICalcValue):
    """Represents the absence of a value."""

    def to_python(self) -> None:
        return None

    def type_name(self) -> str:
        return "none"

    def describe(self) -> str:
        return "none"
