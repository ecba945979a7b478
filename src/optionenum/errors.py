"""
Error types for optionenum construction.
"""

from dataclasses import dataclass
from typing import Optional


class OptionEnumError(Exception):
    """Base exception for all optionenum errors."""

    def __init__(self, message: str, context: Optional["EntityContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class DuplicateValueError(OptionEnumError):
    """
    Raised when two entities resolve to the same value.

    Examples:
    - Two descriptors with an explicit ``value="A"``
    - An explicit ``value="1"`` colliding with the index default of the
      second descriptor
    """

    def __init__(self, value: int | str, context: Optional["EntityContext"] = None):
        self.value = value
        super().__init__(f"Enum already has value: {value!r}", context)


class DuplicateKeyError(OptionEnumError):
    """
    Raised when two entities resolve to the same key.

    Examples:
    - Two descriptors with an explicit ``key="RED"``
    - Two descriptors without a key sharing the same text
    """

    def __init__(self, key: str, context: Optional["EntityContext"] = None):
        self.key = key
        super().__init__(f"Enum already has key: {key!r}", context)


@dataclass
class EntityContext:
    """
    Position of the offending descriptor in the constructor input.

    Attributes:
        index: Position in the input sequence (0-indexed)
        key: Resolved key of the descriptor
        value: Resolved value of the descriptor
    """

    index: int
    key: str
    value: int | str

    def format(self) -> str:
        """
        Format the context as a human-readable prefix.

        Returns:
            Formatted string like: "entity #2 (key='RED', value=1)"
        """
        return f"entity #{self.index} (key={self.key!r}, value={self.value!r})"
