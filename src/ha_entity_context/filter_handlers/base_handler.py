"""Base handler interface for variable filters."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class FilterHandler(ABC):
    """Base interface for a named transform applied to a resolved value."""

    name: str = ""

    @abstractmethod
    def apply(self, value: str, args: Sequence[str]) -> str:
        """Transform the value and return the result."""

    def get_handler_name(self) -> str:
        """Get the name of this handler for logging and debugging."""
        return self.__class__.__name__
