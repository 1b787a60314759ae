"""Case conversion filters."""

from collections.abc import Sequence

from ..constants import FILTER_LOWER, FILTER_UPPER
from .base_handler import FilterHandler


class UpperFilter(FilterHandler):
    """Uppercase the value: ``[[entity.state|upper]]``."""

    name = FILTER_UPPER

    def apply(self, value: str, args: Sequence[str]) -> str:
        return value.upper()


class LowerFilter(FilterHandler):
    """Lowercase the value: ``[[entity.state|lower]]``."""

    name = FILTER_LOWER

    def apply(self, value: str, args: Sequence[str]) -> str:
        return value.lower()
