"""Fallback value filter."""

from collections.abc import Sequence

from ..constants import FILTER_DEFAULT
from ..filter_chain import parse_default_arg
from .base_handler import FilterHandler


class DefaultFilter(FilterHandler):
    """Replace a blank value with a literal: ``[[entity.attributes.x|default("n/a")]]``."""

    name = FILTER_DEFAULT

    def apply(self, value: str, args: Sequence[str]) -> str:
        if not args:
            return value
        if value.strip():
            return value
        return parse_default_arg(args[0])
