"""Filter handlers for entity context variables using a registry pattern."""

from .base_handler import FilterHandler
from .default_handler import DefaultFilter
from .handler_factory import FilterRegistry, apply_filters, create_default_registry
from .numeric_handler import RoundFilter
from .string_handler import LowerFilter, UpperFilter

__all__ = [
    "DefaultFilter",
    "FilterHandler",
    "FilterRegistry",
    "LowerFilter",
    "RoundFilter",
    "UpperFilter",
    "apply_filters",
    "create_default_registry",
]
