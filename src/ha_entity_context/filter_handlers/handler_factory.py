"""Registry of filter handlers and the filter pipeline."""

from __future__ import annotations

from collections.abc import Iterable
import logging

from ..constants import DEFAULT_ROUND_PRECISION
from ..exceptions import FilterRegistrationError
from ..type_definitions import FilterCall
from .base_handler import FilterHandler

_LOGGER = logging.getLogger(__name__)


class FilterRegistry:
    """Name to handler lookup for variable filters.

    Registration happens at setup; resolution only reads the registry.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._handlers: dict[str, FilterHandler] = {}

    def register_handler(self, handler: FilterHandler, name: str | None = None) -> None:
        """Register a handler under its own name or an explicit one."""
        if not isinstance(handler, FilterHandler):
            raise FilterRegistrationError(str(name), f"expected a FilterHandler, got {type(handler).__name__}")
        filter_name = (name if name is not None else handler.name).strip()
        if not filter_name:
            raise FilterRegistrationError(filter_name, "filter name must not be empty")
        self._handlers[filter_name] = handler
        _LOGGER.debug("Registered filter '%s': %s", filter_name, handler.get_handler_name())

    def get_handler(self, name: str) -> FilterHandler | None:
        """Get a handler by name."""
        return self._handlers.get(name)

    def names(self) -> list[str]:
        """Get the registered filter names."""
        return sorted(self._handlers)

    def copy(self) -> FilterRegistry:
        """Return a registry with the same handlers."""
        registry = FilterRegistry()
        registry._handlers = dict(self._handlers)
        return registry

    def apply_filters(self, value: str, filters: Iterable[FilterCall]) -> str:
        """Apply filters left to right.

        Unknown filters leave the value unchanged, and so does a handler that
        fails.
        """
        current = value
        for filter_call in filters:
            handler = self._handlers.get(filter_call.name)
            if handler is None:
                _LOGGER.debug("Unknown filter '%s' ignored", filter_call.name)
                continue
            try:
                current = handler.apply(current, filter_call.args)
            except Exception as err:  # pylint: disable=broad-exception-caught
                _LOGGER.warning("Filter '%s' failed for value '%s': %s", filter_call.name, current, err)
        return current


def create_default_registry(default_round_precision: int = DEFAULT_ROUND_PRECISION) -> FilterRegistry:
    """Create a registry holding the built-in filters."""
    # pylint: disable=import-outside-toplevel
    from .default_handler import DefaultFilter
    from .numeric_handler import RoundFilter
    from .string_handler import LowerFilter, UpperFilter

    registry = FilterRegistry()
    registry.register_handler(UpperFilter())
    registry.register_handler(LowerFilter())
    registry.register_handler(RoundFilter(default_round_precision))
    registry.register_handler(DefaultFilter())
    return registry


_DEFAULT_REGISTRY = create_default_registry()


def apply_filters(value: str, filters: Iterable[FilterCall], registry: FilterRegistry | None = None) -> str:
    """Apply filters with the given registry, or the built-in filters."""
    return (registry or _DEFAULT_REGISTRY).apply_filters(value, filters)
