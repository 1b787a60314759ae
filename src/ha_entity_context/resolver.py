"""Entity context resolver.

Replaces ``[[...]]`` and ``{{...}}`` variables in free text with values from a
Home Assistant state snapshot::

    resolve("[[entity.friendly_name]]: [[entity.state|upper]]", "light.kitchen", states)
    # -> "Kitchen: ON"

Resolution never raises for template input. Mismatched delimiters stay literal,
unknown entities and properties resolve to empty text and unknown filters are
ignored.
"""

from __future__ import annotations

import logging

from .config import EntityContextConfig
from .constants import DEFAULT_EMPTY
from .filter_chain import parse_filter, split_filter_chain
from .filter_handlers import FilterHandler, FilterRegistry, create_default_registry
from .path_resolver import resolve_path
from .reference_extractor import extract_references, has_variables, missing_references
from .type_definitions import StateSnapshot, Variable
from .value_resolver import resolve_value
from .variable_scanner import VariableSpan, is_recognized_span, parse_variables, substitute_variables

_LOGGER = logging.getLogger(__name__)


class EntityContextResolver:
    """Resolve entity context variables with a configuration and filter set."""

    def __init__(self, config: EntityContextConfig | None = None, registry: FilterRegistry | None = None) -> None:
        """Initialize the resolver.

        Args:
            config: Resolution settings, defaults when omitted
            registry: Filters to apply, the built-in filters when omitted
        """
        self._config = config or EntityContextConfig()
        self._registry = registry or create_default_registry(self._config.default_round_precision)

    @property
    def config(self) -> EntityContextConfig:
        """Return the resolver configuration."""
        return self._config

    @property
    def registry(self) -> FilterRegistry:
        """Return the filter registry."""
        return self._registry

    def register_filter(self, name: str, handler: FilterHandler) -> None:
        """Register an additional filter for this resolver."""
        self._registry.register_handler(handler, name)

    def parse_variables(self, template: str | None) -> list[Variable]:
        """Return the variables found in a template."""
        return parse_variables(template, self._config.delimiters)

    def has_variables(self, template: str | None) -> bool:
        """Return True if the template contains a variable."""
        return has_variables(template, self._config.delimiters)

    def resolve_expression(self, expression: str, default_entity_id: str | None, states: StateSnapshot | None) -> str:
        """Resolve a single variable expression, without delimiters."""
        expression = expression.strip()
        if not expression:
            return DEFAULT_EMPTY

        base_expression, *raw_filters = split_filter_chain(expression)
        resolved = resolve_path(base_expression)
        value = resolve_value(resolved.entity_id, resolved.property_path, default_entity_id, states)
        return self._registry.apply_filters(value, [parse_filter(raw) for raw in raw_filters])

    def resolve(self, template: str | None, default_entity_id: str | None, states: StateSnapshot | None) -> str:
        """Replace every variable in a template with its resolved value."""
        if not template:
            return DEFAULT_EMPTY

        def replace_variable(span: VariableSpan) -> str:
            if not is_recognized_span(span, self._config.delimiters):
                return span.raw
            return self.resolve_expression(span.interior, default_entity_id, states)

        resolved = substitute_variables(template, replace_variable)
        if resolved != template:
            _LOGGER.debug("Entity context resolution: '%s' -> '%s'", template, resolved)
        return resolved

    def extract_references(self, template: str | None, default_entity_id: str | None) -> set[str]:
        """Return the entity ids a template refers to."""
        return extract_references(template, default_entity_id, self._config.delimiters)

    def missing_references(
        self, template: str | None, default_entity_id: str | None, states: StateSnapshot | None
    ) -> list[str]:
        """Return the referenced entity ids absent from the snapshot."""
        return missing_references(template, default_entity_id, states, self._config.delimiters)

    def bind(self, states: StateSnapshot | None) -> BoundResolver:
        """Return a resolver fixed to one state snapshot."""
        return BoundResolver(self, states)


class BoundResolver:
    """An entity context resolver paired with a state snapshot."""

    def __init__(self, resolver: EntityContextResolver, states: StateSnapshot | None) -> None:
        self._resolver = resolver
        self._states = states

    def resolve(self, template: str | None, default_entity_id: str | None = None) -> str:
        """Resolve a template against the bound snapshot."""
        return self._resolver.resolve(template, default_entity_id, self._states)

    def missing_references(self, template: str | None, default_entity_id: str | None = None) -> list[str]:
        """Return referenced entity ids absent from the bound snapshot."""
        return self._resolver.missing_references(template, default_entity_id, self._states)

    def __call__(self, template: str | None, default_entity_id: str | None = None) -> str:
        return self.resolve(template, default_entity_id)


_DEFAULT_RESOLVER = EntityContextResolver()


def get_default_resolver() -> EntityContextResolver:
    """Return the shared resolver with default settings."""
    return _DEFAULT_RESOLVER


def resolve(template: str | None, default_entity_id: str | None, states: StateSnapshot | None) -> str:
    """Replace every variable in a template with its resolved value."""
    return _DEFAULT_RESOLVER.resolve(template, default_entity_id, states)
