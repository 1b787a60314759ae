"""Home Assistant Entity Context Package.

Resolves live entity state references such as ``[[entity.state]]`` or
``{{sensor.temperature.state|round(1)}}`` embedded in dashboard card text.
"""

# Public API - Card helpers
from .card_context import card_missing_references, load_card_yaml, primary_entity_id, resolve_card_text

# Public API - Configuration
from .config import EntityContextConfig, load_config_yaml

# Public API - Exceptions
from .exceptions import CardConfigError, EntityContextConfigError, EntityContextError, FilterRegistrationError

# Public API - Filters
from .filter_handlers import FilterHandler, FilterRegistry, apply_filters, create_default_registry
from .filter_chain import parse_default_arg, parse_filter, split_filter_chain

# Public API - Home Assistant adapter
from .ha_snapshot import async_snapshot_from_hass, snapshot_from_states
from .path_resolver import resolve_path
from .reference_extractor import extract_references, has_variables, missing_references
from .resolver import BoundResolver, EntityContextResolver, get_default_resolver, resolve

# Public API - Type definitions
from .type_definitions import DeviceRecord, FilterCall, ResolvedPath, StateSnapshot, Variable
from .value_resolver import PathHead, resolve_value
from .variable_scanner import parse_variables, scan_variables

__all__ = [
    "BoundResolver",
    "CardConfigError",
    "DeviceRecord",
    "EntityContextConfig",
    "EntityContextConfigError",
    "EntityContextError",
    "EntityContextResolver",
    "FilterCall",
    "FilterHandler",
    "FilterRegistrationError",
    "FilterRegistry",
    "PathHead",
    "ResolvedPath",
    "StateSnapshot",
    "Variable",
    "apply_filters",
    "async_snapshot_from_hass",
    "card_missing_references",
    "create_default_registry",
    "extract_references",
    "get_default_resolver",
    "has_variables",
    "load_card_yaml",
    "load_config_yaml",
    "missing_references",
    "parse_default_arg",
    "parse_filter",
    "parse_variables",
    "primary_entity_id",
    "resolve",
    "resolve_card_text",
    "resolve_path",
    "resolve_value",
    "scan_variables",
    "snapshot_from_states",
    "split_filter_chain",
]
