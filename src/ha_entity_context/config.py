"""Configuration for entity context resolution.

Configuration can be given as a dictionary or a YAML document::

    delimiters:
      - square
      - curly
    default_round_precision: 0
    card_text_fields:
      - name
      - title
      - content
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from typing import Any

import voluptuous as vol
import yaml

from .constants import (
    ALL_DELIMITERS,
    DEFAULT_CARD_TEXT_FIELDS,
    DEFAULT_ROUND_PRECISION,
    DELIMITER_CURLY,
    DELIMITER_SQUARE,
    MAX_ROUND_PRECISION,
)
from .exceptions import EntityContextConfigError

_LOGGER = logging.getLogger(__name__)

CONF_DELIMITERS = "delimiters"
CONF_DEFAULT_ROUND_PRECISION = "default_round_precision"
CONF_CARD_TEXT_FIELDS = "card_text_fields"


def _non_blank_string(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise vol.Invalid("expected a non-empty string")
    return value.strip()


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_DELIMITERS, default=[DELIMITER_SQUARE, DELIMITER_CURLY]): vol.All(
            [vol.In(sorted(ALL_DELIMITERS))], vol.Length(min=1)
        ),
        vol.Optional(CONF_DEFAULT_ROUND_PRECISION, default=DEFAULT_ROUND_PRECISION): vol.All(
            int, vol.Range(min=0, max=MAX_ROUND_PRECISION)
        ),
        vol.Optional(CONF_CARD_TEXT_FIELDS, default=list(DEFAULT_CARD_TEXT_FIELDS)): [_non_blank_string],
    }
)


@dataclass(frozen=True)
class EntityContextConfig:
    """Settings for an entity context resolver."""

    delimiters: frozenset[str] = ALL_DELIMITERS
    default_round_precision: int = DEFAULT_ROUND_PRECISION
    card_text_fields: tuple[str, ...] = DEFAULT_CARD_TEXT_FIELDS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> EntityContextConfig:
        """Create a configuration from a dictionary.

        Raises:
            EntityContextConfigError: If the dictionary does not match the schema
        """
        try:
            validated = CONFIG_SCHEMA(dict(data or {}))
        except vol.Invalid as err:
            raise EntityContextConfigError(f"Invalid entity context configuration: {err}") from err

        return cls(
            delimiters=frozenset(validated[CONF_DELIMITERS]),
            default_round_precision=validated[CONF_DEFAULT_ROUND_PRECISION],
            card_text_fields=tuple(validated[CONF_CARD_TEXT_FIELDS]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a schema-compatible dictionary."""
        return {
            CONF_DELIMITERS: sorted(self.delimiters),
            CONF_DEFAULT_ROUND_PRECISION: self.default_round_precision,
            CONF_CARD_TEXT_FIELDS: list(self.card_text_fields),
        }


def load_config_yaml(yaml_content: str) -> EntityContextConfig:
    """Load a configuration from YAML text.

    An empty document gives the default configuration.

    Raises:
        EntityContextConfigError: If the YAML is invalid or fails validation
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as err:
        raise EntityContextConfigError(f"Failed to parse YAML content: {err}") from err

    if not data:
        _LOGGER.debug("Empty entity context configuration, using defaults")
        return EntityContextConfig()
    if not isinstance(data, Mapping):
        raise EntityContextConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    return EntityContextConfig.from_dict(data)
