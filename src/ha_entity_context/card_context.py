"""Resolve entity context variables in dashboard card configurations.

A card's text fields are resolved against its primary entity, so a button card
with ``entity: light.kitchen`` and ``name: "[[entity.friendly_name]]"`` shows the
kitchen light's friendly name.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any

import yaml

from .constants import CARD_ENTITIES_KEY, CARD_ENTITY_KEY
from .exceptions import CardConfigError
from .resolver import EntityContextResolver, get_default_resolver
from .type_definitions import StateSnapshot

_LOGGER = logging.getLogger(__name__)


def _entity_from_entry(entry: Any) -> str | None:
    if isinstance(entry, str):
        return entry.strip() or None
    if isinstance(entry, Mapping):
        entity = entry.get(CARD_ENTITY_KEY)
        if isinstance(entity, str) and entity.strip():
            return entity.strip()
    return None


def primary_entity_id(card: Mapping[str, Any]) -> str | None:
    """Return the entity a card's variables default to.

    This is ``entity`` when set, otherwise the first entry of ``entities``.
    """
    entity = _entity_from_entry(card.get(CARD_ENTITY_KEY))
    if entity:
        return entity

    entities = card.get(CARD_ENTITIES_KEY)
    if isinstance(entities, list) and entities:
        return _entity_from_entry(entities[0])
    return None


def _text_fields(resolver: EntityContextResolver, fields: Iterable[str] | None) -> tuple[str, ...]:
    return tuple(fields) if fields is not None else resolver.config.card_text_fields


def resolve_card_text(
    card: Mapping[str, Any],
    states: StateSnapshot | None,
    fields: Iterable[str] | None = None,
    resolver: EntityContextResolver | None = None,
) -> dict[str, Any]:
    """Return a copy of the card with its text fields resolved.

    Fields that are missing or not strings are copied unchanged.
    """
    resolver = resolver or get_default_resolver()
    default_entity_id = primary_entity_id(card)
    resolved = dict(card)
    for field in _text_fields(resolver, fields):
        value = card.get(field)
        if isinstance(value, str):
            resolved[field] = resolver.resolve(value, default_entity_id, states)
    return resolved


def card_missing_references(
    card: Mapping[str, Any],
    states: StateSnapshot | None,
    fields: Iterable[str] | None = None,
    resolver: EntityContextResolver | None = None,
) -> list[str]:
    """Return entity ids referenced by the card's text fields that are missing."""
    resolver = resolver or get_default_resolver()
    default_entity_id = primary_entity_id(card)
    missing: set[str] = set()
    for field in _text_fields(resolver, fields):
        value = card.get(field)
        if isinstance(value, str):
            missing.update(resolver.missing_references(value, default_entity_id, states))
    if missing:
        _LOGGER.debug("Card %s references missing entities: %s", card.get("type"), sorted(missing))
    return sorted(missing)


def load_card_yaml(yaml_content: str) -> dict[str, Any]:
    """Parse a card YAML document.

    Raises:
        CardConfigError: If the YAML is invalid or is not a mapping
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as err:
        raise CardConfigError(f"Failed to parse card YAML: {err}") from err

    if not isinstance(data, Mapping):
        raise CardConfigError(f"Card configuration must be a mapping, got {type(data).__name__}")
    return dict(data)
