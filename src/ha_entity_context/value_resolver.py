"""Resolve property paths against device records from a state snapshot."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
import logging
from typing import Any

from homeassistant.core import State

from .constants import (
    DEFAULT_EMPTY,
    FIELD_ATTRIBUTES,
    FIELD_ENTITY_ID,
    FIELD_FRIENDLY_NAME,
    FIELD_ID,
    FIELD_LAST_CHANGED,
    FIELD_LAST_UPDATED,
    FIELD_STATE,
    PATH_SEPARATOR,
)
from .type_definitions import DeviceRecordLike, StateSnapshot

_LOGGER = logging.getLogger(__name__)

# Beyond this magnitude floats keep their exponent form
_MAX_PLAIN_FLOAT = 1e21


class PathHead(Enum):
    """Recognized first segments of a property path."""

    ENTITY_ID = FIELD_ENTITY_ID
    DOMAIN = "domain"
    FRIENDLY_NAME = FIELD_FRIENDLY_NAME
    STATE = FIELD_STATE
    LAST_CHANGED = FIELD_LAST_CHANGED
    LAST_UPDATED = FIELD_LAST_UPDATED
    ATTRIBUTES = FIELD_ATTRIBUTES
    OTHER = None

    @classmethod
    def from_segment(cls, segment: str) -> PathHead:
        """Return the head for a path segment, OTHER when unrecognized."""
        try:
            return cls(segment)
        except ValueError:
            return cls.OTHER


def normalize_to_string(value: Any) -> str:
    """Convert a scalar record value to display text.

    Mappings, sequences and other objects have no text form and become empty.
    """
    if value is None:
        return DEFAULT_EMPTY
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
            return str(int(value))
        return repr(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    return DEFAULT_EMPTY


def as_record(value: DeviceRecordLike | None) -> Mapping[str, Any] | None:
    """Return a snapshot entry as a record mapping, or None if unusable."""
    if value is None:
        return None
    if isinstance(value, State):
        return value.as_dict()
    if isinstance(value, Mapping):
        return value
    _LOGGER.debug("Ignoring snapshot entry of unsupported type %s", type(value).__name__)
    return None


def lookup_record(states: StateSnapshot | None, entity_id: str | None) -> Mapping[str, Any] | None:
    """Look up the record for an entity id; a miss returns None."""
    if not entity_id or not states:
        return None
    return as_record(states.get(entity_id))


def _record_id(record: Mapping[str, Any] | None) -> str | None:
    if record is None:
        return None
    record_id = record.get(FIELD_ENTITY_ID) or record.get(FIELD_ID)
    return record_id if isinstance(record_id, str) and record_id else None


def _walk_attributes(record: Mapping[str, Any] | None, keys: Sequence[str]) -> Any:
    """Walk nested attribute keys; any miss returns None."""
    if record is None or not keys:
        return None
    current: Any = record.get(FIELD_ATTRIBUTES)
    for key in keys:
        if isinstance(current, Mapping):
            if key not in current:
                return None
            current = current[key]
        elif isinstance(current, Sequence) and not isinstance(current, str) and key.isdigit():
            index = int(key)
            if index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def _friendly_name(record: Mapping[str, Any] | None, entity_id: str | None) -> str:
    if record is not None:
        attributes = record.get(FIELD_ATTRIBUTES)
        if isinstance(attributes, Mapping):
            friendly = attributes.get(FIELD_FRIENDLY_NAME)
            if friendly:
                return normalize_to_string(friendly)
    if not entity_id:
        return DEFAULT_EMPTY
    parts = entity_id.split(PATH_SEPARATOR)
    if len(parts) < 2:
        return DEFAULT_EMPTY
    return parts[1].replace("_", " ")


def resolve_record_value(
    record: Mapping[str, Any] | None, entity_id: str | None, property_path: Sequence[str]
) -> str:
    """Resolve a property path against a record, which may be missing.

    ``entity_id`` is the id that was looked up; ``entity_id`` and ``domain``
    fall back to it when the record does not exist.
    """
    if not property_path:
        return DEFAULT_EMPTY

    first, rest = property_path[0], property_path[1:]
    known_id = _record_id(record) or entity_id
    head = PathHead.from_segment(first)

    if head is PathHead.ENTITY_ID:
        return known_id or DEFAULT_EMPTY
    if head is PathHead.DOMAIN:
        return known_id.split(PATH_SEPARATOR, 1)[0] if known_id else DEFAULT_EMPTY
    if head is PathHead.FRIENDLY_NAME:
        return _friendly_name(record, known_id)
    if record is None:
        return DEFAULT_EMPTY
    if head in (PathHead.STATE, PathHead.LAST_CHANGED, PathHead.LAST_UPDATED):
        return normalize_to_string(record.get(head.value))
    if head is PathHead.ATTRIBUTES:
        return normalize_to_string(_walk_attributes(record, rest))
    return normalize_to_string(record.get(first))


def resolve_value(
    entity_id: str | None,
    property_path: Sequence[str],
    default_entity_id: str | None,
    states: StateSnapshot | None,
) -> str:
    """Resolve a property path for an explicit or default entity."""
    effective_id = entity_id if entity_id is not None else default_entity_id
    record = lookup_record(states, effective_id)
    if record is None and effective_id:
        _LOGGER.debug("Entity %s not found in state snapshot", effective_id)
    return resolve_record_value(record, effective_id, property_path)
