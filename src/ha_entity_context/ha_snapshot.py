"""Build state snapshots from Home Assistant."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from typing import Any

from homeassistant.core import HomeAssistant, State, callback

from .constants import FIELD_ENTITY_ID, FIELD_ID
from .type_definitions import DeviceRecordLike
from .value_resolver import as_record

_LOGGER = logging.getLogger(__name__)


def snapshot_from_states(states: Iterable[DeviceRecordLike | None]) -> dict[str, Mapping[str, Any]]:
    """Key state objects or websocket state dicts by entity id.

    Entries without an entity id are skipped.
    """
    snapshot: dict[str, Mapping[str, Any]] = {}
    for state in states:
        record = as_record(state)
        if record is None:
            continue
        entity_id = record.get(FIELD_ENTITY_ID) or record.get(FIELD_ID)
        if not isinstance(entity_id, str) or not entity_id:
            _LOGGER.debug("Skipping state record without entity_id: %s", record)
            continue
        snapshot[entity_id] = record
    return snapshot


@callback
def async_snapshot_from_hass(hass: HomeAssistant, entity_ids: Iterable[str] | None = None) -> dict[str, Mapping[str, Any]]:
    """Capture the current states from the state machine.

    With ``entity_ids`` only those entities are captured; unknown ids are left
    out so they show up as missing references.
    """
    if entity_ids is None:
        states: list[State | None] = list(hass.states.async_all())
    else:
        states = [hass.states.get(entity_id) for entity_id in entity_ids]
    snapshot = snapshot_from_states(states)
    _LOGGER.debug("Captured state snapshot with %d entities", len(snapshot))
    return snapshot
