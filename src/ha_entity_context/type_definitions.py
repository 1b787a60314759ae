"""Type definitions for entity context parsing and resolution."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple, TypeAlias, TypedDict

from homeassistant.core import State


class Variable(NamedTuple):
    """A bracketed variable found in a template."""

    raw: str
    expression: str
    start: int
    end: int


class FilterCall(NamedTuple):
    """A named filter with its optional argument."""

    name: str
    args: tuple[str, ...] = ()


class ResolvedPath(NamedTuple):
    """Entity id and property path for a base expression.

    ``entity_id`` is None when the expression refers to the default entity.
    """

    entity_id: str | None
    property_path: tuple[str, ...]


class DeviceRecord(TypedDict, total=False):
    """Home Assistant state as delivered by the websocket API."""

    entity_id: str
    state: str
    attributes: dict[str, Any]
    last_changed: str
    last_updated: str
    context: dict[str, Any]


# A snapshot value may be a plain record mapping or a Home Assistant State
DeviceRecordLike: TypeAlias = Mapping[str, Any] | State
StateSnapshot: TypeAlias = Mapping[str, DeviceRecordLike]
