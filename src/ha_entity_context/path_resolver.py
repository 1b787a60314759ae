"""Resolve a base expression into an entity id and property path.

Supported forms, checked in order:

- ``entity_id``                      -> default entity, ``entity_id``
- ``entity``                         -> default entity, ``state``
- ``entity:light.kitchen.attributes.brightness`` -> explicit entity
- ``entity.attributes.brightness``   -> default entity, dotted path
- ``light.kitchen.state``            -> explicit entity, dotted path
- anything else                      -> default entity, expression as a single key
"""

from __future__ import annotations

from .constants import DEFAULT_PROPERTY_PATH, ENTITY_ID_TOKEN, ENTITY_PREFIX, ENTITY_TOKEN, PATH_SEPARATOR
from .type_definitions import ResolvedPath


def _explicit(parts: list[str]) -> ResolvedPath:
    entity_id = PATH_SEPARATOR.join(parts[:2])
    property_path = tuple(parts[2:]) or DEFAULT_PROPERTY_PATH
    return ResolvedPath(entity_id, property_path)


def resolve_path(base_expression: str) -> ResolvedPath:
    """Map a base expression to ``(entity_id, property_path)``.

    The property path is never empty.
    """
    trimmed = base_expression.strip()

    if trimmed == ENTITY_ID_TOKEN:
        return ResolvedPath(None, (ENTITY_ID_TOKEN,))

    if trimmed == ENTITY_TOKEN:
        return ResolvedPath(None, DEFAULT_PROPERTY_PATH)

    if trimmed.startswith(ENTITY_PREFIX):
        rest = trimmed[len(ENTITY_PREFIX) :]
        parts = rest.split(PATH_SEPARATOR)
        if len(parts) >= 2:
            return _explicit(parts)
        return ResolvedPath(rest, DEFAULT_PROPERTY_PATH)

    parts = trimmed.split(PATH_SEPARATOR)
    if parts[0] == ENTITY_TOKEN:
        return ResolvedPath(None, tuple(parts[1:]) or DEFAULT_PROPERTY_PATH)

    if len(parts) >= 2:
        return _explicit(parts)

    return ResolvedPath(None, (trimmed,))
