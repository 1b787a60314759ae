"""Collect the entity ids a template refers to."""

from __future__ import annotations

from collections.abc import Collection

from .constants import ALL_DELIMITERS
from .filter_chain import split_filter_chain
from .path_resolver import resolve_path
from .type_definitions import StateSnapshot
from .value_resolver import lookup_record
from .variable_scanner import scan_variables


def has_variables(template: str | None, delimiters: Collection[str] = ALL_DELIMITERS) -> bool:
    """Return True if the template contains at least one variable."""
    return next(scan_variables(template, delimiters), None) is not None


def extract_references(
    template: str | None, default_entity_id: str | None, delimiters: Collection[str] = ALL_DELIMITERS
) -> set[str]:
    """Return the entity ids referenced by a template.

    Variables without an explicit entity count as references to the default
    entity; they are dropped when there is no default.
    """
    references: set[str] = set()
    for variable in scan_variables(template, delimiters):
        parts = split_filter_chain(variable.expression)
        base_expression = parts[0] if parts else ""
        entity_id = resolve_path(base_expression).entity_id or default_entity_id
        if entity_id:
            references.add(entity_id)
    return references


def missing_references(
    template: str | None,
    default_entity_id: str | None,
    states: StateSnapshot | None,
    delimiters: Collection[str] = ALL_DELIMITERS,
) -> list[str]:
    """Return the referenced entity ids absent from the snapshot, sorted."""
    return sorted(
        entity_id
        for entity_id in extract_references(template, default_entity_id, delimiters)
        if lookup_record(states, entity_id) is None
    )
