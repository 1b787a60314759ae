"""Test configuration and fixtures for ha-entity-context."""

from pathlib import Path
import sys
from typing import Any

import pytest

# Setup path for local package
test_dir = Path(__file__).parent
src_dir = test_dir.parent / "src"
sys.path.insert(0, str(src_dir))


def make_record(entity_id: str, state: str, attributes: dict[str, Any] | None = None, **fields: Any) -> dict[str, Any]:
    """Build a websocket-style state record."""
    record: dict[str, Any] = {
        "entity_id": entity_id,
        "state": state,
        "attributes": attributes or {},
        "last_changed": "2026-01-14T10:00:00.000Z",
        "last_updated": "2026-01-14T10:05:00.000Z",
        "context": {"id": entity_id, "parent_id": None, "user_id": None},
    }
    record.update(fields)
    return record


@pytest.fixture
def entity_states() -> dict[str, dict[str, Any]]:
    """State snapshot shared by the resolution tests."""
    return {
        "light.living_room": make_record(
            "light.living_room",
            "on",
            {"friendly_name": "Living Room Light", "battery": 97.4, "brightness": 255, "is_group": False},
        ),
        "sensor.temperature": make_record(
            "sensor.temperature",
            "22.56",
            {"friendly_name": "Temperature", "unit_of_measurement": "C"},
            last_changed="2026-01-14T09:00:00.000Z",
            last_updated="2026-01-14T09:05:00.000Z",
        ),
        "light.bedroom": make_record("light.bedroom", "off"),
        "weather.home": make_record(
            "weather.home",
            "sunny",
            {
                "friendly_name": "Home",
                "forecast": [{"temperature": 18.5, "condition": "cloudy"}, {"temperature": 21, "condition": "rainy"}],
                "location": {"city": "Utrecht", "coordinates": {"lat": 52.09}},
            },
        ),
    }
