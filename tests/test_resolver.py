"""Tests for resolving entity context templates."""

from collections.abc import Sequence

import pytest

import ha_entity_context
from ha_entity_context import EntityContextConfig, EntityContextResolver, FilterHandler, resolve
from ha_entity_context.constants import DELIMITER_CURLY


class SuffixFilter(FilterHandler):
    """Test filter appending its argument."""

    name = "suffix"

    def apply(self, value: str, args: Sequence[str]) -> str:
        return value + (args[0] if args else "")


class TestResolve:
    """Test template resolution end to end."""

    def test_default_entity_properties(self, entity_states):
        """Test shorthand properties of the default entity."""
        template = "State: [[entity.state]] | [[entity.friendly_name]] | [[entity.domain]] | [[entity.entity_id]]"

        result = resolve(template, "light.living_room", entity_states)

        assert result == "State: on | Living Room Light | light | light.living_room"

    def test_attributes_and_timestamps(self, entity_states):
        """Test attribute and timestamp properties."""
        template = "Battery [[entity.attributes.battery]] @ [[entity.last_updated]]"

        result = resolve(template, "light.living_room", entity_states)

        assert result == "Battery 97.4 @ 2026-01-14T10:05:00.000Z"

    def test_explicit_entity(self, entity_states):
        """Test explicit references to another entity."""
        assert resolve("Temp [[sensor.temperature.state]]°C", "light.living_room", entity_states) == "Temp 22.56°C"
        assert resolve("Temp [[entity:sensor.temperature]]°C", "light.living_room", entity_states) == "Temp 22.56°C"

    def test_shorthand_forms(self, entity_states):
        """Test bare 'entity' and 'entity_id'."""
        assert resolve("ID [[entity_id]] is [[entity]]", "light.living_room", entity_states) == (
            "ID light.living_room is on"
        )

    def test_missing_attribute(self, entity_states):
        """Test missing attributes resolve to empty text."""
        assert resolve("Missing [[entity.attributes.not_here]]", "light.living_room", entity_states) == "Missing "

    def test_filters(self, entity_states):
        """Test the built-in filters."""
        template = (
            'State [[entity.state|upper]] temp [[sensor.temperature.state|round(1)]] '
            'default [[entity.attributes.none|default("n/a")]]'
        )

        result = resolve(template, "light.living_room", entity_states)

        assert result == "State ON temp 22.6 default n/a"

    def test_curly_delimiters_with_spacing(self, entity_states):
        """Test curly delimiters and whitespace around pipes."""
        template = "{{ sensor.temperature.state | round(0) }} / {{ entity.friendly_name | lower }}"

        assert resolve(template, "light.living_room", entity_states) == "23 / living room light"

    def test_quoted_pipe_in_filter_argument(self, entity_states):
        """Test a quoted pipe in an argument does not split the chain."""
        template = '[[entity.attributes.none|round(1.5)|default("on | off")]]'

        assert resolve(template, "light.living_room", entity_states) == "on | off"

    def test_mismatched_delimiters_are_literal(self, entity_states):
        """Test mixed delimiter pairs are left untouched."""
        assert resolve("[[entity.state}}", "light.living_room", entity_states) == "[[entity.state}}"
        assert resolve("{{entity.state]] [[entity.state]]", "light.living_room", entity_states) == (
            "{{entity.state]] on"
        )

    def test_empty_variable(self, entity_states):
        """Test empty variables resolve to empty text."""
        assert resolve("a[[]]b{{  }}c", "light.living_room", entity_states) == "abc"

    def test_unknown_filter(self, entity_states):
        """Test unknown filters are ignored."""
        assert resolve("[[entity.state|sparkle|upper]]", "light.living_room", entity_states) == "ON"

    def test_round_non_numeric(self, entity_states):
        """Test round passes non-numeric values through."""
        assert resolve("[[entity.state|round(2)]]", "light.living_room", entity_states) == "on"

    def test_missing_entity(self, entity_states):
        """Test missing entities degrade instead of failing."""
        template = "[[cover.garage.state]]|[[cover.garage.domain]]|[[cover.garage.entity_id]]"

        assert resolve(template, None, entity_states) == "|cover|cover.garage"

    def test_no_default_entity(self, entity_states):
        """Test default entity variables without a default."""
        assert resolve("[[entity.state]]-[[entity_id]]", None, entity_states) == "-"

    def test_empty_explicit_entity(self, entity_states):
        """Test an empty explicit entity id does not fall back to the default entity."""
        assert resolve("[[entity:]]", "light.living_room", entity_states) == ""
        assert resolve("[[entity:]]|[[entity.state]]", "light.living_room", entity_states) == "|on"

    def test_plain_text_unchanged(self, entity_states):
        """Test templates without variables are returned as is."""
        for template in ("Plain", "Half [[open", "x ]] y", "[single] {braces}"):
            assert resolve(template, "light.living_room", entity_states) == template

    def test_empty_template(self, entity_states):
        """Test empty and missing templates."""
        assert resolve("", "light.living_room", entity_states) == ""
        assert resolve(None, "light.living_room", entity_states) == ""

    def test_idempotent(self, entity_states):
        """Test repeated resolution gives the same output."""
        template = "[[entity.friendly_name]]: [[entity.state|upper]] ({{sensor.temperature|round(1)}})"

        results = {resolve(template, "light.living_room", entity_states) for _ in range(5)}

        assert results == {"Living Room Light: ON (22.6)"}

    def test_reflects_new_snapshot(self, entity_states):
        """Test resolution reads the snapshot passed on each call."""
        template = "[[entity.friendly_name]]: [[entity.state|upper]]"
        assert resolve(template, "light.living_room", entity_states) == "Living Room Light: ON"

        updated = dict(entity_states)
        updated["light.living_room"] = {**entity_states["light.living_room"], "state": "off"}

        assert resolve(template, "light.living_room", updated) == "Living Room Light: OFF"
        assert resolve(template, "light.living_room", entity_states) == "Living Room Light: ON"


class TestEntityContextResolver:
    """Test resolver configuration and binding."""

    def test_disabled_delimiter_is_literal(self, entity_states):
        """Test disabled delimiter kinds are not resolved."""
        resolver = EntityContextResolver(EntityContextConfig(delimiters=frozenset({DELIMITER_CURLY})))

        result = resolver.resolve("[[entity.state]] {{entity.state}}", "light.living_room", entity_states)

        assert result == "[[entity.state]] on"
        assert not resolver.has_variables("[[entity.state]]")
        assert resolver.extract_references("[[sensor.a]] {{sensor.b}}", None) == {"sensor.b"}

    def test_configured_round_precision(self, entity_states):
        """Test round without an argument uses the configured precision."""
        resolver = EntityContextResolver(EntityContextConfig(default_round_precision=1))

        assert resolver.resolve("[[sensor.temperature|round]]", None, entity_states) == "22.6"

    def test_register_filter(self, entity_states):
        """Test per-resolver filters do not leak into the default resolver."""
        resolver = EntityContextResolver()
        resolver.register_filter("suffix", SuffixFilter())

        assert resolver.resolve("[[entity.state|suffix(!)]]", "light.living_room", entity_states) == "on!"
        assert resolve("[[entity.state|suffix(!)]]", "light.living_room", entity_states) == "on"

    def test_bind(self, entity_states):
        """Test a bound resolver matches unbound resolution."""
        resolver = EntityContextResolver()
        bound = resolver.bind(entity_states)
        template = "[[entity.friendly_name]] [[cover.garage.state]]"

        assert bound.resolve(template, "light.living_room") == resolver.resolve(
            template, "light.living_room", entity_states
        )
        assert bound(template, "light.living_room") == "Living Room Light "
        assert bound.missing_references(template, "light.living_room") == ["cover.garage"]

    def test_resolve_expression(self, entity_states):
        """Test resolving a single expression without delimiters."""
        resolver = EntityContextResolver()

        assert resolver.resolve_expression(" entity.state | upper ", "light.living_room", entity_states) == "ON"
        assert resolver.resolve_expression("   ", "light.living_room", entity_states) == ""

    def test_parse_variables(self):
        """Test the resolver exposes variable parsing."""
        resolver = EntityContextResolver()

        assert [v.expression for v in resolver.parse_variables("[[a]] {{b}}")] == ["a", "b"]


class TestPublicApi:
    """Test the package level functions."""

    @pytest.mark.parametrize(
        "name",
        ["parse_variables", "has_variables", "resolve", "extract_references", "missing_references"],
    )
    def test_exports(self, name):
        """Test the public operations are exported."""
        assert callable(getattr(ha_entity_context, name))
