"""Tests for btd6_tools.options."""

from btd6_tools.enums import EntityKind
from btd6_tools.errors import ErrorKind
from btd6_tools.options import (
    parse_entity,
    parse_map,
    parse_natural_number,
    parse_person,
    parse_tower,
)
from btd6_tools.parsed import Parsed, merge_all


# ---------------------------------------------------------------------------
# parse_entity
# ---------------------------------------------------------------------------

def test_parse_entity_tower(registry):
    parsed = parse_entity(registry, "wiz")
    assert parsed.tower == "wizard_monkey"
    assert not parsed.has_errors()


def test_parse_entity_tower_upgrade(registry):
    assert parse_entity(registry, "wlp").tower_upgrade == "wizard_monkey#050"
    assert parse_entity(registry, "Glaive Lord").tower_upgrade == "boomerang_monkey#500"
    assert parse_entity(registry, "dart 030").tower_upgrade == "dart_monkey#030"


def test_parse_entity_hero(registry):
    parsed = parse_entity(registry, "gwen")
    assert parsed.hero == "gwendolin"
    assert parsed.tower is None


def test_parse_entity_low_tier_collapses_to_base_line(registry):
    """Tier 1 and 2 upgrades are looked up as the tower's #222 line."""
    assert parse_entity(registry, "sharp shots").tower_upgrade == "dart_monkey#222"
    assert parse_entity(registry, "dart 020").tower_upgrade == "dart_monkey#222"
    assert parse_entity(registry, "base dart monkey").tower_upgrade == "dart_monkey#222"


def test_parse_entity_unknown_text(registry):
    parsed = parse_entity(registry, "definitely not a tower")
    assert parsed.error_messages() == ["Canonical not found"]
    assert parsed.errors[0].kind is ErrorKind.NOT_FOUND
    assert not parsed.has_any()


def test_parse_entity_wrong_kind(registry):
    """Maps and tower paths canonicalize but aren't entities."""
    for text in ("dark castle", "dart top path"):
        parsed = parse_entity(registry, text)
        assert parsed.has_errors(), text
        assert not parsed.has_any(), text
        assert parsed.errors[0].expected == (EntityKind.TOWER, EntityKind.TOWER_UPGRADE, EntityKind.HERO)


def test_parse_entity_missing_option(registry):
    assert parse_entity(registry, None) == Parsed()
    assert parse_entity(registry, "") == Parsed()


def test_parse_entity_prefers_tower_over_hero(overlap_registry):
    parsed = parse_entity(overlap_registry, "ben")
    assert parsed.tower == "ben"
    assert parsed.hero is None


# ---------------------------------------------------------------------------
# parse_map and friends
# ---------------------------------------------------------------------------

def test_parse_map(registry):
    assert parse_map(registry, "dc").map == "dark_castle"
    assert parse_map(registry, "#ouch").map == "ouch"
    assert parse_map(registry, "Exp").map_difficulty == "expert"


def test_parse_map_rejects_towers(registry):
    parsed = parse_map(registry, "wiz")
    assert parsed.has_errors()
    assert parsed.map is None


def test_parse_map_unknown(registry):
    assert parse_map(registry, "atlantis").error_messages() == ["Canonical not found"]


def test_parse_tower(registry):
    assert parse_tower(registry, "wiz").tower == "wizard_monkey"
    assert parse_tower(registry, "wlp").has_errors()
    assert parse_tower(registry, None) == Parsed()


def test_parse_person():
    assert parse_person("Chimps_Guy").person == "chimps_guy"
    assert parse_person("") == Parsed()


def test_parse_natural_number():
    assert parse_natural_number("5").natural_number == 5
    assert parse_natural_number(12, high=20).natural_number == 12
    assert parse_natural_number("0").has_errors()
    assert parse_natural_number("21", high=20).has_errors()
    assert parse_natural_number(None) == Parsed()


# ---------------------------------------------------------------------------
# Combining options
# ---------------------------------------------------------------------------

def test_options_merge(registry):
    parsed = merge_all([
        parse_entity(registry, "wlp"),
        parse_map(registry, "dc"),
        parse_person("chimps_guy"),
    ])
    assert not parsed.has_errors()
    assert parsed.tower_upgrade == "wizard_monkey#050"
    assert parsed.map == "dark_castle"
    assert parsed.person == "chimps_guy"


def test_options_merge_conflicting_towers(registry):
    parsed = parse_entity(registry, "wiz").merge(parse_tower(registry, "dart"))
    assert parsed.tower is None
    assert [e.kind for e in parsed.errors] == [ErrorKind.CONFLICT]
