"""Tests for btd6_tools.towers."""

import pytest

from btd6_tools.errors import InvalidArgumentError
from btd6_tools.towers import (
    all_water_towers,
    cross_path_tier_from_upgrade_set,
    format_tower,
    is_valid_upgrade_set,
    is_water_tower_upgrade,
    path_tier_from_upgrade_set,
    tower_from_tower_upgrade,
    tower_path_from_tower_upgrade,
    tower_upgrade_from_tower_path_tier,
    tower_upgrade_to_index_normal_form,
    upgrade_set_from_path_tier,
    upgrade_set_from_tower_upgrade,
)


# ---------------------------------------------------------------------------
# Upgrade-set arithmetic
# ---------------------------------------------------------------------------

def test_path_tier_from_upgrade_set():
    assert path_tier_from_upgrade_set("302") == (1, 3)
    assert path_tier_from_upgrade_set("050") == (2, 5)
    assert path_tier_from_upgrade_set("024") == (3, 4)


def test_path_tier_tie_picks_leftmost():
    assert path_tier_from_upgrade_set("000") == (1, 0)
    assert path_tier_from_upgrade_set("220") == (1, 2)
    assert path_tier_from_upgrade_set("222") == (1, 2)


def test_cross_path_tier_from_upgrade_set():
    assert cross_path_tier_from_upgrade_set("302") == (3, 2)
    assert cross_path_tier_from_upgrade_set("230") == (1, 2)
    assert cross_path_tier_from_upgrade_set("050") == (1, 0)


def test_cross_path_never_equals_main_path():
    """Ties are broken so the cross path is a different path."""
    assert cross_path_tier_from_upgrade_set("220") == (2, 2)
    # Path 2, not path 1; the cross tier is 0 so costs are the same
    assert cross_path_tier_from_upgrade_set("000") == (2, 0)
    for upgrade_set in ("000", "100", "110", "220", "202", "022", "500", "025"):
        path, _ = path_tier_from_upgrade_set(upgrade_set)
        cross_path, _ = cross_path_tier_from_upgrade_set(upgrade_set)
        assert path != cross_path, upgrade_set


def test_malformed_upgrade_set_raises():
    """Anything but 3 decimal digits raises InvalidArgumentError."""
    for upgrade_set in ("", "5", "12", "ab0", "0000", "1 2", None):
        with pytest.raises(InvalidArgumentError):
            path_tier_from_upgrade_set(upgrade_set)
        with pytest.raises(InvalidArgumentError):
            cross_path_tier_from_upgrade_set(upgrade_set)


def test_is_valid_upgrade_set():
    for upgrade_set in ("000", "500", "520", "025", "220", "102"):
        assert is_valid_upgrade_set(upgrade_set), upgrade_set
    for upgrade_set in ("303", "333", "550", "006", "600", "111", "50", "5000", "a20", "", None, 520):
        assert not is_valid_upgrade_set(upgrade_set), upgrade_set


def test_upgrade_set_from_path_tier():
    assert upgrade_set_from_path_tier(2, 4) == "040"
    assert upgrade_set_from_path_tier(1, 0) == "000"
    assert upgrade_set_from_path_tier(3, 5) == "005"


def test_path_tier_round_trip():
    """Encoding then decoding returns the same path for tiers 1-5."""
    for path in (1, 2, 3):
        for tier in range(1, 6):
            assert path_tier_from_upgrade_set(upgrade_set_from_path_tier(path, tier)) == (path, tier)


def test_tier_zero_decodes_to_first_path():
    assert path_tier_from_upgrade_set(upgrade_set_from_path_tier(3, 0)) == (1, 0)


# ---------------------------------------------------------------------------
# Tower upgrades
# ---------------------------------------------------------------------------

def test_upgrade_set_from_tower_upgrade():
    assert upgrade_set_from_tower_upgrade("dart_monkey#302") == "302"


def test_tower_from_tower_upgrade(registry):
    assert tower_from_tower_upgrade(registry, "wizard_monkey#050") == "wizard_monkey"
    assert tower_from_tower_upgrade(registry, "wlp") == "wizard_monkey"
    assert tower_from_tower_upgrade(registry, "dart_monkey#top-path") == "dart_monkey"
    assert tower_from_tower_upgrade(registry, "wizard_monkey") is None
    assert tower_from_tower_upgrade(registry, "gwen") is None
    assert tower_from_tower_upgrade(registry, "") is None


def test_tower_path_from_tower_upgrade(registry):
    assert tower_path_from_tower_upgrade(registry, "wizard_monkey#050") == "wizard_monkey#middle-path"
    assert tower_path_from_tower_upgrade(registry, "dart_monkey#300") == "dart_monkey#top-path"
    assert tower_path_from_tower_upgrade(registry, "cbm") == "dart_monkey#bottom-path"
    assert tower_path_from_tower_upgrade(registry, "dart_monkey#222") is None
    assert tower_path_from_tower_upgrade(registry, "dart_monkey") is None


def test_tower_upgrade_from_tower_path_tier(registry):
    assert tower_upgrade_from_tower_path_tier(registry, "wiz", 2, 5) == "wizard_monkey#050"
    assert tower_upgrade_from_tower_path_tier(registry, "dart_monkey", 1, 3) == "dart_monkey#300"
    assert tower_upgrade_from_tower_path_tier(registry, "dart_monkey", "3", "4") == "dart_monkey#004"


def test_tower_upgrade_from_tower_path_tier_defaults_to_base_line(registry):
    assert tower_upgrade_from_tower_path_tier(registry, "dart_monkey") == "dart_monkey#222"
    assert tower_upgrade_from_tower_path_tier(registry, "dart_monkey", 2) == "dart_monkey#222"


def test_tower_upgrade_from_tower_path_tier_rejects_non_tower(registry):
    with pytest.raises(InvalidArgumentError, match="First argument must be a tower"):
        tower_upgrade_from_tower_path_tier(registry, "gwen", 1, 3)
    with pytest.raises(InvalidArgumentError, match="First argument must be a tower"):
        tower_upgrade_from_tower_path_tier(registry, "dart_monkey#300", 1, 3)


def test_tower_upgrade_from_tower_path_tier_rejects_bad_path(registry):
    for path in (0, 4, "top", True):
        with pytest.raises(InvalidArgumentError, match="`path`"):
            tower_upgrade_from_tower_path_tier(registry, "dart_monkey", path, 3)


def test_tower_upgrade_from_tower_path_tier_rejects_bad_tier(registry):
    for tier in (-1, 6, "five", 2.5):
        with pytest.raises(InvalidArgumentError, match="`tier`"):
            tower_upgrade_from_tower_path_tier(registry, "dart_monkey", 1, tier)


def test_invalid_argument_is_value_error(registry):
    with pytest.raises(ValueError):
        tower_upgrade_from_tower_path_tier(registry, "nope", 1, 3)


# ---------------------------------------------------------------------------
# Water towers and display
# ---------------------------------------------------------------------------

def test_all_water_towers(registry):
    assert all_water_towers(registry) == ["monkey_sub", "monkey_buccaneer", "admiral_brickell"]


def test_is_water_tower_upgrade(registry):
    assert is_water_tower_upgrade(registry, "monkey_sub#050")
    assert is_water_tower_upgrade(registry, "cfs")
    assert is_water_tower_upgrade(registry, "monkey_buccaneer")
    assert is_water_tower_upgrade(registry, "brick")
    assert not is_water_tower_upgrade(registry, "wizard_monkey#050")
    assert not is_water_tower_upgrade(registry, "gwen")
    assert not is_water_tower_upgrade(registry, "nonsense")


def test_tower_upgrade_to_index_normal_form(registry):
    assert tower_upgrade_to_index_normal_form(registry, "dart_monkey#500") == "Ultra-Juggernaut"


def test_format_tower(registry):
    assert format_tower(registry, "dart_monkey") == "Dart Monkey"
    assert format_tower(registry, "wizard_monkey#050") == "Wizard Lord Phoenix"
    assert format_tower(registry, "dart_monkey#top-path") == "Top Path Dart Monkey"
    assert format_tower(registry, "wizard_monkey#middle-path") == "Middle Path Wizard Monkey"
    assert format_tower(registry, "gwendolin") == "Gwendolin"


def test_format_tower_rejects_maps(registry):
    with pytest.raises(InvalidArgumentError):
        format_tower(registry, "dark_castle")


def test_tower_upgrade_round_trip(registry):
    """Building an upgrade from (path, tier) and decoding its suffix gives them back."""
    for path in (1, 2, 3):
        for tier in range(1, 6):
            upgrade = tower_upgrade_from_tower_path_tier(registry, "ninja", path, tier)
            assert registry.is_tower_upgrade(upgrade)
            assert path_tier_from_upgrade_set(upgrade_set_from_tower_upgrade(upgrade)) == (path, tier)
