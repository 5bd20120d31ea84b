"""Upgrade-set codec: tower + path + tier <-> canonical tower upgrades.

An upgrade set is a 3-digit string with one digit per path (top, middle,
bottom), each the tier reached on that path. Only one path may go past
tier 2, and at most two paths may be upgraded at all, so the sorted digits
are always ``[0, <=2, <=5]``.

Typical usage:
    path_tier_from_upgrade_set("302")            # -> (1, 3)
    cross_path_tier_from_upgrade_set("302")      # -> (3, 2)
    tower_upgrade_from_tower_path_tier(registry, "wiz", 2, 5)
                                                 # -> "wizard_monkey#050"
"""

from btd6_tools.aliases import AliasRegistry
from btd6_tools.enums import ALL_PATHS, BASE_UPGRADE_SET, MAX_TIER, PATH_NAMES
from btd6_tools.errors import InvalidArgumentError

# Aliases of the towers and hero that can only be placed on water
WATER_TOWER_ALIASES = ("sub", "bucc", "brick")


# ---------------------------------------------------------------------------
# Pure upgrade-set arithmetic
# ---------------------------------------------------------------------------

def _digits(upgrade_set: str) -> list[int]:
    if (
        not isinstance(upgrade_set, str)
        or len(upgrade_set) != len(ALL_PATHS)
        or not all(c in "0123456789" for c in upgrade_set)
    ):
        raise InvalidArgumentError(f"Upgrade set must be 3 digits, got {upgrade_set!r}")
    return [int(c) for c in upgrade_set]


def path_tier_from_upgrade_set(upgrade_set: str) -> tuple[int, int]:
    """Return (path, tier) of the highest-tier path.

    Path is 1-based; on a tie the leftmost path wins, so "000" -> (1, 0).

    Raises:
        InvalidArgumentError: If upgrade_set isn't 3 decimal digits.
    """
    upgrades = _digits(upgrade_set)
    tier = max(upgrades)
    return upgrades.index(tier) + 1, tier


def cross_path_tier_from_upgrade_set(upgrade_set: str) -> tuple[int, int]:
    """Return (cross_path, cross_tier) of the second-highest path.

    If the second-highest digit equals the highest, the first occurrence is
    masked before scanning again so the cross path never equals the main
    path: "220" -> (2, 2), and "000" -> (2, 0) rather than path 1. Only the
    path differs there; the cross tier is 0 either way, so costs don't.

    Raises:
        InvalidArgumentError: If upgrade_set isn't 3 decimal digits.
    """
    upgrades = _digits(upgrade_set)
    cross_tier = sorted(upgrades)[1]
    cross_path = upgrades.index(cross_tier) + 1
    if cross_tier == max(upgrades):
        upgrades[cross_path - 1] = -1
        cross_path = upgrades.index(cross_tier) + 1
    return cross_path, cross_tier


def is_valid_upgrade_set(upgrade_set) -> bool:
    """True if ``upgrade_set`` is 3 digits sorting to [0, <=2, <=5]."""
    if not isinstance(upgrade_set, str) or len(upgrade_set) != 3:
        return False
    if not all(c in "0123456789" for c in upgrade_set):
        return False
    low, mid, high = sorted(_digits(upgrade_set))
    return low == 0 and mid <= 2 and high <= MAX_TIER


def upgrade_set_from_path_tier(path: int, tier: int) -> str:
    """Digit string with ``tier`` on ``path`` and 0 elsewhere (2, 4 -> "040")."""
    digits = ["0"] * len(ALL_PATHS)
    digits[path - 1] = str(tier)
    return "".join(digits)


# ---------------------------------------------------------------------------
# Canonical tower upgrades
# ---------------------------------------------------------------------------

def upgrade_set_from_tower_upgrade(tower_upgrade: str) -> str:
    """"dart_monkey#302" -> "302"."""
    return tower_upgrade.rsplit("#", 1)[1]


def tower_from_tower_upgrade(registry: AliasRegistry, tower_upgrade: str) -> str | None:
    """Base tower of a tower upgrade or tower path, or None if it doesn't resolve."""
    if not tower_upgrade:
        return None
    canonical = registry.canonicize_arg(tower_upgrade)
    if canonical is None:
        return None
    if registry.is_tower_upgrade(canonical) or registry.is_tower_path(canonical):
        return canonical.rsplit("#", 1)[0]
    return None


def tower_path_from_tower_upgrade(registry: AliasRegistry, tower_upgrade: str) -> str | None:
    """"wizard_monkey#050" -> "wizard_monkey#middle-path"; None for "#000" and "#222"."""
    canonical = registry.canonicize_arg(tower_upgrade) if tower_upgrade else None
    if canonical is None:
        return None
    if registry.is_tower_path(canonical):
        return canonical
    if not registry.is_tower_upgrade(canonical):
        return None
    upgrade_set = upgrade_set_from_tower_upgrade(canonical)
    path, tier = path_tier_from_upgrade_set(upgrade_set)
    if tier == 0 or upgrade_set == BASE_UPGRADE_SET:
        return None
    return f"{canonical.rsplit('#', 1)[0]}#{PATH_NAMES[path]}"


def _as_int(value, message: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(message)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise InvalidArgumentError(message)


def tower_upgrade_from_tower_path_tier(
    registry: AliasRegistry,
    tower: str,
    path: int | str | None = None,
    tier: int | str | None = None,
) -> str:
    """Build a tower upgrade canonical from a tower, path and tier.

    Args:
        registry: Alias registry used to resolve ``tower``.
        tower: Tower canonical or alias ("wiz").
        path: 1, 2 or 3. None gives the tower's "#222" base line.
        tier: 0-5. None also gives the "#222" base line.

    Returns:
        Canonical like "wizard_monkey#300".

    Raises:
        InvalidArgumentError: If tower isn't a tower, or path/tier is out of range.
    """
    canonical = registry.canonical_form_of(tower) if isinstance(tower, str) else None
    if canonical is None or not registry.is_tower(canonical):
        raise InvalidArgumentError(f"First argument must be a tower, got {tower!r}")

    if path is None:
        return f"{canonical}#{BASE_UPGRADE_SET}"
    path_message = f"Second argument `path` must be 1, 2, or 3, got {path!r}"
    path = _as_int(path, path_message)
    if path not in ALL_PATHS:
        raise InvalidArgumentError(path_message)

    if tier is None:
        return f"{canonical}#{BASE_UPGRADE_SET}"
    tier_message = f"Third argument `tier` must be an integer between 0 and 5 inclusive, got {tier!r}"
    tier = _as_int(tier, tier_message)
    if not 0 <= tier <= MAX_TIER:
        raise InvalidArgumentError(tier_message)

    return f"{canonical}#{upgrade_set_from_path_tier(path, tier)}"


# ---------------------------------------------------------------------------
# Water towers and display
# ---------------------------------------------------------------------------

def all_water_towers(registry: AliasRegistry) -> list[str]:
    """Towers (and the hero) that can only be placed on water."""
    return [registry.canonical_form_of(t) for t in WATER_TOWER_ALIASES]


def is_water_tower_upgrade(registry: AliasRegistry, tower_upgrade: str) -> bool:
    """True for upgrades of water towers, water towers themselves and Brickell."""
    canonical = registry.canonicize_arg(tower_upgrade) if tower_upgrade else None
    if canonical is None:
        return False
    if registry.is_hero(canonical) or registry.is_tower(canonical):
        entity = canonical
    else:
        entity = tower_from_tower_upgrade(registry, canonical)
    return entity in all_water_towers(registry)


def tower_upgrade_to_index_normal_form(registry: AliasRegistry, tower_upgrade: str) -> str:
    return registry.to_index_normal_form(tower_upgrade)


def format_tower(registry: AliasRegistry, entity: str) -> str:
    """Display name for a tower, tower path, tower upgrade or hero.

    Raises:
        InvalidArgumentError: For anything else.
    """
    if registry.is_tower(entity) or registry.is_tower_upgrade(entity):
        return registry.to_index_normal_form(entity)
    if registry.is_tower_path(entity):
        tower, path_name = entity.lower().split("#")
        spoken = " ".join(word.capitalize() for word in path_name.split("-"))
        return f"{spoken} {registry.to_index_normal_form(tower)}"
    if registry.is_hero(entity):
        return registry.to_index_normal_form(entity)
    raise InvalidArgumentError(f"Tower {entity!r} is not within allotted tower/hero category")
