"""Resolve command options (entity, map, person, tower, count) into Parsed results.

Each option is canonicalized through the registry before being dispatched
to the parser for the kinds it may hold. A missing option gives an empty
Parsed; text that doesn't canonicalize gives a Parsed carrying a NOT_FOUND
error.
"""

from btd6_tools.aliases import AliasRegistry
from btd6_tools.enums import BASE_UPGRADE_SET
from btd6_tools.parsed import Parsed
from btd6_tools.parsers import (
    PERSON_PREFIX,
    HeroParser,
    MapDifficultyParser,
    MapParser,
    NaturalNumberParser,
    OrParser,
    PersonParser,
    TowerParser,
    TowerUpgradeParser,
    parse_tokens,
)
from btd6_tools.towers import (
    path_tier_from_upgrade_set,
    tower_from_tower_upgrade,
    upgrade_set_from_tower_upgrade,
)

# Upgrades below this tier are looked up as the tower's base line.
MIN_DISTINCT_TIER = 3


def _canonical_not_found(text: str) -> Parsed:
    return Parsed().add_error("Canonical not found", token=text)


def entity_parser(registry: AliasRegistry) -> OrParser:
    return OrParser(TowerParser(registry), TowerUpgradeParser(registry), HeroParser(registry))


def parse_entity(registry: AliasRegistry, text: str | None) -> Parsed:
    """Parse a tower, tower upgrade or hero.

    Tier 1 and 2 upgrades collapse to the tower's "#222" base line, since
    they aren't tracked separately.
    """
    if not text:
        return Parsed()
    canonical = registry.canonicize_arg(text)
    if canonical is None:
        return _canonical_not_found(text)

    parser = entity_parser(registry)
    parsed = parse_tokens([canonical], parser)
    if parsed.tower_upgrade:
        _, tier = path_tier_from_upgrade_set(upgrade_set_from_tower_upgrade(parsed.tower_upgrade))
        if tier < MIN_DISTINCT_TIER:
            tower = tower_from_tower_upgrade(registry, parsed.tower_upgrade)
            parsed = parse_tokens([f"{tower}#{BASE_UPGRADE_SET}"], parser)
    return parsed


def parse_map(registry: AliasRegistry, text: str | None) -> Parsed:
    """Parse a map or a map difficulty."""
    if not text:
        return Parsed()
    canonical = registry.canonical_form_of(text)
    if canonical is None:
        return _canonical_not_found(text)
    return parse_tokens([canonical], OrParser(MapParser(registry), MapDifficultyParser(registry)))


def parse_tower(registry: AliasRegistry, text: str | None) -> Parsed:
    if not text:
        return Parsed()
    canonical = registry.canonicize_arg(text)
    if canonical is None:
        return _canonical_not_found(text)
    return parse_tokens([canonical], TowerParser(registry))


def parse_person(text: str | None) -> Parsed:
    if not text:
        return Parsed()
    return parse_tokens([f"{PERSON_PREFIX}{text}"], PersonParser())


def parse_natural_number(text: str | int | None, low: int = 1, high: int | None = None) -> Parsed:
    if text is None or text == "":
        return Parsed()
    return parse_tokens([text], NaturalNumberParser(low, high))
