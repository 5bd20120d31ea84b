"""Map helpers built on the registry's ("maps", <difficulty>) directories."""

from btd6_tools.aliases import AliasRegistry
from btd6_tools.enums import MAPS_DIR, EntityKind
from btd6_tools.errors import InvalidArgumentError


def all_maps_from_map_difficulty(registry: AliasRegistry, difficulty: str) -> list[str]:
    """All map canonicals of a difficulty, in corpus order.

    Raises:
        InvalidArgumentError: If ``difficulty`` isn't a map difficulty.
    """
    canonical = registry.canonical_form_of(difficulty)
    if canonical is None or not registry.is_map_difficulty(canonical):
        raise InvalidArgumentError(f"{difficulty!r} is not a map difficulty")
    return [
        g.canonical
        for g in registry.groups
        if g.kind is EntityKind.MAP and g.directory == (MAPS_DIR, canonical)
    ]


def map_difficulty_of(registry: AliasRegistry, map_name: str) -> str | None:
    canonical = registry.canonical_form_of(map_name)
    if canonical is None or not registry.is_map(canonical):
        return None
    group = next(
        g for g in registry.groups
        if g.kind is EntityKind.MAP and g.canonical == canonical
    )
    return group.directory[1] if len(group.directory) > 1 else None
