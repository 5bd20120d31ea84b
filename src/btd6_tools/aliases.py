"""Alias resolution for towers, upgrades, heroes, maps and map difficulties.

Maps community nicknames (wiz, glaive lord, gwen, mm...) to canonical
strings. The corpus is a flat sequence of AliasGroups, each filed under a
directory such as ``("towers", "primary")`` or ``("maps", "expert")``; the
directory doubles as the category used to enumerate "everything of the same
type as X".

Typical usage:
    from btd6_tools.corpus import default_registry

    registry = default_registry()
    registry.canonical_form_of("Wiz")            # -> "wizard_monkey"
    registry.canonical_form_of("glaive lord")    # -> "boomerang_monkey#500"
    registry.canonicize_arg("dart 030")          # -> "dart_monkey#030"
    registry.is_hero("gwendolin")                # -> True
"""

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Iterable

from btd6_tools.enums import (
    CATEGORY_REPRESENTATIVES,
    HEROES_DIR,
    MAP_DIFFICULTIES_DIR,
    MAPS_DIR,
    PATH_BY_NAME,
    TOWERS_DIR,
    EntityKind,
    TowerCategory,
)
from btd6_tools.errors import CorpusError

logger = logging.getLogger(__name__)

_STRIP_CHARS = re.compile(r"[.:'!,()]")
_SEPARATORS = re.compile(r"[\s\-_]+")
_UPGRADE_SUFFIX = re.compile(r"^[0-9]{3}$")
_COMPOUND = re.compile(r"^(?P<tower>.+?)(?:\s*#\s*|\s+)(?P<suffix>\d-?\d-?\d|[a-z]+-path)$")


def normalize_token(token: str) -> str:
    """Normalize a raw token for lookup.

    Lower-cases and trims. Before any ``#`` the punctuation is dropped and
    runs of spaces, hyphens and underscores collapse to a single ``_``; the
    ``#`` suffix itself is only trimmed ("Spike-o-pult" -> "spike_o_pult",
    "Dart_Monkey#Top-Path" -> "dart_monkey#top-path").
    """
    text = token.strip().lower()
    head, sep, suffix = text.partition("#")
    head = _SEPARATORS.sub("_", _STRIP_CHARS.sub("", head)).strip("_")
    return f"{head}{sep}{suffix.strip()}"


def _title(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.replace("_", " ").split())


# ---------------------------------------------------------------------------
# Alias groups
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AliasGroup:
    """One canonical form plus its known aliases.

    Attributes:
        canonical: Normalized canonical string, unique within its kind.
        aliases: Normalized aliases; matching is case-insensitive.
        directory: Directory components, e.g. ("towers", "magic").
        position: Ordering key within the directory.
        display: Index spelling ("Wizard Lord Phoenix"). Derived from the
            first alias when not given.
    """

    canonical: str
    aliases: tuple[str, ...]
    directory: tuple[str, ...]
    position: int = 0
    display: str | None = field(default=None, compare=False)

    @property
    def kind(self) -> EntityKind | None:
        """Entity kind implied by the directory root and ``#`` suffix shape."""
        root = self.directory[0] if self.directory else None
        if root == TOWERS_DIR:
            if "#" not in self.canonical:
                return EntityKind.TOWER
            suffix = self.canonical.rsplit("#", 1)[1]
            if _UPGRADE_SUFFIX.match(suffix):
                return EntityKind.TOWER_UPGRADE
            if suffix in PATH_BY_NAME:
                return EntityKind.TOWER_PATH
            return None
        if "#" in self.canonical:
            return None
        return {
            HEROES_DIR: EntityKind.HERO,
            MAPS_DIR: EntityKind.MAP,
            MAP_DIFFICULTIES_DIR: EntityKind.MAP_DIFFICULTY,
        }.get(root)

    @property
    def display_name(self) -> str:
        if self.display:
            return self.display
        return _title(self.aliases[0] if self.aliases else self.canonical)


def load_alias_groups(records: Iterable[dict]) -> list[AliasGroup]:
    """Build AliasGroups from corpus records.

    Each record is ``{"canonical": str, "aliases": [str, ...], "directory":
    "towers/primary" or [...], "position": int, "display": str}``; position
    and display are optional.

    Raises:
        CorpusError: If a record is missing fields or has no aliases.
    """
    groups = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise CorpusError(f"corpus record {i} is not an object")
        canonical = rec.get("canonical")
        aliases = rec.get("aliases")
        directory = rec.get("directory")
        if not isinstance(canonical, str) or not canonical.strip():
            raise CorpusError(f"corpus record {i} has no canonical")
        if not isinstance(aliases, list) or not aliases or not all(isinstance(a, str) for a in aliases):
            raise CorpusError(f"corpus record {canonical!r} needs a non-empty list of string aliases")
        if isinstance(directory, str):
            directory = [part for part in directory.split("/") if part]
        if not isinstance(directory, (list, tuple)) or not directory:
            raise CorpusError(f"corpus record {canonical!r} has no directory")
        groups.append(AliasGroup(
            canonical=normalize_token(canonical),
            aliases=tuple(normalize_token(a) for a in aliases),
            directory=tuple(str(part).lower() for part in directory),
            position=int(rec.get("position", i)),
            display=rec.get("display"),
        ))
    return groups


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class AliasRegistry:
    """Immutable lookup structure over a corpus of AliasGroups.

    Built once at startup and shared read-only. Derived per-kind indices are
    computed on first use under a lock, at most once per registry.
    """

    def __init__(self, groups: Iterable[AliasGroup]) -> None:
        self._groups: tuple[AliasGroup, ...] = tuple(groups)
        self._first_group: dict[str, AliasGroup] = {}
        self._lookup: dict[str, str] = {}

        seen: set[tuple[EntityKind, str]] = set()
        for group in self._groups:
            kind = group.kind
            if kind is None:
                raise CorpusError(
                    f"{group.canonical!r} in {'/'.join(group.directory)} doesn't match any entity kind"
                )
            if not group.aliases:
                raise CorpusError(f"{group.canonical!r} has no aliases")
            if (kind, group.canonical) in seen:
                raise CorpusError(f"duplicate {kind.label} canonical {group.canonical!r}")
            seen.add((kind, group.canonical))
            self._first_group.setdefault(normalize_token(group.canonical), group)

        # Canonicals take precedence over aliases so lookup is idempotent.
        for group in self._groups:
            self._lookup.setdefault(normalize_token(group.canonical), group.canonical)
        for group in self._groups:
            for alias in group.aliases:
                owner = self._lookup.setdefault(normalize_token(alias), group.canonical)
                if owner != group.canonical:
                    logger.warning("Alias %r of %r is shadowed by %r", alias, group.canonical, owner)

        self._index: dict[EntityKind, tuple[str, ...]] | None = None
        self._index_sets: dict[EntityKind, frozenset[str]] | None = None
        self._index_lock = threading.Lock()
        logger.info("Loaded %d alias groups", len(self._groups))

    def __len__(self) -> int:
        return len(self._groups)

    @property
    def groups(self) -> tuple[AliasGroup, ...]:
        return self._groups

    # -- canonicalization ---------------------------------------------------

    def canonical_form_of(self, raw_token: str) -> str | None:
        """Resolve a raw token to its canonical form, or None if unknown."""
        if not isinstance(raw_token, str) or not raw_token.strip():
            return None
        return self._lookup.get(normalize_token(raw_token))

    def canonicize_arg(self, raw_token: str) -> str | None:
        """Like canonical_form_of, but also accepts tower + suffix compounds.

        "wiz 030", "wizard#0-3-0" and "dart top-path" resolve by
        canonicalizing the tower part and re-attaching the suffix.
        """
        canonical = self.canonical_form_of(raw_token)
        if canonical is not None or not isinstance(raw_token, str):
            return canonical
        m = _COMPOUND.match(raw_token.strip().lower())
        if not m:
            logger.debug("No canonical form for %r", raw_token)
            return None
        tower = self.canonical_form_of(m.group("tower"))
        if tower is None or not self.is_tower(tower):
            logger.debug("No tower for compound argument %r", raw_token)
            return None
        suffix = m.group("suffix")
        if suffix[0].isdigit():
            suffix = suffix.replace("-", "")
        candidate = f"{tower}#{suffix}"
        if self.is_tower_upgrade(candidate) or self.is_tower_path(candidate):
            return candidate
        logger.debug("Compound argument %r names no known upgrade", raw_token)
        return None

    def alias_group(self, canonical: str) -> AliasGroup | None:
        if not isinstance(canonical, str):
            return None
        return self._first_group.get(normalize_token(canonical))

    def alias_set(self, canonical: str) -> list[str]:
        """Return [canonical, *aliases] for a canonical, or [] if unknown."""
        group = self.alias_group(canonical)
        if group is None:
            return []
        return [group.canonical, *group.aliases]

    def to_index_normal_form(self, canonical: str) -> str:
        """Display spelling of a canonical ("wizard_monkey#050" -> "Wizard Lord Phoenix")."""
        group = self.alias_group(canonical)
        if group is None:
            return _title(canonical)
        return group.display_name

    # -- categories ---------------------------------------------------------

    def alias_groups_in_same_category_as(self, canonical: str) -> list[AliasGroup]:
        """All groups filed in the same directory as ``canonical``, in corpus order."""
        group = self.alias_group(canonical)
        if group is None:
            return []
        return [g for g in self._groups if g.directory == group.directory]

    def _category_canonicals(self, category: TowerCategory, kind: EntityKind) -> list[str]:
        representative = CATEGORY_REPRESENTATIVES[category]
        return [
            g.canonical
            for g in self.alias_groups_in_same_category_as(representative)
            if g.kind is kind
        ]

    def towers_in_category(self, category: TowerCategory) -> list[str]:
        return self._category_canonicals(category, EntityKind.TOWER)

    def tower_upgrades_in_category(self, category: TowerCategory) -> list[str]:
        return self._category_canonicals(category, EntityKind.TOWER_UPGRADE)

    # -- derived indices ----------------------------------------------------

    def _indices(self) -> tuple[dict[EntityKind, tuple[str, ...]], dict[EntityKind, frozenset[str]]]:
        if self._index is None:
            with self._index_lock:
                if self._index is None:
                    index = self._build_indices()
                    self._index_sets = {k: frozenset(v) for k, v in index.items()}
                    self._index = index
        return self._index, self._index_sets

    def _build_indices(self) -> dict[EntityKind, tuple[str, ...]]:
        by_kind: dict[EntityKind, list[str]] = {kind: [] for kind in EntityKind}
        if all(CATEGORY_REPRESENTATIVES[c] in self._first_group for c in TowerCategory):
            # Towers are enumerated category by category.
            for category in TowerCategory:
                by_kind[EntityKind.TOWER] += self.towers_in_category(category)
                by_kind[EntityKind.TOWER_UPGRADE] += self.tower_upgrades_in_category(category)
                by_kind[EntityKind.TOWER_PATH] += self._category_canonicals(category, EntityKind.TOWER_PATH)
        else:
            for g in self._groups:
                if g.kind in (EntityKind.TOWER, EntityKind.TOWER_UPGRADE, EntityKind.TOWER_PATH):
                    by_kind[g.kind].append(g.canonical)
        for g in self._groups:
            if g.kind in (EntityKind.HERO, EntityKind.MAP, EntityKind.MAP_DIFFICULTY):
                by_kind[g.kind].append(g.canonical)
        logger.debug("Built kind indices over %d alias groups", len(self._groups))
        return {k: tuple(v) for k, v in by_kind.items()}

    def all_of_kind(self, kind: EntityKind) -> tuple[str, ...]:
        return self._indices()[0][kind]

    def kinds_of(self, candidate: str) -> tuple[EntityKind, ...]:
        """Every kind a canonical belongs to (more than one only across directories)."""
        if not isinstance(candidate, str):
            return ()
        key = normalize_token(candidate)
        sets = self._indices()[1]
        return tuple(kind for kind in EntityKind if key in sets[kind])

    def _is(self, kind: EntityKind, candidate) -> bool:
        if not isinstance(candidate, str) or not candidate:
            return False
        return normalize_token(candidate) in self._indices()[1][kind]

    def all_towers(self) -> tuple[str, ...]:
        return self.all_of_kind(EntityKind.TOWER)

    def all_tower_upgrades(self) -> tuple[str, ...]:
        return self.all_of_kind(EntityKind.TOWER_UPGRADE)

    def all_tower_paths(self) -> tuple[str, ...]:
        return self.all_of_kind(EntityKind.TOWER_PATH)

    def all_heroes(self) -> tuple[str, ...]:
        return self.all_of_kind(EntityKind.HERO)

    def all_maps(self) -> tuple[str, ...]:
        return self.all_of_kind(EntityKind.MAP)

    def all_map_difficulties(self) -> tuple[str, ...]:
        return self.all_of_kind(EntityKind.MAP_DIFFICULTY)

    def is_tower(self, candidate) -> bool:
        return self._is(EntityKind.TOWER, candidate)

    def is_tower_upgrade(self, candidate) -> bool:
        return self._is(EntityKind.TOWER_UPGRADE, candidate)

    def is_tower_path(self, candidate) -> bool:
        return self._is(EntityKind.TOWER_PATH, candidate)

    def is_hero(self, candidate) -> bool:
        return self._is(EntityKind.HERO, candidate)

    def is_map(self, candidate) -> bool:
        return self._is(EntityKind.MAP, candidate)

    def is_map_difficulty(self, candidate) -> bool:
        return self._is(EntityKind.MAP_DIFFICULTY, candidate)
