"""Entity kinds, tower categories, and upgrade path names.

Every canonical string belongs to exactly one EntityKind. Tower, tower
upgrade and tower path canonicals share the "towers" directory and are told
apart by their ``#`` suffix:

- ``dart_monkey``            -> TOWER
- ``dart_monkey#300``        -> TOWER_UPGRADE (3-digit upgrade set)
- ``dart_monkey#top-path``   -> TOWER_PATH
"""

from enum import Enum
from types import MappingProxyType


class EntityKind(Enum):
    TOWER = "tower"
    TOWER_UPGRADE = "tower_upgrade"
    TOWER_PATH = "tower_path"
    HERO = "hero"
    MAP = "map"
    MAP_DIFFICULTY = "map_difficulty"
    PERSON = "person"
    NATURAL_NUMBER = "natural_number"

    @property
    def attr(self) -> str:
        """Attribute name used on Parsed (``parsed.tower_upgrade``)."""
        return self.value

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


KIND_BY_ATTR = MappingProxyType({kind.attr: kind for kind in EntityKind})


class TowerCategory(Enum):
    PRIMARY = "primary"
    MILITARY = "military"
    MAGIC = "magic"
    SUPPORT = "support"


# Each category is enumerated through the directory of its representative tower.
CATEGORY_REPRESENTATIVES = MappingProxyType({
    TowerCategory.PRIMARY: "dart_monkey",
    TowerCategory.MILITARY: "heli_pilot",
    TowerCategory.MAGIC: "wizard_monkey",
    TowerCategory.SUPPORT: "banana_farm",
})


# ---------------------------------------------------------------------------
# Directory roots of the alias corpus
# ---------------------------------------------------------------------------

TOWERS_DIR = "towers"
HEROES_DIR = "heroes"
MAPS_DIR = "maps"
MAP_DIFFICULTIES_DIR = "map_difficulties"

MAP_DIFFICULTIES = ("beginner", "intermediate", "advanced", "expert")


# ---------------------------------------------------------------------------
# Upgrade paths
# ---------------------------------------------------------------------------

ALL_PATHS = (1, 2, 3)
MAX_TIER = 5

PATH_NAMES = MappingProxyType({
    1: "top-path",
    2: "middle-path",
    3: "bottom-path",
})

PATH_BY_NAME = MappingProxyType({name: path for path, name in PATH_NAMES.items()})

# Tier 2 on every path; the tower's base line in grid displays.
BASE_UPGRADE_SET = "222"
