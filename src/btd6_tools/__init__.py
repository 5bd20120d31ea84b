"""BTD6 entity alias resolution, upgrade-set codec and cost toolkit."""

from btd6_tools.aliases import AliasGroup, AliasRegistry, load_alias_groups, normalize_token
from btd6_tools.config import Settings, configure_logging, load_settings
from btd6_tools.corpus import build_alias_groups, default_registry
from btd6_tools.costs import (
    HARD_MODE_MULTIPLIER,
    load_cost_table,
    path_upgrade_cost,
    total_upgrade_cost,
    upgrade_cost_grid,
)
from btd6_tools.data_files import load_alias_corpus, load_cost_table_file, load_registry
from btd6_tools.enums import (
    ALL_PATHS,
    CATEGORY_REPRESENTATIVES,
    PATH_NAMES,
    EntityKind,
    TowerCategory,
)
from btd6_tools.errors import (
    Btd6ToolsError,
    CorpusError,
    CostTableError,
    ErrorKind,
    InvalidArgumentError,
    InvalidUpgradeSetError,
    ParseFailure,
    UnknownTowerError,
)
from btd6_tools.maps import all_maps_from_map_difficulty, map_difficulty_of
from btd6_tools.options import (
    parse_entity,
    parse_map,
    parse_natural_number,
    parse_person,
    parse_tower,
)
from btd6_tools.parsed import Parsed, merge_all
from btd6_tools.parsers import (
    HeroParser,
    LimitedStringSetValuesParser,
    MapDifficultyParser,
    MapParser,
    Match,
    NaturalNumberParser,
    OrParser,
    PersonParser,
    TowerParser,
    TowerPathParser,
    TowerUpgradeParser,
    parse_tokens,
    parser_for,
)
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
    upgrade_set_from_path_tier,
    upgrade_set_from_tower_upgrade,
)
