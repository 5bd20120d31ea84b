"""Upgrade cost calculation from a tower cost table.

The cost table maps tower canonicals to their base cost and per-path tier
costs, tier 1 first:

    {"wizard_monkey": {"cost": 375, "upgrades": {"1": [150, 450, 1300, 10900, 32000],
                                                 "2": [...], "3": [...]}}}

Hard mode scales each upgrade by 1.08, rounded half up, per upgrade.
"""

import logging
import math
from typing import Mapping

import numpy as np
import pandas as pd

from btd6_tools.enums import ALL_PATHS, MAX_TIER
from btd6_tools.errors import (
    CostTableError,
    InvalidArgumentError,
    InvalidUpgradeSetError,
    UnknownTowerError,
)
from btd6_tools.towers import (
    cross_path_tier_from_upgrade_set,
    is_valid_upgrade_set,
    path_tier_from_upgrade_set,
)

logger = logging.getLogger(__name__)

HARD_MODE_MULTIPLIER = 1.08


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _scaled(cost: int, hard_mode: bool) -> int:
    return round_half_up(cost * HARD_MODE_MULTIPLIER) if hard_mode else int(cost)


# ---------------------------------------------------------------------------
# Table loading
# ---------------------------------------------------------------------------

def load_cost_table(data: Mapping) -> dict[str, dict]:
    """Validate and normalize a raw cost table.

    Returns:
        {tower: {"cost": int, "upgrades": {"1": [int, ...], "2": [...], "3": [...]}}}

    Raises:
        CostTableError: If an entry is missing its cost or a path, or holds
            non-integer costs or more than 5 tiers.
    """
    if not isinstance(data, Mapping):
        raise CostTableError("cost table must be an object of {tower: {cost, upgrades}}")
    table: dict[str, dict] = {}
    for tower, entry in data.items():
        if not isinstance(entry, Mapping) or "cost" not in entry or "upgrades" not in entry:
            raise CostTableError(f"cost table entry {tower!r} needs 'cost' and 'upgrades'")
        try:
            base = int(entry["cost"])
        except (TypeError, ValueError):
            raise CostTableError(f"cost table entry {tower!r} has a non-integer cost")
        upgrades = entry["upgrades"]
        if not isinstance(upgrades, Mapping):
            raise CostTableError(f"cost table entry {tower!r} upgrades must be an object")
        paths: dict[str, list[int]] = {}
        for path in ALL_PATHS:
            costs = upgrades.get(str(path), upgrades.get(path))
            if not isinstance(costs, list) or len(costs) > MAX_TIER:
                raise CostTableError(f"cost table entry {tower!r} path {path} must list up to {MAX_TIER} costs")
            try:
                paths[str(path)] = [int(c) for c in costs]
            except (TypeError, ValueError):
                raise CostTableError(f"cost table entry {tower!r} path {path} has non-integer costs")
        table[str(tower).lower()] = {"cost": base, "upgrades": paths}
    logger.info("Loaded cost table for %d towers", len(table))
    return table


def _entry(cost_table: Mapping, tower: str) -> Mapping:
    # Loaded tables are keyed by lower-cased tower canonicals.
    entry = cost_table.get(str(tower).lower())
    if entry is None:
        raise UnknownTowerError(f"No costs for tower {tower!r}")
    return entry


def _tier_costs(entry: Mapping, tower: str, path: int, tier: int) -> list[int]:
    upgrades = entry["upgrades"]
    costs = upgrades.get(str(path), upgrades.get(path, []))
    if len(costs) < tier:
        raise CostTableError(f"{tower!r} path {path} has no cost for tier {tier}")
    return list(costs[:tier])


# ---------------------------------------------------------------------------
# Costs
# ---------------------------------------------------------------------------

def path_upgrade_cost(
    cost_table: Mapping,
    tower: str,
    path: int,
    tier: int,
    hard_mode: bool = False,
) -> int:
    """Total cost of buying tiers 1..tier on one path (base cost excluded)."""
    if path not in ALL_PATHS:
        raise InvalidArgumentError(f"path must be 1, 2, or 3, got {path!r}")
    if not 0 <= tier <= MAX_TIER:
        raise InvalidArgumentError(f"tier must be between 0 and 5 inclusive, got {tier!r}")
    entry = _entry(cost_table, tower)
    return sum(_scaled(c, hard_mode) for c in _tier_costs(entry, tower, path, tier))


def total_upgrade_cost(
    cost_table: Mapping,
    tower: str,
    upgrade_set: str,
    hard_mode: bool = False,
) -> int:
    """Base cost plus every upgrade bought on the main path and the cross path.

    Args:
        cost_table: Cost table keyed by tower canonical.
        tower: Tower canonical, e.g. "wizard_monkey".
        upgrade_set: e.g. "302".
        hard_mode: Scale each upgrade by 1.08 (rounded half up). The base
            cost is not scaled.

    Raises:
        InvalidUpgradeSetError: If upgrade_set isn't valid (checked first).
        UnknownTowerError: If tower isn't in the cost table.
    """
    if not is_valid_upgrade_set(upgrade_set):
        raise InvalidUpgradeSetError(f"{upgrade_set!r} is not a valid upgrade set")
    entry = _entry(cost_table, tower)

    path, tier = path_tier_from_upgrade_set(upgrade_set)
    cross_path, cross_tier = cross_path_tier_from_upgrade_set(upgrade_set)

    total = int(entry["cost"])
    total += sum(_scaled(c, hard_mode) for c in _tier_costs(entry, tower, path, tier))
    total += sum(_scaled(c, hard_mode) for c in _tier_costs(entry, tower, cross_path, cross_tier))
    return total


def upgrade_cost_grid(cost_table: Mapping, tower: str, hard_mode: bool = False) -> pd.DataFrame:
    """Cumulative cost of each single-path upgrade, base cost included.

    Returns:
        DataFrame indexed by tier (0-5) with one column per path (1-3).
        Tiers missing from the table are NaN.
    """
    entry = _entry(cost_table, tower)
    base = int(entry["cost"])
    columns = {}
    for path in ALL_PATHS:
        upgrades = entry["upgrades"]
        costs = upgrades.get(str(path), upgrades.get(path, []))
        scaled = np.full(MAX_TIER, np.nan)
        scaled[:len(costs)] = [_scaled(c, hard_mode) for c in costs]
        columns[path] = np.concatenate([[0.0], np.cumsum(scaled)]) + base

    grid = pd.DataFrame(columns, index=pd.RangeIndex(0, MAX_TIER + 1, name="tier"))
    grid.columns.name = "path"
    if not grid.isna().any().any():
        grid = grid.astype(int)
    return grid
