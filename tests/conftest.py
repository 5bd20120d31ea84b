"""Shared pytest fixtures for btd6-tools tests."""

import pytest

from btd6_tools.aliases import AliasGroup, AliasRegistry
from btd6_tools.corpus import default_registry
from btd6_tools.data_files import clear_cache

# Medium-difficulty prices; tier 1 first.
COST_TABLE = {
    "wizard_monkey": {
        "cost": 375,
        "upgrades": {
            "1": [150, 450, 1300, 10900, 32000],
            "2": [300, 900, 3000, 4000, 54000],
            "3": [300, 300, 1500, 2800, 26500],
        },
    },
    "dart_monkey": {
        "cost": 200,
        "upgrades": {
            "1": [140, 200, 320, 1800, 15000],
            "2": [100, 190, 400, 8000, 45000],
            "3": [90, 200, 575, 2050, 21500],
        },
    },
}


@pytest.fixture(scope="session")
def registry():
    """Registry over the built-in corpus."""
    return default_registry()


@pytest.fixture(scope="session")
def overlap_registry():
    """Tiny corpus where "ben" is both a tower and a hero canonical."""
    return AliasRegistry([
        AliasGroup("ben", ("benny",), ("towers", "primary")),
        AliasGroup("ben#300", ("big_ben",), ("towers", "primary")),
        AliasGroup("ben", ("benjamin",), ("heroes",)),
        AliasGroup("quincy", ("quincey",), ("heroes",)),
    ])


@pytest.fixture
def cost_table():
    return COST_TABLE


@pytest.fixture(autouse=True)
def _fresh_data_file_cache():
    clear_cache()
    yield
    clear_cache()
