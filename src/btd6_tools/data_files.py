"""JSON data file loaders for the alias corpus and cost table.

Files are read once per resolved path and cached for the process lifetime.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any

from btd6_tools.aliases import AliasGroup, AliasRegistry, load_alias_groups
from btd6_tools.config import Settings
from btd6_tools.corpus import default_registry
from btd6_tools.costs import load_cost_table
from btd6_tools.errors import CorpusError

logger = logging.getLogger(__name__)

_CACHE: dict[str, Any] = {}
_CACHE_LOCK = threading.Lock()


def load_json_file(path: str | Path) -> Any:
    """Read and parse a required JSON file, cached by resolved path.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        RuntimeError: If it isn't valid JSON.
    """
    path = Path(path)
    key = str(path.resolve())
    with _CACHE_LOCK:
        if key in _CACHE:
            return _CACHE[key]
        if not path.exists():
            raise FileNotFoundError(f"required data file missing: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise RuntimeError(f"failed to parse {path}: {e}") from e
        _CACHE[key] = data
    logger.debug("Read %s", path)
    return data


def clear_cache() -> None:
    with _CACHE_LOCK:
        _CACHE.clear()


def load_alias_corpus(path: str | Path) -> list[AliasGroup]:
    """Load alias groups from a JSON list of records (or {"groups": [...]})."""
    data = load_json_file(path)
    if isinstance(data, dict):
        data = data.get("groups")
    if not isinstance(data, list):
        raise CorpusError(f"{path} must hold a list of alias records")
    groups = load_alias_groups(data)
    logger.info("Loaded %d alias groups from %s", len(groups), path)
    return groups


def load_cost_table_file(path: str | Path) -> dict[str, dict]:
    return load_cost_table(load_json_file(path))


def load_registry(settings: Settings) -> AliasRegistry:
    """Registry for the configured corpus, or the built-in one."""
    if settings.alias_corpus_path is None:
        return default_registry()
    return AliasRegistry(load_alias_corpus(settings.alias_corpus_path))
