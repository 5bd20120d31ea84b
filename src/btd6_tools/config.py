"""Settings and logging setup.

Settings come from a single JSON file (``settings/config.json`` by default):

    {"log_level": "info",
     "alias_corpus_path": "settings/aliases.json",
     "cost_table_path": "settings/costs.json"}

Only ``log_level`` is required. Without ``alias_corpus_path`` the built-in
corpus is used; without ``cost_table_path`` no cost table is loaded.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("settings/config.json")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    alias_corpus_path: Path | None = None
    cost_table_path: Path | None = None


def _optional_path(data: dict, key: str, base: Path) -> Path | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string path")
    path = Path(value)
    return path if path.is_absolute() else base / path


def load_settings(path: str | Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from a JSON config file.

    Relative data paths are resolved against the current directory, like
    the config path itself.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        RuntimeError: If it isn't valid JSON.
        ValueError: If a value is missing or has the wrong type.
    """
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(f"{cfg_path} not found")
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RuntimeError(f"failed to parse {cfg_path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{cfg_path} must contain a JSON object")

    if "log_level" not in data:
        raise ValueError(f"{cfg_path} missing required key: log_level")
    log_level = str(data["log_level"]).upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"unknown log_level {data['log_level']!r}")

    base = Path.cwd()
    return Settings(
        log_level=log_level,
        alias_corpus_path=_optional_path(data, "alias_corpus_path", base),
        cost_table_path=_optional_path(data, "cost_table_path", base),
    )


def configure_logging(log_level: str) -> None:
    """Configure the root logger with a concise format."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
