"""Tests for btd6_tools.config."""

import json
import logging

import pytest

from btd6_tools.config import Settings, configure_logging, load_settings


def _write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_settings_minimal(tmp_path):
    settings = load_settings(_write_config(tmp_path, {"log_level": "info"}))
    assert settings == Settings(log_level="INFO")


def test_load_settings_resolves_relative_paths(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _write_config(tmp_path, {
        "log_level": "debug",
        "alias_corpus_path": "data/aliases.json",
        "cost_table_path": str(tmp_path / "costs.json"),
    })
    settings = load_settings(path)
    assert settings.log_level == "DEBUG"
    assert settings.alias_corpus_path.is_absolute()
    assert settings.alias_corpus_path.name == "aliases.json"
    assert settings.alias_corpus_path.parent.name == "data"
    assert settings.cost_table_path == tmp_path / "costs.json"


def test_load_settings_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "settings").mkdir()
    (tmp_path / "settings" / "config.json").write_text('{"log_level": "WARNING"}', encoding="utf-8")
    assert load_settings().log_level == "WARNING"


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.json")


def test_load_settings_bad_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RuntimeError):
        load_settings(path)


def test_load_settings_bad_values(tmp_path):
    with pytest.raises(ValueError):
        load_settings(_write_config(tmp_path, {}))
    with pytest.raises(ValueError):
        load_settings(_write_config(tmp_path, {"log_level": "loud"}))
    with pytest.raises(ValueError):
        load_settings(_write_config(tmp_path, {"log_level": "info", "cost_table_path": 3}))
    with pytest.raises(ValueError):
        load_settings(_write_config(tmp_path, ["info"]))


def test_configure_logging_sets_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging("debug")
    assert calls[0]["level"] == logging.DEBUG
    assert "%(name)s" in calls[0]["format"]
