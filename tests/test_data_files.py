"""Tests for btd6_tools.data_files."""

import json

import pytest

from btd6_tools.config import Settings
from btd6_tools.corpus import default_registry
from btd6_tools.costs import total_upgrade_cost
from btd6_tools.data_files import (
    load_alias_corpus,
    load_cost_table_file,
    load_json_file,
    load_registry,
)
from btd6_tools.errors import CorpusError

CORPUS = [
    {"canonical": "dart_monkey", "aliases": ["dart"], "directory": "towers/primary"},
    {"canonical": "dart_monkey#300", "aliases": ["Spike-o-pult"], "directory": "towers/primary"},
    {"canonical": "quincy", "aliases": ["quincey"], "directory": "heroes"},
]


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_json_file_is_cached(tmp_path):
    path = _write(tmp_path / "data.json", {"a": 1})
    first = load_json_file(path)
    _write(path, {"a": 2})
    assert load_json_file(path) is first


def test_load_json_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json_file(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("[", encoding="utf-8")
    with pytest.raises(RuntimeError):
        load_json_file(bad)


def test_load_alias_corpus(tmp_path):
    groups = load_alias_corpus(_write(tmp_path / "aliases.json", CORPUS))
    assert [g.canonical for g in groups] == ["dart_monkey", "dart_monkey#300", "quincy"]
    assert groups[1].aliases == ("spike_o_pult",)


def test_load_alias_corpus_wrapped(tmp_path):
    groups = load_alias_corpus(_write(tmp_path / "aliases.json", {"groups": CORPUS}))
    assert len(groups) == 3


def test_load_alias_corpus_rejects_other_shapes(tmp_path):
    with pytest.raises(CorpusError):
        load_alias_corpus(_write(tmp_path / "aliases.json", {"towers": CORPUS}))


def test_load_registry_from_file(tmp_path):
    path = _write(tmp_path / "aliases.json", CORPUS)
    registry = load_registry(Settings(log_level="INFO", alias_corpus_path=path))
    assert registry.canonical_form_of("spike-o-pult") == "dart_monkey#300"
    assert registry.all_towers() == ("dart_monkey",)


def test_load_registry_defaults_to_built_in():
    assert load_registry(Settings(log_level="INFO")) is default_registry()


def test_load_cost_table_file(tmp_path, cost_table):
    table = load_cost_table_file(_write(tmp_path / "costs.json", cost_table))
    assert total_upgrade_cost(table, "wizard_monkey", "302") == 2875
