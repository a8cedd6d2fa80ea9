"""Tests for settings loading and the saved variables file."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from helloworld_core.models import SavedVariables
from helloworld_app.services.saved_variables import load_saved_variables, save_saved_variables
from helloworld_app.services.settings import DEFAULTS, load_settings, saved_variables_path


def test_missing_file_is_first_run(tmp_path: Path) -> None:
    db = load_saved_variables(tmp_path / "nope.json")
    assert db.messages == []


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "SavedVariables" / "HelloWorld.json"
    save_saved_variables(path, SavedVariables(messages=["a", "b", "a"]))

    assert json.loads(path.read_text()) == {"HelloWorldDB": {"messages": ["a", "b", "a"]}}
    assert load_saved_variables(path).messages == ["a", "b", "a"]
    assert not path.with_name(path.name + ".tmp").exists()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '"text"',
        '{"Other": {"messages": ["x"]}}',
        '{"HelloWorldDB": []}',
        '{"HelloWorldDB": {}}',
        '{"HelloWorldDB": {"messages": "abc"}}',
    ],
)
def test_malformed_file_loads_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "HelloWorld.json"
    path.write_text(content)
    assert load_saved_variables(path).messages == []


def test_bad_entries_are_cleaned(tmp_path: Path) -> None:
    path = tmp_path / "HelloWorld.json"
    path.write_text('{"HelloWorldDB": {"messages": ["ok", null, 3]}}')
    assert load_saved_variables(path).messages == ["ok", "3"]


def test_settings_defaults_when_missing(tmp_path: Path) -> None:
    s = load_settings(tmp_path / "settings.yaml")
    assert s == DEFAULTS
    assert s is not DEFAULTS


def test_settings_override_and_paths(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(f"workspace_path: {tmp_path / 'ws'}\nslash_aliases: [/notes]\nextra: 1\n")
    s = load_settings(path)
    assert s["slash_aliases"] == ["/notes"]
    assert s["extra"] == 1
    assert s["log_level"] == "INFO"
    assert saved_variables_path(s) == tmp_path / "ws" / "SavedVariables" / "HelloWorld.json"


def test_settings_non_mapping_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n")
    assert load_settings(path) == DEFAULTS
