"""Unit tests for JSON settings persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pastecleaner.config import CleanerSettings
from pastecleaner.io.storage import SettingsStore


def test_missing_settings_file_loads_defaults(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "data.json")

    assert not store.exists()
    assert store.load() == CleanerSettings()


def test_save_then_load_roundtrip(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "nested" / "data.json")

    path = store.save(CleanerSettings(auto_clean_on_paste=True))

    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == {"auto_clean_on_paste": True}
    assert store.load().auto_clean_on_paste is True


def test_save_preserves_unknown_keys_and_replaces_plugin_key(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"theme": "dark", "autoCleanOnPaste": True}), encoding="utf-8")
    store = SettingsStore(path)

    assert store.load().auto_clean_on_paste is True
    store.save(CleanerSettings(auto_clean_on_paste=False))

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "auto_clean_on_paste": False,
        "theme": "dark",
    }


def test_empty_settings_file_loads_defaults(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("", encoding="utf-8")

    assert SettingsStore(path).load() == CleanerSettings()


def test_non_object_settings_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("[true]", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a JSON object"):
        SettingsStore(path).load()


def test_null_stored_value_loads_defaults(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"autoCleanOnPaste": None}), encoding="utf-8")

    assert SettingsStore(path).load() == CleanerSettings()
