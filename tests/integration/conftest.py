"""Integration-test fixtures for deterministic settings resolution."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep ambient env values and stored settings out of CLI tests."""

    monkeypatch.delenv("PASTECLEANER_AUTO_CLEAN_ON_PASTE", raising=False)
    monkeypatch.chdir(tmp_path)
