"""Settings storage.

Responsibilities:
- Load persisted settings from a JSON file, merged with defaults.
- Save settings explicitly while preserving keys this version does not know.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..config import CleanerSettings, SettingsLoader

DEFAULT_SETTINGS_PATH = Path(".pastecleaner") / "data.json"


class SettingsStore:
    """Filesystem-backed JSON settings store."""

    def __init__(self, path: Path) -> None:
        """Initialize the store with the settings file path."""

        self.path = path

    def exists(self) -> bool:
        """Return whether the settings file exists."""

        return self.path.exists()

    def load_payload(self) -> dict[str, Any]:
        """Load the raw stored payload, or an empty mapping when missing."""

        if not self.path.exists():
            return {}
        payload = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        if not isinstance(payload, dict):
            raise ValueError(f"Settings file `{self.path}` must contain a JSON object.")
        return payload

    def load(self, defaults: CleanerSettings | None = None) -> CleanerSettings:
        """Load settings, falling back to defaults for missing values."""

        return SettingsLoader.from_mapping(
            self.load_payload(),
            source_label=f"Settings file `{self.path}`",
            defaults=defaults,
        )

    def save(self, settings: CleanerSettings) -> Path:
        """Save settings and return the final path."""

        payload = self.load_payload() if self.path.exists() else {}
        payload.pop("autoCleanOnPaste", None)
        payload.update(settings.as_payload())
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True),
            encoding="utf-8",
        )
        return self.path
