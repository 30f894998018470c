"""Settings model and loaders for pastecleaner.

Responsibilities:
- Define the persisted plugin settings as a typed dataclass.
- Merge partial payloads with defaults.
- Provide loader entry points for file- and environment-based settings.

Key types:
- `CleanerSettings`: settings consulted by editor commands.
- `SettingsLoader`: static construction helpers for `CleanerSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import parse_permissive_boolean, parse_required_boolean

AUTO_CLEAN_ON_PASTE_KEY = "auto_clean_on_paste"
AUTO_CLEAN_ON_PASTE_ENV = "PASTECLEANER_AUTO_CLEAN_ON_PASTE"


@dataclass(slots=True)
class CleanerSettings:
    """Long-lived plugin settings.

    Attributes:
        auto_clean_on_paste: Whether plain-text pastes are cleaned before insertion.
    """

    auto_clean_on_paste: bool = False

    def as_payload(self) -> dict[str, object]:
        """Return a JSON/YAML-serializable payload."""

        return {AUTO_CLEAN_ON_PASTE_KEY: self.auto_clean_on_paste}


class SettingsLoader:
    """Factory helpers for constructing `CleanerSettings` values."""

    _SUPPORTED_KEYS = frozenset({AUTO_CLEAN_ON_PASTE_KEY})
    # Key name used by the editor plugin's stored data.
    _KEY_ALIASES = {"autoCleanOnPaste": AUTO_CLEAN_ON_PASTE_KEY}

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any],
        source_label: str = "settings",
        defaults: CleanerSettings | None = None,
    ) -> CleanerSettings:
        """Merge a partial payload over defaults.

        Unknown keys are ignored and `None` values keep the default.
        """

        base = defaults if defaults is not None else CleanerSettings()
        normalized = SettingsLoader._normalize_keys(payload)
        auto_clean = base.auto_clean_on_paste
        if normalized.get(AUTO_CLEAN_ON_PASTE_KEY) is not None:
            parsed = parse_permissive_boolean(normalized[AUTO_CLEAN_ON_PASTE_KEY])
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `{AUTO_CLEAN_ON_PASTE_KEY}` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            auto_clean = parsed
        return CleanerSettings(auto_clean_on_paste=auto_clean)

    @staticmethod
    def from_yaml(path: Path) -> CleanerSettings:
        """Create settings from a YAML file with strict key validation."""

        payload = SettingsLoader._parse_yaml_payload(path.read_text(encoding="utf-8"), path)
        source_label = f"YAML settings `{path}`"
        unknown = sorted(
            set(SettingsLoader._normalize_keys(payload)).difference(
                SettingsLoader._SUPPORTED_KEYS
            )
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")
        return SettingsLoader.from_mapping(payload, source_label)

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None,
        defaults: CleanerSettings | None = None,
    ) -> CleanerSettings:
        """Create settings from environment variables over optional defaults."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        base = defaults if defaults is not None else CleanerSettings()
        if AUTO_CLEAN_ON_PASTE_ENV not in env_map:
            return CleanerSettings(auto_clean_on_paste=base.auto_clean_on_paste)
        try:
            auto_clean = parse_required_boolean(
                env_map[AUTO_CLEAN_ON_PASTE_ENV], AUTO_CLEAN_ON_PASTE_ENV
            )
        except ValueError as exc:
            raise ValueError(f"Environment variable {exc}") from exc
        return CleanerSettings(auto_clean_on_paste=auto_clean)

    @staticmethod
    def _normalize_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
        """Map known key aliases onto canonical setting names."""

        return {
            SettingsLoader._KEY_ALIASES.get(str(key), str(key)): value
            for key, value in payload.items()
        }

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML settings `{path}` must contain a top-level mapping/object.")
        return payload
