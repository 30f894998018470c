"""Settings persistence adapters."""

from .storage import DEFAULT_SETTINGS_PATH, SettingsStore

__all__ = ["DEFAULT_SETTINGS_PATH", "SettingsStore"]
