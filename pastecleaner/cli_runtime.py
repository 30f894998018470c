"""CLI runtime resolution helpers.

This module isolates input reading and settings source precedence from the
command wiring layer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import typer

from .config import CleanerSettings, SettingsLoader
from .errors import CommandError
from .io.storage import SettingsStore


def read_input_text(path: Path | None) -> str:
    """Read command input from a file, or from stdin when no path is given."""

    if path is None:
        return typer.get_text_stream("stdin").read()
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise CommandError(
            stage="input",
            detail=f"Input file not found: `{path}`.",
            hint="Pass an existing file path or pipe text via stdin.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CommandError(
            stage="input",
            detail=f"Failed to read input file `{path}`: {exc}",
            hint="Verify the file is UTF-8 text and readable.",
        ) from exc


def split_line_ending(text: str) -> tuple[str, str]:
    """Return `text` with uniform CRLF endings folded to LF, and the ending to restore.

    Files mixing CRLF and LF are left as read so untouched lines keep their bytes.
    """

    if "\r\n" in text and text.count("\r\n") == text.count("\n"):
        return text.replace("\r\n", "\n"), "\r\n"
    return text, "\n"


def restore_line_ending(text: str, line_ending: str) -> str:
    """Undo `split_line_ending` on edited text."""

    if line_ending == "\n":
        return text
    return text.replace("\n", line_ending)


def load_yaml_settings(
    config_path: Path | None, defaults: CleanerSettings
) -> CleanerSettings:
    """Load YAML settings when requested and map failures to stage errors."""

    if config_path is None:
        return defaults

    try:
        loaded = SettingsLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="settings",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandError(
            stage="settings",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise CommandError(
            stage="settings",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc
    return loaded


def resolve_settings(
    store: SettingsStore,
    config_path: Path | None = None,
    auto_clean_on_paste: bool | None = None,
    env: Mapping[str, str] | None = None,
) -> CleanerSettings:
    """Resolve effective settings.

    Precedence for `auto_clean_on_paste` is:
    CLI flag > stored settings > YAML config > environment > default.
    """

    try:
        settings = SettingsLoader.from_env(env)
    except ValueError as exc:
        raise CommandError(
            stage="settings",
            detail=str(exc),
            hint="Use `true`/`false`, `1`/`0`, `yes`/`no`, or `on`/`off`.",
        ) from exc

    settings = load_yaml_settings(config_path, settings)

    try:
        settings = store.load(defaults=settings)
    except ValueError as exc:
        raise CommandError(
            stage="settings",
            detail=f"Invalid settings file `{store.path}`: {exc}",
            hint="Fix or delete the settings file and rerun.",
        ) from exc

    if auto_clean_on_paste is not None:
        settings.auto_clean_on_paste = auto_clean_on_paste
    return settings
