"""Structured command logging utilities.

Responsibilities:
- Emit concise, deterministic command-level logs through `loguru`.
- Never include document or clipboard content in log lines.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    if isinstance(value, bool):
        return "true" if value else "false"
    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class CommandLogger:
    """Emit deterministic event logs for editor command activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, command: str, **context: object) -> None:
        """Emit one structured command log line."""

        line = f"[command] level={level} command={command} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_command_start(self, command: str) -> None:
        """Emit a command-start event."""

        self._emit("INFO", "start", command)

    def log_command_outcome(self, command: str, changed: bool, **context: object) -> None:
        """Emit a command-outcome event."""

        self._emit("INFO", "complete", command, changed=changed, **context)

    def log_command_failure(self, command: str, error_type: str) -> None:
        """Emit a command-failure event without sensitive payload details."""

        self._emit("ERROR", "failure", command, error_type=error_type)
