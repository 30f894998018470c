"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
notices, located block spans, and settings summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .config import CleanerSettings
from .errors import CommandError
from .models.datatypes import BlockSpan


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_notice(notice: str) -> None:
    """Print a host-style transient notice to stderr."""

    typer.secho(notice, fg=typer.colors.CYAN, err=True)


def echo_block_span(span: BlockSpan) -> None:
    """Print block boundaries followed by the block text."""

    typer.echo(f"{span.start.line}:{span.start.ch}-{span.end.line}:{span.end.ch}")
    typer.echo(span.text)


def echo_settings(settings: CleanerSettings) -> None:
    """Print current settings values."""

    value = "true" if settings.auto_clean_on_paste else "false"
    typer.echo(f"auto_clean_on_paste: {value}")
