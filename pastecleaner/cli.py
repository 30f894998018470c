"""Command-line interface for pastecleaner.

Responsibilities:
- Expose the editor commands over files and stdin.
- Resolve settings from flags, stored settings, YAML config, and environment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_block_span,
    echo_notice,
    echo_settings,
    exit_with_command_error,
)
from .cli_runtime import (
    read_input_text,
    resolve_settings,
    restore_line_ending,
    split_line_ending,
)
from .commands import NO_BLOCK_NOTICE, PasteCleanerCommands
from .editor.host import DocumentEditor
from .errors import CommandError
from .io.storage import DEFAULT_SETTINGS_PATH, SettingsStore
from .telemetry.logger import CommandLogger
from .text.code_blocks import locate_in_text

app = typer.Typer(
    name="pastecleaner",
    no_args_is_help=True,
    help="Clean trailing whitespace and redundant blank lines in pasted code.",
)


def _open_editor(text: str, line: int | None) -> DocumentEditor:
    """Build an in-memory editor with the cursor on `line` and map range errors."""

    try:
        return DocumentEditor.from_text(text, cursor_line=line or 0)
    except ValueError as exc:
        raise CommandError(
            stage="cursor",
            detail=str(exc),
            hint="Pass a 0-based `--line` inside the document.",
        ) from exc


@app.command("clean")
def clean_command(
    path: Annotated[
        Path | None,
        typer.Argument(help="File to clean. Reads stdin when omitted."),
    ] = None,
    line: Annotated[
        int | None,
        typer.Option(
            "--line",
            "-l",
            help="0-based line inside a fenced code block; cleans only that block.",
        ),
    ] = None,
    in_place: Annotated[
        bool,
        typer.Option("--in-place", help="Write the result back to the file."),
    ] = False,
) -> None:
    """Clean a whole text, or the fenced code block enclosing `--line`."""

    command_logger = CommandLogger()
    try:
        if in_place and path is None:
            raise CommandError(
                stage="output",
                detail="`--in-place` requires a file path.",
                hint="Pass a file path or drop `--in-place` to write to stdout.",
            )
        text, line_ending = split_line_ending(read_input_text(path))
        editor = _open_editor(text, line)
        if line is None:
            editor.select_all()
        outcome = PasteCleanerCommands(editor, command_logger=command_logger).clean_code_block()
        result = restore_line_ending(editor.text, line_ending)
        if in_place and path is not None and outcome.changed:
            path.write_text(result, encoding="utf-8", newline="")
    except Exception as exc:
        command_logger.log_command_failure("clean", type(exc).__name__)
        exit_with_command_error("clean", exc)

    echo_notice(outcome.notice)
    if not in_place:
        typer.echo(result, nl=False)


@app.command("locate")
def locate_command(
    path: Annotated[Path, typer.Argument(help="Markdown document to scan.")],
    line: Annotated[
        int,
        typer.Option("--line", "-l", help="0-based line to look up."),
    ],
) -> None:
    """Print the boundaries and text of the fenced block enclosing `--line`."""

    try:
        text, _ = split_line_ending(read_input_text(path))
        span = locate_in_text(text, line)
        if span is None:
            raise CommandError(
                stage="locate",
                detail=f"{NO_BLOCK_NOTICE} (line {line}).",
                hint="Pick a line between an opening and a closing fence.",
            )
    except Exception as exc:
        exit_with_command_error("locate", exc)

    echo_block_span(span)


@app.command("paste")
def paste_command(
    settings_path: Annotated[
        Path,
        typer.Option("--settings", help="Path to the stored JSON settings file."),
    ] = DEFAULT_SETTINGS_PATH,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML settings with defaults."),
    ] = None,
    auto_clean_on_paste: Annotated[
        bool | None,
        typer.Option(
            "--auto-clean-on-paste/--no-auto-clean-on-paste",
            help="Override the stored setting for this paste only.",
        ),
    ] = None,
) -> None:
    """Read a clipboard payload from stdin and print the text that gets inserted."""

    command_logger = CommandLogger()
    try:
        settings = resolve_settings(
            SettingsStore(settings_path),
            config_path=config_path,
            auto_clean_on_paste=auto_clean_on_paste,
        )
        clipboard_text = read_input_text(None)
        editor = DocumentEditor()
        commands = PasteCleanerCommands(editor, settings, command_logger=command_logger)
        if not commands.apply_paste(clipboard_text):
            editor.replace_selection(clipboard_text)
    except Exception as exc:
        command_logger.log_command_failure("paste", type(exc).__name__)
        exit_with_command_error("paste", exc)

    typer.echo(editor.text, nl=False)


@app.command("settings")
def settings_command(
    settings_path: Annotated[
        Path,
        typer.Option("--settings", help="Path to the stored JSON settings file."),
    ] = DEFAULT_SETTINGS_PATH,
    auto_clean_on_paste: Annotated[
        bool | None,
        typer.Option(
            "--auto-clean-on-paste/--no-auto-clean-on-paste",
            help="Store a new value for automatic cleaning of pasted text.",
        ),
    ] = None,
) -> None:
    """Show or update stored settings."""

    store = SettingsStore(settings_path)
    try:
        settings = store.load()
        if auto_clean_on_paste is not None:
            settings.auto_clean_on_paste = auto_clean_on_paste
            store.save(settings)
    except Exception as exc:
        exit_with_command_error(
            "settings",
            CommandError(
                stage="settings",
                detail=f"Failed to access settings file `{settings_path}`: {exc}",
                hint="Fix or delete the settings file and rerun.",
            ),
        )

    echo_settings(settings)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
