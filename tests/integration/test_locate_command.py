"""Integration tests for the `locate` CLI command."""

from pathlib import Path

from typer.testing import CliRunner

from pastecleaner.cli import app


def _write_document(tmp_path: Path) -> Path:
    doc_path = tmp_path / "note.md"
    doc_path.write_text(
        "\n".join(["text", "```js", "code(", "", ")", "```", "more"]),
        encoding="utf-8",
    )
    return doc_path


def test_locate_command_prints_span_and_text(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["locate", str(_write_document(tmp_path)), "--line", "2"])

    assert result.exit_code == 0, result.output
    assert "1:0-5:3\n```js\ncode(\n\n)\n```\n" in result.output


def test_locate_command_fails_outside_block(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["locate", str(_write_document(tmp_path)), "-l", "6"])

    assert result.exit_code == 1
    assert "locate failed at stage `locate`: Cursor is not inside a code block (line 6)." in (
        result.output
    )


def test_locate_command_reports_offsets_without_carriage_returns(tmp_path: Path) -> None:
    doc_path = tmp_path / "note.md"
    doc_path.write_bytes(b"text\r\n```js\r\nx\r\n```\r\n")
    runner = CliRunner()

    result = runner.invoke(app, ["locate", str(doc_path), "--line", "2"])

    assert result.exit_code == 0, result.output
    assert "1:0-3:3\n```js\nx\n```\n" in result.output
