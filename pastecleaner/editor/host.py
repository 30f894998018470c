"""Host editor interface and an in-memory implementation.

Responsibilities:
- Describe the editor capabilities editor commands depend on.
- Provide a line-based document editor used by the CLI and tests.

Key types:
- `EditorHost`: protocol for cursor, selection, range replacement, and notices.
- `DocumentEditor`: list-of-lines editor with a cursor and optional selection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..models.datatypes import Position


class EditorHost(Protocol):
    """Capabilities a host editor exposes to editor commands."""

    def get_cursor(self) -> Position:
        """Return the current cursor position."""

    def get_value(self) -> str:
        """Return the full document text."""

    def get_selection(self) -> str:
        """Return the selected text, or an empty string without selection."""

    def replace_selection(self, text: str) -> None:
        """Replace the selection (or insert at the cursor) with `text`."""

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the document span `start..end` with `text`."""

    def set_selection(self, start: Position, end: Position) -> None:
        """Select the document span `start..end`."""

    def notify(self, message: str) -> None:
        """Show a short transient notice."""


@dataclass(slots=True)
class DocumentEditor:
    """In-memory editor over a list of lines.

    The selection runs from `anchor` to `cursor` when `anchor` is set; the two
    positions may be in either order.
    """

    lines: list[str] = field(default_factory=lambda: [""])
    cursor: Position = field(default_factory=lambda: Position(line=0, ch=0))
    anchor: Position | None = None
    notices: list[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, cursor_line: int = 0) -> DocumentEditor:
        """Create an editor over `text` with the cursor at the start of a line."""

        editor = cls(lines=text.split("\n"))
        editor.cursor = editor._checked(Position(line=cursor_line, ch=0))
        return editor

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def get_cursor(self) -> Position:
        return self.cursor

    def get_value(self) -> str:
        return self.text

    def get_selection(self) -> str:
        if self.anchor is None:
            return ""
        start, end = self._ordered(self.anchor, self.cursor)
        return self.text[self._offset(start) : self._offset(end)]

    def replace_selection(self, text: str) -> None:
        if self.anchor is None:
            self.replace_range(text, self.cursor, self.cursor)
            return
        start, end = self._ordered(self.anchor, self.cursor)
        self.replace_range(text, start, end)

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        start, end = self._ordered(self._checked(start), self._checked(end))
        current = self.text
        start_offset = self._offset(start)
        updated = current[:start_offset] + text + current[self._offset(end) :]
        self.lines = updated.split("\n")
        self.anchor = None
        self.cursor = self._position_at(start_offset + len(text))

    def set_selection(self, start: Position, end: Position) -> None:
        self.anchor = self._checked(start)
        self.cursor = self._checked(end)

    def select_all(self) -> None:
        """Select the whole document."""

        last = len(self.lines) - 1
        self.set_selection(Position(line=0, ch=0), Position(line=last, ch=len(self.lines[last])))

    def notify(self, message: str) -> None:
        self.notices.append(message)

    def _checked(self, position: Position) -> Position:
        """Validate that a position lies inside the document."""

        if not 0 <= position.line < len(self.lines):
            raise ValueError(
                f"Line {position.line} is outside the document (0-{len(self.lines) - 1})."
            )
        if not 0 <= position.ch <= len(self.lines[position.line]):
            raise ValueError(
                f"Character {position.ch} is outside line {position.line}."
            )
        return position

    def _offset(self, position: Position) -> int:
        """Convert a position into an offset within `text`."""

        return sum(len(line) + 1 for line in self.lines[: position.line]) + position.ch

    def _position_at(self, offset: int) -> Position:
        """Convert an offset within `text` back into a position."""

        remaining = offset
        for index, line in enumerate(self.lines):
            if remaining <= len(line):
                return Position(line=index, ch=remaining)
            remaining -= len(line) + 1
        last = len(self.lines) - 1
        return Position(line=last, ch=len(self.lines[last]))

    @staticmethod
    def _ordered(first: Position, second: Position) -> tuple[Position, Position]:
        if (first.line, first.ch) <= (second.line, second.ch):
            return first, second
        return second, first
