"""Core datatypes shared across pastecleaner modules.

Responsibilities:
- Represent immutable values exchanged between text transforms and editor commands.
- Keep document coordinates explicit and 0-based.

Key types:
- `Position`, `BlockSpan`, `PasteDecision`, and `CommandOutcome`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A boundary inside a document.

    Attributes:
        line: 0-based line index.
        ch: 0-based character offset within the line.
    """

    line: int
    ch: int


@dataclass(frozen=True, slots=True)
class BlockSpan:
    """Boundary and literal text of one fenced code block.

    Attributes:
        start: Position of the opening fence (always character 0).
        end: Position just past the last character of the closing fence line.
        text: Newline-joined document lines from `start.line` to `end.line`,
            both fence lines included.
    """

    start: Position
    end: Position
    text: str


@dataclass(frozen=True, slots=True)
class PasteDecision:
    """Outcome of intercepting one clipboard paste.

    Attributes:
        replacement: Text to insert instead of the clipboard payload, or `None`
            when the host should perform its default insertion.
    """

    replacement: str | None = None

    @classmethod
    def pass_through(cls) -> PasteDecision:
        """Let the host insert the clipboard payload unchanged."""

        return cls(replacement=None)

    @classmethod
    def replace_with(cls, text: str) -> PasteDecision:
        """Suppress default insertion in favor of `text`."""

        return cls(replacement=text)

    @property
    def passes_through(self) -> bool:
        """Return whether the host should perform its default insertion."""

        return self.replacement is None


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Result of running one editor command.

    Attributes:
        changed: Whether the command edited the document or selection.
        notice: User-facing notice shown by the host.
    """

    changed: bool
    notice: str
