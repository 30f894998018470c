"""Whitespace cleaning for selections and fenced code blocks.

Responsibilities:
- Provide composable line rules (trailing whitespace, blank-line collapsing).
- Expose the two end-to-end transforms used by editor commands.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from .blank_lines import SmartBlankLines


class CleanerRule(Protocol):
    """Protocol for line cleaning rules."""

    def apply(self, lines: Sequence[str]) -> list[str]:
        """Apply a single cleaning transformation."""


def trim_trailing(line: str) -> str:
    """Strip trailing whitespace, leaving indentation untouched."""

    return line.rstrip()


class TrimTrailingWhitespace:
    """Strip trailing whitespace from every line."""

    def apply(self, lines: Sequence[str]) -> list[str]:
        """Apply trailing-whitespace cleanup rule."""

        return [trim_trailing(line) for line in lines]


class TextCleaner:
    """Apply a sequence of line rules to newline-separated text."""

    def __init__(self, rules: list[CleanerRule] | None = None) -> None:
        """Initialize with custom rules or default rule sequence."""

        self.rules = rules or [
            TrimTrailingWhitespace(),
            SmartBlankLines(),
        ]

    def clean_lines(self, lines: Sequence[str]) -> list[str]:
        """Apply all configured rules in order."""

        current = list(lines)
        for rule in self.rules:
            current = rule.apply(current)
        return current

    def clean(self, text: str) -> str:
        """Split on newlines, apply all rules, and rejoin."""

        return "\n".join(self.clean_lines(text.split("\n")))


_DEFAULT_CLEANER = TextCleaner()


def clean_selection(text: str) -> str:
    """Clean arbitrary text; fence lines are treated as ordinary text."""

    return _DEFAULT_CLEANER.clean(text)


def clean_block(block_text: str) -> str:
    """Clean the interior of a fenced block and keep both fence lines verbatim.

    Text with fewer than two lines is returned unchanged.
    """

    lines = block_text.split("\n")
    if len(lines) < 2:
        return block_text

    opening_fence = lines[0]
    closing_fence = lines[-1]
    interior = _DEFAULT_CLEANER.clean_lines(lines[1:-1])
    return "\n".join([opening_fence, *interior, closing_fence])
