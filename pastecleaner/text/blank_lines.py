"""Blank-line collapsing for pasted and fenced code.

Responsibilities:
- Drop blank lines directly after an opening bracket or before a closing one.
- Collapse runs of blank lines down to a single blank line.

Bracket checks look only at the last/first character of the stripped
neighbor lines; brackets inside strings or comments are not special-cased.
"""

from __future__ import annotations

from typing import Sequence

OPENING_BRACKETS = ("(", "[", "{")
CLOSING_BRACKETS = (")", "]", "}")


def is_blank(line: str) -> bool:
    """Return whether a line has no content besides whitespace."""

    return line.strip() == ""


def normalize(lines: Sequence[str]) -> list[str]:
    """Return `lines` with redundant blank lines removed.

    A blank line is dropped when the previously emitted line ends with an
    opening bracket, when the next input line starts with a closing bracket,
    or when the previously emitted line is itself blank (or nothing has been
    emitted yet). Checks run in that order.
    """

    result: list[str] = []

    for index, line in enumerate(lines):
        if not is_blank(line):
            result.append(line)
            continue

        previous = result[-1].strip() if result else ""
        following = lines[index + 1].strip() if index + 1 < len(lines) else ""

        if previous.endswith(OPENING_BRACKETS):
            continue
        if following.startswith(CLOSING_BRACKETS):
            continue
        if previous == "":
            continue

        result.append(line)

    return result


class SmartBlankLines:
    """Cleaner rule applying `normalize` to a sequence of lines."""

    def apply(self, lines: Sequence[str]) -> list[str]:
        """Apply blank-line collapsing."""

        return normalize(lines)
