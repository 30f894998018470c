"""Fenced code block lookup.

Responsibilities:
- Find the fenced block that encloses a given line of a document.
- Report its boundaries in host editor coordinates together with its text.
"""

from __future__ import annotations

from typing import Sequence

from ..models.datatypes import BlockSpan, Position

FENCE_MARKER = "```"


def is_fence(line: str, marker: str = FENCE_MARKER) -> bool:
    """Return whether a line opens or closes a fenced block."""

    return line.lstrip().startswith(marker)


def locate(
    document: Sequence[str], cursor_line: int, marker: str = FENCE_MARKER
) -> BlockSpan | None:
    """Return the fenced block enclosing `cursor_line`, or `None`.

    Fences pair up in document order: the first fence opens a block and the
    next fence closes it, regardless of any language tag. Containment is
    inclusive of both fence lines. An opening fence without a closing fence
    never matches.
    """

    inside = False
    start = -1

    for index, line in enumerate(document):
        if not is_fence(line, marker):
            continue
        if not inside:
            inside = True
            start = index
            continue

        inside = False
        if start <= cursor_line <= index:
            return BlockSpan(
                start=Position(line=start, ch=0),
                end=Position(line=index, ch=len(document[index])),
                text="\n".join(document[start : index + 1]),
            )

    return None


def locate_in_text(
    text: str, cursor_line: int, marker: str = FENCE_MARKER
) -> BlockSpan | None:
    """Split raw document text into lines and run `locate` over them."""

    return locate(text.split("\n"), cursor_line, marker)
