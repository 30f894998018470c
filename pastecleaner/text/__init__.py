"""Pure text transforms for whitespace cleanup.

This package provides blank-line collapsing, fenced code block lookup, and
the selection/block cleaning transforms built on top of them.
"""

from .blank_lines import SmartBlankLines, normalize
from .cleaners import (
    TextCleaner,
    TrimTrailingWhitespace,
    clean_block,
    clean_selection,
    trim_trailing,
)
from .code_blocks import FENCE_MARKER, locate, locate_in_text

__all__ = [
    "FENCE_MARKER",
    "SmartBlankLines",
    "TextCleaner",
    "TrimTrailingWhitespace",
    "clean_block",
    "clean_selection",
    "locate",
    "locate_in_text",
    "normalize",
    "trim_trailing",
]
