"""Top-level package for pastecleaner.

This package cleans trailing whitespace and redundant blank lines in pasted
text and fenced code blocks. Editor commands live in `PasteCleanerCommands`;
the pure transforms are in `pastecleaner.text`.
"""

from .commands import PasteCleanerCommands
from .text import clean_block, clean_selection, locate, normalize

__all__ = [
    "PasteCleanerCommands",
    "__version__",
    "clean_block",
    "clean_selection",
    "locate",
    "normalize",
]

__version__ = "0.1.0"
