"""Shared pytest fixtures for the full pastecleaner test suite."""

from __future__ import annotations

import pytest

from pastecleaner.editor.host import DocumentEditor


@pytest.fixture
def fenced_document() -> DocumentEditor:
    """Provide a document with one dirty fenced block, cursor inside the block."""

    return DocumentEditor.from_text(
        "# Notes\n\n```python\ndef f(  \n\n    return 1\t\n\n\n```\n\ntail  ",
        cursor_line=4,
    )
