"""Unit tests for selection and code block cleaning transforms."""

from __future__ import annotations

import pytest

from pastecleaner.text.cleaners import (
    TextCleaner,
    TrimTrailingWhitespace,
    clean_block,
    clean_selection,
    trim_trailing,
)


def test_trim_trailing_keeps_indentation_and_is_idempotent() -> None:
    once = trim_trailing("    value \t ")

    assert once == "    value"
    assert trim_trailing(once) == once


def test_clean_selection_keeps_blank_line_from_final_newline() -> None:
    assert clean_selection("line1   \nline2\t\n") == "line1\nline2\n"


def test_clean_selection_strips_and_collapses() -> None:
    text = "def f(  \n\n    return [   \n\n        1,\n\n    ]\n\n\n\nf()  "

    assert clean_selection(text) == "def f(\n    return [\n        1,\n    ]\n\nf()"


def test_clean_selection_drops_leading_blank_lines() -> None:
    assert clean_selection("\n  \nfoo") == "foo"


def test_clean_selection_treats_fences_as_ordinary_text() -> None:
    assert clean_selection("```  \n  \ncode  \n```") == "```\n\ncode\n```"


def test_clean_selection_of_clean_text_is_unchanged() -> None:
    text = "a\n\nb"

    assert clean_selection(text) == text


def test_clean_block_preserves_fence_lines_verbatim() -> None:
    block = "```js   \ncode  \n```  "

    assert clean_block(block) == "```js   \ncode\n```  "


def test_clean_block_cleans_interior_only() -> None:
    block = "```py\ndef f(   \n\n    return 1  \n\n\n```"

    assert clean_block(block) == "```py\ndef f(\n    return 1\n\n```"


def test_clean_block_never_collapses_against_fences() -> None:
    """Blank lines right after the opening fence are judged against interior lines only."""

    assert clean_block("```\n\n\nx\n```") == "```\nx\n```"


@pytest.mark.parametrize("block", ["", "```", "```  "])
def test_clean_block_returns_short_input_unchanged(block: str) -> None:
    assert clean_block(block) == block


def test_clean_block_with_only_fences_is_unchanged() -> None:
    assert clean_block("```\n```") == "```\n```"


def test_text_cleaner_runs_custom_rules_in_order() -> None:
    cleaner = TextCleaner([TrimTrailingWhitespace()])

    assert cleaner.clean("a  \n\n\nb") == "a\n\n\nb"
    assert cleaner.clean_lines(["x ", "y\t"]) == ["x", "y"]
