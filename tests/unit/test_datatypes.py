"""Unit tests for command value objects."""

from pastecleaner.models.datatypes import PasteDecision


def test_paste_decision_constructors_set_passes_through() -> None:
    assert PasteDecision.pass_through().passes_through is True
    assert PasteDecision.replace_with("x").passes_through is False
    assert PasteDecision.replace_with("").passes_through is False
    assert PasteDecision.passes_through.__doc__
