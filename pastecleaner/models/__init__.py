"""Typed value objects used by text transforms and editor commands."""

from .datatypes import BlockSpan, CommandOutcome, PasteDecision, Position

__all__ = ["BlockSpan", "CommandOutcome", "PasteDecision", "Position"]
