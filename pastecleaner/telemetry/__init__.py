"""Command logging for deterministic auditing."""

from .logger import CommandLogger

__all__ = ["CommandLogger"]
