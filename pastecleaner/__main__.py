"""Module entrypoint for running pastecleaner as ``python -m pastecleaner``."""

from __future__ import annotations

from pastecleaner.cli import main


if __name__ == "__main__":
    main()
