"""Command line interface for bubble-say."""

from bubble_say.cli.main import main

__all__ = ["main"]
