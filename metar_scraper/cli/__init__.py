"""Command-line interface and terminal output."""

from metar_scraper.cli.commands import main

__all__ = ["main"]
