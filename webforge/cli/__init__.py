"""Command-line interface for webforge."""

from webforge.cli.main import app, main

__all__ = ["app", "main"]
