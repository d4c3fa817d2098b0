"""Command-line interface for FileTool."""

from filetool.cli.main import main

__all__ = ["main"]
