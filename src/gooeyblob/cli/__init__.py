"""Command-line interface for gooeyblob.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Single blob rendering from JSON or TEXT:WIDTH specs
- Parallel batch rendering with a progress bar
- Decorative organic presets
- Path data inspection
"""

from gooeyblob.cli.app import cli, main

__all__ = ["cli", "main"]
