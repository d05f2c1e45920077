"""Command-line interface for unistroke.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Train templates from recorded stroke files
- Match strokes against a stored template set
- List stored templates
- Verbose/quiet output modes
"""

from unistroke.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
