"""Command-line interface for featureline.

This module provides the CLI using Typer with rich output for
inspecting features built by the curve engine.

Key features:
- Feature construction from command-line attributes
- Segment appending and control point edits by index
- Geometry summary and point dumps
"""

from featureline.cli.app import cli, main

__all__ = ["cli", "main"]
