"""Command-line interface for stencilbridge.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG or raster input (raster input is traced with potrace)
- Verbose/quiet output modes
- Island listing and dry-run modes
- Detailed error reporting
"""

from stencilbridge.cli.app import cli, main

__all__ = ["cli", "main"]
