# src/kastenator/cli/__init__.py
"""CLI package for Kastenator.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from kastenator.cli.app import app, console

__all__ = ["app", "console"]
