"""Command-line interface for videoresolver.

- app: The Typer application object with the classify, scan and version
  commands.
- main: Console-script entry point.
"""

from videoresolver.cli.commands import app, main

__all__ = ["app", "main"]
