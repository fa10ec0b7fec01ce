"""CLI package for findr.

This package contains the Typer application.
"""

from findr.cli.main import app

__all__ = ["app"]
