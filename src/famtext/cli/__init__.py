"""
CLI package for famtext.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from famtext.cli.app import app, main

__all__ = [
    "app",
    "main",
]
