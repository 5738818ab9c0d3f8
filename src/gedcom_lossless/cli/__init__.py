"""
CLI package for gedcom_lossless.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_lossless.cli.app import app, main

__all__ = [
    "app",
    "main",
]
