
"""
CLI package for relatedness.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from relatedness.cli.app import app, main

__all__ = [
    "app",
    "main",
]
