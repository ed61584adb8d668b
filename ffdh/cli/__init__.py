"""Command line interface for ffdh"""

from .main import cli, main

__all__ = ["cli", "main"]
