"""
extkit CLI Package
==================

Command-line interface for the formatting helpers.
"""

from extkit.cli.main import cli, main

__all__ = ["cli", "main"]
