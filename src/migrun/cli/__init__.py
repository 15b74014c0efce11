"""Command-line interface for migrun."""

from .main import create_parser, main

__all__ = ["create_parser", "main"]
