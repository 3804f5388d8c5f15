"""Command-line interface for Apothecary."""

from .app import app

__all__ = ["app"]
