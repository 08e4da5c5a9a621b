"""Command-line interface for MAEC packages."""

from .app import app

__all__ = ["app"]
