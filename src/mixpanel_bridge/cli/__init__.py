"""Command-line interface for the analytics bridge."""

from .app import app

__all__ = ["app"]
