"""Command line interface for the Flair API client."""

from .main import main

__all__ = ["main"]
