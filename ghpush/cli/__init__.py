"""Command-line interface for ghpush.

This module provides the interactive CLI that creates a repository and pushes to it.
"""

from .main import main

__all__ = ["main"]
