"""Core functionality for ghpush.

This module contains the business logic for:
- GitHub API interactions
- Local git checkout management
- Configuration and run logging
"""

from .github import ensure_repo, get_repo, create_repo
from .local import open_checkout, stage
from .workflow import run, Outcome
from .config import load_settings, Settings, Session
from .errors import GhPushError

__all__ = [
    "ensure_repo",
    "get_repo",
    "create_repo",
    "open_checkout",
    "stage",
    "run",
    "Outcome",
    "load_settings",
    "Settings",
    "Session",
    "GhPushError",
]
