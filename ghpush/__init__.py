"""Create a GitHub repository and push a local directory to it.

ghpush walks through one interactive session: it asks for credentials and a
few choices, creates the repository on GitHub if it does not exist yet, turns
the local directory into a git checkout, stages files, commits, and pushes.
The token is only ever stored in the remote URL while the push runs.

This package can be used both as a command-line tool and as a Python SDK.

Quick Start:
    ```python
    import ghpush

    repo = ghpush.ensure_repo("octocat", token, "demo", "A demo", private=True)
    checkout = ghpush.open_checkout("./demo")
    ```

CLI Usage:
    ```bash
    ghpush
    ghpush --config config.toml
    ```
"""
import os

# GitPython raises at import time when git is missing; ghpush checks and
# installs git itself before any git command runs.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

__version__ = "0.1.0"

# Re-export main functionality for easy importing
from .core import (
    ensure_repo,
    get_repo,
    create_repo,
    open_checkout,
    stage,
    run,
    Outcome,
    load_settings,
    Settings,
    Session,
    GhPushError,
)

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
