"""Error taxonomy for ghpush.

Every failure the tool can signal is a subclass of `GhPushError`. Errors are
fatal: the CLI catches them in one place, prints the message, logs it to the
run log and exits with status 1. There are no retries and no rollback.
"""
from __future__ import annotations


class GhPushError(Exception):
    """Base class for every failure ghpush reports to the user."""


class DependencyInstallFailed(GhPushError):
    """A required external tool is missing and could not be installed."""


class EmptyInput(GhPushError):
    """A required prompt was answered with an empty string."""

    def __init__(self, field: str):
        super().__init__(f"{field} cannot be empty")
        self.field = field


class NoFilesSpecified(EmptyInput):
    """Explicit staging was chosen but no paths were given."""

    def __init__(self):
        super().__init__("File list")


class RepoLookupFailed(GhPushError):
    """The existence check against the GitHub API did not succeed."""


class RepoCreationFailed(GhPushError):
    """The GitHub API did not confirm creation of the repository."""


class FilesystemError(GhPushError):
    """The local working directory could not be created or used."""


class InitError(GhPushError):
    """`git init` failed for the local working directory."""


class RemoteConfigError(GhPushError):
    """The `origin` remote could not be configured."""


class FileNotFound(GhPushError):
    """A path named for explicit staging does not exist."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class StageError(GhPushError):
    """`git add` failed for paths that exist."""


class CommitError(GhPushError):
    """`git commit` failed."""


class PushError(GhPushError):
    """`git push` failed (credentials or network)."""


class CleanupError(GhPushError):
    """The origin URL could not be rewritten to its token-free form."""


class UnexpectedTermination(GhPushError):
    """The run ended abnormally outside the known failure kinds."""
