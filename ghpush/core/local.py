"""Local git operations: initialise the checkout, stage, commit, push.

All git access goes through GitPython. Every function converts
`GitCommandError` (and filesystem errors) into the matching `GhPushError`
subclass so the CLI can report it and exit.
"""
from __future__ import annotations
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence
import logging

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

from .errors import (
    CleanupError,
    CommitError,
    FileNotFound,
    FilesystemError,
    InitError,
    NoFilesSpecified,
    PushError,
    RemoteConfigError,
    StageError,
)

log = logging.getLogger(__name__)

REMOTE = "origin"


def _redact(text: str, secret: str | None) -> str:
    return text.replace(secret, "***") if secret else text


def open_checkout(path: Path | str) -> Repo:
    """Return a git repository at `path`, creating and initialising it if needed.

    Existing history is never touched.

    Raises:
        FilesystemError: If the directory cannot be created or is a file.
        InitError: If `git init` fails.
    """
    path = Path(path).expanduser()
    if path.exists() and not path.is_dir():
        raise FilesystemError(f"{path} exists and is not a directory")
    if not path.exists():
        try:
            path.mkdir(parents=True)
        except OSError as exc:
            raise FilesystemError(f"Could not create {path}: {exc}") from exc
        log.info("Created directory %s", path)

    if (path / ".git").exists():
        try:
            repo = Repo(path)
            log.info("Using existing git repo at %s", path)
            return repo
        except (InvalidGitRepositoryError, NoSuchPathError) as exc:
            raise InitError(f"{path} has a .git entry but is not a valid repository") from exc

    try:
        repo = Repo.init(path)
    except GitCommandError as exc:
        raise InitError(f"git init failed in {path}: {exc.stderr.strip()}") from exc
    log.info("Initialised new git repo at %s", path)
    return repo


def configure_origin(repo: Repo, url: str) -> None:
    """Delete any existing `origin` remote and create a fresh one."""
    try:
        if REMOTE in repo.remotes:
            repo.delete_remote(REMOTE)
        repo.create_remote(REMOTE, url)
    except GitCommandError as exc:
        raise RemoteConfigError(f"Could not configure remote '{REMOTE}': {exc.stderr.strip()}") from exc


def origin_url(repo: Repo) -> str:
    """Return the URL currently stored for `origin`."""
    return repo.remotes[REMOTE].url


@contextmanager
def credentialed_origin(repo: Repo, authenticated: str, public: str) -> Iterator[Repo]:
    """Point `origin` at `authenticated` for the duration of the block.

    On exit `origin` is always rewritten to `public`. A failed rewrite raises
    `CleanupError` when the block finished normally; if the block is already
    failing, the rewrite failure is logged and the original error propagates.
    """
    configure_origin(repo, authenticated)
    log.info("Remote '%s' set to the authenticated URL", REMOTE)
    failed = True
    try:
        yield repo
        failed = False
    finally:
        try:
            repo.remotes[REMOTE].set_url(public)
            log.info("Remote '%s' reset to %s", REMOTE, public)
        except (GitCommandError, IndexError) as exc:
            if not failed:
                raise CleanupError(
                    f"Could not remove credentials from remote '{REMOTE}'. "
                    f"Run: git remote set-url {REMOTE} {public}"
                ) from exc
            log.error("Could not reset remote '%s' after failure: %s", REMOTE, exc)


def stage(repo: Repo, stage_all: bool, files: Sequence[str] = ()) -> None:
    """Stage everything, or exactly the listed paths.

    In explicit mode every path is checked before anything is staged, so a
    missing path leaves the index unchanged.
    """
    root = Path(repo.working_tree_dir)
    if stage_all:
        try:
            repo.git.add(A=True)
        except GitCommandError as exc:
            raise StageError(f"git add failed: {exc.stderr.strip()}") from exc
        log.info("Staged all files")
        return

    if not files:
        raise NoFilesSpecified()
    for f in files:
        if not (root / f).exists():
            raise FileNotFound(f)
    try:
        repo.git.add("--", *files)
    except GitCommandError as exc:
        raise StageError(f"git add failed: {exc.stderr.strip()}") from exc
    log.info("Staged %d path(s): %s", len(files), " ".join(files))


def has_staged_changes(repo: Repo) -> bool:
    """Return True if the index differs from the last commit."""
    if not repo.head.is_valid():
        return len(repo.index.entries) > 0
    return len(repo.index.diff("HEAD")) > 0


def commit(repo: Repo, message: str) -> str:
    """Commit the index and return the new commit's hexsha."""
    try:
        c = repo.index.commit(message)
    except (GitCommandError, ValueError, OSError) as exc:
        raise CommitError(f"git commit failed: {exc}") from exc
    log.info("Committed %s: %s", c.hexsha[:7], message)
    return c.hexsha


def push(repo: Repo, branch: str, secret: str | None = None) -> None:
    """Push the current commit to `branch` on `origin`.

    Local refs are only changed when that cannot overwrite anything: the
    current branch is renamed to `branch` if no local `branch` exists yet.
    When a local `branch` already exists and is not checked out, HEAD is
    pushed to the remote branch and every local branch is left as it was.

    `secret` is removed from any error text before it is raised.
    """
    try:
        if repo.head.is_detached:
            repo.git.push(REMOTE, f"HEAD:refs/heads/{branch}")
        elif repo.active_branch.name == branch:
            repo.git.push("-u", REMOTE, branch)
        elif branch not in repo.heads:
            repo.git.branch("-m", branch)
            repo.git.push("-u", REMOTE, branch)
        else:
            log.info("Local branch %s exists and is not checked out; pushing HEAD to it", branch)
            repo.git.push(REMOTE, f"HEAD:refs/heads/{branch}")
    except GitCommandError as exc:
        detail = _redact((exc.stderr or str(exc)).strip(), secret)
        raise PushError(f"git push to '{branch}' failed: {detail}") from None
    log.info("Pushed branch %s to %s", branch, REMOTE)
