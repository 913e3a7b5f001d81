"""Shared fixtures for the ghpush test suite."""

import pytest
from git import Repo

from ghpush.core.runlog import close_run_log


@pytest.fixture(autouse=True)
def git_identity(monkeypatch):
    """Give git a committer identity independent of the host config."""
    for var, value in {
        "GIT_AUTHOR_NAME": "Test User",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test User",
        "GIT_COMMITTER_EMAIL": "test@example.com",
    }.items():
        monkeypatch.setenv(var, value)
    yield
    close_run_log()


@pytest.fixture
def checkout(tmp_path):
    """A fresh git repository with two untracked files."""
    path = tmp_path / "work"
    path.mkdir()
    (path / "a.txt").write_text("a\n")
    (path / "b.txt").write_text("b\n")
    return Repo.init(path)


@pytest.fixture
def bare_remote(tmp_path):
    """A bare repository that stands in for GitHub when pushing."""
    return Repo.init(tmp_path / "remote.git", bare=True)
