"""GitHub API client utilities for repository lookup and creation.

This module provides synchronous functions that talk to the GitHub REST API
with basic authentication (username + personal access token). Only two calls
are made: an existence check against `/repos/{owner}/{repo}` and a creation
request against `/user/repos`.

The token needs the `repo` scope to create private repositories and the
`public_repo` scope (at least) for public ones.

Example:
    ```python
    from ghpush.core.github import ensure_repo

    repo = ensure_repo("octocat", token, "Hello-World", "My first repo", private=False)
    print(repo.html_url, repo.created)
    ```
"""
from __future__ import annotations
from typing import Dict, Optional
import logging

import httpx
from pydantic import BaseModel

from .config import Settings
from .errors import RepoCreationFailed, RepoLookupFailed

log = logging.getLogger(__name__)


class RemoteRepo(BaseModel):
    """The parts of a GitHub repository payload ghpush cares about."""

    name: str
    full_name: str = ""
    html_url: str = ""
    private: bool = False
    created: bool = False


def _headers() -> Dict[str, str]:
    """Construct HTTP headers for GitHub API requests."""
    return {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
    }


def _client(username: str, token: str, settings: Settings) -> httpx.Client:
    return httpx.Client(
        timeout=settings.timeout,
        headers=_headers(),
        auth=(username, token),
    )


def public_url(host: str, username: str, repo: str) -> str:
    """Return the token-free HTTPS clone URL."""
    return f"https://{host}/{username}/{repo}.git"


def authenticated_url(host: str, username: str, token: str, repo: str) -> str:
    """Return the HTTPS URL with the token embedded, used only while pushing."""
    return f"https://{username}:{token}@{host}/{username}/{repo}.git"


def get_repo(username: str, token: str, name: str, settings: Settings | None = None) -> Optional[RemoteRepo]:
    """Look up `username/name` on GitHub.

    Args:
        username: Account that owns the repository.
        token: Personal access token for basic auth.
        name: Repository name.
        settings: Tool settings (API base URL, timeout).

    Returns:
        The repository, or None when GitHub answers 404.

    Raises:
        RepoLookupFailed: On any status other than 200 or 404, or a network error.
    """
    s = settings or Settings()
    try:
        with _client(username, token, s) as client:
            r = client.get(f"{s.api_url}/repos/{username}/{name}")
    except httpx.HTTPError as exc:
        raise RepoLookupFailed(f"Could not reach GitHub: {exc}") from exc

    if r.status_code == 404:
        log.info("Repository %s/%s not found", username, name)
        return None
    if r.status_code == 401:
        raise RepoLookupFailed("GitHub rejected the credentials (401). Check the username and token.")
    if r.status_code != 200:
        raise RepoLookupFailed(f"Unexpected response from GitHub ({r.status_code}) while looking up {username}/{name}")

    data = r.json()
    log.info("Repository %s/%s already exists", username, name)
    return RemoteRepo(
        name=data.get("name", name),
        full_name=data.get("full_name", f"{username}/{name}"),
        html_url=data.get("html_url", ""),
        private=bool(data.get("private", False)),
        created=False,
    )


def create_repo(
        username: str,
        token: str,
        name: str,
        description: str = "",
        private: bool = False,
        settings: Settings | None = None) -> RemoteRepo:
    """Create a repository for the authenticated user.

    A response without a `created_at` field is treated as a failure, whatever
    its status code.

    Raises:
        RepoCreationFailed: When GitHub does not confirm the creation.
    """
    s = settings or Settings()
    payload = {"name": name, "description": description, "private": private}
    try:
        with _client(username, token, s) as client:
            r = client.post(f"{s.api_url}/user/repos", json=payload)
    except httpx.HTTPError as exc:
        raise RepoCreationFailed(f"Could not reach GitHub: {exc}") from exc

    try:
        data = r.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict) or "created_at" not in data:
        detail = data.get("message", "") if isinstance(data, dict) else ""
        raise RepoCreationFailed(
            f"Failed to create repository {name} ({r.status_code} {detail}). "
            "Make sure the token has the 'repo' scope."
        )

    log.info("Created repository %s/%s (private=%s)", username, name, private)
    return RemoteRepo(
        name=data.get("name", name),
        full_name=data.get("full_name", f"{username}/{name}"),
        html_url=data.get("html_url", ""),
        private=bool(data.get("private", private)),
        created=True,
    )


def ensure_repo(
        username: str,
        token: str,
        name: str,
        description: str = "",
        private: bool = False,
        settings: Settings | None = None) -> RemoteRepo:
    """Return the existing repository or create it.

    An existing repository is reused as-is; its description and visibility
    are not changed to match the requested ones.
    """
    existing = get_repo(username, token, name, settings)
    if existing is not None:
        return existing
    return create_repo(username, token, name, description, private, settings)
