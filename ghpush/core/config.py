"""Configuration management for ghpush.

Two kinds of configuration live here:

1. `Settings`: tool defaults merged from environment variables (highest
   priority), a TOML configuration file, and code defaults (lowest priority).
   A `.env` file in the working directory is loaded first via python-dotenv.
2. `Session`: the answers collected for one interactive run. It is built
   once, frozen, and passed explicitly to every step.

Example config.toml:
    ```toml
    [github]
    api_url = "https://api.github.com"
    host = "github.com"
    timeout = 20.0

    [defaults]
    branch = "main"
    commit_message = "Initial commit"
    local_path = "."

    [log]
    dir = "."
    ```

Environment Variables:
    GITHUB_API_URL: Override the REST API base URL
    GHPUSH_GIT_HOST: Override the git host used in remote URLs
    GHPUSH_BRANCH: Override the default branch name
    GHPUSH_COMMIT_MESSAGE: Override the default commit message
    GHPUSH_LOG_DIR: Override the run log directory
    VISUAL / EDITOR: Editor used for README editing
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import os
import tomllib  # Python 3.11+

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, SecretStr, field_validator


@dataclass
class Settings:
    """Runtime defaults derived from `config.toml` and environment.

    Attributes:
        api_url: Base URL of the GitHub REST API.
        git_host: Host name used to build remote URLs.
        timeout: HTTP timeout in seconds.
        default_branch: Branch offered when the branch prompt is left empty.
        default_commit_message: Message offered when the commit prompt is left empty.
        default_local_path: Directory offered when the path prompt is left empty.
        log_dir: Directory receiving the timestamped run log.
        editor: Command used to edit a freshly written README.
    """

    api_url: str = "https://api.github.com"
    git_host: str = "github.com"
    timeout: float = 20.0

    default_branch: str = "main"
    default_commit_message: str = "Initial commit"
    default_local_path: str = "."

    log_dir: str = "."
    editor: str = "nano"


def load_config(path: str = "config.toml") -> dict:
    """Load a TOML config file into a dictionary.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        Dictionary containing configuration data, or empty dict if file missing.
    """
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("rb") as f:
        return tomllib.load(f)


def load_settings(config_path: str | None = None) -> Settings:
    """Create a `Settings` object from config file and environment variables.

    Args:
        config_path: Path to TOML config file. Defaults to "config.toml".

    Returns:
        Settings object with merged configuration from all sources.
    """
    load_dotenv(find_dotenv(usecwd=True))
    cfg = load_config(config_path or "config.toml")

    s = Settings()

    gh = cfg.get("github", {})
    s.api_url = os.getenv("GITHUB_API_URL", gh.get("api_url", s.api_url)).rstrip("/")
    s.git_host = os.getenv("GHPUSH_GIT_HOST", gh.get("host", s.git_host))
    s.timeout = float(gh.get("timeout", s.timeout))

    df = cfg.get("defaults", {})
    s.default_branch = os.getenv("GHPUSH_BRANCH", df.get("branch", s.default_branch))
    s.default_commit_message = os.getenv(
        "GHPUSH_COMMIT_MESSAGE", df.get("commit_message", s.default_commit_message)
    )
    s.default_local_path = df.get("local_path", s.default_local_path)

    lg = cfg.get("log", {})
    s.log_dir = os.getenv("GHPUSH_LOG_DIR", lg.get("dir", s.log_dir))

    s.editor = os.getenv("VISUAL") or os.getenv("EDITOR") or s.editor

    return s


class Session(BaseModel):
    """Everything one run needs, collected from the interactive prompts.

    The model is frozen; steps receive it as an argument and never mutate it.
    The token is a `SecretStr` so it stays out of reprs and log lines.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    token: SecretStr
    repo_name: str
    description: str = ""
    private: bool = False
    local_path: Path
    create_readme: bool = False
    commit_message: str
    branch: str
    stage_all: bool = True
    files: Tuple[str, ...] = ()

    @field_validator("username", "repo_name", "branch", "commit_message")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()
