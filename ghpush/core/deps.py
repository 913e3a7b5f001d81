"""Check that the git binary is available, installing it if possible."""
from __future__ import annotations
from typing import List, Optional
import logging
import shutil
import subprocess

import git

from .errors import DependencyInstallFailed

log = logging.getLogger(__name__)

# First match on PATH wins.
INSTALLERS = [
    ("apt-get", ["apt-get", "install", "-y", "git"]),
    ("dnf", ["dnf", "install", "-y", "git"]),
    ("yum", ["yum", "install", "-y", "git"]),
    ("pacman", ["pacman", "-S", "--noconfirm", "git"]),
    ("brew", ["brew", "install", "git"]),
    ("winget", ["winget", "install", "--id", "Git.Git", "-e"]),
]


def install_command() -> Optional[List[str]]:
    """Return the install command for the first available package manager."""
    for tool, cmd in INSTALLERS:
        if shutil.which(tool):
            return cmd
    return None


def ensure_git() -> str:
    """Return the path to `git`, installing it first when it is missing.

    Raises:
        DependencyInstallFailed: If git is absent and cannot be installed.
    """
    found = shutil.which("git")
    if found:
        return found

    cmd = install_command()
    if cmd is None:
        raise DependencyInstallFailed("git is not installed and no supported package manager was found")

    log.warning("git not found, installing with: %s", " ".join(cmd))
    try:
        subprocess.run(cmd, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise DependencyInstallFailed(f"Installing git failed: {exc}") from exc

    found = shutil.which("git")
    if not found:
        raise DependencyInstallFailed("git is still not available after installation")
    git.refresh(found)
    log.info("Installed git at %s", found)
    return found
