"""README creation for the working tree."""
from __future__ import annotations
from pathlib import Path
import logging
import shlex
import subprocess

log = logging.getLogger(__name__)


def write_readme(directory: Path | str, repo_name: str, description: str = "") -> Path:
    """Write a README.md with a heading and the description.

    An existing README.md is left alone.
    """
    path = Path(directory) / "README.md"
    if path.exists():
        log.info("README.md already exists in %s, leaving it", directory)
        return path
    body = f"# {repo_name}\n"
    if description:
        body += f"\n{description}\n"
    path.write_text(body, encoding="utf-8")
    log.info("Wrote %s", path)
    return path


def open_in_editor(path: Path | str, editor: str = "nano") -> bool:
    """Open `path` in `editor` and wait. Returns False if the editor failed."""
    cmd = shlex.split(editor) + [str(path)]
    try:
        subprocess.run(cmd, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        log.warning("Editor %r failed: %s", editor, exc)
        return False
    return True
