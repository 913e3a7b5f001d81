"""The push workflow: remote repo, local checkout, stage, commit, push.

`run` executes the steps in order. Each step either returns a value or raises
a `GhPushError`; the first error stops the run. The token-bearing remote URL
only exists inside `credentialed_origin`, which restores the public URL on
the way out.
"""
from __future__ import annotations
from enum import Enum
import logging

from rich.console import Console

from . import github, local, readme
from .config import Session, Settings

log = logging.getLogger(__name__)


class Outcome(str, Enum):
    PUSHED = "pushed"
    NOTHING_TO_COMMIT = "nothing-to-commit"


def run(session: Session, settings: Settings, console: Console | None = None) -> Outcome:
    """Execute one run for `session` and report how it ended.

    Raises:
        GhPushError: The first failing step's error.
    """
    console = console or Console()
    token = session.token.get_secret_value()

    remote = github.ensure_repo(
        session.username, token, session.repo_name,
        session.description, session.private, settings,
    )
    verb = "Created" if remote.created else "Using existing"
    console.print(f"✅ {verb} repository [bold]{session.username}/{session.repo_name}[/bold]")
    log.info("state=remote-resolved repo=%s/%s created=%s", session.username, session.repo_name, remote.created)

    repo = local.open_checkout(session.local_path)
    log.info("state=local-initialized path=%s", session.local_path)

    if session.create_readme:
        path = readme.write_readme(session.local_path, session.repo_name, session.description)
        readme.open_in_editor(path, settings.editor)

    public = github.public_url(settings.git_host, session.username, session.repo_name)
    authed = github.authenticated_url(settings.git_host, session.username, token, session.repo_name)

    with local.credentialed_origin(repo, authed, public):
        local.stage(repo, session.stage_all, session.files)
        log.info("state=staged")

        if not local.has_staged_changes(repo):
            console.print("ℹ️  Nothing to commit, working tree matches the last commit.")
            log.info("state=nothing-to-commit")
            return Outcome.NOTHING_TO_COMMIT

        sha = local.commit(repo, session.commit_message)
        console.print(f"✅ Committed {sha[:7]}: {session.commit_message}")
        log.info("state=committed sha=%s", sha)

        local.push(repo, session.branch, secret=token)
        console.print(f"✅ Pushed to {session.branch}")
        log.info("state=pushed branch=%s", session.branch)

    log.info("state=cleaned-up remote=%s", public)
    if remote.html_url:
        console.print(f"🎉 Done: {remote.html_url}")
    return Outcome.PUSHED
