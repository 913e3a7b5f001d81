"""Interactive collection of the session parameters.

Prompts are asked in a fixed order and validated as they are answered, so an
empty required answer stops the run before anything touches the network or
the filesystem. Menu prompts re-ask on invalid choices.
"""
from __future__ import annotations
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from ..core.config import Session, Settings
from ..core.errors import EmptyInput, NoFilesSpecified


def _required(label: str, field: str, password: bool = False) -> str:
    value = Prompt.ask(label, password=password).strip()
    if not value:
        raise EmptyInput(field)
    return value


def collect_session(settings: Settings, console: Console | None = None) -> Session:
    """Ask every question and return the frozen `Session`.

    Raises:
        EmptyInput: Username, token or repository name left empty.
        NoFilesSpecified: Explicit file selection with an empty list.
    """
    console = console or Console()
    console.print("[bold cyan]GitHub repository setup[/bold cyan]")

    username = _required("GitHub username", "Username")
    token = _required("Personal access token", "Token", password=True)
    repo_name = _required("Repository name", "Repository name")
    description = Prompt.ask("Description", default="", show_default=False).strip()

    console.print("Visibility: [bold]1[/bold]) public  [bold]2[/bold]) private")
    visibility = Prompt.ask("Choose", choices=["1", "2"], default="1")

    local_path = Prompt.ask("Local path", default=settings.default_local_path).strip()
    create_readme = Prompt.ask(
        "Create a README.md?", choices=["y", "n"], default="n", case_sensitive=False
    ).strip().lower()
    commit_message = Prompt.ask("Commit message", default=settings.default_commit_message).strip()
    branch = Prompt.ask("Branch", default=settings.default_branch).strip()

    console.print("Files: [bold]1[/bold]) all files  [bold]2[/bold]) choose files")
    selection = Prompt.ask("Choose", choices=["1", "2"], default="1")

    files: tuple[str, ...] = ()
    if selection == "2":
        files = tuple(Prompt.ask("Files (space separated)", default="", show_default=False).split())
        if not files:
            raise NoFilesSpecified()

    return Session(
        username=username,
        token=token,
        repo_name=repo_name,
        description=description,
        private=visibility == "2",
        local_path=Path(local_path or settings.default_local_path).expanduser(),
        create_readme=create_readme == "y",
        commit_message=commit_message or settings.default_commit_message,
        branch=branch or settings.default_branch,
        stage_all=selection == "1",
        files=files,
    )
