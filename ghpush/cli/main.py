"""Command-line interface for ghpush.

Creates (or reuses) a GitHub repository and pushes a local directory to it
in one interactive session. There are no required flags: every parameter is
asked for on the terminal.

Usage:
    ```bash
    ghpush
    ghpush --config ./config.toml
    python -m ghpush
    ```

Exit status is 0 on success (including "nothing to commit") and 1 on any
failure or interruption. Each run writes a timestamped log file to the
configured log directory.
"""
from __future__ import annotations
import argparse
import logging

from rich.console import Console

from .. import __version__
from ..core.config import load_settings
from ..core.deps import ensure_git
from ..core.errors import GhPushError, UnexpectedTermination
from ..core.runlog import add_secret, close_run_log, setup_run_log
from ..core.workflow import run
from .prompts import collect_session

log = logging.getLogger(__name__)


def _fail(err_console: Console, exc: GhPushError) -> int:
    log.error("%s: %s", type(exc).__name__, exc)
    err_console.print(f"[bold red]❌ {exc}[/bold red]")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI.

    Returns:
        Process exit status.
    """
    p = argparse.ArgumentParser(prog="ghpush", description="Create a GitHub repo and push a local directory to it.")
    p.add_argument("--config", help="Path to config.toml (defaults to ./config.toml if present)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = p.parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)

    try:
        settings = load_settings(args.config or "config.toml")
        log_path = setup_run_log(settings.log_dir)
        log.info("state=start log=%s", log_path)

        ensure_git()
        log.info("state=deps-checked")

        session = collect_session(settings, console)
        add_secret(session.token.get_secret_value())
        log.info("state=authenticated user=%s", session.username)

        outcome = run(session, settings, console)
        # nothing-to-commit is a successful no-op
        log.info("state=done outcome=%s", outcome.value)
        return 0
    except GhPushError as exc:
        return _fail(err_console, exc)
    except (KeyboardInterrupt, EOFError):
        return _fail(err_console, UnexpectedTermination("Interrupted"))
    except Exception as exc:
        log.exception("Unhandled error")
        return _fail(err_console, UnexpectedTermination(f"Unexpected error: {exc}"))
    finally:
        close_run_log()


if __name__ == "__main__":
    raise SystemExit(main())
