"""Timestamped run log.

Each run appends to `ghpush_YYYYmmdd_HHMMSS.log`, one line per event with
its level and message. Secrets registered with `add_secret` are replaced by
`***` before a record is written.
"""
from __future__ import annotations
from datetime import datetime
from pathlib import Path
from typing import Set
import logging

LOGGER_NAME = "ghpush"
FORMAT = "%(asctime)s %(levelname)s %(message)s"


class RedactingFilter(logging.Filter):
    """Replace registered secrets in the rendered message and traceback."""

    def __init__(self):
        super().__init__()
        self.secrets: Set[str] = set()

    def _redact(self, text: str) -> str:
        for s in self.secrets:
            text = text.replace(s, "***")
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if self.secrets:
            record.msg, record.args = self._redact(record.getMessage()), None
            if record.exc_info and not record.exc_text:
                record.exc_text = logging.Formatter().formatException(record.exc_info)
            if record.exc_text:
                record.exc_text = self._redact(record.exc_text)
        return True


_filter = RedactingFilter()


def setup_run_log(directory: str | Path = ".") -> Path:
    """Attach a file handler for this run to the `ghpush` logger.

    Returns:
        Path of the log file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"ghpush_{datetime.now():%Y%m%d_%H%M%S}.log"

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FORMAT))
    handler.addFilter(_filter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    return path


def add_secret(secret: str) -> None:
    """Register a value that must never reach the log file."""
    if secret:
        _filter.secrets.add(secret)


def close_run_log() -> None:
    """Detach and close every handler added by `setup_run_log`."""
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    _filter.secrets.clear()
