"""
Logging for crawl and query runs.

Console output goes through ``colorlog``; the crawl's ``[LEVEL]``,
``[FETCH-ERR]``, ``[SAVE]``, ``[LOAD]``, ``[DROP]`` and ``[PATH]`` tags get
their own colour.  Under GitHub Actions, warnings and errors become
workflow annotations and each crawl level is folded into a log group.
"""

import logging
import os
from pathlib import Path

import colorlog

log = logging.getLogger("wiki-graph")

_CONSOLE_FMT = "%(asctime)s [%(levelname)s] %(message)s"
_CONSOLE_DATEFMT = "%H:%M:%S"
_FILE_LOG_FMT = "%(asctime)s [%(levelname)s] %(message)s"
_FILE_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_CI: bool = os.environ.get("GITHUB_ACTIONS") == "true"

_ANSI_RESET = "\033[0m"
_TAG_COLOURS: dict[str, str] = {
    "[LEVEL]":     "\033[1;34m",
    "[FETCH-ERR]": "\033[1;31m",
    "[SAVE]":      "\033[1;32m",
    "[LOAD]":      "\033[1;32m",
    "[DROP]":      "\033[33m",
    "[PATH]":      "\033[1;36m",
}

_LEVEL_COLOURS: dict[str, str] = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "bold_red",
}


def colour_tags(msg: str) -> str:
    """Wrap every known ``[TAG]`` in *msg* in its ANSI colour."""
    for tag, style in _TAG_COLOURS.items():
        if tag in msg:
            msg = msg.replace(tag, f"{style}{tag}{_ANSI_RESET}")
    return msg


def ci_group(title: str) -> None:
    """Open a collapsible log group in GitHub Actions (no-op elsewhere)."""
    if _CI:
        print(f"::group::{title}", flush=True)


def ci_endgroup() -> None:
    if _CI:
        print("::endgroup::", flush=True)


class _TagColourMixin:
    def format(self, record: logging.LogRecord) -> str:
        return colour_tags(super().format(record))  # type: ignore[misc]


class _ConsoleFormatter(_TagColourMixin, colorlog.ColoredFormatter):
    pass


class _CIFormatter(_TagColourMixin, logging.Formatter):
    """Prefix warnings and errors with the Actions ``::warning::`` /
    ``::error::`` commands so failed fetches and load errors show up as
    annotations."""

    _COMMANDS: dict[int, str] = {
        logging.WARNING:  "::warning::",
        logging.ERROR:    "::error::",
        logging.CRITICAL: "::error::",
    }

    def format(self, record: logging.LogRecord) -> str:
        return self._COMMANDS.get(record.levelno, "") + super().format(record)


def _console_handler() -> logging.Handler:
    if _CI:
        handler = logging.StreamHandler()
        handler.setFormatter(_CIFormatter(_CONSOLE_FMT, datefmt=_CONSOLE_DATEFMT))
        return handler
    handler = colorlog.StreamHandler()
    handler.setFormatter(_ConsoleFormatter(
        "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
        datefmt=_CONSOLE_DATEFMT,
        log_colors=_LEVEL_COLOURS,
    ))
    return handler


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Configure the ``wiki-graph`` logger.

    Parameters
    ----------
    debug : bool
        Enable DEBUG-level console output (default is INFO).
    log_file : str | None
        If given, also write every message, DEBUG included, to this file.
    """
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.handlers.clear()
    log.addHandler(_console_handler())

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_LOG_FMT, datefmt=_FILE_LOG_DATEFMT))
        log.addHandler(fh)
        log.info("Logging to file: %s", log_path.resolve())
