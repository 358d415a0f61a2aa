"""Shared logging configuration helpers."""

from __future__ import annotations

import logging
import sys
from typing import Iterable

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

LOG_LEVEL_CHOICES: Iterable[str] = tuple(LOG_LEVELS.keys())

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Loggers owned by bmpedit; -v only lowers these, third-party loggers stay at INFO.
PROJECT_LOGGERS = ("bitmap", "transforms", "cli", "bmpedit")


def add_logging_args(parser) -> None:
    """Add --log-level, -v and -q options to an argparse parser."""
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        help="Set log verbosity for every logger (debug, info, warning, error, critical)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="-v shows codec and pipeline details, -vv also library debug output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="Reduce log verbosity (-qq for errors only)",
    )


def resolve_log_level(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Resolve the level for bmpedit's loggers; an explicit name wins over -v/-q."""
    if log_level:
        return LOG_LEVELS[log_level.lower()]

    offset = verbose - quiet
    if offset >= 1:
        return logging.DEBUG
    if offset == 0:
        return logging.INFO
    if offset == -1:
        return logging.WARNING
    return logging.ERROR


def resolve_root_level(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Resolve the level for everything else.

    A single -v keeps third-party loggers at INFO; -vv or an explicit
    --log-level applies the same level everywhere.
    """
    level = resolve_log_level(log_level=log_level, verbose=verbose, quiet=quiet)
    if log_level or verbose - quiet >= 2:
        return level
    return max(level, logging.INFO)


def configure_logging(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Configure logging for the bmpedit CLI and return the project level."""
    level = resolve_log_level(log_level=log_level, verbose=verbose, quiet=quiet)
    root_level = resolve_root_level(log_level=log_level, verbose=verbose, quiet=quiet)
    for name in PROJECT_LOGGERS:
        logging.getLogger(name).setLevel(level)

    root_logger = logging.getLogger()

    if root_logger.handlers:
        root_logger.setLevel(root_level)
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return level

    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    return level
