#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/logging_utils.py
"""Logging setup for the ``md2jira`` command.

Library modules only create loggers under the ``md2jira`` namespace. Handlers
are attached here, by the command line entry point, so embedding applications
keep full control of their own logging.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

CONSOLE_LOG_FORMAT = "md2jira: %(levelname)s: %(message)s"
FILE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for ``log_level``; unknown names give WARNING."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(log_level: int | str, log_file: Optional[str] = None) -> logging.Logger:
    """Attach the md2jira console handler, and optionally a file handler, to the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name from ``--log-level``
    log_file : str, optional
        File that receives the same records with timestamps and logger names

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_DATE_FORMAT))
            root_logger.addHandler(file_handler)

    return root_logger
