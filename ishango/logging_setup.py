"""Diagnostics for ``ishango`` go to stderr, never stdout.

Balances and listings are printed to stdout and are often piped into other
tools, so every log record is routed through one handler on the ``ishango``
logger that writes to stderr. The CLI root callback installs it; modules only
ask for a child logger via :func:`get_logger`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "ishango"
_CONFIGURED = False

LOG_LEVEL_ENV = "ISHANGO_LOG_LEVEL"


def _level_from_name(value: str | None) -> int | None:
    # Accept numeric strings or standard level names (INFO/DEBUG/etc.).
    if not value or not value.strip():
        return None
    value = value.strip().upper()
    if value.isdigit():
        return int(value)
    numeric = getattr(logging, value, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    parsed = _level_from_name(level)
    if parsed is None:
        parsed = _level_from_name(os.getenv(LOG_LEVEL_ENV))
    return parsed if parsed is not None else logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Install the stderr handler on the ``ishango`` logger; later calls are no-ops.

    ``level`` comes from ``--log-level``; an unrecognised or missing value
    falls back to ``ISHANGO_LOG_LEVEL`` and then to ``WARNING``, which keeps
    ``bucket:created`` and ``transaction:appended`` events out of sight unless
    asked for.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )
    logger.setLevel(resolved)
    logger.addHandler(handler)
    # A host application's root handlers may write to stdout.
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Child logger of ``ishango``; silent until :func:`configure_logging` runs."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
