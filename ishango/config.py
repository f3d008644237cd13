"""Runtime configuration for ``ishango``.

The data directory is resolved once at startup and carried in a
:class:`LedgerConfig` that every command receives explicitly.

Resolution order for the data directory:

1. ``--data-dir`` on the command line
2. ``ISHANGO_DATA_DIR`` in the environment (a ``.env`` file in the current
   working directory is loaded first and never overrides existing variables)
3. the platform's per-user application data directory for ``ishango``
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_data_dir

from .logging_setup import get_logger

APP_NAME = "ishango"
DATA_DIR_ENV = "ISHANGO_DATA_DIR"

_logger = get_logger("ishango.config")


@dataclass(frozen=True, slots=True)
class LedgerConfig:
    """Resolved settings for a single CLI invocation.

    Attributes
    ----------
    data_dir:
        Directory holding one ``<bucket>.jsonl`` file per bucket. It may not
        exist yet; ``init`` creates it.
    log_level:
        Level name requested on the command line, if any.
    """

    data_dir: Path
    log_level: str | None = None


def _is_windows() -> bool:
    return sys.platform == "win32"


def default_data_dir() -> Path:
    """Return the platform-standard data directory for the application.

    No organization or qualifier is used: ``~/.local/share/ishango`` on Linux,
    ``~/Library/Application Support/ishango`` on macOS and the roaming
    ``%APPDATA%\\ishango\\data`` on Windows.
    """

    if _is_windows():
        return Path(user_data_dir(APP_NAME, appauthor=False, roaming=True)) / "data"
    return Path(user_data_dir(APP_NAME, appauthor=False))


def load_config(
    *,
    data_dir: str | PathLike[str] | None = None,
    log_level: str | None = None,
    load_env_file: bool = True,
) -> LedgerConfig:
    """Build a :class:`LedgerConfig` from CLI options, environment and defaults."""

    if load_env_file:
        load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    if data_dir is not None and os.fspath(data_dir).strip():
        resolved = Path(data_dir).expanduser()
        source = "option"
    else:
        env_dir = os.getenv(DATA_DIR_ENV)
        if env_dir and env_dir.strip():
            resolved = Path(env_dir.strip()).expanduser()
            source = "env"
        else:
            resolved = default_data_dir()
            source = "platform"

    _logger.debug("config:data_dir path=%s source=%s", os.fspath(resolved), source)
    return LedgerConfig(data_dir=resolved, log_level=log_level)


__all__ = [
    "APP_NAME",
    "DATA_DIR_ENV",
    "LedgerConfig",
    "default_data_dir",
    "load_config",
]
