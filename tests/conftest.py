"""Pytest configuration for test isolation.

Commands resolve the data directory from ``ISHANGO_DATA_DIR`` before falling
back to the per-user platform location. Each test gets its own directory under
``tmp_path`` so nothing reads or writes the real ledger, and tests never see
each other's buckets.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the ledger at a per-test data directory.

    The directory is deliberately not created: several behaviors (``list``
    and ``init``) depend on whether it exists yet.
    """

    root = tmp_path / "ishango-data"
    monkeypatch.setenv("ISHANGO_DATA_DIR", os.fspath(root))
    monkeypatch.delenv("ISHANGO_LOG_LEVEL", raising=False)
    # Keep a stray .env in the invoking directory out of the picture.
    monkeypatch.chdir(tmp_path)
    return root
