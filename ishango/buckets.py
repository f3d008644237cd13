"""Bucket naming, file locations and discovery."""

from __future__ import annotations

import re
from pathlib import Path

from .errors import BucketNotFound, translate_os_errors

BUCKET_SUFFIX = ".jsonl"

_BUCKET_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")


def is_valid_name(name: str) -> bool:
    """True iff ``name`` is non-empty and only uses ASCII letters, digits, ``_`` or ``-``."""

    return _BUCKET_NAME_RE.fullmatch(name) is not None


def bucket_path(data_dir: Path, name: str) -> Path:
    # No validation here; ``init`` validates before anything touches disk.
    return data_dir / f"{name}{BUCKET_SUFFIX}"


def ensure_exists(data_dir: Path, name: str) -> Path:
    """Return the bucket's path, raising :class:`BucketNotFound` if it is missing."""

    path = bucket_path(data_dir, name)
    if not path.exists():
        raise BucketNotFound(name)
    return path


def list_buckets(data_dir: Path) -> list[str]:
    """Return bucket names found directly inside ``data_dir``.

    A missing data directory simply means no buckets yet. Names come back in
    filesystem enumeration order, which is platform dependent.
    """

    if not data_dir.exists():
        return []
    with translate_os_errors():
        return [entry.stem for entry in data_dir.iterdir() if entry.suffix == BUCKET_SUFFIX]


__all__ = [
    "BUCKET_SUFFIX",
    "bucket_path",
    "ensure_exists",
    "is_valid_name",
    "list_buckets",
]
