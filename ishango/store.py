"""Append-only storage of transactions, one JSON line per record.

Two read modes exist and callers pick one explicitly:

- strict (``tolerant=False``): the first line that does not parse aborts the
  read with :class:`~ishango.errors.MalformedRecord`. Used for listings and
  per-day deltas.
- tolerant (``tolerant=True``): unparsable lines are skipped and a line that
  is not valid UTF-8 ends the scan. Used for balances.

Nothing here sorts, caches or indexes; every read scans the whole file.
"""

from __future__ import annotations

import math
import os
import time
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from .buckets import bucket_path, ensure_exists, is_valid_name
from .errors import (
    BucketAlreadyExists,
    InvalidName,
    InvalidValue,
    IoFailure,
    MalformedRecord,
    translate_os_errors,
)
from .logging_setup import get_logger
from .models import Transaction

_logger = get_logger("ishango.store")


def init(data_dir: Path, name: str) -> Path:
    """Create an empty bucket file, creating ``data_dir`` if needed."""

    if not is_valid_name(name):
        raise InvalidName(name)

    path = bucket_path(data_dir, name)
    with translate_os_errors():
        data_dir.mkdir(parents=True, exist_ok=True)
        try:
            # Exclusive create so an existing bucket is never truncated.
            with path.open("x", encoding="utf-8"):
                pass
        except FileExistsError:
            raise BucketAlreadyExists(name) from None

    _logger.info("bucket:created name=%s path=%s", name, os.fspath(path))
    return path


def append(data_dir: Path, name: str, value: float, *, now: float | None = None) -> Transaction:
    """Append one transaction stamped with the current UTC time (whole seconds)."""

    path = ensure_exists(data_dir, name)
    if not math.isfinite(value):
        raise InvalidValue("Value must be a finite number")

    ts = math.floor(time.time() if now is None else now)
    tx = Transaction(time=ts, value=float(value))

    with translate_os_errors(), path.open("a", encoding="utf-8", newline="\n") as f:
        f.write(tx.to_line() + "\n")

    _logger.info("transaction:appended bucket=%s time=%d value=%r", name, tx.time, tx.value)
    return tx


def _parse_line(line: str) -> Transaction:
    return Transaction.model_validate_json(line)


def iter_transactions(
    data_dir: Path, name: str, *, tolerant: bool = False
) -> Iterator[Transaction]:
    """Yield the bucket's transactions in stored (append) order.

    The existence check runs eagerly so a missing bucket fails on call, not on
    first iteration.
    """

    path = ensure_exists(data_dir, name)
    return _scan(path, name, tolerant=tolerant)


def _scan(path: Path, name: str, *, tolerant: bool) -> Iterator[Transaction]:
    with translate_os_errors(), path.open("rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                if tolerant:
                    _logger.debug(
                        "scan:stop_invalid_utf8 bucket=%s line=%d", name, lineno
                    )
                    return
                raise IoFailure(f"stream did not contain valid UTF-8 (line {lineno})") from e

            line = line.removesuffix("\n").removesuffix("\r")
            try:
                tx = _parse_line(line)
            except ValidationError as e:
                if tolerant:
                    _logger.debug("scan:skip_malformed bucket=%s line=%d", name, lineno)
                    continue
                raise MalformedRecord(
                    f"Malformed record on line {lineno} of bucket '{name}': "
                    f"{_describe(e)}"
                ) from e
            yield tx


def _describe(err: ValidationError) -> str:
    first = err.errors(include_url=False)[0] if err.error_count() else None
    if first is None:
        return "invalid record"
    loc = ".".join(str(p) for p in first.get("loc", ()))
    return f"{loc}: {first['msg']}" if loc else first["msg"]


def read_all(data_dir: Path, name: str, *, tolerant: bool = False) -> list[Transaction]:
    return list(iter_transactions(data_dir, name, tolerant=tolerant))


__all__ = [
    "append",
    "init",
    "iter_transactions",
    "read_all",
]
