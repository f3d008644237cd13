"""Error kinds raised by the ledger.

Every failure a command can report is a :class:`LedgerError`. The CLI is the
only place that turns one into ``Error: <message>`` on stderr and a non-zero
exit status.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class LedgerError(Exception):
    """Base class for all errors surfaced to the user."""


class InvalidName(LedgerError):
    def __init__(self, name: str) -> None:
        super().__init__("Bucket name must only contain digits, letters, - or _")
        self.name = name


class BucketAlreadyExists(LedgerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Bucket '{name}' already exists")
        self.name = name


class BucketNotFound(LedgerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Bucket '{name}' does not exist")
        self.name = name


class MalformedRecord(LedgerError):
    """A stored line could not be parsed, or its timestamp is out of range."""


class InvalidValue(LedgerError):
    """A transaction value that cannot be stored as JSON (NaN or infinite)."""


class IoFailure(LedgerError):
    """An underlying filesystem error; the message is the OS error text."""


@contextmanager
def translate_os_errors() -> Iterator[None]:
    """Re-raise any ``OSError`` raised in the block as :class:`IoFailure`."""

    try:
        yield
    except OSError as e:
        raise IoFailure(str(e)) from e


__all__ = [
    "BucketAlreadyExists",
    "BucketNotFound",
    "InvalidName",
    "InvalidValue",
    "IoFailure",
    "LedgerError",
    "MalformedRecord",
    "translate_os_errors",
]
