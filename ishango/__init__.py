"""Public interface for the ``ishango`` package.

A small personal ledger: named buckets of timestamped, signed amounts stored
as append-only JSON Lines files. This module only re-exports the stable import
surface; the console entrypoint lives in :mod:`ishango.cli`.
"""

from .aggregate import balance, daily_deltas, delta_lines, format_amount, transaction_lines
from .buckets import bucket_path, ensure_exists, is_valid_name, list_buckets
from .config import LedgerConfig, default_data_dir, load_config
from .errors import (
    BucketAlreadyExists,
    BucketNotFound,
    InvalidName,
    InvalidValue,
    IoFailure,
    LedgerError,
    MalformedRecord,
)
from .models import Transaction
from .store import append, init, iter_transactions, read_all

__all__ = [
    # Storage
    "init",
    "append",
    "iter_transactions",
    "read_all",
    "bucket_path",
    "ensure_exists",
    "is_valid_name",
    "list_buckets",
    # Aggregation
    "balance",
    "daily_deltas",
    "delta_lines",
    "format_amount",
    "transaction_lines",
    # Configuration
    "LedgerConfig",
    "default_data_dir",
    "load_config",
    # Models / errors
    "Transaction",
    "LedgerError",
    "InvalidName",
    "BucketAlreadyExists",
    "BucketNotFound",
    "MalformedRecord",
    "InvalidValue",
    "IoFailure",
]
