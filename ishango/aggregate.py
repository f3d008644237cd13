"""Balance, per-day delta and listing projections over a transaction stream.

All functions accept any iterable of :class:`~ishango.models.Transaction` and
consume it once. Dates and times are rendered in the local timezone.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from datetime import date

from .models import Transaction


def format_amount(amount: float) -> str:
    return f"{amount:.2f}"


def balance(records: Iterable[Transaction]) -> float:
    """Sum of all values; ``0.0`` for an empty stream."""

    return sum((tx.value for tx in records), 0.0)


def daily_deltas(records: Iterable[Transaction]) -> dict[date, float]:
    """Sum values per local calendar date, keyed in ascending date order.

    Input order does not matter; the result is ordered by date, not by first
    appearance.
    """

    sums: defaultdict[date, float] = defaultdict(float)
    for tx in records:
        sums[tx.local_datetime().date()] += tx.value
    return dict(sorted(sums.items()))


def transaction_lines(records: Iterable[Transaction]) -> Iterator[str]:
    """Yield ``YYYY-MM-DD HH:MM:SS <value>`` per record, in stored order."""

    for tx in records:
        stamp = tx.local_datetime().isoformat(sep=" ", timespec="seconds")
        yield f"{stamp} {format_amount(tx.value)}"


def delta_lines(records: Iterable[Transaction]) -> Iterator[str]:
    """Yield ``YYYY-MM-DD: <sum>`` per local date, earliest first."""

    for day, total in daily_deltas(records).items():
        yield f"{day.isoformat()}: {format_amount(total)}"


__all__ = [
    "balance",
    "daily_deltas",
    "delta_lines",
    "format_amount",
    "transaction_lines",
]
