"""Record model for a single ledger line.

One :class:`Transaction` is stored per line of a bucket file as a compact JSON
object, e.g. ``{"time":1723291200,"value":-3.25}``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .errors import MalformedRecord

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class Transaction(BaseModel):
    """An immutable, timestamped, signed amount.

    ``time`` is Unix epoch seconds (UTC) and must be a JSON integer. ``value``
    accepts any finite JSON number. Unknown keys on disk are ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore", allow_inf_nan=False)

    time: int = Field(ge=_I64_MIN, le=_I64_MAX)
    value: float

    def to_line(self) -> str:
        return self.model_dump_json()

    def local_datetime(self) -> datetime:
        """Return ``time`` converted to a naive local-time ``datetime``.

        Raises :class:`MalformedRecord` when the timestamp falls outside what
        the platform can represent as a calendar moment.
        """

        try:
            return datetime.fromtimestamp(self.time)
        except (OverflowError, OSError, ValueError) as e:
            raise MalformedRecord("Invalid timestamp") from e


__all__ = ["Transaction"]
