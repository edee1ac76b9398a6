from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence, Union

from ..core.enums import RecordKind
from .model import AttendanceRecord, PerformanceRecord

Record = Union[AttendanceRecord, PerformanceRecord]


class RecordSource(Protocol):
    """Read interface over the external record store.

    Contract: ``start``/``end`` are inclusive, zero or more records are
    returned, in no particular order. Transport failures raise
    SourceUnavailable.
    """

    async def query_records(
        self,
        owner_id: str,
        kind: RecordKind,
        start: date,
        end: date,
    ) -> Sequence[Record]:
        raise NotImplementedError

    async def query_all(self, kind: RecordKind) -> Sequence[Record]:
        """Every user's records of ``kind``, all periods."""

        raise NotImplementedError
