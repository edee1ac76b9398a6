from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class TargetSource(Protocol):
    """Read interface over externally managed target documents.

    Exactly one selector is passed per call. Documents carry ``createdAt``
    plus any of ``numMeetings``, ``attendedMeetings``/``positiveLeads``,
    ``durationSeconds``/``meetingDurationHours`` and ``closingAmount``.
    """

    async def find_targets(
        self,
        *,
        employee_id: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[str] = None,
    ) -> Sequence[Mapping[str, Any]]:
        raise NotImplementedError
