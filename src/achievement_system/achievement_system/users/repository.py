from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class ProfileSource(Protocol):
    """Read interface over a user-profile document collection."""

    async def get_profile(self, owner_id: str) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError
