from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..core.constants import UNKNOWN_USER_NAME
from ..core.exceptions import SourceUnavailable
from .model import UserProfile
from .repository import ProfileSource

logger = logging.getLogger(__name__)

IMAGE_FIELDS = ("profileImageUrl", "profileImage", "photoURL", "avatar", "picture")


def display_name(doc: Mapping[str, Any]) -> str:
    """name -> "first last" -> displayName -> email -> "Unknown User"."""
    full = None
    if doc.get("firstName") and doc.get("lastName"):
        full = f"{doc['firstName']} {doc['lastName']}"
    return doc.get("name") or full or doc.get("displayName") or doc.get("email") or UNKNOWN_USER_NAME


def profile_image(doc: Mapping[str, Any]) -> Optional[str]:
    for key in IMAGE_FIELDS:
        if doc.get(key):
            return doc[key]
    return None


class ProfileResolver:
    """Resolve a display name and avatar from the users collection, then auth.

    The secondary source is only consulted when the primary has no document
    or could not produce a name, and to fill a missing image.
    """

    def __init__(self, primary: ProfileSource, secondary: Optional[ProfileSource] = None):
        self._primary = primary
        self._secondary = secondary

    async def resolve(self, owner_id: str) -> UserProfile:
        try:
            return await self._resolve(owner_id)
        except SourceUnavailable as e:
            logger.warning("Error fetching user details for %s: %s", owner_id, e)
            return UserProfile(owner_id=owner_id, name=UNKNOWN_USER_NAME)

    async def _resolve(self, owner_id: str) -> UserProfile:
        name = UNKNOWN_USER_NAME
        image = None

        doc = await self._primary.get_profile(owner_id)
        if doc:
            name = display_name(doc)
            image = profile_image(doc)

        if self._secondary and (not doc or name == UNKNOWN_USER_NAME or image is None):
            auth_doc = await self._secondary.get_profile(owner_id)
            if auth_doc:
                if name == UNKNOWN_USER_NAME:
                    name = display_name(auth_doc)
                if image is None:
                    image = profile_image(auth_doc)

        return UserProfile(owner_id=owner_id, name=name, profile_image=image)
