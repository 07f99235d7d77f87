"""Favorites service: photo, free-text and resolved-profile favorites."""

import logging
from dataclasses import dataclass
from typing import Optional

from api.client import PocketSommClient
from domain.schemas import WineProfile
from services.profile_service import ProfileService, ProfileSnapshot

logger = logging.getLogger("pocketsomm.favorites")


@dataclass
class PhotoFavoriteResult:
    """The identified wine, and the profile after the favorite was stored
    (None when neither the response nor the reload provided one)."""

    wine_profile: WineProfile
    snapshot: Optional[ProfileSnapshot]


class FavoritesService:
    """Business logic for adding favorites.

    Every successful mutation is followed by a reload of the profile. If the
    reload fails, the user returned by the mutation is kept instead, so a
    stored favorite is never reported as a failure.
    """

    def __init__(self, client: PocketSommClient, profiles: Optional[ProfileService] = None):
        self.client = client
        self.profiles = profiles or ProfileService(client)

    async def add_from_photo(
        self, user_id: str, image_bytes: bytes, content_type: str = "image/jpeg"
    ) -> PhotoFavoriteResult:
        response = await self.client.add_favorite_from_photo(
            user_id, image_bytes, content_type=content_type
        )
        logger.info(
            f"photo_favorite_added user_id={user_id} wine={response.wine_profile.resolved_name!r}"
        )
        snapshot = await self.profiles.refresh_after_mutation(user_id, response.user)
        return PhotoFavoriteResult(wine_profile=response.wine_profile, snapshot=snapshot)

    async def preview_by_name(self, wine_name: str) -> WineProfile:
        """Resolve a wine name for confirmation; nothing is stored."""
        return await self.client.resolve_wine_by_name(wine_name)

    async def confirm_profile(
        self, user_id: str, profile: WineProfile
    ) -> Optional[ProfileSnapshot]:
        await self.client.add_favorite_from_profile(user_id, profile)
        logger.info(
            f"favorite_confirmed user_id={user_id} wine={profile.resolved_name or profile.input_name}"
        )
        return await self.profiles.refresh_after_mutation(user_id)

    async def add_by_name(self, user_id: str, wine_name: str) -> Optional[ProfileSnapshot]:
        updated = await self.client.add_favorite_by_name(user_id, wine_name)
        logger.info(f"favorite_added_by_name user_id={user_id} wine_name={wine_name.strip()!r}")
        return await self.profiles.refresh_after_mutation(user_id, updated)
