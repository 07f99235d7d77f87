"""Services package - Caller-side policies on top of the API client"""

from services.profile_service import ProfileService, ProfileSnapshot
from services.wine_service import WineService, WineDetailBundle
from services.favorites_service import FavoritesService, PhotoFavoriteResult

__all__ = [
    "ProfileService",
    "ProfileSnapshot",
    "WineService",
    "WineDetailBundle",
    "FavoritesService",
    "PhotoFavoriteResult",
]
