"""
Domain schemas package - Pydantic models for the backend wire format.
"""

from domain.schemas.survey_schemas import SurveyAnswers
from domain.schemas.user_schemas import (
    FavoriteEntry,
    Tasting,
    UserProfile,
    UserProfileResponse,
    UserUpdateResponse,
    SurveyResponse,
    AddTastingRequest,
    FavoriteByNameRequest,
)
from domain.schemas.wine_schemas import (
    WineProfile,
    WineDetail,
    SimilarWine,
    SimilarWinesResponse,
    SearchResult,
    ResolveWineRequest,
    ResolveWineResponse,
    FavoriteFromPhotoRequest,
    FavoriteFromPhotoResponse,
    FavoriteFromProfileRequest,
)
from domain.schemas.menu_schemas import (
    MenuWine,
    MenuRecommendationResponse,
    MenuPdfRequest,
)
from domain.schemas.insights_schemas import Insights

__all__ = [
    "SurveyAnswers",
    "FavoriteEntry",
    "Tasting",
    "UserProfile",
    "UserProfileResponse",
    "UserUpdateResponse",
    "SurveyResponse",
    "AddTastingRequest",
    "FavoriteByNameRequest",
    "WineProfile",
    "WineDetail",
    "SimilarWine",
    "SimilarWinesResponse",
    "SearchResult",
    "ResolveWineRequest",
    "ResolveWineResponse",
    "FavoriteFromPhotoRequest",
    "FavoriteFromPhotoResponse",
    "FavoriteFromProfileRequest",
    "MenuWine",
    "MenuRecommendationResponse",
    "MenuPdfRequest",
    "Insights",
]
