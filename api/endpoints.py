"""
Endpoint registry for the PocketSomm backend.

Each entry fixes the method, path template, request model, response type and
response shape of one backend operation. The client consumes these
uniformly instead of hand-writing per-call decode logic.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type
from urllib.parse import quote

from pydantic import BaseModel

from app.exceptions import InvalidRequestError
from api.responses import StatusResponse
from domain.enums import HttpMethod, ResponseShape
from domain.schemas import (
    AddTastingRequest,
    FavoriteByNameRequest,
    FavoriteFromPhotoRequest,
    FavoriteFromPhotoResponse,
    FavoriteFromProfileRequest,
    Insights,
    MenuPdfRequest,
    MenuRecommendationResponse,
    ResolveWineRequest,
    ResolveWineResponse,
    SearchResult,
    SimilarWinesResponse,
    SurveyAnswers,
    SurveyResponse,
    UserProfileResponse,
    UserUpdateResponse,
    WineDetail,
)


@dataclass(frozen=True)
class Endpoint:
    """One logical backend operation reachable at a fixed method/path pair.

    `response_type` is None when any 2xx counts as success and the body is
    not decoded.
    """

    name: str
    method: HttpMethod
    path: str
    response_type: Any = None
    request_model: Optional[Type[BaseModel]] = None
    shape: ResponseShape = ResponseShape.BARE

    def build_path(self, **params: Any) -> str:
        """Fill the path template with percent-encoded parameters."""
        encoded: Dict[str, str] = {}
        for key, value in params.items():
            text = "" if value is None else str(value).strip()
            if not text:
                raise InvalidRequestError(
                    f"{key} must not be empty", details={"endpoint": self.name}
                )
            encoded[key] = quote(text, safe="")
        try:
            return self.path.format(**encoded)
        except KeyError as exc:
            raise InvalidRequestError(
                f"missing path parameter {exc.args[0]}", details={"endpoint": self.name}
            ) from exc


HEALTH = Endpoint("health", HttpMethod.GET, "/health", StatusResponse)
FAVORITE_FROM_PHOTO = Endpoint(
    "favorite_from_photo",
    HttpMethod.POST,
    "/user/{user_id}/favorite/from-photo",
    FavoriteFromPhotoResponse,
    FavoriteFromPhotoRequest,
)
SUBMIT_SURVEY = Endpoint(
    "submit_survey",
    HttpMethod.POST,
    "/user/{user_id}/survey",
    SurveyResponse,
    SurveyAnswers,
)
FETCH_USER_PROFILE = Endpoint(
    "fetch_user_profile", HttpMethod.GET, "/user/{user_id}", UserProfileResponse
)
FETCH_WINE_DETAIL = Endpoint(
    "fetch_wine_detail", HttpMethod.GET, "/wine/{wine_id}", WineDetail
)
FETCH_SIMILAR_WINES = Endpoint(
    "fetch_similar_wines",
    HttpMethod.GET,
    "/wine/{wine_id}/similar",
    SimilarWinesResponse,
)
ADD_TASTING = Endpoint(
    "add_tasting",
    HttpMethod.POST,
    "/user/{user_id}/tasting",
    UserUpdateResponse,
    AddTastingRequest,
)
ADD_FAVORITE_BY_NAME = Endpoint(
    "add_favorite_by_name",
    HttpMethod.POST,
    "/user/{user_id}/favorite/by-name",
    UserUpdateResponse,
    FavoriteByNameRequest,
)
RECOMMEND_FROM_MENU_PDF = Endpoint(
    "recommend_from_menu_pdf",
    HttpMethod.POST,
    "/user/{user_id}/menu/pdf",
    MenuRecommendationResponse,
    MenuPdfRequest,
)
FETCH_USER_INSIGHTS = Endpoint(
    "fetch_user_insights", HttpMethod.GET, "/user/{user_id}/insights", Insights
)
SEARCH_WINES = Endpoint(
    "search_wines", HttpMethod.GET, "/wine_search", List[SearchResult]
)
RESOLVE_WINE_BY_NAME = Endpoint(
    "resolve_wine_by_name",
    HttpMethod.POST,
    "/wine/resolve-text",
    ResolveWineResponse,
    ResolveWineRequest,
)
ADD_FAVORITE_FROM_PROFILE = Endpoint(
    "add_favorite_from_profile",
    HttpMethod.POST,
    "/user/{user_id}/favorite/from-profile",
    None,
    FavoriteFromProfileRequest,
)

ENDPOINTS: Dict[str, Endpoint] = {
    ep.name: ep
    for ep in (
        HEALTH,
        FAVORITE_FROM_PHOTO,
        SUBMIT_SURVEY,
        FETCH_USER_PROFILE,
        FETCH_WINE_DETAIL,
        FETCH_SIMILAR_WINES,
        ADD_TASTING,
        ADD_FAVORITE_BY_NAME,
        RECOMMEND_FROM_MENU_PDF,
        FETCH_USER_INSIGHTS,
        SEARCH_WINES,
        RESOLVE_WINE_BY_NAME,
        ADD_FAVORITE_FROM_PROFILE,
    )
}
