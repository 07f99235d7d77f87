"""
PocketSomm API client: one coroutine per backend operation.

Every call goes through the same shared Transport, is classified by the
error classifier, and is decoded according to the endpoint registry.
Errors are never swallowed here; callers decide what to surface.
"""

import base64
import logging
from typing import Any, List, Mapping, Optional

import httpx
from pydantic import BaseModel, ValidationError

from app.config import Settings, settings as default_settings
from app.exceptions import InvalidRequestError, PocketSommError
from api import endpoints
from api.endpoints import Endpoint
from api.error_classifier import classify
from api.responses import decode_payload, decode_status
from api.transport import RawResponse, Transport
from domain.enums import ResponseShape
from domain.schemas import (
    FavoriteFromPhotoResponse,
    Insights,
    MenuWine,
    SearchResult,
    SimilarWine,
    SurveyAnswers,
    UserProfile,
    WineDetail,
    WineProfile,
)

logger = logging.getLogger("pocketsomm.client")


def _build(endpoint: Endpoint, **fields: Any) -> BaseModel:
    """Construct the request body declared for `endpoint`, mapping validation
    errors to InvalidRequestError"""
    try:
        return endpoint.request_model(**fields)
    except ValidationError as exc:
        problems = {
            ".".join(str(p) for p in err["loc"]) or "body": err["msg"] for err in exc.errors()
        }
        raise InvalidRequestError("Could not create the request.", details=problems) from exc


class PocketSommClient:
    """Typed async client for the PocketSomm backend.

    Construct one per process (see `api.dependencies.open_client`) and pass it
    to whoever needs it; all endpoints share its single Transport.

    Args:
        transport: configured Transport
        shape_override: when set, every endpoint is decoded with this shape
            instead of the one declared in the registry
    """

    def __init__(
        self, transport: Transport, *, shape_override: Optional[ResponseShape] = None
    ) -> None:
        self._transport = transport
        self._shape_override = shape_override

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "PocketSommClient":
        cfg = settings or default_settings
        return cls(
            Transport.from_settings(cfg, transport=transport),
            shape_override=cfg.response_shape,
        )

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "PocketSommClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    def shape_for(self, endpoint: Endpoint) -> ResponseShape:
        return self._shape_override or endpoint.shape

    async def exchange(
        self,
        endpoint: Endpoint,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        body: Optional[BaseModel] = None,
        query: Optional[Mapping[str, str]] = None,
    ) -> RawResponse:
        """Send one request for `endpoint` and return the classified 2xx response.

        Raises:
            InvalidRequestError: path parameters could not be filled, or `body`
                is not the request model the endpoint declares
            TransportFailure, BadStatus, ServerReported, DecodeFailure
        """
        path = endpoint.build_path(**(path_params or {}))
        if endpoint.request_model is None:
            if body is not None:
                raise InvalidRequestError(
                    f"{endpoint.name} takes no request body", details={"endpoint": endpoint.name}
                )
        elif not isinstance(body, endpoint.request_model):
            raise InvalidRequestError(
                f"{endpoint.name} expects a {endpoint.request_model.__name__} body",
                details={"endpoint": endpoint.name, "body": type(body).__name__},
            )
        json_body = body.model_dump(mode="json", exclude_none=True) if body is not None else None

        raw = await self._transport.send(
            endpoint.method.value, path, json_body=json_body, params=query
        )

        error = classify(raw.status_code, raw.content)
        if error is not None:
            logger.warning(
                f"{endpoint.name} failed: {type(error).__name__} status={raw.status_code}"
            )
            raise error
        return raw

    async def call(
        self,
        endpoint: Endpoint,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        body: Optional[BaseModel] = None,
        query: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Send one request for `endpoint` and return its decoded payload.

        Endpoints without a response type return None for any 2xx.
        """
        raw = await self.exchange(endpoint, path_params=path_params, body=body, query=query)

        if endpoint.response_type is None:
            return None

        try:
            return decode_payload(raw.content, endpoint.response_type, self.shape_for(endpoint))
        except PocketSommError as exc:
            logger.warning(f"{endpoint.name} returned an undecodable body: {exc}")
            logger.debug(f"{endpoint.name} raw body: {raw.text[:2000]}")
            raise

    # ------------------------------------------------------------------
    # Endpoint catalogue
    # ------------------------------------------------------------------

    async def health(self) -> str:
        """GET /health; any 2xx is healthy. Returns the body's `status` string,
        "ok" when the body carries none (including non-JSON bodies)."""
        raw = await self.exchange(endpoints.HEALTH)
        return decode_status(raw.content)

    async def add_favorite_from_photo(
        self, user_id: str, image_bytes: bytes, content_type: str = "image/jpeg"
    ) -> FavoriteFromPhotoResponse:
        """Identify the wine in a label photo and add it to the user's favorites."""
        body = _build(
            endpoints.FAVORITE_FROM_PHOTO,
            image_base64=base64.b64encode(image_bytes).decode("ascii"),
            content_type=content_type,
        )
        return await self.call(
            endpoints.FAVORITE_FROM_PHOTO, path_params={"user_id": user_id}, body=body
        )

    async def submit_survey(
        self, user_id: str, answers: SurveyAnswers
    ) -> Optional[UserProfile]:
        """Store taste survey answers; returns the updated user when echoed back."""
        result = await self.call(
            endpoints.SUBMIT_SURVEY, path_params={"user_id": user_id}, body=answers
        )
        return result.user

    async def fetch_user_profile(self, user_id: str) -> UserProfile:
        result = await self.call(
            endpoints.FETCH_USER_PROFILE, path_params={"user_id": user_id}
        )
        return result.user

    async def fetch_wine_detail(self, wine_id: str) -> WineDetail:
        return await self.call(
            endpoints.FETCH_WINE_DETAIL, path_params={"wine_id": wine_id}
        )

    async def fetch_similar_wines(self, wine_id: str) -> List[SimilarWine]:
        result = await self.call(
            endpoints.FETCH_SIMILAR_WINES, path_params={"wine_id": wine_id}
        )
        return result.similar

    async def add_tasting(
        self,
        user_id: str,
        wine_id: str,
        rating: float,
        context: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> UserProfile:
        """Record a tasting; `context` and `notes` are omitted from the body when None."""
        body = _build(
            endpoints.ADD_TASTING, wine_id=wine_id, rating=rating, context=context, notes=notes
        )
        result = await self.call(
            endpoints.ADD_TASTING, path_params={"user_id": user_id}, body=body
        )
        return result.user

    async def add_favorite_by_name(self, user_id: str, wine_name: str) -> UserProfile:
        body = _build(endpoints.ADD_FAVORITE_BY_NAME, wine_name=(wine_name or "").strip())
        result = await self.call(
            endpoints.ADD_FAVORITE_BY_NAME, path_params={"user_id": user_id}, body=body
        )
        return result.user

    async def recommend_from_menu_pdf(self, user_id: str, pdf_bytes: bytes) -> List[MenuWine]:
        """Upload a wine list PDF and return the entries matching the user's taste."""
        body = _build(
            endpoints.RECOMMEND_FROM_MENU_PDF,
            pdf_base64=base64.b64encode(pdf_bytes).decode("ascii"),
        )
        result = await self.call(
            endpoints.RECOMMEND_FROM_MENU_PDF, path_params={"user_id": user_id}, body=body
        )
        return result.menu_wines

    async def fetch_user_insights(self, user_id: str) -> Insights:
        return await self.call(
            endpoints.FETCH_USER_INSIGHTS, path_params={"user_id": user_id}
        )

    async def search_wines(self, query: str) -> List[SearchResult]:
        """Free-text wine search. A blank query returns [] without a request."""
        trimmed = (query or "").strip()
        if not trimmed:
            return []
        return await self.call(endpoints.SEARCH_WINES, query={"q": trimmed})

    async def resolve_wine_by_name(self, name: str) -> WineProfile:
        """Resolve free text to a wine profile without touching the user's data."""
        trimmed = (name or "").strip()
        if not trimmed:
            raise InvalidRequestError("Wine name cannot be empty.")
        result = await self.call(
            endpoints.RESOLVE_WINE_BY_NAME,
            body=_build(endpoints.RESOLVE_WINE_BY_NAME, wine_name=trimmed),
        )
        return result.profile

    async def add_favorite_from_profile(self, user_id: str, profile: WineProfile) -> None:
        """Add a previously resolved profile to favorites. Any 2xx is success."""
        await self.call(
            endpoints.ADD_FAVORITE_FROM_PROFILE,
            path_params={"user_id": user_id},
            body=_build(endpoints.ADD_FAVORITE_FROM_PROFILE, profile=profile),
        )
