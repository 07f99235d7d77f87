from pydantic import BaseModel, Field
from typing import List, Optional

from domain.mappers.wine_mapper import WineMapper
from domain.schemas.user_schemas import UserProfile


class WineProfile(BaseModel):
    """LLM-resolved wine profile returned by the photo and resolve-text
    endpoints. Every field is optional; `not_found` is set when the backend
    could not identify the wine."""

    input_name: Optional[str] = None
    resolved_name: Optional[str] = None
    producer: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    appellation: Optional[str] = None
    color: Optional[str] = None
    grapes: Optional[List[str]] = None
    vintage_typical: Optional[str] = None
    body: Optional[str] = None
    acidity: Optional[str] = None
    tannin: Optional[str] = None
    sweetness: Optional[str] = None
    oak: Optional[str] = None
    style_description: Optional[str] = None
    confidence: Optional[str] = None
    notes: Optional[str] = None
    not_found: Optional[bool] = None

    model_config = {"from_attributes": True}

    @property
    def region_line(self) -> str:
        return WineMapper.region_line(self.appellation, self.region, self.country)


class WineDetail(BaseModel):
    wine_id: str
    name: str
    producer: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    appellation: Optional[str] = None
    color: Optional[str] = None
    grapes_line: Optional[str] = None
    embedding_text: Optional[str] = None
    image_base64: Optional[str] = None
    image_url: Optional[str] = None

    model_config = {"from_attributes": True}

    @property
    def display_name(self) -> str:
        if self.name and self.name.strip():
            return self.name
        return WineMapper.humanize_wine_id(self.wine_id)

    @property
    def region_line(self) -> str:
        return WineMapper.region_line(self.appellation, self.region, self.country)


class SimilarWine(BaseModel):
    wine_id: str
    name: str
    producer: Optional[str] = None
    region: Optional[str] = None
    score: float

    model_config = {"from_attributes": True}


class SimilarWinesResponse(BaseModel):
    wine_id: Optional[str] = None
    similar: List[SimilarWine]


class SearchResult(BaseModel):
    wine_id: str
    name: str
    producer: Optional[str] = None

    model_config = {"from_attributes": True}


class ResolveWineRequest(BaseModel):
    wine_name: str = Field(..., min_length=1)


class ResolveWineResponse(BaseModel):
    status: Optional[str] = None
    profile: WineProfile


class FavoriteFromPhotoRequest(BaseModel):
    image_base64: str = Field(..., min_length=1)
    content_type: str = "image/jpeg"


class FavoriteFromPhotoResponse(BaseModel):
    """Photo identification result; `user` is the updated profile when the
    backend includes it."""

    status: Optional[str] = None
    wine_profile: WineProfile
    user: Optional[UserProfile] = None


class FavoriteFromProfileRequest(BaseModel):
    profile: WineProfile
