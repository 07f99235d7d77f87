from pydantic import BaseModel, Field, model_validator
from typing import List, Optional

from domain.mappers.wine_mapper import WineMapper
from domain.schemas.survey_schemas import SurveyAnswers


class FavoriteEntry(BaseModel):
    wine_id: str
    source: Optional[str] = None
    added_at: Optional[str] = None

    model_config = {"from_attributes": True}

    @property
    def display_name(self) -> str:
        return WineMapper.humanize_wine_id(self.wine_id)


class Tasting(BaseModel):
    wine_id: str
    rating: float
    context: Optional[str] = None
    notes: Optional[str] = None
    timestamp: Optional[str] = None

    model_config = {"from_attributes": True}


class UserProfile(BaseModel):
    user_id: str
    survey_answers: Optional[SurveyAnswers] = None
    style_vec: Optional[List[float]] = None
    favorite_wines: Optional[List[FavoriteEntry]] = None
    tastings: Optional[List[Tasting]] = None

    model_config = {"from_attributes": True}

    @property
    def favorite_wine_ids(self) -> List[str]:
        return [entry.wine_id for entry in self.favorite_wines or []]


class UserProfileResponse(BaseModel):
    """GET /user/{id} payload: `{"user": {...}}`, or the bare user object
    served by older backends."""

    user: UserProfile

    @model_validator(mode="before")
    @classmethod
    def accept_bare_user(cls, data):
        if isinstance(data, dict) and "user" not in data and "user_id" in data:
            return {"user": data}
        return data


class UserUpdateResponse(BaseModel):
    """Mutation acknowledgement carrying the updated user."""

    status: Optional[str] = None
    user: UserProfile


class AddTastingRequest(BaseModel):
    wine_id: str = Field(..., min_length=1)
    rating: float = Field(..., ge=0, le=5, description="Star rating, 0 to 5 in half steps")
    context: Optional[str] = None
    notes: Optional[str] = None


class FavoriteByNameRequest(BaseModel):
    wine_name: str = Field(..., min_length=1)


class SurveyResponse(BaseModel):
    """Survey acknowledgement. Newer backends echo the updated user."""

    status: str = "ok"
    user: Optional[UserProfile] = None
