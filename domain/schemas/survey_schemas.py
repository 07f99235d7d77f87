from pydantic import BaseModel, Field, field_validator
from typing import List

from domain.enums import PreferenceLevel


class SurveyAnswers(BaseModel):
    """Taste survey answers; also the POST /user/{id}/survey body."""

    favorite_styles: List[str] = Field(default_factory=list)
    tannin_pref: PreferenceLevel = PreferenceLevel.MEDIUM
    acidity_pref: PreferenceLevel = PreferenceLevel.MEDIUM
    oak_pref: PreferenceLevel = PreferenceLevel.LOW
    adventure_pref: PreferenceLevel = PreferenceLevel.MEDIUM

    model_config = {"from_attributes": True}

    @field_validator(
        "tannin_pref", "acidity_pref", "oak_pref", "adventure_pref", mode="before"
    )
    @classmethod
    def normalize_pref(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def default(cls) -> "SurveyAnswers":
        return cls()
