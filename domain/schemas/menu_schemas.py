from pydantic import BaseModel, Field
from typing import List, Optional


class MenuWine(BaseModel):
    """A wine list entry the backend matched to the user's taste."""

    wine_id: str
    label: str

    model_config = {"from_attributes": True}


class MenuRecommendationResponse(BaseModel):
    """POST /user/{id}/menu/pdf payload. Sibling fields such as `results`
    are ignored; only `menu_wines` is kept."""

    status: Optional[str] = None
    menu_wines: List[MenuWine]


class MenuPdfRequest(BaseModel):
    pdf_base64: str = Field(..., min_length=1)
