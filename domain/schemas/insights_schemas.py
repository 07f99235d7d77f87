from pydantic import BaseModel, Field
from typing import List


class Insights(BaseModel):
    """Taste summary computed from the user's favorites and tastings"""

    summary: str
    top_grapes: List[str] = Field(default_factory=list)
    top_countries: List[str] = Field(default_factory=list)
    top_regions: List[str] = Field(default_factory=list)
    top_vintages: List[int] = Field(default_factory=list)

    model_config = {"from_attributes": True}
