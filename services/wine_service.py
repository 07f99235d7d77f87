"""Wine service: detail pages, search and menu recommendations."""

import logging
from dataclasses import dataclass, field
from typing import List

from api.client import PocketSommClient
from app.exceptions import PocketSommError
from domain.schemas import MenuWine, SearchResult, SimilarWine, WineDetail

logger = logging.getLogger("pocketsomm.wines")


@dataclass
class WineDetailBundle:
    detail: WineDetail
    similar: List[SimilarWine] = field(default_factory=list)


class WineService:
    """Business logic for browsing wines."""

    def __init__(self, client: PocketSommClient):
        self.client = client

    async def load_wine(self, wine_id: str) -> WineDetailBundle:
        """
        Load a wine and its neighbours.

        Detail failures propagate. Similar wines only enrich the page, so a
        failure there is logged and yields an empty list.
        """
        detail = await self.client.fetch_wine_detail(wine_id)
        try:
            similar = await self.client.fetch_similar_wines(wine_id)
        except PocketSommError as exc:
            logger.warning(f"similar_wines_unavailable wine_id={wine_id} error={exc!r}")
            similar = []
        return WineDetailBundle(detail=detail, similar=similar)

    async def search(self, query: str) -> List[SearchResult]:
        results = await self.client.search_wines(query)
        logger.info(f"wine_search query={query.strip()!r} results={len(results)}")
        return results

    async def recommend_from_menu(self, user_id: str, pdf_bytes: bytes) -> List[MenuWine]:
        wines = await self.client.recommend_from_menu_pdf(user_id, pdf_bytes)
        logger.info(f"menu_recommendations user_id={user_id} matches={len(wines)}")
        return wines
