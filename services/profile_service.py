"""Profile service: taste survey, tastings and the profile/insights refresh."""

import logging
from dataclasses import dataclass
from typing import Optional

from api.client import PocketSommClient
from app.exceptions import PocketSommError
from domain.schemas import Insights, SurveyAnswers, UserProfile

logger = logging.getLogger("pocketsomm.profile")


@dataclass
class ProfileSnapshot:
    """Latest profile plus insights; insights is None when they failed to load."""

    profile: UserProfile
    insights: Optional[Insights] = None

    @property
    def survey_answers(self) -> SurveyAnswers:
        return self.profile.survey_answers or SurveyAnswers.default()


class ProfileService:
    """Business logic for the user's profile.

    Profile loads propagate their errors so the caller can show them;
    insights are an enrichment and only get logged on failure. Once a
    mutation has succeeded, the follow-up reload is best effort: it never
    turns the committed mutation into an error.
    """

    def __init__(self, client: PocketSommClient):
        self.client = client

    async def load_profile(self, user_id: str) -> UserProfile:
        profile = await self.client.fetch_user_profile(user_id)
        logger.info(
            f"profile_fetched user_id={user_id} favorites={len(profile.favorite_wines or [])}"
        )
        return profile

    async def load_insights(self, user_id: str) -> Optional[Insights]:
        try:
            return await self.client.fetch_user_insights(user_id)
        except PocketSommError as exc:
            logger.warning(f"insights_unavailable user_id={user_id} error={exc!r}")
            return None

    async def refresh(self, user_id: str) -> ProfileSnapshot:
        """Reload profile and insights from the backend."""
        profile = await self.load_profile(user_id)
        insights = await self.load_insights(user_id)
        return ProfileSnapshot(profile=profile, insights=insights)

    async def refresh_after_mutation(
        self, user_id: str, updated: Optional[UserProfile] = None
    ) -> Optional[ProfileSnapshot]:
        """
        Reload after a successful mutation.

        Args:
            user_id: user whose profile changed
            updated: the user returned by the mutation, if any

        Returns:
            The fresh snapshot; if the reload fails, a snapshot of `updated`
            (None when the mutation returned no user)
        """
        try:
            return await self.refresh(user_id)
        except PocketSommError as exc:
            logger.warning(f"refresh_after_mutation_failed user_id={user_id} error={exc!r}")
            if updated is None:
                return None
            return ProfileSnapshot(profile=updated)

    async def submit_survey(
        self, user_id: str, answers: SurveyAnswers
    ) -> Optional[ProfileSnapshot]:
        updated = await self.client.submit_survey(user_id, answers)
        logger.info(f"survey_submitted user_id={user_id}")
        return await self.refresh_after_mutation(user_id, updated)

    async def add_tasting(
        self,
        user_id: str,
        wine_id: str,
        rating: float,
        context: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Optional[ProfileSnapshot]:
        updated = await self.client.add_tasting(
            user_id, wine_id, rating, context=context, notes=notes
        )
        logger.info(f"tasting_added user_id={user_id} wine_id={wine_id} rating={rating}")
        return await self.refresh_after_mutation(user_id, updated)
