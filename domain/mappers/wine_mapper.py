"""
Wine display mappers.
Derives human-readable labels from backend identifiers and location fields.
"""

from typing import Optional


class WineMapper:
    """Display helpers shared by the wine and user DTOs."""

    @staticmethod
    def humanize_wine_id(wine_id: str) -> str:
        """
        Turn a backend wine id into a display label.

        Example:
            >>> WineMapper.humanize_wine_id("chateau_margaux-2015")
            'Chateau Margaux 2015'
        """
        spaced = wine_id.replace("_", " ").replace("-", " ")
        return " ".join(word.capitalize() for word in spaced.split())

    @staticmethod
    def region_line(
        appellation: Optional[str], region: Optional[str], country: Optional[str]
    ) -> str:
        """Join the non-empty location parts, most specific first."""
        parts = [p.strip() for p in (appellation, region, country) if p and p.strip()]
        return " · ".join(parts)
