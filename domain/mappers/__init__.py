"""
Domain mappers package.
Derives display values from wire DTOs.
"""

from domain.mappers.wine_mapper import WineMapper

__all__ = ["WineMapper"]
