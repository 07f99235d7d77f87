"""
Domain layer - Wire DTOs, enums, and display mappers.
"""

from domain import enums, schemas

__all__ = ["enums", "schemas"]
