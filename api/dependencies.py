"""
Client lifecycle for dependency injection
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from app.config import Settings
from api.client import PocketSommClient


@asynccontextmanager
async def open_client(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[PocketSommClient]:
    """
    Build the process-wide client at startup and close it on exit.

    Usage:
        async with open_client() as client:
            service = ProfileService(client)
            ...

    Raises:
        ConfigurationError: API_BASE_URL is missing or malformed
    """
    client = PocketSommClient.from_settings(settings, transport=transport)
    try:
        yield client
    finally:
        await client.aclose()
