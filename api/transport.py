"""
HTTP transport shared by every PocketSomm endpoint.
One configured httpx.AsyncClient, one attempt per call, no caching.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import anyio
import httpx

from app.config import Settings, validate_base_url
from app.exceptions import DecodeFailure
from api.error_classifier import classify
from api.middleware import RequestLoggingHooks, log_transport_failure

logger = logging.getLogger("pocketsomm.transport")


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport:
    """Issues HTTP requests against the configured backend.

    Args:
        base_url: absolute http(s) URL of the backend; validated eagerly
        request_timeout: connect/read/write/pool timeout in seconds
        resource_timeout: upper bound on one whole exchange, None for no bound
        user_agent: value of the User-Agent header, None for the httpx default
        transport: optional httpx transport (ASGI app, mock) used in tests
    """

    def __init__(
        self,
        base_url: Optional[str],
        *,
        request_timeout: float = 120.0,
        resource_timeout: Optional[float] = 240.0,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = validate_base_url(base_url)
        self._resource_timeout = resource_timeout
        self._hooks = RequestLoggingHooks()
        headers = {"Accept": "application/json"}
        if user_agent:
            headers["User-Agent"] = user_agent
        self._session = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(request_timeout),
            headers=headers,
            event_hooks=self._hooks.event_hooks(),
            transport=transport,
        )
        logger.debug(
            f"transport_ready base_url={self._base_url} request_timeout={request_timeout} "
            f"resource_timeout={resource_timeout}"
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "Transport":
        return cls(
            settings.api_base_url,
            request_timeout=settings.request_timeout_sec,
            resource_timeout=settings.resource_timeout_sec,
            user_agent=f"{settings.app_name}/{settings.app_version}",
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def send(
        self,
        method: str,
        path: str,
        json_body: Optional[Any] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> RawResponse:
        """
        Send one request and return its status code and raw body.

        `json_body` is serialized as JSON with `Content-Type: application/json`.

        Raises:
            TransportFailure: no response was received (DNS, refused, timeout)
            DecodeFailure: the body could not be decoded per its Content-Encoding
        """
        started = time.perf_counter()
        try:
            with anyio.fail_after(self._resource_timeout):
                response = await self._session.request(
                    method, path, json=json_body, params=params
                )
        except httpx.DecodingError as exc:
            log_transport_failure(
                method, f"{self._base_url}{path}", exc, time.perf_counter() - started
            )
            raise DecodeFailure(exc) from exc
        except (httpx.RequestError, TimeoutError) as exc:
            log_transport_failure(
                method, f"{self._base_url}{path}", exc, time.perf_counter() - started
            )
            raise classify(None, transport_error=exc) from exc

        return RawResponse(status_code=response.status_code, content=response.content)

    async def aclose(self) -> None:
        await self._session.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
