"""
Request logging hooks for the PocketSomm HTTP transport
"""

import time
import logging
from uuid import uuid4

import httpx

logger = logging.getLogger("pocketsomm.http")

REQUEST_ID_HEADER = "X-Request-ID"
_STARTED_AT = "pocketsomm.started_at"


# ============================================================================
# Request Logging Hooks
# ============================================================================


class RequestLoggingHooks:
    """httpx event hooks that log every outbound request and its response"""

    def event_hooks(self) -> dict:
        return {"request": [self.on_request], "response": [self.on_response]}

    async def on_request(self, request: httpx.Request) -> None:
        # Generate unique request ID
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.headers[REQUEST_ID_HEADER] = request_id
        request.extensions[_STARTED_AT] = time.perf_counter()

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
            },
        )

    async def on_response(self, response: httpx.Response) -> None:
        request = response.request
        started = request.extensions.get(_STARTED_AT)
        process_time = time.perf_counter() - started if started is not None else 0.0
        fields = {
            "request_id": request.headers.get(REQUEST_ID_HEADER),
            "method": request.method,
            "url": str(request.url),
            "status_code": response.status_code,
            "process_time": f"{process_time:.4f}s",
        }

        if response.is_success:
            logger.info("Request completed", extra=fields)
        else:
            logger.warning("Request completed with error status", extra=fields)


def log_transport_failure(method: str, url: str, exc: BaseException, process_time: float) -> None:
    """Log a request that never produced a response"""
    logger.warning(
        "Request failed",
        extra={
            "method": method,
            "url": url,
            "error": repr(exc),
            "process_time": f"{process_time:.4f}s",
        },
    )
