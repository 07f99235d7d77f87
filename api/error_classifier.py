"""
Error classification for backend exchanges.
Maps a transport failure, a non-2xx status, or an undecodable 2xx body to
the most specific PocketSommError.
"""

from typing import Optional

from app.exceptions import (
    BadStatus,
    DecodeFailure,
    PocketSommError,
    ServerReported,
    TransportFailure,
)
from api.responses import parse_error_envelope


def is_success(status_code: Optional[int]) -> bool:
    return status_code is not None and 200 <= status_code < 300


def body_text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").strip() if raw else ""


def classify(
    status_code: Optional[int],
    raw: bytes = b"",
    transport_error: Optional[BaseException] = None,
    decode_error: Optional[BaseException] = None,
) -> Optional[PocketSommError]:
    """
    Classify the outcome of one request.

    Rules, in order:
    1. transport_error set            -> TransportFailure
    2. status outside [200, 300)      -> ServerReported if the body is an
                                         error envelope, else BadStatus
    3. 2xx with decode_error set      -> DecodeFailure
    4. otherwise                      -> None (success)
    """
    if transport_error is not None:
        if isinstance(transport_error, TransportFailure):
            return transport_error
        return TransportFailure(transport_error)

    if status_code is None:
        return TransportFailure(RuntimeError("no response received"))

    if not is_success(status_code):
        envelope = parse_error_envelope(raw)
        if envelope is not None:
            err = envelope.error
            return ServerReported(status_code, err.code, err.message, err.details)
        return BadStatus(status_code, body_text(raw))

    if decode_error is not None:
        if isinstance(decode_error, DecodeFailure):
            return decode_error
        return DecodeFailure(decode_error)

    return None
