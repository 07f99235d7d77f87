"""
Response envelope models and payload decoding.
The backend answers either with the bare object or with `{status, data}`;
each endpoint declares which one it expects.
"""

from functools import lru_cache
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from app.exceptions import DecodeFailure
from domain.enums import ResponseShape

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Generic `{status, data}` wrapper used by the newer backend contract"""

    status: str = Field(..., description="Informational status string")
    data: T = Field(..., description="Response payload")


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, str]] = Field(None, description="Additional error details")

    @field_validator("details", mode="before")
    @classmethod
    def stringify_details(cls, v):
        if isinstance(v, dict):
            return {str(key): value if isinstance(value, str) else str(value) for key, value in v.items()}
        return v


class ErrorEnvelope(BaseModel):
    """Standardized error response, present only on failures"""

    error: ErrorDetail = Field(..., description="Error details")


class StatusResponse(BaseModel):
    """Health check / acknowledgement body"""

    status: str = Field(default="ok", description="Service status")


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def decode_bare(raw: bytes, response_type: Any) -> Any:
    return _adapter(response_type).validate_json(raw)


def decode_enveloped(raw: bytes, response_type: Any) -> Any:
    return _adapter(Envelope[response_type]).validate_json(raw).data


def decode_payload(
    raw: bytes, response_type: Any, shape: ResponseShape = ResponseShape.BARE
) -> Any:
    """
    Decode a success body into `response_type`.

    Args:
        raw: response body bytes
        response_type: pydantic model or typing construct (e.g. List[SearchResult])
        shape: declared envelope form of the payload

    Returns:
        The decoded value (for ENVELOPED, the `data` substructure)

    Raises:
        DecodeFailure: the body matches none of the accepted shapes
    """
    try:
        if shape == ResponseShape.ENVELOPED:
            return decode_enveloped(raw, response_type)
        if shape == ResponseShape.BARE:
            return decode_bare(raw, response_type)
    except ValidationError as exc:
        raise DecodeFailure(exc) from exc

    # AUTO: envelope first, then the bare object
    try:
        return decode_enveloped(raw, response_type)
    except ValidationError:
        pass
    try:
        return decode_bare(raw, response_type)
    except ValidationError as exc:
        raise DecodeFailure(exc) from exc


def parse_error_envelope(raw: bytes) -> Optional[ErrorEnvelope]:
    """Return the error envelope in `raw`, or None if there is none."""
    if not raw:
        return None
    try:
        return ErrorEnvelope.model_validate_json(raw)
    except ValidationError:
        return None


def decode_status(raw: bytes) -> str:
    """Return the `status` string of a 2xx acknowledgement body.

    Falls back to "ok" when the body is empty, not JSON, or has no string
    `status`; the 2xx status alone means success.
    """
    try:
        payload = _adapter(Any).validate_json(raw)
    except ValidationError:
        return "ok"
    if isinstance(payload, dict):
        try:
            return StatusResponse.model_validate(payload).status
        except ValidationError:
            pass
    return "ok"
