"""
App package - Client configuration and error types.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, Settings, validate_base_url
from app.exceptions import (
    PocketSommError,
    ConfigurationError,
    InvalidRequestError,
    TransportFailure,
    BadStatus,
    ServerReported,
    DecodeFailure,
    describe_error,
)

__all__ = [
    "settings",
    "Settings",
    "validate_base_url",
    "PocketSommError",
    "ConfigurationError",
    "InvalidRequestError",
    "TransportFailure",
    "BadStatus",
    "ServerReported",
    "DecodeFailure",
    "describe_error",
]
