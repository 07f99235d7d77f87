"""API package - HTTP client for the PocketSomm backend"""

from api.client import PocketSommClient
from api.dependencies import open_client
from api.endpoints import ENDPOINTS, Endpoint
from api.error_classifier import classify
from api.responses import Envelope, ErrorEnvelope, decode_payload
from api.transport import RawResponse, Transport

__all__ = [
    "PocketSommClient",
    "open_client",
    "ENDPOINTS",
    "Endpoint",
    "classify",
    "Envelope",
    "ErrorEnvelope",
    "decode_payload",
    "RawResponse",
    "Transport",
]
