"""
Domain enums for the PocketSomm client.
Contains all enumeration types used across the DTOs and the API layer.
"""

import enum


class PreferenceLevel(str, enum.Enum):
    """Taste survey preference intensity"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ResponseShape(str, enum.Enum):
    """How an endpoint wraps its success payload.

    BARE       the payload is the object itself
    ENVELOPED  the payload is `{"status": ..., "data": <object>}`
    AUTO       try ENVELOPED, then BARE (legacy; a bare object holding a
               matching `data` key is unwrapped)
    """

    BARE = "bare"
    ENVELOPED = "enveloped"
    AUTO = "auto"


class HttpMethod(str, enum.Enum):
    """HTTP methods used by the backend"""

    GET = "GET"
    POST = "POST"
