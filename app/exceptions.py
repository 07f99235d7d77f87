from typing import Any, Mapping, Optional


class PocketSommError(Exception):
    """Base class for every error raised by the PocketSomm client.

    Attributes:
        message: diagnostic message (may include low-level details)
        details: optional mapping with extra context
        code: optional machine-readable error code
        user_message: text safe to show to an end user
    """

    default_user_message = "Something went wrong."

    def __init__(
        self,
        message: str = "PocketSomm client error",
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    @property
    def user_message(self) -> str:
        return self.default_user_message

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {
            "kind": type(self).__name__,
            "message": self.user_message,
        }
        if self.code is not None:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PocketSommError):
    """Raised when API_BASE_URL is missing or malformed.

    Raised before any request is attempted.
    """

    def __init__(self, raw_value: Optional[str], reason: str = "malformed base URL"):
        super().__init__(
            f"Invalid API configuration ({reason}): {raw_value!r}",
            details={"reason": reason},
            code="CONFIGURATION_ERROR",
        )
        self.raw_value = raw_value

    @property
    def user_message(self) -> str:
        return f"Invalid API configuration: {self.raw_value or ''}".rstrip()


class InvalidRequestError(PocketSommError):
    """Raised when a request cannot be built from the caller's input."""

    def __init__(self, message: str = "Could not create the request.", details=None):
        super().__init__(message, details=details, code="INVALID_REQUEST")

    @property
    def user_message(self) -> str:
        return self.message


class TransportFailure(PocketSommError):
    """Network-level failure before any HTTP status was received
    (DNS, timeout, connection refused, ...)."""

    default_user_message = "Could not reach the PocketSomm server. Check your connection and try again."

    def __init__(self, underlying: BaseException, message: Optional[str] = None):
        super().__init__(
            message or f"Transport error: {underlying!r}",
            details={"underlying": type(underlying).__name__},
            code="TRANSPORT_ERROR",
        )
        self.underlying = underlying


class BadStatus(PocketSommError):
    """Non-2xx response whose body is not an error envelope."""

    def __init__(self, status_code: int, body_text: str = ""):
        super().__init__(
            f"HTTP {status_code}: {body_text}" if body_text else f"HTTP {status_code}",
            code=status_code,
        )
        self.status_code = status_code
        self.body_text = body_text

    @property
    def user_message(self) -> str:
        return f"Server error (HTTP {self.status_code})."


class ServerReported(PocketSommError):
    """Non-2xx response carrying an `{"error": {...}}` envelope."""

    def __init__(
        self,
        status_code: int,
        code: int,
        message: str,
        details: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(message, details=details, code=code)
        self.status_code = status_code

    @property
    def user_message(self) -> str:
        if self.message:
            return self.message
        return f"Server error (HTTP {self.status_code})."


class DecodeFailure(PocketSommError):
    """2xx response whose body does not match the expected type."""

    default_user_message = "Unexpected server response."

    def __init__(self, underlying: BaseException):
        super().__init__(
            f"Failed to decode server response: {underlying}",
            code="DECODE_ERROR",
        )
        self.underlying = underlying

    def to_dict(self) -> dict:
        # parse internals stay out of user-facing payloads
        return {"kind": type(self).__name__, "message": self.user_message, "code": self.code}


def describe_error(exc: BaseException) -> str:
    """Return a message suitable for showing to an end user."""
    if isinstance(exc, PocketSommError):
        return exc.user_message
    return str(exc) or PocketSommError.default_user_message
