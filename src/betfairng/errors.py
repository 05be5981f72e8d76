"""Exception hierarchy for the betting client."""

from __future__ import annotations


class BetfairError(Exception):
    """Base class for every error raised by betfairng."""


class SerializationError(BetfairError):
    """Outbound params could not be encoded; raised before any network call."""


class DeserializationError(BetfairError):
    """Response body did not match the expected result shape."""


class TransportError(BetfairError):
    """Opaque failure from the transport (connectivity, HTTP status, remote error)."""


class APIError(TransportError):
    """Remote side returned a JSON-RPC error payload."""

    def __init__(self, message: str, code: int | None = None, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"{self.message} ({self.error_code})"
        return self.message


class AuthenticationError(TransportError):
    """Login was rejected by the identity endpoint."""

    def __init__(self, status: str, error: str | None = None):
        super().__init__(f"login failed: {status}" + (f" ({error})" if error else ""))
        self.status = status
        self.error = error
