"""Typed client for the Betfair Exchange betting API (JSON-RPC)."""

from betfairng.errors import (
    APIError,
    AuthenticationError,
    BetfairError,
    DeserializationError,
    SerializationError,
    TransportError,
)
from betfairng.session import Session
from betfairng.transport import HttpTransport, Transport

__all__ = [
    "Session",
    "HttpTransport",
    "Transport",
    "BetfairError",
    "SerializationError",
    "DeserializationError",
    "TransportError",
    "APIError",
    "AuthenticationError",
]
