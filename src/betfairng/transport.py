"""JSON-RPC over HTTP transport (httpx) and the transport protocol."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Protocol

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from betfairng.config.settings import (
    DEFAULT_ACCOUNT_ENDPOINT,
    DEFAULT_BETTING_ENDPOINT,
    DEFAULT_IDENTITY_ENDPOINT,
)
from betfairng.errors import APIError, AuthenticationError, TransportError

if TYPE_CHECKING:
    from betfairng.session import Session

log = structlog.get_logger(__name__)

# Service group -> JSON-RPC method prefix
METHOD_PREFIXES = {
    "betting": "SportsAPING/v1.0/",
    "account": "AccountAPING/v1.0/",
}


class Transport(Protocol):
    """Callable that performs one remote call and returns the raw result body."""

    def __call__(
        self,
        session: Session,
        service_group: str,
        method: str,
        body: bytes,
    ) -> bytes: ...


class RpcError(BaseModel):
    code: int = 0
    message: str = ""
    data: dict[str, Any] | None = None

    @property
    def error_code(self) -> str | None:
        """API-NG errorCode from the exception payload, if present."""
        if not self.data:
            return None
        name = self.data.get("exceptionname", "APINGException")
        detail = self.data.get(name)
        if isinstance(detail, dict):
            return detail.get("errorCode")
        return None


class RpcResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: RpcError | None = None


class LoginResponse(BaseModel):
    token: str = ""
    product: str = ""
    status: str = ""
    error: str = ""


def _envelope(rpc_method: str, body: bytes) -> bytes:
    """Wrap already-encoded params in a JSON-RPC 2.0 request."""
    return (
        b'{"jsonrpc":"2.0","method":'
        + json.dumps(rpc_method).encode("utf-8")
        + b',"params":'
        + body
        + b',"id":1}'
    )


def _raise_for_status(resp: httpx.Response, url: str) -> None:
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise TransportError(f"HTTP {resp.status_code} from {url}") from e


class HttpTransport:
    """Posts JSON-RPC requests to the exchange endpoints with httpx."""

    def __init__(
        self,
        endpoints: dict[str, str] | None = None,
        identity_endpoint: str = DEFAULT_IDENTITY_ENDPOINT,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        self.endpoints = {
            "betting": DEFAULT_BETTING_ENDPOINT,
            "account": DEFAULT_ACCOUNT_ENDPOINT,
            **(endpoints or {}),
        }
        self.identity_endpoint = identity_endpoint.rstrip("/")
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __call__(self, session: Session, service_group: str, method: str, body: bytes) -> bytes:
        url = self.endpoints.get(service_group)
        prefix = METHOD_PREFIXES.get(service_group)
        if url is None or prefix is None:
            raise TransportError(f"unknown service group: {service_group!r}")
        rpc_method = prefix + method
        headers = {
            "X-Application": session.app_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if session.session_token:
            headers["X-Authentication"] = session.session_token
        log.debug("rpc_call", url=url, method=rpc_method)
        try:
            resp = self._get_client().post(url, content=_envelope(rpc_method, body), headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"request to {url} failed: {e}") from e
        # Error payloads may arrive with a 4xx status; parse before checking it.
        try:
            reply = RpcResponse.model_validate_json(resp.content)
        except ValidationError as e:
            _raise_for_status(resp, url)
            raise TransportError(f"malformed JSON-RPC response from {url}") from e
        if reply.error is not None:
            log.warning(
                "rpc_error",
                method=rpc_method,
                code=reply.error.code,
                error_code=reply.error.error_code,
            )
            raise APIError(reply.error.message, code=reply.error.code, error_code=reply.error.error_code)
        _raise_for_status(resp, url)
        return json.dumps(reply.result, separators=(",", ":")).encode("utf-8")

    def login(self, app_key: str, username: str, password: str) -> str:
        """Interactive login; return the session token."""
        url = f"{self.identity_endpoint}/login"
        headers = {"X-Application": app_key, "Accept": "application/json"}
        try:
            resp = self._get_client().post(
                url, data={"username": username, "password": password}, headers=headers
            )
        except httpx.HTTPError as e:
            raise TransportError(f"request to {url} failed: {e}") from e
        _raise_for_status(resp, url)
        try:
            reply = LoginResponse.model_validate_json(resp.content)
        except ValidationError as e:
            raise TransportError(f"malformed login response from {url}") from e
        if reply.status != "SUCCESS" or not reply.token:
            raise AuthenticationError(reply.status or "UNKNOWN", reply.error or None)
        log.info("login_ok", product=reply.product)
        return reply.token
