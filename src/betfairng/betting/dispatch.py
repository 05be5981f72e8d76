"""Typed dispatcher - serialize Params, call the transport, decode the reply."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from betfairng.errors import DeserializationError, SerializationError

if TYPE_CHECKING:
    from betfairng.models import Params
    from betfairng.session import Session

log = structlog.get_logger(__name__)

BETTING = "betting"

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def encode_params(params: Params) -> bytes:
    """Sparse JSON encoding of params; raises SerializationError."""
    try:
        return params.to_wire().encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode params: {e}") from e


def decode_result(data: bytes | str, result_type: type[T]) -> T:
    """Validate raw response bytes into ``result_type``; raises DeserializationError."""
    try:
        return _adapter(result_type).validate_json(data)
    except ValidationError as e:
        raise DeserializationError(f"cannot decode {result_type}: {e}") from e


def do_betting_request(
    session: Session,
    method: str,
    params: Params,
    result_type: type[T],
) -> T:
    """Execute one betting RPC and return the decoded result.

    Transport exceptions propagate unchanged. Nothing is retried and nothing is
    logged on failure; the caller gets the exception.
    """
    params = params.model_copy(update={"locale": session.locale})
    body = encode_params(params)
    log.debug("betting_request", method=method, body_bytes=len(body))
    data = session.transport(session, BETTING, method, body)
    return decode_result(data, result_type)
