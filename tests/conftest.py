"""Shared fixtures: fake transport and session."""

from __future__ import annotations

import json
from typing import Any

import pytest

from betfairng.session import Session


class FakeTransport:
    """Records calls and returns a canned body (or raises a canned error)."""

    def __init__(self, response: bytes = b"[]", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, bytes]] = []
        self.last_session: Session | None = None

    def __call__(self, session: Session, service_group: str, method: str, body: bytes) -> bytes:
        self.calls.append((service_group, method, body))
        self.last_session = session
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.calls[-1][2])


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def session(transport):
    return Session(app_key="test-app", session_token="tok", locale="en", transport=transport)


@pytest.fixture
def make_session():
    """Build a Session around a FakeTransport with the given response or error."""

    def _make(response: bytes = b"[]", error: Exception | None = None, **kwargs: Any) -> Session:
        return Session(transport=FakeTransport(response=response, error=error), **kwargs)

    return _make
