"""Fixtures stubbing the gateway at the ``requests`` layer (no network)."""

from __future__ import annotations

import json
import threading
from typing import Any, Callable

import pytest
import requests

CLIENT_ID = "client-id-123456"
CLIENT_SECRET = "client-secret-abcdef"

Responder = Callable[[str, dict[str, Any]], "tuple[int, Any]"]


def make_response(url: str, status: int, body: Any) -> requests.Response:
    """Return a real ``requests.Response`` holding *body*.

    *body* is JSON-encoded unless it is already ``bytes``.
    """
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.reason = "OK" if status < 400 else "Error"
    resp.encoding = "utf-8"
    resp._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")  # type: ignore[attr-defined]
    resp.headers["Content-Type"] = "application/json"
    return resp


class FakeGateway:
    """Stand-in for ``requests.post`` that records every call."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._lock = threading.Lock()
        self.responder: Responder = lambda url, body: (200, {})

    def reply(self, body: Any, status: int = 200) -> None:
        """Answer every subsequent call with *body*."""
        self.responder = lambda url, payload: (status, body)

    def post(self, url: str, *, json: dict[str, Any], headers: dict[str, str], timeout: Any) -> requests.Response:  # noqa: A002
        with self._lock:
            self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        status, body = self.responder(url, json)
        return make_response(url, status, body)


@pytest.fixture()
def gateway(monkeypatch: pytest.MonkeyPatch) -> FakeGateway:
    """Patch ``requests.post`` with a :class:`FakeGateway`."""
    fake = FakeGateway()
    monkeypatch.setattr(requests, "post", fake.post, raising=True)
    return fake


@pytest.fixture()
def client():
    """Return a OneLoginClient configured with the test credentials."""
    from onelogin_gateway import OneLoginClient

    return OneLoginClient(client_id=CLIENT_ID, client_secret=CLIENT_SECRET)


@pytest.fixture()
def response_factory() -> Callable[[str, int, Any], requests.Response]:
    """Expose :func:`make_response` to tests building their own transports."""
    return make_response
