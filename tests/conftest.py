"""Pytest shared fixtures for the management client tests."""
import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from authok.management import Management

DOMAIN = "example.authok.cn"
BASE_URL = f"https://{DOMAIN}/api/v1"


class _StubResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None):
        self._payload = payload
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text
        self.content = text.encode("utf-8")
        self.reason = ""

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(response=self)

    def close(self):
        self.closed = True


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from hitting the network.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _no_send(self, prepared, **kwargs):
        raise RuntimeError(f"Unexpected network access in unit test: {prepared.method} {prepared.url}")

    monkeypatch.setattr(requests.Session, "send", _no_send)


# ─────────────────────────────────────────────────────────────────────────────
# Management client with a stubbed session
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def stub_response():
    return _StubResponse


@pytest.fixture()
def api():
    """Management client whose session returns an empty 200 by default.

    Set ``api._session.request.return_value`` to script a response and read
    ``api._session.request.call_args`` to inspect what was sent.
    """
    client = Management(DOMAIN, static_token="token")
    client._session.request = MagicMock(return_value=_StubResponse())
    return client


@pytest.fixture()
def last_request(api):
    """Return the method, URL and keyword arguments of the last call sent."""

    def _last() -> dict:
        args, kwargs = api._session.request.call_args
        return {"method": args[0], "url": args[1], **kwargs}

    return _last


@pytest.fixture()
def last_body(last_request):
    """Return the decoded JSON body of the last call sent."""

    def _body() -> Any:
        data = last_request()["data"]
        return json.loads(data) if data else None

    return _body
