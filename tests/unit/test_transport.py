"""Tests for the transport session: headers, auth and rate-limit retry."""
import base64
import json
import logging
import platform
import threading
import time
from types import SimpleNamespace
from unittest.mock import MagicMock

import requests

from authok._version import __version__
from authok.management import ClientInfo, Management, StaticToken
from authok.management.transport import (
    CLIENT_INFO_HEADER,
    RATE_LIMIT_MAX_RETRIES,
    USER_AGENT,
    BearerAuth,
    CallAbandoned,
    InFlightCall,
    RateLimitRetry,
    _rate_limit_hook,
    build_session,
    rate_limit_retry,
)


def _decode_header(value):
    return json.loads(base64.b64decode(value))


def test_default_client_info_header():
    session = build_session(StaticToken("t"))

    assert _decode_header(session.headers[CLIENT_INFO_HEADER]) == {
        "name": "authok-python",
        "version": __version__,
        "env": {"python": platform.python_version()},
    }


def test_custom_client_info_header():
    client = Management("example.authok.cn", static_token="t", client_info=ClientInfo("my-app", "1.2.3"))

    assert _decode_header(client._session.headers[CLIENT_INFO_HEADER]) == {"name": "my-app", "version": "1.2.3"}


def test_client_info_header_disabled():
    client = Management("example.authok.cn", static_token="t", client_info=None)

    assert CLIENT_INFO_HEADER not in client._session.headers


def test_user_agent():
    assert build_session(None).headers["User-Agent"] == USER_AGENT
    assert build_session(None, user_agent="custom/1.0").headers["User-Agent"] == "custom/1.0"
    assert USER_AGENT == f"authok-python/{__version__}"


def test_bearer_auth_sets_header():
    prepared = requests.Request("GET", "https://example.authok.cn/api/v1/users").prepare()

    BearerAuth(StaticToken("abc"))(prepared)

    assert prepared.headers["Authorization"] == "Bearer abc"


def test_no_token_source_means_no_auth():
    assert build_session(None).auth is None


def test_bearer_token_fetched_per_request():
    source = MagicMock()
    source.token.side_effect = ["first", "second"]
    auth = BearerAuth(source)

    one = auth(requests.Request("GET", "https://x").prepare())
    two = auth(requests.Request("GET", "https://x").prepare())

    assert one.headers["Authorization"] == "Bearer first"
    assert two.headers["Authorization"] == "Bearer second"


def test_rate_limit_retry_policy():
    retry = rate_limit_retry()

    assert retry.total == RATE_LIMIT_MAX_RETRIES
    assert retry.status == RATE_LIMIT_MAX_RETRIES
    assert tuple(retry.status_forcelist) == (429,)
    assert retry.connect == 0
    assert retry.read == 0
    assert retry.respect_retry_after_header is True
    assert retry.raise_on_status is False
    assert retry.allowed_methods is None


def test_rate_limit_adapter_mounted():
    session = build_session(StaticToken("t"))

    for prefix in ("https://example.authok.cn", "http://localhost"):
        assert session.get_adapter(prefix).max_retries.total == RATE_LIMIT_MAX_RETRIES


def test_rate_limit_disabled():
    session = build_session(StaticToken("t"), rate_limit=False)

    assert session.get_adapter("https://example.authok.cn").max_retries.total == 0


def test_exhausted_rate_limit_logs_warning(caplog):
    response = MagicMock(status_code=429)
    response.request.method = "GET"
    response.request.url = "https://example.authok.cn/api/v1/users"

    with caplog.at_level(logging.WARNING, logger="authok.management.transport"):
        _rate_limit_hook(response)

    assert "Rate limit still exceeded" in caplog.text


def test_debug_hook_installed_only_when_enabled():
    assert len(build_session(None).hooks["response"]) == 1
    assert len(build_session(None, debug=True).hooks["response"]) == 2


def test_no_rate_limit_hook_when_retry_disabled():
    assert build_session(None, rate_limit=False).hooks["response"] == []


def test_wraps_existing_session():
    existing = requests.Session()
    session = build_session(StaticToken("t"), session=existing)

    assert session is existing
    assert session.headers["Content-Type"] == "application/json"


def test_rate_limit_retry_is_abandonable():
    assert isinstance(rate_limit_retry(), RateLimitRetry)
    assert isinstance(build_session(None).get_adapter("https://example.authok.cn").max_retries, RateLimitRetry)


def test_retry_after_sleep_ends_when_call_abandoned():
    def _send():
        retry_after = SimpleNamespace(headers={"Retry-After": "30"})
        rate_limit_retry().sleep(retry_after)

    wake = threading.Event()
    call = InFlightCall(_send, wake)
    call.start()
    threading.Timer(0.05, call.abandon).start()

    started = time.monotonic()
    assert call.finished.wait(2)

    assert isinstance(call.error, CallAbandoned)
    assert time.monotonic() - started < 2
    assert wake.is_set()


def test_in_flight_call_returns_response():
    response = MagicMock()
    wake = threading.Event()
    call = InFlightCall(lambda: response, wake)
    call.start()

    assert wake.wait(2)
    assert call.response is response
    assert call.error is None
    response.close.assert_not_called()


def test_abandoned_call_closes_late_response():
    release = threading.Event()
    response = MagicMock()

    def _send():
        release.wait(2)
        return response

    call = InFlightCall(_send, threading.Event())
    call.start()
    call.abandon()
    release.set()

    assert call.finished.wait(2)
    response.close.assert_called()
