"""Tests for the request dispatcher."""
import threading
import time
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import requests

from authok.management import (
    Context,
    DeadlineExceededError,
    DecodeError,
    Management,
    ManagementError,
    RequestCancelledError,
    TransportError,
    body_field,
    context,
    header,
    per_page,
)
from authok.management.role import Permission, Role
from authok.management.rule import Rule
from authok.management.transport import rate_limit_retry
from authok.management.user import User


def test_get_sends_no_body(api, last_request, stub_response):
    api._session.request.return_value = stub_response({"id": "rul_1", "name": "r"})

    rule = api.rule.read("rul_1")

    assert rule == Rule(id="rul_1", name="r")
    call = last_request()
    assert call["method"] == "GET"
    assert call["url"] == "https://example.authok.cn/api/v1/rules/rul_1"
    assert call["data"] is None


def test_payload_encoded_as_compact_json(api, last_request):
    api.rule.create(Rule(name="r", script="function () {}", enabled=True))

    assert last_request()["data"] == '{"name":"r","script":"function () {}","enabled":true}'


def test_body_field_merged_into_payload(api, last_body):
    api.user.update("authok|1", User(name="n"), body_field("connection", "db"))

    assert last_body() == {"name": "n", "connection": "db"}


def test_list_sends_default_paging(api, last_request):
    api.rule.list()

    assert last_request()["params"] == {"page_size": "50", "include_totals": "true"}


def test_list_caller_options_win(api, last_request):
    api.rule.list(per_page(10))

    assert last_request()["params"]["page_size"] == "10"


def test_empty_response_returns_none(api, stub_response):
    api._session.request.return_value = stub_response(status_code=204)

    assert api.rule.delete("rul_1") is None


def test_error_envelope_raises_management_error(api, stub_response):
    api._session.request.return_value = stub_response(
        {"statusCode": 404, "error": "Not Found", "message": "The user does not exist.", "errorCode": "inexistent_user"},
        status_code=404,
    )

    with pytest.raises(ManagementError) as exc_info:
        api.user.read("authok|missing")

    err = exc_info.value
    assert err.status_code == 404
    assert err.status == 404
    assert err.error == "Not Found"
    assert err.error_code == "inexistent_user"
    assert str(err) == "404 Not Found: The user does not exist."


def test_non_json_error_uses_status_line(api, stub_response):
    api._session.request.return_value = stub_response(status_code=502, text="upstream unavailable")

    with pytest.raises(ManagementError) as exc_info:
        api.rule.read("rul_1")

    assert exc_info.value.status_code == 502
    assert exc_info.value.error == "Bad Gateway"
    assert exc_info.value.message == "upstream unavailable"


def test_invalid_json_raises_decode_error(api, stub_response):
    api._session.request.return_value = stub_response(text="<html>")

    with pytest.raises(DecodeError):
        api.rule.read("rul_1")


def test_mismatched_shape_raises_decode_error(api, stub_response):
    api._session.request.return_value = stub_response({"enabled": "yes"})

    with pytest.raises(DecodeError):
        api.rule.read("rul_1")


def test_network_failure_raises_transport_error(api):
    api._session.request.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(TransportError):
        api.rule.read("rul_1")


def test_cancelled_context_sends_nothing(api):
    ctx = Context.with_cancel()
    ctx.cancel()

    with pytest.raises(RequestCancelledError):
        api.rule.read("rul_1", context(ctx))

    api._session.request.assert_not_called()


def test_expired_deadline_sends_nothing(api):
    ctx = Context.with_timeout(0)

    with pytest.raises(DeadlineExceededError):
        api.rule.read("rul_1", context(ctx))

    api._session.request.assert_not_called()


def test_deadline_bounds_timeout(api, last_request):
    api.rule.read("rul_1", context(Context.with_timeout(5)))

    assert 0 < last_request()["timeout"] <= 5


def test_default_timeout(api, last_request):
    api.rule.read("rul_1")

    assert last_request()["timeout"] == api.timeout


def test_timeout_past_deadline_raises_deadline_exceeded(api):
    ctx = Context.with_timeout(0.05)

    def _slow(*args, **kwargs):
        time.sleep(0.1)
        raise requests.Timeout("read timed out")

    api._session.request.side_effect = _slow

    with pytest.raises(DeadlineExceededError):
        api.rule.read("rul_1", context(ctx))


def test_cancel_while_in_flight(api, stub_response):
    ctx = Context.with_cancel()

    def _cancel_then_answer(*args, **kwargs):
        ctx.cancel()
        return stub_response({"id": "rul_1"})

    api._session.request.side_effect = _cancel_then_answer

    with pytest.raises(RequestCancelledError):
        api.rule.read("rul_1", context(ctx))


def test_parent_context_cancellation_propagates(api):
    parent = Context.with_cancel()
    child = Context.with_timeout(60, parent=parent)
    parent.cancel()

    with pytest.raises(RequestCancelledError):
        api.rule.read("rul_1", context(child))


def test_client_default_context(stub_response):
    ctx = Context.with_cancel()
    client = Management("example.authok.cn", static_token="token", context=ctx)
    client._session.request = MagicMock(return_value=stub_response())
    ctx.cancel()

    with pytest.raises(RequestCancelledError):
        client.rule.read("rul_1")


def test_header_option_sent(api, last_request):
    api.rule.read("rul_1", header("X-Correlation-Id", "abc"))

    assert last_request()["headers"] == {"X-Correlation-Id": "abc"}


def test_list_payload(api, last_body):
    api.user.assign_roles("authok|1", [Role(id="rol_1", name="admin"), Role(id="rol_2")])

    assert last_body() == {"roles": ["rol_1", "rol_2"]}


def test_permission_list_payload_keeps_objects(api, last_body):
    permission = Permission(name="read:users", resource_server_identifier="https://api.example.com")

    api.user.assign_permissions("authok|1", [permission])

    assert last_body() == {
        "permissions": [
            {"permission_name": "read:users", "resource_server_identifier": "https://api.example.com"}
        ]
    }


def _blocking_request(release):
    def _request(*args, **kwargs):
        release.wait(5)
        raise requests.ConnectionError("connection dropped")

    return _request


def test_cancel_interrupts_blocked_request(api):
    ctx = Context.with_cancel()
    release = threading.Event()
    api._session.request.side_effect = _blocking_request(release)
    timer = threading.Timer(0.05, ctx.cancel)
    timer.start()

    started = time.monotonic()
    try:
        with pytest.raises(RequestCancelledError):
            api.rule.read("rul_1", context(ctx))
    finally:
        release.set()
        timer.cancel()

    assert time.monotonic() - started < 1


def test_deadline_interrupts_blocked_request(api):
    ctx = Context.with_timeout(0.1)
    release = threading.Event()
    api._session.request.side_effect = _blocking_request(release)

    started = time.monotonic()
    try:
        with pytest.raises(DeadlineExceededError):
            api.rule.read("rul_1", context(ctx))
    finally:
        release.set()

    assert time.monotonic() - started < 1


def test_deadline_interrupts_rate_limit_backoff(api, stub_response):
    ctx = Context.with_timeout(0.2)
    sleeps = []

    def _rate_limited(*args, **kwargs):
        retry = rate_limit_retry()
        for _ in range(10):
            sleeps.append(1)
            retry.sleep(SimpleNamespace(headers={"Retry-After": "3"}))
        return stub_response({"statusCode": 429, "error": "Too Many Requests"}, status_code=429)

    api._session.request.side_effect = _rate_limited

    started = time.monotonic()
    with pytest.raises(DeadlineExceededError):
        api.rule.read("rul_1", context(ctx))

    assert time.monotonic() - started < 1
    # The worker gives up on its first backoff once the caller leaves
    time.sleep(0.1)
    assert len(sleeps) == 1


def test_cancel_callback_unregistered_after_call(api, stub_response):
    ctx = Context.with_cancel()
    api._session.request.return_value = stub_response({"id": "rul_1"})

    api.rule.read("rul_1", context(ctx))

    assert ctx._callbacks == []
