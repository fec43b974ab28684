"""Tests for URL construction and domain validation."""
from urllib.parse import unquote

import pytest

from authok.management import InvalidDomainError, Management, parse_domain


@pytest.fixture()
def client():
    return Management("example.authok.cn", static_token="token")


def test_uri_joins_segments_under_base_path(client):
    assert client.uri("users") == "https://example.authok.cn/api/v1/users"
    assert client.uri("roles", "rol_1", "users") == "https://example.authok.cn/api/v1/roles/rol_1/users"


def test_uri_without_segments_is_base_url(client):
    assert client.uri() == "https://example.authok.cn/api/v1"


@pytest.mark.parametrize(
    "segment,escaped",
    [
        ("authok|1234/5678", "authok%7C1234%2F5678"),
        ("with space", "with%20space"),
        ("100%", "100%25"),
        ("a$b&c+d:e=f@g", "a$b&c+d:e=f@g"),
        ("query?x#frag", "query%3Fx%23frag"),
    ],
)
def test_uri_escapes_each_segment(client, segment, escaped):
    url = client.uri("users", segment)
    assert url == f"https://example.authok.cn/api/v1/users/{escaped}"
    assert unquote(url.rsplit("/", 1)[1]) == segment


def test_uri_stringifies_non_string_segments(client):
    assert client.uri("stats", 7).endswith("/stats/7")


@pytest.mark.parametrize(
    "domain,host",
    [
        ("example.authok.cn", "example.authok.cn"),
        ("https://example.authok.cn", "example.authok.cn"),
        ("https://example.authok.cn/", "example.authok.cn"),
        ("http://localhost:8080", "localhost:8080"),
        ("my-tenant.cn.authok.cn", "my-tenant.cn.authok.cn"),
    ],
)
def test_parse_domain_strips_scheme_and_slash(domain, host):
    assert parse_domain(domain) == host


@pytest.mark.parametrize(
    "domain",
    [
        "",
        "example .authok.cn",
        "example.authok.cn\n",
        "example%2Eauthok.cn",
        "example.authok.cn/api",
        "example..authok.cn",
        "example.authok.cn:port",
        "user@example.authok.cn",
    ],
)
def test_invalid_domains_rejected(domain):
    with pytest.raises(InvalidDomainError):
        Management(domain, static_token="token")


def test_invalid_domain_is_value_error():
    with pytest.raises(ValueError):
        parse_domain("bad domain")


def test_insecure_uses_http_and_insecure_token():
    client = Management("localhost:8080", insecure=True)
    assert client.uri("users") == "http://localhost:8080/api/v1/users"
    assert client.token_source.token() == "insecure"


def test_no_credentials_logs_warning(caplog):
    with caplog.at_level("WARNING", logger="authok.management.management"):
        client = Management("example.authok.cn")
    assert client.token_source is None
    assert "No credentials configured" in caplog.text
