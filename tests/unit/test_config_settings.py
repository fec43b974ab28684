import pytest

from authok.config import settings
from authok.config.settings import ManagementSettings, load_settings
from authok.management import ClientCredentials, Management, StaticToken

ENV_VARS = [
    "AUTHOK_DOMAIN",
    "AUTHOK_CLIENT_ID",
    "AUTHOK_CLIENT_SECRET",
    "AUTHOK_API_TOKEN",
    "AUTHOK_AUDIENCE",
    "AUTHOK_DEBUG",
    "AUTHOK_TIMEOUT",
    "AUTHOK_USER_AGENT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Empty secrets directory unless a test writes into it
    monkeypatch.setattr(settings, "SECRETS_DIR", tmp_path)
    return tmp_path


def test_client_secret_prefers_config_value():
    cfg = ManagementSettings(domain="example.authok.cn", client_secret="from-config")
    assert cfg.client_secret_resolved == "from-config"


def test_client_secret_reads_from_run_secrets(clean_env, monkeypatch):
    (clean_env / "authok_client_secret").write_text("file-secret\n")
    monkeypatch.setenv("AUTHOK_CLIENT_SECRET", "env-secret")

    cfg = ManagementSettings(domain="example.authok.cn")
    assert cfg.client_secret_resolved == "file-secret"


def test_client_secret_falls_back_to_env(monkeypatch):
    monkeypatch.setenv("AUTHOK_CLIENT_SECRET", "env-secret")

    cfg = ManagementSettings(domain="example.authok.cn")
    assert cfg.client_secret_resolved == "env-secret"


def test_client_secret_missing_raises():
    cfg = ManagementSettings(domain="example.authok.cn")
    with pytest.raises(ValueError):
        _ = cfg.client_secret_resolved


def test_load_settings_requires_domain():
    with pytest.raises(RuntimeError):
        load_settings()


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("AUTHOK_DOMAIN", "example.authok.cn")
    monkeypatch.setenv("AUTHOK_CLIENT_ID", "client-id")
    monkeypatch.setenv("AUTHOK_CLIENT_SECRET", "client-secret")
    monkeypatch.setenv("AUTHOK_AUDIENCE", "https://api.example.com")
    monkeypatch.setenv("AUTHOK_DEBUG", "on")
    monkeypatch.setenv("AUTHOK_TIMEOUT", "12.5")

    cfg = load_settings()

    assert cfg == ManagementSettings(
        domain="example.authok.cn",
        client_id="client-id",
        client_secret="client-secret",
        static_token="",
        audience="https://api.example.com",
        debug=True,
        timeout=12.5,
        user_agent="",
    )


@pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("on", True), ("false", False), ("0", False)])
def test_load_settings_debug_flag(monkeypatch, value, expected):
    monkeypatch.setenv("AUTHOK_DOMAIN", "example.authok.cn")
    monkeypatch.setenv("AUTHOK_DEBUG", value)

    assert load_settings().debug is expected


def test_load_settings_invalid_timeout(monkeypatch):
    monkeypatch.setenv("AUTHOK_DOMAIN", "example.authok.cn")
    monkeypatch.setenv("AUTHOK_TIMEOUT", "soon")

    with pytest.raises(RuntimeError):
        load_settings()


def test_load_settings_warns_without_credentials(monkeypatch, caplog):
    monkeypatch.setenv("AUTHOK_DOMAIN", "example.authok.cn")

    with caplog.at_level("WARNING", logger="authok.config.settings"):
        load_settings()

    assert "AUTHOK_API_TOKEN" in caplog.text


def test_secrets_never_logged(monkeypatch, caplog):
    monkeypatch.setenv("AUTHOK_DOMAIN", "example.authok.cn")
    monkeypatch.setenv("AUTHOK_CLIENT_ID", "client-id")
    monkeypatch.setenv("AUTHOK_CLIENT_SECRET", "super-secret-value")

    with caplog.at_level("DEBUG"):
        load_settings()

    assert "super-secret-value" not in caplog.text


def test_from_settings_with_static_token():
    cfg = ManagementSettings(domain="example.authok.cn", static_token="static", timeout=5)

    client = Management.from_settings(cfg)

    assert isinstance(client.token_source, StaticToken)
    assert client.timeout == 5


def test_from_settings_with_client_credentials():
    cfg = ManagementSettings(domain="example.authok.cn", client_id="id", client_secret="secret")

    client = Management.from_settings(cfg, rate_limit=False)

    assert isinstance(client.token_source, ClientCredentials)


def test_from_settings_missing_secret_raises():
    cfg = ManagementSettings(domain="example.authok.cn", client_id="id")

    with pytest.raises(ValueError):
        Management.from_settings(cfg)


def test_from_settings_user_agent():
    cfg = ManagementSettings(domain="example.authok.cn", static_token="t", user_agent="my-tool/2.0")

    client = Management.from_settings(cfg)

    assert client._session.headers["User-Agent"] == "my-tool/2.0"
