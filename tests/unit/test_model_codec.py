"""Tests for model encoding and decoding."""
import json
from datetime import datetime, timezone

import pytest

from authok.management import NULL, DecodeError, stringify
from authok.management.branding import Branding, BrandingColors, BrandingPageBackgroundGradient
from authok.management.connection import ConnectionOptionsGoogleOAuth2, ConnectionOptionsOIDC
from authok.management.email_provider import (
    EmailProvider,
    EmailProviderCredentialsSES,
    EmailProviderSettingsSES,
    EmailProviderSettingsSESMessage,
)
from authok.management.log import Log
from authok.management.log_stream import LogStream, LogStreamSinkHTTP, LogStreamSinkSplunk
from authok.management.role import RoleList
from authok.management.rule import Rule
from authok.management.tenant import Tenant, TenantUniversalLogin, TenantUniversalLoginColors
from authok.management.user import User, UserIdentity


# ─────────────────────────────────────────────────────────────────────────────
# Presence semantics
# ─────────────────────────────────────────────────────────────────────────────
def test_unset_fields_are_omitted():
    assert Rule(name="r").to_dict() == {"name": "r"}
    assert Rule().to_dict() == {}


def test_falsy_values_are_sent():
    assert Rule(name="", order=0, enabled=False).to_dict() == {"name": "", "order": 0, "enabled": False}


def test_null_encodes_explicit_null():
    assert json.loads(ConnectionOptionsGoogleOAuth2(allowed_audiences=NULL).to_json()) == {"allowed_audiences": None}


def test_stringify_is_indented_json():
    rule = Rule(name="r", enabled=True)
    assert stringify(rule) == json.dumps({"name": "r", "enabled": True}, indent=2)


def test_unknown_keys_are_ignored():
    rule = Rule.from_dict({"id": "rul_1", "unknown": 1})
    assert rule.id == "rul_1"


def test_wrong_json_type_raises_decode_error():
    with pytest.raises(DecodeError):
        Rule.from_dict({"order": "first"})


def test_datetime_decoded():
    log = Log.from_dict({"_id": "1", "date": "2023-01-02T03:04:05.000Z", "type": "s"})
    assert log.id == "1"
    assert log.date == datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


# ─────────────────────────────────────────────────────────────────────────────
# Tri-state list
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "value,expected",
    [
        (None, {}),
        (NULL, {"allowed_audiences": None}),
        ([], {"allowed_audiences": []}),
        (["a", "b"], {"allowed_audiences": ["a", "b"]}),
    ],
)
def test_allowed_audiences_encoding(value, expected):
    assert ConnectionOptionsGoogleOAuth2(allowed_audiences=value).to_dict() == expected


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({}, None),
        ({"allowed_audiences": None}, NULL),
        ({"allowed_audiences": ""}, []),
        ({"allowed_audiences": []}, []),
        ({"allowed_audiences": ["a"]}, ["a"]),
    ],
)
def test_allowed_audiences_decoding(payload, expected):
    assert ConnectionOptionsGoogleOAuth2.from_dict(payload).allowed_audiences == expected


def test_allowed_audiences_wrong_type():
    with pytest.raises(DecodeError):
        ConnectionOptionsGoogleOAuth2.from_dict({"allowed_audiences": 5})


# ─────────────────────────────────────────────────────────────────────────────
# Lenient fields
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("raw,expected", [(True, True), ("true", True), ("false", False), (False, False)])
def test_email_verified_accepts_strings(raw, expected):
    assert User.from_dict({"email_verified": raw}).email_verified is expected


def test_email_verified_rejects_other_strings():
    with pytest.raises(DecodeError):
        User.from_dict({"email_verified": "yes"})


@pytest.mark.parametrize("raw,expected", [(12345, "12345"), (1.0, "1"), ("abc", "abc")])
def test_identity_user_id_accepts_numbers(raw, expected):
    assert UserIdentity.from_dict({"user_id": raw}).user_id == expected


def test_user_identities_decoded():
    user = User.from_dict({"user_id": "authok|1", "identities": [{"provider": "github", "user_id": 42}]})
    assert user.id == "authok|1"
    assert user.identities[0].user_id == "42"


# ─────────────────────────────────────────────────────────────────────────────
# Tenant session lifetimes
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "hours,expected",
    [
        (24, {"session_lifetime": 24}),
        (1, {"session_lifetime": 1}),
        (1.5, {"session_lifetime": 1}),
        (0.5, {"session_lifetime_in_minutes": 30}),
        (0.25, {"session_lifetime_in_minutes": 15}),
    ],
)
def test_session_lifetime_encoding(hours, expected):
    assert Tenant(session_lifetime=hours).to_dict() == expected


def test_idle_session_lifetime_encoding():
    assert Tenant(idle_session_lifetime=0.5).to_dict() == {"idle_session_lifetime_in_minutes": 30}
    assert Tenant(idle_session_lifetime=72).to_dict() == {"idle_session_lifetime": 72}


def test_session_lifetime_decoding():
    tenant = Tenant.from_dict({"session_lifetime_in_minutes": 30, "idle_session_lifetime": 72, "friendly_name": "t"})
    assert tenant.session_lifetime == 0.5
    assert tenant.idle_session_lifetime == 72.0
    assert tenant.friendly_name == "t"


def test_session_lifetime_absent():
    tenant = Tenant.from_dict({})
    assert tenant.session_lifetime is None
    assert tenant.idle_session_lifetime is None


def test_sandbox_versions_key():
    tenant = Tenant.from_dict({"sandbox_versions_available": ["12", "16"]})
    assert tenant.sandbox_version_available == ["12", "16"]


# ─────────────────────────────────────────────────────────────────────────────
# Branding page background
# ─────────────────────────────────────────────────────────────────────────────
def test_page_background_color():
    colors = BrandingColors(primary="#ea5323", page_background="#000000")
    assert colors.to_dict() == {"primary": "#ea5323", "page_background": "#000000"}


def test_page_background_gradient():
    gradient = BrandingPageBackgroundGradient(type="linear-gradient", start="#fff", end="#000", angle_deg=35)
    branding = Branding(colors=BrandingColors(page_background_gradient=gradient))
    assert branding.to_dict() == {
        "colors": {
            "page_background": {"type": "linear-gradient", "start": "#fff", "end": "#000", "angle_deg": 35},
        },
    }


def test_page_background_both_set_rejected():
    colors = BrandingColors(page_background="#000", page_background_gradient=BrandingPageBackgroundGradient())
    with pytest.raises(ValueError):
        colors.to_dict()


def test_page_background_decoding():
    flat = Branding.from_dict({"colors": {"page_background": "#000"}})
    assert flat.colors.page_background == "#000"
    assert flat.colors.page_background_gradient is None

    gradient = Branding.from_dict({"colors": {"page_background": {"type": "linear-gradient", "angle_deg": 35}}})
    assert gradient.colors.page_background is None
    assert gradient.colors.page_background_gradient.angle_deg == 35


def test_page_background_wrong_type():
    with pytest.raises(DecodeError):
        BrandingColors.from_dict({"page_background": 5})


def test_tenant_universal_login_colors_share_union():
    tenant = Tenant(universal_login=TenantUniversalLogin(colors=TenantUniversalLoginColors(page_background="#fff")))
    assert tenant.to_dict() == {"universal_login": {"colors": {"page_background": "#fff"}}}
    decoded = Tenant.from_dict({"universal_login": {"colors": {"page_background": {"start": "#fff"}}}})
    assert decoded.universal_login.colors.page_background_gradient.start == "#fff"


# ─────────────────────────────────────────────────────────────────────────────
# Variants
# ─────────────────────────────────────────────────────────────────────────────
def test_email_provider_encoding():
    provider = EmailProvider(
        name="ses",
        enabled=True,
        credentials=EmailProviderCredentialsSES(access_key_id="AK", secret_access_key="SK", region="eu-west-1"),
        settings=EmailProviderSettingsSES(message=EmailProviderSettingsSESMessage(configuration_set_name="cs")),
    )
    assert provider.to_dict() == {
        "name": "ses",
        "enabled": True,
        "credentials": {"accessKeyId": "AK", "secretAccessKey": "SK", "region": "eu-west-1"},
        "settings": {"message": {"configuration_set_name": "cs"}},
    }


def test_email_provider_credentials_as():
    provider = EmailProvider.from_dict({"name": "ses", "credentials": {"accessKeyId": "AK", "region": "us-east-1"}})
    creds = provider.credentials_as(EmailProviderCredentialsSES)
    assert creds.access_key_id == "AK"
    assert creds.region == "us-east-1"


def test_log_stream_encoding():
    stream = LogStream(name="http", type="http", sink=LogStreamSinkHTTP(endpoint="https://logs", content_format="JSONLINES"))
    assert stream.to_dict() == {
        "name": "http",
        "type": "http",
        "sink": {"httpContentFormat": "JSONLINES", "httpEndpoint": "https://logs"},
    }


def test_log_stream_sink_as():
    stream = LogStream.from_dict({"type": "splunk", "sink": {"splunkDomain": "d", "splunkPort": "8088"}})
    sink = stream.sink_as(LogStreamSinkSplunk)
    assert sink.domain == "d"
    assert sink.port == "8088"


def test_variant_must_be_object():
    with pytest.raises(DecodeError):
        LogStream.from_dict({"sink": "not-an-object"})


# ─────────────────────────────────────────────────────────────────────────────
# Scopes and list envelopes
# ─────────────────────────────────────────────────────────────────────────────
def test_scopes_helpers():
    options = ConnectionOptionsOIDC(scope="openid profile")
    assert options.scopes() == ["openid", "profile"]
    options.set_scopes(True, "email")
    assert options.scope == "email openid profile"
    options.set_scopes(False, "profile")
    assert options.scopes() == ["email", "openid"]


def test_list_envelope_from_object():
    roles = RoleList.from_dict({"roles": [{"id": "r1"}], "start": 0, "length": 1, "total": 3})
    assert [r.id for r in roles.items()] == ["r1"]
    assert roles.has_next()


def test_list_envelope_last_page():
    roles = RoleList.from_dict({"roles": [{"id": "r1"}], "start": 2, "length": 1, "total": 3})
    assert not roles.has_next()


def test_list_envelope_from_bare_array():
    roles = RoleList.from_items([{"id": "r1"}, {"id": "r2"}])
    assert len(roles.items()) == 2
    assert not roles.has_next()
