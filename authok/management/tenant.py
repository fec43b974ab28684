"""Tenant settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from .branding import BrandingColors
from .exceptions import DecodeError
from .manager import Manager
from .model import M, Model, attr
from .request import RequestOption

_MINUTES_PER_HOUR = 60


@dataclass
class TenantChangePassword(Model):
    enabled: Optional[bool] = None
    html: Optional[str] = None


@dataclass
class TenantGuardianMFAPage(Model):
    enabled: Optional[bool] = None
    html: Optional[str] = None


@dataclass
class TenantErrorPage(Model):
    html: Optional[str] = None
    show_log_link: Optional[bool] = None
    url: Optional[str] = None


@dataclass
class TenantFlags(Model):
    enable_client_connections: Optional[bool] = None
    enable_apis_section: Optional[bool] = None
    enable_pipeline2: Optional[bool] = None
    enable_dynamic_client_registration: Optional[bool] = None
    enable_custom_domain_in_emails: Optional[bool] = None
    allow_legacy_tokeninfo_endpoint: Optional[bool] = None
    enable_legacy_profile: Optional[bool] = None
    enable_idtoken_api2: Optional[bool] = None
    enable_public_signup_user_exists_error: Optional[bool] = None
    allow_legacy_delegation_grant_types: Optional[bool] = None
    allow_legacy_ro_grant_types: Optional[bool] = None
    enable_sso: Optional[bool] = None
    disable_clickjack_protection_headers: Optional[bool] = None
    no_disclose_enterprise_connections: Optional[bool] = None
    disable_management_api_sms_obfuscation: Optional[bool] = None
    enforce_client_authentication_on_passwordless_start: Optional[bool] = None
    revoke_refresh_token_grant: Optional[bool] = None
    dashboard_log_streams_next: Optional[bool] = None
    dashboard_insights_view: Optional[bool] = None
    disable_fields_map_fix: Optional[bool] = None


class TenantUniversalLoginColors(BrandingColors):
    """Universal login colors; same wire shape as the branding colors."""


@dataclass
class TenantUniversalLogin(Model):
    colors: Optional[TenantUniversalLoginColors] = None


@dataclass
class TenantSessionCookie(Model):
    # "persistent" or "non-persistent"
    mode: Optional[str] = None


def _encode_lifetime(data: Dict[str, Any], key: str, hours: Optional[float]) -> None:
    if hours is None:
        return
    if hours < 1:
        data[f"{key}_in_minutes"] = int(hours * _MINUTES_PER_HOUR)
    else:
        data[key] = int(hours)


def _decode_lifetime(data: Dict[str, Any], key: str) -> Optional[float]:
    for name, scale in ((key, 1), (f"{key}_in_minutes", _MINUTES_PER_HOUR)):
        raw = data.get(name)
        if raw is None:
            continue
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise DecodeError(f"unexpected type for field {name}: {type(raw).__name__}")
        return float(raw) / scale
    return None


@dataclass
class Tenant(Model):
    """Tenant settings.

    ``session_lifetime`` and ``idle_session_lifetime`` are in hours. The API
    only takes whole hours, so values of one hour or more are truncated and
    shorter ones are sent as whole minutes (``*_in_minutes``).
    """
    change_password: Optional[TenantChangePassword] = None
    guardian_mfa_page: Optional[TenantGuardianMFAPage] = None
    default_audience: Optional[str] = None
    default_directory: Optional[str] = None
    error_page: Optional[TenantErrorPage] = None
    friendly_name: Optional[str] = None
    picture_url: Optional[str] = None
    support_email: Optional[str] = None
    support_url: Optional[str] = None
    allowed_logout_urls: Optional[List[str]] = None
    session_lifetime: Optional[float] = attr(skip=True)
    idle_session_lifetime: Optional[float] = attr(skip=True)
    sandbox_version: Optional[str] = None
    sandbox_version_available: Optional[List[str]] = attr("sandbox_versions_available")
    default_redirection_uri: Optional[str] = None
    enabled_locales: Optional[List[str]] = None
    session_cookie: Optional[TenantSessionCookie] = None
    universal_login: Optional[TenantUniversalLogin] = None
    flags: Optional[TenantFlags] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        _encode_lifetime(data, "session_lifetime", self.session_lifetime)
        _encode_lifetime(data, "idle_session_lifetime", self.idle_session_lifetime)
        return data

    @classmethod
    def from_dict(cls: Type[M], data: Dict[str, Any]) -> M:
        tenant = super().from_dict(data)
        tenant.session_lifetime = _decode_lifetime(data, "session_lifetime")
        tenant.idle_session_lifetime = _decode_lifetime(data, "idle_session_lifetime")
        return tenant


class TenantManager(Manager):
    """Read and update the tenant settings."""

    def read(self, *opts: RequestOption) -> Tenant:
        return self.management.request("GET", self._uri("tenants", "settings"), None, *opts, result=Tenant)

    def update(self, tenant: Tenant, *opts: RequestOption) -> Tenant:
        """Update settings; only the fields set on ``tenant`` are sent."""
        return self.management.request("PATCH", self._uri("tenants", "settings"), tenant, *opts, result=Tenant)
