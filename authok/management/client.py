"""Clients (applications) and their credentials."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .manager import Manager
from .model import ListEnvelope, Model, attr
from .request import RequestOption, apply_list_defaults


@dataclass
class ClientJWTConfiguration(Model):
    # Lifetime of issued id tokens, in seconds
    lifetime_in_seconds: Optional[int] = None
    secret_encoded: Optional[bool] = None
    scopes: Optional[Dict[str, Any]] = None
    # "HS256" or "RS256"
    algorithm: Optional[str] = attr("alg")


@dataclass
class ClientRefreshToken(Model):
    # "rotating" or "non-rotating"
    rotation_type: Optional[str] = None
    # "expiring" or "non-expiring"
    expiration_type: Optional[str] = None
    leeway: Optional[int] = None
    token_lifetime: Optional[int] = None
    infinite_token_lifetime: Optional[bool] = None
    infinite_idle_token_lifetime: Optional[bool] = None
    idle_token_lifetime: Optional[int] = None


@dataclass
class Client(Model):
    id: Optional[str] = attr("client_id")
    name: Optional[str] = None
    description: Optional[str] = None
    client_secret: Optional[str] = None
    # "native", "spa", "regular_web" or "non_interactive"
    app_type: Optional[str] = None
    logo_uri: Optional[str] = None
    is_first_party: Optional[bool] = None
    is_token_endpoint_ip_header_trusted: Optional[bool] = None
    oidc_conformant: Optional[bool] = None
    callbacks: Optional[List[str]] = None
    allowed_origins: Optional[List[str]] = None
    web_origins: Optional[List[str]] = None
    client_aliases: Optional[List[str]] = None
    allowed_clients: Optional[List[str]] = None
    allowed_logout_urls: Optional[List[str]] = None
    jwt_configuration: Optional[ClientJWTConfiguration] = None
    encryption_key: Optional[Dict[str, str]] = None
    sso: Optional[bool] = None
    cross_origin_auth: Optional[bool] = None
    cross_origin_loc: Optional[str] = None
    sso_disabled: Optional[bool] = None
    custom_login_page_on: Optional[bool] = None
    custom_login_page: Optional[str] = None
    custom_login_page_preview: Optional[str] = None
    form_template: Optional[str] = None
    addons: Optional[Dict[str, Any]] = None
    # "none", "client_secret_post" or "client_secret_basic"
    token_endpoint_auth_method: Optional[str] = None
    grant_types: Optional[List[str]] = None
    client_metadata: Optional[Dict[str, str]] = None
    mobile: Optional[Dict[str, Any]] = None
    initiate_login_uri: Optional[str] = None
    native_social_login: Optional[Dict[str, Any]] = None
    refresh_token: Optional[ClientRefreshToken] = None
    # "deny", "allow" or "require"
    organization_usage: Optional[str] = None
    organization_require_behavior: Optional[str] = None


@dataclass
class ClientList(ListEnvelope):
    clients: Optional[List[Client]] = None


@dataclass
class Credential(Model):
    id: Optional[str] = None
    name: Optional[str] = None
    # "public_key"
    credential_type: Optional[str] = None
    pem: Optional[str] = None
    # "RS256", "RS384" or "PS256"
    algorithm: Optional[str] = attr("alg")
    parse_expiry_from_cert: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


class ClientManager(Manager):
    """Manage clients."""

    def create(self, client: Client, *opts: RequestOption) -> Client:
        return self.management.request("POST", self._uri("clients"), client, *opts, result=Client)

    def read(self, id: str, *opts: RequestOption) -> Client:
        return self.management.request("GET", self._uri("clients", id), None, *opts, result=Client)

    def update(self, id: str, client: Client, *opts: RequestOption) -> Client:
        return self.management.request("PATCH", self._uri("clients", id), client, *opts, result=Client)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("clients", id), None, *opts)

    def list(self, *opts: RequestOption) -> ClientList:
        return self.management.request("GET", self._uri("clients"), None, apply_list_defaults(opts), result=ClientList)

    def rotate_secret(self, id: str, *opts: RequestOption) -> Client:
        """Issue a new client secret; the old one stops working immediately."""
        return self.management.request("POST", self._uri("clients", id, "rotate-secret"), None, *opts, result=Client)

    def create_credential(self, id: str, credential: Credential, *opts: RequestOption) -> Credential:
        return self.management.request(
            "POST", self._uri("clients", id, "credentials"), credential, *opts, result=Credential
        )

    def list_credentials(self, id: str, *opts: RequestOption) -> List[Credential]:
        return self.management.request(
            "GET", self._uri("clients", id, "credentials"), None, *opts, result=List[Credential]
        )

    def read_credential(self, id: str, credential_id: str, *opts: RequestOption) -> Credential:
        return self.management.request(
            "GET", self._uri("clients", id, "credentials", credential_id), None, *opts, result=Credential
        )

    def delete_credential(self, id: str, credential_id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("clients", id, "credentials", credential_id), None, *opts)
