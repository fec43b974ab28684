"""Connections: identity sources users authenticate against.

The shape of ``Connection.options`` depends on the strategy. The options are
kept as a raw mapping on decode; pick the concrete shape with
``Connection.options_as``:

    conn = api.connection.read("con_123")
    google = conn.options_as(ConnectionOptionsGoogleOAuth2)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from .exceptions import ManagementError
from .manager import Manager
from .model import M, ListEnvelope, Model, TriStateList, Variant, attr, decode_variant
from .request import RequestOption, apply_list_defaults, parameter


class _Scopes:
    """Space separated ``scope`` helpers."""

    scope: Optional[str]

    def scopes(self) -> List[str]:
        """Return the configured scopes, sorted."""
        return sorted(set((self.scope or "").split()))

    def set_scopes(self, enable: bool, *scopes: str) -> None:
        """Add (``enable=True``) or remove scopes."""
        current = set(self.scopes())
        if enable:
            current.update(scopes)
        else:
            current.difference_update(scopes)
        self.scope = " ".join(sorted(current))


@dataclass
class ConnectionOptions(Model):
    """Options of the ``authok`` (database) strategy."""
    validation: Optional[Dict[str, Any]] = None
    password_policy: Optional[str] = attr("passwordPolicy")
    password_history: Optional[Dict[str, Any]] = None
    password_no_personal_info: Optional[Dict[str, Any]] = None
    password_dictionary: Optional[Dict[str, Any]] = None
    password_complexity_options: Optional[Dict[str, Any]] = None
    enabled_database_customization: Optional[bool] = attr("enabledDatabaseCustomization")
    brute_force_protection: Optional[bool] = None
    import_mode: Optional[bool] = None
    disable_signup: Optional[bool] = None
    requires_username: Optional[bool] = None
    custom_scripts: Optional[Dict[str, Any]] = attr("customScripts")
    configuration: Optional[Dict[str, Any]] = None
    strategy_version: Optional[int] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsGoogleOAuth2(Model):
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    email: Optional[bool] = None
    profile: Optional[bool] = None
    contacts: Optional[bool] = None
    blogger: Optional[bool] = None
    calendar: Optional[bool] = None
    gmail: Optional[bool] = None
    google_plus: Optional[bool] = None
    orkut: Optional[bool] = None
    picasa_web: Optional[bool] = None
    tasks: Optional[bool] = None
    youtube: Optional[bool] = None
    adsense_management: Optional[bool] = None
    google_affiliate_network: Optional[bool] = None
    analytics: Optional[bool] = None
    google_books: Optional[bool] = None
    google_cloud_storage: Optional[bool] = None
    google_drive: Optional[bool] = None
    google_drive_files: Optional[bool] = None
    latitude_best: Optional[bool] = None
    latitude_city: Optional[bool] = None
    moderator: Optional[bool] = None
    sites: Optional[bool] = None
    spreadsheets: Optional[bool] = None
    url_shortener: Optional[bool] = None
    webmaster_tools: Optional[bool] = None
    coordinate: Optional[bool] = None
    coordinate_readonly: Optional[bool] = None
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    scope: Optional[List[Any]] = None
    upstream_params: Optional[Dict[str, Any]] = None
    # None: not sent, NULL: explicit null, []: explicit empty list
    allowed_audiences: Any = attr(codec=TriStateList())


@dataclass
class ConnectionOptionsGoogleApps(Model):
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    domain: Optional[str] = None
    tenant_domain: Optional[str] = None
    basic_profile: Optional[bool] = attr("ext_basic_profile")
    extended_profile: Optional[bool] = attr("ext_extended_profile")
    groups: Optional[bool] = attr("ext_groups")
    admin: Optional[bool] = attr("ext_is_admin")
    is_suspended: Optional[bool] = attr("ext_is_suspended")
    agreed_terms: Optional[bool] = attr("ext_agreed_terms")
    enable_users_api: Optional[bool] = attr("api_enable_users")
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    domain_aliases: Optional[List[str]] = None
    logo_url: Optional[str] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsEmailSettings(Model):
    # "liquid"
    syntax: Optional[str] = None
    from_: Optional[str] = attr("from")
    subject: Optional[str] = None
    body: Optional[str] = None


@dataclass
class ConnectionOptionsOTP(Model):
    time_step: Optional[int] = None
    length: Optional[int] = None


@dataclass
class ConnectionOptionsEmail(Model):
    name: Optional[str] = None
    email: Optional[ConnectionOptionsEmailSettings] = None
    otp: Optional[ConnectionOptionsOTP] = attr("totp")
    auth_params: Optional[Dict[str, str]] = attr("authParams")
    disable_signup: Optional[bool] = None
    brute_force_protection: Optional[bool] = None
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionGatewayAuthentication(Model):
    # "bearer"
    method: Optional[str] = None
    subject: Optional[str] = None
    audience: Optional[str] = None
    secret: Optional[str] = None
    secret_base64_encoded: Optional[bool] = None


@dataclass
class ConnectionOptionsSMS(Model):
    name: Optional[str] = None
    from_: Optional[str] = attr("from")
    template: Optional[str] = None
    syntax: Optional[str] = None
    otp: Optional[ConnectionOptionsOTP] = attr("totp")
    auth_params: Optional[Dict[str, str]] = attr("authParams")
    disable_signup: Optional[bool] = None
    brute_force_protection: Optional[bool] = None
    twilio_sid: Optional[str] = None
    twilio_token: Optional[str] = None
    messaging_service_sid: Optional[str] = None
    # "twilio" or "sms_gateway"
    provider: Optional[str] = None
    gateway_url: Optional[str] = None
    gateway_authentication: Optional[ConnectionGatewayAuthentication] = None
    forward_request_info: Optional[bool] = attr("forward_req_info")
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsSAML(Model):
    cert: Optional[str] = None
    debug: Optional[bool] = None
    expires: Optional[str] = None
    idp_initiated: Optional[Dict[str, Any]] = attr("idpinitiated")
    sign_in_endpoint: Optional[str] = attr("signInEndpoint")
    sign_out_endpoint: Optional[str] = attr("signOutEndpoint")
    disable_sign_out: Optional[bool] = attr("disableSignout")
    signature_algorithm: Optional[str] = attr("signatureAlgorithm")
    digest_algorithm: Optional[str] = attr("digestAlgorithm")
    metadata_xml: Optional[str] = attr("metadataXml")
    metadata_url: Optional[str] = attr("metadataUrl")
    binding_method: Optional[str] = attr("protocolBinding")
    sign_saml_request: Optional[bool] = attr("signSAMLRequest")
    request_template: Optional[str] = attr("requestTemplate")
    user_id_attribute: Optional[str] = None
    logo_url: Optional[str] = None
    entity_id: Optional[str] = attr("entityId")
    signing_cert: Optional[str] = attr("signingCert")
    tenant_domain: Optional[str] = None
    domain_aliases: Optional[List[str]] = None
    fields_map: Optional[Dict[str, Any]] = attr("fieldsMap")
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsAD(Model):
    tenant_domain: Optional[str] = None
    domain_aliases: Optional[List[str]] = None
    logo_url: Optional[str] = None
    ips: Optional[List[str]] = None
    cert_auth: Optional[bool] = attr("certAuth")
    kerberos: Optional[bool] = None
    disable_cache: Optional[bool] = None
    brute_force_protection: Optional[bool] = None
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsADFS(Model):
    tenant_domain: Optional[str] = None
    domain_aliases: Optional[List[str]] = None
    logo_url: Optional[str] = None
    adfs_server: Optional[str] = None
    fed_metadata_xml: Optional[str] = attr("fedMetadataXml")
    enable_users_api: Optional[bool] = attr("api_enable_users")
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsSocial(Model):
    """Options shared by the plain social strategies.

    Used for ``facebook``, ``apple``, ``linkedin``, ``github``,
    ``windowslive`` and ``salesforce``; the strategy specific permission
    flags are carried as extra boolean fields.
    """
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    scope: Optional[str] = None
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsFacebook(ConnectionOptionsSocial):
    email: Optional[bool] = None
    public_profile: Optional[bool] = None
    allow_context_profile_field: Optional[bool] = None


@dataclass
class ConnectionOptionsApple(ConnectionOptionsSocial):
    team_id: Optional[str] = None
    kid: Optional[str] = None
    email: Optional[bool] = None
    name: Optional[bool] = None


@dataclass
class ConnectionOptionsLinkedin(ConnectionOptionsSocial):
    strategy_version: Optional[int] = None
    email: Optional[bool] = None
    profile: Optional[bool] = None
    basic_profile: Optional[bool] = None


@dataclass
class ConnectionOptionsGitHub(ConnectionOptionsSocial):
    email: Optional[bool] = None
    read_user: Optional[bool] = None
    follow: Optional[bool] = None
    public_repo: Optional[bool] = None
    repo: Optional[bool] = None
    repo_deployment: Optional[bool] = None
    repo_status: Optional[bool] = None
    delete_repo: Optional[bool] = None
    notifications: Optional[bool] = None
    gist: Optional[bool] = None
    read_repo_hook: Optional[bool] = None
    write_repo_hook: Optional[bool] = None
    admin_repo_hook: Optional[bool] = None
    read_org: Optional[bool] = None
    admin_org: Optional[bool] = None
    read_public_key: Optional[bool] = None
    write_public_key: Optional[bool] = None
    admin_public_key: Optional[bool] = None
    write_org: Optional[bool] = None


@dataclass
class ConnectionOptionsWindowsLive(ConnectionOptionsSocial):
    strategy_version: Optional[int] = None
    offline_access: Optional[bool] = None
    user_update: Optional[bool] = None
    signin: Optional[bool] = None
    emails: Optional[bool] = None
    birthday: Optional[bool] = None


@dataclass
class ConnectionOptionsSalesforce(ConnectionOptionsSocial):
    profile: Optional[bool] = None
    community_base_url: Optional[str] = None


@dataclass
class ConnectionOptionsOIDC(_Scopes, Model):
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    tenant_domain: Optional[str] = None
    domain_aliases: Optional[List[str]] = None
    logo_url: Optional[str] = None
    discovery_url: Optional[str] = None
    authorization_endpoint: Optional[str] = None
    issuer: Optional[str] = None
    jwks_uri: Optional[str] = None
    # "front_channel" or "back_channel"
    type: Optional[str] = None
    userinfo_endpoint: Optional[str] = None
    token_endpoint: Optional[str] = None
    scope: Optional[str] = None
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsOAuth2(_Scopes, Model):
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    authorization_url: Optional[str] = attr("authorizationURL")
    token_url: Optional[str] = attr("tokenURL")
    scope: Optional[str] = None
    scripts: Optional[Dict[str, str]] = None
    pkce_enabled: Optional[bool] = None
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsOkta(_Scopes, Model):
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    domain: Optional[str] = None
    domain_aliases: Optional[List[str]] = None
    logo_url: Optional[str] = None
    authorization_endpoint: Optional[str] = None
    issuer: Optional[str] = None
    jwks_uri: Optional[str] = None
    userinfo_endpoint: Optional[str] = None
    token_endpoint: Optional[str] = None
    scope: Optional[str] = None
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class ConnectionOptionsPingFederate(Model):
    signing_cert: Optional[str] = attr("signingCert")
    logo_url: Optional[str] = attr("logoUrl")
    idp_initiated: Optional[Dict[str, Any]] = attr("idpinitiated")
    tenant_domain: Optional[str] = None
    domain_aliases: Optional[List[str]] = None
    sign_in_endpoint: Optional[str] = attr("signInEndpoint")
    digest_algorithm: Optional[str] = attr("digestAlgorithm")
    sign_saml_request: Optional[bool] = attr("signSAMLRequest")
    signature_algorithm: Optional[str] = attr("signatureAlgorithm")
    ping_federate_base_url: Optional[str] = attr("pingFederateBaseUrl")
    set_user_root_attributes: Optional[str] = None
    non_persistent_attrs: Optional[List[str]] = None
    upstream_params: Optional[Dict[str, Any]] = None


@dataclass
class Connection(Model):
    id: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    # "authok", "google-oauth2", "samlp", "oidc" ...
    strategy: Optional[str] = None
    # Strategy dependent; see ``options_as``
    options: Any = attr(codec=Variant())
    enabled_clients: Optional[List[str]] = None
    is_domain_connection: Optional[bool] = None
    show_as_button: Optional[bool] = None
    realms: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None
    provisioning_ticket_url: Optional[str] = None

    def options_as(self, variant: Type[M]) -> Optional[M]:
        """Decode ``options`` as the given strategy options type."""
        return decode_variant(variant, self.options)


@dataclass
class ConnectionList(ListEnvelope):
    connections: Optional[List[Connection]] = None


class ConnectionManager(Manager):
    """Manage connections."""

    def create(self, connection: Connection, *opts: RequestOption) -> Connection:
        return self.management.request("POST", self._uri("connections"), connection, *opts, result=Connection)

    def read(self, id: str, *opts: RequestOption) -> Connection:
        return self.management.request("GET", self._uri("connections", id), None, *opts, result=Connection)

    def update(self, id: str, connection: Connection, *opts: RequestOption) -> Connection:
        """Update a connection.

        The API replaces ``options`` as a whole: send every option to keep,
        not only the changed ones.
        """
        return self.management.request(
            "PATCH", self._uri("connections", id), connection, *opts, result=Connection
        )

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("connections", id), None, *opts)

    def list(self, *opts: RequestOption) -> ConnectionList:
        return self.management.request(
            "GET", self._uri("connections"), None, apply_list_defaults(opts), result=ConnectionList
        )

    def read_by_name(self, name: str, *opts: RequestOption) -> Connection:
        """Find a connection by its exact name.

        Raises:
            ManagementError: 400 for an empty name (no request is sent), 404
                when no connection has that name
        """
        if not name:
            raise ManagementError(400, "Bad Request", "Name cannot be empty")
        connections = self.list(parameter("name", name), *opts)
        if connections and connections.connections:
            return connections.connections[0]
        raise ManagementError(404, "Not Found", "Connection not found")
