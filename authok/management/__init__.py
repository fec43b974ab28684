"""Authok Management API client library.

Architecture:
- management.py: ``Management`` entry point, URI builder and request dispatcher
- transport.py: requests session with auth, identification headers and 429 retry
- token_source.py: static tokens and the client credentials grant
- request.py: composable request options (paging, fields, query, context ...)
- model.py: dataclass models with presence/absence semantics
- context.py: cooperative cancellation and deadlines
- exceptions.py: typed exceptions for error handling
- one module per resource family (user.py, connection.py, tenant.py ...)

Usage:
    from authok.management import Management, ManagementError, per_page

    api = Management("tenant.authok.cn", client_id="...", client_secret="...")
    try:
        user = api.user.read("authok|123")
    except ManagementError as e:
        if e.status_code == 404:
            ...
"""
from .action import (
    Action,
    ActionBinding,
    ActionBindingList,
    ActionBindingReference,
    ActionExecution,
    ActionList,
    ActionTrigger,
    ActionVersion,
    ActionVersionList,
)
from .attack_protection import BreachedPasswordDetection, BruteForceProtection, SuspiciousIPThrottling
from .blacklist import BlacklistToken
from .branding import Branding, BrandingColors, BrandingPageBackgroundGradient, BrandingUniversalLogin
from .branding_theme import BrandingTheme
from .client import Client, ClientList, Credential
from .client_grant import ClientGrant, ClientGrantList
from .connection import (
    Connection,
    ConnectionList,
    ConnectionOptions,
    ConnectionOptionsAD,
    ConnectionOptionsADFS,
    ConnectionOptionsApple,
    ConnectionOptionsEmail,
    ConnectionOptionsFacebook,
    ConnectionOptionsGitHub,
    ConnectionOptionsGoogleApps,
    ConnectionOptionsGoogleOAuth2,
    ConnectionOptionsLinkedin,
    ConnectionOptionsOAuth2,
    ConnectionOptionsOIDC,
    ConnectionOptionsOkta,
    ConnectionOptionsPingFederate,
    ConnectionOptionsSAML,
    ConnectionOptionsSMS,
    ConnectionOptionsSalesforce,
    ConnectionOptionsWindowsLive,
)
from .context import Context
from .custom_domain import CustomDomain
from .email_provider import EmailProvider
from .email_template import EmailTemplate
from .exceptions import (
    AuthokError,
    DeadlineExceededError,
    DecodeError,
    InvalidDomainError,
    ManagementError,
    RequestCancelledError,
    TokenError,
    TransportError,
)
from .grant import Grant, GrantList
from .guardian import MultiFactor, MultiFactorProvider
from .hook import Hook, HookList
from .job import Job
from .log import Log, LogList
from .log_stream import LogStream
from .management import Management, parse_domain
from .model import NULL, ListEnvelope, Model, decode_variant, stringify
from .organization import Organization, OrganizationList
from .prompt import Prompt
from .request import (
    RequestOption,
    body_field,
    context,
    exclude_fields,
    from_checkpoint,
    header,
    include_fields,
    include_totals,
    page,
    parameter,
    per_page,
    query,
    take,
)
from .resource_server import ResourceServer, ResourceServerList
from .role import Permission, PermissionList, Role, RoleList
from .rule import Rule, RuleList
from .rule_config import RuleConfig
from .signing_key import SigningKey
from .stat import DailyStat
from .tenant import Tenant
from .ticket import Ticket
from .token_source import ClientCredentials, StaticToken, TokenSource
from .transport import ClientInfo
from .user import User, UserIdentity, UserList

__all__ = [
    # Client
    "Management",
    "parse_domain",
    "ClientInfo",
    "Context",
    "TokenSource",
    "StaticToken",
    "ClientCredentials",
    # Options
    "RequestOption",
    "body_field",
    "context",
    "exclude_fields",
    "from_checkpoint",
    "header",
    "include_fields",
    "include_totals",
    "page",
    "parameter",
    "per_page",
    "query",
    "take",
    # Models
    "NULL",
    "Model",
    "ListEnvelope",
    "decode_variant",
    "stringify",
    "Action",
    "ActionBinding",
    "ActionBindingList",
    "ActionBindingReference",
    "ActionExecution",
    "ActionList",
    "ActionTrigger",
    "ActionVersion",
    "ActionVersionList",
    "BreachedPasswordDetection",
    "BruteForceProtection",
    "SuspiciousIPThrottling",
    "BlacklistToken",
    "Branding",
    "BrandingColors",
    "BrandingPageBackgroundGradient",
    "BrandingUniversalLogin",
    "BrandingTheme",
    "Client",
    "ClientList",
    "Credential",
    "ClientGrant",
    "ClientGrantList",
    "Connection",
    "ConnectionList",
    "ConnectionOptions",
    "ConnectionOptionsAD",
    "ConnectionOptionsADFS",
    "ConnectionOptionsApple",
    "ConnectionOptionsEmail",
    "ConnectionOptionsFacebook",
    "ConnectionOptionsGitHub",
    "ConnectionOptionsGoogleApps",
    "ConnectionOptionsGoogleOAuth2",
    "ConnectionOptionsLinkedin",
    "ConnectionOptionsOAuth2",
    "ConnectionOptionsOIDC",
    "ConnectionOptionsOkta",
    "ConnectionOptionsPingFederate",
    "ConnectionOptionsSAML",
    "ConnectionOptionsSMS",
    "ConnectionOptionsSalesforce",
    "ConnectionOptionsWindowsLive",
    "CustomDomain",
    "EmailProvider",
    "EmailTemplate",
    "Grant",
    "GrantList",
    "MultiFactor",
    "MultiFactorProvider",
    "Hook",
    "HookList",
    "Job",
    "Log",
    "LogList",
    "LogStream",
    "Organization",
    "OrganizationList",
    "Prompt",
    "ResourceServer",
    "ResourceServerList",
    "Permission",
    "PermissionList",
    "Role",
    "RoleList",
    "Rule",
    "RuleList",
    "RuleConfig",
    "SigningKey",
    "DailyStat",
    "Tenant",
    "Ticket",
    "User",
    "UserIdentity",
    "UserList",
    # Exceptions
    "AuthokError",
    "DeadlineExceededError",
    "DecodeError",
    "InvalidDomainError",
    "ManagementError",
    "RequestCancelledError",
    "TokenError",
    "TransportError",
]
