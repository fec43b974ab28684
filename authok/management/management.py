"""Authok Management API client.

``Management`` is the single entry point: it validates the tenant domain,
owns the transport session and one manager per resource family, and
dispatches every call through ``request``.

Usage:
    from authok.management import Management, per_page

    api = Management("tenant.authok.cn", client_id="...", client_secret="...")
    users = api.user.list(per_page(10))
"""
from __future__ import annotations

import json
import logging
import re
import threading
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .action import ActionManager
from .anomaly import AnomalyManager
from .attack_protection import AttackProtectionManager
from .blacklist import BlacklistManager
from .branding import BrandingManager
from .branding_theme import BrandingThemeManager
from .client import ClientManager
from .client_grant import ClientGrantManager
from .connection import ConnectionManager
from .context import Context
from .custom_domain import CustomDomainManager
from .email import EmailManager
from .email_provider import EmailProviderManager
from .email_template import EmailTemplateManager
from .exceptions import (
    DeadlineExceededError,
    DecodeError,
    InvalidDomainError,
    ManagementError,
    RequestCancelledError,
    TransportError,
)
from .grant import GrantManager
from .guardian import GuardianManager
from .hook import HookManager
from .job import JobManager
from .log import LogManager
from .log_stream import LogStreamManager
from .model import decode_value, encode_value
from .organization import OrganizationManager
from .prompt import PromptManager
from .request import RequestOption, build
from .resource_server import ResourceServerManager
from .role import RoleManager
from .rule import RuleManager
from .rule_config import RuleConfigManager
from .signing_key import SigningKeyManager
from .stat import StatManager
from .tenant import TenantManager
from .ticket import TicketManager
from .token_source import ClientCredentials, StaticToken, TokenSource
from .transport import DEFAULT_CLIENT_INFO, USER_AGENT, ClientInfo, InFlightCall, build_session
from .user import UserManager

logger = logging.getLogger(__name__)

BASE_PATH = "api/v1"
DEFAULT_TIMEOUT = 30
INSECURE_TOKEN = "insecure"

# Characters left unescaped inside a single path segment
_SEGMENT_SAFE = "$&+:=@"
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
_DOMAIN_RE = re.compile(r"^[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*(:[0-9]{1,5})?$")


def parse_domain(domain: str) -> str:
    """Strip any scheme prefix and validate the remaining host.

    Raises:
        InvalidDomainError: If the host contains whitespace, escapes or
            anything besides dot separated labels and an optional port
    """
    if not isinstance(domain, str):
        raise InvalidDomainError(str(domain))
    host = _SCHEME_RE.sub("", domain, count=1)
    if host.endswith("/"):
        host = host[:-1]
    if not _DOMAIN_RE.fullmatch(host):
        raise InvalidDomainError(domain)
    return host


class Management:
    """Client for the Authok Management API.

    Features:
    - Bearer token from a static token or the client credentials grant
    - 429 responses retried with backoff by the transport
    - Typed errors (``ManagementError``, ``TransportError`` ...)
    - One manager attribute per resource family (``api.user``, ``api.rule`` ...)

    Usage:
        api = Management("tenant.authok.cn", static_token="eyJ...")
        rule = api.rule.read("rul_123")
    """

    def __init__(
        self,
        domain: str,
        *,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        audience: Optional[str] = None,
        static_token: Optional[str] = None,
        token_source: Optional[TokenSource] = None,
        debug: bool = False,
        user_agent: str = USER_AGENT,
        client_info: Optional[ClientInfo] = DEFAULT_CLIENT_INFO,
        insecure: bool = False,
        rate_limit: bool = True,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        context: Optional[Context] = None,
    ):
        """Initialize the client.

        Args:
            domain: Tenant domain, with or without scheme
            client_id: Client ID for the client credentials grant
            client_secret: Client secret for the client credentials grant
            audience: Token audience (defaults to this tenant's API)
            static_token: Pre-obtained access token
            token_source: Custom token source (wins over the above)
            debug: Log every request and response at DEBUG level
            user_agent: User-Agent header value
            client_info: Authok-Client header content, None to disable it
            insecure: Talk plain HTTP with the token "insecure" (local testing)
            rate_limit: Retry 429 responses with backoff
            session: Existing requests session to wrap
            timeout: Per-request timeout in seconds
            context: Default cancellation context for every call

        Raises:
            InvalidDomainError: If the domain cannot form a URL
        """
        self.domain = parse_domain(domain)
        self.scheme = "http" if insecure else "https"
        self.base_path = BASE_PATH
        self.timeout = timeout
        self.debug = debug
        self.context = context or Context.background()
        self._base_url = f"{self.scheme}://{self.domain}/{self.base_path}"

        if token_source is None:
            if insecure:
                token_source = StaticToken(INSECURE_TOKEN)
            elif static_token:
                token_source = StaticToken(static_token)
            elif client_id and client_secret:
                token_source = ClientCredentials(
                    self.domain, client_id, client_secret, audience=audience, scheme=self.scheme
                )
            else:
                logger.warning(f"No credentials configured for {self.domain}; requests are sent without a token")
        self.token_source = token_source

        self._session = build_session(
            token_source,
            user_agent=user_agent,
            client_info=client_info,
            debug=debug,
            rate_limit=rate_limit,
            session=session,
        )

        self.action = ActionManager(self)
        self.anomaly = AnomalyManager(self)
        self.attack_protection = AttackProtectionManager(self)
        self.blacklist = BlacklistManager(self)
        self.branding = BrandingManager(self)
        self.branding_theme = BrandingThemeManager(self)
        self.client = ClientManager(self)
        self.client_grant = ClientGrantManager(self)
        self.connection = ConnectionManager(self)
        self.custom_domain = CustomDomainManager(self)
        self.email = EmailManager(self)
        self.email_provider = EmailProviderManager(self)
        self.email_template = EmailTemplateManager(self)
        self.grant = GrantManager(self)
        self.guardian = GuardianManager(self)
        self.hook = HookManager(self)
        self.job = JobManager(self)
        self.log = LogManager(self)
        self.log_stream = LogStreamManager(self)
        self.organization = OrganizationManager(self)
        self.prompt = PromptManager(self)
        self.resource_server = ResourceServerManager(self)
        self.role = RoleManager(self)
        self.rule = RuleManager(self)
        self.rule_config = RuleConfigManager(self)
        self.signing_key = SigningKeyManager(self)
        self.stat = StatManager(self)
        self.tenant = TenantManager(self)
        self.ticket = TicketManager(self)
        self.user = UserManager(self)

    @classmethod
    def from_settings(cls, settings: Any, **kwargs: Any) -> "Management":
        """Build a client from ``ManagementSettings``.

        Extra keyword arguments are passed to the constructor.
        """
        client_secret = None
        if not settings.static_token and settings.client_id:
            client_secret = settings.client_secret_resolved
        options = dict(
            client_id=settings.client_id,
            client_secret=client_secret,
            static_token=settings.static_token,
            audience=settings.audience,
            debug=settings.debug,
            timeout=settings.timeout,
        )
        if settings.user_agent:
            options["user_agent"] = settings.user_agent
        options.update(kwargs)
        return cls(settings.domain, **options)

    def uri(self, *path: Any) -> str:
        """Build an absolute API URL, escaping each path segment on its own.

        Example:
            api.uri("users", "authok|1234/5678")
            # https://tenant.authok.cn/api/v1/users/authok%7C1234%2F5678
        """
        segments = [quote(str(p), safe=_SEGMENT_SAFE) for p in path]
        if not segments:
            return self._base_url
        return f"{self._base_url}/{'/'.join(segments)}"

    def request(
        self,
        method: str,
        uri: str,
        payload: Any = None,
        *options: Optional[RequestOption],
        result: Any = None,
        files: Optional[Dict[str, Any]] = None,
        form: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request and decode the response.

        Args:
            method: HTTP method
            uri: Absolute URL (see ``uri``)
            payload: Model, list of models or mapping to send as JSON
            *options: Request options, applied left to right
            result: Type to decode the response into (None to ignore the body)
            files: Files to upload as multipart/form-data instead of a JSON body
            form: Plain form fields sent along with ``files``

        Returns:
            The decoded response, or None

        Raises:
            RequestCancelledError: Context cancelled before or during the call
            DeadlineExceededError: Context deadline passed
            TransportError: Network failure
            ManagementError: API answered with status >= 400
            DecodeError: Response body does not match ``result``
        """
        req = build(method, uri, options, ctx=self.context)
        ctx = req.context
        ctx.raise_if_done()

        headers = dict(req.headers)
        if files:
            # Let requests set the multipart boundary
            headers["Content-Type"] = None
            data = form
        else:
            data = self._encode_body(payload, req.body_fields)

        timeout = self.timeout
        remaining = ctx.remaining()
        if remaining is not None:
            timeout = min(timeout, remaining)

        wake = threading.Event()
        call = InFlightCall(
            lambda: self._session.request(
                method,
                uri,
                params=req.params or None,
                data=data,
                files=files,
                headers=headers or None,
                timeout=timeout,
            ),
            wake,
        )
        unregister = ctx.on_cancel(wake.set)
        try:
            call.start()
            wake.wait(ctx.remaining())
        finally:
            unregister()

        # Stop waiting on cancellation or deadline, even mid-retry
        if ctx.cancelled or not call.finished.is_set():
            call.abandon()
            err = ctx.error()
            if err is None and ctx.cancelled:
                err = RequestCancelledError("context canceled")
            elif err is None:
                err = DeadlineExceededError("context deadline exceeded")
            raise err

        if call.error is not None:
            exc = call.error
            if not isinstance(exc, requests.RequestException):
                raise exc
            err = ctx.error()
            if err is not None:
                raise err from exc
            raise TransportError(f"{method} {uri} failed: {exc}") from exc

        response = call.response

        if response.status_code >= 400:
            error = ManagementError.from_response(response)
            logger.debug(f"{method} {uri} returned {error}")
            raise error

        if result is None or not response.content:
            return None

        try:
            raw = response.json()
        except ValueError as exc:
            raise DecodeError(f"invalid JSON in response to {method} {uri}: {exc}") from exc
        return decode_value(result, raw)

    @staticmethod
    def _encode_body(payload: Any, body_fields: dict) -> Optional[str]:
        if payload is None and not body_fields:
            return None
        body = encode_value(payload) if payload is not None else {}
        if body_fields:
            if not isinstance(body, dict):
                raise ValueError("body fields can only be merged into a JSON object payload")
            body = {**body, **encode_value(body_fields)}
        return json.dumps(body, separators=(",", ":"))
