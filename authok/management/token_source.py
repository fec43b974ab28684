"""Bearer token sources for the Management API.

Handles the client credentials grant and token caching. The dispatcher only
ever calls ``token()``.
"""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Optional

import jwt
import requests

from .exceptions import TokenError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10
# Refresh tokens this long before they actually expire
EXPIRY_LEEWAY = timedelta(seconds=10)
# Used when neither expires_in nor an exp claim is available
DEFAULT_TOKEN_LIFETIME = timedelta(seconds=60)


class TokenSource:
    """Anything that can hand out a bearer token on demand."""

    def token(self) -> str:
        raise NotImplementedError


class StaticToken(TokenSource):
    """A pre-obtained access token, used as is.

    Usage:
        api = Management("tenant.authok.cn", static_token="eyJ...")
    """

    def __init__(self, token: str):
        self._token = token

    def token(self) -> str:
        return self._token


class ClientCredentials(TokenSource):
    """Token source using the OAuth2 client credentials flow.

    Features:
    - Caches the token until shortly before it expires
    - Safe to share between threads; only one refresh runs at a time

    Usage:
        source = ClientCredentials("tenant.authok.cn", "client-id", "client-secret")
        token = source.token()
    """

    def __init__(
        self,
        domain: str,
        client_id: str,
        client_secret: str,
        audience: Optional[str] = None,
        scheme: str = "https",
        session: Optional[requests.Session] = None,
    ):
        """Initialize the token source.

        Args:
            domain: Tenant domain, without scheme
            client_id: Machine-to-machine application client ID
            client_secret: Machine-to-machine application client secret
            audience: API identifier (defaults to the tenant's management API)
            scheme: URL scheme of the token endpoint
            session: Optional requests session for the token calls
        """
        self.token_url = f"{scheme}://{domain}/oauth/token"
        self.audience = audience or f"{scheme}://{domain}/api/v1/"
        self._client_id = client_id
        self._client_secret = client_secret
        self._session = session or requests.Session()
        self._token: Optional[str] = None
        self._token_expires_at: Optional[datetime] = None
        self._lock = threading.Lock()

    def token(self) -> str:
        """Return a valid access token, refreshing it if necessary."""
        with self._lock:
            if self._token and self._token_expires_at and datetime.now() < self._token_expires_at - EXPIRY_LEEWAY:
                return self._token
            self._token, self._token_expires_at = self._fetch()
            return self._token

    def _fetch(self) -> tuple[str, datetime]:
        """Request a new token from the token endpoint.

        Raises:
            TokenError: On HTTP error or malformed token response
        """
        data = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "audience": self.audience,
        }
        try:
            resp = self._session.post(self.token_url, data=data, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            raise TokenError(f"token request to {self.token_url} failed: {exc}") from exc

        if resp.status_code != 200:
            raise TokenError(f"[{resp.status_code}] {self.token_url}: {resp.text}")

        try:
            payload = resp.json()
            access_token = payload["access_token"]
        except (ValueError, KeyError) as exc:
            raise TokenError(f"malformed token response from {self.token_url}") from exc

        expires_at = _expiry(access_token, payload.get("expires_in"))
        logger.info(f"Fetched management API token for client {self._client_id} (expires {expires_at:%H:%M:%S})")
        return access_token, expires_at


def _expiry(access_token: str, expires_in: Optional[int]) -> datetime:
    """Work out when a token expires.

    ``expires_in`` wins; otherwise the unverified ``exp`` claim of the JWT is
    used, and as a last resort a short default lifetime.
    """
    if expires_in:
        return datetime.now() + timedelta(seconds=int(expires_in))
    try:
        claims = jwt.decode(access_token, options={"verify_signature": False})
    except jwt.PyJWTError:
        return datetime.now() + DEFAULT_TOKEN_LIFETIME
    exp = claims.get("exp")
    if not exp:
        return datetime.now() + DEFAULT_TOKEN_LIFETIME
    return datetime.fromtimestamp(int(exp))
