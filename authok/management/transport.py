"""HTTP transport for the Management API.

Wraps a ``requests.Session`` with the cross-cutting concerns every call
shares: bearer token, rate-limit retry, identification headers and optional
debug logging. Knows nothing about resources.
"""
from __future__ import annotations

import base64
import json
import logging
import platform
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.auth import AuthBase
from urllib3.util.retry import Retry

from .._version import __version__
from .token_source import TokenSource

logger = logging.getLogger(__name__)

CLIENT_INFO_HEADER = "Authok-Client"
USER_AGENT = f"authok-python/{__version__}"

RATE_LIMIT_STATUS = 429
RATE_LIMIT_MAX_RETRIES = 10


@dataclass
class ClientInfo:
    """Client identification sent in the Authok-Client header."""
    name: str
    version: str
    env: Dict[str, str] = field(default_factory=dict)

    def header_value(self) -> str:
        """Base64 encoded compact JSON; ``env`` is left out when empty."""
        payload: Dict[str, Any] = {"name": self.name, "version": self.version}
        if self.env:
            payload["env"] = self.env
        raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        return base64.b64encode(raw).decode("ascii")


DEFAULT_CLIENT_INFO = ClientInfo(
    name="authok-python",
    version=__version__,
    env={"python": platform.python_version()},
)


class BearerAuth(AuthBase):
    """Attach ``Authorization: Bearer <token>`` from a token source."""

    def __init__(self, token_source: TokenSource):
        self.token_source = token_source

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Authorization"] = f"Bearer {self.token_source.token()}"
        return r


# Abandon flag of the call running on the current worker thread
_call_state = threading.local()


class CallAbandoned(Exception):
    """Raised inside a worker thread whose caller stopped waiting."""


class RateLimitRetry(Retry):
    """Retry whose backoff sleeps end as soon as the waiting call is abandoned."""

    def sleep(self, response: Any = None) -> None:
        abandoned = getattr(_call_state, "abandoned", None)
        if abandoned is None:
            super().sleep(response)
            return
        delay = None
        if response is not None and self.respect_retry_after_header:
            delay = self.get_retry_after(response)
        if delay is None:
            delay = self.get_backoff_time()
        if abandoned.wait(max(delay, 0)):
            raise CallAbandoned("caller stopped waiting during rate-limit backoff")


class InFlightCall:
    """One session call running on a daemon thread.

    The caller waits on ``wake``, which is set when the call finishes. Other
    parties (a context cancellation) may set it too, after which the caller
    calls ``abandon`` and walks away. Rate-limit backoff of an abandoned call
    stops at once, and a response that arrives afterwards is closed.
    """

    def __init__(self, send: Callable[[], requests.Response], wake: threading.Event):
        self._send = send
        self._wake = wake
        self._abandoned = threading.Event()
        self._lock = threading.Lock()
        self.finished = threading.Event()
        self.response: Optional[requests.Response] = None
        self.error: Optional[Exception] = None

    def start(self) -> None:
        threading.Thread(target=self._run, name="authok-request", daemon=True).start()

    def _run(self) -> None:
        _call_state.abandoned = self._abandoned
        try:
            self.response = self._send()
        except Exception as exc:
            self.error = exc
        finally:
            _call_state.abandoned = None
            with self._lock:
                if self._abandoned.is_set():
                    self._close()
                self.finished.set()
            self._wake.set()

    def abandon(self) -> None:
        with self._lock:
            self._abandoned.set()
            if self.finished.is_set():
                self._close()

    def _close(self) -> None:
        if self.response is not None:
            self.response.close()


def rate_limit_retry() -> RateLimitRetry:
    """Retry policy: only 429 responses, exponential backoff with jitter.

    ``Retry-After`` from the API takes precedence over the computed backoff.
    The last 429 is returned (not raised) so the caller sees the API error.
    """
    return RateLimitRetry(
        total=RATE_LIMIT_MAX_RETRIES,
        connect=0,
        read=0,
        other=0,
        status=RATE_LIMIT_MAX_RETRIES,
        status_forcelist=(RATE_LIMIT_STATUS,),
        allowed_methods=None,
        backoff_factor=0.25,
        backoff_jitter=0.25,
        backoff_max=10,
        respect_retry_after_header=True,
        raise_on_status=False,
    )


def _debug_hook(response: requests.Response, *args, **kwargs) -> None:
    request = response.request
    logger.debug(f"{request.method} {request.url} -> {response.status_code} ({response.elapsed.total_seconds():.3f}s)")


def _rate_limit_hook(response: requests.Response, *args, **kwargs) -> None:
    if response.status_code == RATE_LIMIT_STATUS:
        logger.warning(
            f"Rate limit still exceeded after {RATE_LIMIT_MAX_RETRIES} retries: "
            f"{response.request.method} {response.request.url}"
        )


def build_session(
    token_source: Optional[TokenSource],
    user_agent: str = USER_AGENT,
    client_info: Optional[ClientInfo] = DEFAULT_CLIENT_INFO,
    debug: bool = False,
    rate_limit: bool = True,
    session: Optional[requests.Session] = None,
) -> requests.Session:
    """Wrap a session with auth, headers, retry and logging.

    Args:
        token_source: Source of bearer tokens (None sends no Authorization header)
        user_agent: User-Agent header value
        client_info: Client identification, or None to omit the header
        debug: Log each request and response at DEBUG level
        rate_limit: Retry 429 responses with backoff
        session: Existing session to wrap (a new one otherwise)

    Returns:
        The configured session
    """
    session = session or requests.Session()

    if rate_limit:
        adapter = HTTPAdapter(max_retries=rate_limit_retry())
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        session.hooks["response"].append(_rate_limit_hook)

    session.headers["User-Agent"] = user_agent
    session.headers["Content-Type"] = "application/json"
    if client_info is not None:
        session.headers[CLIENT_INFO_HEADER] = client_info.header_value()
    else:
        session.headers.pop(CLIENT_INFO_HEADER, None)

    if token_source is not None:
        session.auth = BearerAuth(token_source)

    if debug:
        session.hooks["response"].append(_debug_hook)

    return session
