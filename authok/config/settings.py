"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SECRETS_DIR = Path("/run/secrets")
CLIENT_SECRET_NAME = "authok_client_secret"
CLIENT_SECRET_ENV = "AUTHOK_CLIENT_SECRET"
DEFAULT_TIMEOUT = 30.0

_TRUE_VALUES = ("true", "1", "on", "yes")


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = SECRETS_DIR / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info(f"Loaded {secret_name} from {SECRETS_DIR}")
                return secret_value
        except OSError as e:
            logger.warning(f"Failed to read {secret_file}: {e}")

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.info(f"Loaded {env_var} from environment (fallback)")
            return secret_value

    return None


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {name} must be a number, got {value!r}") from exc


@dataclass
class ManagementSettings:
    """Management client configuration container."""
    domain: str
    client_id: str = ""
    client_secret: str = ""
    # Pre-obtained token; wins over the client credentials
    static_token: str = ""
    audience: str = ""
    debug: bool = False
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = ""

    @property
    def client_secret_resolved(self) -> str:
        """Get the client secret with fallback.

        Priority:
        1. Configured value in client_secret
        2. Docker secrets: /run/secrets/authok_client_secret
        3. Environment variable: AUTHOK_CLIENT_SECRET

        Raises:
            ValueError: If the secret is not found anywhere
        """
        if self.client_secret:
            return self.client_secret

        secret = _load_secret_from_file(CLIENT_SECRET_NAME, CLIENT_SECRET_ENV)
        if secret:
            return secret

        raise ValueError(
            f"{CLIENT_SECRET_ENV} not found. "
            f"Provide it via {SECRETS_DIR / CLIENT_SECRET_NAME} or the environment."
        )


def load_settings() -> ManagementSettings:
    """Load management client settings from the environment and /run/secrets.

    Raises:
        RuntimeError: If AUTHOK_DOMAIN is missing or AUTHOK_TIMEOUT is not a number
    """
    domain = os.environ.get("AUTHOK_DOMAIN", "").strip()
    if not domain:
        raise RuntimeError("Environment variable AUTHOK_DOMAIN is required.")

    client_id = os.environ.get("AUTHOK_CLIENT_ID", "").strip()
    static_token = os.environ.get("AUTHOK_API_TOKEN", "").strip()
    client_secret = _load_secret_from_file(CLIENT_SECRET_NAME, CLIENT_SECRET_ENV) or ""

    if not static_token and not (client_id and client_secret):
        logger.warning("Neither AUTHOK_API_TOKEN nor AUTHOK_CLIENT_ID/AUTHOK_CLIENT_SECRET are set")

    settings = ManagementSettings(
        domain=domain,
        client_id=client_id,
        client_secret=client_secret,
        static_token=static_token,
        audience=os.environ.get("AUTHOK_AUDIENCE", "").strip(),
        debug=_env_flag("AUTHOK_DEBUG"),
        timeout=_env_float("AUTHOK_TIMEOUT", DEFAULT_TIMEOUT),
        user_agent=os.environ.get("AUTHOK_USER_AGENT", "").strip(),
    )

    auth_label = "static token" if static_token else "client credentials"
    logger.info(f"Settings loaded; domain={domain}; auth={auth_label}; client_id={client_id or '-'}")
    return settings
