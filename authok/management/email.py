"""Email provider, flat credentials shape.

Deprecated in favour of ``email_provider``, which types the credentials
per provider. Kept for callers still on the flat shape.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .manager import Manager
from .model import Model, attr
from .request import RequestOption


@dataclass
class EmailCredentials(Model):
    api_user: Optional[str] = None
    api_key: Optional[str] = None
    access_key_id: Optional[str] = attr("accessKeyId")
    secret_access_key: Optional[str] = attr("secretAccessKey")
    region: Optional[str] = None
    domain: Optional[str] = None
    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None


@dataclass
class Email(Model):
    name: Optional[str] = None
    enabled: Optional[bool] = None
    default_from_address: Optional[str] = None
    credentials: Optional[EmailCredentials] = None
    settings: Optional[Dict[str, Any]] = None


class EmailManager(Manager):
    """Manage the tenant's email provider.

    Deprecated: use ``Management.email_provider``.
    """

    def _warn(self) -> None:
        warnings.warn(
            "Management.email is deprecated, use Management.email_provider",
            DeprecationWarning,
            stacklevel=3,
        )

    def create(self, email: Email, *opts: RequestOption) -> Email:
        self._warn()
        return self.management.request("POST", self._uri("emails", "provider"), email, *opts, result=Email)

    def read(self, *opts: RequestOption) -> Email:
        self._warn()
        return self.management.request("GET", self._uri("emails", "provider"), None, *opts, result=Email)

    def update(self, email: Email, *opts: RequestOption) -> Email:
        self._warn()
        return self.management.request("PATCH", self._uri("emails", "provider"), email, *opts, result=Email)

    def delete(self, *opts: RequestOption) -> None:
        self._warn()
        self.management.request("DELETE", self._uri("emails", "provider"), None, *opts)
