"""Application signing keys."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .manager import Manager
from .model import Model
from .request import RequestOption


@dataclass
class SigningKey(Model):
    kid: Optional[str] = None
    cert: Optional[str] = None
    pkcs7: Optional[str] = None
    current: Optional[bool] = None
    next: Optional[bool] = None
    previous: Optional[bool] = None
    current_since: Optional[datetime] = None
    current_until: Optional[datetime] = None
    fingerprint: Optional[str] = None
    thumbprint: Optional[str] = None
    revoked: Optional[bool] = None
    revoked_at: Optional[datetime] = None


class SigningKeyManager(Manager):
    """List, rotate and revoke signing keys."""

    def list(self, *opts: RequestOption) -> List[SigningKey]:
        return self.management.request("GET", self._uri("keys", "signing"), None, *opts, result=List[SigningKey])

    def read(self, kid: str, *opts: RequestOption) -> SigningKey:
        return self.management.request("GET", self._uri("keys", "signing", kid), None, *opts, result=SigningKey)

    def rotate(self, *opts: RequestOption) -> SigningKey:
        """Promote the next key to current and generate a new next key.

        Returns:
            The new key (``kid`` and ``cert`` only)
        """
        return self.management.request("POST", self._uri("keys", "signing", "rotate"), None, *opts, result=SigningKey)

    def revoke(self, kid: str, *opts: RequestOption) -> SigningKey:
        return self.management.request(
            "PUT", self._uri("keys", "signing", kid, "revoke"), None, *opts, result=SigningKey
        )
