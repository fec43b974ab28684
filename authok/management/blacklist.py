"""Blacklisted tokens."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .manager import Manager
from .model import Model, attr
from .request import RequestOption, parameter


@dataclass
class BlacklistToken(Model):
    """A token identified by its ``aud`` and ``jti`` claims."""
    audience: Optional[str] = attr("aud")
    jti: Optional[str] = None


class BlacklistManager(Manager):
    """Manage blacklisted tokens.

    Blacklisting a ``jti`` lets a token be used a limited number of times,
    much like a nonce.
    """

    def list(self, *opts: RequestOption) -> List[BlacklistToken]:
        return self.management.request(
            "GET", self._uri("blacklists", "tokens"), None, *opts, result=List[BlacklistToken]
        )

    def list_by_audience(self, audience: str, *opts: RequestOption) -> List[BlacklistToken]:
        return self.list(parameter("aud", audience), *opts)

    def create(self, token: BlacklistToken, *opts: RequestOption) -> None:
        self.management.request("POST", self._uri("blacklists", "tokens"), token, *opts)
