"""Grants: consents users gave to clients."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .manager import Manager
from .model import ListEnvelope, Model, attr
from .request import RequestOption, apply_list_defaults, parameter


@dataclass
class Grant(Model):
    id: Optional[str] = None
    client_id: Optional[str] = attr("clientID")
    user_id: Optional[str] = None
    audience: Optional[str] = None
    scope: Optional[List[str]] = None


@dataclass
class GrantList(ListEnvelope):
    grants: Optional[List[Grant]] = None


class GrantManager(Manager):
    """List and revoke grants."""

    def list(self, *opts: RequestOption) -> GrantList:
        """Filter with ``parameter("user_id", ...)``, ``parameter("client_id", ...)``
        or ``parameter("audience", ...)``.
        """
        return self.management.request("GET", self._uri("grants"), None, apply_list_defaults(opts), result=GrantList)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("grants", id), None, *opts)

    def delete_by_user(self, user_id: str, *opts: RequestOption) -> None:
        """Revoke every grant of a user."""
        self.management.request("DELETE", self._uri("grants"), None, parameter("user_id", user_id), *opts)
