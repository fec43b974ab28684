"""Client grants: which APIs a client may request tokens for."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .manager import Manager
from .model import ListEnvelope, Model
from .request import RequestOption, apply_list_defaults


@dataclass
class ClientGrant(Model):
    id: Optional[str] = None
    client_id: Optional[str] = None
    # Identifier of the resource server
    audience: Optional[str] = None
    scope: Optional[List[str]] = None


@dataclass
class ClientGrantList(ListEnvelope):
    client_grants: Optional[List[ClientGrant]] = None


class ClientGrantManager(Manager):
    """Manage client grants."""

    def create(self, grant: ClientGrant, *opts: RequestOption) -> ClientGrant:
        return self.management.request("POST", self._uri("client-grants"), grant, *opts, result=ClientGrant)

    def read(self, id: str, *opts: RequestOption) -> ClientGrant:
        return self.management.request("GET", self._uri("client-grants", id), None, *opts, result=ClientGrant)

    def update(self, id: str, grant: ClientGrant, *opts: RequestOption) -> ClientGrant:
        """Only ``scope`` can be changed."""
        return self.management.request("PATCH", self._uri("client-grants", id), grant, *opts, result=ClientGrant)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("client-grants", id), None, *opts)

    def list(self, *opts: RequestOption) -> ClientGrantList:
        return self.management.request(
            "GET", self._uri("client-grants"), None, apply_list_defaults(opts), result=ClientGrantList
        )
