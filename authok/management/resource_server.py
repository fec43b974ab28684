"""Resource servers (APIs) and their scopes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .manager import Manager
from .model import ListEnvelope, Model, attr
from .request import RequestOption, apply_list_defaults


@dataclass
class ResourceServerScope(Model):
    value: Optional[str] = None
    description: Optional[str] = None


@dataclass
class ResourceServer(Model):
    id: Optional[str] = None
    name: Optional[str] = None
    # Unique; used as the audience of issued tokens. Cannot be changed.
    identifier: Optional[str] = None
    # "HS256" or "RS256"
    signing_algorithm: Optional[str] = attr("signing_alg")
    signing_secret: Optional[str] = None
    scopes: Optional[List[ResourceServerScope]] = None
    # Token lifetimes in seconds
    token_lifetime: Optional[int] = None
    token_lifetime_for_web: Optional[int] = None
    allow_offline_access: Optional[bool] = None
    skip_consent_for_verifiable_first_party_clients: Optional[bool] = None
    verification_location: Optional[str] = None
    options: Optional[dict] = None
    enforce_policies: Optional[bool] = None
    # "access_token" or "access_token_authz"
    token_dialect: Optional[str] = None
    is_system: Optional[bool] = None


@dataclass
class ResourceServerList(ListEnvelope):
    resource_servers: Optional[List[ResourceServer]] = None


class ResourceServerManager(Manager):
    """Manage resource servers."""

    def create(self, resource_server: ResourceServer, *opts: RequestOption) -> ResourceServer:
        return self.management.request(
            "POST", self._uri("resource-servers"), resource_server, *opts, result=ResourceServer
        )

    def read(self, id: str, *opts: RequestOption) -> ResourceServer:
        """Read by id or by identifier."""
        return self.management.request("GET", self._uri("resource-servers", id), None, *opts, result=ResourceServer)

    def update(self, id: str, resource_server: ResourceServer, *opts: RequestOption) -> ResourceServer:
        return self.management.request(
            "PATCH", self._uri("resource-servers", id), resource_server, *opts, result=ResourceServer
        )

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("resource-servers", id), None, *opts)

    def list(self, *opts: RequestOption) -> ResourceServerList:
        return self.management.request(
            "GET", self._uri("resource-servers"), None, apply_list_defaults(opts), result=ResourceServerList
        )
