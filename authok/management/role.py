"""Roles and the permissions attached to them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .manager import Manager
from .model import ListEnvelope, Model, attr
from .request import RequestOption, apply_list_defaults

if TYPE_CHECKING:
    from .user import UserList


@dataclass
class Role(Model):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class RoleList(ListEnvelope):
    roles: Optional[List[Role]] = None


@dataclass
class Permission(Model):
    """A scope of a resource server granted through a role or directly."""
    name: Optional[str] = attr("permission_name")
    description: Optional[str] = None
    resource_server_identifier: Optional[str] = None
    resource_server_name: Optional[str] = None


@dataclass
class PermissionList(ListEnvelope):
    permissions: Optional[List[Permission]] = None


class RoleManager(Manager):
    """Manage roles, their users and their permissions."""

    def create(self, role: Role, *opts: RequestOption) -> Role:
        return self.management.request("POST", self._uri("roles"), role, *opts, result=Role)

    def read(self, id: str, *opts: RequestOption) -> Role:
        return self.management.request("GET", self._uri("roles", id), None, *opts, result=Role)

    def update(self, id: str, role: Role, *opts: RequestOption) -> Role:
        return self.management.request("PATCH", self._uri("roles", id), role, *opts, result=Role)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("roles", id), None, *opts)

    def list(self, *opts: RequestOption) -> RoleList:
        return self.management.request("GET", self._uri("roles"), None, apply_list_defaults(opts), result=RoleList)

    def users(self, id: str, *opts: RequestOption) -> "UserList":
        """List the users holding a role."""
        from .user import UserList

        return self.management.request(
            "GET", self._uri("roles", id, "users"), None, apply_list_defaults(opts), result=UserList
        )

    def assign_users(self, id: str, user_ids: List[str], *opts: RequestOption) -> None:
        body = {"users": list(user_ids)}
        self.management.request("POST", self._uri("roles", id, "users"), body, *opts)

    def permissions(self, id: str, *opts: RequestOption) -> PermissionList:
        return self.management.request(
            "GET", self._uri("roles", id, "permissions"), None, apply_list_defaults(opts), result=PermissionList
        )

    def associate_permissions(self, id: str, permissions: List[Permission], *opts: RequestOption) -> None:
        body = {"permissions": permissions}
        self.management.request("POST", self._uri("roles", id, "permissions"), body, *opts)

    def remove_permissions(self, id: str, permissions: List[Permission], *opts: RequestOption) -> None:
        body = {"permissions": permissions}
        self.management.request("DELETE", self._uri("roles", id, "permissions"), body, *opts)
