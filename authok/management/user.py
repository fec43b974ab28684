"""Users, their identities, blocks and authentication methods."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .guardian import GuardianEnrollment
from .manager import Manager
from .model import LenientBool, LenientString, ListEnvelope, Model, attr
from .organization import OrganizationList
from .request import RequestOption, apply_list_defaults, parameter
from .role import Permission, PermissionList, Role, RoleList


@dataclass
class UserIdentity(Model):
    """An identity linked to a user.

    ``user_id`` is sent as a number by some connections; it is always
    decoded as a string.
    """
    connection: Optional[str] = None
    user_id: Optional[str] = attr(codec=LenientString())
    provider: Optional[str] = None
    is_social: Optional[bool] = attr("isSocial")
    access_token: Optional[str] = None
    access_token_secret: Optional[str] = None
    refresh_token: Optional[str] = None
    profile_data: Optional[Dict[str, Any]] = attr("profileData")


@dataclass
class User(Model):
    id: Optional[str] = attr("user_id")
    # Name of the connection the user belongs to
    connection: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    username: Optional[str] = None
    nickname: Optional[str] = None
    screen_name: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    # Only ever sent, never returned
    password: Optional[str] = None
    phone_number: Optional[str] = None
    phone_verified: Optional[bool] = None
    # Some providers send "true"/"false" as strings
    email_verified: Optional[bool] = attr(codec=LenientBool())
    verify_email: Optional[bool] = None
    verify_password: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_login: Optional[datetime] = None
    last_password_reset: Optional[datetime] = None
    identities: Optional[List[UserIdentity]] = None
    app_metadata: Optional[Dict[str, Any]] = None
    user_metadata: Optional[Dict[str, Any]] = None
    picture: Optional[str] = None
    url: Optional[str] = None
    blocked: Optional[bool] = None
    last_ip: Optional[str] = None
    logins_count: Optional[int] = None
    multifactor: Optional[List[str]] = None


@dataclass
class UserList(ListEnvelope):
    users: Optional[List[User]] = None


@dataclass
class UserIdentityLink(Model):
    """Secondary account to link to a primary user."""
    # Connection of the secondary account
    connection_id: Optional[str] = None
    user_id: Optional[str] = None
    provider: Optional[str] = None
    # JWT of the secondary account, used instead of the fields above
    link_with: Optional[str] = None


@dataclass
class UserBlock(Model):
    identifier: Optional[str] = None
    ip: Optional[str] = None


@dataclass
class UserBlockList(Model):
    blocked_for: Optional[List[UserBlock]] = None


@dataclass
class UserRecoveryCode(Model):
    recovery_code: Optional[str] = None


@dataclass
class AuthenticationMethodReference(Model):
    id: Optional[str] = None
    type: Optional[str] = None


@dataclass
class AuthenticationMethod(Model):
    id: Optional[str] = None
    # "email", "phone", "totp", "webauthn-roaming" ...
    type: Optional[str] = None
    confirmed: Optional[bool] = None
    name: Optional[str] = None
    authentication_methods: Optional[List[AuthenticationMethodReference]] = None
    # "sms" or "voice", for phone methods
    preferred_authentication_method: Optional[str] = None
    link_id: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    key_id: Optional[str] = None
    public_key: Optional[str] = None
    created_at: Optional[datetime] = None
    enrolled_at: Optional[datetime] = None
    last_auth_at: Optional[datetime] = None
    totp_secret: Optional[str] = None
    recovery_code: Optional[str] = None
    relying_party_identifier: Optional[str] = None


@dataclass
class AuthenticationMethodList(ListEnvelope):
    authenticators: Optional[List[AuthenticationMethod]] = None


class UserManager(Manager):
    """Manage users.

    Usage:
        user = api.user.create(User(connection="database", email="a@b.c", password="..."))
        api.user.update(user.id, User(blocked=True))
    """

    def create(self, user: User, *opts: RequestOption) -> User:
        return self.management.request("POST", self._uri("users"), user, *opts, result=User)

    def read(self, id: str, *opts: RequestOption) -> User:
        return self.management.request("GET", self._uri("users", id), None, *opts, result=User)

    def update(self, id: str, user: User, *opts: RequestOption) -> User:
        """Update a user.

        Metadata objects are merged one level deep by the API; set a
        property to None inside the mapping to remove it.
        """
        return self.management.request("PATCH", self._uri("users", id), user, *opts, result=User)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("users", id), None, *opts)

    def list(self, *opts: RequestOption) -> UserList:
        """List or search users; combine with ``query()`` to search."""
        return self.management.request("GET", self._uri("users"), None, apply_list_defaults(opts), result=UserList)

    search = list

    def list_by_email(self, email: str, *opts: RequestOption) -> List[User]:
        """Find users by email address (exact match, case sensitive)."""
        return self.management.request(
            "GET", self._uri("users-by-email"), None, parameter("email", email), *opts, result=List[User]
        )

    def roles(self, id: str, *opts: RequestOption) -> RoleList:
        return self.management.request(
            "GET", self._uri("users", id, "roles"), None, apply_list_defaults(opts), result=RoleList
        )

    def assign_roles(self, id: str, roles: List[Role], *opts: RequestOption) -> None:
        """Assign roles to a user. Only the role ids go on the wire."""
        body = {"roles": [role.id for role in roles]}
        self.management.request("POST", self._uri("users", id, "roles"), body, *opts)

    def remove_roles(self, id: str, roles: List[Role], *opts: RequestOption) -> None:
        body = {"roles": [role.id for role in roles]}
        self.management.request("DELETE", self._uri("users", id, "roles"), body, *opts)

    def permissions(self, id: str, *opts: RequestOption) -> PermissionList:
        return self.management.request(
            "GET", self._uri("users", id, "permissions"), None, apply_list_defaults(opts), result=PermissionList
        )

    def assign_permissions(self, id: str, permissions: List[Permission], *opts: RequestOption) -> None:
        body = {"permissions": permissions}
        self.management.request("POST", self._uri("users", id, "permissions"), body, *opts)

    def remove_permissions(self, id: str, permissions: List[Permission], *opts: RequestOption) -> None:
        body = {"permissions": permissions}
        self.management.request("DELETE", self._uri("users", id, "permissions"), body, *opts)

    def blocks(self, id: str, *opts: RequestOption) -> List[UserBlock]:
        """Brute-force protection blocks of a user."""
        blocks = self.management.request("GET", self._uri("user-blocks", id), None, *opts, result=UserBlockList)
        if blocks is None:
            return []
        return blocks.blocked_for or []

    def blocks_by_identifier(self, identifier: str, *opts: RequestOption) -> List[UserBlock]:
        """Blocks by username, phone number or email."""
        blocks = self.management.request(
            "GET", self._uri("user-blocks"), None, parameter("identifier", identifier), *opts, result=UserBlockList
        )
        if blocks is None:
            return []
        return blocks.blocked_for or []

    def unblock(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("user-blocks", id), None, *opts)

    def unblock_by_identifier(self, identifier: str, *opts: RequestOption) -> None:
        self.management.request(
            "DELETE", self._uri("user-blocks"), None, parameter("identifier", identifier), *opts
        )

    def enrollments(self, id: str, *opts: RequestOption) -> List[GuardianEnrollment]:
        return self.management.request(
            "GET", self._uri("users", id, "enrollments"), None, *opts, result=List[GuardianEnrollment]
        )

    def regenerate_recovery_code(self, id: str, *opts: RequestOption) -> UserRecoveryCode:
        """Invalidate the user's multi-factor recovery code and issue a new one."""
        return self.management.request(
            "POST", self._uri("users", id, "recovery-code-generation"), None, *opts, result=UserRecoveryCode
        )

    def invalidate_remember_browser(self, id: str, *opts: RequestOption) -> None:
        """Require multi-factor again on every browser the user marked as trusted."""
        self.management.request(
            "POST", self._uri("users", id, "multifactor", "actions", "invalidate-remember-browser"), None, *opts
        )

    def link(self, id: str, link: UserIdentityLink, *opts: RequestOption) -> List[UserIdentity]:
        """Link a secondary account to the user.

        Returns:
            The primary user's identities after linking
        """
        return self.management.request(
            "POST", self._uri("users", id, "identities"), link, *opts, result=List[UserIdentity]
        )

    def unlink(self, id: str, provider: str, user_id: str, *opts: RequestOption) -> List[UserIdentity]:
        """Unlink an identity; ``user_id`` is the secondary id without provider prefix."""
        return self.management.request(
            "DELETE", self._uri("users", id, "identities", provider, user_id), None, *opts,
            result=List[UserIdentity],
        )

    def organizations(self, id: str, *opts: RequestOption) -> OrganizationList:
        return self.management.request(
            "GET", self._uri("users", id, "organizations"), None, apply_list_defaults(opts),
            result=OrganizationList,
        )

    def list_authentication_methods(self, id: str, *opts: RequestOption) -> AuthenticationMethodList:
        return self.management.request(
            "GET", self._uri("users", id, "authentication-methods"), None, apply_list_defaults(opts),
            result=AuthenticationMethodList,
        )

    def create_authentication_method(
        self, id: str, method: AuthenticationMethod, *opts: RequestOption
    ) -> AuthenticationMethod:
        return self.management.request(
            "POST", self._uri("users", id, "authentication-methods"), method, *opts, result=AuthenticationMethod
        )

    def read_authentication_method(self, id: str, method_id: str, *opts: RequestOption) -> AuthenticationMethod:
        return self.management.request(
            "GET", self._uri("users", id, "authentication-methods", method_id), None, *opts,
            result=AuthenticationMethod,
        )

    def update_authentication_method(
        self, id: str, method_id: str, method: AuthenticationMethod, *opts: RequestOption
    ) -> AuthenticationMethod:
        return self.management.request(
            "PATCH", self._uri("users", id, "authentication-methods", method_id), method, *opts,
            result=AuthenticationMethod,
        )

    def delete_authentication_method(self, id: str, method_id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("users", id, "authentication-methods", method_id), None, *opts)

    def update_all_authentication_methods(
        self, id: str, methods: List[AuthenticationMethod], *opts: RequestOption
    ) -> None:
        """Replace every authentication method of the user."""
        self.management.request("PUT", self._uri("users", id, "authentication-methods"), list(methods), *opts)

    def delete_all_authentication_methods(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("users", id, "authentication-methods"), None, *opts)
