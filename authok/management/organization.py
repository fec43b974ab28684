"""Organizations: members, invitations and enabled connections."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .manager import Manager
from .model import ListEnvelope, Model
from .request import RequestOption, apply_list_defaults


@dataclass
class OrganizationBrandingColors(Model):
    primary: Optional[str] = None
    page_background: Optional[str] = None


@dataclass
class OrganizationBranding(Model):
    logo_url: Optional[str] = None
    colors: Optional[OrganizationBrandingColors] = None


@dataclass
class Organization(Model):
    id: Optional[str] = None
    # Lowercase, used in login URLs
    name: Optional[str] = None
    display_name: Optional[str] = None
    branding: Optional[OrganizationBranding] = None
    metadata: Optional[Dict[str, str]] = None


@dataclass
class OrganizationList(ListEnvelope):
    organizations: Optional[List[Organization]] = None


@dataclass
class OrganizationMember(Model):
    user_id: Optional[str] = None
    picture: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class OrganizationMemberList(ListEnvelope):
    members: Optional[List[OrganizationMember]] = None


@dataclass
class OrganizationInvitationInviter(Model):
    name: Optional[str] = None


@dataclass
class OrganizationInvitationInvitee(Model):
    email: Optional[str] = None


@dataclass
class OrganizationInvitation(Model):
    id: Optional[str] = None
    organization_id: Optional[str] = None
    inviter: Optional[OrganizationInvitationInviter] = None
    invitee: Optional[OrganizationInvitationInvitee] = None
    invitation_url: Optional[str] = None
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    client_id: Optional[str] = None
    connection_id: Optional[str] = None
    app_metadata: Optional[Dict[str, Any]] = None
    user_metadata: Optional[Dict[str, Any]] = None
    # Lifetime of the invitation in seconds, 0 for the default of 7 days
    ttl_sec: Optional[int] = None
    roles: Optional[List[str]] = None
    ticket_id: Optional[str] = None
    send_invitation_email: Optional[bool] = None


@dataclass
class OrganizationInvitationList(ListEnvelope):
    invitations: Optional[List[OrganizationInvitation]] = None


@dataclass
class OrganizationConnectionDetails(Model):
    name: Optional[str] = None
    strategy: Optional[str] = None


@dataclass
class OrganizationConnection(Model):
    connection_id: Optional[str] = None
    # Grant membership to users logging in through this connection
    assign_membership_on_login: Optional[bool] = None
    connection: Optional[OrganizationConnectionDetails] = None


@dataclass
class OrganizationConnectionList(ListEnvelope):
    enabled_connections: Optional[List[OrganizationConnection]] = None


class OrganizationManager(Manager):
    """Manage organizations."""

    def create(self, organization: Organization, *opts: RequestOption) -> Organization:
        return self.management.request("POST", self._uri("organizations"), organization, *opts, result=Organization)

    def read(self, id: str, *opts: RequestOption) -> Organization:
        return self.management.request("GET", self._uri("organizations", id), None, *opts, result=Organization)

    def read_by_name(self, name: str, *opts: RequestOption) -> Organization:
        return self.management.request(
            "GET", self._uri("organizations", "name", name), None, *opts, result=Organization
        )

    def update(self, id: str, organization: Organization, *opts: RequestOption) -> Organization:
        return self.management.request(
            "PATCH", self._uri("organizations", id), organization, *opts, result=Organization
        )

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("organizations", id), None, *opts)

    def list(self, *opts: RequestOption) -> OrganizationList:
        return self.management.request(
            "GET", self._uri("organizations"), None, apply_list_defaults(opts), result=OrganizationList
        )

    def members(self, id: str, *opts: RequestOption) -> OrganizationMemberList:
        return self.management.request(
            "GET", self._uri("organizations", id, "members"), None, apply_list_defaults(opts),
            result=OrganizationMemberList,
        )

    def add_members(self, id: str, user_ids: List[str], *opts: RequestOption) -> None:
        body = {"members": list(user_ids)}
        self.management.request("POST", self._uri("organizations", id, "members"), body, *opts)

    def delete_members(self, id: str, user_ids: List[str], *opts: RequestOption) -> None:
        body = {"members": list(user_ids)}
        self.management.request("DELETE", self._uri("organizations", id, "members"), body, *opts)

    def invitations(self, id: str, *opts: RequestOption) -> OrganizationInvitationList:
        return self.management.request(
            "GET", self._uri("organizations", id, "invitations"), None, apply_list_defaults(opts),
            result=OrganizationInvitationList,
        )

    def create_invitation(
        self, id: str, invitation: OrganizationInvitation, *opts: RequestOption
    ) -> OrganizationInvitation:
        return self.management.request(
            "POST", self._uri("organizations", id, "invitations"), invitation, *opts,
            result=OrganizationInvitation,
        )

    def read_invitation(self, id: str, invitation_id: str, *opts: RequestOption) -> OrganizationInvitation:
        return self.management.request(
            "GET", self._uri("organizations", id, "invitations", invitation_id), None, *opts,
            result=OrganizationInvitation,
        )

    def delete_invitation(self, id: str, invitation_id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("organizations", id, "invitations", invitation_id), None, *opts)

    def connections(self, id: str, *opts: RequestOption) -> OrganizationConnectionList:
        return self.management.request(
            "GET", self._uri("organizations", id, "enabled_connections"), None, apply_list_defaults(opts),
            result=OrganizationConnectionList,
        )

    def add_connection(
        self, id: str, connection: OrganizationConnection, *opts: RequestOption
    ) -> OrganizationConnection:
        return self.management.request(
            "POST", self._uri("organizations", id, "enabled_connections"), connection, *opts,
            result=OrganizationConnection,
        )

    def update_connection(
        self, id: str, connection_id: str, connection: OrganizationConnection, *opts: RequestOption
    ) -> OrganizationConnection:
        return self.management.request(
            "PATCH", self._uri("organizations", id, "enabled_connections", connection_id), connection, *opts,
            result=OrganizationConnection,
        )

    def delete_connection(self, id: str, connection_id: str, *opts: RequestOption) -> None:
        self.management.request(
            "DELETE", self._uri("organizations", id, "enabled_connections", connection_id), None, *opts
        )
