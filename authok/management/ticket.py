"""Tickets: one-off links for email verification and password change."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .manager import Manager
from .model import Model, attr
from .request import RequestOption


@dataclass
class Ticket(Model):
    # Where the user is sent once the ticket is used
    result_url: Optional[str] = None
    user_id: Optional[str] = None
    # Only for password change tickets, with email instead of user_id
    connection_id: Optional[str] = None
    email: Optional[str] = None
    # Lifetime in seconds
    ttl_sec: Optional[int] = None
    mark_email_as_verified: Optional[bool] = None
    include_email_in_redirect: Optional[bool] = attr("includeEmailInRedirect")
    # Returned by the API
    ticket: Optional[str] = None


class TicketManager(Manager):
    """Create tickets. Each call returns the ticket with its ``ticket`` URL."""

    def verify_email(self, ticket: Ticket, *opts: RequestOption) -> Ticket:
        return self.management.request(
            "POST", self._uri("tickets", "email-verification"), ticket, *opts, result=Ticket
        )

    def change_password(self, ticket: Ticket, *opts: RequestOption) -> Ticket:
        return self.management.request(
            "POST", self._uri("tickets", "password-change"), ticket, *opts, result=Ticket
        )
