"""Tenant log events."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from .manager import Manager
from .model import ListEnvelope, Model, attr
from .request import RequestOption, apply_list_defaults

# Event type codes, see the "type" field of a log event
LOG_TYPES = {
    "s": "Success Login",
    "f": "Failed Login",
    "fp": "Incorrect Password",
    "fu": "Invalid Email/Username",
    "ss": "Success Signup",
    "fs": "Failed Signup",
    "slo": "Success Logout",
    "flo": "User logout failed",
    "seacft": "Success Exchange (Authorization Code for Access Token)",
    "feacft": "Failed Exchange (Authorization Code for Access Token)",
    "seccft": "Success Exchange (Client Credentials for Access Token)",
    "feccft": "Failed Exchange (Client Credentials for Access Token)",
    "sapi": "Success API Operation",
    "fapi": "Failed API Operation",
    "limit_wc": "Blocked Account",
    "limit_mu": "Blocked IP Address",
    "pwd_leak": "Breached password",
}


@dataclass
class Log(Model):
    id: Optional[str] = attr("_id")
    log_id: Optional[str] = None
    date: Optional[datetime] = None
    type: Optional[str] = None
    client_id: Optional[str] = None
    client_name: Optional[str] = None
    ip: Optional[str] = None
    description: Optional[str] = None
    location_info: Optional[Dict[str, Any]] = None
    details: Optional[Dict[str, Any]] = None
    user_id: Optional[str] = None

    def type_name(self) -> str:
        """Human readable name of the event type."""
        return LOG_TYPES.get(self.type or "", "")


@dataclass
class LogList(ListEnvelope):
    logs: Optional[List[Log]] = None


class LogManager(Manager):
    """Read and search log events."""

    def read(self, id: str, *opts: RequestOption) -> Log:
        return self.management.request("GET", self._uri("logs", id), None, *opts, result=Log)

    def list(self, *opts: RequestOption) -> LogList:
        """List log events.

        Pass ``query()`` to search, or ``from_checkpoint()`` with ``take()``
        for checkpoint pagination.
        """
        return self.management.request("GET", self._uri("logs"), None, apply_list_defaults(opts), result=LogList)

    search = list
