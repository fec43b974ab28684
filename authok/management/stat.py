"""Tenant statistics."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .manager import Manager
from .model import Model
from .request import RequestOption


@dataclass
class DailyStat(Model):
    date: Optional[datetime] = None
    logins: Optional[int] = None
    signups: Optional[int] = None
    leaked_passwords: Optional[int] = None
    updated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class StatManager(Manager):

    def active_users(self, *opts: RequestOption) -> int:
        """Number of users who logged in during the last 30 days."""
        return self.management.request("GET", self._uri("stats", "active-users"), None, *opts, result=int)

    def daily(self, *opts: RequestOption) -> List[DailyStat]:
        """Logins, signups and breached password detections per day.

        Narrow the range with ``parameter("from", "20240101")`` and
        ``parameter("to", "20240131")``.
        """
        return self.management.request("GET", self._uri("stats", "daily"), None, *opts, result=List[DailyStat])
