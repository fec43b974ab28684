"""Anomaly detection: IP addresses blocked after suspicious activity."""
from __future__ import annotations

from .exceptions import ManagementError
from .manager import Manager
from .request import RequestOption


class AnomalyManager(Manager):
    """Check and clear IP blocks."""

    def check_ip(self, ip: str, *opts: RequestOption) -> bool:
        """Return whether the IP address is currently blocked.

        The API answers 200 for a blocked address and 404 otherwise.
        """
        try:
            self.management.request("GET", self._uri("anomaly", "blocks", "ips", ip), None, *opts)
        except ManagementError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def unblock_ip(self, ip: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("anomaly", "blocks", "ips", ip), None, *opts)
