"""Rule configuration variables, available to every rule."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .exceptions import ManagementError
from .manager import Manager
from .model import Model
from .request import RequestOption


@dataclass
class RuleConfig(Model):
    # Alphanumerics, '-' and '_' only
    key: Optional[str] = None
    # Never returned by the API
    value: Optional[str] = None


class RuleConfigManager(Manager):
    """Manage rule configuration variables."""

    def upsert(self, key: str, config: RuleConfig, *opts: RequestOption) -> RuleConfig:
        """Create or overwrite a variable; only ``value`` is sent."""
        return self.management.request(
            "PUT", self._uri("rules-configs", key), RuleConfig(value=config.value), *opts, result=RuleConfig
        )

    def read(self, key: str, *opts: RequestOption) -> RuleConfig:
        """Look up a variable by key (the API only lists keys).

        Raises:
            ManagementError: 404 when no variable has that key
        """
        for config in self.list(*opts):
            if config.key == key:
                return config
        raise ManagementError(404, "Not Found", "Rule config not found")

    def delete(self, key: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("rules-configs", key), None, *opts)

    def list(self, *opts: RequestOption) -> List[RuleConfig]:
        return self.management.request("GET", self._uri("rules-configs"), None, *opts, result=List[RuleConfig]) or []
