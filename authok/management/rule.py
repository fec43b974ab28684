"""Rules: scripts run as part of the authentication pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .manager import Manager
from .model import ListEnvelope, Model
from .request import RequestOption, apply_list_defaults


@dataclass
class Rule(Model):
    id: Optional[str] = None
    # Alphanumerics, spaces and '-'; cannot start or end with '-' or a space
    name: Optional[str] = None
    script: Optional[str] = None
    # Lower order executes first; defaults to one above the current maximum
    order: Optional[int] = None
    enabled: Optional[bool] = None


@dataclass
class RuleList(ListEnvelope):
    rules: Optional[List[Rule]] = None


class RuleManager(Manager):
    """Manage rules."""

    def create(self, rule: Rule, *opts: RequestOption) -> Rule:
        """Create a new rule.

        Changing a rule's stage from the default ``login_success`` can drop
        the ``user`` argument from its function signature.
        """
        return self.management.request("POST", self._uri("rules"), rule, *opts, result=Rule)

    def read(self, id: str, *opts: RequestOption) -> Rule:
        return self.management.request("GET", self._uri("rules", id), None, *opts, result=Rule)

    def update(self, id: str, rule: Rule, *opts: RequestOption) -> Rule:
        return self.management.request("PATCH", self._uri("rules", id), rule, *opts, result=Rule)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("rules", id), None, *opts)

    def list(self, *opts: RequestOption) -> RuleList:
        return self.management.request("GET", self._uri("rules"), None, apply_list_defaults(opts), result=RuleList)
