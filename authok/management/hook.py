"""Hooks: extensibility points run at fixed triggers, and their secrets."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .manager import Manager
from .model import ListEnvelope, Model, attr
from .request import RequestOption, apply_list_defaults

# Secret values are never returned by the API, only this placeholder
HOOK_SECRET_PLACEHOLDER = "_VALUE_NOT_SHOWN_"


@dataclass
class Hook(Model):
    id: Optional[str] = None
    name: Optional[str] = None
    script: Optional[str] = None
    # "credentials-exchange", "pre-user-registration", "post-user-registration" ...
    trigger_id: Optional[str] = attr("triggerId")
    # Package name to version
    dependencies: Optional[Dict[str, str]] = None
    enabled: Optional[bool] = None


@dataclass
class HookList(ListEnvelope):
    hooks: Optional[List[Hook]] = None


class HookManager(Manager):
    """Manage hooks and hook secrets."""

    def create(self, hook: Hook, *opts: RequestOption) -> Hook:
        return self.management.request("POST", self._uri("hooks"), hook, *opts, result=Hook)

    def read(self, id: str, *opts: RequestOption) -> Hook:
        return self.management.request("GET", self._uri("hooks", id), None, *opts, result=Hook)

    def update(self, id: str, hook: Hook, *opts: RequestOption) -> Hook:
        return self.management.request("PATCH", self._uri("hooks", id), hook, *opts, result=Hook)

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("hooks", id), None, *opts)

    def list(self, *opts: RequestOption) -> HookList:
        return self.management.request("GET", self._uri("hooks"), None, apply_list_defaults(opts), result=HookList)

    def secrets(self, id: str, *opts: RequestOption) -> Dict[str, str]:
        """Secret names of a hook; values come back as a placeholder."""
        return self.management.request("GET", self._uri("hooks", id, "secrets"), None, *opts, result=Dict[str, str])

    def create_secrets(self, id: str, secrets: Dict[str, str], *opts: RequestOption) -> None:
        """Add secrets; fails if one of the names already exists."""
        self.management.request("POST", self._uri("hooks", id, "secrets"), dict(secrets), *opts)

    def replace_secrets(self, id: str, secrets: Dict[str, str], *opts: RequestOption) -> None:
        """Change the value of existing secrets."""
        self.management.request("PATCH", self._uri("hooks", id, "secrets"), dict(secrets), *opts)

    def remove_secrets(self, id: str, keys: List[str], *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("hooks", id, "secrets"), list(keys), *opts)
