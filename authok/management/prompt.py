"""Prompt settings and custom texts of the login flow."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .manager import Manager
from .model import Model
from .request import RequestOption


@dataclass
class Prompt(Model):
    # "new" or "classic"
    universal_login_experience: Optional[str] = None
    identifier_first: Optional[bool] = None
    webauthn_platform_first_factor: Optional[bool] = None


class PromptManager(Manager):
    """Manage prompt settings."""

    def read(self, *opts: RequestOption) -> Prompt:
        return self.management.request("GET", self._uri("prompts"), None, *opts, result=Prompt)

    def update(self, prompt: Prompt, *opts: RequestOption) -> Prompt:
        return self.management.request("PATCH", self._uri("prompts"), prompt, *opts, result=Prompt)

    def custom_text(self, prompt: str, language: str, *opts: RequestOption) -> Dict[str, Any]:
        """Custom texts of one prompt ("login", "signup" ...) in one language."""
        return self.management.request(
            "GET", self._uri("prompts", prompt, "custom-text", language), None, *opts, result=Dict[str, Any]
        )

    def set_custom_text(self, prompt: str, language: str, text: Dict[str, Any], *opts: RequestOption) -> None:
        """Replace the custom texts of a prompt for a language."""
        self.management.request("PUT", self._uri("prompts", prompt, "custom-text", language), dict(text), *opts)
