"""Email templates (verification, welcome, password reset ...)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .manager import Manager
from .model import Model, attr
from .request import RequestOption


@dataclass
class EmailTemplate(Model):
    # "verify_email", "reset_email", "welcome_email", "blocked_account" ...
    template: Optional[str] = None
    body: Optional[str] = None
    from_: Optional[str] = attr("from")
    result_url: Optional[str] = attr("resultUrl")
    subject: Optional[str] = None
    # "liquid"
    syntax: Optional[str] = None
    url_lifetime_in_seconds: Optional[int] = attr("urlLifetimeInSeconds")
    enabled: Optional[bool] = None
    include_email_in_redirect: Optional[bool] = attr("includeEmailInRedirect")


class EmailTemplateManager(Manager):
    """Manage email templates, addressed by template name."""

    def create(self, template: EmailTemplate, *opts: RequestOption) -> EmailTemplate:
        return self.management.request("POST", self._uri("email-templates"), template, *opts, result=EmailTemplate)

    def read(self, template: str, *opts: RequestOption) -> EmailTemplate:
        return self.management.request(
            "GET", self._uri("email-templates", template), None, *opts, result=EmailTemplate
        )

    def update(self, template: str, email_template: EmailTemplate, *opts: RequestOption) -> EmailTemplate:
        """Change the given fields of a template."""
        return self.management.request(
            "PATCH", self._uri("email-templates", template), email_template, *opts, result=EmailTemplate
        )

    def replace(self, template: str, email_template: EmailTemplate, *opts: RequestOption) -> EmailTemplate:
        """Overwrite the whole template."""
        return self.management.request(
            "PUT", self._uri("email-templates", template), email_template, *opts, result=EmailTemplate
        )
