"""Email provider used to send tenant emails.

``credentials`` and ``settings`` depend on the provider ``name``; decode
them with ``EmailProvider.credentials_as`` / ``EmailProvider.settings_as``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Type

from .manager import Manager
from .model import M, Model, Variant, attr, decode_variant
from .request import RequestOption

EMAIL_PROVIDER_MANDRILL = "mandrill"
EMAIL_PROVIDER_SES = "ses"
EMAIL_PROVIDER_SENDGRID = "sendgrid"
EMAIL_PROVIDER_SPARKPOST = "sparkpost"
EMAIL_PROVIDER_MAILGUN = "mailgun"
EMAIL_PROVIDER_SMTP = "smtp"


@dataclass
class EmailProviderCredentialsMandrill(Model):
    api_key: Optional[str] = None


@dataclass
class EmailProviderCredentialsSES(Model):
    access_key_id: Optional[str] = attr("accessKeyId")
    secret_access_key: Optional[str] = attr("secretAccessKey")
    region: Optional[str] = None


@dataclass
class EmailProviderCredentialsSendGrid(Model):
    api_key: Optional[str] = None


@dataclass
class EmailProviderCredentialsSparkPost(Model):
    api_key: Optional[str] = None
    # "eu" or None for the US region
    region: Optional[str] = None


@dataclass
class EmailProviderCredentialsMailgun(Model):
    api_key: Optional[str] = None
    domain: Optional[str] = None
    region: Optional[str] = None


@dataclass
class EmailProviderCredentialsSMTP(Model):
    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None


@dataclass
class EmailProviderSettingsMandrillMessage(Model):
    view_content_link: Optional[bool] = None


@dataclass
class EmailProviderSettingsMandrill(Model):
    message: Optional[EmailProviderSettingsMandrillMessage] = None


@dataclass
class EmailProviderSettingsSESMessage(Model):
    configuration_set_name: Optional[str] = None


@dataclass
class EmailProviderSettingsSES(Model):
    message: Optional[EmailProviderSettingsSESMessage] = None


@dataclass
class EmailProviderSettingsSMTPHeaders(Model):
    x_mc_view_content_link: Optional[str] = attr("X-MC-ViewContentLink")
    x_ses_configuration_set: Optional[str] = attr("X-SES-Configuration-Set")


@dataclass
class EmailProviderSettingsSMTP(Model):
    headers: Optional[EmailProviderSettingsSMTPHeaders] = None


@dataclass
class EmailProvider(Model):
    # One of the EMAIL_PROVIDER_* constants
    name: Optional[str] = None
    enabled: Optional[bool] = None
    default_from_address: Optional[str] = None
    # Provider dependent; see ``credentials_as``
    credentials: Any = attr(codec=Variant())
    # Provider dependent; see ``settings_as``
    settings: Any = attr(codec=Variant())

    def credentials_as(self, variant: Type[M]) -> Optional[M]:
        return decode_variant(variant, self.credentials)

    def settings_as(self, variant: Type[M]) -> Optional[M]:
        return decode_variant(variant, self.settings)


class EmailProviderManager(Manager):
    """Manage the tenant's email provider (there is at most one)."""

    def create(self, provider: EmailProvider, *opts: RequestOption) -> EmailProvider:
        return self.management.request(
            "POST", self._uri("emails", "provider"), provider, *opts, result=EmailProvider
        )

    def read(self, *opts: RequestOption) -> EmailProvider:
        return self.management.request("GET", self._uri("emails", "provider"), None, *opts, result=EmailProvider)

    def update(self, provider: EmailProvider, *opts: RequestOption) -> EmailProvider:
        return self.management.request(
            "PATCH", self._uri("emails", "provider"), provider, *opts, result=EmailProvider
        )

    def delete(self, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("emails", "provider"), None, *opts)
