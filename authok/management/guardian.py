"""Guardian multi-factor settings: factors, providers, templates, enrollments."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .manager import Manager
from .model import Model, attr
from .request import RequestOption


@dataclass
class MultiFactor(Model):
    name: Optional[str] = None
    enabled: Optional[bool] = None
    trial_expired: Optional[bool] = None


@dataclass
class GuardianEnrollment(Model):
    """A multi-factor enrollment of a user."""
    id: Optional[str] = None
    # "pending" or "confirmed"
    status: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    identifier: Optional[str] = None
    phone_number: Optional[str] = None
    auth_method: Optional[str] = None
    enrolled_at: Optional[datetime] = None
    last_auth: Optional[datetime] = None


@dataclass
class CreateEnrollmentTicket(Model):
    user_id: Optional[str] = None
    email: Optional[str] = None
    send_mail: Optional[bool] = None


@dataclass
class EnrollmentTicket(Model):
    ticket_id: Optional[str] = None
    ticket_url: Optional[str] = None


@dataclass
class MultiFactorProvider(Model):
    # "authok", "twilio" or "phone-message-hook"
    provider: Optional[str] = None


@dataclass
class PhoneMessageTypes(Model):
    # Any of "sms" and "voice"
    message_types: Optional[List[str]] = None


@dataclass
class MultiFactorSMSTemplate(Model):
    enrollment_message: Optional[str] = None
    verification_message: Optional[str] = None


@dataclass
class MultiFactorProviderTwilio(Model):
    # Either from_ or messaging_service_sid is required
    from_: Optional[str] = attr("from")
    messaging_service_sid: Optional[str] = None
    auth_token: Optional[str] = None
    sid: Optional[str] = None


class GuardianManager(Manager):
    """Manage Guardian factors, their providers and user enrollments."""

    def list_factors(self, *opts: RequestOption) -> List[MultiFactor]:
        return self.management.request(
            "GET", self._uri("guardian", "factors"), None, *opts, result=List[MultiFactor]
        )

    def update_factor(self, name: str, enabled: bool, *opts: RequestOption) -> MultiFactor:
        """Enable or disable a factor ("sms", "push-notification", "otp", ...)."""
        return self.management.request(
            "PUT", self._uri("guardian", "factors", name), {"enabled": enabled}, *opts, result=MultiFactor
        )

    def sms_provider(self, *opts: RequestOption) -> MultiFactorProvider:
        return self.management.request(
            "GET", self._uri("guardian", "factors", "sms", "selected-provider"), None, *opts,
            result=MultiFactorProvider,
        )

    def update_sms_provider(self, provider: MultiFactorProvider, *opts: RequestOption) -> MultiFactorProvider:
        return self.management.request(
            "PUT", self._uri("guardian", "factors", "sms", "selected-provider"), provider, *opts,
            result=MultiFactorProvider,
        )

    def sms_templates(self, *opts: RequestOption) -> MultiFactorSMSTemplate:
        return self.management.request(
            "GET", self._uri("guardian", "factors", "sms", "templates"), None, *opts,
            result=MultiFactorSMSTemplate,
        )

    def update_sms_templates(self, templates: MultiFactorSMSTemplate, *opts: RequestOption) -> MultiFactorSMSTemplate:
        return self.management.request(
            "PUT", self._uri("guardian", "factors", "sms", "templates"), templates, *opts,
            result=MultiFactorSMSTemplate,
        )

    def twilio_provider(self, *opts: RequestOption) -> MultiFactorProviderTwilio:
        return self.management.request(
            "GET", self._uri("guardian", "factors", "sms", "providers", "twilio"), None, *opts,
            result=MultiFactorProviderTwilio,
        )

    def update_twilio_provider(
        self, twilio: MultiFactorProviderTwilio, *opts: RequestOption
    ) -> MultiFactorProviderTwilio:
        return self.management.request(
            "PUT", self._uri("guardian", "factors", "sms", "providers", "twilio"), twilio, *opts,
            result=MultiFactorProviderTwilio,
        )

    def phone_provider(self, *opts: RequestOption) -> MultiFactorProvider:
        return self.management.request(
            "GET", self._uri("guardian", "factors", "phone", "selected-provider"), None, *opts,
            result=MultiFactorProvider,
        )

    def update_phone_provider(self, provider: MultiFactorProvider, *opts: RequestOption) -> MultiFactorProvider:
        return self.management.request(
            "PUT", self._uri("guardian", "factors", "phone", "selected-provider"), provider, *opts,
            result=MultiFactorProvider,
        )

    def phone_message_types(self, *opts: RequestOption) -> PhoneMessageTypes:
        return self.management.request(
            "GET", self._uri("guardian", "factors", "phone", "message-types"), None, *opts,
            result=PhoneMessageTypes,
        )

    def update_phone_message_types(self, types: PhoneMessageTypes, *opts: RequestOption) -> PhoneMessageTypes:
        return self.management.request(
            "PUT", self._uri("guardian", "factors", "phone", "message-types"), types, *opts,
            result=PhoneMessageTypes,
        )

    def create_enrollment_ticket(self, ticket: CreateEnrollmentTicket, *opts: RequestOption) -> EnrollmentTicket:
        """Generate a ticket a user can follow to enroll in multi-factor."""
        return self.management.request(
            "POST", self._uri("guardian", "enrollments", "ticket"), ticket, *opts, result=EnrollmentTicket
        )

    def read_enrollment(self, id: str, *opts: RequestOption) -> GuardianEnrollment:
        return self.management.request(
            "GET", self._uri("guardian", "enrollments", id), None, *opts, result=GuardianEnrollment
        )

    def delete_enrollment(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("guardian", "enrollments", id), None, *opts)
