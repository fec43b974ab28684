"""Attack protection: breached passwords, brute force, suspicious IPs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .manager import Manager
from .model import Model, attr
from .request import RequestOption


@dataclass
class BreachedPasswordDetectionPreUserRegistration(Model):
    # "block" and/or "admin_notification"
    shields: Optional[List[str]] = None


@dataclass
class BreachedPasswordDetectionStage(Model):
    pre_user_registration: Optional[BreachedPasswordDetectionPreUserRegistration] = attr("pre-user-registration")


@dataclass
class BreachedPasswordDetection(Model):
    enabled: Optional[bool] = None
    # "block", "user_notification", "admin_notification"
    shields: Optional[List[str]] = None
    admin_notification_frequency: Optional[List[str]] = None
    # "standard" or "enhanced"
    method: Optional[str] = None
    stage: Optional[BreachedPasswordDetectionStage] = None


@dataclass
class BruteForceProtection(Model):
    enabled: Optional[bool] = None
    shields: Optional[List[str]] = None
    allowlist: Optional[List[str]] = None
    # "count_per_identifier_and_ip" or "count_per_identifier"
    mode: Optional[str] = None
    max_attempts: Optional[int] = None


@dataclass
class Stage(Model):
    max_attempts: Optional[int] = None
    # Milliseconds between attempt refills
    rate: Optional[int] = None


@dataclass
class SuspiciousIPThrottlingStage(Model):
    pre_login: Optional[Stage] = attr("pre-login")
    pre_user_registration: Optional[Stage] = attr("pre-user-registration")


@dataclass
class SuspiciousIPThrottling(Model):
    enabled: Optional[bool] = None
    shields: Optional[List[str]] = None
    allowlist: Optional[List[str]] = None
    stage: Optional[SuspiciousIPThrottlingStage] = None


class AttackProtectionManager(Manager):
    """Read and update the attack protection settings."""

    def get_breached_password_detection(self, *opts: RequestOption) -> BreachedPasswordDetection:
        return self.management.request(
            "GET", self._uri("attack-protection", "breached-password-detection"), None, *opts,
            result=BreachedPasswordDetection,
        )

    def update_breached_password_detection(
        self, settings: BreachedPasswordDetection, *opts: RequestOption
    ) -> BreachedPasswordDetection:
        return self.management.request(
            "PATCH", self._uri("attack-protection", "breached-password-detection"), settings, *opts,
            result=BreachedPasswordDetection,
        )

    def get_brute_force_protection(self, *opts: RequestOption) -> BruteForceProtection:
        return self.management.request(
            "GET", self._uri("attack-protection", "brute-force-protection"), None, *opts,
            result=BruteForceProtection,
        )

    def update_brute_force_protection(
        self, settings: BruteForceProtection, *opts: RequestOption
    ) -> BruteForceProtection:
        return self.management.request(
            "PATCH", self._uri("attack-protection", "brute-force-protection"), settings, *opts,
            result=BruteForceProtection,
        )

    def get_suspicious_ip_throttling(self, *opts: RequestOption) -> SuspiciousIPThrottling:
        return self.management.request(
            "GET", self._uri("attack-protection", "suspicious-ip-throttling"), None, *opts,
            result=SuspiciousIPThrottling,
        )

    def update_suspicious_ip_throttling(
        self, settings: SuspiciousIPThrottling, *opts: RequestOption
    ) -> SuspiciousIPThrottling:
        return self.management.request(
            "PATCH", self._uri("attack-protection", "suspicious-ip-throttling"), settings, *opts,
            result=SuspiciousIPThrottling,
        )
