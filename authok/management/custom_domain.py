"""Custom domains for the authentication pages."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .manager import Manager
from .model import Model, attr
from .request import RequestOption


@dataclass
class CustomDomainVerification(Model):
    methods: Optional[List[Dict[str, Any]]] = None


@dataclass
class CustomDomain(Model):
    id: Optional[str] = attr("custom_domain_id")
    domain: Optional[str] = None
    # "authok_managed_certs" or "self_managed_certs"
    type: Optional[str] = None
    primary: Optional[bool] = None
    # "disabled", "pending", "pending_verification" or "ready"
    status: Optional[str] = None
    # Target of the CNAME record or reverse proxy
    origin_domain_name: Optional[str] = None
    # Header value the reverse proxy sends, for self managed certificates
    cname_api_key: Optional[str] = None
    # "txt"
    verification_method: Optional[str] = None
    verification: Optional[CustomDomainVerification] = None
    # "compatible" or "recommended"
    tls_policy: Optional[str] = None
    custom_client_ip_header: Optional[str] = None


class CustomDomainManager(Manager):
    """Manage custom domains.

    A new domain only accepts requests once ``verify`` succeeds.
    """

    def create(self, custom_domain: CustomDomain, *opts: RequestOption) -> CustomDomain:
        return self.management.request(
            "POST", self._uri("custom-domains"), custom_domain, *opts, result=CustomDomain
        )

    def read(self, id: str, *opts: RequestOption) -> CustomDomain:
        return self.management.request("GET", self._uri("custom-domains", id), None, *opts, result=CustomDomain)

    def update(self, id: str, custom_domain: CustomDomain, *opts: RequestOption) -> CustomDomain:
        return self.management.request(
            "PATCH", self._uri("custom-domains", id), custom_domain, *opts, result=CustomDomain
        )

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("custom-domains", id), None, *opts)

    def list(self, *opts: RequestOption) -> List[CustomDomain]:
        return self.management.request(
            "GET", self._uri("custom-domains"), None, *opts, result=List[CustomDomain]
        )

    def verify(self, id: str, *opts: RequestOption) -> CustomDomain:
        return self.management.request(
            "POST", self._uri("custom-domains", id, "verify"), None, *opts, result=CustomDomain
        )
