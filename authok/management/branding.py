"""Branding of the hosted login pages."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type

from .exceptions import DecodeError
from .manager import Manager
from .model import M, Model, attr
from .request import RequestOption


@dataclass
class BrandingPageBackgroundGradient(Model):
    # "linear-gradient"
    type: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    angle_deg: Optional[int] = None


def _encode_page_background(color: Optional[str], gradient: Optional[BrandingPageBackgroundGradient]) -> Dict[str, Any]:
    if color is not None and gradient is not None:
        raise ValueError("page_background and page_background_gradient are mutually exclusive")
    if color is not None:
        return {"page_background": color}
    if gradient is not None:
        return {"page_background": gradient.to_dict()}
    return {}


def _decode_page_background(raw: Any) -> Tuple[Optional[str], Optional[BrandingPageBackgroundGradient]]:
    if raw is None:
        return None, None
    if isinstance(raw, str):
        return raw, None
    if isinstance(raw, dict):
        return None, BrandingPageBackgroundGradient.from_dict(raw)
    raise DecodeError(f"unexpected type for field page_background: {type(raw).__name__}")


@dataclass
class BrandingColors(Model):
    """Brand colors.

    ``page_background`` (a flat color) and ``page_background_gradient``
    share one JSON key; at most one of them may be set.
    """
    primary: Optional[str] = None
    page_background: Optional[str] = attr(skip=True)
    page_background_gradient: Optional[BrandingPageBackgroundGradient] = attr(skip=True)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(_encode_page_background(self.page_background, self.page_background_gradient))
        return data

    @classmethod
    def from_dict(cls: Type[M], data: Dict[str, Any]) -> M:
        colors = super().from_dict(data)
        colors.page_background, colors.page_background_gradient = _decode_page_background(
            data.get("page_background")
        )
        return colors


@dataclass
class BrandingFont(Model):
    url: Optional[str] = None


@dataclass
class Branding(Model):
    colors: Optional[BrandingColors] = None
    favicon_url: Optional[str] = None
    logo_url: Optional[str] = None
    font: Optional[BrandingFont] = None


@dataclass
class BrandingUniversalLogin(Model):
    # Liquid template of the login page
    body: Optional[str] = None


class BrandingManager(Manager):
    """Manage branding settings and the universal login template."""

    def read(self, *opts: RequestOption) -> Branding:
        return self.management.request("GET", self._uri("branding"), None, *opts, result=Branding)

    def update(self, branding: Branding, *opts: RequestOption) -> Branding:
        return self.management.request("PATCH", self._uri("branding"), branding, *opts, result=Branding)

    def universal_login(self, *opts: RequestOption) -> BrandingUniversalLogin:
        return self.management.request(
            "GET", self._uri("branding", "templates", "universal-login"), None, *opts,
            result=BrandingUniversalLogin,
        )

    def set_universal_login(self, template: BrandingUniversalLogin, *opts: RequestOption) -> None:
        self.management.request("PUT", self._uri("branding", "templates", "universal-login"), template, *opts)

    def delete_universal_login(self, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("branding", "templates", "universal-login"), None, *opts)
