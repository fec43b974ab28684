"""Branding themes of the new universal login."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .manager import Manager
from .model import Model, attr
from .request import RequestOption


@dataclass
class BrandingThemeBorders(Model):
    button_border_radius: Optional[float] = None
    button_border_weight: Optional[float] = None
    # "pill", "rounded" or "sharp"
    buttons_style: Optional[str] = None
    input_border_radius: Optional[float] = None
    input_border_weight: Optional[float] = None
    inputs_style: Optional[str] = None
    show_widget_shadow: Optional[bool] = None
    widget_border_weight: Optional[float] = None
    widget_corner_radius: Optional[float] = None


@dataclass
class BrandingThemeColors(Model):
    base_focus_color: Optional[str] = None
    base_hover_color: Optional[str] = None
    body_text: Optional[str] = None
    error: Optional[str] = None
    header: Optional[str] = None
    icons: Optional[str] = None
    input_background: Optional[str] = None
    input_border: Optional[str] = None
    input_filled_text: Optional[str] = None
    input_labels_placeholders: Optional[str] = None
    links_focused_components: Optional[str] = None
    primary_button: Optional[str] = None
    primary_button_label: Optional[str] = None
    secondary_button_border: Optional[str] = None
    secondary_button_label: Optional[str] = None
    success: Optional[str] = None
    widget_background: Optional[str] = None
    widget_border: Optional[str] = None


@dataclass
class BrandingThemeText(Model):
    bold: Optional[bool] = None
    size: Optional[float] = None


@dataclass
class BrandingThemeFonts(Model):
    body_text: Optional[BrandingThemeText] = None
    buttons_text: Optional[BrandingThemeText] = None
    font_url: Optional[str] = None
    input_labels: Optional[BrandingThemeText] = None
    links: Optional[BrandingThemeText] = None
    # "normal" or "underlined"
    links_style: Optional[str] = None
    reference_text_size: Optional[float] = None
    subtitle: Optional[BrandingThemeText] = None
    title: Optional[BrandingThemeText] = None


@dataclass
class BrandingThemePageBackground(Model):
    background_color: Optional[str] = None
    background_image_url: Optional[str] = None
    # "center", "left" or "right"
    page_layout: Optional[str] = None


@dataclass
class BrandingThemeWidget(Model):
    # "center", "left", "none" or "right"
    header_text_alignment: Optional[str] = None
    logo_height: Optional[float] = None
    logo_position: Optional[str] = None
    logo_url: Optional[str] = None
    social_buttons_layout: Optional[str] = None


@dataclass
class BrandingTheme(Model):
    id: Optional[str] = attr("themeId")
    display_name: Optional[str] = attr("displayName")
    borders: Optional[BrandingThemeBorders] = None
    colors: Optional[BrandingThemeColors] = None
    fonts: Optional[BrandingThemeFonts] = None
    page_background: Optional[BrandingThemePageBackground] = None
    widget: Optional[BrandingThemeWidget] = None


class BrandingThemeManager(Manager):
    """Manage branding themes; a tenant has at most one."""

    def create(self, theme: BrandingTheme, *opts: RequestOption) -> BrandingTheme:
        return self.management.request("POST", self._uri("branding", "themes"), theme, *opts, result=BrandingTheme)

    def read(self, id: str, *opts: RequestOption) -> BrandingTheme:
        return self.management.request("GET", self._uri("branding", "themes", id), None, *opts, result=BrandingTheme)

    def default(self, *opts: RequestOption) -> BrandingTheme:
        return self.management.request(
            "GET", self._uri("branding", "themes", "default"), None, *opts, result=BrandingTheme
        )

    def update(self, id: str, theme: BrandingTheme, *opts: RequestOption) -> BrandingTheme:
        return self.management.request(
            "PATCH", self._uri("branding", "themes", id), theme, *opts, result=BrandingTheme
        )

    def delete(self, id: str, *opts: RequestOption) -> None:
        self.management.request("DELETE", self._uri("branding", "themes", id), None, *opts)
