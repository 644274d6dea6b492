"""Bloc Section — texte éditorial avec eyebrow, divider et CTA."""
from typing import Literal, Optional

from .base import BlockProps
from .elements import el


class SectionBlockProps(BlockProps):
    eyebrow:            Optional[str] = None
    headline:           str
    subheadline:        Optional[str] = None
    content:            str
    align:              Optional[Literal["left", "center", "justify"]] = None
    justify_bias:       Optional[Literal["none", "readable", "tight"]] = None
    max_width:          Optional[Literal["sm", "md", "lg", "xl", "full"]] = None
    background:         Optional[Literal["none", "muted", "gradient-soft", "gradient-brand"]] = None
    show_divider:       Optional[bool] = None
    enable_glow:        Optional[bool] = None
    enable_hover_elevation: Optional[bool] = None
    show_cta:           Optional[bool] = None
    divider_color:      Optional[str] = None
    background_color:   Optional[str] = None
    eyebrow_color:      Optional[str] = None
    headline_color:     Optional[str] = None
    subheadline_color:  Optional[str] = None
    content_color:      Optional[str] = None
    cta_text:           Optional[str] = None
    cta_href:           Optional[str] = None
    cta_bg_color:       Optional[str] = None
    cta_text_color:     Optional[str] = None
    secondary_cta_text: Optional[str] = None
    secondary_cta_href: Optional[str] = None


def defaults() -> dict:
    return {
        "eyebrow": "Über uns",
        "headline": "Willkommen bei Physiotherapie Kroll",
        "content": "Hier können Sie Ihren Textinhalt eingeben. Unterstützung von Absätzen via \\n\\n.",
        "align": "left",
        "justifyBias": "readable",
        "maxWidth": "lg",
        "background": "none",
        "showDivider": False,
        "enableGlow": True,
        "enableHoverElevation": True,
        "showCta": True,
        "ctaText": "Mehr erfahren",
        "ctaHref": "/kontakt",
    }


ELEMENTS = [
    el("section.eyebrow",      "Eyebrow/Label",         "eyebrow",          typo=True, supports_shadow=True),
    el("section.headline",     "Überschrift",           "headline",         typo=True, supports_shadow=True),
    el("section.subheadline",  "Unterüberschrift",      "subheadline",      typo=True, supports_shadow=True),
    el("section.content",      "Inhalt/Body Text",      "content",          typo=True, supports_shadow=True),
    el("section.ctaPrimary",   "Primärer CTA Button",   "ctaText",          group="Call-to-Action", typo=True),
    el("section.ctaHref",      "Primärer CTA Link",     "ctaHref",          group="Call-to-Action"),
    el("section.ctaSecondary", "Sekundärer CTA Button", "secondaryCtaText", group="Call-to-Action", typo=True),
    el("section.showDivider",  "Divider anzeigen",      "showDivider",      group="Dekorative Elemente"),
    el("section.showCta",      "CTA Button anzeigen",   "showCta",          group="Call-to-Action"),
    el("section.align",        "Ausrichtung",           "align",            group="Layout"),
    el("section.background",   "Hintergrund",           "background",       group="Layout"),
    el("section.headlineColor", "Headline Farbe",       "headlineColor",    group="Design"),
]
