"""Bloc CTA — appel à l'action, un ou deux boutons."""
from typing import Literal, Optional

from .base import BlockProps
from .elements import el


class CtaProps(BlockProps):
    headline:                 str
    subheadline:              Optional[str] = None
    primary_cta_text:         str
    primary_cta_href:         str
    secondary_cta_text:       Optional[str] = None
    secondary_cta_href:       Optional[str] = None
    variant:                  Optional[Literal["default", "centered", "split"]] = None
    background_color:         Optional[str] = None
    headline_color:           Optional[str] = None
    subheadline_color:        Optional[str] = None
    primary_cta_text_color:   Optional[str] = None
    primary_cta_bg_color:     Optional[str] = None
    primary_cta_border_color: Optional[str] = None
    primary_cta_border_radius: Optional[str] = None
    secondary_cta_text_color: Optional[str] = None
    secondary_cta_bg_color:   Optional[str] = None
    button_preset:            Optional[str] = None


def defaults() -> dict:
    return {
        "headline": "Bereit zu starten?",
        "subheadline": "Kurzer Satz...",
        "primaryCtaText": "Kontakt",
        "primaryCtaHref": "/kontakt",
        "variant": "default",
    }


ELEMENTS = [
    el("cta.headline",      "Headline",          "headline",         typo=True),
    el("cta.subheadline",   "Subheadline",       "subheadline",      typo=True),
    el("cta.primary",       "Primärer CTA",      "primaryCtaText",   group="Call-to-Action", typo=True),
    el("cta.primaryHref",   "Primärer CTA Link", "primaryCtaHref",   group="Call-to-Action"),
    el("cta.secondary",     "Sekundärer CTA",    "secondaryCtaText", group="Call-to-Action", typo=True),
    el("cta.secondaryHref", "Sekundärer CTA Link", "secondaryCtaHref", group="Call-to-Action"),
    el("cta.variant",         "Variante",        "variant",         group="Layout"),
    el("cta.backgroundColor", "Hintergrundfarbe", "backgroundColor", group="Design"),
    el("cta.headlineColor",   "Headline Farbe",  "headlineColor",   group="Design"),
]
