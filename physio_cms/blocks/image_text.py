"""Bloc Image + Text — visuel à gauche/droite, texte et CTA."""
from typing import Literal, Optional

from .base import Background, BlockProps, CmsModel
from .elements import el


class ImageTextStyle(CmsModel):
    variant:            Optional[Literal["default", "soft"]] = None
    vertical_align:     Optional[Literal["top", "center"]] = None
    text_align:         Optional[Literal["left", "center"]] = None
    max_width:          Optional[Literal["md", "lg", "xl"]] = None
    image_aspect_ratio: Optional[Literal["4/3", "16/9", "1/1", "3/2"]] = None
    padding_y:          Optional[Literal["none", "sm", "md", "lg", "xl"]] = None
    padding_x:          Optional[Literal["sm", "md", "lg"]] = None


class ImageTextProps(BlockProps):
    image_url:         str
    image_alt:         str
    image_position:    Optional[Literal["left", "right"]] = None
    eyebrow:           Optional[str] = None
    headline:          Optional[str] = None
    content:           str
    cta_text:          Optional[str] = None
    cta_href:          Optional[str] = None
    headline_color:    Optional[str] = None
    content_color:     Optional[str] = None
    cta_text_color:    Optional[str] = None
    cta_bg_color:      Optional[str] = None
    cta_border_color:  Optional[str] = None
    background:        Optional[Background] = None
    background_color:  Optional[str] = None
    design_preset:     Optional[str] = None
    style:             Optional[ImageTextStyle] = None


def defaults() -> dict:
    return {
        "imageUrl": "/placeholder.svg",
        "imageAlt": "Bildbeschreibung",
        "imagePosition": "left",
        "eyebrow": "Label",
        "headline": "Überschrift",
        "content": "Textinhalt hier eingeben...",
        "ctaText": "Mehr erfahren",
        "ctaHref": "/",
        "background": "none",
        "designPreset": "standard",
        "style": {
            "variant": "default", "verticalAlign": "center", "textAlign": "left", "maxWidth": "lg",
            "imageAspectRatio": "4/3", "paddingY": "md", "paddingX": "md",
        },
    }


ELEMENTS = [
    el("imageText.eyebrow",  "Eyebrow",  "eyebrow",  typo=True),
    el("imageText.headline", "Headline", "headline", typo=True),
    el("imageText.content",  "Content",  "content",  typo=True),
    el("imageText.cta",      "CTA",      "ctaText",  group="Call-to-Action", typo=True),
    el("imageText.ctaHref",  "CTA Link", "ctaHref",  group="Call-to-Action"),
    el("imageText.image",    "Image",    "imageUrl"),
    el("imageText.imageAlt", "Alt-Text", "imageAlt"),
    el("imageText.imagePosition", "Bildposition", "imagePosition", group="Layout"),
    el("imageText.headlineColor", "Headline Farbe", "headlineColor", group="Design"),
    el("imageText.contentColor",  "Inhalt Farbe",   "contentColor",  group="Design"),
]
