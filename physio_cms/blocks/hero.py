"""Bloc Hero — en-tête de page, contenu différencié par marque (brandContent)."""
from typing import Dict, List, Literal, Optional

from pydantic import Field

from .base import BlockProps, CmsModel, MediaValue, new_id
from .elements import el, item_el

BrandKey = Literal["physiotherapy", "physio-konzept"]


class HeroAction(CmsModel):
    id:      str = Field(default_factory=new_id)
    variant: Literal["primary", "secondary"] = "primary"
    label:   str = ""
    href:    Optional[str] = None
    action:  Optional[str] = None


class HeroBrandContent(CmsModel):
    headline:          str = ""
    subheadline:       str = ""
    cta_text:          Optional[str] = None
    cta_href:          Optional[str] = None
    secondary_cta_text: Optional[str] = None
    secondary_cta_href: Optional[str] = None
    badge_text:        Optional[str] = None
    play_text:         Optional[str] = None
    trust_items:       Optional[List[str]] = None
    floating_title:    Optional[str] = None
    floating_value:    Optional[str] = None
    floating_label:    Optional[str] = None
    headline_color:    Optional[str] = None
    subheadline_color: Optional[str] = None
    cta_color:         Optional[str] = None
    cta_bg_color:      Optional[str] = None
    badge_color:       Optional[str] = None
    badge_bg_color:    Optional[str] = None
    image:             Optional[MediaValue] = None
    image_alt:         Optional[str] = None
    image_variant:     Optional[Literal["landscape", "portrait"]] = None
    image_fit:         Optional[Literal["cover", "contain"]] = None
    image_focus:       Optional[Literal["center", "top", "bottom"]] = None
    contain_background: Optional[Literal["none", "blur"]] = None
    actions:           Optional[List[HeroAction]] = None


class HeroProps(BlockProps):
    # Props « à plat » historiques, remplacées par brandContent[brand] quand présent
    mood:           Optional[BrandKey] = None
    headline:       Optional[str] = None
    subheadline:    Optional[str] = None
    cta_text:       Optional[str] = None
    cta_href:       Optional[str] = None
    show_media:     Optional[bool] = None
    media_type:     Optional[Literal["image", "video"]] = None
    media_url:      Optional[str] = None
    badge_text:     Optional[str] = None
    play_text:      Optional[str] = None
    trust_items:    Optional[List[str]] = None
    floating_title: Optional[str] = None
    floating_value: Optional[str] = None
    floating_label: Optional[str] = None
    brand_content:  Optional[Dict[BrandKey, HeroBrandContent]] = None
    button_preset:  Optional[str] = None


def defaults() -> dict:
    return {
        "mood": "physiotherapy",
        "headline": "Ihre Gesundheit in besten Händen",
        "subheadline": "Professionelle Physiotherapie mit ganzheitlichem Ansatz.",
        "ctaText": "Termin vereinbaren",
        "ctaHref": "/kontakt",
        "showMedia": True,
        "mediaType": "image",
        "mediaUrl": "/placeholder.svg",
        "badgeText": "Vertrauen & Fürsorge",
        "playText": "Video ansehen",
        "trustItems": ["Über 15 Jahre Erfahrung", "Alle Kassen", "Modernste Therapien"],
        "floatingTitle": "Patientenzufriedenheit",
        "floatingValue": "98%",
        "brandContent": {
            "physiotherapy": {
                "headline": "Ihre Gesundheit in besten Händen",
                "subheadline": "Professionelle Physiotherapie mit ganzheitlichem Ansatz. Wir begleiten Sie "
                               "auf dem Weg zu mehr Wohlbefinden und Lebensqualität.",
                "ctaText": "Termin vereinbaren",
                "ctaHref": "/kontakt",
                "badgeText": "Vertrauen & Fürsorge",
                "trustItems": ["Über 15 Jahre Erfahrung", "Alle Kassen", "Modernste Therapien"],
                "floatingTitle": "Patientenzufriedenheit",
                "floatingValue": "98%",
                "image": {"url": "/placeholder.svg"},
                "imageAlt": "Physiotherapeutische Behandlung in ruhiger Atmosphäre",
                "imageVariant": "landscape",
                "imageFit": "cover",
                "imageFocus": "center",
                "containBackground": "blur",
                "actions": [
                    {"id": "primary", "variant": "primary", "label": "Termin vereinbaren", "href": "/kontakt"},
                ],
            },
            "physio-konzept": {
                "headline": "Push Your Limits",
                "subheadline": "Erreiche dein volles Potenzial mit individueller Trainingsbetreuung "
                               "und sportphysiotherapeutischer Expertise.",
                "ctaText": "Jetzt starten",
                "secondaryCtaText": "Video ansehen",
                "secondaryCtaHref": "#video",
                "badgeText": "Performance & Erfolg",
                "playText": "Video ansehen",
                "floatingTitle": "Nächstes Training",
                "floatingValue": "Heute, 18:00",
                "image": {"url": "/placeholder.svg"},
                "imageAlt": "Athlet beim konzentrierten Training",
                "imageVariant": "landscape",
                "imageFit": "cover",
                "imageFocus": "center",
                "containBackground": "blur",
                "actions": [
                    {"id": "primary", "variant": "primary", "label": "Jetzt starten", "href": "/kontakt"},
                    {"id": "video", "variant": "secondary", "label": "Video ansehen", "action": "video"},
                ],
            },
        },
    }


def create_trust_item() -> str:
    return "Neuer Vorteil"


def create_action() -> dict:
    return {"id": new_id(), "variant": "primary", "label": "Neue Action", "href": "#"}


_BC = "brandContent.{brand}"

ELEMENTS = [
    el("headline",         "Überschrift",        "headline",         typo=True, supports_shadow=True),
    el("subheadline",      "Unterüberschrift",   "subheadline",      typo=True, supports_shadow=True),
    el("badge",            "Badge/Auszeichnung", "badgeText",        supports_shadow=True),
    el("cta",              "CTA Button",         "ctaText",          group="Call-to-Action", typo=True),
    el("ctaHref",          "CTA Link",           "ctaHref",          group="Call-to-Action"),
    el("media",            "Bild/Media",         "mediaUrl",         supports_shadow=True),
    item_el("trustItems",  "Trust Item",         "trustItems",       "", typo=False, group="Inhalt"),
    el("brand.headline",   "Überschrift",        f"{_BC}.headline",    typo=True, supports_shadow=True),
    el("brand.subheadline", "Unterüberschrift",  f"{_BC}.subheadline", typo=True, supports_shadow=True),
    el("brand.badge",      "Badge/Auszeichnung", f"{_BC}.badgeText"),
    el("brand.cta",        "CTA Button",         f"{_BC}.ctaText",          group="Call-to-Action", typo=True),
    el("brand.ctaHref",    "CTA Link",           f"{_BC}.ctaHref",          group="Call-to-Action"),
    el("brand.secondaryCta", "Sekundäre CTA",    f"{_BC}.secondaryCtaText", group="Call-to-Action", typo=True),
    el("brand.media",      "Bild/Media",         f"{_BC}.image"),
    el("brand.imageAlt",   "Bild Alt-Text",      f"{_BC}.imageAlt"),
    el("brand.floatingTitle", "Floating Titel",  f"{_BC}.floatingTitle"),
    el("brand.floatingValue", "Floating Wert",   f"{_BC}.floatingValue"),
    el("brand.headlineColor", "Überschrift Farbe", f"{_BC}.headlineColor", group="Design"),
    el("brand.ctaBgColor",    "CTA Hintergrund",   f"{_BC}.ctaBgColor",    group="Design"),
]
