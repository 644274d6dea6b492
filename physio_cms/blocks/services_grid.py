"""Bloc Services Grid — cartes de prestations avec icône et lien."""
from typing import List, Optional

from pydantic import Field

from .base import Background, BlockProps, ListItem, new_id
from .elements import el, item_el
from .feature_grid import Columns


class ServiceCard(ListItem):
    icon:              str
    title:             str
    text:              str
    cta_text:          Optional[str] = None
    cta_href:          Optional[str] = None
    icon_color:        Optional[str] = None
    title_color:       Optional[str] = None
    text_color:        Optional[str] = None
    card_bg_color:     Optional[str] = None
    card_border_color: Optional[str] = None


class ServicesGridProps(BlockProps):
    headline:          Optional[str] = None
    subheadline:       Optional[str] = None
    headline_color:    Optional[str] = None
    subheadline_color: Optional[str] = None
    icon_color:        Optional[str] = None
    icon_bg_color:     Optional[str] = None
    title_color:       Optional[str] = None
    text_color:        Optional[str] = None
    cta_color:         Optional[str] = None
    card_bg_color:     Optional[str] = None
    card_border_color: Optional[str] = None
    columns:           Optional[Columns] = None
    background:        Optional[Background] = None
    cards:             List[ServiceCard] = Field(min_length=1, max_length=12)


def create_service_card() -> dict:
    return {
        "id": new_id(), "icon": "Heart", "title": "Neuer Service", "text": "Beschreibung hier eingeben...",
        "ctaText": "Mehr erfahren", "ctaHref": "/",
    }


_CARDS = [
    ("HeartPulse", "Physiotherapie", "Individuelle Behandlung für Ihre Gesundheit und Wohlbefinden.", "/physiotherapie"),
    ("Dumbbell", "Training", "Gezieltes Kraft- und Ausdauertraining für optimale Ergebnisse.", "/training"),
    ("Activity", "Rehabilitation", "Professionelle Reha nach Verletzungen und Operationen.", "/rehabilitation"),
    ("Users", "Gruppenkurse", "Gemeinsam trainieren und motiviert bleiben in der Gruppe.", "/kurse"),
    ("Clock", "Prävention", "Vorbeugende Maßnahmen für langfristige Gesundheit.", "/praevention"),
    ("Sparkles", "Wellness", "Entspannung und Regeneration für Körper und Geist.", "/wellness"),
]


def defaults() -> dict:
    return {
        "headline": "Angebote & Kurse",
        "subheadline": "Therapie, Training und Kurse – alles an einem Ort.",
        "columns": 3,
        "background": "none",
        "cards": [
            {"id": new_id(), "icon": icon, "title": title, "text": text, "ctaText": "Mehr erfahren", "ctaHref": href}
            for icon, title, text, href in _CARDS
        ],
    }


ELEMENTS = [
    el("services.headline",    "Headline",    "headline",    typo=True),
    el("services.subheadline", "Subheadline", "subheadline", typo=True),
    item_el("services.card.title", "Card Title", "cards", "title"),
    item_el("services.card.text",  "Card Text",  "cards", "text"),
    item_el("services.card.cta",   "Card CTA",   "cards", "ctaText"),
    item_el("services.card.href",  "Card Link",  "cards", "ctaHref", typo=False),
    item_el("services.card.icon",  "Card Icon",  "cards", "icon", typo=False),
    el("services.columns",       "Spalten",        "columns",       group="Layout"),
    el("services.headlineColor", "Headline Farbe", "headlineColor", group="Design"),
    el("services.cardBgColor",   "Karte Hintergrund", "cardBgColor", group="Design"),
]
