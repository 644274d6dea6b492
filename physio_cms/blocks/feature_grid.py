"""Bloc Feature Grid — grille de cartes titre + description."""
from typing import List, Literal, Optional

from .base import BlockProps, CmsModel, ListItem, new_id
from .elements import el, item_el

Columns = Literal[2, 3, 4]


class CardStyle(CmsModel):
    variant: Optional[Literal["default", "soft", "outline", "elevated"]] = None
    radius:  Optional[Literal["md", "lg", "xl"]] = None
    border:  Optional[Literal["none", "subtle", "strong"]] = None
    shadow:  Optional[Literal["none", "sm", "md", "lg"]] = None
    accent:  Optional[Literal["none", "brand", "muted"]] = None


class CardAnimation(CmsModel):
    entrance:    Optional[Literal["none", "fade", "slide-up", "slide-left", "scale"]] = None
    hover:       Optional[Literal["none", "lift", "glow", "tilt"]] = None
    duration_ms: Optional[int] = None
    delay_ms:    Optional[int] = None


class FeatureItem(ListItem):
    title:             str
    description:       str
    icon:              Optional[str] = None
    title_color:       Optional[str] = None
    description_color: Optional[str] = None
    icon_color:        Optional[str] = None
    card_bg_color:     Optional[str] = None
    card_border_color: Optional[str] = None
    style:             Optional[CardStyle] = None


class FeatureGridProps(BlockProps):
    features:          List[FeatureItem]
    columns:           Optional[Columns] = None
    title_color:       Optional[str] = None
    description_color: Optional[str] = None
    icon_color:        Optional[str] = None
    card_bg_color:     Optional[str] = None
    card_border_color: Optional[str] = None
    design_preset:     Optional[str] = None
    style:             Optional[CardStyle] = None
    animation:         Optional[CardAnimation] = None


def create_feature_item() -> dict:
    return {"id": new_id(), "title": "Neues Feature", "description": "Beschreibung hier eingeben..."}


def defaults() -> dict:
    return {
        "features": [
            {"id": new_id(), "title": f"Feature {i}", "description": "Beschreibung..."} for i in (1, 2, 3)
        ],
        "columns": 3,
        "designPreset": "standard",
        "style": {"variant": "default", "radius": "xl", "border": "subtle", "shadow": "sm", "accent": "none"},
        "animation": {"entrance": "fade", "hover": "none", "durationMs": 400, "delayMs": 0},
    }


ELEMENTS = [
    item_el("featureGrid.title",       "Feature Titel",        "features", "title"),
    item_el("featureGrid.description", "Feature Beschreibung", "features", "description"),
    item_el("featureGrid.icon",        "Feature Icon",         "features", "icon", typo=False),
    el("featureGrid.columns",    "Spalten",            "columns",    group="Layout"),
    el("featureGrid.titleColor", "Title Farbe",        "titleColor", group="Design"),
    el("featureGrid.cardBgColor", "Card Hintergrund",  "cardBgColor", group="Design"),
]
