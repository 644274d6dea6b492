"""Bloc Card — carte isolée avec boutons d'action."""
from typing import List, Literal, Optional

from .base import BlockProps, ListItem, new_id
from .elements import el, item_el
from .feature_grid import CardAnimation, CardStyle


class CardButton(ListItem):
    label:           str
    href:            Optional[str] = None
    on_click_action: Optional[Literal["none", "open-modal", "scroll-to"]] = None
    target_id:       Optional[str] = None
    variant:         Optional[Literal["default", "secondary", "outline", "ghost", "link"]] = None
    size:            Optional[Literal["sm", "default", "lg"]] = None
    icon:            Optional[Literal["none", "arrow-right", "external", "download"]] = None
    icon_position:   Optional[Literal["left", "right"]] = None
    disabled:        Optional[bool] = None


class CardProps(BlockProps):
    eyebrow:       Optional[str] = None
    title:         str
    description:   Optional[str] = None
    content:       Optional[str] = None
    align:         Optional[Literal["left", "center", "right"]] = None
    header_layout: Optional[Literal["stacked", "inline-action"]] = None
    action_slot:   Optional[Literal["none", "badge", "icon-button"]] = None
    action_label:  Optional[str] = None
    footer_align:  Optional[Literal["left", "center", "right"]] = None
    buttons:       Optional[List[CardButton]] = None
    style:         Optional[CardStyle] = None
    animation:     Optional[CardAnimation] = None
    button_preset: Optional[str] = None


def create_card_button() -> dict:
    return {
        "id": new_id(), "label": "New Button", "href": "#", "variant": "default", "size": "default",
        "icon": "arrow-right", "iconPosition": "right", "disabled": False,
    }


def defaults() -> dict:
    button = create_card_button()
    button["label"] = "Action"
    return {
        "title": "Card Title",
        "eyebrow": "Label",
        "description": "Card description",
        "content": "Card content goes here",
        "align": "left",
        "headerLayout": "stacked",
        "actionSlot": "none",
        "footerAlign": "left",
        "buttons": [button],
        "style": {"variant": "default", "radius": "xl", "border": "subtle", "shadow": "sm", "accent": "none"},
        "animation": {"entrance": "fade", "hover": "lift", "durationMs": 400, "delayMs": 0},
    }


ELEMENTS = [
    el("card.eyebrow",     "Eyebrow",     "eyebrow",     typo=True),
    el("card.title",       "Title",       "title",       typo=True),
    el("card.description", "Description", "description", typo=True),
    el("card.content",     "Content",     "content",     typo=True),
    el("card.actionLabel", "Action Label", "actionLabel"),
    item_el("card.button",     "Button",      "buttons", "label"),
    item_el("card.buttonHref", "Button Link", "buttons", "href", typo=False),
    el("card.align",       "Ausrichtung", "align",       group="Layout"),
]
