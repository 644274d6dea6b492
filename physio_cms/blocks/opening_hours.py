"""Bloc Opening Hours — tableau des horaires d'ouverture."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import Background, BlockProps, ListItem, new_id
from .elements import el, item_el


class OpeningHour(ListItem):
    label:       str
    value:       str
    label_color: Optional[str] = None
    value_color: Optional[str] = None


class OpeningHoursProps(BlockProps):
    headline:          Optional[str] = None
    subheadline:       Optional[str] = None
    headline_color:    Optional[str] = None
    subheadline_color: Optional[str] = None
    label_color:       Optional[str] = None
    value_color:       Optional[str] = None
    note_color:        Optional[str] = None
    card_bg_color:     Optional[str] = None
    card_border_color: Optional[str] = None
    layout:            Optional[Literal["twoColumn", "stack"]] = None
    note:              Optional[str] = None
    background:        Optional[Background] = None
    hours:             List[OpeningHour] = Field(min_length=1, max_length=10)


def create_opening_hour() -> dict:
    return {"id": new_id(), "label": "Montag", "value": "08:00 – 18:00"}


_HOURS = [
    ("Montag", "08:00 – 18:00"),
    ("Dienstag", "08:00 – 18:00"),
    ("Mittwoch", "08:00 – 16:00"),
    ("Donnerstag", "08:00 – 18:00"),
    ("Freitag", "08:00 – 14:00"),
]


def defaults() -> dict:
    return {
        "headline": "Öffnungszeiten",
        "subheadline": "Wir sind zu folgenden Zeiten für Sie da.",
        "layout": "twoColumn",
        "note": "Termine nach Vereinbarung. Bitte rufen Sie uns an oder nutzen Sie das Kontaktformular.",
        "background": "none",
        "hours": [{"id": new_id(), "label": label, "value": value} for label, value in _HOURS],
    }


ELEMENTS = [
    el("openingHours.headline",    "Headline",    "headline",    typo=True),
    el("openingHours.subheadline", "Subheadline", "subheadline", typo=True),
    item_el("openingHours.label", "Label (Zeilen)", "hours", "label"),
    item_el("openingHours.value", "Wert (Zeiten)",  "hours", "value"),
    el("openingHours.note",        "Hinweis",     "note",        typo=True),
    el("openingHours.layout",      "Layout",      "layout",      group="Layout"),
    el("openingHours.labelColor",  "Label Farbe", "labelColor",  group="Design"),
    el("openingHours.valueColor",  "Wert Farbe",  "valueColor",  group="Design"),
]
