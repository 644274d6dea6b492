"""Bloc Text — contenu HTML libre (rendu tel quel)."""
from typing import Literal, Optional

from .base import BlockProps
from .elements import el


class TextProps(BlockProps):
    content:       str
    alignment:     Optional[Literal["left", "center", "right"]] = None
    max_width:     Optional[Literal["sm", "md", "lg", "xl", "full"]] = None
    text_size:     Optional[Literal["sm", "base", "lg", "xl", "2xl"]] = None
    content_color: Optional[str] = None
    heading_color: Optional[str] = None
    link_color:    Optional[str] = None


def defaults() -> dict:
    return {"content": "Textinhalt hier eingeben...", "alignment": "left", "maxWidth": "lg", "textSize": "base"}


ELEMENTS = [
    el("text.content",      "Inhalt",            "content", typo=True),
    el("text.alignment",    "Ausrichtung",       "alignment",    group="Layout"),
    el("text.maxWidth",     "Maximale Breite",   "maxWidth",     group="Layout"),
    el("text.textSize",     "Textgröße",         "textSize",     group="Layout"),
    el("text.contentColor", "Textfarbe",         "contentColor", group="Design"),
    el("text.headingColor", "Überschriftenfarbe", "headingColor", group="Design"),
    el("text.linkColor",    "Linkfarbe",         "linkColor",    group="Design"),
]
