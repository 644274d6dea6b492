"""Bloc Gallery — grille d'images avec légendes."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import PANEL_DEFAULTS, Background, ListItem, PanelProps, new_id
from .elements import el, item_el


class GalleryImage(ListItem):
    url:           str
    alt:           str
    caption:       Optional[str] = None
    caption_color: Optional[str] = None
    link:          Optional[str] = None


class GalleryProps(PanelProps):
    headline:          Optional[str] = None
    subheadline:       Optional[str] = None
    layout:            Optional[Literal["grid", "masonry", "carousel", "stack", "highlight-first"]] = None
    variant:           Optional[Literal["grid", "slider"]] = None
    lightbox:          Optional[bool] = None
    headline_color:    Optional[str] = None
    subheadline_color: Optional[str] = None
    caption_color:     Optional[str] = None
    columns:           Optional[int] = Field(default=None, ge=2, le=6)
    show_captions:     Optional[bool] = None
    caption_style:     Optional[Literal["below", "overlay"]] = None
    gap:               Optional[Literal["sm", "md", "lg"]] = None
    image_radius:      Optional[Literal["none", "sm", "md", "lg", "xl"]] = None
    aspect_ratio:      Optional[Literal["auto", "square", "video", "portrait", "landscape"]] = None
    image_fit:         Optional[Literal["cover", "contain"]] = None
    hover_effect:      Optional[Literal["none", "zoom", "lift", "fade"]] = None
    show_counter:      Optional[bool] = None
    enable_motion:     Optional[bool] = None
    background:        Optional[Background] = None
    images:            List[GalleryImage] = Field(min_length=3, max_length=18)


def create_gallery_image() -> dict:
    return {"id": new_id(), "url": "/placeholder.svg", "alt": "", "caption": "Einblick in unsere Praxis"}


def defaults() -> dict:
    return {
        **PANEL_DEFAULTS,
        "headline": "Galerie",
        "subheadline": "Einblicke in unsere Räume und unseren Alltag.",
        "layout": "grid",
        "variant": "grid",
        "lightbox": True,
        "columns": 3,
        "showCaptions": True,
        "captionStyle": "overlay",
        "gap": "md",
        "imageRadius": "lg",
        "aspectRatio": "landscape",
        "imageFit": "cover",
        "hoverEffect": "zoom",
        "showCounter": True,
        "enableMotion": True,
        "background": "none",
        "containerBorder": False,
        "typography": {},
        "images": [
            {"id": new_id(), "url": "/placeholder.svg", "alt": "", "caption": caption}
            for caption in ("Behandlungsraum", "Trainingsbereich", "Empfang")
        ],
    }


ELEMENTS = [
    el("gallery.headline",    "Headline",    "headline",    typo=True),
    el("gallery.subheadline", "Subheadline", "subheadline", typo=True),
    item_el("gallery.image",   "Bild",      "images", "url", typo=False),
    item_el("gallery.alt",     "Alt-Text",  "images", "alt", typo=False),
    item_el("gallery.caption", "Caption",   "images", "caption"),
    el("gallery.columns",      "Spalten",   "columns",      group="Layout"),
    el("gallery.gap",          "Abstand",   "gap",          group="Layout"),
    el("gallery.showCaptions", "Captions anzeigen", "showCaptions", group="Layout"),
    el("gallery.captionColor", "Caption Farbe",     "captionColor", group="Design"),
]
