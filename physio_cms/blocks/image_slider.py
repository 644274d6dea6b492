"""Bloc Image Slider — carrousel d'images (variantes classic, progress, thumbnails…)."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import Background, BlockProps, CmsModel, ListItem, new_id
from .elements import el, item_el


class FocalPoint(CmsModel):
    x: float = Field(ge=0, le=1)
    y: float = Field(ge=0, le=1)


class Slide(ListItem):
    url:               str
    alt:               str
    title:             Optional[str] = None
    text:              Optional[str] = None
    link:              Optional[str] = None
    focal_point:       Optional[FocalPoint] = None
    title_color:       Optional[str] = None
    text_color:        Optional[str] = None


class SlidesPerView(CmsModel):
    base: int = Field(default=1, ge=1, le=3)
    md:   int = Field(default=2, ge=1, le=3)
    lg:   int = Field(default=3, ge=1, le=3)


class SliderControls(CmsModel):
    show_arrows:     bool = True
    show_dots:       bool = True
    show_progress:   bool = True
    show_thumbnails: bool = True


class ImageSliderProps(BlockProps):
    eyebrow:           Optional[str] = None
    headline:          Optional[str] = None
    subheadline:       Optional[str] = None
    eyebrow_color:     Optional[str] = None
    headline_color:    Optional[str] = None
    subheadline_color: Optional[str] = None
    variant:           Literal["classic", "progress", "thumbnails", "hero", "cards"] = "classic"
    aspect:            Literal["video", "square", "portrait", "auto"] = "video"
    slides_per_view:   Optional[SlidesPerView] = None
    controls:          Optional[SliderControls] = None
    loop:              bool = True
    autoplay:          bool = False
    autoplay_delay_ms: int = Field(default=5000, ge=500, le=60000)
    pause_on_hover:    bool = True
    peek:              bool = True
    card_bg_color:     Optional[str] = None
    card_border_color: Optional[str] = None
    slide_title_color: Optional[str] = None
    slide_text_color:  Optional[str] = None
    background:        Background = "none"
    container_border:  bool = False
    aria_label:        Optional[str] = None
    slides:            List[Slide] = Field(min_length=1, max_length=12)


def create_image_slide() -> dict:
    return {"id": new_id(), "url": "/placeholder.svg", "alt": "", "title": "Headline…", "text": "Kurzer Text…"}


_SLIDES = [
    ("Behandlungsraum", "Ruhige Atmosphäre für Ihre Therapie."),
    ("Trainingsbereich", "Modernes Equipment für gezieltes Training."),
    ("Empfang", "Freundlich. Persönlich. Organisiert."),
]


def defaults() -> dict:
    return {
        "eyebrow": "Galerie",
        "headline": "Impressionen",
        "subheadline": "Ein kleiner Einblick – wischen oder klicken Sie sich durch.",
        "variant": "classic",
        "aspect": "video",
        "slidesPerView": {"base": 1, "md": 2, "lg": 3},
        "controls": {"showArrows": True, "showDots": True, "showProgress": True, "showThumbnails": True},
        "loop": True,
        "autoplay": False,
        "autoplayDelayMs": 5000,
        "pauseOnHover": True,
        "peek": True,
        "background": "none",
        "containerBorder": False,
        "slides": [
            {"id": new_id(), "url": "/placeholder.svg", "alt": title, "title": title, "text": text}
            for title, text in _SLIDES
        ],
    }


ELEMENTS = [
    el("imageSlider.eyebrow",     "Eyebrow",     "eyebrow",     typo=True),
    el("imageSlider.headline",    "Headline",    "headline",    typo=True),
    el("imageSlider.subheadline", "Subheadline", "subheadline", typo=True),
    item_el("imageSlider.slide.image", "Slide Bild",  "slides", "url", typo=False),
    item_el("imageSlider.slide.alt",   "Slide Alt",   "slides", "alt", typo=False),
    item_el("imageSlider.slide.title", "Slide Titel", "slides", "title"),
    item_el("imageSlider.slide.text",  "Slide Text",  "slides", "text"),
    el("imageSlider.variant",  "Variante",        "variant",  group="Layout"),
    el("imageSlider.aspect",   "Seitenverhältnis", "aspect",  group="Layout"),
    el("imageSlider.autoplay", "Autoplay",        "autoplay", group="Einstellungen"),
    el("imageSlider.loop",     "Loop",            "loop",     group="Einstellungen"),
]
