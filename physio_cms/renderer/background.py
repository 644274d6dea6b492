"""
Section wrapper — layout (largeur, espacements) et arrière-plan d'un bloc.

Sortie : classes CSS, style inline et calques (image, vidéo, overlay) à
placer en tête de la <section>.
"""
import html
import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError

from ..blocks.base import BackgroundOverlay, GradientBackground, SectionProps

log = logging.getLogger(__name__)

PADDING_Y = {"none": "py-0", "sm": "py-6", "md": "py-10", "lg": "py-14", "xl": "py-20"}
PADDING_X = {"none": "px-0", "sm": "px-4", "md": "px-6", "lg": "px-8"}
MIN_HEIGHT = {"sm": "min-h-[300px]", "md": "min-h-[500px]", "lg": "min-h-[700px]", "screen": "min-h-screen"}


class SectionRender(BaseModel):
    classes: List[str] = []
    style:   str = ""
    layers:  str = ""
    contained: bool = True


def parse_section(raw: Any) -> SectionProps:
    if not isinstance(raw, dict):
        return SectionProps()
    try:
        return SectionProps.model_validate(raw)
    except ValidationError as e:
        log.warning("Section wrapper invalide, valeurs par défaut : %s", e.errors()[0]["msg"])
        return SectionProps()


def gradient_css(g: Optional[GradientBackground]) -> Optional[str]:
    """CSS d'un dégradé ; None sous deux stops exploitables."""
    if g is None:
        return None
    stops = sorted((s for s in g.stops if s.color), key=lambda s: s.pos)
    if len(stops) < 2:
        return None
    parts = ", ".join(f"{s.color} {max(0, min(100, s.pos)):g}%" for s in stops)
    if g.kind == "radial":
        return f"radial-gradient(circle, {parts})"
    if g.kind == "conic":
        return f"conic-gradient(from 0deg, {parts})"
    return f"linear-gradient({g.direction or 'to bottom'}, {parts})"


def _overlay(o: Optional[BackgroundOverlay]) -> str:
    if o is None or not o.value:
        return ""
    style = html.escape(f"background-color:{o.value};opacity:{o.opacity / 100:g}")
    return f'<div class="cms-section__overlay" aria-hidden="true" style="{style}"></div>'


def resolve_section(raw: Any, media) -> SectionRender:
    s = parse_section(raw)
    layout, bg = s.layout, s.background

    classes = ["cms-section", f"cms-section--{layout.width}", PADDING_Y[layout.padding_y]]
    if layout.padding_x:
        classes.append(PADDING_X[layout.padding_x])
    elif layout.width == "full":
        classes.append("px-4")
    if layout.min_height in MIN_HEIGHT:
        classes.append(MIN_HEIGHT[layout.min_height])
    if bg.parallax and bg.type == "image":
        classes.append("cms-section--parallax")

    style, layers = "", ""
    if bg.type == "color" and bg.color and bg.color.value:
        style = f"background-color:{bg.color.value}"
        layers = _overlay(bg.color.overlay)
    elif bg.type == "gradient":
        css = gradient_css(bg.gradient)
        if css:
            style = f"background-image:{css}"
    elif bg.type == "image" and bg.image:
        url = media.resolve({"mediaId": bg.image.media_id}) if bg.image.media_id else None
        if url:
            img = [f"background-image:url('{url}')", f"background-size:{bg.image.fit}",
                   f"background-position:{bg.image.position}"]
            if bg.image.blur:
                img.append(f"filter:blur({bg.image.blur}px)")
            layers = f'<div class="cms-section__image" aria-hidden="true" style="{html.escape(";".join(img))}"></div>'
        layers += _overlay(bg.image.overlay)
    elif bg.type == "video" and bg.video:
        url = media.resolve({"mediaId": bg.video.media_id}) if bg.video.media_id else None
        if url:
            poster = media.resolve({"mediaId": bg.video.poster_media_id}) if bg.video.poster_media_id else None
            poster_attr = f' poster="{html.escape(poster)}"' if poster else ""
            layers = (f'<video class="cms-section__video" autoplay muted loop playsinline{poster_attr}>'
                      f'<source src="{html.escape(url)}"></video>')
        layers += _overlay(bg.video.overlay)

    if layers:
        classes.append("cms-section--layered")
    return SectionRender(classes=classes, style=style, layers=layers, contained=layout.width == "contained")
