"""
Base des blocs CMS — props typées + section wrapper (layout / arrière-plan).

Les props sont stockées en JSON camelCase (`ctaText`, `paddingY`) ; les modèles
exposent des attributs snake_case via l'alias generator.
"""
import uuid
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return str(uuid.uuid4())


class CmsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


# ── Arrière-plan de section ──────────────────────────────────────────────────

GradientDirection = Literal[
    "to top", "to right", "to bottom", "to left",
    "to top right", "to top left", "to bottom right", "to bottom left",
]


class BackgroundOverlay(CmsModel):
    value:   str
    opacity: int = Field(default=100, ge=0, le=100)


class GradientStop(CmsModel):
    color: str
    pos:   float = Field(ge=0, le=100)


class ColorBackground(CmsModel):
    value:   str
    overlay: Optional[BackgroundOverlay] = None


class GradientBackground(CmsModel):
    kind:      Literal["linear", "radial", "conic"] = "linear"
    direction: GradientDirection = "to right"
    stops:     List[GradientStop] = Field(default_factory=list)


class ImageBackground(CmsModel):
    media_id: Optional[str] = None
    fit:      Literal["cover", "contain"] = "cover"
    position: Literal["center", "top", "bottom", "left", "right"] = "center"
    overlay:  Optional[BackgroundOverlay] = None
    blur:     Optional[int] = Field(default=None, ge=0, le=20)


class VideoBackground(CmsModel):
    media_id:        Optional[str] = None
    poster_media_id: Optional[str] = None
    overlay:         Optional[BackgroundOverlay] = None


class BackgroundSettings(CmsModel):
    type:     Literal["none", "color", "gradient", "image", "video"] = "none"
    parallax: bool = False
    color:    Optional[ColorBackground]    = None
    gradient: Optional[GradientBackground] = None
    image:    Optional[ImageBackground]    = None
    video:    Optional[VideoBackground]    = None


class SectionLayout(CmsModel):
    width:      Literal["contained", "full"] = "contained"
    padding_y:  Literal["none", "sm", "md", "lg", "xl"] = "lg"
    padding_x:  Optional[Literal["none", "sm", "md", "lg"]] = None
    min_height: Optional[Literal["auto", "sm", "md", "lg", "screen"]] = None


class SectionProps(CmsModel):
    layout:     SectionLayout      = Field(default_factory=SectionLayout)
    background: BackgroundSettings = Field(default_factory=BackgroundSettings)


# ── Props communes ───────────────────────────────────────────────────────────

MediaValue = Dict[str, Any]   # {"mediaId": ...} | {"url": ...}, + "alt" optionnel
Background = Literal["none", "muted", "gradient"]


class BlockProps(CmsModel):
    """Props de base (classe parente des props de tous les types)."""
    section:    Optional[SectionProps]   = None
    typography: Optional[Dict[str, Any]] = None


class ListItem(CmsModel):
    """Élément de liste répétable (carte, question, membre…) — id stable par élément."""
    id: str = Field(default_factory=new_id)


class PanelProps(BlockProps):
    """Panneau intérieur (fond du conteneur) — FAQ, équipe, galerie."""
    container_background_mode:            Optional[Literal["transparent", "color", "gradient"]] = None
    container_background_color:           Optional[str] = None
    container_background_gradient_preset: Optional[str] = None
    container_gradient_from:  Optional[str] = None
    container_gradient_via:   Optional[str] = None
    container_gradient_to:    Optional[str] = None
    container_gradient_angle: Optional[float] = None
    container_border:         Optional[bool] = None


PANEL_DEFAULTS: Dict[str, Any] = {
    "containerBackgroundMode": "transparent",
    "containerBackgroundColor": "",
    "containerBackgroundGradientPreset": "soft",
    "containerGradientFrom": "",
    "containerGradientVia": "",
    "containerGradientTo": "",
    "containerGradientAngle": 135,
}
