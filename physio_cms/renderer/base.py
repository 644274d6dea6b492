"""
Protocol Renderer + contexte de rendu (marque, thème, mode édition).
"""
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from ..config import Brand
from ..media import UrlMediaResolver
from ..models import Block


class EditHook(BaseModel):
    """Cible cliquable de l'aperçu : un élément éditable d'un bloc."""
    block_id:     str
    element_path: str
    anchor:       str


class RenderContext(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    brand:     Brand = Brand.PHYSIOTHERAPY
    theme:     Dict[str, str] = Field(default_factory=dict)
    editable:  bool = False
    # Appelé une fois par hook émis (mode édition) ; l'aperçu admin s'y abonne
    on_select: Optional[Callable[[EditHook], None]] = None
    media:     Any = Field(default_factory=UrlMediaResolver)
    page_id:   Optional[str] = None


@runtime_checkable
class Renderer(Protocol):
    def render(self, blocks: Sequence[Block], ctx: RenderContext) -> str: ...
