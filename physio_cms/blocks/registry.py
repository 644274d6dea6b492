"""
Registre des blocs — source unique type → (schéma des props, défauts, éléments éditables).

Ensemble fermé : ajouter un type = un module dans `blocks/` + une entrée ici
+ une fonction de rendu dans `renderer/html.py` (vérifié à l'import des deux côtés).
"""
import copy
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError

from ..config import Brand
from ..errors import UnknownBlockType
from . import (card, contact_form, cta, faq, feature_grid, gallery, hero, image_slider, image_text,
               opening_hours, section, services_grid, team, testimonials, text)
from .base import BlockProps
from .elements import EditableElementDef, el, match_element, path_get


class BlockType(str, Enum):
    HERO          = "hero"
    TEXT          = "text"
    IMAGE_TEXT    = "imageText"
    FEATURE_GRID  = "featureGrid"
    CTA           = "cta"
    SECTION       = "section"
    CARD          = "card"
    SERVICES_GRID = "servicesGrid"
    FAQ           = "faq"
    TEAM          = "team"
    CONTACT_FORM  = "contactForm"
    TESTIMONIALS  = "testimonials"
    GALLERY       = "gallery"
    OPENING_HOURS = "openingHours"
    IMAGE_SLIDER  = "imageSlider"


# Anciennes clés kebab-case encore présentes en base
_ALIASES = {
    "feature-grid":  BlockType.FEATURE_GRID,
    "image-text":    BlockType.IMAGE_TEXT,
    "contact-form":  BlockType.CONTACT_FORM,
    "services-grid": BlockType.SERVICES_GRID,
    "opening-hours": BlockType.OPENING_HOURS,
    "image-slider":  BlockType.IMAGE_SLIDER,
}


class ValidationIssue(BaseModel):
    path:    str
    message: str


class BlockDefinition(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    type:        BlockType
    label:       str
    props_model: Type[BlockProps]
    defaults:    Callable[[], Dict[str, Any]]
    elements:    List[EditableElementDef]
    # chemin de liste → fabrique d'un nouvel élément (bouton « + » de l'inspecteur)
    item_factories: Dict[str, Callable[[], Any]] = {}


# Réglages du section wrapper, communs à tous les types
SECTION_ELEMENTS = [
    el("section.width",      "Breite",            "section.layout.width",      group="Section"),
    el("section.paddingY",   "Abstand vertikal",  "section.layout.paddingY",   group="Section"),
    el("section.minHeight",  "Mindesthöhe",       "section.layout.minHeight",  group="Section"),
    el("section.bgType",     "Hintergrund",       "section.background.type",   group="Section"),
    el("section.bgColor",    "Hintergrundfarbe",  "section.background.color.value", group="Section"),
    el("section.bgImage",    "Hintergrundbild",   "section.background.image.mediaId", group="Section"),
]


def _define(type: BlockType, label: str, module, props_model, factories=None) -> BlockDefinition:
    return BlockDefinition(
        type=type, label=label, props_model=props_model, defaults=module.defaults,
        elements=list(module.ELEMENTS), item_factories=factories or {},
    )


REGISTRY: Dict[BlockType, BlockDefinition] = {
    d.type: d for d in [
        _define(BlockType.HERO, "Hero", hero, hero.HeroProps, {
            "trustItems": hero.create_trust_item,
            **{f"brandContent.{b.value}.actions": hero.create_action for b in Brand},
        }),
        _define(BlockType.TEXT, "Text", text, text.TextProps),
        _define(BlockType.IMAGE_TEXT, "Bild + Text", image_text, image_text.ImageTextProps),
        _define(BlockType.FEATURE_GRID, "Feature Grid", feature_grid, feature_grid.FeatureGridProps,
                {"features": feature_grid.create_feature_item}),
        _define(BlockType.CTA, "Call-to-Action", cta, cta.CtaProps),
        _define(BlockType.SECTION, "Section", section, section.SectionBlockProps),
        _define(BlockType.CARD, "Card", card, card.CardProps, {"buttons": card.create_card_button}),
        _define(BlockType.SERVICES_GRID, "Leistungen", services_grid, services_grid.ServicesGridProps,
                {"cards": services_grid.create_service_card}),
        _define(BlockType.FAQ, "FAQ", faq, faq.FaqProps, {"items": faq.create_faq_item}),
        _define(BlockType.TEAM, "Team", team, team.TeamProps, {"members": team.create_team_member}),
        _define(BlockType.CONTACT_FORM, "Kontaktformular", contact_form, contact_form.ContactFormProps,
                {"fields": contact_form.create_contact_field}),
        _define(BlockType.TESTIMONIALS, "Testimonials", testimonials, testimonials.TestimonialsProps,
                {"items": testimonials.create_testimonial_item}),
        _define(BlockType.GALLERY, "Galerie", gallery, gallery.GalleryProps,
                {"images": gallery.create_gallery_image}),
        _define(BlockType.OPENING_HOURS, "Öffnungszeiten", opening_hours, opening_hours.OpeningHoursProps,
                {"hours": opening_hours.create_opening_hour}),
        _define(BlockType.IMAGE_SLIDER, "Bild-Slider", image_slider, image_slider.ImageSliderProps,
                {"slides": image_slider.create_image_slide}),
    ]
}

_missing = set(BlockType) - set(REGISTRY)
if _missing:
    raise RuntimeError(f"Types sans définition : {sorted(t.value for t in _missing)}")


# ── Lookup ───────────────────────────────────────────────────────────────────

def resolve_block_type(value: Any) -> BlockType:
    """Type canonique (alias kebab-case acceptés) ; UnknownBlockType sinon."""
    if isinstance(value, BlockType):
        return value
    if isinstance(value, str):
        if value in _ALIASES:
            return _ALIASES[value]
        try:
            return BlockType(value)
        except ValueError:
            pass
    raise UnknownBlockType(str(value))


def is_known_type(value: Any) -> bool:
    try:
        resolve_block_type(value)
    except UnknownBlockType:
        return False
    return True


def get_definition(block_type: Any) -> BlockDefinition:
    return REGISTRY[resolve_block_type(block_type)]


def defaults_for(block_type: Any) -> Dict[str, Any]:
    """Props par défaut d'un nouveau bloc — copie fraîche, ids d'éléments neufs à chaque appel."""
    return copy.deepcopy(get_definition(block_type).defaults())


def editable_elements_for(block_type: Any) -> List[EditableElementDef]:
    return get_definition(block_type).elements + SECTION_ELEMENTS


def validate(block_type: Any, props: Any) -> List[ValidationIssue]:
    """Contrôle structurel : champs requis, valeurs d'enum, bornes. [] si conforme."""
    definition = get_definition(block_type)
    if not isinstance(props, dict):
        return [ValidationIssue(path="", message="props doit être un objet")]
    try:
        definition.props_model.model_validate(props)
    except ValidationError as e:
        return [ValidationIssue(path=_loc_to_path(err["loc"]), message=err["msg"]) for err in e.errors()]
    return []


def _loc_to_path(loc) -> str:
    # pydantic ajoute des segments techniques ("[key]", "literal[...]") qu'on ne garde pas
    return ".".join(str(p) for p in loc if not (isinstance(p, str) and ("[" in p or p.startswith("function-"))))


# ── Chemins éditables ────────────────────────────────────────────────────────

def find_editable_element(block_type: Any, path: str, props: Optional[Dict[str, Any]] = None) -> Optional[EditableElementDef]:
    """Définition couvrant `path`, ou None.

    Pour un élément de liste, l'index est vérifié contre la longueur actuelle
    de la liste dans `props` (seule validation qui ne peut être statique).
    """
    found = match_element(editable_elements_for(block_type), path)
    if found is None:
        return None
    definition, index = found
    if index is not None:
        items = path_get(props or {}, definition.item_count_path) if definition.item_count_path else None
        if not isinstance(items, list) or index >= len(items):
            return None
    return definition


def item_factory_for(block_type: Any, list_path: str) -> Optional[Callable[[], Any]]:
    return get_definition(block_type).item_factories.get(list_path)


def list_paths_for(block_type: Any) -> List[str]:
    return list(get_definition(block_type).item_factories)


def describe_types() -> List[Dict[str, Any]]:
    """Catalogue pour l'admin (GET /api/admin/blocks/types)."""
    return [
        {
            "type": d.type.value,
            "label": d.label,
            "defaults": defaults_for(d.type),
            "elements": [e.model_dump(by_alias=False) for e in editable_elements_for(d.type)],
            "lists": list(d.item_factories),
        }
        for d in REGISTRY.values()
    ]
