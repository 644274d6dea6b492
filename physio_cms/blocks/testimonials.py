"""Bloc Testimonials — avis patients, grille ou slider."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import Background, BlockProps, ListItem, MediaValue, new_id
from .elements import el, item_el


class Testimonial(ListItem):
    quote:           str
    name:            str
    role:            Optional[str] = None
    rating:          Optional[int] = Field(default=None, ge=1, le=5)
    avatar:          Optional[MediaValue] = None
    avatar_gradient: Optional[str] = None
    quote_color:     Optional[str] = None
    name_color:      Optional[str] = None
    role_color:      Optional[str] = None


class TestimonialsProps(BlockProps):
    headline:          Optional[str] = None
    subheadline:       Optional[str] = None
    variant:           Optional[Literal["grid", "slider"]] = None
    headline_color:    Optional[str] = None
    subheadline_color: Optional[str] = None
    quote_color:       Optional[str] = None
    name_color:        Optional[str] = None
    role_color:        Optional[str] = None
    columns:           Optional[int] = Field(default=None, ge=1, le=4)
    background:        Optional[Background] = None
    items:             List[Testimonial] = Field(min_length=1, max_length=12)


def create_testimonial_item() -> dict:
    return {
        "id": new_id(),
        "quote": "Sehr professionelle Behandlung – ich habe mich vom ersten Termin an gut aufgehoben gefühlt.",
        "name": "Julia M.", "role": "Patientin", "rating": 5, "avatarGradient": "auto",
    }


def defaults() -> dict:
    return {
        "headline": "Was unsere Patienten sagen",
        "subheadline": "Echte Erfahrungen aus unserer Praxis – persönlich, ehrlich, hilfreich.",
        "variant": "grid",
        "columns": 3,
        "background": "none",
        "items": [
            {"id": new_id(), "quote": "Sehr professionelle Behandlung – nach wenigen Terminen ging es mir "
             "deutlich besser.", "name": "Julia M.", "role": "Patientin", "rating": 5, "avatarGradient": "g1"},
            {"id": new_id(), "quote": "Kompetent, freundlich und super organisiert. Ich komme gerne wieder.",
             "name": "Thomas K.", "role": "Patient", "rating": 5, "avatarGradient": "g2"},
            {"id": new_id(), "quote": "Individuelle Übungen und gute Erklärungen. Endlich verstehe ich, "
             "was meinem Rücken hilft.", "name": "Sarah L.", "role": "Patientin", "rating": 4, "avatarGradient": "g3"},
        ],
    }


ELEMENTS = [
    el("testimonials.headline",    "Headline",    "headline",    typo=True),
    el("testimonials.subheadline", "Subheadline", "subheadline", typo=True),
    item_el("testimonials.quote",  "Zitat",  "items", "quote"),
    item_el("testimonials.name",   "Name",   "items", "name"),
    item_el("testimonials.role",   "Rolle",  "items", "role"),
    item_el("testimonials.rating", "Bewertung", "items", "rating", typo=False),
    el("testimonials.variant",   "Variante", "variant", group="Layout"),
    el("testimonials.columns",   "Spalten",  "columns", group="Layout"),
    el("testimonials.quoteColor", "Zitat Farbe", "quoteColor", group="Design"),
]
