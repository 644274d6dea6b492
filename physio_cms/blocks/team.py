"""Bloc Team — cartes membres (photo, rôle, bio)."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import PANEL_DEFAULTS, Background, CmsModel, ListItem, PanelProps, new_id
from .elements import el, item_el
from .feature_grid import Columns


class TeamSocial(CmsModel):
    type: Literal["linkedin", "instagram", "email", "website", "phone"]
    href: str


class TeamMember(ListItem):
    name:            str
    role:            str
    image_url:       str
    image_alt:       str
    bio:             Optional[str] = None
    tags:            Optional[List[str]] = None
    socials:         Optional[List[TeamSocial]] = None
    avatar_gradient: Optional[str] = None
    avatar_fit:      Optional[Literal["cover", "contain"]] = None
    avatar_focus:    Optional[Literal["center", "top", "bottom"]] = None
    cta_text:        Optional[str] = None
    cta_href:        Optional[str] = None
    name_color:      Optional[str] = None
    role_color:      Optional[str] = None


class TeamProps(PanelProps):
    eyebrow:           Optional[str] = None
    headline:          Optional[str] = None
    subheadline:       Optional[str] = None
    headline_color:    Optional[str] = None
    subheadline_color: Optional[str] = None
    name_color:        Optional[str] = None
    role_color:        Optional[str] = None
    cta_color:         Optional[str] = None
    card_bg_color:     Optional[str] = None
    card_border_color: Optional[str] = None
    columns:           Optional[Columns] = None
    layout:            Optional[Literal["cards", "compact"]] = None
    background:        Optional[Background] = None
    button_preset:     Optional[str] = None
    members:           List[TeamMember] = Field(min_length=1, max_length=12)


def create_team_member() -> dict:
    return {
        "id": new_id(), "name": "Neues Mitglied", "role": "Rolle", "bio": "Bio eingeben...",
        "imageUrl": "/placeholder.svg", "imageAlt": "Portrait", "avatarGradient": "auto",
        "avatarFit": "cover", "avatarFocus": "center", "tags": [], "socials": [],
        "ctaText": "Profil ansehen", "ctaHref": "/team",
    }


_MEMBERS = [
    ("Max Mustermann", "Physiotherapeut",
     "Leidenschaftlicher Therapeut mit über 10 Jahren Erfahrung in der modernen Physiotherapie.",
     "g1", ["Physiotherapie", "Rehabilitation"], "max-mustermann"),
    ("Anna Schmidt", "Sportphysiotherapeutin",
     "Spezialistin für Sportmedizin und Leistungsoptimierung mit Top-Athleten.",
     "g2", ["Sportmedizin", "Training"], "anna-schmidt"),
    ("Thomas Weber", "Reha-Spezialist",
     "Erfahrener Experte für medizinische Rehabilitation und postoperative Betreuung.",
     "g3", ["Rehabilitation", "Schmerztherapie"], "thomas-weber"),
]


def defaults() -> dict:
    return {
        "typography": {},
        "eyebrow": "UNSER TEAM",
        "headline": "Unser Team",
        "subheadline": "Erfahrene Therapeuten für Ihre Gesundheit.",
        "columns": 3,
        "layout": "cards",
        "background": "none",
        "section": {"layout": {"width": "contained", "paddingY": "lg", "paddingX": "md"},
                    "background": {"type": "none"}},
        **PANEL_DEFAULTS,
        "members": [
            {
                "id": new_id(), "name": name, "role": role, "bio": bio,
                "imageUrl": "/placeholder.svg", "imageAlt": name,
                "avatarGradient": gradient, "avatarFit": "cover", "avatarFocus": "center",
                "tags": tags, "socials": [], "ctaText": "Profil ansehen", "ctaHref": f"/team/{slug}",
            }
            for name, role, bio, gradient, tags, slug in _MEMBERS
        ],
    }


ELEMENTS = [
    el("team.eyebrow",     "Eyebrow",     "eyebrow",     typo=True),
    el("team.headline",    "Headline",    "headline",    typo=True),
    el("team.subheadline", "Subheadline", "subheadline", typo=True),
    item_el("team.member.name",  "Name",    "members", "name"),
    item_el("team.member.role",  "Rolle",   "members", "role"),
    item_el("team.member.bio",   "Bio",     "members", "bio"),
    item_el("team.member.cta",   "Profil-Link Text", "members", "ctaText"),
    item_el("team.member.image", "Portrait", "members", "imageUrl", typo=False),
    el("team.columns",       "Spalten",        "columns",       group="Layout"),
    el("team.headlineColor", "Headline Farbe", "headlineColor", group="Design"),
]
