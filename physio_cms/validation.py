"""
Validation de publication — règles plus strictes que le schéma d'édition.

Une page n'est publiée que si `validate_for_publish` ne renvoie aucun problème ;
les messages sont affichés tels quels dans l'admin (allemand).
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from .blocks import is_known_type, resolve_block_type
from .config import BRAND_LABELS, Brand, normalize_brand
from .models import Block

log = logging.getLogger(__name__)


class PublishIssue(BaseModel):
    block_id:   str
    block_type: str
    field_path: str
    message:    str


# type → (liste, taille min, message si trop courte, [(champ, longueur min, message)])
_LIST_RULES = {
    "servicesGrid": ("cards", 1, "Mindestens eine Card erforderlich", [
        ("title", 2, "Titel muss mindestens 2 Zeichen lang sein"),
        ("text", 5, "Text muss mindestens 5 Zeichen lang sein"),
    ]),
    "faq": ("items", 1, "Mindestens eine FAQ erforderlich", [
        ("question", 3, "Frage muss mindestens 3 Zeichen lang sein"),
        ("answer", 10, "Antwort muss mindestens 10 Zeichen lang sein"),
    ]),
    "team": ("members", 1, "Mindestens ein Mitglied erforderlich", [
        ("name", 2, "Name muss mindestens 2 Zeichen lang sein"),
        ("role", 2, "Rolle muss mindestens 2 Zeichen lang sein"),
        ("imageUrl", 1, "Bild URL erforderlich"),
        ("imageAlt", 1, "Bild Alt-Text erforderlich"),
    ]),
    "testimonials": ("items", 1, "Mindestens ein Testimonial erforderlich", [
        ("quote", 3, "Zitat muss mindestens 3 Zeichen lang sein"),
        ("name", 2, "Name muss mindestens 2 Zeichen lang sein"),
    ]),
    "gallery": ("images", 3, "Mindestens 3 Bilder erforderlich", [
        ("url", 1, "Bild URL erforderlich"),
        ("alt", 1, "Bild Alt-Text erforderlich"),
    ]),
    "openingHours": ("hours", 1, "Mindestens eine Zeile erforderlich", [
        ("label", 2, "Label muss mindestens 2 Zeichen lang sein"),
        ("value", 2, "Wert muss mindestens 2 Zeichen lang sein"),
    ]),
    "imageSlider": ("slides", 1, "Mindestens ein Slide erforderlich", [
        ("url", 1, "Bild URL erforderlich"),
        ("alt", 1, "Bild Alt-Text erforderlich"),
    ]),
}

# champ → (longueur min, message) ; longueur mesurée sans trim
_FIELD_RULES = {
    "text":    [("content", 10, "Inhalt muss mindestens 10 Zeichen lang sein")],
    "section": [("headline", 3, "Headline muss mindestens 3 Zeichen lang sein"),
                ("content", 10, "Inhalt muss mindestens 10 Zeichen lang sein")],
}


def _str(v: Any) -> str:
    return v if isinstance(v, str) else ""


def _check_list(props: Dict[str, Any], rule, add) -> None:
    key, min_items, min_message, fields = rule
    items = props.get(key)
    if not isinstance(items, list) or len(items) < min_items:
        add(key, min_message)
        return
    for i, item in enumerate(items):
        item = item if isinstance(item, dict) else {}
        for field, min_len, message in fields:
            if len(_str(item.get(field))) < min_len:
                add(f"{key}.{i}.{field}", message)


def _check_hero(props: Dict[str, Any], brand: Brand, add) -> None:
    content = (props.get("brandContent") or {}).get(brand.value)
    content = content if isinstance(content, dict) else {}
    label = BRAND_LABELS[brand]

    headline = (_str(content.get("headline")) or _str(props.get("headline"))).strip()
    if len(headline) < 3:
        add("headline", f"Headline ({label}) muss mindestens 3 Zeichen lang sein")

    cta_text = (_str(content.get("ctaText")) or _str(props.get("ctaText"))).strip()
    cta_href = (_str(content.get("ctaHref")) or _str(props.get("ctaHref"))).strip()
    if bool(cta_text) != bool(cta_href):
        add("ctaText", f"CTA Text und Link ({label}) müssen beide gesetzt sein oder beide leer")


def _check_services_cta(props: Dict[str, Any], add) -> None:
    for i, card in enumerate(props.get("cards") or []):
        if isinstance(card, dict) and bool(_str(card.get("ctaText"))) != bool(_str(card.get("ctaHref"))):
            add(f"cards.{i}.ctaText", "CTA Text und Link müssen beide gesetzt sein oder beide leer")


def _check_contact_form(props: Dict[str, Any], add) -> None:
    if len(_str(props.get("heading")).strip()) < 3:
        add("heading", "Überschrift muss mindestens 3 Zeichen lang sein")
    if len(_str(props.get("submitLabel")).strip()) < 2:
        add("submitLabel", "Button-Text muss mindestens 2 Zeichen lang sein")
    if not isinstance(props.get("fields"), list) or not props["fields"]:
        add("fields", "Mindestens ein Formularfeld erforderlich")
    if props.get("requireConsent") is True and not _str(props.get("consentLabel")).strip():
        add("consentLabel", "Zustimmungs-Text erforderlich, wenn Zustimmung erforderlich ist")


def validate_block_for_publish(block: Block, brand: Optional[Brand] = None) -> List[PublishIssue]:
    issues: List[PublishIssue] = []

    def add(path: str, message: str) -> None:
        issues.append(PublishIssue(block_id=block.id, block_type=block.type, field_path=path, message=message))

    if not is_known_type(block.type):
        add("", f"Unbekannter Blocktyp: {block.type}")
        return issues
    props = block.props
    if not isinstance(props, dict):
        add("", "Block props fehlen oder sind ungültig")
        return issues

    block_type = resolve_block_type(block.type).value
    if block_type == "hero":
        _check_hero(props, brand or normalize_brand(props.get("mood")) or Brand.PHYSIOTHERAPY, add)
    elif block_type == "contactForm":
        _check_contact_form(props, add)
    for field, min_len, message in _FIELD_RULES.get(block_type, []):
        if len(_str(props.get(field))) < min_len:
            add(field, message)
    if block_type in _LIST_RULES:
        _check_list(props, _LIST_RULES[block_type], add)
    if block_type == "servicesGrid":
        _check_services_cta(props, add)
    # imageText, featureGrid, cta, card : pas de règle de publication
    return issues


def validate_for_publish(blocks: Iterable[Block], brand: Any = None) -> List[PublishIssue]:
    """Problèmes bloquant la publication, dans l'ordre des blocs ; [] = publiable."""
    page_brand = normalize_brand(brand) if brand else None
    issues: List[PublishIssue] = []
    for block in blocks:
        issues.extend(validate_block_for_publish(block, page_brand))
    if issues:
        log.info("Publication refusée : %d problème(s)", len(issues))
    return issues
