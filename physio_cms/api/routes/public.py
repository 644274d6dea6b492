"""
Site public — une page publiée par (slug, marque).

GET /                 → page « home » de la marque par défaut
GET /{slug}           → marque par défaut (physiotherapy)
GET /konzept          → page « home » de physio-konzept
GET /konzept/{slug}   → physio-konzept
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...config import BRAND_LABELS, Brand, get_settings
from ...database import db_get_active_theme, db_get_page_by_slug, get_db
from ...media import DbMediaResolver
from ...renderer import RenderContext, render_page
from ...store import BlockStore
from ...theme import resolve_theme

log = logging.getLogger(__name__)
router = APIRouter(tags=["Site"])


def page_context(db: Session, brand: Brand, editable: bool = False, page_id: str = None) -> RenderContext:
    """Contexte de rendu : thème actif de la marque (défauts si indisponible) + médias en base."""
    try:
        preset = db_get_active_theme(db, brand.value)
    except SQLAlchemyError as e:
        log.warning("Thème %s indisponible, défauts de la marque : %s", brand.value, e)
        preset = None
    return RenderContext(
        brand=brand,
        theme=resolve_theme(brand, preset.tokens if preset else None),
        editable=editable,
        media=DbMediaResolver(db, get_settings().media_base_url),
        page_id=page_id,
    )


def not_found_page(brand: Brand) -> HTMLResponse:
    label = BRAND_LABELS[brand]
    return HTMLResponse(
        f"<!DOCTYPE html><html lang='de'><head><meta charset='UTF-8'><title>Seite nicht gefunden | {label}</title></head>"
        f"<body style='font-family:system-ui,sans-serif;padding:40px'><h1>404</h1>"
        f"<p>Diese Seite existiert nicht.</p><a href='/'>{label}</a></body></html>",
        status_code=404,
    )


def _render_public(db: Session, slug: str, brand: Brand) -> HTMLResponse:
    try:
        page = db_get_page_by_slug(db, slug, brand.value, published_only=True)
    except SQLAlchemyError as e:
        log.warning("Page %s/%s illisible : %s", brand.value, slug, e)
        page = None
    if page is None:
        return not_found_page(brand)
    # Lecture seule : aucun utilisateur requis, une panne donne une zone de contenu vide
    blocks = BlockStore(db, lambda: None).load_for_render(page.id)
    ctx = page_context(db, brand, page_id=page.id)
    return HTMLResponse(render_page(page.title, blocks, ctx))


@router.get("/", response_class=HTMLResponse)
def home(db: Session = Depends(get_db)):
    return _render_public(db, "home", get_settings().default_brand)


@router.get("/konzept", response_class=HTMLResponse)
def konzept_home(db: Session = Depends(get_db)):
    return _render_public(db, "home", Brand.PHYSIO_KONZEPT)


@router.get("/konzept/{slug}", response_class=HTMLResponse)
def konzept_page(slug: str, db: Session = Depends(get_db)):
    return _render_public(db, slug, Brand.PHYSIO_KONZEPT)


@router.get("/{slug}", response_class=HTMLResponse)
def page(slug: str, db: Session = Depends(get_db)):
    return _render_public(db, slug, get_settings().default_brand)
