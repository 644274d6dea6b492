"""
Aperçu admin — rendu éditable d'une page (brouillon compris), chargé dans l'iframe de l'éditeur.

GET /preview/{page_id}[?brand=physio-konzept]
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from ...blocks import normalize_blocks
from ...config import Brand, normalize_brand
from ...database import db_get_page, get_db
from ...renderer import render_page
from ...store import BlockStore
from ..auth import get_current_user, login_redirect, user_provider
from .public import not_found_page, page_context

log = logging.getLogger(__name__)
router = APIRouter(tags=["Preview"])


@router.get("/preview/{page_id}", response_class=HTMLResponse)
def preview(page_id: str, request: Request, brand: Optional[str] = None, db: Session = Depends(get_db)):
    if get_current_user(request) is None:
        return login_redirect(request.url.path)
    page = db_get_page(db, page_id)
    if page is None:
        return not_found_page(Brand.PHYSIOTHERAPY)
    b = normalize_brand(brand) or normalize_brand(page.brand) or Brand.PHYSIOTHERAPY
    # Même vue que l'éditeur : props complétées par les défauts du type
    blocks = normalize_blocks(BlockStore(db, user_provider(request)).load(page.id))
    ctx = page_context(db, b, editable=True, page_id=page.id)
    log.info("Aperçu page %s (%s, %d blocs)", page.id, b.value, len(blocks))
    return HTMLResponse(render_page(page.title, blocks, ctx))
