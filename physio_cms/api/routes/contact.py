"""
Formulaire de contact — réception des envois du bloc contactForm.

POST /api/contact          → valide selon la config du bloc, enregistre, JSON succès / erreur
GET  /api/admin/contact    → boîte de réception (admin)

Le destinataire n'est jamais lu depuis la requête : il vient de `recipients[marque]`
du bloc publié, résolu ici.
"""
import logging
import re
import time
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...blocks import BlockType, normalize_block
from ...blocks.contact_form import ContactFormProps
from ...config import get_settings, normalize_brand
from ...database import db_create_contact_submission, db_get_page, db_list_contact_submissions, get_db
from ...errors import NotFound, StoreUnavailable
from ...models import AdminUser, ContactSubmissionDB, PageStatus
from ...store import BlockStore
from ..auth import require_admin

log = logging.getLogger(__name__)
router = APIRouter(tags=["Contact"])

_EMAIL_RE = re.compile(r'[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}')

_MAX_LEN = {"name": 200, "email": 200, "phone": 50, "subject": 200, "message": 5000}
_MIN_MESSAGE = 10

# 3 envois par heure et par (email, marque), en mémoire du process
RATE_LIMIT  = 3
RATE_WINDOW = 60 * 60
_hits: Dict[str, List[float]] = {}


def _rate_limited(email: str, brand: str) -> bool:
    key = f"{email.lower()}:{brand}"
    now = time.time()
    recent = [t for t in _hits.get(key, []) if now - t < RATE_WINDOW]
    if len(recent) >= RATE_LIMIT:
        _hits[key] = recent
        return True
    _hits[key] = recent + [now]
    return False


def _error(status: int, code: str, message: str, fields: Optional[List[str]] = None) -> JSONResponse:
    content = {"error": code, "message": message}
    if fields:
        content["fields"] = fields
    return JSONResponse(status_code=status, content=content)


def _contact_block(db: Session, page_id: str, block_id: str):
    """Page publiée + props du bloc contactForm visé ; NotFound sinon."""
    page = db_get_page(db, page_id) if page_id else None
    if page is None or page.status != PageStatus.PUBLISHED.value:
        raise NotFound("Page", page_id or "?")
    block = next((b for b in BlockStore(db, lambda: None).load(page.id)
                  if b.id == block_id and b.type == BlockType.CONTACT_FORM.value), None)
    if block is None:
        raise NotFound("Formulaire", block_id or "?")
    return page, ContactFormProps.model_validate(normalize_block(block).props)


def _invalid_fields(props: ContactFormProps, data: Dict[str, str]) -> List[str]:
    bad = [f.type for f in props.fields if f.required and not data.get(f.type)]
    email = data.get("email")
    if email and not _EMAIL_RE.fullmatch(email):
        bad.append("email")
    message = data.get("message")
    if message and len(message) < _MIN_MESSAGE:
        bad.append("message")
    bad += [k for k, n in _MAX_LEN.items() if len(data.get(k, "")) > n]
    if props.require_consent and not data.get("consent"):
        bad.append("consent")
    return sorted(set(bad))


@router.post("/api/contact")
async def submit_contact(request: Request, db: Session = Depends(get_db)):
    form = await request.form()
    data = {k: str(v).strip() for k, v in form.items()}
    page_id, block_id = data.get("pageId", ""), data.get("blockId", "")

    try:
        page, props = _contact_block(db, page_id, block_id)
    except ValidationError as e:
        log.error("Formulaire %s illisible : %s", block_id, e)
        return _error(500, "ContactUnavailable", "Formulaire indisponible")
    brand = normalize_brand(page.brand) or get_settings().default_brand

    # Champ piège rempli : réponse de succès, rien n'est enregistré
    if data.get("website"):
        log.info("Envoi contact ignoré (honeypot) : page %s", page_id)
        return {"success": True, "message": props.success_title}

    invalid = _invalid_fields(props, data)
    if invalid:
        return _error(400, "InvalidSubmission", "Ungültige Eingaben", invalid)

    if _rate_limited(data.get("email", ""), brand.value):
        log.warning("Envoi contact limité : %s (%s)", data.get("email"), brand.value)
        return _error(429, "RateLimited", "Zu viele Anfragen. Bitte versuchen Sie es später erneut.")

    recipient = (props.recipients or {}).get(brand.value)
    try:
        sub = db_create_contact_submission(db, ContactSubmissionDB(
            brand=brand.value, page_id=page.id, block_id=block_id, recipient=recipient,
            name=data.get("name", ""), email=data.get("email", ""),
            phone=data.get("phone") or None, subject=data.get("subject") or None,
            message=data.get("message", ""), consent=bool(data.get("consent")),
        ))
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreUnavailable(f"Enregistrement du message impossible : {e}") from e

    log.info("Message de contact %s (%s) → %s", sub.id, brand.value, recipient or "aucun destinataire")
    return {"success": True, "id": sub.id, "message": props.success_title}


@router.get("/api/admin/contact")
def contact_inbox(brand: Optional[str] = None, db: Session = Depends(get_db),
                  _: AdminUser = Depends(require_admin)):
    b = normalize_brand(brand) if brand else None
    return [
        {"id": s.id, "brand": s.brand, "pageId": s.page_id, "recipient": s.recipient,
         "name": s.name, "email": s.email, "subject": s.subject, "message": s.message,
         "status": s.status, "createdAt": s.created_at.isoformat() if s.created_at else None}
        for s in db_list_contact_submissions(db, b.value if b else None)
    ]
