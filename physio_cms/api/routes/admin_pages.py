"""
Admin pages — CRUD pages + blocs (JSON), opérations unitaires sur le document.

GET    /admin                                   → liste HTML des pages (liens d'aperçu)
GET    /api/admin/pages[?brand=]                → pages
POST   /api/admin/pages                         → crée une page vide
GET    /api/admin/pages/{id}                    → page + blocs (props normalisées)
PUT    /api/admin/pages/{id}                    → remplace page + liste complète de blocs
DELETE /api/admin/pages/{id}
POST   /api/admin/pages/{id}/validate           → problèmes de publication
POST   /api/admin/pages/{id}/blocks             → insère un bloc {type, index}
PATCH  /api/admin/pages/{id}/blocks/{block_id}  → modifie un élément {path, value}
POST   /api/admin/pages/{id}/blocks/{block_id}/move       {toIndex}
POST   /api/admin/pages/{id}/blocks/{block_id}/duplicate
DELETE /api/admin/pages/{id}/blocks/{block_id}
GET    /api/admin/blocks/types                  → catalogue du registre
"""
import html
import logging
from typing import Any, Callable, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...blocks import defaults_for, describe_types, normalize_blocks, resolve_block_type, validate
from ...config import BRAND_LABELS, normalize_brand
from ...database import db_create_page, db_delete_page, db_get_page, db_get_page_by_slug, db_list_pages, get_db
from ...document import BlockDocument
from ...errors import BlockValidationError, NotFound
from ...models import AdminUser, Block, PageCreate, PageDB, PageSave, PageStatus
from ...store import BlockStore
from ...validation import validate_for_publish
from ..auth import get_current_user, login_redirect, require_admin

log = logging.getLogger(__name__)
router = APIRouter(tags=["Admin"])


class BlockInsert(BaseModel):
    type:  str
    index: Optional[int] = None


class BlockPatch(BaseModel):
    path:  str
    value: Any = None


class BlockMove(BaseModel):
    to_index: int = Field(alias="toIndex")


# ── Helpers ────────────────────────────────────────────────────────────────────

def _page_dict(p: PageDB) -> dict:
    return {
        "id": p.id, "title": p.title, "slug": p.slug, "brand": p.brand, "status": p.status,
        "updatedAt": p.updated_at.isoformat() if p.updated_at else None,
    }


def _block_dict(b: Block) -> dict:
    return {"id": b.id, "type": b.type, "sort": b.sort, "props": b.props}


def _get_page_or_404(db: Session, page_id: str) -> PageDB:
    page = db_get_page(db, page_id)
    if page is None:
        raise NotFound("Page", page_id)
    return page


def _brand_or_400(value: str) -> str:
    brand = normalize_brand(value)
    if brand is None:
        raise HTTPException(400, f"Marque inconnue : {value}")
    return brand.value


def _issues_response(issues) -> JSONResponse:
    return JSONResponse(status_code=422, content={
        "error": "PublishValidation",
        "message": f"{len(issues)} problème(s) bloquent la publication",
        "issues": [i.model_dump() for i in issues],
    })


def _edit(db: Session, user: AdminUser, page_id: str, op: Callable[[BlockDocument], Any]) -> Any:
    """Charge le document, applique `op`, enregistre la liste complète ; rien n'est écrit si `op` lève."""
    _get_page_or_404(db, page_id)
    store = BlockStore(db, lambda: user)
    doc = BlockDocument(store.load(page_id), page_id=page_id)
    result = op(doc)
    store.save(page_id, doc.to_ordered_list())
    return result


# ── Admin HTML ─────────────────────────────────────────────────────────────────

@router.get("/admin", response_class=HTMLResponse)
def admin_home(request: Request, db: Session = Depends(get_db)):
    if get_current_user(request) is None:
        return login_redirect()
    rows = "".join(
        f'<tr><td>{html.escape(p.title)}</td><td>/{html.escape(p.slug)}</td>'
        f'<td>{BRAND_LABELS.get(normalize_brand(p.brand), html.escape(p.brand))}</td><td>{p.status}</td>'
        f'<td><a href="/preview/{p.id}">Vorschau</a></td></tr>'
        for p in db_list_pages(db)
    )
    return HTMLResponse(f"""<!DOCTYPE html><html lang="de"><head><meta charset="UTF-8">
<title>Seiten — Physio CMS</title>
<style>body{{font-family:system-ui,sans-serif;padding:32px}}table{{border-collapse:collapse;width:100%}}
td,th{{border-bottom:1px solid #e2e8f0;padding:8px 12px;text-align:left}}</style></head><body>
<h1>Seiten</h1><p><a href="/admin/logout">Abmelden</a></p>
<table><tr><th>Titel</th><th>Slug</th><th>Marke</th><th>Status</th><th></th></tr>{rows}</table>
</body></html>""")


# ── Pages ──────────────────────────────────────────────────────────────────────

@router.get("/api/admin/pages")
def list_pages(brand: Optional[str] = None, db: Session = Depends(get_db), _: AdminUser = Depends(require_admin)):
    b = _brand_or_400(brand) if brand else None
    return [_page_dict(p) for p in db_list_pages(db, b)]


@router.post("/api/admin/pages", status_code=201)
def create_page(data: PageCreate, db: Session = Depends(get_db), user: AdminUser = Depends(require_admin)):
    brand = _brand_or_400(data.brand)
    if db_get_page_by_slug(db, data.slug, brand, published_only=False):
        raise HTTPException(409, f"Slug déjà utilisé pour {brand} : {data.slug}")
    try:
        page = db_create_page(db, PageDB(title=data.title, slug=data.slug, brand=brand, status=data.status.value))
    except IntegrityError:
        db.rollback()
        raise HTTPException(409, f"Slug déjà utilisé pour {brand} : {data.slug}")
    log.info("Page créée : %s/%s (%s)", brand, data.slug, user.email)
    return _page_dict(page)


@router.get("/api/admin/pages/{page_id}")
def get_page(page_id: str, db: Session = Depends(get_db), user: AdminUser = Depends(require_admin)):
    page = _get_page_or_404(db, page_id)
    blocks = normalize_blocks(BlockStore(db, lambda: user).load(page_id))
    return {**_page_dict(page), "blocks": [_block_dict(b) for b in blocks]}


@router.put("/api/admin/pages/{page_id}")
def save_page(page_id: str, data: PageSave, db: Session = Depends(get_db),
              user: AdminUser = Depends(require_admin)):
    if data.id != page_id:
        raise HTTPException(400, "id du payload différent de l'URL")
    _get_page_or_404(db, page_id)
    brand = _brand_or_400(data.brand)
    other = db_get_page_by_slug(db, data.slug, brand, published_only=False)
    if other is not None and other.id != page_id:
        raise HTTPException(409, f"Slug déjà utilisé pour {brand} : {data.slug}")

    blocks: List[Block] = []
    for i, b in enumerate(data.blocks):
        block_type = resolve_block_type(b.type)
        props = b.props if b.props is not None else defaults_for(block_type)
        issues = validate(block_type, props)
        if issues:
            raise BlockValidationError(block_type.value, issues)
        blocks.append(Block(id=b.id, type=block_type.value, props=props, sort=i))

    if data.status == PageStatus.PUBLISHED:
        issues = validate_for_publish(blocks, brand)
        if issues:
            return _issues_response(issues)

    count = BlockStore(db, lambda: user).save(
        page_id, blocks, title=data.title, slug=data.slug, brand=brand, status=data.status.value,
    )
    return {"ok": True, "blocks": count}


@router.delete("/api/admin/pages/{page_id}")
def delete_page(page_id: str, db: Session = Depends(get_db), user: AdminUser = Depends(require_admin)):
    db_delete_page(db, _get_page_or_404(db, page_id))
    log.info("Page supprimée : %s (%s)", page_id, user.email)
    return {"ok": True}


@router.post("/api/admin/pages/{page_id}/validate")
def validate_page(page_id: str, db: Session = Depends(get_db), user: AdminUser = Depends(require_admin)):
    page = _get_page_or_404(db, page_id)
    issues = validate_for_publish(BlockStore(db, lambda: user).load(page_id), page.brand)
    return {"ok": not issues, "issues": [i.model_dump() for i in issues]}


# ── Blocs (opérations unitaires) ───────────────────────────────────────────────

@router.post("/api/admin/pages/{page_id}/blocks", status_code=201)
def insert_block(page_id: str, data: BlockInsert, db: Session = Depends(get_db),
                 user: AdminUser = Depends(require_admin)):
    block_id = _edit(db, user, page_id, lambda doc: doc.insert(len(doc) if data.index is None else data.index, data.type))
    return {"ok": True, "id": block_id}


@router.patch("/api/admin/pages/{page_id}/blocks/{block_id}")
def patch_block(page_id: str, block_id: str, data: BlockPatch, db: Session = Depends(get_db),
                user: AdminUser = Depends(require_admin)):
    _edit(db, user, page_id, lambda doc: doc.patch(block_id, data.path, data.value))
    return {"ok": True}


@router.post("/api/admin/pages/{page_id}/blocks/{block_id}/move")
def move_block(page_id: str, block_id: str, data: BlockMove, db: Session = Depends(get_db),
               user: AdminUser = Depends(require_admin)):
    order = _edit(db, user, page_id, lambda doc: (doc.move(block_id, data.to_index), doc.ids())[1])
    return {"ok": True, "order": order}


@router.post("/api/admin/pages/{page_id}/blocks/{block_id}/duplicate", status_code=201)
def duplicate_block(page_id: str, block_id: str, db: Session = Depends(get_db),
                    user: AdminUser = Depends(require_admin)):
    return {"ok": True, "id": _edit(db, user, page_id, lambda doc: doc.duplicate(block_id))}


@router.delete("/api/admin/pages/{page_id}/blocks/{block_id}")
def delete_block(page_id: str, block_id: str, db: Session = Depends(get_db),
                 user: AdminUser = Depends(require_admin)):
    _edit(db, user, page_id, lambda doc: doc.remove(block_id))
    return {"ok": True}


@router.get("/api/admin/blocks/types")
def block_types(_: AdminUser = Depends(require_admin)):
    return describe_types()
