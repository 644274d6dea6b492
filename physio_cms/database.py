"""SQLite — init + session + CRUD helpers"""
import logging
from pathlib import Path
from typing import List, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import Brand, get_settings
from .models import Base, ContactSubmissionDB, MediaAssetDB, PageDB, ThemePresetDB
from .theme import BRAND_DEFAULT_TOKENS

log = logging.getLogger(__name__)

ENGINE: Optional[Engine] = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def configure_engine(url: Optional[str] = None) -> Engine:
    """(Re)lie SessionLocal à une base — DB_PATH par défaut, URL explicite pour les tests."""
    global ENGINE
    if url is None:
        db_path = Path(get_settings().db_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)
        url = f"sqlite:///{db_path}"
    ENGINE = create_engine(url, connect_args={"check_same_thread": False})
    event.listen(ENGINE, "connect", _sqlite_fk_on)
    SessionLocal.configure(bind=ENGINE)
    return ENGINE


def _sqlite_fk_on(dbapi_conn, _record):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.close()


_THEME_DEFAULTS = [
    {"brand": Brand.PHYSIOTHERAPY.value,  "name": "Kroll Ruhig",         "is_active": True},
    {"brand": Brand.PHYSIO_KONZEPT.value, "name": "Konzept Performance", "is_active": True},
]


def init_db():
    if ENGINE is None:
        configure_engine()
    Base.metadata.create_all(bind=ENGINE)
    # Seed thèmes (only if table is empty)
    with SessionLocal() as db:
        if db.query(ThemePresetDB).count() == 0:
            for t in _THEME_DEFAULTS:
                db.add(ThemePresetDB(**t, tokens=dict(BRAND_DEFAULT_TOKENS[Brand(t["brand"])])))
            db.commit()
            log.info("Thèmes par défaut insérés")


def get_db():
    if ENGINE is None:
        configure_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ── Pages ──
def db_create_page(db: Session, obj: PageDB) -> PageDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_page(db: Session, page_id: str) -> Optional[PageDB]:
    return db.query(PageDB).filter_by(id=page_id).first()

def db_get_page_by_slug(db: Session, slug: str, brand: str, published_only: bool = True) -> Optional[PageDB]:
    q = db.query(PageDB).filter_by(slug=slug, brand=brand)
    if published_only:
        q = q.filter_by(status="published")
    return q.first()

def db_list_pages(db: Session, brand: Optional[str] = None) -> List[PageDB]:
    q = db.query(PageDB)
    if brand:
        q = q.filter_by(brand=brand)
    return q.order_by(PageDB.updated_at.desc()).all()

def db_update_page(db: Session, page: PageDB, **kwargs) -> PageDB:
    """Met à jour les attributs sans commit — le commit appartient à l'appelant (transaction save)."""
    for k, v in kwargs.items():
        setattr(page, k, v)
    return page

def db_delete_page(db: Session, page: PageDB):
    # cascade ORM : les blocs partent avec la page
    db.delete(page); db.commit()


# ── Thèmes ──
def db_get_active_theme(db: Session, brand: str) -> Optional[ThemePresetDB]:
    return db.query(ThemePresetDB).filter_by(brand=brand, is_active=True).first()

def db_upsert_theme(db: Session, brand: str, name: str, tokens: dict, activate: bool = True) -> ThemePresetDB:
    preset = db.query(ThemePresetDB).filter_by(brand=brand, name=name).first()
    if preset is None:
        preset = ThemePresetDB(brand=brand, name=name)
        db.add(preset)
    preset.tokens = tokens
    if activate:
        db.query(ThemePresetDB).filter_by(brand=brand).update({"is_active": False})
        preset.is_active = True
    db.commit(); db.refresh(preset); return preset


# ── Médias ──
def db_get_media(db: Session, media_id: str) -> Optional[MediaAssetDB]:
    return db.query(MediaAssetDB).filter_by(id=media_id).first()

def db_create_media(db: Session, obj: MediaAssetDB) -> MediaAssetDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj


# ── Contact ──
def db_create_contact_submission(db: Session, obj: ContactSubmissionDB) -> ContactSubmissionDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_list_contact_submissions(db: Session, brand: Optional[str] = None) -> List[ContactSubmissionDB]:
    q = db.query(ContactSubmissionDB)
    if brand:
        q = q.filter_by(brand=brand)
    return q.order_by(ContactSubmissionDB.created_at.desc()).all()
