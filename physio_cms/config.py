"""
Configuration — variables d'environnement + marques.

DB_PATH, ADMIN_TOKEN, ADMIN_PASSWORD, ADMIN_EMAIL, MEDIA_BASE_URL, DEFAULT_BRAND
"""
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"


class Brand(str, Enum):
    PHYSIOTHERAPY  = "physiotherapy"
    PHYSIO_KONZEPT = "physio-konzept"


# Valeurs historiques encore présentes dans certaines lignes `pages.brand`
_LEGACY_BRANDS = {
    "physio":  Brand.PHYSIOTHERAPY,
    "konzept": Brand.PHYSIO_KONZEPT,
}

BRAND_LABELS = {
    Brand.PHYSIOTHERAPY:  "Physiotherapie",
    Brand.PHYSIO_KONZEPT: "Physio-Konzept",
}


def normalize_brand(value: Optional[str]) -> Optional[Brand]:
    """physio → physiotherapy, konzept → physio-konzept, inconnu → None."""
    if not value:
        return None
    if value in _LEGACY_BRANDS:
        return _LEGACY_BRANDS[value]
    try:
        return Brand(value)
    except ValueError:
        log.warning("Marque inconnue : %s", value)
        return None


class Settings(BaseModel):
    db_path:        str
    admin_token:    str   = "changeme"
    admin_password: str   = "physio"
    admin_email:    str   = "admin@physiotherapie-kroll.de"
    media_base_url: str   = "/media"
    default_brand:  Brand = Brand.PHYSIOTHERAPY


def get_settings() -> Settings:
    """Relit l'environnement à chaque appel (les tests changent DB_PATH / ADMIN_TOKEN)."""
    return Settings(
        db_path=os.getenv("DB_PATH", str(DATA_DIR / "physio_cms.db")),
        admin_token=os.getenv("ADMIN_TOKEN", "changeme"),
        admin_password=os.getenv("ADMIN_PASSWORD", "physio"),
        admin_email=os.getenv("ADMIN_EMAIL", "admin@physiotherapie-kroll.de"),
        media_base_url=os.getenv("MEDIA_BASE_URL", "/media").rstrip("/"),
        default_brand=normalize_brand(os.getenv("DEFAULT_BRAND")) or Brand.PHYSIOTHERAPY,
    )
