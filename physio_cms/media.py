"""
Médias — référence stockée dans les props → URL publique.

Formes acceptées : {"mediaId": ...}, {"url": ...}, ou une chaîne (URL directe).
"""
import logging
from typing import Any, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .database import db_get_media

log = logging.getLogger(__name__)


class MediaResolver(Protocol):
    def resolve(self, value: Any) -> Optional[str]: ...


def _direct_url(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value or None
    if isinstance(value, dict) and isinstance(value.get("url"), str):
        return value["url"] or None
    return None


class UrlMediaResolver:
    """Sans base : seules les URLs directes sont résolues (aperçu, tests)."""

    def resolve(self, value: Any) -> Optional[str]:
        return _direct_url(value)


class DbMediaResolver:
    def __init__(self, db: Session, base_url: str = "/media"):
        self.db = db
        self.base_url = base_url.rstrip("/")
        self._cache = {}

    def resolve(self, value: Any) -> Optional[str]:
        url = _direct_url(value)
        if url or not isinstance(value, dict) or not value.get("mediaId"):
            return url
        media_id = str(value["mediaId"])
        if media_id not in self._cache:
            try:
                asset = db_get_media(self.db, media_id)
            except SQLAlchemyError as e:
                log.warning("Média %s non résolu : %s", media_id, e)
                return None
            if asset is None:
                log.warning("Média introuvable : %s", media_id)
            self._cache[media_id] = f"{self.base_url}/{asset.object_key.lstrip('/')}" if asset else None
        return self._cache[media_id]
