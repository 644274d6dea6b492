"""
Adaptateur de stockage — lignes `blocks` ↔ liste ordonnée de Block pour une page.

load : tri (sort, ordre d'insertion), lignes de type inconnu ignorées avec warning.
save : remplacement complet dans une seule transaction, sort renuméroté 0..n-1,
       dernier écrivain gagnant (pas de contrôle de version).
"""
import copy
import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .blocks import ValidationIssue, is_known_type, resolve_block_type
from .database import db_get_page, db_update_page
from .errors import BlockValidationError, NotFound, StoreUnavailable, Unauthorized
from .models import AdminUser, Block, BlockDB

log = logging.getLogger(__name__)


class BlockStore:
    def __init__(self, db: Session, get_current_user: Callable[[], Optional[AdminUser]]):
        self.db = db
        self._get_current_user = get_current_user

    def load(self, page_id: str) -> List[Block]:
        try:
            rows = (self.db.query(BlockDB)
                    .filter_by(page_id=page_id)
                    .order_by(BlockDB.sort, BlockDB.row_id)
                    .all())
        except SQLAlchemyError as e:
            log.warning("Lecture des blocs impossible (page %s) : %s", page_id, e)
            raise StoreUnavailable(f"Lecture des blocs impossible : {e}") from e

        blocks = []
        for row in rows:
            if not is_known_type(row.type):
                log.warning("Bloc %s ignoré (page %s) : type inconnu %r", row.id, page_id, row.type)
                continue
            if not isinstance(row.props, dict):
                log.warning("Bloc %s ignoré (page %s) : props illisibles", row.id, page_id)
                continue
            blocks.append(Block(id=row.id, type=row.type, props=copy.deepcopy(row.props), sort=row.sort))
        return blocks

    def load_for_render(self, page_id: str) -> List[Block]:
        """Variante publique : une panne de stockage donne une page vide, pas une erreur."""
        try:
            return self.load(page_id)
        except StoreUnavailable:
            return []

    def save(self, page_id: str, blocks: Iterable[Block], **page_fields) -> int:
        """Remplace tous les blocs de la page (et les champs `page_fields`) — tout ou rien."""
        user = self._get_current_user()
        if user is None:
            log.warning("Save refusé (page %s) : aucune session admin", page_id)
            raise Unauthorized()

        # Copie matérialisée : le document de l'appelant n'est jamais touché
        items = [b.model_copy(deep=True) for b in blocks]
        seen = set()
        for b in items:
            resolve_block_type(b.type)
            if b.id in seen:
                raise BlockValidationError(b.type, [ValidationIssue(path="id", message=f"id en double : {b.id}")])
            seen.add(b.id)

        try:
            page = db_get_page(self.db, page_id)
            if page is None:
                raise NotFound("Page", page_id)
            self.db.query(BlockDB).filter_by(page_id=page_id).delete(synchronize_session="fetch")
            for i, b in enumerate(items):
                self.db.add(BlockDB(id=b.id, page_id=page_id, type=b.type, sort=i, props=b.props))
            db_update_page(self.db, page, updated_at=datetime.utcnow(), **page_fields)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("Save page %s échoué, rollback : %s", page_id, e)
            raise StoreUnavailable(f"Enregistrement impossible : {e}") from e
        except NotFound:
            self.db.rollback()
            raise

        log.info("Page %s : %d blocs enregistrés (%s)", page_id, len(items), user.email)
        return len(items)
