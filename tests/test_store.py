"""
Tests de l'adaptateur de stockage — load / save sur SQLite temporaire.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from physio_cms import database
from physio_cms.database import db_create_page, db_delete_page, db_get_page
from physio_cms.document import BlockDocument
from physio_cms.errors import BlockValidationError, NotFound, StoreUnavailable, Unauthorized, UnknownBlockType
from physio_cms.models import AdminUser, Block, BlockDB, PageDB
from physio_cms.store import BlockStore

ADMIN = AdminUser(email="admin@physiotherapie-kroll.de")


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def db(tmp_path):
    """Session sur une base SQLite temporaire."""
    database.configure_engine(f"sqlite:///{tmp_path / 'test.db'}")
    database.init_db()
    with database.SessionLocal() as s:
        yield s


@pytest.fixture
def page(db):
    return db_create_page(db, PageDB(slug="home", brand="physiotherapy", title="Startseite"))


def _store(db, user=ADMIN) -> BlockStore:
    return BlockStore(db, lambda: user)


def _rows(db, page_id):
    rows = db.query(BlockDB).filter_by(page_id=page_id).order_by(BlockDB.sort).all()
    return [(r.id, r.type, r.props, r.sort) for r in rows]


def _doc_with(*types) -> BlockDocument:
    doc = BlockDocument()
    for t in types:
        doc.insert(len(doc), t)
    return doc


# ── load ──────────────────────────────────────────────────────────────────

class TestLoad:
    def test_empty_page(self, db, page):
        assert _store(db).load(page.id) == []

    def test_unknown_type_row_dropped(self, db, page, caplog):
        for i, t in enumerate(["text", "nonexistent-block", "cta", "faq"]):
            db.add(BlockDB(id=f"b{i}", page_id=page.id, type=t, sort=i, props={}))
        db.commit()
        with caplog.at_level(logging.WARNING, logger="physio_cms.store"):
            blocks = _store(db).load(page.id)
        assert [b.id for b in blocks] == ["b0", "b2", "b3"]
        assert any("nonexistent-block" in r.getMessage() for r in caplog.records)

    def test_ties_broken_by_insertion_order(self, db, page):
        for block_id in ["z", "a", "m"]:
            db.add(BlockDB(id=block_id, page_id=page.id, type="text", sort=3, props={"content": block_id}))
            db.flush()
        db.add(BlockDB(id="first", page_id=page.id, type="text", sort=0, props={"content": "x"}))
        db.commit()
        assert [b.id for b in _store(db).load(page.id)] == ["first", "z", "a", "m"]

    def test_unreadable_props_dropped(self, db, page):
        db.add(BlockDB(id="bad", page_id=page.id, type="text", sort=0, props=["not", "a", "dict"]))
        db.add(BlockDB(id="ok", page_id=page.id, type="text", sort=1, props={"content": "ok"}))
        db.commit()
        assert [b.id for b in _store(db).load(page.id)] == ["ok"]

    def test_store_failure(self, db, page):
        with patch.object(db, "query", side_effect=OperationalError("SELECT", {}, Exception("locked"))):
            with pytest.raises(StoreUnavailable):
                _store(db).load(page.id)
            assert _store(db).load_for_render(page.id) == []


# ── save ──────────────────────────────────────────────────────────────────

class TestSave:
    def test_round_trip(self, db, page):
        doc = _doc_with("hero", "text", "faq")
        store = _store(db)
        store.save(page.id, doc.to_ordered_list())
        first = _rows(db, page.id)
        store.save(page.id, store.load(page.id))
        assert _rows(db, page.id) == first
        assert [r[0] for r in first] == doc.ids()

    def test_sort_renumbered(self, db, page):
        blocks = [Block(id="a", type="text", props={"content": "a"}, sort=10),
                  Block(id="b", type="text", props={"content": "b"}, sort=40)]
        assert _store(db).save(page.id, blocks) == 2
        assert [r[3] for r in _rows(db, page.id)] == [0, 1]

    def test_full_replace(self, db, page):
        store = _store(db)
        store.save(page.id, _doc_with("text", "cta", "faq").to_ordered_list())
        store.save(page.id, _doc_with("hero").to_ordered_list())
        assert [r[1] for r in _rows(db, page.id)] == ["hero"]

    def test_updates_page_fields(self, db, page):
        _store(db).save(page.id, [], title="Neu", status="published")
        db.refresh(page)
        assert (page.title, page.status) == ("Neu", "published")

    def test_unauthorized(self, db, page):
        _store(db).save(page.id, _doc_with("text").to_ordered_list())
        before = _rows(db, page.id)
        with pytest.raises(Unauthorized):
            _store(db, user=None).save(page.id, [])
        assert _rows(db, page.id) == before

    def test_unknown_type_rejected(self, db, page):
        with pytest.raises(UnknownBlockType):
            _store(db).save(page.id, [Block(id="x", type="nonexistent-block")])

    def test_duplicate_ids_rejected(self, db, page):
        with pytest.raises(BlockValidationError):
            _store(db).save(page.id, [Block(id="x", type="text"), Block(id="x", type="cta")])

    def test_missing_page(self, db):
        with pytest.raises(NotFound):
            _store(db).save("missing", [])

    def test_failed_commit_keeps_previous_rows_and_document(self, db, page):
        store = _store(db)
        store.save(page.id, _doc_with("text", "cta").to_ordered_list())
        before = _rows(db, page.id)

        doc = _doc_with("hero", "faq", "gallery")
        ids = doc.ids()
        with patch.object(db, "commit", side_effect=OperationalError("COMMIT", {}, Exception("disk full"))):
            with pytest.raises(StoreUnavailable):
                store.save(page.id, doc.to_ordered_list())
        assert _rows(db, page.id) == before
        assert doc.ids() == ids

    def test_last_write_wins(self, db, page):
        base = _doc_with("text")
        editor_a = BlockDocument(base.to_ordered_list())
        editor_b = BlockDocument(base.to_ordered_list())
        editor_a.patch(base.ids()[0], "content", "Version A")
        editor_b.patch(base.ids()[0], "content", "Version B")
        _store(db).save(page.id, editor_a.to_ordered_list())
        _store(db).save(page.id, editor_b.to_ordered_list())
        assert _store(db).load(page.id)[0].props["content"] == "Version B"

    def test_delete_page_deletes_blocks(self, db, page):
        _store(db).save(page.id, _doc_with("text", "cta").to_ordered_list())
        page_id = page.id
        db_delete_page(db, db_get_page(db, page_id))
        assert db.query(BlockDB).filter_by(page_id=page_id).count() == 0
