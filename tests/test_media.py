"""
Tests de la résolution des médias — références de props → URL publique.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from physio_cms import database
from physio_cms.blocks import defaults_for
from physio_cms.config import Brand
from physio_cms.database import db_create_media
from physio_cms.media import DbMediaResolver, UrlMediaResolver
from physio_cms.models import Block, MediaAssetDB
from physio_cms.renderer import RenderContext, render
from physio_cms.theme import resolve_theme


@pytest.fixture
def db(tmp_path):
    database.configure_engine(f"sqlite:///{tmp_path / 'test.db'}")
    database.init_db()
    with database.SessionLocal() as s:
        yield s


@pytest.fixture
def asset(db):
    return db_create_media(db, MediaAssetDB(object_key="/praxis/raum.jpg", alt="Behandlungsraum"))


class TestUrlMediaResolver:
    def test_direct_forms(self):
        m = UrlMediaResolver()
        assert m.resolve("/img/a.jpg") == "/img/a.jpg"
        assert m.resolve({"url": "/img/b.jpg"}) == "/img/b.jpg"
        assert m.resolve({"mediaId": "x"}) is None
        assert m.resolve("") is None


class TestDbMediaResolver:
    def test_media_id_to_url(self, db, asset):
        m = DbMediaResolver(db, "/media/")
        assert m.resolve({"mediaId": asset.id}) == "/media/praxis/raum.jpg"

    def test_direct_url_wins(self, db, asset):
        m = DbMediaResolver(db)
        assert m.resolve({"url": "/direct.jpg", "mediaId": asset.id}) == "/direct.jpg"

    def test_missing_asset(self, db):
        assert DbMediaResolver(db).resolve({"mediaId": "missing"}) is None

    def test_lookup_cached(self, db, asset):
        m = DbMediaResolver(db)
        m.resolve({"mediaId": asset.id})
        with patch("physio_cms.media.db_get_media") as lookup:
            assert m.resolve({"mediaId": asset.id}) == "/media/praxis/raum.jpg"
        lookup.assert_not_called()

    def test_store_error_gives_none(self, db):
        with patch("physio_cms.media.db_get_media", side_effect=OperationalError("SELECT", {}, Exception("io"))):
            assert DbMediaResolver(db).resolve({"mediaId": "a"}) is None

    def test_section_background_image(self, db, asset):
        section = {"background": {"type": "image", "image": {"mediaId": asset.id}}}
        b = Block(id="t", type="text", props={**defaults_for("text"), "section": section})
        ctx = RenderContext(brand=Brand.PHYSIOTHERAPY, theme=resolve_theme(Brand.PHYSIOTHERAPY),
                            media=DbMediaResolver(db))
        assert "/media/praxis/raum.jpg" in render([b], ctx)
