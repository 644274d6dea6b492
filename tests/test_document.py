"""
Tests du modèle de document — insert / remove / move / patch / listes, en mémoire.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import random

import pytest

from physio_cms.blocks import defaults_for
from physio_cms.document import BlockDocument
from physio_cms.errors import BlockValidationError, InvalidPath, NotFound, UnknownBlockType
from physio_cms.models import Block


@pytest.fixture
def doc():
    return BlockDocument(page_id="page-1")


# ── Scénarios ─────────────────────────────────────────────────────────────

class TestScenarios:
    def test_insert_move_remove(self, doc):
        a = doc.insert(0, "text")
        b = doc.insert(0, "hero")
        assert doc.ids() == [b, a]
        doc.move(a, 0)
        assert doc.ids() == [a, b]
        doc.remove(b)
        blocks = list(doc.to_ordered_list())
        assert len(blocks) == 1
        assert blocks[0].type == "text"

    def test_text_patch_keeps_defaults(self, doc):
        a = doc.insert(0, "text")
        doc.patch(a, "content", "Hello")
        doc.patch(a, "alignment", "center")
        assert doc.get(a).props == {**defaults_for("text"), "content": "Hello", "alignment": "center"}


# ── Structure ─────────────────────────────────────────────────────────────

class TestStructure:
    def test_insert_clamps_index(self, doc):
        a = doc.insert(0, "text")
        b = doc.insert(99, "cta")
        c = doc.insert(-5, "faq")
        assert doc.ids() == [c, a, b]

    def test_insert_unknown_type(self, doc):
        with pytest.raises(UnknownBlockType):
            doc.insert(0, "nonexistent-block")
        assert len(doc) == 0

    def test_insert_alias_stores_canonical_type(self, doc):
        a = doc.insert(0, "feature-grid")
        assert doc.get(a).type == "featureGrid"

    def test_sort_renumbered(self, doc):
        for t in ("text", "cta", "faq"):
            doc.insert(0, t)
        assert [b.sort for b in doc.to_ordered_list()] == [0, 1, 2]

    def test_remove_unknown(self, doc):
        with pytest.raises(NotFound):
            doc.remove("missing")

    def test_move_clamped(self, doc):
        a, b, c = doc.insert(0, "text"), doc.insert(1, "text"), doc.insert(2, "text")
        doc.move(a, 42)
        assert doc.ids() == [b, c, a]
        doc.move(a, -3)
        assert doc.ids() == [a, b, c]

    def test_move_same_index_is_noop(self, doc):
        a, b = doc.insert(0, "text"), doc.insert(1, "cta")
        before = list(doc.to_ordered_list())
        doc.move(b, 1)
        assert list(doc.to_ordered_list()) == before

    def test_move_unknown(self, doc):
        with pytest.raises(NotFound):
            doc.move("missing", 0)

    def test_random_sequences_keep_unique_ids(self, doc):
        rng = random.Random(7)
        alive = 0
        for _ in range(200):
            op = rng.choice(["insert", "insert", "remove", "move"])
            if op == "insert":
                doc.insert(rng.randint(-2, len(doc) + 2), rng.choice(["text", "hero", "faq"]))
                alive += 1
            elif doc.ids():
                target = rng.choice(doc.ids())
                if op == "remove":
                    doc.remove(target)
                    alive -= 1
                else:
                    doc.move(target, rng.randint(-2, len(doc) + 2))
        ids = [b.id for b in doc.to_ordered_list()]
        assert len(ids) == alive
        assert len(set(ids)) == len(ids)

    def test_duplicate(self, doc):
        a = doc.insert(0, "faq")
        other = doc.insert(1, "text")
        clone = doc.duplicate(a)
        assert doc.ids() == [a, clone, other]
        src, dup = doc.get(a).props, doc.get(clone).props
        assert [i["question"] for i in dup["items"]] == [i["question"] for i in src["items"]]
        assert not {i["id"] for i in dup["items"]} & {i["id"] for i in src["items"]}

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            BlockDocument([Block(id="x", type="text"), Block(id="x", type="cta")])

    def test_initial_order_by_sort_then_input(self):
        doc = BlockDocument([
            Block(id="c", type="text", sort=5),
            Block(id="a", type="text", sort=1),
            Block(id="b", type="text", sort=1),
        ])
        assert doc.ids() == ["a", "b", "c"]


# ── Lecture ───────────────────────────────────────────────────────────────

class TestOrderedList:
    def test_restartable(self, doc):
        doc.insert(0, "text")
        doc.insert(1, "cta")
        view = doc.to_ordered_list()
        assert [b.type for b in view] == [b.type for b in view] == ["text", "cta"]
        assert len(view) == 2

    def test_returns_copies(self, doc):
        a = doc.insert(0, "text")
        block = doc.to_ordered_list()[0]
        block.props["content"] = "changed"
        assert doc.get(a).props["content"] == "Textinhalt hier eingeben..."


# ── Patch ─────────────────────────────────────────────────────────────────

class TestPatch:
    def test_read_after_patch(self, doc):
        a = doc.insert(0, "faq")
        doc.patch(a, "items.2.question", "Neue Frage?")
        assert doc.read(a, "items.2.question") == "Neue Frage?"

    def test_no_cross_field_corruption(self, doc):
        a = doc.insert(0, "faq")
        before = doc.get(a).props
        doc.patch(a, "items.0.answer", "Eine neue ausführliche Antwort.")
        after = doc.get(a).props
        assert after["items"][0]["question"] == before["items"][0]["question"]
        assert after["items"][1] == before["items"][1]
        assert after["headline"] == before["headline"]

    def test_path_not_editable(self, doc):
        a = doc.insert(0, "text")
        with pytest.raises(InvalidPath):
            doc.patch(a, "headline", "x")

    def test_list_index_out_of_range(self, doc):
        a = doc.insert(0, "faq")
        with pytest.raises(InvalidPath):
            doc.patch(a, "items.9.question", "x")

    def test_unknown_block(self, doc):
        with pytest.raises(NotFound):
            doc.patch("missing", "content", "x")

    def test_invalid_value_leaves_block_unchanged(self, doc):
        a = doc.insert(0, "text")
        with pytest.raises(BlockValidationError):
            doc.patch(a, "alignment", "diagonal")
        assert doc.get(a).props["alignment"] == "left"

    def test_brand_content(self, doc):
        a = doc.insert(0, "hero")
        doc.patch(a, "brandContent.physio-konzept.headline", "Stronger")
        assert doc.read(a, "brandContent.physio-konzept.headline") == "Stronger"
        assert doc.read(a, "brandContent.physiotherapy.headline") == "Ihre Gesundheit in besten Händen"

    def test_section_wrapper(self, doc):
        a = doc.insert(0, "cta")
        doc.patch(a, "section.layout.paddingY", "xl")
        assert doc.read(a, "section") == {"layout": {"paddingY": "xl"}}

    def test_replace_props(self, doc):
        a = doc.insert(0, "text")
        doc.replace_props(a, {"content": "Neu"})
        assert doc.get(a).props == {"content": "Neu"}
        with pytest.raises(BlockValidationError):
            doc.replace_props(a, {"alignment": "left"})
        assert doc.get(a).props == {"content": "Neu"}


# ── Listes ────────────────────────────────────────────────────────────────

class TestListItems:
    def test_add_item(self, doc):
        a = doc.insert(0, "faq")
        pos = doc.add_item(a, "items", 0)
        assert pos == 0
        assert doc.read(a, "items.0.question") == "Neue Frage?"
        assert len(doc.read(a, "items")) == 6

    def test_add_item_respects_max(self, doc):
        a = doc.insert(0, "gallery")
        for _ in range(15):
            doc.add_item(a, "images")
        with pytest.raises(BlockValidationError):
            doc.add_item(a, "images")
        assert len(doc.read(a, "images")) == 18

    def test_remove_item_respects_min(self, doc):
        a = doc.insert(0, "gallery")
        with pytest.raises(BlockValidationError):
            doc.remove_item(a, "images", 0)

    def test_remove_item(self, doc):
        a = doc.insert(0, "faq")
        second = doc.read(a, "items.1")
        doc.remove_item(a, "items", 0)
        assert doc.read(a, "items.0") == second

    def test_move_item(self, doc):
        a = doc.insert(0, "openingHours")
        labels = [h["label"] for h in doc.read(a, "hours")]
        doc.move_item(a, "hours", 0, 10)
        assert [h["label"] for h in doc.read(a, "hours")] == labels[1:] + labels[:1]

    def test_unknown_list(self, doc):
        a = doc.insert(0, "text")
        with pytest.raises(InvalidPath):
            doc.add_item(a, "items")

    def test_add_item_to_null_list(self):
        doc = BlockDocument([Block(id="c", type="card", props={"title": "T", "buttons": None})])
        assert doc.add_item("c", "buttons") == 0
        assert len(doc.read("c", "buttons")) == 1

    def test_add_item_to_null_trust_items(self):
        props = {**defaults_for("hero"), "trustItems": None}
        doc = BlockDocument([Block(id="h", type="hero", props=props)])
        doc.add_item("h", "trustItems")
        assert doc.read("h", "trustItems") == ["Neuer Vorteil"]

    def test_add_item_on_non_list_value(self):
        doc = BlockDocument([Block(id="c", type="card", props={"title": "T", "buttons": "oops"})])
        with pytest.raises(InvalidPath):
            doc.add_item("c", "buttons")
        assert doc.read("c", "buttons") == "oops"

    def test_add_hero_action_per_brand(self):
        props = defaults_for("hero")
        props["brandContent"]["physio-konzept"]["actions"] = None
        doc = BlockDocument([Block(id="h", type="hero", props=props)])
        before = len(doc.read("h", "brandContent.physiotherapy.actions") or [])
        doc.add_item("h", "brandContent.physio-konzept.actions")
        doc.add_item("h", "brandContent.physiotherapy.actions")
        assert doc.read("h", "brandContent.physio-konzept.actions.0.label") == "Neue Action"
        assert len(doc.read("h", "brandContent.physiotherapy.actions")) == before + 1
