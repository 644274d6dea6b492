"""
Tests du registre de blocs — défauts, validation structurelle, éléments éditables.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from physio_cms.blocks import (REGISTRY, BlockType, defaults_for, describe_types, editable_elements_for,
                               find_editable_element, is_known_type, item_factory_for, resolve_block_type,
                               validate)
from physio_cms.blocks.elements import (item_el, match_element, path_get, path_set,
                                        resolve_dynamic_element_label, split_path)
from physio_cms.errors import UnknownBlockType


# ── Types ─────────────────────────────────────────────────────────────────

class TestBlockTypes:
    def test_every_type_registered(self):
        assert set(REGISTRY) == set(BlockType)

    def test_kebab_aliases(self):
        assert resolve_block_type("feature-grid") is BlockType.FEATURE_GRID
        assert resolve_block_type("contact-form") is BlockType.CONTACT_FORM
        assert resolve_block_type("imageSlider") is BlockType.IMAGE_SLIDER

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownBlockType):
            resolve_block_type("nonexistent-block")
        with pytest.raises(UnknownBlockType):
            defaults_for("carousel")

    def test_is_known_type(self):
        assert is_known_type("hero")
        assert not is_known_type("nonexistent-block")
        assert not is_known_type(None)


# ── Défauts ───────────────────────────────────────────────────────────────

class TestDefaults:
    @pytest.mark.parametrize("block_type", list(BlockType))
    def test_defaults_are_valid(self, block_type):
        assert validate(block_type, defaults_for(block_type)) == []

    def test_defaults_are_fresh_copies(self):
        a = defaults_for("faq")
        a["items"].clear()
        assert len(defaults_for("faq")["items"]) == 5

    def test_list_item_ids_regenerated(self):
        ids_a = [i["id"] for i in defaults_for("servicesGrid")["cards"]]
        ids_b = [i["id"] for i in defaults_for("servicesGrid")["cards"]]
        assert len(set(ids_a)) == len(ids_a) == 6
        assert not set(ids_a) & set(ids_b)

    def test_text_defaults(self):
        assert defaults_for("text") == {
            "content": "Textinhalt hier eingeben...", "alignment": "left", "maxWidth": "lg", "textSize": "base",
        }


# ── Validation ────────────────────────────────────────────────────────────

class TestValidate:
    def test_missing_required_field(self):
        issues = validate("text", {"alignment": "left"})
        assert [i.path for i in issues] == ["content"]

    def test_enum_out_of_range(self):
        props = {**defaults_for("text"), "alignment": "diagonal"}
        assert [i.path for i in validate("text", props)] == ["alignment"]

    def test_list_bounds(self):
        props = defaults_for("gallery")
        props["images"] = props["images"][:2]
        assert [i.path for i in validate("gallery", props)] == ["images"]

    def test_nested_item_path(self):
        props = defaults_for("faq")
        del props["items"][1]["answer"]
        assert [i.path for i in validate("faq", props)] == ["items.1.answer"]

    def test_unknown_keys_allowed(self):
        props = {**defaults_for("cta"), "legacyField": 1}
        assert validate("cta", props) == []

    def test_props_not_a_dict(self):
        issues = validate("hero", ["nope"])
        assert len(issues) == 1 and issues[0].path == ""

    def test_section_wrapper_validated(self):
        props = {**defaults_for("text"), "section": {"layout": {"paddingY": "huge"}}}
        assert [i.path for i in validate("text", props)] == ["section.layout.paddingY"]


# ── Éléments éditables ────────────────────────────────────────────────────

class TestEditableElements:
    def test_section_elements_shared(self):
        paths = [e.path for e in editable_elements_for("cta")]
        assert "headline" in paths
        assert "section.layout.paddingY" in paths

    def test_static_path(self):
        assert find_editable_element("text", "content").id == "text.content"
        assert find_editable_element("text", "headline") is None

    def test_dynamic_index_checked_against_list(self):
        props = defaults_for("faq")
        assert find_editable_element("faq", "items.4.answer", props) is not None
        assert find_editable_element("faq", "items.5.answer", props) is None
        assert find_editable_element("faq", "items.x.answer", props) is None

    def test_brand_template(self):
        assert find_editable_element("hero", "brandContent.physio-konzept.ctaText").id == "brand.cta"
        assert find_editable_element("hero", "brandContent.other.ctaText") is None

    def test_dynamic_label(self):
        d, index = match_element(editable_elements_for("faq"), "items.2.question")
        assert d.dynamic and index == 2
        assert resolve_dynamic_element_label(d.label_template, index) == "Frage 3"

    def test_item_el_without_field(self):
        d = item_el("trust", "Trust", "trustItems", "")
        assert d.path == "trustItems.{index}"

    def test_item_factories(self):
        item = item_factory_for("faq", "items")()
        assert item["question"] and item["id"]
        assert item_factory_for("faq", "questions") is None

    def test_describe_types(self):
        catalog = {t["type"]: t for t in describe_types()}
        assert set(catalog) == {t.value for t in BlockType}
        assert catalog["faq"]["lists"] == ["items"]


# ── Chemins ───────────────────────────────────────────────────────────────

class TestPaths:
    def test_split(self):
        assert split_path("items.2.question") == ["items", 2, "question"]
        with pytest.raises(KeyError):
            split_path("items..question")

    def test_get(self):
        data = {"items": [{"q": "a"}]}
        assert path_get(data, "items.0.q") == "a"
        assert path_get(data, "items.3.q", "x") == "x"

    def test_set_creates_intermediate_dicts(self):
        data = {}
        path_set(data, "privacyLink.label", "Datenschutz")
        assert data == {"privacyLink": {"label": "Datenschutz"}}

    def test_set_never_extends_lists(self):
        data = {"items": []}
        with pytest.raises(IndexError):
            path_set(data, "items.0.q", "a")


# ── Normalisation ─────────────────────────────────────────────────────────

class TestNormalize:
    def test_defaults_merged_under_stored_props(self):
        from physio_cms.blocks import normalize_block
        from physio_cms.models import Block
        b = normalize_block(Block(id="t", type="text", props={"content": "Hallo Welt"}))
        assert b.props["content"] == "Hallo Welt"
        assert b.props["maxWidth"] == "lg"

    def test_invalid_props_fall_back_to_defaults_keeping_section(self):
        from physio_cms.blocks import normalize_block
        from physio_cms.models import Block
        section = {"layout": {"width": "full"}}
        b = normalize_block(Block(id="t", type="text", props={"alignment": "diagonal", "section": section}))
        assert b.id == "t"
        assert b.props["content"] == defaults_for("text")["content"]
        assert b.props["section"] == section

    def test_duplicate_item_ids_renewed(self):
        from physio_cms.blocks import normalize_block
        from physio_cms.models import Block
        props = defaults_for("faq")
        props["items"][1]["id"] = props["items"][0]["id"]
        b = normalize_block(Block(id="f", type="faq", props=props))
        ids = [it["id"] for it in b.props["items"]]
        assert len(set(ids)) == len(ids)
        assert ids[0] == props["items"][0]["id"]
