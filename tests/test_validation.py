"""
Tests de la validation de publication — règles par type, messages affichés dans l'admin.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from physio_cms.blocks import BlockType, defaults_for
from physio_cms.config import Brand
from physio_cms.models import Block
from physio_cms.validation import validate_block_for_publish, validate_for_publish


def block(block_type, block_id="b1", **overrides):
    return Block(id=block_id, type=block_type, props={**defaults_for(block_type), **overrides})


def paths(issues):
    return [i.field_path for i in issues]


class TestPublishRules:
    @pytest.mark.parametrize("block_type", [t for t in BlockType if t is not BlockType.GALLERY])
    def test_defaults_publishable(self, block_type):
        assert validate_for_publish([block(block_type.value)], Brand.PHYSIOTHERAPY) == []

    def test_gallery_defaults_need_alt_text(self):
        issues = validate_for_publish([block("gallery")])
        assert paths(issues) == ["images.0.alt", "images.1.alt", "images.2.alt"]
        assert issues[0].message == "Bild Alt-Text erforderlich"

    def test_text_min_length(self):
        issues = validate_for_publish([block("text", content="kurz")])
        assert paths(issues) == ["content"]
        assert issues[0].message == "Inhalt muss mindestens 10 Zeichen lang sein"

    def test_faq_item_rules(self):
        b = block("faq")
        b.props["items"][1]["answer"] = "Ja."
        issues = validate_for_publish([b])
        assert paths(issues) == ["items.1.answer"]

    def test_empty_list(self):
        issues = validate_for_publish([block("servicesGrid", cards=[])])
        assert paths(issues) == ["cards"]
        assert issues[0].message == "Mindestens eine Card erforderlich"

    def test_service_card_cta_pair(self):
        b = block("servicesGrid")
        b.props["cards"][0]["ctaHref"] = ""
        assert paths(validate_for_publish([b])) == ["cards.0.ctaText"]

    def test_contact_form_consent_label(self):
        issues = validate_for_publish([block("contactForm", requireConsent=True, consentLabel="")])
        assert paths(issues) == ["consentLabel"]


class TestHeroPerBrand:
    def test_brand_headline_checked(self):
        b = block("hero")
        b.props["brandContent"]["physio-konzept"]["headline"] = ""
        b.props["headline"] = ""
        assert validate_for_publish([b], Brand.PHYSIOTHERAPY) == []
        issues = validate_for_publish([b], "physio-konzept")
        assert paths(issues) == ["headline"]
        assert "Physio-Konzept" in issues[0].message

    def test_legacy_headline_fallback(self):
        b = block("hero", headline="Willkommen")
        del b.props["brandContent"]
        assert validate_for_publish([b], Brand.PHYSIOTHERAPY) == []

    def test_cta_pair(self):
        b = block("hero")
        b.props["brandContent"]["physiotherapy"]["ctaHref"] = ""
        b.props["ctaHref"] = ""
        assert paths(validate_for_publish([b], Brand.PHYSIOTHERAPY)) == ["ctaText"]


class TestInvalidBlocks:
    def test_unknown_type(self):
        issues = validate_block_for_publish(Block(id="x", type="nonexistent-block"))
        assert issues[0].message == "Unbekannter Blocktyp: nonexistent-block"

    def test_issue_carries_block(self):
        issues = validate_for_publish([block("text", "t-9", content="")])
        assert (issues[0].block_id, issues[0].block_type) == ("t-9", "text")

    def test_order_follows_blocks(self):
        blocks = [block("text", "a", content=""), block("section", "b", headline="")]
        assert [i.block_id for i in validate_for_publish(blocks)] == ["a", "b"]
