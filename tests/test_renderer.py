"""
Tests du renderer HTML — dispatch, wrapper de section, marque, hooks d'édition.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import re

import pytest

from physio_cms.blocks import BlockType, defaults_for
from physio_cms.blocks.base import GradientBackground
from physio_cms.config import Brand
from physio_cms.models import Block
from physio_cms.renderer import (HtmlRenderer, RenderContext, Renderer, collect_hooks, gradient_css, render,
                                 render_page, resolve_section)
from physio_cms.theme import resolve_theme


# ── Helpers ───────────────────────────────────────────────────────────────

def block(block_type, block_id=None, **overrides):
    props = {**defaults_for(block_type), **overrides}
    return Block(id=block_id or f"{block_type}-1", type=block_type, props=props)


def ctx(brand=Brand.PHYSIOTHERAPY, **kw):
    return RenderContext(brand=brand, theme=resolve_theme(brand), **kw)


class FakeMedia:
    def resolve(self, value):
        if isinstance(value, dict) and value.get("mediaId"):
            return f"/media/{value['mediaId']}.jpg"
        return value if isinstance(value, str) else None


# ── Rendu public ──────────────────────────────────────────────────────────

class TestRender:
    def test_empty_list(self):
        out = render([], ctx())
        assert out.startswith('<div class="cms-blocks cms-blocks--physiotherapy"')
        assert "<section" not in out

    @pytest.mark.parametrize("block_type", list(BlockType))
    def test_every_type_renders(self, block_type):
        out = render([block(block_type.value)], ctx())
        assert f'cms-block--{block_type.value}' in out

    def test_given_order(self):
        out = render([block("cta", "b"), block("text", "a")], ctx())
        assert out.index('id="block-b"') < out.index('id="block-a"')

    def test_unknown_type_skipped(self):
        out = render([Block(id="x", type="nonexistent-block"), block("text")], ctx())
        assert 'id="block-x"' not in out
        assert 'id="block-text-1"' in out

    def test_malformed_block_skipped(self):
        out = render([Block(id="bad", type="text", props={"alignment": "left"})], ctx())
        assert 'id="block-bad"' not in out

    def test_alias_type(self):
        out = render([Block(id="f", type="feature-grid", props=defaults_for("featureGrid"))], ctx())
        assert "cms-block--featureGrid" in out

    def test_text_content_is_raw_html(self):
        out = render([block("text", content="<p>Hallo <strong>Welt</strong></p>")], ctx())
        assert "<strong>Welt</strong>" in out

    def test_other_text_is_escaped(self):
        out = render([block("cta", headline="<script>alert(1)</script>")], ctx())
        assert "<script>alert(1)" not in out
        assert "&lt;script&gt;" in out

    def test_theme_tokens_on_wrapper(self):
        out = render([], RenderContext(brand=Brand.PHYSIO_KONZEPT, theme={"primary": "#ff0000", "evil": "x"}))
        assert "--primary:#ff0000" in out
        assert "evil" not in out

    def test_colors_fall_back_to_theme_variables(self):
        out = render([block("cta")], ctx())
        assert "var(--primary)" in out

    def test_explicit_color_wins(self):
        out = render([block("cta", headlineColor="#123456")], ctx())
        assert "color:#123456" in out

    def test_no_edit_attributes_in_public_mode(self):
        out = render([block("faq")], ctx())
        assert "data-element-id" not in out
        assert "data-block-id" not in out

    def test_contact_recipient_not_rendered(self):
        out = render([block("contactForm")], ctx())
        assert "info@physiotherapie-kroll.de" not in out

    def test_renderer_protocol(self):
        assert isinstance(HtmlRenderer(), Renderer)


# ── Hero par marque ───────────────────────────────────────────────────────

class TestHeroBrandContent:
    def test_brand_content_wins(self):
        out = render([block("hero")], ctx(Brand.PHYSIO_KONZEPT))
        assert "Push Your Limits" in out
        assert "Ihre Gesundheit in besten Händen" not in out

    def test_other_brand(self):
        out = render([block("hero")], ctx(Brand.PHYSIOTHERAPY))
        assert "Ihre Gesundheit in besten Händen" in out
        assert "Push Your Limits" not in out

    def test_legacy_props_without_brand_content(self):
        b = block("hero", headline="Legacy Headline")
        del b.props["brandContent"]
        out = render([b], ctx(Brand.PHYSIO_KONZEPT))
        assert "Legacy Headline" in out


# ── Wrapper de section ────────────────────────────────────────────────────

class TestSection:
    def test_defaults(self):
        s = resolve_section(None, FakeMedia())
        assert s.classes == ["cms-section", "cms-section--contained", "py-14"]
        assert s.style == "" and s.contained

    def test_full_width_padding(self):
        s = resolve_section({"layout": {"width": "full", "paddingY": "sm"}}, FakeMedia())
        assert "py-6" in s.classes and "px-4" in s.classes
        assert not s.contained

    def test_gradient_stops_sorted(self):
        g = GradientBackground.model_validate({
            "kind": "linear", "direction": "to right",
            "stops": [{"color": "#fff", "pos": 100}, {"color": "#000", "pos": 0}],
        })
        assert gradient_css(g) == "linear-gradient(to right, #000 0%, #fff 100%)"

    def test_gradient_needs_two_stops(self):
        g = GradientBackground.model_validate({"stops": [{"color": "#fff", "pos": 10}]})
        assert gradient_css(g) is None

    def test_radial_and_conic(self):
        stops = [{"color": "red", "pos": 0}, {"color": "blue", "pos": 50}]
        assert gradient_css(GradientBackground.model_validate({"kind": "radial", "stops": stops})) \
            == "radial-gradient(circle, red 0%, blue 50%)"
        assert gradient_css(GradientBackground.model_validate({"kind": "conic", "stops": stops})) \
            .startswith("conic-gradient(from 0deg, ")

    def test_image_background_with_overlay(self):
        s = resolve_section({"background": {
            "type": "image", "image": {"mediaId": "m1", "overlay": {"value": "#000", "opacity": 40}},
        }}, FakeMedia())
        assert "/media/m1.jpg" in s.layers
        assert "opacity:0.4" in s.layers

    def test_invalid_section_falls_back(self):
        s = resolve_section({"layout": {"width": "gigantic"}}, FakeMedia())
        assert "cms-section--contained" in s.classes

    def test_wrapper_style_rendered(self):
        b = block("text", section={"background": {"type": "color", "color": {"value": "#eeeeee"}}})
        out = render([b], ctx())
        assert 'style="background-color:#eeeeee"' in out


# ── Mode édition ──────────────────────────────────────────────────────────

class TestEditMode:
    def test_block_and_element_attributes(self):
        out = render([block("faq", "faq-1")], ctx(editable=True))
        assert 'data-block-id="faq-1"' in out
        assert 'data-element-id="faq.question.0"' in out
        assert 'data-cms-field="items.0.question"' in out

    def test_hooks_reported(self):
        seen = []
        render([block("text", "t1")], ctx(editable=True, on_select=seen.append))
        assert [(h.block_id, h.element_path, h.anchor) for h in seen] == [("t1", "content", "t1:content")]

    def test_one_hook_per_element(self):
        hooks = collect_hooks([block("faq", "f")], ctx())
        anchors = [h.anchor for h in hooks]
        assert len(anchors) == len(set(anchors))
        assert "f:items.4.answer" in anchors

    def test_hooks_sit_on_leaf_elements(self):
        out = render([block("cta", "c")], ctx(editable=True))
        # aucun élément éditable n'en contient un autre
        for m in re.finditer(r"<(\w+)[^>]*data-element-id=[^>]*>(.*?)</\1>", out, re.S):
            assert "data-element-id" not in m.group(2)

    def test_brand_content_paths(self):
        hooks = collect_hooks([block("hero", "h")], ctx(Brand.PHYSIO_KONZEPT))
        paths = {h.element_path for h in hooks}
        assert "brandContent.physio-konzept.headline" in paths
        assert "headline" not in paths


# ── Page complète ─────────────────────────────────────────────────────────

class TestRenderPage:
    def test_chrome_with_empty_content(self):
        out = render_page("Start", [], ctx())
        assert out.startswith("<!DOCTYPE html>")
        assert "Physiotherapie" in out
        assert '<main class="cms-page">' in out

    def test_konzept_body_class(self):
        out = render_page("Start", [], ctx(Brand.PHYSIO_KONZEPT))
        assert '<body class="physio-konzept">' in out

    def test_bridge_only_in_edit_mode(self):
        assert "cms.previewBridge" not in render_page("Start", [], ctx())
        out = render_page("Start", [], ctx(editable=True, page_id="p1"))
        assert "cms.previewBridge" in out
        assert "PREVIEW_SELECT" in out
        assert 'var PAGE_ID = "p1";' in out

    def test_title_escaped(self):
        assert "<title>A &amp; B | Physiotherapie</title>" in render_page("A & B", [], ctx())

    def test_public_page_has_no_editor_markup(self):
        out = render_page("Start", [block("faq")], ctx())
        assert "data-element-id" not in out
        assert "data-cms-field" not in out

    def test_edit_outline_only_in_edit_mode(self):
        out = render_page("Start", [block("faq")], ctx(editable=True, page_id="p1"))
        assert "[data-element-id]:hover" in out

    def test_theme_applied_to_chrome(self):
        out = render_page("Start", [], ctx())
        assert ":root{" in out
        assert "--primary: #0f766e !important;" in out

    def test_konzept_theme_scoped_to_brand_class(self):
        theme = resolve_theme(Brand.PHYSIO_KONZEPT, {"primary": "#123456"})
        out = render_page("Start", [], RenderContext(brand=Brand.PHYSIO_KONZEPT, theme=theme))
        assert ".physio-konzept{" in out
        assert "--primary: #123456 !important;" in out
