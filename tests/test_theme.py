"""
Tests du thème — whitelist des tokens, CSS par marque, normalisation des marques.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from physio_cms.config import Brand, normalize_brand
from physio_cms.theme import (ALLOWED_THEME_TOKENS, BRAND_DEFAULT_TOKENS, filter_theme_tokens, resolve_theme,
                              theme_css_for_brand, tokens_to_css)


class TestFilterTokens:
    def test_key_normalized(self):
        assert filter_theme_tokens({"primary": "#0f766e"}) == {"--primary": "#0f766e"}

    def test_unknown_key_dropped(self):
        assert filter_theme_tokens({"--font-body": "Inter", "--radius": "1rem"}) == {"--radius": "1rem"}

    def test_unsafe_values_dropped(self):
        tokens = {"--primary": "red; } body { display:none", "--accent": "blue{", "--muted": "a\nb", "--ring": "  "}
        assert filter_theme_tokens(tokens) == {}

    def test_non_string_values_dropped(self):
        assert filter_theme_tokens({"--primary": 12, "--accent": None}) == {}

    def test_not_a_dict(self):
        assert filter_theme_tokens(["--primary"]) == {}

    def test_whitelist_size(self):
        assert len(ALLOWED_THEME_TOKENS) == 36


class TestCss:
    def test_tokens_to_css(self):
        assert tokens_to_css(":root", {"--primary": "#000"}) == ":root{--primary: #000 !important;}"

    def test_empty(self):
        assert tokens_to_css(":root", {}) == ""

    def test_brand_selector(self):
        assert theme_css_for_brand("physio-konzept", {"primary": "#f97316"}).startswith(".physio-konzept{")
        assert theme_css_for_brand("konzept", {"primary": "#f97316"}).startswith(".physio-konzept{")
        assert theme_css_for_brand(None, {"primary": "#000"}).startswith(":root{")


class TestResolveTheme:
    def test_defaults_per_brand(self):
        assert resolve_theme(Brand.PHYSIO_KONZEPT) == BRAND_DEFAULT_TOKENS[Brand.PHYSIO_KONZEPT]

    def test_preset_overrides_only_its_keys(self):
        theme = resolve_theme("physiotherapy", {"primary": "#111111", "bogus": "x"})
        assert theme["--primary"] == "#111111"
        assert theme["--background"] == BRAND_DEFAULT_TOKENS[Brand.PHYSIOTHERAPY]["--background"]
        assert "bogus" not in theme and "--bogus" not in theme


class TestBrands:
    def test_legacy_values(self):
        assert normalize_brand("physio") is Brand.PHYSIOTHERAPY
        assert normalize_brand("konzept") is Brand.PHYSIO_KONZEPT

    def test_current_values(self):
        assert normalize_brand("physio-konzept") is Brand.PHYSIO_KONZEPT

    def test_unknown(self):
        assert normalize_brand("fitness") is None
        assert normalize_brand("") is None
