"""
Thème — whitelist des variables CSS injectables depuis la base + CSS par marque.

Les valeurs des tokens restent opaques : elles ne sont jamais interprétées,
seulement filtrées (clé autorisée, pas de caractère qui sort de la déclaration).
"""
import logging
from typing import Any, Dict, Optional

from .config import Brand, normalize_brand

log = logging.getLogger(__name__)

ALLOWED_THEME_TOKENS = (
    "--background", "--foreground",
    "--card", "--card-foreground",
    "--popover", "--popover-foreground",
    "--primary", "--primary-foreground",
    "--secondary", "--secondary-foreground",
    "--muted", "--muted-foreground",
    "--accent", "--accent-foreground",
    "--destructive", "--destructive-foreground",
    "--border", "--input", "--ring",
    "--chart-1", "--chart-2", "--chart-3", "--chart-4", "--chart-5",
    "--radius",
    "--sidebar", "--sidebar-foreground",
    "--sidebar-primary", "--sidebar-primary-foreground",
    "--sidebar-accent", "--sidebar-accent-foreground",
    "--sidebar-border", "--sidebar-ring",
    "--hero-bg", "--hero-accent", "--hero-highlight",
)

_FORBIDDEN = (";", "{", "}", "\n")

# Base par marque ; un preset partiel ne surcharge que ses propres clés
BRAND_DEFAULT_TOKENS: Dict[Brand, Dict[str, str]] = {
    Brand.PHYSIOTHERAPY: {
        "--primary": "#0f766e", "--primary-foreground": "#ffffff",
        "--background": "#ffffff", "--foreground": "#1f2937",
        "--muted": "#f1f5f9", "--muted-foreground": "#64748b",
        "--accent": "#99f6e4", "--border": "#e2e8f0", "--radius": "0.75rem",
    },
    Brand.PHYSIO_KONZEPT: {
        "--primary": "#f97316", "--primary-foreground": "#0a0a0a",
        "--background": "#0a0a0a", "--foreground": "#fafafa",
        "--muted": "#171717", "--muted-foreground": "#a3a3a3",
        "--accent": "#fb923c", "--border": "#262626", "--radius": "0.5rem",
    },
}

BRAND_SELECTORS = {
    Brand.PHYSIOTHERAPY:  ":root",
    Brand.PHYSIO_KONZEPT: ".physio-konzept",
}


def _normalize_key(key: str) -> Optional[str]:
    k = key if key.startswith("--") else f"--{key}"
    return k if k in ALLOWED_THEME_TOKENS else None


def _sanitize_value(value: str) -> Optional[str]:
    v = value.strip()
    if not v or any(c in v for c in _FORBIDDEN):
        return None
    return v


def filter_theme_tokens(tokens: Any) -> Dict[str, str]:
    """Garde les clés whitelistées (« primary » → « --primary ») aux valeurs texte sûres."""
    if not isinstance(tokens, dict):
        return {}
    out = {}
    for raw_key, raw_value in tokens.items():
        key = _normalize_key(str(raw_key))
        if key is None or not isinstance(raw_value, str):
            continue
        value = _sanitize_value(raw_value)
        if value is None:
            log.warning("Token %s rejeté : valeur non sûre", key)
            continue
        out[key] = value
    return out


def tokens_to_css(selector: str, tokens: Dict[str, str]) -> str:
    # !important : le preset gagne quel que soit l'ordre des feuilles
    body = "".join(f"{k}: {v} !important;" for k, v in tokens.items() if v)
    return f"{selector}{{{body}}}" if body else ""


def theme_css_for_brand(brand: Any, tokens: Any) -> str:
    b = normalize_brand(brand) or Brand.PHYSIOTHERAPY
    return tokens_to_css(BRAND_SELECTORS[b], filter_theme_tokens(tokens))


def resolve_theme(brand: Any, preset_tokens: Any = None) -> Dict[str, str]:
    """Tokens complets d'une marque : défauts de la marque puis preset actif filtré."""
    b = normalize_brand(brand) or Brand.PHYSIOTHERAPY
    return {**BRAND_DEFAULT_TOKENS[b], **filter_theme_tokens(preset_tokens or {})}
