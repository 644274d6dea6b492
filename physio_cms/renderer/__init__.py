"""
Renderer — blocs + contexte de marque → HTML (public ou aperçu éditable).
"""
from .background import gradient_css, resolve_section
from .base import EditHook, RenderContext, Renderer
from .html import HtmlRenderer, bridge_script, collect_hooks, render, render_block, render_page

__all__ = [
    "gradient_css", "resolve_section",
    "EditHook", "RenderContext", "Renderer",
    "HtmlRenderer", "bridge_script", "collect_hooks", "render", "render_block", "render_page",
]
