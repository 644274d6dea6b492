"""
Renderer HTML — liste ordonnée de blocs → zone de contenu (fragment) ou page complète.

Dispatch par type via `_RENDERERS` (exhaustif sur BlockType, vérifié à l'import).
Mode édition : le wrapper de chaque bloc porte `data-block-id`, chaque élément
éditable rendu porte `data-element-id` / `data-cms-field` ; le script bridge
remonte le clic le plus profond à l'admin (postMessage).
"""
import html
import json
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic import ValidationError

from ..blocks import BlockType, element_id_for, find_editable_element, get_definition, is_known_type, resolve_block_type
from ..blocks.base import PanelProps
from ..blocks.card import CardProps
from ..blocks.contact_form import ContactFormProps
from ..blocks.cta import CtaProps
from ..blocks.faq import FaqProps
from ..blocks.feature_grid import FeatureGridProps
from ..blocks.gallery import GalleryProps
from ..blocks.hero import HeroBrandContent, HeroProps
from ..blocks.image_slider import ImageSliderProps, SliderControls
from ..blocks.image_text import ImageTextProps, ImageTextStyle
from ..blocks.opening_hours import OpeningHoursProps
from ..blocks.section import SectionBlockProps
from ..blocks.services_grid import ServicesGridProps
from ..blocks.team import TeamProps
from ..blocks.testimonials import TestimonialsProps
from ..blocks.text import TextProps
from ..config import BRAND_LABELS, Brand
from ..models import Block
from ..theme import filter_theme_tokens, theme_css_for_brand
from .background import resolve_section
from .base import EditHook, RenderContext

log = logging.getLogger(__name__)


# ── Helpers ─────────────────────────────────────────────────────────────────

def _e(value: Any) -> str:
    return "" if value is None else html.escape(str(value))


def _style(decl: Dict[str, Any]) -> str:
    body = ";".join(f"{k}:{v}" for k, v in decl.items() if v not in (None, ""))
    return f' style="{_e(body)}"' if body else ""


def _pick(*values: Optional[str], token: str = "foreground") -> str:
    """Première couleur explicite, sinon la variable de thème de la marque."""
    for v in values:
        if v:
            return v
    return f"var(--{token})"


class _Pass:
    """Un passage de rendu : contexte + hooks déjà émis (un hook par cible)."""

    def __init__(self, ctx: RenderContext):
        self.ctx = ctx
        self.hooks: Dict[str, EditHook] = {}

    def hook(self, b: Block, path: str) -> str:
        if not self.ctx.editable:
            return ""
        definition = find_editable_element(b.type, path, b.props)
        if definition is None:
            return ""
        anchor = f"{b.id}:{path}"
        if anchor not in self.hooks:
            h = EditHook(block_id=b.id, element_path=path, anchor=anchor)
            self.hooks[anchor] = h
            if self.ctx.on_select is not None:
                self.ctx.on_select(h)
        return (f' data-element-id="{_e(element_id_for(definition, path))}"'
                f' data-cms-field="{_e(path)}" data-cms-anchor="{_e(anchor)}"')

    def media(self, value: Any) -> Optional[str]:
        return self.ctx.media.resolve(value) if value else None

    def text(self, b: Block, path: str, value: Any, tag: str = "p", cls: str = "",
             style: Optional[Dict[str, Any]] = None) -> str:
        if value in (None, ""):
            return ""
        return f'<{tag} class="{cls}"{_style(style or {})}{self.hook(b, path)}>{_e(value)}</{tag}>'

    def link(self, b: Block, path: str, label: Any, href: Optional[str], cls: str,
             style: Optional[Dict[str, Any]] = None) -> str:
        if not label:
            return ""
        return f'<a class="{cls}" href="{_e(href or "#")}"{_style(style or {})}{self.hook(b, path)}>{_e(label)}</a>'

    def image(self, b: Block, path: str, value: Any, alt: Optional[str], cls: str) -> str:
        url = self.media(value)
        if not url:
            return ""
        return f'<img class="{cls}" src="{_e(url)}" alt="{_e(alt or "")}" loading="lazy"{self.hook(b, path)}>'


def _heading(b: Block, r: _Pass, p: Any, cls: str, eyebrow: bool = False) -> str:
    """En-tête commun (eyebrow / headline / subheadline) des blocs de liste."""
    parts = []
    if eyebrow:
        parts.append(r.text(b, "eyebrow", p.eyebrow, "span", f"{cls}__eyebrow",
                            {"color": _pick(getattr(p, "eyebrow_color", None), token="primary")}))
    parts.append(r.text(b, "headline", p.headline, "h2", f"{cls}__headline",
                        {"color": _pick(p.headline_color)}))
    parts.append(r.text(b, "subheadline", getattr(p, "subheadline", None), "p", f"{cls}__subheadline",
                        {"color": _pick(getattr(p, "subheadline_color", None), token="muted-foreground")}))
    inner = "".join(parts)
    return f'<header class="{cls}__header">{inner}</header>' if inner else ""


def _panel(p: PanelProps) -> Dict[str, Any]:
    mode = p.container_background_mode or "transparent"
    if mode == "color" and p.container_background_color:
        return {"background-color": p.container_background_color}
    if mode == "gradient" and p.container_gradient_from and p.container_gradient_to:
        stops = [p.container_gradient_from, p.container_gradient_via, p.container_gradient_to]
        angle = p.container_gradient_angle if p.container_gradient_angle is not None else 135
        return {"background-image": f"linear-gradient({angle:g}deg, {', '.join(s for s in stops if s)})"}
    return {}


def _panel_open(p: PanelProps, cls: str) -> str:
    border = f" {cls}__panel--bordered" if p.container_border else ""
    return f'<div class="{cls}__panel{border}"{_style(_panel(p))}>'


# ── Renderers par type ──────────────────────────────────────────────────────

def render_hero(b: Block, p: HeroProps, r: _Pass) -> str:
    brand = r.ctx.brand.value
    bc = (p.brand_content or {}).get(brand)
    # brandContent[marque] prime sur les props à plat historiques
    if bc is not None:
        pre, src = f"brandContent.{brand}.", bc
        image, image_path, alt = bc.image, f"{pre}image", bc.image_alt
    else:
        pre, src = "", p
        image = p.media_url if p.show_media is not False else None
        image_path, alt = "mediaUrl", p.headline
    c = bc or HeroBrandContent()

    badge = r.text(b, f"{pre}badgeText", src.badge_text, "span", "hero__badge",
                   {"color": _pick(c.badge_color, token="primary"), "background-color": c.badge_bg_color})
    headline = r.text(b, f"{pre}headline", src.headline, "h1", "hero__headline",
                      {"color": _pick(c.headline_color)})
    sub = r.text(b, f"{pre}subheadline", src.subheadline, "p", "hero__subheadline",
                 {"color": _pick(c.subheadline_color, token="muted-foreground")})

    actions = [r.link(b, f"{pre}ctaText", src.cta_text, src.cta_href, "btn btn--primary",
                      {"color": _pick(c.cta_color, token="primary-foreground"),
                       "background-color": _pick(c.cta_bg_color, token="primary")})]
    if bc is not None:
        actions.append(r.link(b, f"{pre}secondaryCtaText", bc.secondary_cta_text, bc.secondary_cta_href,
                              "btn btn--secondary"))
        if not src.cta_text:
            actions.extend(f'<a class="btn btn--{a.variant}" href="{_e(a.href or "#")}"'
                           f' data-action="{_e(a.action or "")}">{_e(a.label)}</a>'
                           for a in bc.actions or [] if a.label)
    actions_html = "".join(actions)

    trust = "".join(f'<li class="hero__trust-item"{r.hook(b, f"{pre}trustItems.{i}")}>{_e(t)}</li>'
                    for i, t in enumerate(src.trust_items or []) if t)
    trust_html = f'<ul class="hero__trust">{trust}</ul>' if trust else ""

    media_html = ""
    img = r.image(b, image_path, image, alt, "hero__image")
    if img:
        media_cls = " ".join(filter(None, [
            "hero__media",
            f"hero__media--{c.image_variant}" if c.image_variant else "",
            f"hero__media--fit-{c.image_fit}" if c.image_fit else "",
            f"hero__media--focus-{c.image_focus}" if c.image_focus else "",
        ]))
        floating = ""
        if src.floating_title or src.floating_value:
            floating = ('<div class="hero__floating">'
                        + r.text(b, f"{pre}floatingTitle", src.floating_title, "span", "hero__floating-title")
                        + r.text(b, f"{pre}floatingValue", src.floating_value, "strong", "hero__floating-value")
                        + r.text(b, f"{pre}floatingLabel", src.floating_label, "span", "hero__floating-label")
                        + "</div>")
        media_html = f'<div class="{media_cls}">{img}{floating}</div>'

    return f"""<div class="hero hero--{brand}">
  <div class="hero__content">{badge}{headline}{sub}<div class="hero__actions">{actions_html}</div>{trust_html}</div>
  {media_html}
</div>"""


def render_text(b: Block, p: TextProps, r: _Pass) -> str:
    classes = " ".join([
        "text-block",
        f"text-block--align-{p.alignment or 'left'}",
        f"text-block--w-{p.max_width or 'lg'}",
        f"text-block--size-{p.text_size or 'base'}",
    ])
    style = _style({"color": p.content_color, "--heading-color": p.heading_color, "--link-color": p.link_color})
    # Contenu HTML saisi dans l'éditeur riche : inséré tel quel
    return f'<div class="{classes}"{style}><div class="text-block__content"{r.hook(b, "content")}>{p.content}</div></div>'


def render_image_text(b: Block, p: ImageTextProps, r: _Pass) -> str:
    st = p.style or ImageTextStyle()
    classes = " ".join([
        "image-text",
        f"image-text--image-{p.image_position or 'left'}",
        f"image-text--valign-{st.vertical_align or 'center'}",
        f"image-text--align-{st.text_align or 'left'}",
        f"image-text--bg-{p.background or 'none'}",
    ])
    ratio = st.image_aspect_ratio or "4/3"
    img = r.image(b, "imageUrl", p.image_url, p.image_alt, "image-text__image")
    media = f'<div class="image-text__media" style="aspect-ratio:{_e(ratio)}">{img}</div>' if img else ""
    body = "".join([
        r.text(b, "eyebrow", p.eyebrow, "span", "image-text__eyebrow", {"color": "var(--primary)"}),
        r.text(b, "headline", p.headline, "h2", "image-text__headline", {"color": _pick(p.headline_color)}),
        r.text(b, "content", p.content, "p", "image-text__content",
               {"color": _pick(p.content_color, token="muted-foreground")}),
        r.link(b, "ctaText", p.cta_text, p.cta_href, "btn btn--primary", {
            "color": _pick(p.cta_text_color, token="primary-foreground"),
            "background-color": _pick(p.cta_bg_color, token="primary"),
            "border-color": p.cta_border_color,
        }),
    ])
    return (f'<div class="{classes}"{_style({"background-color": p.background_color})}>'
            f'{media}<div class="image-text__body">{body}</div></div>')


def render_feature_grid(b: Block, p: FeatureGridProps, r: _Pass) -> str:
    cards = []
    for i, f in enumerate(p.features):
        icon = ""
        if f.icon:
            icon = (f'<span class="feature__icon" data-icon="{_e(f.icon)}"'
                    f'{_style({"color": _pick(f.icon_color, p.icon_color, token="primary")})}'
                    f'{r.hook(b, f"features.{i}.icon")}></span>')
        style = {"background-color": _pick(f.card_bg_color, p.card_bg_color, token="card"),
                 "border-color": _pick(f.card_border_color, p.card_border_color, token="border")}
        cards.append(
            f'<article class="feature"{_style(style)}>{icon}'
            + r.text(b, f"features.{i}.title", f.title, "h3", "feature__title",
                     {"color": _pick(f.title_color, p.title_color)})
            + r.text(b, f"features.{i}.description", f.description, "p", "feature__description",
                     {"color": _pick(f.description_color, p.description_color, token="muted-foreground")})
            + "</article>"
        )
    return f'<div class="feature-grid feature-grid--cols-{p.columns or 3}">{"".join(cards)}</div>'


def render_cta(b: Block, p: CtaProps, r: _Pass) -> str:
    primary = r.link(b, "primaryCtaText", p.primary_cta_text, p.primary_cta_href, "btn btn--primary", {
        "color": _pick(p.primary_cta_text_color, token="primary-foreground"),
        "background-color": _pick(p.primary_cta_bg_color, token="primary"),
        "border-color": p.primary_cta_border_color,
        "border-radius": p.primary_cta_border_radius,
    })
    secondary = r.link(b, "secondaryCtaText", p.secondary_cta_text, p.secondary_cta_href, "btn btn--secondary", {
        "color": _pick(p.secondary_cta_text_color),
        "background-color": p.secondary_cta_bg_color,
    })
    return f"""<div class="cta cta--{p.variant or 'default'}"{_style({"background-color": _pick(p.background_color, token="muted")})}>
  <div class="cta__text">{r.text(b, "headline", p.headline, "h2", "cta__headline", {"color": _pick(p.headline_color)})}{r.text(b, "subheadline", p.subheadline, "p", "cta__subheadline", {"color": _pick(p.subheadline_color, token="muted-foreground")})}</div>
  <div class="cta__actions">{primary}{secondary}</div>
</div>"""


def render_section(b: Block, p: SectionBlockProps, r: _Pass) -> str:
    classes = " ".join(filter(None, [
        "section-block",
        f"section-block--align-{p.align or 'left'}",
        f"section-block--w-{p.max_width or 'lg'}",
        f"section-block--bg-{p.background or 'none'}",
        "section-block--glow" if p.enable_glow else "",
        "section-block--elevate" if p.enable_hover_elevation else "",
    ]))
    divider = ""
    if p.show_divider:
        divider = f'<hr class="section-block__divider"{_style({"border-color": _pick(p.divider_color, token="primary")})}>'
    paragraphs = "".join(f"<p>{_e(par.strip())}</p>" for par in p.content.split("\n\n") if par.strip())
    content = (f'<div class="section-block__content"'
               f'{_style({"color": _pick(p.content_color, token="muted-foreground")})}'
               f'{r.hook(b, "content")}>{paragraphs}</div>')
    ctas = ""
    if p.show_cta:
        ctas = ('<div class="section-block__actions">'
                + r.link(b, "ctaText", p.cta_text, p.cta_href, "btn btn--primary", {
                    "color": _pick(p.cta_text_color, token="primary-foreground"),
                    "background-color": _pick(p.cta_bg_color, token="primary")})
                + r.link(b, "secondaryCtaText", p.secondary_cta_text, p.secondary_cta_href, "btn btn--secondary")
                + "</div>")
    return (f'<div class="{classes}"{_style({"background-color": p.background_color})}>'
            + r.text(b, "eyebrow", p.eyebrow, "span", "section-block__eyebrow",
                     {"color": _pick(p.eyebrow_color, token="primary")})
            + r.text(b, "headline", p.headline, "h2", "section-block__headline", {"color": _pick(p.headline_color)})
            + r.text(b, "subheadline", p.subheadline, "p", "section-block__subheadline",
                     {"color": _pick(p.subheadline_color, token="muted-foreground")})
            + divider + content + ctas + "</div>")


def render_card(b: Block, p: CardProps, r: _Pass) -> str:
    action = ""
    if p.action_slot == "badge" and p.action_label:
        action = r.text(b, "actionLabel", p.action_label, "span", "card__badge")
    buttons = "".join(
        r.link(b, f"buttons.{i}.label", btn.label, None if btn.disabled else btn.href,
               f"btn btn--{btn.variant or 'default'} btn--{btn.size or 'default'}")
        for i, btn in enumerate(p.buttons or [])
    )
    header_cls = f"card__header card__header--{p.header_layout or 'stacked'}"
    return f"""<article class="card card--align-{p.align or 'left'}">
  <div class="{header_cls}">{r.text(b, "eyebrow", p.eyebrow, "span", "card__eyebrow", {"color": "var(--primary)"})}{r.text(b, "title", p.title, "h3", "card__title")}{action}</div>
  {r.text(b, "description", p.description, "p", "card__description", {"color": "var(--muted-foreground)"})}
  {r.text(b, "content", p.content, "div", "card__content")}
  <div class="card__footer card__footer--{p.footer_align or 'left'}">{buttons}</div>
</article>"""


def render_services_grid(b: Block, p: ServicesGridProps, r: _Pass) -> str:
    cards = []
    for i, c in enumerate(p.cards):
        icon_style = {"color": _pick(c.icon_color, p.icon_color, token="primary"), "background-color": p.icon_bg_color}
        card_style = {"background-color": _pick(c.card_bg_color, p.card_bg_color, token="card"),
                      "border-color": _pick(c.card_border_color, p.card_border_color, token="border")}
        cards.append(
            f'<article class="service-card"{_style(card_style)}>'
            f'<span class="service-card__icon" data-icon="{_e(c.icon)}"{_style(icon_style)}'
            f'{r.hook(b, f"cards.{i}.icon")}></span>'
            + r.text(b, f"cards.{i}.title", c.title, "h3", "service-card__title",
                     {"color": _pick(c.title_color, p.title_color)})
            + r.text(b, f"cards.{i}.text", c.text, "p", "service-card__text",
                     {"color": _pick(c.text_color, p.text_color, token="muted-foreground")})
            + r.link(b, f"cards.{i}.ctaText", c.cta_text, c.cta_href, "service-card__cta",
                     {"color": _pick(p.cta_color, token="primary")})
            + "</article>"
        )
    return (f'<div class="services-grid services-grid--bg-{p.background or "none"}">'
            f'{_heading(b, r, p, "services-grid")}'
            f'<div class="services-grid__cards services-grid__cards--cols-{p.columns or 3}">{"".join(cards)}</div></div>')


def render_faq(b: Block, p: FaqProps, r: _Pass) -> str:
    items = "".join(
        f'<details class="faq__item">'
        + r.text(b, f"items.{i}.question", it.question, "summary", "faq__question",
                 {"color": _pick(it.question_color, p.question_color)})
        + r.text(b, f"items.{i}.answer", it.answer, "div", "faq__answer",
                 {"color": _pick(it.answer_color, p.answer_color, token="muted-foreground")})
        + "</details>"
        for i, it in enumerate(p.items)
    )
    return (f'<div class="faq faq--{p.variant or "default"}">{_panel_open(p, "faq")}'
            + r.text(b, "headline", p.headline, "h2", "faq__headline", {"color": _pick(p.headline_color)})
            + f'<div class="faq__items">{items}</div></div></div>')


_SOCIAL_LABELS = {"linkedin": "LinkedIn", "instagram": "Instagram", "email": "E-Mail",
                  "website": "Website", "phone": "Telefon"}


def render_team(b: Block, p: TeamProps, r: _Pass) -> str:
    cards = []
    for i, m in enumerate(p.members):
        avatar = r.image(b, f"members.{i}.imageUrl", m.image_url, m.image_alt, "team-member__image")
        if not avatar:
            avatar = f'<div class="team-member__avatar"{_style({"background-image": m.avatar_gradient})}></div>'
        tags = "".join(f'<li class="team-member__tag">{_e(t)}</li>' for t in m.tags or [])
        socials = "".join(f'<a class="team-member__social" href="{_e(s.href)}">{_SOCIAL_LABELS[s.type]}</a>'
                          for s in m.socials or [])
        card_style = {"background-color": _pick(p.card_bg_color, token="card"),
                      "border-color": _pick(p.card_border_color, token="border")}
        cards.append(
            f'<article class="team-member team-member--fit-{m.avatar_fit or "cover"}"{_style(card_style)}>'
            + avatar
            + r.text(b, f"members.{i}.name", m.name, "h3", "team-member__name",
                     {"color": _pick(m.name_color, p.name_color)})
            + r.text(b, f"members.{i}.role", m.role, "p", "team-member__role",
                     {"color": _pick(m.role_color, p.role_color, token="primary")})
            + r.text(b, f"members.{i}.bio", m.bio, "p", "team-member__bio")
            + (f'<ul class="team-member__tags">{tags}</ul>' if tags else "")
            + (f'<div class="team-member__socials">{socials}</div>' if socials else "")
            + r.link(b, f"members.{i}.ctaText", m.cta_text, m.cta_href, "team-member__cta",
                     {"color": _pick(p.cta_color, token="primary")})
            + "</article>"
        )
    return (f'<div class="team team--{p.layout or "cards"} team--bg-{p.background or "none"}">'
            f'{_panel_open(p, "team")}{_heading(b, r, p, "team", eyebrow=True)}'
            f'<div class="team__members team__members--cols-{p.columns or 3}">{"".join(cards)}</div></div></div>')


_INPUT_TYPES = {"name": "text", "email": "email", "phone": "tel", "subject": "text"}


def render_contact_form(b: Block, p: ContactFormProps, r: _Pass) -> str:
    label_style = {"color": _pick(p.label_color)}
    input_style = _style({"background-color": p.input_bg_color, "border-color": _pick(p.input_border_color, token="input")})
    fields = []
    for i, f in enumerate(p.fields):
        name = _e(f.type)
        req = " required" if f.required else ""
        ph = f' placeholder="{_e(f.placeholder)}"' if f.placeholder else ""
        if f.type == "message":
            control = f'<textarea id="cf-{_e(b.id)}-{i}" name="{name}" rows="5"{ph}{req}{input_style}></textarea>'
        else:
            control = f'<input id="cf-{_e(b.id)}-{i}" type="{_INPUT_TYPES[f.type]}" name="{name}"{ph}{req}{input_style}>'
        label = (f'<label for="cf-{_e(b.id)}-{i}" class="contact-form__label"{_style(label_style)}'
                 f'{r.hook(b, f"fields.{i}.label")}>{_e(f.label)}{" *" if f.required else ""}</label>')
        fields.append(f'<div class="contact-form__field contact-form__field--{name}">{label}{control}</div>')

    consent = ""
    if p.require_consent:
        consent = (f'<label class="contact-form__consent"><input type="checkbox" name="consent" required>'
                   f'<span{r.hook(b, "consentLabel")}>{_e(p.consent_label or "")}</span></label>')
    privacy = (f'<p class="contact-form__privacy">'
               f'<span{r.hook(b, "privacyText")}>{_e(p.privacy_text)}</span> '
               f'{r.link(b, "privacyLink.label", p.privacy_link.label, p.privacy_link.href, "contact-form__privacy-link")}</p>')
    submit = (f'<button type="submit" class="btn btn--primary"'
              f'{_style({"color": _pick(p.button_text_color, token="primary-foreground"), "background-color": _pick(p.button_bg_color, token="primary")})}'
              f'{r.hook(b, "submitLabel")}>{_e(p.submit_label)}</button>')
    # Le destinataire reste côté serveur : le formulaire ne transmet que page et bloc
    hidden = f'<input type="hidden" name="blockId" value="{_e(b.id)}">'
    if r.ctx.page_id:
        hidden += f'<input type="hidden" name="pageId" value="{_e(r.ctx.page_id)}">'
    honeypot = '<input type="text" name="website" class="contact-form__hp" tabindex="-1" autocomplete="off" hidden>'
    return f"""<div class="contact-form contact-form--{p.layout or 'stack'}">
  <div class="contact-form__intro">{r.text(b, "heading", p.heading, "h2", "contact-form__heading", {"color": _pick(p.heading_color)})}{r.text(b, "text", p.text, "p", "contact-form__text", {"color": _pick(p.text_color, token="muted-foreground")})}</div>
  <form class="contact-form__form" method="post" action="/api/contact" data-brand="{r.ctx.brand.value}">
    {hidden}{honeypot}{"".join(fields)}{consent}{privacy}{submit}
    <div class="contact-form__success" role="status" hidden><strong>{_e(p.success_title)}</strong><p>{_e(p.success_text)}</p></div>
    <div class="contact-form__error" role="alert" hidden>{_e(p.error_text)}</div>
  </form>
</div>"""


def render_testimonials(b: Block, p: TestimonialsProps, r: _Pass) -> str:
    items = []
    for i, t in enumerate(p.items):
        stars = ""
        if t.rating:
            stars = (f'<div class="testimonial__rating" aria-label="{t.rating} von 5"'
                     f'{r.hook(b, f"items.{i}.rating")}>{"★" * t.rating}{"☆" * (5 - t.rating)}</div>')
        avatar = r.image(b, f"items.{i}.avatar", t.avatar, t.name, "testimonial__avatar")
        items.append(
            f'<figure class="testimonial">{stars}'
            + r.text(b, f"items.{i}.quote", t.quote, "blockquote", "testimonial__quote",
                     {"color": _pick(t.quote_color, p.quote_color)})
            + f'<figcaption class="testimonial__author">{avatar}'
            + r.text(b, f"items.{i}.name", t.name, "strong", "testimonial__name",
                     {"color": _pick(t.name_color, p.name_color)})
            + r.text(b, f"items.{i}.role", t.role, "span", "testimonial__role",
                     {"color": _pick(t.role_color, p.role_color, token="muted-foreground")})
            + "</figcaption></figure>"
        )
    return (f'<div class="testimonials testimonials--{p.variant or "grid"} testimonials--bg-{p.background or "none"}">'
            f'{_heading(b, r, p, "testimonials")}'
            f'<div class="testimonials__items testimonials__items--cols-{p.columns or 3}">{"".join(items)}</div></div>')


def render_gallery(b: Block, p: GalleryProps, r: _Pass) -> str:
    show_captions = p.show_captions is not False
    figures = []
    for i, img in enumerate(p.images):
        tag = r.image(b, f"images.{i}.url", img.url, img.alt, "gallery__image")
        if img.link and tag:
            tag = f'<a href="{_e(img.link)}">{tag}</a>'
        caption = ""
        if show_captions and img.caption:
            caption = r.text(b, f"images.{i}.caption", img.caption, "figcaption", "gallery__caption",
                             {"color": _pick(img.caption_color, p.caption_color, token="muted-foreground")})
        figures.append(f'<figure class="gallery__item">{tag}{caption}</figure>')
    classes = " ".join([
        "gallery",
        f"gallery--{p.layout or 'grid'}",
        f"gallery--gap-{p.gap or 'md'}",
        f"gallery--radius-{p.image_radius or 'lg'}",
        f"gallery--ratio-{p.aspect_ratio or 'auto'}",
        f"gallery--hover-{p.hover_effect or 'none'}",
        f"gallery--captions-{p.caption_style or 'below'}",
    ])
    lightbox = ' data-lightbox="true"' if p.lightbox else ""
    return (f'<div class="{classes}"{lightbox}>{_panel_open(p, "gallery")}{_heading(b, r, p, "gallery")}'
            f'<div class="gallery__items gallery__items--cols-{p.columns or 3}">{"".join(figures)}</div></div></div>')


def render_opening_hours(b: Block, p: OpeningHoursProps, r: _Pass) -> str:
    rows = "".join(
        '<div class="opening-hours__row">'
        + r.text(b, f"hours.{i}.label", h.label, "dt", "opening-hours__label",
                 {"color": _pick(h.label_color, p.label_color)})
        + r.text(b, f"hours.{i}.value", h.value, "dd", "opening-hours__value",
                 {"color": _pick(h.value_color, p.value_color, token="muted-foreground")})
        + "</div>"
        for i, h in enumerate(p.hours)
    )
    card_style = {"background-color": _pick(p.card_bg_color, token="card"),
                  "border-color": _pick(p.card_border_color, token="border")}
    return (f'<div class="opening-hours opening-hours--{p.layout or "twoColumn"} opening-hours--bg-{p.background or "none"}">'
            f'{_heading(b, r, p, "opening-hours")}'
            f'<dl class="opening-hours__card"{_style(card_style)}>{rows}</dl>'
            + r.text(b, "note", p.note, "p", "opening-hours__note", {"color": _pick(p.note_color, token="muted-foreground")})
            + "</div>")


def render_image_slider(b: Block, p: ImageSliderProps, r: _Pass) -> str:
    ctrl = p.controls or SliderControls()
    slides = []
    for i, s in enumerate(p.slides):
        img = r.image(b, f"slides.{i}.url", s.url, s.alt, "image-slider__image")
        focal = _style({"object-position": f"{s.focal_point.x * 100:g}% {s.focal_point.y * 100:g}%"}) if s.focal_point else ""
        caption = (r.text(b, f"slides.{i}.title", s.title, "h3", "image-slider__title",
                          {"color": _pick(s.title_color, p.slide_title_color)})
                   + r.text(b, f"slides.{i}.text", s.text, "p", "image-slider__text",
                            {"color": _pick(s.text_color, p.slide_text_color, token="muted-foreground")}))
        body = f'<div class="image-slider__media"{focal}>{img}</div>'
        if caption:
            body += f'<div class="image-slider__caption">{caption}</div>'
        if s.link:
            body = f'<a class="image-slider__link" href="{_e(s.link)}">{body}</a>'
        slides.append(f'<li class="image-slider__slide" aria-roledescription="slide" '
                      f'aria-label="{i + 1} / {len(p.slides)}">{body}</li>')

    controls = ""
    if ctrl.show_arrows:
        controls += ('<button type="button" class="image-slider__prev" aria-label="Zurück">‹</button>'
                     '<button type="button" class="image-slider__next" aria-label="Weiter">›</button>')
    if ctrl.show_dots:
        controls += '<div class="image-slider__dots">' + "".join(
            f'<button type="button" class="image-slider__dot" aria-label="Slide {i + 1}"></button>'
            for i in range(len(p.slides))) + "</div>"
    if ctrl.show_progress and p.variant == "progress":
        controls += '<div class="image-slider__progress"></div>'

    spv = p.slides_per_view
    data = " ".join([
        f'data-loop="{str(p.loop).lower()}"',
        f'data-autoplay="{str(p.autoplay).lower()}"',
        f'data-autoplay-delay="{p.autoplay_delay_ms}"',
        f'data-pause-on-hover="{str(p.pause_on_hover).lower()}"',
        f'data-per-view="{spv.base},{spv.md},{spv.lg}"' if spv else "",
    ])
    border = " image-slider--bordered" if p.container_border else ""
    return (f'<div class="image-slider image-slider--{p.variant} image-slider--{p.aspect}'
            f' image-slider--bg-{p.background}{border}" aria-roledescription="carousel"'
            f' aria-label="{_e(p.aria_label or p.headline or "Bilder")}" {data}>'
            f'{_heading(b, r, p, "image-slider", eyebrow=True)}'
            f'<ul class="image-slider__track">{"".join(slides)}</ul>{controls}</div>')


_RENDERERS: Dict[BlockType, Callable[[Block, Any, _Pass], str]] = {
    BlockType.HERO:          render_hero,
    BlockType.TEXT:          render_text,
    BlockType.IMAGE_TEXT:    render_image_text,
    BlockType.FEATURE_GRID:  render_feature_grid,
    BlockType.CTA:           render_cta,
    BlockType.SECTION:       render_section,
    BlockType.CARD:          render_card,
    BlockType.SERVICES_GRID: render_services_grid,
    BlockType.FAQ:           render_faq,
    BlockType.TEAM:          render_team,
    BlockType.CONTACT_FORM:  render_contact_form,
    BlockType.TESTIMONIALS:  render_testimonials,
    BlockType.GALLERY:       render_gallery,
    BlockType.OPENING_HOURS: render_opening_hours,
    BlockType.IMAGE_SLIDER:  render_image_slider,
}

_missing = set(BlockType) - set(_RENDERERS)
if _missing:
    raise RuntimeError(f"Types sans renderer : {sorted(t.value for t in _missing)}")


# ── Bloc + wrapper de section ───────────────────────────────────────────────

def render_block(b: Block, r: _Pass) -> str:
    if not is_known_type(b.type):
        log.warning("Bloc %s non rendu : type inconnu %r", b.id, b.type)
        return ""
    bt = resolve_block_type(b.type)
    try:
        props = get_definition(bt).props_model.model_validate(b.props)
    except ValidationError as e:
        log.warning("Bloc %s (%s) non rendu : %d erreur(s) de props", b.id, bt.value, e.error_count())
        return ""

    inner = _RENDERERS[bt](b, props, r)
    sec = resolve_section(b.props.get("section"), r.ctx.media)
    classes = " ".join(["cms-block", f"cms-block--{bt.value}", *sec.classes])
    block_attr = f' data-block-id="{_e(b.id)}" data-block-type="{bt.value}"' if r.ctx.editable else ""
    style = f' style="{_e(sec.style)}"' if sec.style else ""
    body = f'<div class="cms-container">{inner}</div>' if sec.contained else inner
    return f'<section id="block-{_e(b.id)}" class="{classes}"{style}{block_attr}>{sec.layers}{body}</section>'


# ── Points d'entrée publics ─────────────────────────────────────────────────

def render(blocks: Sequence[Block], ctx: RenderContext) -> str:
    """Zone de contenu : blocs dans l'ordre reçu, tokens du thème en variables CSS."""
    r = _Pass(ctx)
    parts = [html_ for html_ in (render_block(b, r) for b in blocks) if html_]
    theme = _style(filter_theme_tokens(ctx.theme))
    return f'<div class="cms-blocks cms-blocks--{ctx.brand.value}"{theme}>\n' + "\n".join(parts) + "\n</div>"


class HtmlRenderer:
    """Implémentation par défaut du protocole Renderer."""

    def render(self, blocks: Sequence[Block], ctx: RenderContext) -> str:
        return render(blocks, ctx)


_BRIDGE_JS = """(function () {
  var PAGE_ID = __PAGE_ID__;
  var NS = "cms.previewBridge";
  var last = null;
  function envelope(type, payload) {
    return {v: 1, ns: NS, type: type, pageId: PAGE_ID, payload: payload,
            requestId: Math.random().toString(36).slice(2), timestamp: Date.now(), source: "preview"};
  }
  function send(msg) { if (window.parent && window.parent !== window) window.parent.postMessage(msg, "*"); }
  document.addEventListener("click", function (e) {
    var target = e.target.closest("[data-element-id],[data-block-id]");
    if (!target) return;
    var blockEl = target.closest("[data-block-id]");
    if (!blockEl) return;
    e.preventDefault();
    e.stopPropagation();
    var elementEl = target.hasAttribute("data-element-id") ? target : null;
    var blockId = blockEl.getAttribute("data-block-id");
    var elementId = elementEl ? elementEl.getAttribute("data-element-id") : null;
    var key = blockId + "|" + elementId;
    if (key === last) return;
    last = key;
    send(envelope("PREVIEW_SELECT", {
      blockId: blockId,
      elementId: elementId,
      elementPath: elementEl ? elementEl.getAttribute("data-cms-field") : null,
      mode: elementId ? "element" : "block"
    }));
  }, true);
  send(envelope("PREVIEW_READY", {capabilities: ["select"]}));
})();"""


def bridge_script(page_id: Optional[str]) -> str:
    return _BRIDGE_JS.replace("__PAGE_ID__", json.dumps(page_id))


_BASE_CSS = """
*{box-sizing:border-box}body{margin:0;font-family:system-ui,sans-serif;background:var(--background);color:var(--foreground)}
.cms-container{max-width:1200px;margin:0 auto;padding:0 1rem}.cms-section{position:relative}
.cms-section__image,.cms-section__overlay,.cms-section__video{position:absolute;inset:0;z-index:0}
.cms-section__video{width:100%;height:100%;object-fit:cover}.cms-section--layered>*:not(.cms-section__image):not(.cms-section__overlay):not(.cms-section__video){position:relative;z-index:1}
.btn{display:inline-block;padding:.75rem 1.5rem;border-radius:var(--radius);text-decoration:none;border:1px solid transparent}
.site-header,.site-footer{padding:1rem;border-color:var(--border)}
"""

# Aperçu seulement : contour des éléments cliquables
_EDIT_CSS = """
[data-element-id]:hover{outline:2px dashed var(--primary);outline-offset:2px;cursor:pointer}
"""


def render_page(title: str, blocks: Sequence[Block], ctx: RenderContext, description: str = "") -> str:
    """Page complète : chrome de la marque + zone de contenu (+ bridge d'aperçu en mode édition)."""
    content = render(blocks, ctx)
    label = BRAND_LABELS[ctx.brand]
    home = "/konzept/" if ctx.brand is Brand.PHYSIO_KONZEPT else "/"
    body_class = "physio-konzept" if ctx.brand is Brand.PHYSIO_KONZEPT else "physiotherapy"
    meta = f'<meta name="description" content="{_e(description)}">' if description else ""
    bridge = f"<script>{bridge_script(ctx.page_id)}</script>" if ctx.editable else ""
    edit_css = _EDIT_CSS if ctx.editable else ""
    theme_css = theme_css_for_brand(ctx.brand, ctx.theme)
    return f"""<!DOCTYPE html>
<html lang="de">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_e(title)} | {label}</title>
  {meta}
  <style>{theme_css}{_BASE_CSS}{edit_css}</style>
</head>
<body class="{body_class}">
<header class="site-header"><a class="site-header__brand" href="{home}">{label}</a></header>
<main class="cms-page">
{content}
</main>
<footer class="site-footer">© {label}</footer>
{bridge}
</body>
</html>"""


def collect_hooks(blocks: Sequence[Block], ctx: RenderContext) -> List[EditHook]:
    """Hooks qu'un rendu éditable émettrait, sans garder le HTML (inspecteur admin)."""
    hooks: List[EditHook] = []
    probe = ctx.model_copy(update={"editable": True, "on_select": hooks.append})
    render(blocks, probe)
    return hooks
