"""Bloc FAQ — accordéon questions / réponses."""
from typing import List, Literal, Optional

from pydantic import Field

from .base import PANEL_DEFAULTS, ListItem, PanelProps, new_id
from .elements import el, item_el


class FaqItem(ListItem):
    question:       str
    answer:         str
    question_color: Optional[str] = None
    answer_color:   Optional[str] = None


class FaqProps(PanelProps):
    headline:       Optional[str] = None
    headline_color: Optional[str] = None
    question_color: Optional[str] = None
    answer_color:   Optional[str] = None
    variant:        Optional[Literal["default", "soft"]] = None
    items:          List[FaqItem] = Field(min_length=1, max_length=20)


def create_faq_item() -> dict:
    return {"id": new_id(), "question": "Neue Frage?", "answer": "Antwort hier eingeben..."}


_ITEMS = [
    ("Wie lange dauert eine Behandlung?",
     "Eine Behandlungseinheit dauert in der Regel 30-60 Minuten, abhängig von der Art der Therapie "
     "und Ihren individuellen Bedürfnissen."),
    ("Werden die Kosten von der Krankenkasse übernommen?",
     "Ja, wir arbeiten mit allen gesetzlichen und privaten Krankenkassen zusammen. Die Kostenübernahme "
     "hängt von Ihrer Versicherung und der Art der Behandlung ab."),
    ("Brauche ich eine Überweisung vom Arzt?",
     "Für die meisten Behandlungen benötigen Sie eine ärztliche Verordnung. Bei privaten Behandlungen "
     "ist keine Überweisung erforderlich."),
    ("Wie kann ich einen Termin vereinbaren?",
     "Sie können einen Termin telefonisch, per E-Mail oder über unser Online-Buchungssystem vereinbaren."),
    ("Was sollte ich zum ersten Termin mitbringen?",
     "Bitte bringen Sie Ihre Versichertenkarte, einen gültigen Ausweis und, falls vorhanden, ärztliche "
     "Befunde oder Verordnungen mit."),
]


def defaults() -> dict:
    return {
        "headline": "Häufige Fragen",
        "variant": "default",
        **PANEL_DEFAULTS,
        "items": [{"id": new_id(), "question": q, "answer": a} for q, a in _ITEMS],
    }


ELEMENTS = [
    el("faq.headline", "Headline", "headline", typo=True),
    item_el("faq.question", "Frage",   "items", "question"),
    item_el("faq.answer",   "Antwort", "items", "answer"),
    el("faq.variant",       "Variante",          "variant",       group="Layout"),
    el("faq.headlineColor", "Überschrift Farbe", "headlineColor", group="Design"),
    el("faq.questionColor", "Frage Farbe",       "questionColor", group="Design"),
    el("faq.answerColor",   "Antwort Farbe",     "answerColor",   group="Design"),
]
