"""Bloc Contact Form — formulaire de contact, destinataire par marque."""
from typing import Dict, List, Literal, Optional

from pydantic import Field

from .base import BlockProps, CmsModel, ListItem, new_id
from .elements import el, item_el

FieldType = Literal["name", "email", "phone", "subject", "message"]


class ContactField(ListItem):
    type:        FieldType
    label:       str
    placeholder: Optional[str] = None
    required:    bool


class PrivacyLink(CmsModel):
    label: str
    href:  str


class ContactFormProps(BlockProps):
    heading:               str
    text:                  Optional[str] = None
    heading_color:         Optional[str] = None
    text_color:            Optional[str] = None
    label_color:           Optional[str] = None
    input_bg_color:        Optional[str] = None
    input_border_color:    Optional[str] = None
    button_text_color:     Optional[str] = None
    button_bg_color:       Optional[str] = None
    recipients:            Optional[Dict[Literal["physiotherapy", "physio-konzept"], str]] = None
    fields:                List[ContactField] = Field(min_length=1)
    submit_label:          str
    success_title:         str
    success_text:          str
    error_text:            str
    privacy_text:          str
    privacy_link:          PrivacyLink
    require_consent:       bool = False
    consent_label:         Optional[str] = None
    consent_required_text: Optional[str] = None
    layout:                Optional[Literal["stack", "split"]] = None
    button_preset:         Optional[str] = None


_FIELD_DEFAULTS = {
    "name":    ("Name", "Ihr Name", True),
    "email":   ("E-Mail", "ihre@email.de", True),
    "phone":   ("Telefon", "Optional", False),
    "subject": ("Betreff", "Betreff", False),
    "message": ("Nachricht", "Ihre Nachricht...", True),
}


def create_contact_field(type: str = "subject") -> dict:
    label, placeholder, required = _FIELD_DEFAULTS[type]
    return {"id": new_id(), "type": type, "label": label, "placeholder": placeholder, "required": required}


def defaults() -> dict:
    return {
        "heading": "Kontaktieren Sie uns",
        "text": "Wir freuen uns auf Ihre Nachricht und melden uns schnellstmöglich zurück.",
        "recipients": {
            "physiotherapy": "info@physiotherapie-kroll.de",
            "physio-konzept": "info@physio-konzept.de",
        },
        "fields": [create_contact_field(t) for t in ("name", "email", "phone", "message")],
        "submitLabel": "Nachricht senden",
        "successTitle": "Nachricht gesendet",
        "successText": "Vielen Dank für Ihre Nachricht. Wir melden uns schnellstmöglich bei Ihnen zurück.",
        "errorText": "Es ist ein Fehler aufgetreten. Bitte versuchen Sie es später erneut "
                     "oder kontaktieren Sie uns direkt per E-Mail.",
        "privacyText": "Wir verwenden Ihre Angaben zur Bearbeitung Ihrer Anfrage. "
                       "Weitere Informationen finden Sie in der Datenschutzerklärung.",
        "privacyLink": {"label": "Datenschutzerklärung", "href": "/datenschutz"},
        "requireConsent": False,
        "consentLabel": "Ich akzeptiere die Datenschutzerklärung",
        "layout": "stack",
    }


ELEMENTS = [
    el("contactForm.heading",      "Überschrift",      "heading",      typo=True),
    el("contactForm.text",         "Intro-Text",       "text",         typo=True),
    el("contactForm.submit",       "Button-Text",      "submitLabel",  typo=True),
    el("contactForm.privacyText",  "Datenschutz-Text", "privacyText"),
    el("contactForm.privacyLabel", "Datenschutz-Link", "privacyLink.label"),
    el("contactForm.privacyHref",  "Datenschutz-Link URL", "privacyLink.href"),
    el("contactForm.consentLabel", "Zustimmungs-Text", "consentLabel"),
    el("contactForm.requireConsent", "Zustimmung erforderlich", "requireConsent", group="Einstellungen"),
    el("contactForm.successTitle", "Erfolgs-Titel",    "successTitle",  group="Meldungen"),
    el("contactForm.successText",  "Erfolgs-Nachricht", "successText",  group="Meldungen"),
    el("contactForm.errorText",    "Fehler-Nachricht", "errorText",     group="Meldungen"),
    el("contactForm.recipient",    "Empfänger",        "recipients.{brand}", group="Einstellungen"),
    item_el("contactForm.field.label",       "Feld Label",       "fields", "label"),
    item_el("contactForm.field.placeholder", "Feld Platzhalter", "fields", "placeholder", typo=False),
    item_el("contactForm.field.required",    "Feld Pflicht",     "fields", "required", typo=False),
    el("contactForm.layout",       "Layout",           "layout",        group="Layout"),
]
