"""Descritores por tipo de formulário.

Uso:
    from app.forms import get_form

    descriptor = get_form(FormType.CONTACT)
"""

from __future__ import annotations

from app.domain.submission import FormType
from app.forms.base import Confirmation, FormDescriptor
from app.forms.contact import ContactForm
from app.forms.order import OrderWebhookForm
from app.forms.quote import QuoteForm, QuoteWebhookForm

FORMS: dict[FormType, FormDescriptor] = {
    FormType.CONTACT: ContactForm(),
    FormType.QUOTE: QuoteForm(),
    FormType.ORDER_WEBHOOK: OrderWebhookForm(),
    FormType.QUOTE_WEBHOOK: QuoteWebhookForm(),
}


def get_form(form_type: FormType) -> FormDescriptor:
    return FORMS[form_type]


__all__ = [
    "FORMS",
    "Confirmation",
    "ContactForm",
    "FormDescriptor",
    "OrderWebhookForm",
    "QuoteForm",
    "QuoteWebhookForm",
    "get_form",
]
