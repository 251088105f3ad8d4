"""Pedido de orçamento (formulário do site e webhook assinado).

Os dois compartilham campos e validação; o webhook não tem canal
secundário e exige destino primário configurado.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from app.domain.submission import FormType, Invalid, SubmissionRecord, Valid
from app.forms.base import Confirmation, FormDescriptor, embed_field
from app.forms.emails import render_quote_confirmation
from app.protocols.models import ChatEmbed, EmailAddress
from app.services.sanitizer import (
    coerce_quantity,
    sanitize_email,
    sanitize_phone,
    sanitize_string,
)
from app.services.validation import check_choice, find_missing_fields, missing_fields_error
from config.settings import QUOTE_EMBED_COLOR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.submission import ValidationResult
    from app.protocols.models import EmbedField

SERVICE_LABELS: Final[dict[str, str]] = {
    "3d-printing": "3D Printing",
    "dtf-transfers": "DTF Transfers",
    "laser-services": "Laser Services",
    "sublimation": "Sublimation",
}

TIMELINE_LABELS: Final[dict[str, str]] = {
    "rush": "Rush (3-5 days)",
    "standard": "Standard (1-2 weeks)",
    "flexible": "Flexible (2+ weeks)",
    "ongoing": "Ongoing/Multiple Orders",
}

VALID_SERVICES: Final[tuple[str, ...]] = tuple(SERVICE_LABELS)
VALID_TIMELINES: Final[tuple[str, ...]] = tuple(TIMELINE_LABELS)


class QuoteForm(FormDescriptor):
    form_type = FormType.QUOTE
    title = "Quote Request"
    required_fields = (
        "service",
        "firstName",
        "lastName",
        "email",
        "phone",
        "quantity",
        "timeline",
    )
    success_message = "Quote request received! Check your email for confirmation."
    footer = "Poly People Printing Quote System"

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        missing = find_missing_fields(payload, self.required_fields)
        if missing:
            return missing_fields_error(missing)

        fields = {
            "service": sanitize_string(payload.get("service")),
            "quantity": coerce_quantity(payload.get("quantity")),
            "timeline": sanitize_string(payload.get("timeline")),
            "dimensions": sanitize_string(payload.get("dimensions")),
            "materials": sanitize_string(payload.get("materials")),
            "budget": sanitize_string(payload.get("budget")),
            "description": sanitize_string(payload.get("description")),
            "referral": sanitize_string(payload.get("referral")),
            "firstName": sanitize_string(payload.get("firstName")),
            "lastName": sanitize_string(payload.get("lastName")),
            "email": sanitize_email(payload.get("email")),
            "phone": sanitize_phone(payload.get("phone")),
            "contactMethod": sanitize_string(payload.get("contactMethod") or "email"),
            "newsletter": bool(payload.get("newsletter")),
        }

        if not fields["email"]:
            return Invalid("Invalid email address", ("email",))

        for field, allowed in (("service", VALID_SERVICES), ("timeline", VALID_TIMELINES)):
            rejection = check_choice(payload.get(field), allowed, field)
            if rejection is not None:
                return rejection

        labels = {
            "serviceLabel": SERVICE_LABELS[payload["service"]],
            "timelineLabel": TIMELINE_LABELS[payload["timeline"]],
        }
        return Valid(SubmissionRecord(form_type=self.form_type, fields=fields, labels=labels))

    def _embed_fields(self, record: SubmissionRecord) -> tuple[EmbedField, ...]:
        fields = [
            embed_field("Service", record.labels["serviceLabel"], inline=True),
            embed_field("Quantity", record.get("quantity"), inline=True),
            embed_field("Timeline", record.labels["timelineLabel"], inline=True),
            embed_field("Customer", f"{record.get('firstName')} {record.get('lastName')}"),
            embed_field("Contact", f"{record.get('email')}\n{record.get('phone')}"),
        ]
        for key, name in (
            ("dimensions", "Dimensions"),
            ("materials", "Material/Color"),
            ("budget", "Budget"),
            ("contactMethod", "Preferred Contact"),
            ("referral", "Referral Source"),
        ):
            if record.get(key):
                fields.append(embed_field(name, record.get(key), inline=True))
        if record.get("newsletter"):
            fields.append(embed_field("Newsletter", "Yes", inline=True))
        if record.get("description"):
            fields.append(embed_field("Details", record.get("description")))
        return tuple(fields)

    def build_embed(self, record: SubmissionRecord) -> ChatEmbed:
        return ChatEmbed(
            title="New Quote Request",
            color=QUOTE_EMBED_COLOR,
            fields=self._embed_fields(record),
            timestamp=record.timestamp,
            footer=self.footer,
        )

    def build_confirmation(self, record: SubmissionRecord) -> Confirmation | None:
        return Confirmation(
            to=EmailAddress(
                email=record.get("email"),
                name=f"{record.get('firstName')} {record.get('lastName')}",
            ),
            subject="Quote Request Received - Poly People Printing",
            html=render_quote_confirmation(
                first_name=record.get("firstName"),
                service=record.labels["serviceLabel"],
                quantity=record.get("quantity"),
                timeline=record.labels["timelineLabel"],
            ),
        )

    def admin_subject(self, record: SubmissionRecord) -> str:
        return (
            f"[FALLBACK] New Quote Request from "
            f"{record.get('firstName')} {record.get('lastName')}"
        )


class QuoteWebhookForm(QuoteForm):
    """Orçamento recebido por webhook assinado (repasse puro ao chat)."""

    form_type = FormType.QUOTE_WEBHOOK
    title = "Quote Webhook"
    signed = True
    relay_only = True
    success_message = "Quote request forwarded."
    footer = "Poly People Printing Quote Webhook"

    def build_confirmation(self, record: SubmissionRecord) -> Confirmation | None:
        return None
