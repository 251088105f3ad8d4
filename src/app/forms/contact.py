"""Formulário de contato: chat + confirmação por email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.submission import FormType, Invalid, SubmissionRecord, Valid
from app.forms.base import Confirmation, FormDescriptor, embed_field
from app.forms.emails import render_contact_confirmation
from app.protocols.models import ChatEmbed, EmailAddress
from app.services.sanitizer import sanitize_email, sanitize_string
from app.services.validation import detect_faq, find_missing_fields, missing_fields_error
from config.settings import CONTACT_EMBED_COLOR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.submission import ValidationResult


class ContactForm(FormDescriptor):
    form_type = FormType.CONTACT
    title = "Contact Form"
    required_fields = ("name", "email", "message")
    success_message = "Message sent! We'll respond within 24 hours."

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        missing = find_missing_fields(payload, self.required_fields)
        if missing:
            return missing_fields_error(missing)

        fields = {
            "name": sanitize_string(payload.get("name")),
            "email": sanitize_email(payload.get("email")),
            "subject": sanitize_string(payload.get("subject")),
            "message": sanitize_string(payload.get("message")),
        }

        if not fields["email"]:
            return Invalid("Valid email address is required", ("email",))
        # Só espaços em branco passam no check de obrigatórios mas somem aqui
        if not fields["message"]:
            return Invalid("Message is required", ("message",))
        if not fields["name"]:
            return Invalid("Name is required", ("name",))

        return Valid(SubmissionRecord(form_type=self.form_type, fields=fields))

    def build_embed(self, record: SubmissionRecord) -> ChatEmbed:
        is_faq = detect_faq(record.get("message"))
        return ChatEmbed(
            title="Contact Form (Possible FAQ)" if is_faq else "Contact Form Submission",
            color=CONTACT_EMBED_COLOR,
            fields=(
                embed_field("From", record.get("name"), inline=True),
                embed_field("Email", record.get("email"), inline=True),
                embed_field("Subject", record.get("subject") or "No subject"),
                embed_field("Message", record.get("message")),
            ),
            timestamp=record.timestamp,
            footer="Poly People Printing Contact Form",
        )

    def build_confirmation(self, record: SubmissionRecord) -> Confirmation:
        name = record.get("name")
        return Confirmation(
            to=EmailAddress(email=record.get("email"), name=name),
            subject="We received your message - Poly People Printing",
            html=render_contact_confirmation(
                name=name,
                message=record.get("message"),
                is_faq=detect_faq(record.get("message")),
            ),
        )

    def admin_subject(self, record: SubmissionRecord) -> str:
        return f"[FALLBACK] Contact Form from {record.get('name')}"
