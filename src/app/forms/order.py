"""Webhook de pedidos: repasse assinado ao canal de chat."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Final

from app.domain.submission import FormType, Invalid, SubmissionRecord, Valid
from app.forms.base import FormDescriptor, embed_field
from app.protocols.models import ChatEmbed
from app.services.sanitizer import sanitize_email, sanitize_phone, sanitize_string
from app.services.validation import (
    check_choice,
    find_missing_fields,
    is_missing,
    missing_fields_error,
)
from config.settings import ORDER_EMBED_COLOR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.submission import ValidationResult

VALID_ORDER_TYPES: Final[tuple[str, ...]] = (
    "custom-print",
    "miniature",
    "prototype",
    "bulk-order",
    "repair",
    "other",
)

OPTIONAL_FIELDS: Final[tuple[str, ...]] = (
    "quantity",
    "color",
    "deadline",
    "shippingAddress",
    "message",
)

# Campos longos ocupam a linha inteira no embed
_FULL_WIDTH: Final[frozenset[str]] = frozenset({"shippingAddress", "message"})

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def field_label(key: str) -> str:
    """``shippingAddress`` -> ``Shipping Address``."""
    words = _CAMEL_BOUNDARY.sub(" ", key)
    return words[:1].upper() + words[1:]


class OrderWebhookForm(FormDescriptor):
    form_type = FormType.ORDER_WEBHOOK
    title = "Order Request"
    required_fields = ("name", "email", "phone", "orderType", "material", "description")
    signed = True
    relay_only = True
    success_message = "Order request received."

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        missing = find_missing_fields(payload, self.required_fields)
        if missing:
            return missing_fields_error(missing)

        rejection = check_choice(payload.get("orderType"), VALID_ORDER_TYPES, "orderType")
        if rejection is not None:
            return rejection

        fields: dict[str, Any] = {
            "name": sanitize_string(payload.get("name")),
            "email": sanitize_email(payload.get("email")),
            "phone": sanitize_phone(payload.get("phone")),
            "orderType": sanitize_string(payload.get("orderType")),
            "material": sanitize_string(payload.get("material")),
            "description": sanitize_string(payload.get("description")),
        }
        if not fields["email"]:
            return Invalid("Invalid email address", ("email",))

        for key in OPTIONAL_FIELDS:
            if not is_missing(payload.get(key)):
                fields[key] = sanitize_string(payload.get(key))

        return Valid(SubmissionRecord(form_type=self.form_type, fields=fields))

    def build_embed(self, record: SubmissionRecord) -> ChatEmbed:
        fields = [
            embed_field("Name", record.get("name"), inline=True),
            embed_field("Email", record.get("email"), inline=True),
            embed_field("Phone", record.get("phone"), inline=True),
            embed_field("Order Type", record.get("orderType"), inline=True),
            embed_field("Material", record.get("material"), inline=True),
        ]
        for key in OPTIONAL_FIELDS:
            if record.get(key):
                fields.append(
                    embed_field(field_label(key), record.get(key), inline=key not in _FULL_WIDTH)
                )
        fields.append(embed_field("Description", record.get("description")))

        return ChatEmbed(
            title="New Order Request",
            color=ORDER_EMBED_COLOR,
            fields=tuple(fields),
            timestamp=record.timestamp,
            footer="Poly People Printing Order Webhook",
        )

    def admin_subject(self, record: SubmissionRecord) -> str:
        return f"[FALLBACK] New Order Request from {record.get('name')}"
