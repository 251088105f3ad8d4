"""Testes dos payload builders (Discord embed e SendGrid mail)."""

from __future__ import annotations

from api.payload_builders.discord import build_embed_payload
from api.payload_builders.email import build_mail_payload
from app.protocols.models import ChatEmbed, EmailAddress, EmailMessage, EmbedField


def test_embed_payload_shape() -> None:
    embed = ChatEmbed(
        title="New Quote Request",
        color=0x9333EA,
        fields=(
            EmbedField(name="Service", value="3D Printing", inline=True),
            EmbedField(name="Details", value="Blue"),
        ),
        timestamp="2026-10-18T12:00:00.000Z",
        footer="Poly People Printing Quote System",
    )

    payload = build_embed_payload(embed)

    assert payload == {
        "embeds": [
            {
                "title": "New Quote Request",
                "color": 0x9333EA,
                "fields": [
                    {"name": "Service", "value": "3D Printing", "inline": True},
                    {"name": "Details", "value": "Blue", "inline": False},
                ],
                "timestamp": "2026-10-18T12:00:00.000Z",
                "footer": {"text": "Poly People Printing Quote System"},
            }
        ]
    }


def test_mail_payload_omits_empty_recipient_name() -> None:
    message = EmailMessage(
        to=EmailAddress(email="admin@ppp.test"),
        sender=EmailAddress(email="hello@polypeopleprinting.com", name="PPP System Alert"),
        subject="[FALLBACK] Contact Form from Bob",
        html="<table></table>",
    )

    payload = build_mail_payload(message)

    assert payload["personalizations"][0]["to"] == [{"email": "admin@ppp.test"}]
    assert payload["from"]["name"] == "PPP System Alert"
    assert payload["content"][0]["type"] == "text/html"
