"""Builder do payload de webhook Discord."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import ChatEmbed


def build_embed_payload(embed: ChatEmbed) -> dict[str, Any]:
    """Constrói ``{"embeds": [...]}`` com um único embed.

    Args:
        embed: Embed montado pelo descritor do formulário

    Returns:
        Payload JSON conforme API de webhooks do Discord
    """
    return {
        "embeds": [
            {
                "title": embed.title,
                "color": embed.color,
                "fields": [
                    {"name": field.name, "value": field.value, "inline": field.inline}
                    for field in embed.fields
                ],
                "timestamp": embed.timestamp,
                "footer": {"text": embed.footer},
            }
        ]
    }
