"""Builder do payload SendGrid v3 ``/mail/send``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import EmailAddress, EmailMessage


def _address(address: EmailAddress) -> dict[str, str]:
    data = {"email": address.email}
    if address.name:
        data["name"] = address.name
    return data


def build_mail_payload(message: EmailMessage) -> dict[str, Any]:
    """Constrói payload com um destinatário e conteúdo HTML.

    Args:
        message: Email já renderizado

    Returns:
        Payload JSON conforme API v3 do SendGrid
    """
    return {
        "personalizations": [
            {
                "to": [_address(message.to)],
                "subject": message.subject,
            }
        ],
        "from": _address(message.sender),
        "content": [
            {
                "type": "text/html",
                "value": message.html,
            }
        ],
    }
