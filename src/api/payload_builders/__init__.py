"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- discord/: embeds de webhook
- email/: SendGrid v3 mail send
"""

__all__: list[str] = []
