"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- discord/: webhooks Discord (canal primário)
- email/: SendGrid v3 (canal secundário e alertas)
- webhook/: recepção de submissões (assinatura, parse)
- http_base.py: cliente HTTP com prazo e uma tentativa

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
