"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto: sanitização, validação e a escada
de entrega (que recebe os adapters de IO por injeção).
"""

from app.services.dispatcher import NotificationDispatcher

__all__ = [
    "NotificationDispatcher",
]
