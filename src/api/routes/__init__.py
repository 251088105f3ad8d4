"""Rotas HTTP da API: adapters de entrada.

Estrutura:
- routes/forms/: formulários públicos (contato, orçamento)
- routes/webhooks/: relays assinados (pedido, orçamento)
- routes/health/: health checks e readiness
- pipeline.py: etapas compartilhadas pelas rotas de submissão

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
