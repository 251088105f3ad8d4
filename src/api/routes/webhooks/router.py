"""Relays assinados (HMAC) para o canal de chat.

Endpoints:
- POST /api/webhooks/order: pedido de impressão
- POST /api/webhooks/quote: orçamento vindo de integração externa

Sem canal secundário: destino primário ausente responde 503.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.routes.forms.router import SUBMISSION_METHODS
from api.routes.pipeline import handle_submission
from app.domain.submission import FormType

router = APIRouter()


@router.api_route("/order", methods=SUBMISSION_METHODS)
async def relay_order(request: Request) -> JSONResponse:
    return await handle_submission(request, FormType.ORDER_WEBHOOK)


@router.api_route("/quote", methods=SUBMISSION_METHODS)
async def relay_quote(request: Request) -> JSONResponse:
    return await handle_submission(request, FormType.QUOTE_WEBHOOK)
