"""Endpoints públicos dos formulários do site.

Endpoints:
- POST /api/contact: formulário de contato
- POST /api/quote: pedido de orçamento

Outros métodos chegam ao pipeline e recebem 405 com corpo JSON.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.routes.pipeline import handle_submission
from app.domain.submission import FormType

# Métodos roteados para o pipeline (preflight CORS é respondido antes)
SUBMISSION_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter()


@router.api_route("/contact", methods=SUBMISSION_METHODS)
async def submit_contact(request: Request) -> JSONResponse:
    return await handle_submission(request, FormType.CONTACT)


@router.api_route("/quote", methods=SUBMISSION_METHODS)
async def submit_quote(request: Request) -> JSONResponse:
    return await handle_submission(request, FormType.QUOTE)
