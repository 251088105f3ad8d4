"""Pipeline compartilhado pelas quatro rotas de submissão.

Etapas, nesta ordem, interrompidas na primeira ``ClientError``:
1. Método (somente POST)
2. Rate limit por origem
3. Tamanho do corpo (Content-Length antes da leitura, depois o corpo lido)
4. Assinatura HMAC (formulários assinados)
5. Parse JSON
6. Validação/sanitização do formulário
7. Destino primário (relays sem destino → 503)
8. Dispatch (nunca altera a resposta)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Request, status
from fastapi.responses import JSONResponse

from api.connectors.webhook import parse_json_object, verify_webhook_signature
from app.domain.submission import Invalid
from app.forms import get_form
from app.observability import reset_correlation_id, set_correlation_id
from utils.errors import (
    ClientError,
    DestinationNotConfiguredError,
    InvalidSignatureError,
    MethodNotAllowedError,
    PayloadTooLargeError,
    RateLimitedError,
    SubmissionValidationError,
)

if TYPE_CHECKING:
    from app.bootstrap.dependencies import FormRuntime
    from app.domain.submission import FormType, SubmissionRecord
    from app.forms.base import FormDescriptor

logger = logging.getLogger(__name__)

UNKNOWN_SOURCE = "unknown"


def source_key(request: Request) -> str:
    """Chave de rate limit: primeiro IP do X-Forwarded-For, host, ou "unknown"."""
    forwarded = request.headers.get("x-forwarded-for", "")
    first = forwarded.split(",")[0].strip()
    if first:
        return first
    if request.client is not None and request.client.host:
        return request.client.host
    return UNKNOWN_SOURCE


def get_runtime(request: Request) -> FormRuntime:
    return request.app.state.runtime


async def handle_submission(request: Request, form_type: FormType) -> JSONResponse:
    """Executa o pipeline e converte ``ClientError`` em ``{"error": ...}``."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        form = get_form(form_type)
        try:
            record = await _accept(request, form)
        except ClientError as exc:
            logger.warning(
                "submission_rejected",
                extra={
                    "form_type": form_type.value,
                    "status_code": exc.status_code,
                    "error": exc.message,
                },
            )
            return JSONResponse({"error": exc.message}, status_code=exc.status_code)

        runtime = get_runtime(request)
        await runtime.dispatcher.dispatch(form, record, runtime.channels[form_type])
        return JSONResponse(
            {"success": True, "message": form.success_message},
            status_code=status.HTTP_200_OK,
        )
    finally:
        reset_correlation_id(token)


async def _accept(request: Request, form: FormDescriptor) -> SubmissionRecord:
    """Etapas 1 a 7; devolve a submissão sanitizada pronta para dispatch."""
    runtime = get_runtime(request)
    form_type = form.form_type

    if request.method != "POST":
        raise MethodNotAllowedError()

    source = source_key(request)
    if runtime.rate_limiters[form_type].check(source):
        logger.warning(
            "rate_limited",
            extra={"form_type": form_type.value, "source": source},
        )
        raise RateLimitedError()

    if _declared_length(request) > runtime.max_body_bytes:
        raise PayloadTooLargeError()

    raw_body = await _read_body(request, runtime.max_body_bytes)

    if form.signed:
        _check_signature(request, form, raw_body, runtime.webhook_secrets.get(form_type, ""))

    payload = parse_json_object(raw_body)
    logger.info(
        "submission_received",
        extra={"form_type": form_type.value, "payload_size": len(raw_body)},
    )

    result = form.validate(payload)
    if isinstance(result, Invalid):
        logger.info(
            "submission_invalid",
            extra={"form_type": form_type.value, "invalid_fields": list(result.fields)},
        )
        raise SubmissionValidationError(result.reason)

    if form.relay_only and not runtime.channels[form_type].primary_configured:
        logger.error(
            "relay_destination_unconfigured",
            extra={
                "form_type": form_type.value,
                "setting": runtime.channels[form_type].primary.setting,
            },
        )
        raise DestinationNotConfiguredError()

    return result.record


def _declared_length(request: Request) -> int:
    """Content-Length declarado; ausente ou malformado conta como 0."""
    try:
        return int(request.headers.get("content-length", "0"))
    except ValueError:
        return 0


async def _read_body(request: Request, limit: int) -> bytes:
    """Lê o corpo em streaming e aborta assim que passar de ``limit``."""
    received = bytearray()
    async for chunk in request.stream():
        received.extend(chunk)
        if len(received) > limit:
            raise PayloadTooLargeError()
    return bytes(received)


def _check_signature(
    request: Request,
    form: FormDescriptor,
    raw_body: bytes,
    secret: str,
) -> None:
    result = verify_webhook_signature(raw_body, request.headers, secret)
    if result.skipped:
        logger.warning(
            "webhook_signature_skipped",
            extra={"form_type": form.form_type.value, "reason": "secret_not_configured"},
        )
        return
    if not result.valid:
        event = (
            "webhook_signature_missing"
            if result.error == "missing_signature"
            else "webhook_signature_invalid"
        )
        logger.warning(event, extra={"form_type": form.form_type.value})
        raise InvalidSignatureError()
