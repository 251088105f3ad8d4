"""Exceções de cliente (4xx/5xx) levantadas pelo pipeline de formulários.

Cada exceção carrega o status HTTP e a mensagem pública devolvida ao
chamador em ``{"error": ...}``. Nenhuma delas é levantada depois que a
fase de notificação começa.
"""

from __future__ import annotations


class ClientError(Exception):
    """Base para falhas atribuíveis ao chamador (pipeline interrompido)."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MethodNotAllowedError(ClientError):
    """Método HTTP diferente de POST."""

    status_code = 405
    default_message = "Method not allowed"


class RateLimitedError(ClientError):
    """Origem excedeu o limite da janela atual."""

    status_code = 429
    default_message = "Too many requests. Try again later."


class PayloadTooLargeError(ClientError):
    """Corpo acima do limite configurado."""

    status_code = 413
    default_message = "Payload too large"


class InvalidJsonError(ClientError):
    """Corpo não é JSON válido ou não é um objeto."""

    status_code = 400
    default_message = "Invalid JSON body"


class InvalidSignatureError(ClientError):
    """Assinatura ausente ou inválida (mensagem uniforme para ambos)."""

    status_code = 401
    default_message = "Invalid webhook signature"


class SubmissionValidationError(ClientError):
    """Campos obrigatórios ausentes ou valores fora do conjunto permitido."""

    status_code = 400
    default_message = "Invalid submission"


class DestinationNotConfiguredError(ClientError):
    """Handler de repasse sem destino primário configurado."""

    status_code = 503
    default_message = "Webhook destination not configured"
