"""Escada de entrega de uma submissão validada.

Ordem fixa por requisição:
1. Primário (chat): pulado se não configurado; 2xx = entregue.
2. Secundário (email de confirmação): só para formulários que o têm e
   com credencial configurada; status < 400 = entregue.
3. Fallback admin: primário não entregou + admin e credencial
   configurados. Fire-and-forget.
4. Log de recuperação: nenhum dos dois canais entregou.

Falhas dos canais externos chegam como ``NotificationOutcome`` e nunca
interrompem a resposta ao remetente.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from app.domain.channel_config import AdminConfigured, ChatWebhookConfigured, EmailConfigured
from app.domain.outcome import Channel, DispatchReport, NotificationOutcome
from app.forms.emails import render_admin_fallback
from app.protocols.models import EmailAddress, EmailMessage
from config.logging import log_fallback, log_submission_recovery

if TYPE_CHECKING:
    from app.domain.channel_config import FormChannels
    from app.domain.submission import SubmissionRecord
    from app.forms.base import FormDescriptor
    from app.protocols.notification_channel import ChatNotifierProtocol, EmailSenderProtocol

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Entrega uma submissão pelos canais configurados do formulário.

    Sem retries: cada canal recebe no máximo uma tentativa por requisição.
    """

    def __init__(
        self,
        chat_notifier: ChatNotifierProtocol,
        email_sender: EmailSenderProtocol,
    ) -> None:
        self._chat = chat_notifier
        self._email = email_sender

    async def dispatch(
        self,
        form: FormDescriptor,
        record: SubmissionRecord,
        channels: FormChannels,
    ) -> DispatchReport:
        """Executa a escada completa e retorna o resumo."""
        primary = await self._attempt_primary(form, record, channels)

        secondary: NotificationOutcome | None = None
        if form.has_secondary:
            secondary = await self._attempt_secondary(form, record, channels)

        admin_fallback_sent = False
        if not primary.delivered:
            admin_fallback_sent = await self._send_admin_fallback(form, record, channels)

        report = DispatchReport(
            primary=primary,
            secondary=secondary,
            admin_fallback_sent=admin_fallback_sent,
            recovery_logged=False,
        )
        if not report.any_delivered:
            log_submission_recovery(
                logger,
                form_type=record.form_type.value,
                submission=record.as_dict(),
                labels=record.labels,
            )
            report = replace(report, recovery_logged=True)
        logger.info(
            "submission_dispatched",
            extra={
                "form_type": record.form_type.value,
                "primary_status": primary.status.value,
                "secondary_status": secondary.status.value if secondary else None,
                "admin_fallback_sent": admin_fallback_sent,
                "recovery_logged": report.recovery_logged,
            },
        )
        return report

    async def _attempt_primary(
        self,
        form: FormDescriptor,
        record: SubmissionRecord,
        channels: FormChannels,
    ) -> NotificationOutcome:
        config = channels.primary
        if not isinstance(config, ChatWebhookConfigured):
            logger.error(
                "primary_not_configured",
                extra={"form_type": record.form_type.value, "setting": config.setting},
            )
            return NotificationOutcome.skipped(Channel.PRIMARY, f"{config.setting} not set")

        outcome = await self._chat.post_embed(config.url, form.build_embed(record))
        if not outcome.delivered:
            logger.error(
                "primary_delivery_failed",
                extra={
                    "form_type": record.form_type.value,
                    "status_code": outcome.status_code,
                    "error": outcome.error,
                },
            )
        return outcome

    async def _attempt_secondary(
        self,
        form: FormDescriptor,
        record: SubmissionRecord,
        channels: FormChannels,
    ) -> NotificationOutcome:
        config = channels.email
        if not isinstance(config, EmailConfigured):
            logger.warning(
                "secondary_not_configured",
                extra={"form_type": record.form_type.value, "setting": config.setting},
            )
            return NotificationOutcome.skipped(Channel.SECONDARY, f"{config.setting} not set")

        confirmation = form.build_confirmation(record)
        if confirmation is None:
            return NotificationOutcome.skipped(Channel.SECONDARY, "no_confirmation_template")

        message = EmailMessage(
            to=confirmation.to,
            sender=EmailAddress(email=channels.sender.email, name=channels.sender.name),
            subject=confirmation.subject,
            html=confirmation.html,
        )
        outcome = await self._email.send(config.api_key, message, Channel.SECONDARY)
        if not outcome.delivered:
            logger.error(
                "secondary_delivery_failed",
                extra={
                    "form_type": record.form_type.value,
                    "status_code": outcome.status_code,
                    "error": outcome.error,
                },
            )
        return outcome

    async def _send_admin_fallback(
        self,
        form: FormDescriptor,
        record: SubmissionRecord,
        channels: FormChannels,
    ) -> bool:
        """Alerta o administrador; retorna True se o envio foi tentado.

        O resultado do envio só é registrado em log quando falha; não há
        fallback além deste.
        """
        admin = channels.admin
        credential = channels.email
        if not isinstance(admin, AdminConfigured) or not isinstance(credential, EmailConfigured):
            return False

        log_fallback(
            logger,
            "admin_fallback",
            reason="primary_not_delivered",
            form_type=record.form_type.value,
        )
        message = EmailMessage(
            to=EmailAddress(email=admin.address),
            sender=EmailAddress(email=channels.sender.email, name=channels.sender.alert_name),
            subject=form.admin_subject(record),
            html=render_admin_fallback(form.title, record.as_dict(), record.labels),
        )
        outcome = await self._email.send(credential.api_key, message, Channel.SECONDARY)
        if not outcome.delivered:
            logger.error(
                "admin_fallback_failed",
                extra={
                    "form_type": record.form_type.value,
                    "status_code": outcome.status_code,
                    "error": outcome.error,
                },
            )
        return True
