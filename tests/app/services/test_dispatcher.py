"""Testes da escada de entrega (primário → secundário → admin → recuperação)."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

import httpx
import pytest

from api.connectors.discord import DiscordWebhookClient
from api.connectors.http_base import HttpClient
from app.domain.channel_config import ChatWebhookConfigured

from app.domain.outcome import DeliveryStatus
from app.domain.submission import Valid
from app.forms.contact import ContactForm
from app.forms.order import OrderWebhookForm
from app.forms.quote import QuoteForm
from app.services.dispatcher import NotificationDispatcher
from config.logging import RECOVERY_MARKER
from tests.fakes.fake_channels import FakeChatNotifier, FakeEmailSender, make_channels


def _quote_record(**overrides: Any):
    payload = {
        "service": "laser-services",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "253-555-0100",
        "quantity": 4,
        "timeline": "flexible",
    }
    payload.update(overrides)
    result = QuoteForm().validate(payload)
    assert isinstance(result, Valid)
    return result.record


def _recovery_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [
        record
        for record in caplog.records
        if getattr(record, "recovery_marker", None) == RECOVERY_MARKER
    ]


@pytest.mark.asyncio
async def test_all_channels_succeed(caplog: pytest.LogCaptureFixture) -> None:
    """Cenário A: Discord e SendGrid entregam; nenhum fallback."""
    chat = FakeChatNotifier()
    email = FakeEmailSender()
    dispatcher = NotificationDispatcher(chat, email)

    with caplog.at_level(logging.INFO):
        report = await dispatcher.dispatch(QuoteForm(), _quote_record(), make_channels())

    assert report.primary.delivered
    assert report.secondary is not None and report.secondary.delivered
    assert report.admin_fallback_sent is False
    assert report.recovery_logged is False
    assert len(chat.posts) == 1
    assert [message.to.email for message in email.sent] == ["ada@example.com"]
    assert email.sent[0].sender.email == "quotes@polypeopleprinting.com"
    assert _recovery_records(caplog) == []


@pytest.mark.asyncio
async def test_primary_down_secondary_ok(caplog: pytest.LogCaptureFixture) -> None:
    """Cenário B: Discord falha, confirmação entregue, admin alertado."""
    chat = FakeChatNotifier(succeed=False)
    email = FakeEmailSender()
    dispatcher = NotificationDispatcher(chat, email)

    with caplog.at_level(logging.INFO):
        report = await dispatcher.dispatch(QuoteForm(), _quote_record(), make_channels())

    assert report.primary.status is DeliveryStatus.FAILED
    assert report.primary.status_code == 500
    assert report.secondary is not None and report.secondary.delivered
    assert report.admin_fallback_sent is True
    assert report.recovery_logged is False

    recipients = [message.to.email for message in email.sent]
    assert recipients == ["ada@example.com", "admin@ppp.test"]
    alert = email.sent[1]
    assert alert.subject == "[FALLBACK] New Quote Request from Ada Lovelace"
    assert alert.sender.name == "PPP System Alert"
    assert "Laser Services" in alert.html
    assert _recovery_records(caplog) == []


@pytest.mark.asyncio
async def test_both_channels_down_logs_recovery(caplog: pytest.LogCaptureFixture) -> None:
    """Cenário C: tudo falha; registro de recuperação com a submissão inteira."""
    chat = FakeChatNotifier(succeed=False)
    email = FakeEmailSender(fail_to={"ada@example.com", "admin@ppp.test"})
    dispatcher = NotificationDispatcher(chat, email)
    record = _quote_record()

    with caplog.at_level(logging.INFO):
        report = await dispatcher.dispatch(QuoteForm(), record, make_channels())

    assert report.any_delivered is False
    assert report.admin_fallback_sent is True
    assert report.recovery_logged is True

    recovery = _recovery_records(caplog)
    assert len(recovery) == 1
    assert recovery[0].levelno == logging.ERROR
    assert recovery[0].form_type == "quote"
    assert recovery[0].submission == record.as_dict()
    assert recovery[0].labels == {"serviceLabel": "Laser Services", "timelineLabel": "Flexible (2+ weeks)"}
    assert any(r.getMessage() == "admin_fallback_failed" for r in caplog.records)


@pytest.mark.asyncio
async def test_nothing_configured(caplog: pytest.LogCaptureFixture) -> None:
    """Cenário D: sem destino nem credencial; só o registro de recuperação."""
    chat = FakeChatNotifier()
    email = FakeEmailSender()
    dispatcher = NotificationDispatcher(chat, email)

    with caplog.at_level(logging.INFO):
        report = await dispatcher.dispatch(
            QuoteForm(),
            _quote_record(),
            make_channels(primary=False, email=False, admin=False),
        )

    assert report.primary.status is DeliveryStatus.SKIPPED
    assert report.primary.error == "DISCORD_WEBHOOK_QUOTES not set"
    assert report.secondary is not None
    assert report.secondary.status is DeliveryStatus.SKIPPED
    assert report.admin_fallback_sent is False
    assert chat.posts == []
    assert email.sent == []
    assert len(_recovery_records(caplog)) == 1


@pytest.mark.asyncio
async def test_admin_fallback_needs_credential() -> None:
    chat = FakeChatNotifier(succeed=False)
    email = FakeEmailSender()
    dispatcher = NotificationDispatcher(chat, email)

    report = await dispatcher.dispatch(
        QuoteForm(), _quote_record(), make_channels(email=False, admin=True)
    )

    assert report.admin_fallback_sent is False
    assert report.recovery_logged is True
    assert email.sent == []


@pytest.mark.asyncio
async def test_primary_ok_secondary_failed_no_fallback(caplog: pytest.LogCaptureFixture) -> None:
    chat = FakeChatNotifier()
    email = FakeEmailSender(fail_to={"ada@example.com"})
    dispatcher = NotificationDispatcher(chat, email)

    with caplog.at_level(logging.INFO):
        report = await dispatcher.dispatch(QuoteForm(), _quote_record(), make_channels())

    assert report.secondary is not None
    assert report.secondary.status is DeliveryStatus.FAILED
    assert report.admin_fallback_sent is False
    assert report.recovery_logged is False
    assert len(email.sent) == 1


@pytest.mark.asyncio
async def test_relay_form_has_no_secondary_attempt() -> None:
    chat = FakeChatNotifier(succeed=False)
    email = FakeEmailSender()
    dispatcher = NotificationDispatcher(chat, email)
    result = OrderWebhookForm().validate(
        {
            "name": "Grace",
            "email": "grace@example.com",
            "phone": "555",
            "orderType": "repair",
            "material": "PETG",
            "description": "Broken hinge",
        }
    )
    assert isinstance(result, Valid)

    report = await dispatcher.dispatch(OrderWebhookForm(), result.record, make_channels())

    assert report.secondary is None
    assert report.admin_fallback_sent is True
    assert report.recovery_logged is True
    assert [message.to.email for message in email.sent] == ["admin@ppp.test"]


@pytest.mark.asyncio
async def test_contact_confirmation_addressed_to_submitter() -> None:
    chat = FakeChatNotifier()
    email = FakeEmailSender()
    dispatcher = NotificationDispatcher(chat, email)
    result = ContactForm().validate({"name": "Bob", "email": "bob@x.io", "message": "Hello"})
    assert isinstance(result, Valid)

    await dispatcher.dispatch(ContactForm(), result.record, make_channels())

    url, embed = chat.posts[0]
    assert url == "https://discord.test/hook"
    assert embed.title == "Contact Form Submission"
    assert email.sent[0].to.name == "Bob"
    assert email.sent[0].subject == "We received your message - Poly People Printing"


@pytest.mark.asyncio
async def test_malformed_primary_url_still_runs_the_ladder(
    caplog: pytest.LogCaptureFixture,
) -> None:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(204)))
    chat = DiscordWebhookClient(HttpClient(client=client))
    email = FakeEmailSender()
    dispatcher = NotificationDispatcher(chat, email)
    result = ContactForm().validate({"name": "Bob", "email": "bob@x.io", "message": "Hello"})
    assert isinstance(result, Valid)
    channels = replace(
        make_channels(),
        primary=ChatWebhookConfigured(url="https://discord.com/api/webhooks/1/abc\n"),
    )

    with caplog.at_level(logging.INFO):
        report = await dispatcher.dispatch(ContactForm(), result.record, channels)
    await client.aclose()

    assert report.primary.status is DeliveryStatus.FAILED
    assert report.admin_fallback_sent is True
    assert [message.to.email for message in email.sent] == ["bob@x.io", "admin@ppp.test"]
