"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check
from app.domain.submission import FormType
from tests.fakes.fake_channels import make_channels


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def _runtime(**relay_primary: bool) -> SimpleNamespace:
    channels = {form_type: make_channels() for form_type in FormType}
    for name, configured in relay_primary.items():
        channels[FormType(name)] = make_channels(primary=configured)
    return SimpleNamespace(channels=channels)


@pytest.mark.asyncio
async def test_health_check() -> None:
    response = await health_check()
    assert response.status == "healthy"
    assert response.service == "ppp_form_relay"


@pytest.mark.asyncio
async def test_readiness_ready_when_relays_have_destination() -> None:
    request = _build_request_with_state(SimpleNamespace(runtime=_runtime()))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["order_webhook"] == {
        "primary": "configured",
        "email": "configured",
        "admin": "configured",
    }


@pytest.mark.asyncio
async def test_readiness_not_ready_without_relay_destination() -> None:
    request = _build_request_with_state(
        SimpleNamespace(runtime=_runtime(order_webhook=False))
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["order_webhook"]["primary"] == "unconfigured"


@pytest.mark.asyncio
async def test_readiness_ignores_contact_destination() -> None:
    request = _build_request_with_state(SimpleNamespace(runtime=_runtime(contact=False)))

    response = await readiness_check(request)

    assert response.status_code == 200
