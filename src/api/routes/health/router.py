"""Endpoints de health check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.domain.channel_config import Unconfigured
from app.forms import FORMS
from config.settings import get_base_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class ChannelCheck:
    """Estado de configuração dos canais de um formulário."""

    primary: Literal["configured", "unconfigured"]
    email: Literal["configured", "unconfigured"]
    admin: Literal["configured", "unconfigured"]

    def as_dict(self) -> dict[str, Any]:
        return {"primary": self.primary, "email": self.email, "admin": self.admin}


def _state(config: object) -> Literal["configured", "unconfigured"]:
    return "unconfigured" if isinstance(config, Unconfigured) else "configured"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: pronto quando todo relay tem destino primário."""
    channels = request.app.state.runtime.channels

    checks = {
        form_type.value: ChannelCheck(
            primary=_state(form_channels.primary),
            email=_state(form_channels.email),
            admin=_state(form_channels.admin),
        )
        for form_type, form_channels in channels.items()
    }
    ready = all(
        channels[form_type].primary_configured
        for form_type, form in FORMS.items()
        if form.relay_only
    )

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {name: check.as_dict() for name, check in checks.items()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
