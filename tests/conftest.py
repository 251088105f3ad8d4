"""Configuração do pytest para o relay de formulários."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_discord_settings,
    get_email_settings,
    get_ingress_settings,
    get_webhook_settings,
)

_SETTINGS_GETTERS = (
    get_base_settings,
    get_discord_settings,
    get_email_settings,
    get_ingress_settings,
    get_webhook_settings,
)

_RELAY_ENV = (
    "DISCORD_WEBHOOK_CONTACT",
    "DISCORD_WEBHOOK_QUOTES",
    "DISCORD_WEBHOOK_URL_ORDER",
    "SENDGRID_API_KEY",
    "ADMIN_EMAIL",
    "WEBHOOK_SECRET",
    "QUOTE_WEBHOOK_SECRET",
    "ENVIRONMENT",
    "SERVICE_NAME",
    "LOG_LEVEL",
    "SENDGRID_API_URL",
    "EMAIL_FROM_CONTACT",
    "EMAIL_FROM_QUOTES",
    "MAX_BODY_BYTES",
    "RATE_LIMIT_MAX_REQUESTS",
    "RATE_LIMIT_WINDOW_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Cada teste lê o ambiente do zero (getters são lru_cache)."""
    for name in _RELAY_ENV:
        monkeypatch.delenv(name, raising=False)
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
