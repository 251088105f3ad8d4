"""Cliente HTTP base para conectores da camada API.

Uma única tentativa por chamada, sempre com prazo: um destino que não
responde vira falha de transporte depois de ``timeout_seconds``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Falha de transporte (timeout, conexão, URL inválida) sem dados sensíveis."""

    def __init__(self, message: str, is_timeout: bool = False) -> None:
        super().__init__(message)
        self.is_timeout = is_timeout


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Reaproveita o ``httpx.AsyncClient`` injetado (pool compartilhado do
    app); sem cliente injetado, abre um por requisição.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST JSON; qualquer status HTTP é devolvido ao chamador.

        Raises:
            HttpError: Timeout, URL inválida ou falha de conexão/protocolo.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            if self._client is not None:
                return await self._client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
            async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"timeout_seconds": self._config.timeout_seconds})
            raise HttpError("http_timeout", is_timeout=True) from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            logger.warning("http_transport_error", extra={"error_type": type(exc).__name__})
            raise HttpError(f"http_transport_error: {type(exc).__name__}") from exc
