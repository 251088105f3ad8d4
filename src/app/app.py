"""Entrypoint do relay de formulários da Poly People Printing.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_runtime
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap.dependencies import FormRuntime

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria o pool HTTP compartilhado e o runtime (se não injetado)

    Shutdown:
    - Fecha o pool HTTP
    """
    logger.info("app_starting")
    validate_runtime_settings()

    owned: FormRuntime | None = None
    if getattr(app.state, "runtime", None) is None:
        owned = create_runtime(client=httpx.AsyncClient())
        app.state.runtime = owned

    yield

    logger.info("app_shutting_down")
    if owned is not None:
        await owned.aclose()
        app.state.runtime = None


def create_app(runtime: FormRuntime | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        runtime: Runtime pronto (testes); None cria um no startup.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="PPP Form Relay",
        description="Relay de formulários do site para Discord e SendGrid",
        version="1.0.0",
        lifespan=lifespan,
        debug=get_base_settings().debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.runtime = runtime

    # Formulários são enviados do site estático (outra origem)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting PPP Form Relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
