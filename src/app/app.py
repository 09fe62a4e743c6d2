"""Entrypoint da aplicação city-route-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.city_route.webhook import CORS_HEADERS
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_n8n_settings
from utils.errors import MethodNotAllowedError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido em staging/production)
    """
    logger.info("app_starting", extra={"service": "city-route-relay"})
    validate_runtime_settings()
    logger.info(
        "n8n_webhook_target",
        extra={"configured": get_n8n_settings().webhook.is_configured},
    )

    yield

    logger.info("app_shutting_down", extra={"service": "city-route-relay"})


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga x-correlation-id (ou gera um) para logs e resposta."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


async def method_not_allowed_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """Verbos sem rota (HEAD, TRACE...) recebem o mesmo 405 JSON do webhook."""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    error = MethodNotAllowedError(f"method_not_allowed:{request.method}")
    return JSONResponse(
        content={"success": False, "error": error.public_message},
        status_code=error.status_code,
        headers=CORS_HEADERS,
    )


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="city-route-relay",
        description="Relay de seleção de rotas do mini-app Telegram para o n8n",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
    )

    # CORS é aplicado pelo próprio webhook em toda resposta (inclusive erros)
    fastapi_app.middleware("http")(correlation_id_middleware)
    fastapi_app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "city-route-relay"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting city-route-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
