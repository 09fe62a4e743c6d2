"""Endpoints do webhook de seleção de rota.

Endpoints:
- OPTIONS /: preflight CORS (200, body vazio)
- POST /: recebe a seleção, repassa ao n8n e devolve o resultado
- GET /: sem body, página HTML de diagnóstico; com body, 405
- PUT/PATCH/DELETE /: 405

Respostas:
- Status 200 para todo POST bem-formado; sucesso ou falha da entrega vai
  no campo `success` do body
- 400 apenas para JSON inválido/vazio, 405 para verbo errado
- Headers CORS em todas as respostas, inclusive erros
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import HTMLResponse, JSONResponse

from api.connectors.city_route import parse_city_selection
from api.routes.city_route.diagnostic_page import render_diagnostic_page
from app.domain.city_route import RequestMetadata, format_timestamp
from app.use_cases.city_route import DELIVERY_FAILED_ERROR
from config.settings import get_n8n_settings
from utils.errors import MethodNotAllowedError, RelayRequestError

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Lazy-loaded use case (inicializado na primeira requisição)
_relay_use_case = None


def _get_relay_use_case():
    """Obtém o use case de repasse (lazy-loading)."""
    global _relay_use_case
    if _relay_use_case is None:
        from app.bootstrap.city_route_factory import create_relay_city_route_use_case

        _relay_use_case = create_relay_city_route_use_case()
    return _relay_use_case


def _json_response(content: dict[str, Any], status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


def _error_response(exc: RelayRequestError) -> JSONResponse:
    return _json_response(
        {"success": False, "error": exc.public_message},
        status_code=exc.status_code,
    )


def _reject_method(request: Request) -> JSONResponse:
    logger.info("city_route_method_rejected", extra={"method": request.method})
    return _error_response(MethodNotAllowedError(f"method_not_allowed:{request.method}"))


def _request_metadata(request: Request) -> RequestMetadata:
    """Extrai metadados de transporte explicitamente do request."""
    return RequestMetadata(
        remote_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
        server_name=request.url.hostname,
    )


@router.options("/")
async def preflight() -> Response:
    """Preflight CORS: 200 com body vazio, sem processamento."""
    return Response(
        content=b"",
        status_code=status.HTTP_200_OK,
        media_type="application/json",
        headers=CORS_HEADERS,
    )


@router.get("/", response_model=None)
async def diagnostic_page(request: Request) -> Response:
    """Página de teste manual para acesso direto pelo navegador.

    Returns:
        HTML de diagnóstico, ou 405 se o GET trouxer body.
    """
    raw_body = await request.body()
    if raw_body:
        return _reject_method(request)

    return HTMLResponse(
        content=render_diagnostic_page(get_n8n_settings().webhook.is_configured),
        headers=CORS_HEADERS,
    )


@router.api_route("/", methods=["PUT", "PATCH", "DELETE"], response_model=None)
async def reject_method(request: Request) -> Response:
    """Qualquer verbo fora de POST/OPTIONS/GET-sem-body."""
    return _reject_method(request)


@router.post("/", response_model=None)
async def receive_city_selection(request: Request) -> Response:
    """Recebe a seleção de rota e repassa ao n8n.

    Validações:
    1. Body é um objeto JSON não vazio

    Returns:
        JSONResponse com o resultado (200), ou 400 para payload inválido.
    """
    raw_body = await request.body()

    try:
        data = parse_city_selection(raw_body)
    except RelayRequestError as exc:
        logger.warning(
            "city_selection_invalid",
            extra={"error": str(exc), "payload_size": len(raw_body)},
        )
        return _error_response(exc)

    logger.info("city_selection_received", extra={"payload_size": len(raw_body)})

    try:
        body = await _get_relay_use_case().execute(data, _request_metadata(request))
    except Exception:
        logger.exception("city_route_processing_failed")
        body = {
            "success": False,
            "error": DELIVERY_FAILED_ERROR,
            "n8n_error": "internal_error",
            "received_data": data,
            "timestamp": format_timestamp(datetime.now()),
        }

    return _json_response(body)
