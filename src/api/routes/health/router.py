"""Endpoints de health check e readiness."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_n8n_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="city-route-relay",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: pronto apenas com webhook n8n configurado."""
    n8n_check = _check_n8n_webhook()
    ready = n8n_check.status == "ok"
    if not ready:
        logger.warning("readiness_n8n_not_configured", extra={"error": n8n_check.error})

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"n8n_webhook": n8n_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_n8n_webhook() -> DependencyCheck:
    webhook = get_n8n_settings().webhook
    if webhook.is_configured:
        return DependencyCheck(status="ok")
    return DependencyCheck(status="failed", error=f"not_configured:{webhook.reason}")
