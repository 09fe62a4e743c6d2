"""Agregador de rotas: registra os routers do serviço.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.city_route.router import router as city_route_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (/health e /ready)
    api_router.include_router(health_router, tags=["health"])

    # Webhook de seleção de rota na raiz do serviço
    api_router.include_router(city_route_router, tags=["city_route"])

    return api_router
