"""Router do webhook de seleção de rota."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.city_route.webhook import router as webhook_router

router = APIRouter()

# OPTIONS/POST/GET na raiz do serviço
router.include_router(webhook_router)
