"""Use cases do repasse de seleção de rota."""

from .relay_city_route import (
    DELIVERY_FAILED_ERROR,
    NOT_CONFIGURED_ERROR,
    SUCCESS_MESSAGE,
    RelayCityRouteUseCase,
    build_delivery_summary,
)

__all__ = [
    "DELIVERY_FAILED_ERROR",
    "NOT_CONFIGURED_ERROR",
    "SUCCESS_MESSAGE",
    "RelayCityRouteUseCase",
    "build_delivery_summary",
]
