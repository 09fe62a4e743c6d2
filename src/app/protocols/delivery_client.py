"""Protocolo do cliente de entrega de eventos.

Evita dependência direta do app na camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.city_route import CityRouteEvent
    from app.domain.delivery import DeliveryOutcome


class DeliveryClientProtocol(Protocol):
    """Contrato mínimo para entrega de um evento a uma URL."""

    async def deliver(self, url: str, event: CityRouteEvent) -> DeliveryOutcome: ...
