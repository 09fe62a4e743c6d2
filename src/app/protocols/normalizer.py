"""Protocolo de normalização da seleção de rota."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.city_route import CityRouteEvent, RequestMetadata


class CityRouteNormalizerProtocol(Protocol):
    """Contrato mínimo para montar o envelope canônico."""

    def normalize(
        self,
        data: Mapping[str, Any],
        request_meta: RequestMetadata,
    ) -> CityRouteEvent: ...
