"""Normalizer da seleção de cidades: payload bruto → CityRouteEvent.

Função pura: o resultado depende apenas do payload, dos metadados de
transporte e do instante informado. Sem IO e sem modo de falha.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from api.normalizers.city_selection.extractor import (
    extract_country_code,
    extract_endpoint,
    has_route,
    lookup,
)
from app.domain.city_route import (
    DEFAULT_SOURCE,
    UNKNOWN,
    CityRouteEvent,
    EventMetadata,
    RequestMetadata,
    RouteDetails,
    RouteScope,
    format_timestamp,
)


def classify_route_scope(data: Mapping[str, Any]) -> RouteScope:
    """Classifica a rota comparando os códigos de país de origem e destino.

    Igualdade estrita (tipo e valor, sensível a maiúsculas). Dois códigos
    ausentes comparam como "" == "" e resultam em `domestic`.
    """
    origin_code = extract_country_code(data, "origin")
    destination_code = extract_country_code(data, "destination")
    if type(origin_code) is type(destination_code) and origin_code == destination_code:
        return "domestic"
    return "international"


def normalize_city_selection(
    data: Mapping[str, Any],
    request_meta: RequestMetadata,
    now: datetime,
) -> CityRouteEvent:
    """Constrói o envelope canônico a partir da seleção recebida.

    Args:
        data: Seleção bruta (JSON do mini-app), possivelmente parcial.
        request_meta: Endereço remoto, user-agent e host da requisição.
        now: Instante de geração do evento.

    Returns:
        CityRouteEvent com todos os campos documentados preenchidos.
    """
    timestamp = format_timestamp(now)

    route: RouteDetails | None = None
    route_scope: RouteScope | None = None
    if has_route(data):
        route = RouteDetails(
            origin=extract_endpoint(data, "origin"),
            destination=extract_endpoint(data, "destination"),
            display_text=lookup(data, "display_text", default=""),
            display_text_en=lookup(data, "display_text_en", default=""),
        )
        route_scope = classify_route_scope(data)

    metadata = EventMetadata(
        ip_address=lookup(data, "ip_address", default=request_meta.remote_address or UNKNOWN),
        user_agent=request_meta.user_agent or UNKNOWN,
        server_name=request_meta.server_name or UNKNOWN,
        processed_at=timestamp,
    )

    return CityRouteEvent(
        timestamp=timestamp,
        server_time=int(now.timestamp()),
        source=lookup(data, "source", default=DEFAULT_SOURCE),
        action=lookup(data, "action", default=UNKNOWN),
        route_type=lookup(data, "route_type", default=UNKNOWN),
        route=route,
        route_type_detailed=route_scope,
        telegram_user=copy.deepcopy(data.get("telegram_user")),
        metadata=metadata,
    )


class CityRouteNormalizer:
    """Adapter com relógio injetável para o use case."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def normalize(
        self,
        data: Mapping[str, Any],
        request_meta: RequestMetadata,
    ) -> CityRouteEvent:
        return normalize_city_selection(data, request_meta, self._clock())
