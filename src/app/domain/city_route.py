"""Modelos de domínio do evento de rota entre cidades.

CityRouteEvent é o envelope canônico enviado ao n8n. É construído uma vez por
requisição pelo normalizer e nunca mutado depois disso.
"""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

EVENT_TYPE = "city_route_selection"
DEFAULT_SOURCE = "telegram_web_app"
UNKNOWN = "unknown"
ROUTE_ID_PREFIX = "ROUTE_"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

RouteScope = Literal["domestic", "international"]


@dataclass(frozen=True, slots=True)
class RequestMetadata:
    """Metadados da camada de transporte, passados explicitamente ao normalizer."""

    remote_address: str | None = None
    user_agent: str | None = None
    server_name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteEndpoint:
    """País e cidade de um lado da rota (origem ou destino)."""

    country: Any = UNKNOWN
    country_code: Any = UNKNOWN
    city: Any = UNKNOWN
    city_code: Any = UNKNOWN
    city_population: Any = UNKNOWN


@dataclass(frozen=True, slots=True)
class RouteDetails:
    """Rota achatada: origem, destino e textos de exibição."""

    origin: RouteEndpoint
    destination: RouteEndpoint
    display_text: Any = ""
    display_text_en: Any = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for side, endpoint in (("origin", self.origin), ("destination", self.destination)):
            payload[f"{side}_country"] = endpoint.country
            payload[f"{side}_country_code"] = endpoint.country_code
            payload[f"{side}_city"] = endpoint.city
            payload[f"{side}_city_code"] = endpoint.city_code
            payload[f"{side}_city_population"] = endpoint.city_population
        payload["display_text"] = self.display_text
        payload["display_text_en"] = self.display_text_en
        return payload


@dataclass(frozen=True, slots=True)
class EventMetadata:
    """Bloco `metadata` do envelope."""

    ip_address: Any
    user_agent: str
    server_name: str
    processed_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "ip_address": self.ip_address,
            "user_agent": self.user_agent,
            "server_name": self.server_name,
            "processed_at": self.processed_at,
        }


@dataclass(frozen=True, slots=True)
class CityRouteEvent:
    """Envelope canônico de seleção de rota.

    Attributes:
        timestamp: Momento de geração (YYYY-MM-DD HH:MM:SS)
        server_time: Momento de geração em segundos Unix
        source: Origem do evento (padrão telegram_web_app)
        action: Ação informada pelo cliente
        route_type: Tipo de rota informado pelo cliente
        route: Presente só quando origem e destino foram enviados
        route_type_detailed: domestic/international, junto com `route`
        telegram_user: Dados opacos do usuário Telegram, quando enviados
        metadata: Metadados de transporte e processamento
    """

    timestamp: str
    server_time: int
    source: Any
    action: Any
    route_type: Any
    metadata: EventMetadata
    route: RouteDetails | None = None
    route_type_detailed: RouteScope | None = None
    telegram_user: Any = None
    event_type: str = EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Serializa na ordem de chaves esperada pelo workflow n8n."""
        payload: dict[str, Any] = {
            "event_type": self.event_type,
            "timestamp": self.timestamp,
            "server_time": self.server_time,
            "source": self.source,
            "action": self.action,
            "route_type": self.route_type,
        }
        if self.route is not None:
            payload["route"] = self.route.to_dict()
            payload["route_type_detailed"] = self.route_type_detailed
        if self.telegram_user is not None:
            payload["telegram_user"] = copy.deepcopy(self.telegram_user)
        payload["metadata"] = self.metadata.to_dict()
        return payload


def format_timestamp(moment: datetime) -> str:
    """Formato legível usado no envelope, nas respostas e no log de diagnóstico."""
    return moment.strftime(TIMESTAMP_FORMAT)


def generate_route_id() -> str:
    """Gera identificador único e legível para a rota aceita (ex: ROUTE_3f2a...)."""
    return f"{ROUTE_ID_PREFIX}{uuid.uuid4().hex}"


__all__ = [
    "DEFAULT_SOURCE",
    "EVENT_TYPE",
    "ROUTE_ID_PREFIX",
    "TIMESTAMP_FORMAT",
    "UNKNOWN",
    "CityRouteEvent",
    "EventMetadata",
    "RequestMetadata",
    "RouteDetails",
    "RouteEndpoint",
    "RouteScope",
    "format_timestamp",
    "generate_route_id",
]
