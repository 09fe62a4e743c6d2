"""Use case de repasse da seleção de rota para o n8n.

Fluxo:
1. Registra a seleção recebida no log de diagnóstico
2. Verifica se o webhook de destino está configurado
3. Normaliza a seleção para CityRouteEvent
4. Entrega ao n8n (uma tentativa)
5. Registra o resultado da entrega no log de diagnóstico
6. Monta o body da resposta

Toda falha vira um body estruturado com `success: false`; nada é propagado.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from app.domain.city_route import format_timestamp, generate_route_id
from app.domain.delivery import DeliveryFailure, DeliveryOutcome
from config.settings.n8n import ConfiguredWebhook

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.city_route import RequestMetadata
    from app.protocols import (
        CityRouteNormalizerProtocol,
        DeliveryClientProtocol,
        DiagnosticLogProtocol,
    )
    from config.settings.n8n import WebhookTarget

logger = logging.getLogger(__name__)

INBOUND_LOG_MESSAGE = "City selection received:"
DELIVERY_LOG_MESSAGE = "City data sent to n8n:"

SUCCESS_MESSAGE = "City route data sent to n8n successfully"
DELIVERY_FAILED_ERROR = "Failed to send city route to n8n"
NOT_CONFIGURED_ERROR = "N8N webhook URL not configured"


def build_delivery_summary(url: str, outcome: DeliveryOutcome) -> dict[str, Any]:
    """Resumo da tentativa de entrega para o log de diagnóstico."""
    transport_error = (
        outcome.reason
        if isinstance(outcome, DeliveryFailure) and outcome.kind == "transport"
        else ""
    )
    return {
        "url": url,
        "payload_size": outcome.payload_size,
        "http_code": outcome.http_status or 0,
        "response": outcome.raw_body or "",
        "error": transport_error,
    }


class RelayCityRouteUseCase:
    """Orquestra normalização, entrega e montagem da resposta."""

    def __init__(
        self,
        *,
        webhook: WebhookTarget,
        normalizer: CityRouteNormalizerProtocol,
        delivery_client: DeliveryClientProtocol,
        diagnostic_log: DiagnosticLogProtocol,
        clock: Callable[[], datetime] = datetime.now,
        route_id_factory: Callable[[], str] = generate_route_id,
    ) -> None:
        self._webhook = webhook
        self._normalizer = normalizer
        self._delivery_client = delivery_client
        self._diagnostic_log = diagnostic_log
        self._clock = clock
        self._route_id_factory = route_id_factory

    async def execute(
        self,
        data: Mapping[str, Any],
        request_meta: RequestMetadata,
    ) -> dict[str, Any]:
        """Processa uma seleção já validada.

        Args:
            data: Seleção recebida (objeto JSON não vazio)
            request_meta: Metadados de transporte da requisição

        Returns:
            Body JSON da resposta (sempre servido com status 200).
        """
        await self._record(INBOUND_LOG_MESSAGE, data)

        if not isinstance(self._webhook, ConfiguredWebhook):
            logger.warning(
                "n8n_webhook_not_configured",
                extra={"reason": self._webhook.reason},
            )
            return {
                "success": False,
                "error": NOT_CONFIGURED_ERROR,
                "received_data": data,
                "timestamp": self._now(),
            }

        url = self._webhook.url
        event = self._normalizer.normalize(data, request_meta)
        outcome = await self._delivery_client.deliver(url, event)
        await self._record(DELIVERY_LOG_MESSAGE, build_delivery_summary(url, outcome))

        if isinstance(outcome, DeliveryFailure):
            logger.warning(
                "city_route_relay_failed",
                extra={"failure_kind": outcome.kind, "http_status": outcome.http_status},
            )
            return {
                "success": False,
                "error": DELIVERY_FAILED_ERROR,
                "n8n_error": outcome.reason,
                "received_data": data,
                "timestamp": self._now(),
            }

        route_id = self._route_id_factory()
        logger.info(
            "city_route_relayed",
            extra={
                "route_id": route_id,
                "http_status": outcome.http_status,
                "route_type_detailed": event.route_type_detailed,
            },
        )
        return {
            "success": True,
            "message": SUCCESS_MESSAGE,
            "n8n_response": outcome.response,
            "timestamp": self._now(),
            "route_id": route_id,
        }

    def _now(self) -> str:
        return format_timestamp(self._clock())

    async def _record(self, message: str, data: Any) -> None:
        # Escrita em arquivo fora do event loop; record() já engole falhas
        await asyncio.to_thread(self._diagnostic_log.record, message, data)
