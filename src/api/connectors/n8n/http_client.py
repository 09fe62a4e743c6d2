"""Cliente HTTP de entrega de eventos ao webhook n8n.

Uma única tentativa por evento, sem retry nem backoff:
- Timeout total configurável (padrão 30s)
- Verificação de certificado e hostname TLS sempre ativa
- Redirects não são seguidos (3xx conta como sucesso)
- Falha de transporte e falha HTTP são classificadas separadamente
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from app.domain.delivery import DeliveryFailure, DeliveryOutcome, DeliverySuccess
from config.settings.n8n import DEFAULT_REQUEST_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from utils.json_strict import loads_strict

if TYPE_CHECKING:
    from app.domain.city_route import CityRouteEvent
    from config.settings import N8nSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class N8nClientConfig:
    """Configuração do cliente de entrega."""

    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT


def encode_event(event: CityRouteEvent) -> bytes:
    """Serializa o envelope como JSON UTF-8."""
    return json.dumps(event.to_dict(), ensure_ascii=False).encode("utf-8")


def _parse_response_body(response: httpx.Response) -> Any:
    try:
        return loads_strict(response.content)
    except ValueError:
        return response.text


def _describe_transport_error(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class N8nWebhookClient:
    """Envia CityRouteEvent ao n8n e classifica o resultado."""

    def __init__(
        self,
        config: N8nClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            config: Timeout e User-Agent
            http_client: Cliente httpx externo (testes). Se None, um cliente
                novo é aberto e fechado a cada entrega.
        """
        self._config = config or N8nClientConfig()
        self._http_client = http_client

    async def deliver(self, url: str, event: CityRouteEvent) -> DeliveryOutcome:
        """Entrega o evento. Nunca levanta exceção.

        Returns:
            DeliverySuccess para status em [200, 400); DeliveryFailure caso
            contrário ou em erro de transporte.
        """
        body = encode_event(event)
        payload_size = len(body)

        try:
            response = await self._post(url, body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            reason = _describe_transport_error(exc)
            logger.warning(
                "n8n_delivery_transport_error",
                extra={"error_type": type(exc).__name__, "payload_size": payload_size},
            )
            return DeliveryFailure(reason=reason, kind="transport", payload_size=payload_size)

        status_code = response.status_code
        if 200 <= status_code < 400:
            logger.info(
                "n8n_delivery_succeeded",
                extra={"http_status": status_code, "payload_size": payload_size},
            )
            return DeliverySuccess(
                response=_parse_response_body(response),
                http_status=status_code,
                raw_body=response.text,
                payload_size=payload_size,
            )

        logger.warning(
            "n8n_delivery_http_error",
            extra={"http_status": status_code, "payload_size": payload_size},
        )
        return DeliveryFailure(
            reason=f"HTTP {status_code}",
            kind="http",
            http_status=status_code,
            raw_body=response.text,
            payload_size=payload_size,
        )

    async def _post(self, url: str, body: bytes) -> httpx.Response:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self._config.user_agent,
        }
        if self._http_client is not None:
            return await self._http_client.post(
                url,
                content=body,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )

        async with httpx.AsyncClient(
            verify=True,
            follow_redirects=False,
            timeout=self._config.timeout_seconds,
        ) as client:
            return await client.post(url, content=body, headers=headers)


def create_n8n_webhook_client(settings: N8nSettings | None = None) -> N8nWebhookClient:
    """Factory para criar cliente n8n com config do ambiente.

    Args:
        settings: N8nSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_n8n_settings

    n8n = settings or get_n8n_settings()
    return N8nWebhookClient(
        config=N8nClientConfig(
            timeout_seconds=n8n.request_timeout_seconds,
            user_agent=n8n.user_agent,
        )
    )
