"""Connector de saída para o webhook de automação n8n."""

from app.domain.delivery import DeliveryFailure, DeliveryOutcome, DeliverySuccess, FailureKind

from .http_client import (
    N8nClientConfig,
    N8nWebhookClient,
    create_n8n_webhook_client,
    encode_event,
)

__all__ = [
    "DeliveryFailure",
    "DeliveryOutcome",
    "DeliverySuccess",
    "FailureKind",
    "N8nClientConfig",
    "N8nWebhookClient",
    "create_n8n_webhook_client",
    "encode_event",
]
