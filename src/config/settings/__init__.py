"""Agregador de settings do relay de rotas.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    DEFAULT_DIAGNOSTIC_LOG_PATH,
    DiagnosticLogSettings,
    get_diagnostic_log_settings,
)

# Destino n8n
from config.settings.n8n import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    PLACEHOLDER_MARKER,
    ConfiguredWebhook,
    N8nSettings,
    UnconfiguredWebhook,
    WebhookTarget,
    get_n8n_settings,
    resolve_webhook_target,
)

__all__ = [
    # Constants
    "DEFAULT_DIAGNOSTIC_LOG_PATH",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    "PLACEHOLDER_MARKER",
    # Base
    "BaseSettings",
    "ConfiguredWebhook",
    # Infrastructure
    "DiagnosticLogSettings",
    "Environment",
    # n8n
    "N8nSettings",
    "UnconfiguredWebhook",
    "WebhookTarget",
    "get_base_settings",
    "get_diagnostic_log_settings",
    "get_n8n_settings",
    "resolve_webhook_target",
]
