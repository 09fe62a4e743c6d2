"""Settings do webhook n8n de destino.

O destino é resolvido uma única vez no carregamento das settings para um
estado tipado (UnconfiguredWebhook | ConfiguredWebhook). Handlers nunca
inspecionam a URL em string para decidir se ela é válida.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from urllib.parse import urlsplit

# Marcador deixado no template de deploy quando a URL real não foi preenchida
PLACEHOLDER_MARKER: str = "your-n8n-domain"

DEFAULT_USER_AGENT: str = "Telegram-City-Selection-Webhook/1.0"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0


@dataclass(frozen=True, slots=True)
class UnconfiguredWebhook:
    """Nenhuma URL de webhook utilizável foi configurada."""

    reason: str = "missing"

    @property
    def is_configured(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class ConfiguredWebhook:
    """URL de webhook pronta para receber eventos."""

    url: str

    @property
    def is_configured(self) -> bool:
        return True


WebhookTarget = UnconfiguredWebhook | ConfiguredWebhook


def resolve_webhook_target(raw_url: str | None) -> WebhookTarget:
    """Converte o valor bruto de configuração em WebhookTarget.

    Args:
        raw_url: Valor de N8N_WEBHOOK_URL (pode ser None ou vazio).

    Returns:
        UnconfiguredWebhook se vazio ou ainda com o placeholder do template;
        ConfiguredWebhook caso contrário.
    """
    url = (raw_url or "").strip()
    if not url:
        return UnconfiguredWebhook(reason="missing")
    if PLACEHOLDER_MARKER in url:
        return UnconfiguredWebhook(reason="placeholder")
    return ConfiguredWebhook(url=url)


@dataclass(frozen=True)
class N8nSettings:
    """Configurações de entrega para o n8n.

    Attributes:
        webhook: Destino tipado (configurado ou não)
        request_timeout_seconds: Timeout total da requisição outbound
        user_agent: User-Agent fixo enviado ao n8n
    """

    webhook: WebhookTarget = field(default_factory=UnconfiguredWebhook)
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    def validate(self, is_dev: bool = True) -> list[str]:
        """Valida configurações de entrega.

        Args:
            is_dev: Se está em desenvolvimento (webhook ausente só gera erro
                fora de development).

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if isinstance(self.webhook, ConfiguredWebhook):
            if urlsplit(self.webhook.url).scheme != "https":
                errors.append("N8N_WEBHOOK_URL deve usar https://")
        elif not is_dev:
            errors.append(f"N8N_WEBHOOK_URL não configurado ({self.webhook.reason})")

        if self.request_timeout_seconds <= 0:
            errors.append("N8N_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.user_agent:
            errors.append("N8N_USER_AGENT não pode ser vazio")

        return errors


def _load_from_env() -> N8nSettings:
    """Carrega N8nSettings a partir de variáveis de ambiente."""
    return N8nSettings(
        webhook=resolve_webhook_target(os.getenv("N8N_WEBHOOK_URL")),
        request_timeout_seconds=float(
            os.getenv("N8N_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        ),
        user_agent=os.getenv("N8N_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_n8n_settings() -> N8nSettings:
    """Retorna instância cacheada de N8nSettings.

    Lida uma vez no startup; somente leitura depois disso.
    """
    return _load_from_env()
