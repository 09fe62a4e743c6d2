"""Factory do use case de repasse de rota com dependências concretas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.n8n import create_n8n_webhook_client
from api.normalizers.city_selection import CityRouteNormalizer
from app.infra.diagnostics import DiagnosticFileLog, NullDiagnosticLog
from app.use_cases.city_route import RelayCityRouteUseCase
from config.settings import get_diagnostic_log_settings, get_n8n_settings

if TYPE_CHECKING:
    from app.protocols import DiagnosticLogProtocol
    from config.settings import DiagnosticLogSettings, N8nSettings


def create_diagnostic_log(
    settings: DiagnosticLogSettings | None = None,
) -> DiagnosticLogProtocol:
    """Cria o log de diagnóstico conforme DIAGNOSTIC_LOG_*."""
    log_settings = settings or get_diagnostic_log_settings()
    if not log_settings.enabled:
        return NullDiagnosticLog()
    return DiagnosticFileLog(log_settings.path)


def create_relay_city_route_use_case(
    n8n_settings: N8nSettings | None = None,
    diagnostic_log_settings: DiagnosticLogSettings | None = None,
) -> RelayCityRouteUseCase:
    """Monta RelayCityRouteUseCase com implementações reais.

    Args:
        n8n_settings: Settings do destino. Se None, carrega do ambiente.
        diagnostic_log_settings: Settings do log. Se None, carrega do ambiente.
    """
    n8n = n8n_settings or get_n8n_settings()
    return RelayCityRouteUseCase(
        webhook=n8n.webhook,
        normalizer=CityRouteNormalizer(),
        delivery_client=create_n8n_webhook_client(n8n),
        diagnostic_log=create_diagnostic_log(diagnostic_log_settings),
    )
