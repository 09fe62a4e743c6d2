"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from app.bootstrap.city_route_factory import (
    create_diagnostic_log,
    create_relay_city_route_use_case,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_diagnostic_log_settings,
    get_n8n_settings,
)
from utils.errors import ConfigurationError

# Nome do serviço para logs
SERVICE_NAME = "city-route-relay"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        ConfigurationError: Settings inválidas fora de development.
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(
        f"n8n: {error}" for error in get_n8n_settings().validate(is_dev=base.is_development)
    )
    errors.extend(
        f"diagnostic_log: {error}" for error in get_diagnostic_log_settings().validate()
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if not base.is_development:
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfigurationError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "create_diagnostic_log",
    "create_relay_city_route_use_case",
    "initialize_app",
    "validate_runtime_settings",
]
