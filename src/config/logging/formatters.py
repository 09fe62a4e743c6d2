"""Formatter JSON dos logs operacionais.

Campos presentes em toda linha:
- asctime, level, logger, message
- correlation_id, service

Payloads de usuário não entram aqui: o conteúdo bruto das seleções vai
apenas para o log de diagnóstico em arquivo.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável para facilitar leitura em `jq`/Cloud Logging
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "2026-10-18 10:30:00,120", "level": "INFO",
         "logger": "api.routes.city_route.webhook", "message": "route_delivered",
         "correlation_id": "abc-123", "service": "city-route-relay",
         "http_status": 200}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
