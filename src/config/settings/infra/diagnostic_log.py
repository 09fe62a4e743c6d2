"""Settings do log de diagnóstico.

Arquivo local append-only com o rastro de cada seleção recebida e de cada
tentativa de entrega ao n8n. Nunca é lido de volta pelo serviço.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DIAGNOSTIC_LOG_PATH: str = "webhook_city_log.txt"


@dataclass(frozen=True)
class DiagnosticLogSettings:
    """Configurações do log de diagnóstico.

    Attributes:
        enabled: Se False, nenhuma entrada é gravada
        path: Caminho do arquivo de log
    """

    enabled: bool = True
    path: str = DEFAULT_DIAGNOSTIC_LOG_PATH

    def validate(self) -> list[str]:
        """Valida configurações do log de diagnóstico.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if self.enabled and not self.path:
            errors.append("DIAGNOSTIC_LOG_PATH não pode ser vazio com log habilitado")
        return errors


def _load_diagnostic_log_from_env() -> DiagnosticLogSettings:
    """Carrega DiagnosticLogSettings de variáveis de ambiente."""
    return DiagnosticLogSettings(
        enabled=os.getenv("DIAGNOSTIC_LOG_ENABLED", "true").lower() in ("true", "1", "yes"),
        path=os.getenv("DIAGNOSTIC_LOG_PATH", DEFAULT_DIAGNOSTIC_LOG_PATH),
    )


@lru_cache(maxsize=1)
def get_diagnostic_log_settings() -> DiagnosticLogSettings:
    """Retorna instância cacheada de DiagnosticLogSettings."""
    return _load_diagnostic_log_from_env()
