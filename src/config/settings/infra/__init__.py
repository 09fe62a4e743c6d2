"""Agregador de settings de infraestrutura local.

Re-exporta as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.diagnostic_log import (
    DEFAULT_DIAGNOSTIC_LOG_PATH,
    DiagnosticLogSettings,
    get_diagnostic_log_settings,
)

__all__ = [
    "DEFAULT_DIAGNOSTIC_LOG_PATH",
    "DiagnosticLogSettings",
    "get_diagnostic_log_settings",
]
