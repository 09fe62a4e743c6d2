"""Protocolo do log de diagnóstico (best-effort, nunca levanta)."""

from __future__ import annotations

from typing import Any, Protocol


class DiagnosticLogProtocol(Protocol):
    """Registra uma mensagem e dados arbitrários."""

    def record(self, message: str, data: Any) -> None: ...
