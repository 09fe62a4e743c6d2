"""Log de diagnóstico append-only em arquivo local.

Cada chamada abre o arquivo, grava um bloco inteiro em uma única escrita e
fecha. O lock serializa escritas concorrentes do mesmo processo. Falhas de
escrita são registradas no log estruturado e nunca chegam ao chamador.

Formato do bloco:
    2026-10-18 10:30:00 - City selection received:
    { ...json indentado... }
    --------------------------------------------------------------------------------
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from app.domain.city_route import format_timestamp

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 80

# Compartilhado entre instâncias: várias podem apontar para o mesmo arquivo
_APPEND_LOCK = threading.Lock()


def format_entry(message: str, data: Any, moment: datetime) -> str:
    """Monta o bloco de texto de uma entrada."""
    dump = json.dumps(data, ensure_ascii=False, indent=2, default=str)
    return f"{format_timestamp(moment)} - {message}\n{dump}\n\n{SEPARATOR}\n"


class DiagnosticFileLog:
    """Grava entradas de diagnóstico em `path` (best-effort)."""

    def __init__(
        self,
        path: str | Path,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._path = Path(path)
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def record(self, message: str, data: Any) -> None:
        """Acrescenta uma entrada ao arquivo. Nunca levanta exceção."""
        try:
            entry = format_entry(message, data, self._clock())
            with _APPEND_LOCK, self._path.open("a", encoding="utf-8") as handle:
                handle.write(entry)
        except Exception as exc:
            logger.warning(
                "diagnostic_log_write_failed",
                extra={"path": str(self._path), "error_type": type(exc).__name__},
            )


class NullDiagnosticLog:
    """Implementação sem efeito, usada com DIAGNOSTIC_LOG_ENABLED=false."""

    def record(self, message: str, data: Any) -> None:
        return None
