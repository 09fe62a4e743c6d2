"""Resultado tipado de uma tentativa de entrega ao webhook de destino."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

FailureKind = Literal["transport", "http"]


@dataclass(frozen=True, slots=True)
class DeliverySuccess:
    """n8n respondeu com status em [200, 400).

    Attributes:
        response: Body parseado como JSON, ou texto bruto se não for JSON
        http_status: Status HTTP recebido
        raw_body: Body bruto (para o log de diagnóstico)
        payload_size: Tamanho em bytes do envelope enviado
    """

    response: Any
    http_status: int
    raw_body: str = ""
    payload_size: int = 0

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class DeliveryFailure:
    """Falha de transporte ou status HTTP fora de [200, 400).

    Attributes:
        reason: Descrição do erro de transporte, ou "HTTP <status>"
        kind: transport (DNS, conexão, TLS, timeout) ou http
        http_status: Status recebido (None em falha de transporte)
        raw_body: Body bruto recebido (None em falha de transporte)
        payload_size: Tamanho em bytes do envelope enviado
    """

    reason: str
    kind: FailureKind
    http_status: int | None = None
    raw_body: str | None = None
    payload_size: int = 0

    @property
    def success(self) -> bool:
        return False


DeliveryOutcome = DeliverySuccess | DeliveryFailure
