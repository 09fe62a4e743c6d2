"""Parse e validação inicial da requisição de seleção de rota."""

from __future__ import annotations

from typing import Any

from utils.errors import InvalidPayloadError
from utils.json_strict import MAX_NESTING_DEPTH, loads_strict


def parse_city_selection(raw_body: bytes) -> dict[str, Any]:
    """Parseia o body como objeto JSON não vazio.

    Um objeto vazio `{}` é rejeitado como payload inválido, assim como
    qualquer valor JSON que não seja objeto. `NaN`/`Infinity`, números não
    finitos e aninhamento acima de MAX_NESTING_DEPTH contam como JSON inválido.

    Args:
        raw_body: Corpo bruto do request

    Raises:
        InvalidPayloadError: Se o body não for um objeto JSON com conteúdo

    Returns:
        Seleção como dict
    """
    if not raw_body or not raw_body.strip():
        raise InvalidPayloadError("empty_body")

    try:
        payload = loads_strict(raw_body, max_depth=MAX_NESTING_DEPTH)
    except ValueError as exc:
        raise InvalidPayloadError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidPayloadError("payload_not_object")

    if not payload:
        raise InvalidPayloadError("empty_payload")

    return payload
