"""Decodificação JSON estrita (RFC 8259).

`json.loads` aceita `NaN`, `Infinity`, `-Infinity` e números que estouram
para `inf` (ex: `1e400`). Esses valores quebram a re-serialização para o
cliente e para o n8n, então são rejeitados já na entrada.
"""

from __future__ import annotations

import json
import math
from typing import Any

# Mesmo limite de aninhamento do decoder do serviço original
MAX_NESTING_DEPTH = 512


class StrictJsonError(ValueError):
    """JSON fora do padrão ou aninhado além do limite."""


def _reject_constant(token: str) -> Any:
    raise StrictJsonError(f"non_standard_constant:{token}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise StrictJsonError(f"non_finite_number:{token}")
    return value


def nesting_depth_exceeds(value: Any, limit: int) -> bool:
    """Verifica (sem recursão) se objetos/arrays aninham além de `limit`."""
    stack: list[tuple[Any, int]] = [(value, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, dict):
            children = list(current.values())
        elif isinstance(current, list):
            children = current
        else:
            continue
        if depth > limit:
            return True
        stack.extend((child, depth + 1) for child in children)
    return False


def loads_strict(raw: str | bytes, max_depth: int | None = None) -> Any:
    """Decodifica JSON rejeitando constantes não padrão e números não finitos.

    Args:
        raw: Documento JSON.
        max_depth: Limite de aninhamento de objetos/arrays (None = sem limite
            além do imposto pelo próprio decoder).

    Raises:
        ValueError: JSON inválido (StrictJsonError para os casos estritos,
            inclusive aninhamento profundo demais para o decoder).
    """
    try:
        value = json.loads(
            raw,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except RecursionError as exc:
        raise StrictJsonError("nesting_too_deep") from exc

    if max_depth is not None and nesting_depth_exceeds(value, max_depth):
        raise StrictJsonError("nesting_too_deep")
    return value
