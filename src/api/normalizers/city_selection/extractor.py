"""Leitura tolerante de campos da seleção de cidades enviada pelo mini-app.

Nenhum campo é obrigatório. Chave ausente, valor `null` ou nível intermediário
que não seja objeto resultam no default, nunca em erro.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.city_route import UNKNOWN, RouteEndpoint


def lookup(data: Any, *path: str, default: Any = None) -> Any:
    """Percorre `path` em mapas aninhados; retorna `default` se algo faltar."""
    current = data
    for key in path:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def has_route(data: Mapping[str, Any]) -> bool:
    """Rota só existe quando origem e destino foram enviados."""
    return data.get("origin") is not None and data.get("destination") is not None


def extract_endpoint(data: Mapping[str, Any], side: str) -> RouteEndpoint:
    """Extrai país/cidade de `origin` ou `destination`."""
    return RouteEndpoint(
        country=lookup(data, side, "country", "name", default=UNKNOWN),
        country_code=lookup(data, side, "country", "code", default=UNKNOWN),
        city=lookup(data, side, "city", "name", default=UNKNOWN),
        city_code=lookup(data, side, "city", "code", default=UNKNOWN),
        city_population=lookup(data, side, "city", "population", default=UNKNOWN),
    )


def extract_country_code(data: Mapping[str, Any], side: str) -> Any:
    """Código do país para classificação da rota (ausente = string vazia)."""
    return lookup(data, side, "country", "code", default="")
