"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- city_selection/: seleção origem/destino enviada pelo mini-app Telegram
"""

from .city_selection import CityRouteNormalizer, normalize_city_selection

__all__ = [
    "CityRouteNormalizer",
    "normalize_city_selection",
]
