"""Normalizer da seleção de cidades do mini-app Telegram.

Responsabilidades:
- Ler campos aninhados de origem/destino sem exigir nenhum deles
- Aplicar defaults documentados ("unknown", "", telegram_web_app)
- Classificar a rota como domestic/international
- Montar o envelope canônico CityRouteEvent
"""

from .normalizer import (
    CityRouteNormalizer,
    classify_route_scope,
    normalize_city_selection,
)

__all__ = [
    "CityRouteNormalizer",
    "classify_route_scope",
    "normalize_city_selection",
]
