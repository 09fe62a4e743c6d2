"""Connector de entrada: requisições do mini-app de seleção de cidades."""

from .receive import parse_city_selection

__all__ = ["parse_city_selection"]
