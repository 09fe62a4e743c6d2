"""Protocolos e contratos do core da aplicação."""

from .delivery_client import DeliveryClientProtocol
from .diagnostic_log import DiagnosticLogProtocol
from .normalizer import CityRouteNormalizerProtocol

__all__ = [
    "CityRouteNormalizerProtocol",
    "DeliveryClientProtocol",
    "DiagnosticLogProtocol",
]
