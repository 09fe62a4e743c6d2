"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    InvalidPayloadError,
    MethodNotAllowedError,
    RelayRequestError,
)

__all__ = [
    "ConfigurationError",
    "InvalidPayloadError",
    "MethodNotAllowedError",
    "RelayRequestError",
]
