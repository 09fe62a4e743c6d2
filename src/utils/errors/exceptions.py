"""Exceções de domínio do relay de rotas."""

from __future__ import annotations


class RelayRequestError(ValueError):
    """Base para requisições rejeitadas antes de qualquer processamento.

    `str(exc)` carrega um código interno (para logs); `public_message` é o
    texto devolvido ao cliente.
    """

    status_code: int = 400
    public_message: str = "Bad request"


class MethodNotAllowedError(RelayRequestError):
    """Verbo HTTP diferente de POST/OPTIONS."""

    status_code = 405
    public_message = "Only POST method allowed"


class InvalidPayloadError(RelayRequestError):
    """Body ausente, JSON inválido, não-objeto ou objeto vazio."""

    status_code = 400
    public_message = "Invalid JSON data"


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente ou inválida."""
