"""Exceções de infraestrutura compartilhadas."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class MailConfigurationError(InfrastructureError):
    """Transporte de email sem credenciais ou destinatário."""
