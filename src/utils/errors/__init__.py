"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    MailConfigurationError,
    RedisConnectionError,
)

__all__ = [
    "InfrastructureError",
    "MailConfigurationError",
    "RedisConnectionError",
]
