"""Agregador de settings do Firma Relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.abuse import (
    AbuseProtectionSettings,
    RateLimitBackend,
    get_abuse_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.email import (
    EmailSettings,
    get_email_settings,
)
from config.settings.http import (
    HttpSettings,
    get_http_settings,
    parse_byte_size,
    parse_origins,
)
from config.settings.signature import (
    SignatureSettings,
    get_signature_settings,
)

__all__ = [
    # Anti-abuso
    "AbuseProtectionSettings",
    # Base
    "BaseSettings",
    # Email
    "EmailSettings",
    "Environment",
    # HTTP
    "HttpSettings",
    "RateLimitBackend",
    # Assinatura
    "SignatureSettings",
    "clear_settings_cache",
    "get_abuse_settings",
    "get_base_settings",
    "get_email_settings",
    "get_http_settings",
    "get_signature_settings",
    "parse_byte_size",
    "parse_origins",
]


def clear_settings_cache() -> None:
    """Limpa o cache de todas as settings (útil em testes)."""
    for getter in (
        get_abuse_settings,
        get_base_settings,
        get_email_settings,
        get_http_settings,
        get_signature_settings,
    ):
        getter.cache_clear()
