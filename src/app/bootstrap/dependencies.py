"""Factories — criação das implementações concretas conforme settings.

Composition root: nenhuma outra camada instancia stores, policies ou o
transporte de email diretamente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.validators.signature import SignatureLimits
from app.bootstrap.clients import create_async_redis_client
from app.infra.mail import SmtpMailSender
from app.infra.stores import MemoryRateLimitStore, RedisRateLimitStore
from app.policies import FixedWindowRateLimiter, SlowDownPolicy
from app.use_cases.signature import SendSignatureUseCase
from config.settings import (
    get_abuse_settings,
    get_email_settings,
    get_signature_settings,
)

if TYPE_CHECKING:
    from app.protocols.mail_sender import MailSenderProtocol
    from app.protocols.rate_limit_store import RateLimitStoreProtocol

logger = logging.getLogger(__name__)


def create_rate_limit_store() -> RateLimitStoreProtocol:
    """Cria store de contadores baseado em RATE_LIMIT_BACKEND.

    - "memory": MemoryRateLimitStore (dev only)
    - "redis": RedisRateLimitStore (staging/production)
    """
    backend = get_abuse_settings().backend

    if backend == "redis":
        store: RateLimitStoreProtocol = RedisRateLimitStore(create_async_redis_client())
    else:
        store = MemoryRateLimitStore()

    logger.info("rate_limit_store_created", extra={"backend": backend})
    return store


def create_rate_limiter(store: RateLimitStoreProtocol) -> FixedWindowRateLimiter:
    """Cria o limiter do endpoint de assinatura."""
    settings = get_abuse_settings()
    return FixedWindowRateLimiter(
        store,
        max_requests=settings.rate_limit_max,
        window_seconds=settings.rate_limit_window_seconds,
        key_prefix="send-signature:rl",
    )


def create_slow_down(store: RateLimitStoreProtocol) -> SlowDownPolicy:
    """Cria a política de slow-down do endpoint de assinatura."""
    settings = get_abuse_settings()
    return SlowDownPolicy(
        store,
        delay_after=settings.slowdown_after,
        delay_ms=settings.slowdown_delay_ms,
        window_seconds=settings.rate_limit_window_seconds,
        key_prefix="send-signature:sd",
    )


def create_mail_sender() -> SmtpMailSender:
    """Cria o transporte SMTP (sem conectar)."""
    return SmtpMailSender(get_email_settings())


def create_send_signature_use_case(
    sender: MailSenderProtocol | None = None,
) -> SendSignatureUseCase:
    """Cria o use case de envio de assinatura.

    Args:
        sender: Transporte alternativo (testes); padrão SMTP.
    """
    email_settings = get_email_settings()
    signature_settings = get_signature_settings()
    return SendSignatureUseCase(
        sender or create_mail_sender(),
        sender_address=email_settings.smtp_username,
        recipient=email_settings.recipient,
        limits=SignatureLimits(
            min_bytes=signature_settings.min_bytes,
            max_bytes=signature_settings.max_bytes,
        ),
        timezone=signature_settings.timezone,
        from_name=email_settings.from_name,
    )
