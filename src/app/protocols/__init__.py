"""Protocolos e contratos do core da aplicação."""

from .mail_sender import MailSenderProtocol
from .models import EmailAttachment, MailSendResult, OutboundEmail, WindowHit
from .rate_limit_store import RateLimitStoreProtocol

__all__ = [
    "EmailAttachment",
    "MailSendResult",
    "MailSenderProtocol",
    "OutboundEmail",
    "RateLimitStoreProtocol",
    "WindowHit",
]
