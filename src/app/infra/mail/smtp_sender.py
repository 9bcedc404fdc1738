"""Envio de email via SMTP (Gmail por padrão).

smtplib é bloqueante: o envio roda em asyncio.to_thread para não travar o
event loop. Credenciais são checadas no primeiro envio, não no boot.
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
import ssl
import time
from email.message import EmailMessage
from email.utils import make_msgid
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, record_latency
from app.protocols.models import MailSendResult
from utils.errors import MailConfigurationError

if TYPE_CHECKING:
    from app.protocols.models import OutboundEmail
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)

# Porta de TLS implícito; as demais usam STARTTLS
SMTPS_PORT = 465


def build_mime_message(message: OutboundEmail, message_id: str | None = None) -> EmailMessage:
    """Converte OutboundEmail em EmailMessage MIME (HTML + anexos)."""
    mime = EmailMessage()
    mime["From"] = message.sender
    mime["To"] = message.recipient
    mime["Subject"] = message.subject
    if message_id:
        mime["Message-ID"] = message_id
    mime.set_content(message.html, subtype="html")
    for attachment in message.attachments:
        maintype, _, subtype = attachment.content_type.partition("/")
        mime.add_attachment(
            attachment.content,
            maintype=maintype,
            subtype=subtype or "octet-stream",
            filename=attachment.filename,
        )
    return mime


class SmtpMailSender:
    """Colaborador de envio: send(message) -> MailSendResult.

    Args:
        settings: EmailSettings com host, porta e credenciais.
    """

    def __init__(self, settings: EmailSettings) -> None:
        self._settings = settings

    @property
    def sender_address(self) -> str:
        """Conta remetente (EMAIL_USER)."""
        return self._settings.smtp_username

    @property
    def recipient(self) -> str:
        """Destinatário fixo (EMAIL_TO)."""
        return self._settings.recipient

    def ensure_configured(self) -> None:
        """Valida credenciais e destinatário.

        Raises:
            MailConfigurationError: Se EMAIL_USER/EMAIL_PASS ou EMAIL_TO faltarem.
        """
        if not self._settings.has_credentials:
            raise MailConfigurationError("EMAIL_USER/EMAIL_PASS não configurados")
        if not self._settings.recipient:
            raise MailConfigurationError("EMAIL_TO não configurado")

    async def send(self, message: OutboundEmail) -> MailSendResult:
        """Envia o email; falhas de transporte viram MailSendResult(success=False).

        Raises:
            MailConfigurationError: Se o transporte não estiver configurado.
        """
        self.ensure_configured()
        message_id = make_msgid(domain=self._settings.smtp_username.partition("@")[2] or None)
        mime = build_mime_message(message, message_id=message_id)

        started_at = time.perf_counter()
        try:
            await asyncio.to_thread(self._deliver, mime)
        except smtplib.SMTPAuthenticationError:
            logger.error("mail_send_auth_failed", extra={"smtp_host": self._settings.smtp_host})
            return MailSendResult(success=False, error="smtp_auth_failed")
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning(
                "mail_send_failed",
                extra={"smtp_host": self._settings.smtp_host, "error_type": type(exc).__name__},
            )
            return MailSendResult(success=False, error=type(exc).__name__)

        record_latency(
            "mail",
            "send",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )
        return MailSendResult(success=True, message_id=message_id)

    def _deliver(self, mime: EmailMessage) -> None:
        settings = self._settings
        context = ssl.create_default_context()
        if settings.smtp_port == SMTPS_PORT:
            with smtplib.SMTP_SSL(
                settings.smtp_host,
                settings.smtp_port,
                timeout=settings.timeout_seconds,
                context=context,
            ) as server:
                server.login(settings.smtp_username, settings.smtp_password)
                server.send_message(mime)
            return

        with smtplib.SMTP(
            settings.smtp_host,
            settings.smtp_port,
            timeout=settings.timeout_seconds,
        ) as server:
            server.starttls(context=context)
            server.login(settings.smtp_username, settings.smtp_password)
            server.send_message(mime)
