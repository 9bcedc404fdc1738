"""Transporte de email (SMTP)."""

from app.infra.mail.smtp_sender import SmtpMailSender, build_mime_message

__all__ = [
    "SmtpMailSender",
    "build_mime_message",
]
