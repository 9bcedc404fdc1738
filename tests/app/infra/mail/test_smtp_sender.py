"""Testes do SmtpMailSender com smtplib mockado."""

from __future__ import annotations

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from app.infra.mail import SmtpMailSender, build_mime_message
from app.protocols.models import EmailAttachment, OutboundEmail
from config.settings import EmailSettings
from utils.errors import MailConfigurationError


def _settings(**overrides: object) -> EmailSettings:
    values: dict[str, object] = {
        "smtp_username": "firmas@example.com",
        "smtp_password": "app-password",
        "recipient": "destino@example.com",
    }
    values.update(overrides)
    return EmailSettings(**values)  # type: ignore[arg-type]


def _message() -> OutboundEmail:
    return OutboundEmail(
        sender="Firma Digital <firmas@example.com>",
        recipient="destino@example.com",
        subject="Nueva firma recibida",
        html="<p>Hola</p>",
        attachments=(
            EmailAttachment(
                filename="firma.png",
                content=b"\x89PNG\r\n\x1a\n" + b"\x00" * 16,
                content_type="image/png",
            ),
        ),
    )


def _smtp_mock() -> tuple[MagicMock, MagicMock]:
    server = MagicMock()
    factory = MagicMock()
    factory.return_value.__enter__.return_value = server
    factory.return_value.__exit__.return_value = False
    return factory, server


def test_build_mime_message_has_html_and_png_attachment() -> None:
    mime = build_mime_message(_message(), message_id="<id@example.com>")

    assert mime["Subject"] == "Nueva firma recibida"
    assert mime["To"] == "destino@example.com"
    assert mime["Message-ID"] == "<id@example.com>"
    parts = list(mime.iter_parts())
    assert parts[0].get_content_type() == "text/html"
    attachment = parts[1]
    assert attachment.get_content_type() == "image/png"
    assert attachment.get_filename() == "firma.png"
    assert attachment.get_content().startswith(b"\x89PNG")


@pytest.mark.asyncio
async def test_send_over_implicit_tls() -> None:
    factory, server = _smtp_mock()
    sender = SmtpMailSender(_settings())

    with patch("app.infra.mail.smtp_sender.smtplib.SMTP_SSL", factory):
        result = await sender.send(_message())

    assert result.success is True
    assert result.message_id and result.message_id.endswith("@example.com>")
    assert factory.call_args.args[:2] == ("smtp.gmail.com", 465)
    server.login.assert_called_once_with("firmas@example.com", "app-password")
    server.send_message.assert_called_once()


@pytest.mark.asyncio
async def test_send_over_starttls_for_other_ports() -> None:
    factory, server = _smtp_mock()
    sender = SmtpMailSender(_settings(smtp_port=587))

    with patch("app.infra.mail.smtp_sender.smtplib.SMTP", factory):
        result = await sender.send(_message())

    assert result.success is True
    server.starttls.assert_called_once()
    server.login.assert_called_once()


@pytest.mark.asyncio
async def test_auth_failure_becomes_failed_result() -> None:
    factory, server = _smtp_mock()
    server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")
    sender = SmtpMailSender(_settings())

    with patch("app.infra.mail.smtp_sender.smtplib.SMTP_SSL", factory):
        result = await sender.send(_message())

    assert result.success is False
    assert result.error == "smtp_auth_failed"


@pytest.mark.asyncio
async def test_connection_failure_becomes_failed_result() -> None:
    factory = MagicMock(side_effect=OSError("unreachable"))
    sender = SmtpMailSender(_settings())

    with patch("app.infra.mail.smtp_sender.smtplib.SMTP_SSL", factory):
        result = await sender.send(_message())

    assert result.success is False
    assert result.error == "OSError"


@pytest.mark.asyncio
async def test_missing_credentials_raise_configuration_error() -> None:
    sender = SmtpMailSender(_settings(smtp_password=""))

    with pytest.raises(MailConfigurationError):
        await sender.send(_message())


def test_missing_recipient_raises_configuration_error() -> None:
    sender = SmtpMailSender(_settings(recipient=""))

    with pytest.raises(MailConfigurationError, match="EMAIL_TO"):
        sender.ensure_configured()
