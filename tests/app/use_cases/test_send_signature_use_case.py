"""Testes do SendSignatureUseCase com transporte fake."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from api.validators.signature import SignatureValidationError
from app.use_cases.signature import SendSignatureUseCase
from tests.fakes.fake_mail_sender import FakeMailSender
from tests.fakes.signature_data import PNG_MAGIC, make_png_data_url

FIXED_NOW = datetime(2026, 1, 5, 19, 7, 3, tzinfo=UTC)


def _use_case(sender: FakeMailSender) -> SendSignatureUseCase:
    return SendSignatureUseCase(
        sender,
        sender_address="firmas@example.com",
        recipient="destino@example.com",
        clock=lambda: FIXED_NOW,
    )


@pytest.mark.asyncio
async def test_valid_payload_is_sent_with_attachment() -> None:
    sender = FakeMailSender()

    result = await _use_case(sender).execute(
        {"name": "Ana María", "idNumber": 12345678, "signature": make_png_data_url()}
    )

    assert result.success is True
    [message] = sender.sent
    assert message.recipient == "destino@example.com"
    assert message.sender == "Firma Digital <firmas@example.com>"
    assert message.subject == "Nueva firma recibida"
    assert "<p><strong>ID:</strong> 12345678</p>" in message.html
    # 19:07:03 UTC = 14:07:03 em Bogotá
    assert "5/1/2026, 2:07:03 p. m." in message.html
    assert message.attachments[0].filename == "firma.png"
    assert message.attachments[0].content.startswith(PNG_MAGIC)


@pytest.mark.asyncio
async def test_name_is_escaped_in_body() -> None:
    sender = FakeMailSender()

    await _use_case(sender).execute(
        {"name": "<b>Eve</b>", "signature": make_png_data_url()}
    )

    html = sender.sent[0].html
    assert "&lt;b&gt;Eve&lt;/b&gt;" in html
    assert "<b>Eve</b>" not in html
    assert "ID:" not in html


@pytest.mark.asyncio
async def test_invalid_payload_never_reaches_sender() -> None:
    sender = FakeMailSender()

    with pytest.raises(SignatureValidationError, match="Nombre inválido"):
        await _use_case(sender).execute({"name": "Al", "signature": make_png_data_url()})

    assert sender.sent == []


@pytest.mark.asyncio
async def test_transport_failure_is_returned() -> None:
    sender = FakeMailSender(fail_with="smtp_auth_failed")

    result = await _use_case(sender).execute(
        {"name": "Ana María", "signature": make_png_data_url()}
    )

    assert result.success is False
    assert result.error == "smtp_auth_failed"
