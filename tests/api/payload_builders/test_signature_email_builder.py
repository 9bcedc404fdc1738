"""Testes do builder do email de assinatura."""

from __future__ import annotations

from datetime import UTC, datetime

from api.payload_builders.email import (
    SIGNATURE_ATTACHMENT_NAME,
    SIGNATURE_SUBJECT,
    build_signature_email,
    escape_html,
    format_timestamp_es_co,
    render_signature_html,
)
from api.validators.signature import SignatureSubmission


def _submission(**overrides: object) -> SignatureSubmission:
    values: dict[str, object] = {
        "name": "Ana María",
        "id_number": "1020304050",
        "png_bytes": b"\x89PNG-data",
    }
    values.update(overrides)
    return SignatureSubmission(**values)  # type: ignore[arg-type]


def test_build_signature_email_headers_and_attachment() -> None:
    message = build_signature_email(
        _submission(),
        timestamp="19/10/2026, 3:04:05 p. m.",
        sender_address="firmas@example.com",
        recipient="destino@example.com",
    )

    assert message.sender == "Firma Digital <firmas@example.com>"
    assert message.recipient == "destino@example.com"
    assert message.subject == SIGNATURE_SUBJECT
    assert len(message.attachments) == 1
    attachment = message.attachments[0]
    assert attachment.filename == SIGNATURE_ATTACHMENT_NAME
    assert attachment.content == b"\x89PNG-data"
    assert attachment.content_type == "image/png"


def test_html_includes_id_line_only_when_present() -> None:
    with_id = render_signature_html("Ana", "123", "ts")
    without_id = render_signature_html("Ana", None, "ts")

    assert "<p><strong>ID:</strong> 123</p>" in with_id
    assert "ID:" not in without_id
    assert "<h2>Nueva Firma Digital</h2>" in without_id
    assert "<p><strong>Fecha y hora:</strong> ts</p>" in without_id


def test_html_escapes_user_values() -> None:
    html = render_signature_html('<b>"Ana" & \'Co\'</b>', "<img>", "ts")

    assert "<b>" not in html
    assert "&lt;b&gt;&quot;Ana&quot; &amp; &#x27;Co&#x27;&lt;/b&gt;" in html
    assert "&lt;img&gt;" in html


def test_escape_html_handles_none() -> None:
    assert escape_html(None) == ""


def test_format_timestamp_es_co_afternoon() -> None:
    # 20:04:05 UTC == 15:04:05 em Bogotá (UTC-5)
    moment = datetime(2026, 10, 19, 20, 4, 5, tzinfo=UTC)
    assert format_timestamp_es_co(moment) == "19/10/2026, 3:04:05 p. m."


def test_format_timestamp_es_co_morning_and_midnight() -> None:
    assert format_timestamp_es_co(datetime(2026, 1, 5, 14, 7, 9, tzinfo=UTC)) == "5/1/2026, 9:07:09 a. m."
    assert format_timestamp_es_co(datetime(2026, 1, 5, 5, 0, 0, tzinfo=UTC)) == "5/1/2026, 12:00:00 a. m."


def test_format_timestamp_es_co_custom_timezone_and_naive() -> None:
    moment = datetime(2026, 6, 1, 12, 30, 0)
    assert format_timestamp_es_co(moment, "UTC") == "1/6/2026, 12:30:00 p. m."
