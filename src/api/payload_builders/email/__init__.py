"""Payload builders para Email: mensagem de nova assinatura."""

from api.payload_builders.email.signature import (
    SIGNATURE_ATTACHMENT_NAME,
    SIGNATURE_SUBJECT,
    build_signature_email,
    escape_html,
    render_signature_html,
)
from api.payload_builders.email.timestamp import format_timestamp_es_co

__all__ = [
    "SIGNATURE_ATTACHMENT_NAME",
    "SIGNATURE_SUBJECT",
    "build_signature_email",
    "escape_html",
    "format_timestamp_es_co",
    "render_signature_html",
]
