"""Builder do email de nova assinatura.

Monta o OutboundEmail com corpo HTML escapado e a imagem como anexo.
"""

from __future__ import annotations

import html
from email.utils import formataddr
from typing import TYPE_CHECKING

from app.protocols.models import EmailAttachment, OutboundEmail

if TYPE_CHECKING:
    from api.validators.signature import SignatureSubmission

SIGNATURE_SUBJECT = "Nueva firma recibida"
SIGNATURE_ATTACHMENT_NAME = "firma.png"
DEFAULT_FROM_NAME = "Firma Digital"


def escape_html(value: object) -> str:
    """Escapa & < > " ' para interpolação segura em HTML."""
    return html.escape("" if value is None else str(value), quote=True)


def render_signature_html(name: str, id_number: str | None, timestamp: str) -> str:
    """Renderiza o corpo HTML; a linha de ID só aparece se houver documento."""
    lines = [
        "<h2>Nueva Firma Digital</h2>",
        f"<p><strong>Nombre:</strong> {escape_html(name)}</p>",
    ]
    if id_number:
        lines.append(f"<p><strong>ID:</strong> {escape_html(id_number)}</p>")
    lines.append(f"<p><strong>Fecha y hora:</strong> {escape_html(timestamp)}</p>")
    return "\n".join(lines)


def build_signature_email(
    submission: SignatureSubmission,
    *,
    timestamp: str,
    sender_address: str,
    recipient: str,
    from_name: str = DEFAULT_FROM_NAME,
) -> OutboundEmail:
    """Constrói o email de assinatura para o destinatário fixo.

    Args:
        submission: Assinatura validada.
        timestamp: Data/hora já formatada.
        sender_address: Conta remetente (EMAIL_USER).
        recipient: Destinatário (EMAIL_TO).
        from_name: Nome exibido no From.
    """
    return OutboundEmail(
        sender=formataddr((from_name, sender_address)),
        recipient=recipient,
        subject=SIGNATURE_SUBJECT,
        html=render_signature_html(submission.name, submission.id_number, timestamp),
        attachments=(
            EmailAttachment(
                filename=SIGNATURE_ATTACHMENT_NAME,
                content=submission.png_bytes,
                content_type="image/png",
            ),
        ),
    )
