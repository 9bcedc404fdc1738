"""Modelos trocados entre use cases e adapters de saída."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class EmailAttachment:
    """Anexo binário de email."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class OutboundEmail:
    """Email pronto para envio.

    Attributes:
        sender: Header From completo (ex.: "Firma Digital <user@gmail.com>")
        recipient: Destinatário
        subject: Assunto
        html: Corpo HTML (valores já escapados)
        attachments: Anexos
    """

    sender: str
    recipient: str
    subject: str
    html: str
    attachments: tuple[EmailAttachment, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class MailSendResult:
    """Resultado de envio: sucesso ou tipo do erro (sem PII)."""

    success: bool
    error: str | None = None
    message_id: str | None = None


@dataclass(frozen=True, slots=True)
class WindowHit:
    """Estado de um contador de janela fixa após um incremento.

    Attributes:
        count: Requests contados na janela atual (incluindo este)
        reset_after_seconds: Segundos até a janela reiniciar
    """

    count: int
    reset_after_seconds: float
