"""Use case: validar a assinatura recebida e encaminhá-la por email."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from api.payload_builders.email import build_signature_email, format_timestamp_es_co
from api.validators.signature import SignatureLimits, validate_signature_payload

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.mail_sender import MailSenderProtocol
    from app.protocols.models import MailSendResult

logger = logging.getLogger(__name__)


class SendSignatureUseCase:
    """Orquestra validação, build do email e envio.

    Args:
        sender: Colaborador de envio de email.
        sender_address: Conta remetente (From).
        recipient: Destinatário fixo.
        limits: Faixa de tamanho aceita para o PNG.
        timezone: Fuso do carimbo de data/hora.
        from_name: Nome exibido no From.
        clock: Fonte de "agora" (injetável em testes).
    """

    def __init__(
        self,
        sender: MailSenderProtocol,
        *,
        sender_address: str,
        recipient: str,
        limits: SignatureLimits | None = None,
        timezone: str = "America/Bogota",
        from_name: str = "Firma Digital",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._sender = sender
        self._sender_address = sender_address
        self._recipient = recipient
        self._limits = limits or SignatureLimits()
        self._timezone = timezone
        self._from_name = from_name
        self._clock = clock or (lambda: datetime.now(UTC))

    async def execute(self, payload: dict[str, Any]) -> MailSendResult:
        """Valida e envia.

        Raises:
            SignatureValidationError: Payload rejeitado (resposta 400).
            MailConfigurationError: Transporte sem credenciais.
        """
        submission = validate_signature_payload(payload, self._limits)
        message = build_signature_email(
            submission,
            timestamp=format_timestamp_es_co(self._clock(), self._timezone),
            sender_address=self._sender_address,
            recipient=self._recipient,
            from_name=self._from_name,
        )

        result = await self._sender.send(message)
        logger.info(
            "signature_dispatched",
            extra={
                "success": result.success,
                "error": result.error,
                "attachment_bytes": len(submission.png_bytes),
                "has_id_number": submission.id_number is not None,
            },
        )
        return result
