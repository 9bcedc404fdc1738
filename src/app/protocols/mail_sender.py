"""Protocolo do colaborador de envio de email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import MailSendResult, OutboundEmail


class MailSenderProtocol(Protocol):
    """Contrato mínimo: send(message) -> sucesso|falha.

    Falhas de transporte retornam MailSendResult(success=False).
    Configuração ausente pode levantar MailConfigurationError.
    """

    async def send(self, message: OutboundEmail) -> MailSendResult: ...
