"""Fake in-memory do transporte de email para testes deterministas."""

from __future__ import annotations

from app.protocols.models import MailSendResult, OutboundEmail


class FakeMailSender:
    """Implementa MailSenderProtocol sem IO.

    Guarda as mensagens enviadas e permite simular falha ou exceção.
    """

    def __init__(
        self,
        *,
        fail_with: str | None = None,
        raise_exc: Exception | None = None,
    ) -> None:
        self.sent: list[OutboundEmail] = []
        self._fail_with = fail_with
        self._raise_exc = raise_exc

    async def send(self, message: OutboundEmail) -> MailSendResult:
        if self._raise_exc is not None:
            raise self._raise_exc
        if self._fail_with is not None:
            return MailSendResult(success=False, error=self._fail_with)
        self.sent.append(message)
        return MailSendResult(success=True, message_id=f"<fake-{len(self.sent)}@test>")
