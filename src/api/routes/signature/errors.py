"""Rejeições do gate anti-abuso, convertidas em JSON pelo app."""

from __future__ import annotations


class GateRejectedError(Exception):
    """Request barrado antes do handler (token ou rate limit).

    Attributes:
        status_code: Status HTTP da resposta.
        message: Mensagem para o cliente.
        reason: Motivo curto para logs/métricas.
        headers: Headers extras (ex.: Retry-After).
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        reason: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.reason = reason
        self.headers = headers or {}
