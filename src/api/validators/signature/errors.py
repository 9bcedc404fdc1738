"""Erros de validação do payload de assinatura."""

from __future__ import annotations

# Mensagens devolvidas ao cliente (contrato com o frontend)
INVALID_NAME = "Nombre inválido"
INVALID_SIGNATURE = "Firma no válida"
SIGNATURE_NOT_PNG = "Firma debe ser PNG"
SIGNATURE_CORRUPT = "Firma corrupta"
SIGNATURE_TOO_SMALL = "Firma vacía o demasiado pequeña"
SIGNATURE_TOO_LARGE = "Firma demasiado grande"


class SignatureValidationError(ValueError):
    """Payload de assinatura rejeitado.

    A mensagem (str(exc)) é segura para devolver ao cliente.

    Attributes:
        code: Motivo curto para logs e métricas.
    """

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code
