"""Modelos de resposta do endpoint de assinatura."""

from __future__ import annotations

from pydantic import BaseModel

SUCCESS_MESSAGE = "Firma enviada correctamente"
SEND_FAILED_MESSAGE = "Error al enviar la firma"
INVALID_JSON_MESSAGE = "JSON inválido"
UNAUTHORIZED_MESSAGE = "No autorizado"
RATE_LIMITED_MESSAGE = "Demasiados intentos. Intenta más tarde."


class SignatureResponse(BaseModel):
    """Resposta padrão: aceito/rejeitado com mensagem para o usuário."""

    success: bool
    message: str
