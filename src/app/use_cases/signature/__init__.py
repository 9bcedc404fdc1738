"""Use cases de assinatura digital."""

from .send_signature import SendSignatureUseCase

__all__ = ["SendSignatureUseCase"]
