"""Settings do payload de assinatura."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SignatureSettings:
    """Limites e formatação da assinatura recebida.

    Attributes:
        min_bytes: Tamanho mínimo aproximado do PNG decodificado
        max_bytes: Tamanho máximo aproximado do PNG decodificado
        timezone: Fuso horário do carimbo de data/hora do email
    """

    min_bytes: int = 2500
    max_bytes: int = 250_000  # 250KB
    timezone: str = "America/Bogota"

    def validate(self) -> list[str]:
        """Valida limites de assinatura."""
        errors: list[str] = []

        if self.min_bytes < 0:
            errors.append("SIGNATURE_MIN_BYTES deve ser >= 0")

        if self.max_bytes < self.min_bytes:
            errors.append("SIGNATURE_MAX_BYTES deve ser >= SIGNATURE_MIN_BYTES")

        return errors


def _load_signature_from_env() -> SignatureSettings:
    """Carrega SignatureSettings de variáveis de ambiente."""
    return SignatureSettings(
        min_bytes=int(os.getenv("SIGNATURE_MIN_BYTES", "2500")),
        max_bytes=int(os.getenv("SIGNATURE_MAX_BYTES", "250000")),
        timezone=os.getenv("SIGNATURE_TIMEZONE", "America/Bogota"),
    )


@lru_cache(maxsize=1)
def get_signature_settings() -> SignatureSettings:
    """Retorna instância cacheada de SignatureSettings."""
    return _load_signature_from_env()
