"""Limites do payload de assinatura."""

from __future__ import annotations

from dataclasses import dataclass

PNG_DATA_URL_PREFIX = "data:image/png;base64,"

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 80

DEFAULT_MIN_BYTES = 2500
DEFAULT_MAX_BYTES = 250_000


@dataclass(frozen=True, slots=True)
class SignatureLimits:
    """Faixa aceita para o tamanho aproximado do PNG decodificado."""

    min_bytes: int = DEFAULT_MIN_BYTES
    max_bytes: int = DEFAULT_MAX_BYTES


def approx_decoded_size(base64_data: str) -> int:
    """Estima bytes decodificados: 4 caracteres base64 ~ 3 bytes."""
    return (len(base64_data) * 3) // 4
