"""Dados de assinatura sintéticos para testes."""

from __future__ import annotations

import base64

PNG_PREFIX = "data:image/png;base64,"
PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def make_png_data_url(payload_bytes: int = 3000) -> str:
    """Gera data URL PNG com ~payload_bytes de conteúdo decodificado."""
    raw = PNG_MAGIC + bytes(payload_bytes)
    return PNG_PREFIX + base64.b64encode(raw).decode("ascii")
