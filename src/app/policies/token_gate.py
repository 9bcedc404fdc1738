"""Gate por segredo compartilhado (header X-Signature-Token)."""

from __future__ import annotations

import hmac

SIGNATURE_TOKEN_HEADER = "X-Signature-Token"


def is_token_valid(provided: str | None, required: str | None) -> bool:
    """Compara o token recebido com o configurado em tempo constante.

    Sem token configurado o gate fica aberto.
    """
    if not required:
        return True
    if provided is None:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), required.encode("utf-8"))
