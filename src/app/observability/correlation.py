"""Gerenciamento de correlation_id para rastreamento de requisições.

O correlation_id chega (ou é gerado) no middleware HTTP, é devolvido no
header de resposta e injetado em todos os logs do request.
Usa ContextVar para ser async-safe.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

# IDs externos aceitos: curtos e sem caracteres de controle
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID recebido. Se ausente ou malformado, gera um UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    if correlation_id and _VALID_CORRELATION_ID.match(correlation_id):
        value = correlation_id
    else:
        value = generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())
