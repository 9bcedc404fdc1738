"""Leitura do body JSON do endpoint de assinatura."""

from __future__ import annotations

import json
from typing import Any


class InvalidJsonError(ValueError):
    """Body declarado como JSON mas não decodificável."""


def is_json_content_type(content_type: str | None) -> bool:
    """True para application/json e tipos +json."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def parse_json_body(raw_body: bytes, content_type: str | None) -> dict[str, Any]:
    """Decodifica o body em dict.

    Body vazio, content type não JSON ou JSON que não é objeto resultam em
    dict vazio; a validação do payload recusa o request depois.

    Raises:
        InvalidJsonError: Se o JSON estiver malformado.
    """
    if not raw_body or not is_json_content_type(content_type):
        return {}

    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        return {}
    return payload
