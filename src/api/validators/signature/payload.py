"""Validação estrita do payload recebido em POST /send-signature.

Ordem das checagens (a primeira falha vence):
1. name: string não vazia, 3..80 caracteres após strip
2. signature: string não vazia
3. prefixo data URL PNG
4. alfabeto base64 (espaços tolerados)
5. tamanho aproximado dentro de [min_bytes, max_bytes]
6. base64 decodificável
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Any

from api.validators.signature.errors import (
    INVALID_NAME,
    INVALID_SIGNATURE,
    SIGNATURE_CORRUPT,
    SIGNATURE_NOT_PNG,
    SIGNATURE_TOO_LARGE,
    SIGNATURE_TOO_SMALL,
    SignatureValidationError,
)
from api.validators.signature.limits import (
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PNG_DATA_URL_PREFIX,
    SignatureLimits,
    approx_decoded_size,
)

# Espaços aceitos entre os caracteres base64 (sem os separadores \x1c-\x1f)
_WHITESPACE_CHARS = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_BASE64_ALPHABET = re.compile(f"^[A-Za-z0-9+/={_WHITESPACE_CHARS}]+$")
_WHITESPACE = re.compile(f"[{_WHITESPACE_CHARS}]+")

# Floats inteiros abaixo disto viram dígitos; acima, notação exponencial
_EXPONENT_THRESHOLD = 1e21


@dataclass(frozen=True, slots=True)
class SignatureSubmission:
    """Assinatura validada, pronta para envio.

    Attributes:
        name: Nome como recebido (sem strip; o email mostra o original)
        id_number: Documento opcional, já convertido para string
        png_bytes: Imagem PNG decodificada
    """

    name: str
    id_number: str | None
    png_bytes: bytes


def validate_signature_payload(
    payload: dict[str, Any],
    limits: SignatureLimits | None = None,
) -> SignatureSubmission:
    """Valida o payload e devolve a assinatura decodificada.

    Args:
        payload: Body JSON já decodificado (campos name, idNumber, signature).
        limits: Faixa de tamanho aceita; padrão 2500..250000 bytes.

    Raises:
        SignatureValidationError: Na primeira checagem que falhar.
    """
    limits = limits or SignatureLimits()
    name = payload.get("name")
    signature = payload.get("signature")

    _validate_name(name)
    base64_data = _validate_signature(signature, limits)

    return SignatureSubmission(
        name=name,
        id_number=_coerce_id_number(payload.get("idNumber")),
        png_bytes=_decode_base64(base64_data),
    )


def validate_payload_strict(
    name: Any,
    signature: Any,
    limits: SignatureLimits | None = None,
) -> str | None:
    """Variante sem exceção: retorna a mensagem de erro ou None se válido.

    Não decodifica a imagem; cobre apenas forma, alfabeto e tamanho.
    """
    try:
        _validate_name(name)
        _validate_signature(signature, limits or SignatureLimits())
    except SignatureValidationError as exc:
        return str(exc)
    return None


def _validate_name(name: Any) -> None:
    if not name or not isinstance(name, str):
        raise SignatureValidationError(INVALID_NAME, code="name_missing")
    clean_name = name.strip()
    if not NAME_MIN_LENGTH <= len(clean_name) <= NAME_MAX_LENGTH:
        raise SignatureValidationError(INVALID_NAME, code="name_length")


def _validate_signature(signature: Any, limits: SignatureLimits) -> str:
    if not signature or not isinstance(signature, str):
        raise SignatureValidationError(INVALID_SIGNATURE, code="signature_missing")

    if not signature.startswith(PNG_DATA_URL_PREFIX):
        raise SignatureValidationError(SIGNATURE_NOT_PNG, code="signature_not_png")

    base64_data = signature[len(PNG_DATA_URL_PREFIX):]
    if not _BASE64_ALPHABET.match(base64_data):
        raise SignatureValidationError(SIGNATURE_CORRUPT, code="signature_alphabet")

    approx_bytes = approx_decoded_size(base64_data)
    if approx_bytes < limits.min_bytes:
        raise SignatureValidationError(SIGNATURE_TOO_SMALL, code="signature_too_small")
    if approx_bytes > limits.max_bytes:
        raise SignatureValidationError(SIGNATURE_TOO_LARGE, code="signature_too_large")

    return base64_data


def _decode_base64(base64_data: str) -> bytes:
    compact = _WHITESPACE.sub("", base64_data).rstrip("=")
    # Canvas e alguns clientes omitem o padding final
    padded = compact + "=" * (-len(compact) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SignatureValidationError(SIGNATURE_CORRUPT, code="signature_decode") from exc


def _coerce_id_number(value: Any) -> str | None:
    if not value or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true"
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return str(value)
