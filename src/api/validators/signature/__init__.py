"""Validadores do payload de assinatura digital.

Uso:
    from api.validators.signature import (
        SignatureLimits,
        SignatureValidationError,
        validate_signature_payload,
    )

    submission = validate_signature_payload(payload, SignatureLimits(2500, 250_000))
"""

from api.validators.signature.errors import SignatureValidationError
from api.validators.signature.limits import (
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PNG_DATA_URL_PREFIX,
    SignatureLimits,
    approx_decoded_size,
)
from api.validators.signature.payload import (
    SignatureSubmission,
    validate_payload_strict,
    validate_signature_payload,
)

__all__ = [
    "NAME_MAX_LENGTH",
    "NAME_MIN_LENGTH",
    "PNG_DATA_URL_PREFIX",
    "SignatureLimits",
    "SignatureSubmission",
    "SignatureValidationError",
    "approx_decoded_size",
    "validate_payload_strict",
    "validate_signature_payload",
]
