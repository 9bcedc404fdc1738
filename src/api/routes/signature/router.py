"""Endpoint POST /send-signature.

Fluxo:
1. Gate de token (X-Signature-Token, se configurado)
2. Rate limit por IP (429 acima do limite)
3. Slow-down por IP (atraso acima do limiar)
4. Parse do JSON, validação estrita e envio por email

Respostas sempre no formato {"success": bool, "message": str}.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from api.routes.signature.dependencies import (
    apply_slow_down,
    enforce_rate_limit,
    require_signature_token,
)
from api.routes.signature.request_body import InvalidJsonError, parse_json_body
from api.routes.signature.schemas import (
    INVALID_JSON_MESSAGE,
    SEND_FAILED_MESSAGE,
    SUCCESS_MESSAGE,
    SignatureResponse,
)
from api.validators.signature import SignatureValidationError
from app.observability import get_correlation_id, record_rejection

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/send-signature",
    response_model=SignatureResponse,
    dependencies=[
        Depends(require_signature_token),
        Depends(enforce_rate_limit),
        Depends(apply_slow_down),
    ],
)
async def send_signature(request: Request, response: Response) -> SignatureResponse:
    """Recebe a assinatura, valida e encaminha por email."""
    raw_body = await request.body()

    try:
        payload = parse_json_body(raw_body, request.headers.get("content-type"))
    except InvalidJsonError:
        logger.info("signature_json_invalid", extra={"payload_size": len(raw_body)})
        record_rejection("invalid_json", get_correlation_id())
        response.status_code = status.HTTP_400_BAD_REQUEST
        return SignatureResponse(success=False, message=INVALID_JSON_MESSAGE)

    use_case = request.app.state.send_signature_use_case
    try:
        result = await use_case.execute(payload)
    except SignatureValidationError as exc:
        logger.info(
            "signature_rejected",
            extra={"reason": exc.code, "payload_size": len(raw_body)},
        )
        record_rejection(exc.code, get_correlation_id())
        response.status_code = status.HTTP_400_BAD_REQUEST
        return SignatureResponse(success=False, message=str(exc))
    except Exception:
        logger.exception("signature_send_failed")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return SignatureResponse(success=False, message=SEND_FAILED_MESSAGE)

    if not result.success:
        logger.error("signature_send_failed", extra={"error": result.error})
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return SignatureResponse(success=False, message=SEND_FAILED_MESSAGE)

    logger.info("signature_sent", extra={"message_id": result.message_id})
    return SignatureResponse(success=True, message=SUCCESS_MESSAGE)
