"""Dependências do endpoint: gate de token, rate limit e slow-down.

Executadas nesta ordem antes do handler; requests sem token válido não
consomem cota do rate limit.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import Request, Response, status

from api.routes.signature.errors import GateRejectedError
from api.routes.signature.schemas import RATE_LIMITED_MESSAGE, UNAUTHORIZED_MESSAGE
from app.observability import get_correlation_id
from app.policies import is_token_valid, resolve_client_ip
from app.policies.token_gate import SIGNATURE_TOKEN_HEADER
from config.settings import get_abuse_settings, get_http_settings

logger = logging.getLogger(__name__)


def get_client_key(request: Request) -> str:
    """IP do cliente usado como chave dos contadores."""
    peer_ip = request.client.host if request.client else None
    return resolve_client_ip(
        request.headers.get("x-forwarded-for"),
        peer_ip,
        get_http_settings().trust_proxy_hops,
    )


async def require_signature_token(request: Request) -> None:
    """Exige X-Signature-Token quando SIGNATURE_TOKEN está configurado."""
    required = get_abuse_settings().signature_token
    if is_token_valid(request.headers.get(SIGNATURE_TOKEN_HEADER), required):
        return
    raise GateRejectedError(
        status.HTTP_401_UNAUTHORIZED,
        UNAUTHORIZED_MESSAGE,
        reason="invalid_token",
    )


async def enforce_rate_limit(request: Request, response: Response) -> None:
    """Conta o request e recusa com 429 acima do limite da janela."""
    limiter = request.app.state.rate_limiter
    decision = await limiter.hit(get_client_key(request))
    headers = decision.headers()
    if decision.allowed:
        response.headers.update(headers)
        return

    logger.warning(
        "rate_limit_exceeded",
        extra={
            "limit": decision.limit,
            "reset_after_seconds": decision.reset_after_seconds,
            "correlation_id": get_correlation_id(),
        },
    )
    raise GateRejectedError(
        status.HTTP_429_TOO_MANY_REQUESTS,
        RATE_LIMITED_MESSAGE,
        reason="rate_limited",
        headers=headers,
    )


async def apply_slow_down(request: Request) -> None:
    """Atrasa o request quando o cliente passou do limiar de slow-down."""
    slow_down = request.app.state.slow_down
    delay_seconds = await slow_down.hit(get_client_key(request))
    if delay_seconds <= 0:
        return
    logger.info(
        "slow_down_applied",
        extra={"delay_ms": int(delay_seconds * 1000), "correlation_id": get_correlation_id()},
    )
    await asyncio.sleep(delay_seconds)
