"""Bloqueio de origins fora da allowlist.

O CORSMiddleware só decide headers; um POST simples de origin não
autorizado ainda chegaria à rota. Este guard recusa o request antes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.datastructures import Headers
from starlette.responses import JSONResponse

from app.observability import get_correlation_id, record_rejection

if TYPE_CHECKING:
    from collections.abc import Iterable

    from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

ORIGIN_REJECTED_MESSAGE = "Origen no permitido"


def is_origin_allowed(origin: str | None, allowed_origins: frozenset[str]) -> bool:
    """Decide se o origin pode acessar a API.

    - Sem Origin (curl, healthchecks, server-to-server): permitido.
    - Allowlist vazia: todo Origin é recusado (CORS não configurado).
    - Caso contrário: apenas correspondência exata.
    """
    if not origin:
        return True
    if not allowed_origins:
        return False
    return origin in allowed_origins


class OriginGuardMiddleware:
    """Responde 403 JSON para requests com Origin não autorizado."""

    def __init__(self, app: ASGIApp, allowed_origins: Iterable[str]) -> None:
        self.app = app
        self._allowed = frozenset(allowed_origins)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        origin = Headers(scope=scope).get("origin")
        if is_origin_allowed(origin, self._allowed):
            await self.app(scope, receive, send)
            return

        reason = "cors_not_configured" if not self._allowed else "cors_blocked"
        logger.warning(
            "origin_rejected",
            extra={
                "reason": reason,
                "origin": origin,
                "path": scope.get("path"),
                "correlation_id": get_correlation_id(),
            },
        )
        record_rejection(reason, get_correlation_id())
        response = JSONResponse(
            {"success": False, "message": ORIGIN_REJECTED_MESSAGE},
            status_code=403,
        )
        await response(scope, receive, send)
