"""Limite de tamanho do body (equivalente ao limit do parser JSON)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.datastructures import Headers
from starlette.responses import JSONResponse

from app.observability import get_correlation_id, record_rejection

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

PAYLOAD_TOO_LARGE_MESSAGE = "Payload demasiado grande"


class PayloadTooLargeError(Exception):
    """Body excedeu o limite durante a leitura em streaming."""


class BodySizeLimitMiddleware:
    """Recusa bodies acima de `max_body_bytes` com 413 JSON.

    Checa Content-Length de antemão e conta os bytes recebidos para
    bodies chunked ou com Content-Length incorreto.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self._max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self._max_body_bytes:
            await self._reject(scope, receive, send, int(content_length))
            return

        received = 0
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self._max_body_bytes:
                    raise PayloadTooLargeError
            return message

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except PayloadTooLargeError:
            if response_started:
                raise
            await self._reject(scope, receive, send, received)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, size: int) -> None:
        logger.warning(
            "payload_too_large",
            extra={
                "size_bytes": size,
                "limit_bytes": self._max_body_bytes,
                "path": scope.get("path"),
                "correlation_id": get_correlation_id(),
            },
        )
        record_rejection("payload_too_large", get_correlation_id())
        response = JSONResponse(
            {"success": False, "message": PAYLOAD_TOO_LARGE_MESSAGE},
            status_code=413,
        )
        await response(scope, receive, send)
