"""Endpoints de health check."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_abuse_settings, get_email_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    ok: bool


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(ok=True)


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: contadores de rate limit e transporte de email."""
    store_check = await _check_rate_limit_store(getattr(request.app.state, "redis_client", None))
    mail_check = _check_mail_settings()

    ready = store_check.status == "ok" and mail_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "rate_limit_store": store_check.as_dict(),
            "mail": mail_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_rate_limit_store(redis_client: Any | None) -> DependencyCheck:
    if get_abuse_settings().backend != "redis":
        return DependencyCheck(status="ok")
    if redis_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(redis_client.ping(), timeout=2.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_redis_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


def _check_mail_settings() -> DependencyCheck:
    errors = get_email_settings().validate()
    if errors:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")
