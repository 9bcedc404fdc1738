"""Entrypoint da aplicação Firma Relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import create_api_router
from api.routes.signature.errors import GateRejectedError
from api.routes.signature.schemas import SEND_FAILED_MESSAGE
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_async_redis_client
from app.bootstrap.dependencies import (
    create_rate_limit_store,
    create_rate_limiter,
    create_send_signature_use_case,
    create_slow_down,
)
from app.middleware import (
    BodySizeLimitMiddleware,
    CorrelationIdMiddleware,
    OriginGuardMiddleware,
    SecurityHeadersMiddleware,
)
from app.observability import get_correlation_id, record_rejection
from app.policies.token_gate import SIGNATURE_TOKEN_HEADER
from config.logging import get_logger
from config.settings import get_abuse_settings, get_base_settings, get_http_settings
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols.mail_sender import MailSenderProtocol
    from app.protocols.rate_limit_store import RateLimitStoreProtocol

# Inicializar .env e logging ANTES de ler settings
initialize_app()

logger = get_logger(__name__)

CORS_METHODS = ["GET", "POST", "OPTIONS"]
CORS_HEADERS = ["Content-Type", SIGNATURE_TOKEN_HEADER]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida configurações.
    Shutdown: fecha o cliente Redis, se houver.
    """
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": service})
    redis_client = getattr(app.state, "redis_client", None)
    if redis_client is not None:
        await redis_client.aclose()


async def _gate_rejected_handler(request: Request, exc: GateRejectedError) -> JSONResponse:
    logger.warning(
        "request_rejected",
        extra={
            "reason": exc.reason,
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )
    record_rejection(exc.reason, get_correlation_id())
    return JSONResponse(
        {"success": False, "message": exc.message},
        status_code=exc.status_code,
        headers=exc.headers,
    )


async def _infrastructure_error_handler(request: Request, exc: InfrastructureError) -> JSONResponse:
    logger.error(
        "rate_limit_store_unavailable",
        extra={"error_type": type(exc).__name__, "path": request.url.path},
    )
    record_rejection("rate_limit_store_unavailable", get_correlation_id())
    return JSONResponse(
        {"success": False, "message": SEND_FAILED_MESSAGE},
        status_code=500,
    )


def create_app(
    *,
    mail_sender: MailSenderProtocol | None = None,
    rate_limit_store: RateLimitStoreProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        mail_sender: Transporte de email alternativo (testes).
        rate_limit_store: Store de contadores alternativo (testes).

    Returns:
        Aplicação FastAPI configurada.
    """
    http_settings = get_http_settings()

    fastapi_app = FastAPI(
        title="Firma Relay",
        description="Recebe assinaturas digitais e as encaminha por email",
        version="1.0.0",
        lifespan=lifespan,
        # API de um endpoint só; a CSP padrão também bloquearia o Swagger UI
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    store = rate_limit_store or create_rate_limit_store()
    fastapi_app.state.redis_client = (
        create_async_redis_client() if get_abuse_settings().backend == "redis" else None
    )
    fastapi_app.state.rate_limiter = create_rate_limiter(store)
    fastapi_app.state.slow_down = create_slow_down(store)
    fastapi_app.state.send_signature_use_case = create_send_signature_use_case(mail_sender)

    fastapi_app.add_exception_handler(GateRejectedError, _gate_rejected_handler)
    fastapi_app.add_exception_handler(InfrastructureError, _infrastructure_error_handler)

    # Último adicionado = mais externo
    fastapi_app.add_middleware(
        BodySizeLimitMiddleware,
        max_body_bytes=http_settings.json_limit_bytes,
    )
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(http_settings.allowed_origins),
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )
    fastapi_app.add_middleware(
        OriginGuardMiddleware,
        allowed_origins=http_settings.allowed_origins,
    )
    fastapi_app.add_middleware(SecurityHeadersMiddleware)
    fastapi_app.add_middleware(CorrelationIdMiddleware)

    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={
            "allowed_origins": len(http_settings.allowed_origins),
            "json_limit": http_settings.json_limit,
            "token_required": get_abuse_settings().token_required,
        },
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    http_settings = get_http_settings()
    logger.info("server_starting", extra={"host": http_settings.host, "port": http_settings.port})
    uvicorn.run(
        app,
        host=http_settings.host,
        port=http_settings.port,
        proxy_headers=False,
    )


if __name__ == "__main__":
    main()
