"""Middlewares ASGI da borda HTTP.

Ordem (externo → interno) montada em app.app.create_app:
CorrelationId → SecurityHeaders → OriginGuard → CORS → BodySizeLimit → rotas
"""

from app.middleware.body_limit import BodySizeLimitMiddleware, PayloadTooLargeError
from app.middleware.correlation import CorrelationIdMiddleware
from app.middleware.origin_guard import OriginGuardMiddleware, is_origin_allowed
from app.middleware.security_headers import DEFAULT_SECURITY_HEADERS, SecurityHeadersMiddleware

__all__ = [
    "DEFAULT_SECURITY_HEADERS",
    "BodySizeLimitMiddleware",
    "CorrelationIdMiddleware",
    "OriginGuardMiddleware",
    "PayloadTooLargeError",
    "SecurityHeadersMiddleware",
    "is_origin_allowed",
]
