"""Settings de proteção contra abuso.

Rate limit, slow-down e token anti-bot do endpoint de assinatura.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

RateLimitBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class AbuseProtectionSettings:
    """Configurações anti-abuso.

    Attributes:
        rate_limit_max: Requests aceitos por IP na janela
        rate_limit_window_seconds: Duração da janela fixa
        slowdown_after: Requests por IP antes de começar a atrasar
        slowdown_delay_ms: Atraso aplicado a cada request excedente
        backend: Backend dos contadores (memory|redis)
        signature_token: Segredo compartilhado (vazio = sem gate)
    """

    rate_limit_max: int = 10
    rate_limit_window_seconds: int = 900  # 15 min
    slowdown_after: int = 5
    slowdown_delay_ms: int = 800
    backend: RateLimitBackend = "memory"
    signature_token: str = ""

    @property
    def token_required(self) -> bool:
        """Retorna True se o header X-Signature-Token é exigido."""
        return bool(self.signature_token)

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações anti-abuso.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.rate_limit_max < 1:
            errors.append("RATE_LIMIT_MAX deve ser >= 1")

        if self.rate_limit_window_seconds < 1:
            errors.append("RATE_LIMIT_WINDOW_SECONDS deve ser >= 1")

        if self.slowdown_after < 0:
            errors.append("SLOWDOWN_AFTER deve ser >= 0")

        if self.slowdown_delay_ms < 0:
            errors.append("SLOWDOWN_DELAY_MS deve ser >= 0")

        if self.backend not in ("memory", "redis"):
            errors.append(f"RATE_LIMIT_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "RATE_LIMIT_BACKEND=memory proibido em staging/production. Use Redis."
            )

        if self.backend == "redis" and not base.redis_url:
            errors.append("RATE_LIMIT_BACKEND=redis requer REDIS_URL configurado")

        return errors


def _load_abuse_from_env() -> AbuseProtectionSettings:
    """Carrega AbuseProtectionSettings de variáveis de ambiente."""
    backend_str = os.getenv("RATE_LIMIT_BACKEND", "memory").lower()
    backend: RateLimitBackend = backend_str if backend_str in ("memory", "redis") else "memory"
    return AbuseProtectionSettings(
        rate_limit_max=int(os.getenv("RATE_LIMIT_MAX", "10")),
        rate_limit_window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900")),
        slowdown_after=int(os.getenv("SLOWDOWN_AFTER", "5")),
        slowdown_delay_ms=int(os.getenv("SLOWDOWN_DELAY_MS", "800")),
        backend=backend,
        signature_token=os.getenv("SIGNATURE_TOKEN", ""),
    )


@lru_cache(maxsize=1)
def get_abuse_settings() -> AbuseProtectionSettings:
    """Retorna instância cacheada de AbuseProtectionSettings."""
    return _load_abuse_from_env()
