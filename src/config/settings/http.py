"""Settings da borda HTTP.

Porta, limite de body, CORS e confiança em proxy reverso.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(b|kb|mb|gb)?\s*$", re.IGNORECASE)
_SIZE_UNITS = {"b": 1, "kb": 1024, "mb": 1024**2, "gb": 1024**3}


def parse_byte_size(value: str) -> int:
    """Converte tamanho legível ("700kb", "1mb", "512") em bytes.

    Unidades base 1024; sem unidade significa bytes.

    Raises:
        ValueError: Se o formato não for reconhecido.
    """
    match = _SIZE_PATTERN.match(value)
    if not match:
        raise ValueError(f"Tamanho inválido: {value!r}")
    amount, unit = match.groups()
    return int(float(amount) * _SIZE_UNITS[(unit or "b").lower()])


def parse_origins(raw: str) -> tuple[str, ...]:
    """Separa lista de origins por vírgula, descartando entradas vazias."""
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class HttpSettings:
    """Configurações HTTP.

    Attributes:
        host: Interface de bind do uvicorn
        port: Porta de escuta
        json_limit: Limite de body original (ex.: "700kb")
        json_limit_bytes: Limite de body em bytes
        allowed_origins: Origins autorizados pelo CORS
        trust_proxy_hops: Proxies confiáveis à frente do serviço (0 = nenhum)
    """

    host: str = "0.0.0.0"
    port: int = 3000
    json_limit: str = "700kb"
    json_limit_bytes: int = 700 * 1024
    allowed_origins: tuple[str, ...] = ()
    trust_proxy_hops: int = 1

    def validate(self) -> list[str]:
        """Valida configurações HTTP.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")

        if self.json_limit_bytes <= 0:
            errors.append("JSON_LIMIT deve ser > 0")

        if not self.allowed_origins:
            errors.append("ALLOWED_ORIGINS vazio: requests com Origin serão bloqueados")

        if self.trust_proxy_hops < 0:
            errors.append("TRUST_PROXY_HOPS deve ser >= 0")

        return errors


def _load_http_from_env() -> HttpSettings:
    """Carrega HttpSettings de variáveis de ambiente."""
    json_limit = os.getenv("JSON_LIMIT", "700kb")
    return HttpSettings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        json_limit=json_limit,
        json_limit_bytes=parse_byte_size(json_limit),
        allowed_origins=parse_origins(os.getenv("ALLOWED_ORIGINS", "")),
        trust_proxy_hops=int(os.getenv("TRUST_PROXY_HOPS", "1")),
    )


@lru_cache(maxsize=1)
def get_http_settings() -> HttpSettings:
    """Retorna instância cacheada de HttpSettings."""
    return _load_http_from_env()
