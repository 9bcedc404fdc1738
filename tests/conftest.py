"""Configuração do pytest para o projeto Firma Relay."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ e a raiz ao PYTHONPATH para permitir imports absolutos
root_path = Path(__file__).parent.parent
for path in (root_path, root_path / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config.settings import clear_settings_cache  # noqa: E402
from tests.fakes.signature_data import make_png_data_url  # noqa: E402

# Variáveis lidas pelas settings; limpas a cada teste para isolamento
_SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "SERVICE_NAME",
    "LOG_LEVEL",
    "REDIS_URL",
    "HOST",
    "PORT",
    "JSON_LIMIT",
    "ALLOWED_ORIGINS",
    "TRUST_PROXY_HOPS",
    "RATE_LIMIT_MAX",
    "RATE_LIMIT_WINDOW_SECONDS",
    "SLOWDOWN_AFTER",
    "SLOWDOWN_DELAY_MS",
    "RATE_LIMIT_BACKEND",
    "SIGNATURE_TOKEN",
    "SIGNATURE_MIN_BYTES",
    "SIGNATURE_MAX_BYTES",
    "SIGNATURE_TIMEZONE",
    "EMAIL_USER",
    "EMAIL_PASS",
    "EMAIL_TO",
    "EMAIL_SMTP_HOST",
    "EMAIL_SMTP_PORT",
    "EMAIL_FROM_NAME",
    "EMAIL_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Remove env de settings e limpa caches antes e depois de cada teste."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def png_data_url() -> str:
    return make_png_data_url()
