"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: carrega .env, configura logging e
valida settings antes de o app aceitar tráfego.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_abuse_settings,
    get_base_settings,
    get_email_settings,
    get_http_settings,
    get_signature_settings,
)

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação: variáveis de .env e logging JSON.

    Deve ser chamada uma vez no início do serviço, antes de ler settings.
    Variáveis já presentes no ambiente têm precedência sobre o .env.
    """
    load_dotenv()
    base = get_base_settings()

    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings."""
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"http: {error}" for error in get_http_settings().validate())
    errors.extend(f"abuse: {error}" for error in get_abuse_settings().validate(base))
    errors.extend(f"signature: {error}" for error in get_signature_settings().validate())
    errors.extend(f"email: {error}" for error in get_email_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    environment = get_base_settings().environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
