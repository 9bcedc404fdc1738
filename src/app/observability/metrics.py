"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas depois
pelo coletor de logs da plataforma.

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Rejeição: counter de requests barrados pelo gate, com motivo

Uso:
    from app.observability import record_latency, record_rejection

    start = time.perf_counter()
    # ... operação ...
    record_latency("mail", "send", (time.perf_counter() - start) * 1000)

    record_rejection("rate_limited")
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "mail")
        operation: Nome da operação (ex: "send")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_rejection(reason: str, correlation_id: str | None = None) -> None:
    """Registra request rejeitado pelo gate anti-abuso ou validação.

    Args:
        reason: Motivo curto, sem PII (ex: "rate_limited", "invalid_token")
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_rejection",
        extra={
            "metric_type": "counter",
            "reason": reason,
            "correlation_id": correlation_id,
        },
    )
