"""Carimbo de data/hora no formato local es-CO."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "America/Bogota"


def format_timestamp_es_co(moment: datetime | None = None, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Formata como a locale es-CO: "19/10/2026, 3:04:05 p. m.".

    Dia, mês e hora sem zero à esquerda; relógio de 12 horas.

    Args:
        moment: Instante a formatar (padrão: agora). Naive é tratado como UTC.
        timezone: Nome IANA do fuso de exibição.
    """
    moment = moment or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    local = moment.astimezone(ZoneInfo(timezone))

    hour_12 = local.hour % 12 or 12
    meridiem = "a. m." if local.hour < 12 else "p. m."
    return (
        f"{local.day}/{local.month}/{local.year}, "
        f"{hour_12}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )
