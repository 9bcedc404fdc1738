"""Protocolo de contadores de janela fixa para rate limit/slow-down."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import WindowHit


class RateLimitStoreProtocol(ABC):
    """Contrato mínimo assíncrono para contadores por chave.

    Método canônico:
    - increment(key, window_seconds) -> WindowHit
      Incrementa o contador da chave. A primeira batida abre uma janela de
      window_seconds; ao expirar, a contagem volta a zero.
    """

    @abstractmethod
    async def increment(self, key: str, window_seconds: int) -> WindowHit:
        """Incrementa e retorna o estado da janela.

        Args:
            key: Chave opaca (prefixo + IP do cliente)
            window_seconds: Duração da janela

        Returns:
            WindowHit com contagem e tempo restante.
        """

    @abstractmethod
    async def reset(self, key: str) -> None:
        """Zera o contador da chave."""
