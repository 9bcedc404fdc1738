"""Policies — decisões anti-abuso independentes de HTTP.

- rate_limit: janela fixa por cliente, rejeita acima do máximo
- slow_down: janela fixa por cliente, atrasa acima do limiar
- token_gate: segredo compartilhado opcional
- client_ip: resolução do IP real atrás de proxy
"""

from app.policies.client_ip import resolve_client_ip
from app.policies.rate_limit import FixedWindowRateLimiter, RateLimitDecision
from app.policies.slow_down import SlowDownPolicy
from app.policies.token_gate import is_token_valid

__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitDecision",
    "SlowDownPolicy",
    "is_token_valid",
    "resolve_client_ip",
]
