"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (assinatura, health)
- Validação inicial de request (headers, body)
- Delegação para use cases
- Respostas HTTP apropriadas

Estrutura:
- routes/signature/: POST /send-signature
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
