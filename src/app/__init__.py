"""App — coração do serviço: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (validar e encaminhar assinatura)
- infra/: implementações concretas de IO (SMTP, Redis, memória)
- protocols/: contratos/interfaces
- policies/: políticas anti-abuso (rate limit, slow-down, token, IP)
- middleware/: borda ASGI (CORS guard, headers de segurança, limite de body)
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
