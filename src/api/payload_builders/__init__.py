"""Payload builders — construção de mensagens para colaboradores externos.

Estrutura:
- email/: email de assinatura (HTML + anexo PNG)
"""

__all__: list[str] = []
