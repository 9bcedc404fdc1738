"""Validators — validação de payloads recebidos pela API.

Estrutura:
- signature/: payload de assinatura digital (nome, documento, PNG base64)
"""

__all__: list[str] = []
