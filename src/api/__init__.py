"""API — camada de borda HTTP.

Responsabilidades:
- Receber o POST de assinatura e os probes de health
- Validar payloads e limites
- Construir o email a partir do payload validado

Subpastas:
- validators/: validação estrita do payload de assinatura
- payload_builders/: construção do email (HTML, anexo, carimbo de data)
- routes/: endpoints HTTP (assinatura, health)

NÃO PODE conter: IO de transporte, stores, orquestração de use cases.
"""
