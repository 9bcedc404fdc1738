"""Settings específicas de Email.

Envio SMTP das assinaturas para o destinatário fixo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do envio de email.

    Attributes:
        smtp_host: Host do servidor SMTP
        smtp_port: Porta SMTP (465 = TLS implícito, demais = STARTTLS)
        smtp_username: Usuário SMTP (também usado como remetente)
        smtp_password: Senha SMTP (app password no Gmail)
        recipient: Destinatário fixo das assinaturas
        from_name: Nome exibido no remetente
        timeout_seconds: Timeout de conexão SMTP
    """

    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_username: str = ""
    smtp_password: str = ""
    recipient: str = ""
    from_name: str = "Firma Digital"
    timeout_seconds: float = 30.0

    @property
    def has_credentials(self) -> bool:
        """Retorna True se usuário e senha SMTP estão configurados."""
        return bool(self.smtp_username and self.smtp_password)

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Email."""
        errors: list[str] = []
        if not self.has_credentials:
            errors.append("EMAIL_USER/EMAIL_PASS não configurados")
        if not self.recipient:
            errors.append("EMAIL_TO não configurado")
        if not self.smtp_host:
            errors.append("EMAIL_SMTP_HOST não configurado")
        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        smtp_host=os.getenv("EMAIL_SMTP_HOST", "smtp.gmail.com"),
        smtp_port=int(os.getenv("EMAIL_SMTP_PORT", "465")),
        smtp_username=os.getenv("EMAIL_USER", ""),
        smtp_password=os.getenv("EMAIL_PASS", ""),
        recipient=os.getenv("EMAIL_TO", ""),
        from_name=os.getenv("EMAIL_FROM_NAME", "Firma Digital"),
        timeout_seconds=float(os.getenv("EMAIL_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
