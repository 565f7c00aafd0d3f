"""Settings específicas do Slack.

Configurações do cliente da API Web do Slack.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Web
SLACK_API_BASE_URL: str = "https://slack.com/api/"
SLACK_DEFAULT_USER_AGENT: str = "slack-api-client/0.1 (+python-httpx)"


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do cliente Slack.

    Attributes:
        token: Token padrão da instância (bot/user token)
        api_base_url: URL base da API Web (termina com "/")
        request_timeout_seconds: Timeout para requisições HTTP
        user_agent: User-Agent enviado em todas as requisições
    """

    # Credenciais (carregadas de env ou Secret Manager)
    token: str = ""

    # API
    api_base_url: str = SLACK_API_BASE_URL

    # Timeouts
    request_timeout_seconds: float = 30.0

    user_agent: str = SLACK_DEFAULT_USER_AGENT

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.token:
            errors.append("SLACK_TOKEN não configurado")

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("SLACK_API_BASE_URL deve ser uma URL http(s)")
        elif not self.api_base_url.endswith("/"):
            errors.append("SLACK_API_BASE_URL deve terminar com '/'")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        token=os.getenv("SLACK_TOKEN", ""),
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "30")),
        user_agent=os.getenv("SLACK_USER_AGENT", SLACK_DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
