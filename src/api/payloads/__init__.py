"""Payloads tipados por canal — requisições e respostas de APIs externas.

Estrutura:
- slack/: API Web do Slack (requisição tipada → tipo de resposta)
"""

__all__: list[str] = []
