"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- slack/: API Web do Slack

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
