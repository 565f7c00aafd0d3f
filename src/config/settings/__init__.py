"""Agregador de settings.

Re-exporta settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.slack import (
    SLACK_API_BASE_URL,
    SLACK_DEFAULT_USER_AGENT,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "SLACK_API_BASE_URL",
    "SLACK_DEFAULT_USER_AGENT",
    "SlackSettings",
    "get_slack_settings",
]
