"""Testes para config.settings.slack."""

from __future__ import annotations

import pytest

from config.settings.slack import (
    SLACK_API_BASE_URL,
    SlackSettings,
    _load_from_env,
    get_slack_settings,
)


class TestSlackSettings:
    """Testes para SlackSettings."""

    def test_defaults(self) -> None:
        settings = SlackSettings()
        assert settings.api_base_url == "https://slack.com/api/"
        assert settings.request_timeout_seconds == 30.0
        assert settings.token == ""

    def test_validate_ok(self) -> None:
        assert SlackSettings(token="xoxb-1").validate() == []

    def test_validate_reports_all_errors(self) -> None:
        settings = SlackSettings(
            token="",
            api_base_url="https://slack.com/api",
            request_timeout_seconds=0,
        )
        errors = settings.validate()
        assert "SLACK_TOKEN não configurado" in errors
        assert "SLACK_API_BASE_URL deve terminar com '/'" in errors
        assert "SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors

    def test_validate_rejects_non_http_url(self) -> None:
        errors = SlackSettings(token="t", api_base_url="ftp://slack.com/").validate()
        assert errors == ["SLACK_API_BASE_URL deve ser uma URL http(s)"]

    def test_settings_are_frozen(self) -> None:
        settings = SlackSettings(token="a")
        with pytest.raises(AttributeError):
            settings.token = "b"  # type: ignore[misc]


class TestLoadFromEnv:
    """Testes de carregamento via variáveis de ambiente."""

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLACK_TOKEN", "xoxb-env")
        monkeypatch.setenv("SLACK_API_BASE_URL", "https://example.test/api/")
        monkeypatch.setenv("SLACK_REQUEST_TIMEOUT_SECONDS", "5")
        settings = _load_from_env()
        assert settings.token == "xoxb-env"
        assert settings.api_base_url == "https://example.test/api/"
        assert settings.request_timeout_seconds == 5.0

    def test_load_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("SLACK_TOKEN", "SLACK_API_BASE_URL", "SLACK_REQUEST_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)
        settings = _load_from_env()
        assert settings.token == ""
        assert settings.api_base_url == SLACK_API_BASE_URL

    def test_get_slack_settings_is_cached(self) -> None:
        get_slack_settings.cache_clear()
        try:
            assert get_slack_settings() is get_slack_settings()
        finally:
            get_slack_settings.cache_clear()


def test_settings_package_exports() -> None:
    import config.settings as settings_pkg

    assert set(settings_pkg.__all__) == {
        "SLACK_API_BASE_URL",
        "SLACK_DEFAULT_USER_AGENT",
        "SlackSettings",
        "get_slack_settings",
    }
    assert settings_pkg.get_slack_settings is get_slack_settings
