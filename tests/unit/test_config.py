"""
Tests for skillmatch.utils: settings, constants and logging helpers.
"""

import pytest
from pydantic import ValidationError

from skillmatch.data.database import DatabaseManager
from skillmatch.utils.config import (
    AppSettings,
    DatabaseSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
)
from skillmatch.utils.constants import (
    INTEREST_BONUS,
    MAX_COMPATIBILITY_SCORE,
    DirectoryBackend,
    MatchStrength,
)
from skillmatch.utils.logger import LoggerMixin, sanitize_for_logging


class TestMatchingSettings:
    def test_defaults_match_constants(self):
        settings = MatchingSettings()
        assert settings.max_score == MAX_COMPATIBILITY_SCORE == 99
        assert settings.interest_bonus == INTEREST_BONUS == 20

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MATCH_INTEREST_BONUS", "10")
        assert MatchingSettings().interest_bonus == 10

    def test_max_score_cannot_reach_100(self, monkeypatch):
        monkeypatch.setenv("MATCH_MAX_SCORE", "100")
        with pytest.raises(ValidationError):
            MatchingSettings()


class TestOtherSettings:
    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert LoggingSettings().level == "DEBUG"

    def test_database_uri_escapes_credentials(self, monkeypatch):
        monkeypatch.setenv("DB_HOST", "db")
        monkeypatch.setenv("DB_PORT", "27018")
        monkeypatch.setenv("DB_USERNAME", "app@campus")
        monkeypatch.setenv("DB_PASSWORD", "p/w:1")
        reload_settings()
        try:
            assert DatabaseManager()._build_uri() == "mongodb://app%40campus:p%2Fw%3A1@db:27018"
        finally:
            for name in ("DB_HOST", "DB_PORT", "DB_USERNAME", "DB_PASSWORD"):
                monkeypatch.delenv(name)
            reload_settings()

    def test_database_uri_without_credentials(self, monkeypatch):
        monkeypatch.setenv("DB_HOST", "db")
        monkeypatch.setenv("DB_USERNAME", "app")
        monkeypatch.delenv("DB_PASSWORD", raising=False)
        reload_settings()
        try:
            assert DatabaseManager()._build_uri() == f"mongodb://db:{DatabaseSettings().port}"
        finally:
            monkeypatch.delenv("DB_HOST")
            monkeypatch.delenv("DB_USERNAME")
            reload_settings()

    def test_database_uri_rejects_shell_characters(self, monkeypatch):
        monkeypatch.setenv("DB_HOST", "db;rm")
        reload_settings()
        try:
            with pytest.raises(ValueError):
                DatabaseManager()
        finally:
            monkeypatch.delenv("DB_HOST")
            reload_settings()

    def test_testing_environment_from_conftest(self):
        settings = AppSettings()
        assert settings.environment == "testing"
        assert settings.directory.backend == DirectoryBackend.MEMORY.value

    def test_reload_settings_replaces_singleton(self):
        first = get_settings()
        assert reload_settings() is not first
        assert get_settings() is not first


class TestMatchStrength:
    @pytest.mark.parametrize(
        "score, expected",
        [(0, MatchStrength.NONE), (1, MatchStrength.WEAK), (39, MatchStrength.WEAK),
         (40, MatchStrength.GOOD), (70, MatchStrength.STRONG), (99, MatchStrength.STRONG)],
    )
    def test_from_score(self, score, expected):
        assert MatchStrength.from_score(score) == expected


class TestLoggingHelpers:
    def test_sanitize_redacts_nested_secrets(self):
        data = {"username": "ada", "password": "pw", "profile": {"apiKey": "k", "bio": "hi"}}

        sanitized = sanitize_for_logging(data)

        assert sanitized["username"] == "ada"
        assert sanitized["password"] == "***REDACTED***"
        assert sanitized["profile"]["apiKey"] == "***REDACTED***"
        assert sanitized["profile"]["bio"] == "hi"

    def test_sanitize_lists(self):
        assert sanitize_for_logging([{"token": "t"}]) == [{"token": "***REDACTED***"}]

    def test_logger_mixin_caches_logger(self):
        class Worker(LoggerMixin):
            pass

        worker = Worker()
        assert worker.logger is worker.logger
