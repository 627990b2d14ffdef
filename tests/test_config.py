"""
Tests for settings, schema config, platforms and diagnostics sinks.
"""

import logging

import pytest
from pydantic import ValidationError

from config.settings import Settings
from schema.diagnostics import (
    QUALIFIED_NAMES_AFTER_UNQUALIFIED,
    LoggingDiagnostics,
    RecordingDiagnostics,
)
from schema.platform import (
    AnsiPlatform,
    MySQLPlatform,
    OraclePlatform,
    PostgreSQLPlatform,
    SQLServerPlatform,
    get_platform,
)
from schema.schema_config import DEFAULT_MAX_IDENTIFIER_LENGTH, SchemaConfig


class TestSettings:
    """Tests for environment-backed settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_NAMESPACE", raising=False)
        monkeypatch.delenv("MAX_IDENTIFIER_LENGTH", raising=False)
        settings = Settings(_env_file=None)

        assert settings.default_namespace is None
        assert settings.max_identifier_length == 63
        assert settings.default_dialect == "postgres"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_NAMESPACE", "analytics")
        monkeypatch.setenv("MAX_IDENTIFIER_LENGTH", "30")
        settings = Settings(_env_file=None)

        assert settings.default_namespace == "analytics"
        assert settings.max_identifier_length == 30

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_identifier_length=0)


class TestSchemaConfig:
    """Tests for the per-schema config."""

    def test_defaults(self):
        config = SchemaConfig()

        assert config.get_default_namespace_name() is None
        assert config.get_max_identifier_length() == DEFAULT_MAX_IDENTIFIER_LENGTH

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValidationError):
            SchemaConfig(max_identifier_length=0)

    def test_validates_assignment(self):
        config = SchemaConfig()

        with pytest.raises(ValidationError):
            config.max_identifier_length = -1

    def test_from_settings(self):
        settings = Settings(_env_file=None, default_namespace="public", max_identifier_length=30)
        config = SchemaConfig.from_settings(settings)

        assert config.get_default_namespace_name() == "public"
        assert config.get_max_identifier_length() == 30


class TestPlatforms:
    """Tests for the reference platforms."""

    @pytest.mark.parametrize("platform, value, expected", [
        (AnsiPlatform(), "Users", '"Users"'),
        (PostgreSQLPlatform(), "Users", '"Users"'),
        (MySQLPlatform(), "Users", "`Users`"),
        (SQLServerPlatform(), "Users", "[Users]"),
        (AnsiPlatform(), 'a"b', '"a""b"'),
        (MySQLPlatform(), "a`b", "`a``b`"),
        (SQLServerPlatform(), "a]b", "[a]]b]"),
    ])
    def test_quote_single_identifier(self, platform, value, expected):
        assert platform.quote_single_identifier(value) == expected

    @pytest.mark.parametrize("platform, expected", [
        (AnsiPlatform(), "Users"),
        (PostgreSQLPlatform(), "users"),
        (OraclePlatform(), "USERS"),
        (MySQLPlatform(), "Users"),
    ])
    def test_normalize_unquoted_identifier(self, platform, expected):
        assert platform.normalize_unquoted_identifier("Users") == expected

    def test_get_platform(self):
        assert isinstance(get_platform("postgres"), PostgreSQLPlatform)
        assert isinstance(get_platform("MSSQL"), SQLServerPlatform)

    def test_get_platform_from_settings(self, monkeypatch):
        monkeypatch.setattr(
            "schema.platform.get_settings",
            lambda: Settings(_env_file=None, default_dialect="mysql"),
        )

        assert isinstance(get_platform(), MySQLPlatform)

    def test_get_unknown_platform(self):
        with pytest.raises(ValueError) as exc_info:
            get_platform("db2")
        assert "Unknown dialect" in str(exc_info.value)


class TestDiagnostics:
    """Tests for diagnostics sinks."""

    def test_recording(self):
        sink = RecordingDiagnostics()
        sink.notify_deprecated_usage(QUALIFIED_NAMES_AFTER_UNQUALIFIED)

        assert sink.identifiers == [QUALIFIED_NAMES_AFTER_UNQUALIFIED]
        assert sink.count(QUALIFIED_NAMES_AFTER_UNQUALIFIED) == 1

    def test_logging(self, caplog):
        with caplog.at_level(logging.WARNING, logger="schema.diagnostics"):
            LoggingDiagnostics().notify_deprecated_usage(QUALIFIED_NAMES_AFTER_UNQUALIFIED)

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "qualified names" in caplog.records[0].getMessage()

    def test_logging_unknown_identifier(self, caplog):
        with caplog.at_level(logging.WARNING, logger="schema.diagnostics"):
            LoggingDiagnostics().notify_deprecated_usage("something-else")

        assert "something-else" in caplog.text
