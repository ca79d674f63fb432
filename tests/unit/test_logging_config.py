"""Tests for environment-driven logging configuration."""

import pytest

from redis_cache_adapter.config import LogFormat, LoggingConfig, LoggingSettings, LogLevel, LogVerbosity


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for var in ("LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT", "LOG_ENABLE_REDIS_LOGGING"):
        monkeypatch.delenv(var, raising=False)


class TestLoggingSettings:
    """Test cases for LoggingSettings."""

    def test_defaults(self):
        settings = LoggingSettings()

        assert settings.level is None
        assert settings.verbosity is LogVerbosity.NORMAL
        assert settings.format is LogFormat.SIMPLE
        assert settings.effective_level == "WARNING"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "DETAILED")

        settings = LoggingSettings()

        assert settings.level is LogLevel.DEBUG
        assert settings.format is LogFormat.DETAILED
        assert settings.effective_level == "DEBUG"

    @pytest.mark.parametrize(
        "verbosity, expected",
        [("quiet", "ERROR"), ("normal", "WARNING"), ("verbose", "INFO"), ("debug", "DEBUG")],
    )
    def test_verbosity_mapping(self, verbosity, expected):
        assert LoggingSettings(verbosity=verbosity).effective_level == expected

    def test_explicit_level_wins(self):
        settings = LoggingSettings(level="ERROR", verbosity="DEBUG")

        assert settings.effective_level == "ERROR"


class TestLoggingConfig:
    """Test cases for the dictConfig builder."""

    def test_client_loggers_quiet_by_default(self):
        config = LoggingConfig.build(LoggingSettings(level="DEBUG"))

        assert config["root"]["level"] == "DEBUG"
        assert config["handlers"]["console"]["level"] == "DEBUG"
        assert config["loggers"]["redis"]["level"] == "WARNING"
        assert config["loggers"]["redis"]["propagate"] is False

    def test_redis_logging_enabled(self):
        config = LoggingConfig.build(LoggingSettings(enable_redis_logging=True))

        assert config["loggers"] == {}

    def test_json_format(self):
        config = LoggingConfig.build(LoggingSettings(format="json"))

        assert config["formatters"]["default"]["format"].startswith('{"time"')
