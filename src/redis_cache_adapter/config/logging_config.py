"""Logging configuration for the cache adapter.

Provides environment-driven logging setup for applications embedding the
adapter, with the redis client library kept quiet by default.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Levels accepted by LOG_LEVEL."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Coarse LOG_VERBOSITY presets, used when LOG_LEVEL is unset.

    QUIET logs errors only; each later preset lowers the threshold one level.
    """
    QUIET = "QUIET"
    NORMAL = "NORMAL"
    VERBOSE = "VERBOSE"
    DEBUG = "DEBUG"


class LogFormat(str, Enum):
    """Console line layouts selected by LOG_FORMAT."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


_VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: LogLevel.ERROR,
    LogVerbosity.NORMAL: LogLevel.WARNING,
    LogVerbosity.VERBOSE: LogLevel.INFO,
    LogVerbosity.DEBUG: LogLevel.DEBUG,
}

_FORMATS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingSettings(BaseSettings):
    """Logging settings read from LOG_LEVEL, LOG_VERBOSITY and LOG_FORMAT."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
        extra="ignore",
    )

    level: Optional[LogLevel] = None
    verbosity: LogVerbosity = LogVerbosity.NORMAL
    format: LogFormat = LogFormat.SIMPLE
    enable_redis_logging: bool = False

    @field_validator("level", "verbosity", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("format", mode="before")
    @classmethod
    def _lower(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @property
    def effective_level(self) -> str:
        """Explicit level wins over the verbosity mapping."""
        if self.level is not None:
            return self.level.value
        return _VERBOSITY_LEVELS[self.verbosity].value


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Kept at WARNING unless redis logging is enabled
    CLIENT_MODULES = [
        "redis",
        "asyncio",
    ]

    @classmethod
    def build(cls, settings: Optional[LoggingSettings] = None) -> Dict[str, Any]:
        """Build a ``logging.config.dictConfig`` mapping."""
        settings = settings or LoggingSettings()
        level = settings.effective_level

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": _FORMATS[settings.format],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        if not settings.enable_redis_logging:
            for module in cls.CLIENT_MODULES:
                logging_config["loggers"][module] = {
                    "level": "WARNING",
                    "handlers": ["console"],
                    "propagate": False,
                }

        return logging_config

    @classmethod
    def configure(cls, settings: Optional[LoggingSettings] = None) -> None:
        """Configure logging based on environment settings."""
        settings = settings or LoggingSettings()
        logging.config.dictConfig(cls.build(settings))

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={settings.effective_level}, format={settings.format.value}")


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    Call once at application startup.
    """
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    """Get a logger, usually for ``__name__``."""
    return logging.getLogger(name)
