"""Adapter-level configuration."""

from .logging_config import LogFormat, LoggingConfig, LoggingSettings, LogLevel, LogVerbosity, get_logger, setup_logging

__all__ = [
    "LogFormat",
    "LoggingConfig",
    "LoggingSettings",
    "LogLevel",
    "LogVerbosity",
    "get_logger",
    "setup_logging",
]
