"""Shared utilities."""

from .durations import parse_duration, to_milliseconds, to_timedelta

__all__ = ["parse_duration", "to_milliseconds", "to_timedelta"]
