"""Tests for duration parsing and TTL normalization."""

import logging
from datetime import timedelta

import pytest

from redis_cache_adapter.utils.durations import parse_duration, to_milliseconds, to_timedelta


class TestParseDuration:
    """Test cases for parse_duration."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("5s", timedelta(seconds=5)),
            ("512ms", timedelta(milliseconds=512)),
            ("5m", timedelta(minutes=5)),
            ("1.5h", timedelta(minutes=90)),
            ("2h45m", timedelta(hours=2, minutes=45)),
            ("250us", timedelta(microseconds=250)),
            ("0", timedelta(0)),
            ("-1s", timedelta(seconds=-1)),
            (" 3s ", timedelta(seconds=3)),
        ],
    )
    def test_go_style_strings(self, text, expected):
        """Test Go-style duration strings."""
        assert parse_duration(text) == expected

    def test_numbers_are_seconds(self):
        """Test numeric values are treated as seconds."""
        assert parse_duration(3) == timedelta(seconds=3)
        assert parse_duration(0.25) == timedelta(milliseconds=250)

    def test_timedelta_passthrough(self):
        """Test timedelta values are returned unchanged."""
        assert parse_duration(timedelta(minutes=1)) == timedelta(minutes=1)

    @pytest.mark.parametrize("text", ["", "5", "five seconds", "5x", "s", "1h-5m"])
    def test_invalid_without_fallback_raises(self, text):
        """Test invalid values raise when no fallback is given."""
        with pytest.raises(ValueError):
            parse_duration(text)

    @pytest.mark.parametrize("value", ["99999999999h", 10 ** 20, float("inf")])
    def test_out_of_range_is_invalid(self, value):
        """Test durations beyond timedelta range are rejected or fall back."""
        with pytest.raises(ValueError):
            parse_duration(value)

        assert parse_duration(value, "3s") == timedelta(seconds=3)

    def test_invalid_uses_fallback(self, caplog):
        """Test invalid values fall back to the default and log a warning."""
        with caplog.at_level(logging.WARNING):
            result = parse_duration("soon", "8ms")

        assert result == timedelta(milliseconds=8)
        assert "soon" in caplog.text

    def test_boolean_is_rejected(self):
        """Test booleans are not durations."""
        with pytest.raises(TypeError):
            parse_duration(True)


class TestTTLHelpers:
    """Test cases for TTL normalization."""

    def test_to_timedelta_accepts_seconds(self):
        assert to_timedelta(3) == timedelta(seconds=3)
        assert to_timedelta(timedelta(minutes=2)) == timedelta(minutes=2)
        assert to_timedelta(0) == timedelta(0)

    def test_to_timedelta_rejects_negative(self):
        with pytest.raises(ValueError):
            to_timedelta(-1)

    def test_to_timedelta_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            to_timedelta(10 ** 20)

    def test_to_timedelta_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_timedelta("3s")

    def test_to_milliseconds_rounds_up(self):
        """Test sub-millisecond TTLs never collapse to zero."""
        assert to_milliseconds(timedelta(seconds=3)) == 3000
        assert to_milliseconds(timedelta(microseconds=1)) == 1
        assert to_milliseconds(timedelta(0)) == 0
