"""
Sample App Backend — Text Service Unit Tests
==============================================

What:  Tests for the pure functions behind the API routes.
How:   Direct function calls, no HTTP client.
"""

import pytest

from sample_app.services.text_service import (
    build_greeting,
    transform_text,
    uptime_seconds,
)


class TestBuildGreeting:

    def test_default(self):
        assert build_greeting() == "Hello, World!"

    def test_none(self):
        assert build_greeting(None) == "Hello, World!"

    def test_empty_string_falls_back(self):
        assert build_greeting("") == "Hello, World!"

    def test_name(self):
        assert build_greeting("Alice") == "Hello, Alice!"

    def test_name_is_not_trimmed(self):
        assert build_greeting(" Bob ") == "Hello,  Bob !"


class TestTransformText:

    def test_simple(self):
        result = transform_text("hello")
        assert result.uppercase == "HELLO"
        assert result.length == 5

    def test_empty(self):
        result = transform_text("")
        assert result.uppercase == ""
        assert result.length == 0

    def test_length_counts_original_text(self):
        """'ß' uppercases to 'SS' but the input is one character."""
        result = transform_text("ß")
        assert result.uppercase == "SS"
        assert result.length == 1

    def test_length_counts_code_points(self):
        assert transform_text("😀").length == 1

    @pytest.mark.parametrize("text", ["abc", "ÀbÇ", "already UPPER", "123 !?"])
    def test_idempotent(self, text):
        once = transform_text(text).uppercase
        assert transform_text(once).uppercase == once


class TestUptimeSeconds:

    def test_elapsed(self):
        assert uptime_seconds(10.0, now=12.5) == 2.5

    def test_rounded_to_two_decimals(self):
        assert uptime_seconds(0.0, now=1.23456) == 1.23

    def test_never_negative(self):
        assert uptime_seconds(10.0, now=5.0) == 0.0

    def test_defaults_to_monotonic_clock(self):
        import time
        started = time.monotonic() - 5
        assert uptime_seconds(started) >= 5
