"""Tests for text trimming."""

from __future__ import annotations

from string_grouper.utils.text import trim


class TestTrim:
    def test_strips_spaces_and_control_characters(self) -> None:
        assert trim("\x00\t a;1 \x1f\r") == "a;1"

    def test_keeps_non_ascii_whitespace(self) -> None:
        assert trim("\u00a0a;1\u3000") == "\u00a0a;1\u3000"

    def test_inner_characters_untouched(self) -> None:
        assert trim(" a \x00 b ") == "a \x00 b"
