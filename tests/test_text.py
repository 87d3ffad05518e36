"""Tests for text helpers."""

import pytest

from adaptive.text import contains, ends_with, lc, starts_with, strip_trailing


@pytest.mark.unit
class TestTextHelpers:
    def test_lc(self):
        assert lc("Hello WORLD") == "hello world"

    def test_strip_trailing_newlines(self):
        assert strip_trailing("Jane Doe\n\n") == "Jane Doe"

    def test_strip_trailing_custom_chars(self):
        assert strip_trailing("path///", "/") == "path"

    def test_strip_trailing_keeps_inner_chars(self):
        assert strip_trailing("a\nb\n") == "a\nb"

    def test_strip_trailing_nothing_to_strip(self):
        assert strip_trailing("value", "") == "value"

    def test_contains(self):
        assert contains("ell", "hello") is True
        assert contains("xyz", "hello") is False

    def test_contains_empty_content(self):
        assert contains("a", "") is False

    def test_contains_requires_find(self):
        with pytest.raises(ValueError):
            contains("", "hello")

    def test_starts_and_ends_with(self):
        assert starts_with("git@", "git@github.com:x/y.git") is True
        assert ends_with(".git", "git@github.com:x/y.git") is True
        assert starts_with("https", "git@github.com") is False
