"""Tests for seo_tools.services.normalizer."""

from datetime import date, datetime, timedelta, timezone

import pytest

from seo_tools.services.normalizer import format_iso8601, resolve_path, resolve_url, truncate

_BASE = "https://example.com"


class TestTruncate:
    def test_short_string_unchanged(self):
        assert truncate("Short description") == "Short description"

    def test_exactly_forty_chars_unchanged(self):
        text = "x" * 40
        assert truncate(text) == text

    def test_long_string_cut_to_forty_plus_trail(self):
        text = "a" * 41
        result = truncate(text)
        assert result == "a" * 40 + ".."
        assert len(result) == 42

    @pytest.mark.parametrize("length", [41, 50, 200])
    def test_long_strings_always_end_with_trail(self, length):
        result = truncate("y" * length)
        assert len(result) == 42
        assert result.endswith("..")

    def test_custom_max_length_and_trail(self):
        assert truncate("Hello world", max_length=5, trail="…") == "Hello…"

    def test_custom_max_length_short_input(self):
        assert truncate("Hi", max_length=5, trail="!!") == "Hi"

    def test_none_passes_through(self):
        assert truncate(None) is None

    def test_none_passes_through_with_custom_args(self):
        assert truncate(None, max_length=3, trail="...") is None

    def test_counts_code_points_not_graphemes(self):
        # "e" + COMBINING ACUTE ACCENT renders as one character but is two code points
        text = "e\u0301" * 21
        result = truncate(text)
        assert result == text[:40] + ".."
        assert result.startswith("e\u0301" * 20)

    def test_cut_can_split_combining_mark(self):
        assert truncate("ae\u0301", max_length=2) == "ae.."

    def test_empty_string(self):
        assert truncate("") == ""


class TestResolveUrl:
    def test_absolute_path(self):
        assert resolve_url(_BASE, "/blog") == "https://example.com/blog"

    def test_relative_path_against_host_only_base(self):
        assert resolve_url(_BASE, "blog") == "https://example.com/blog"

    def test_relative_path_merges_with_base_directory(self):
        assert resolve_url("https://example.com/docs/intro", "setup") == "https://example.com/docs/setup"

    def test_dot_segments_removed(self):
        assert resolve_url("https://example.com/a/b/c", "../d") == "https://example.com/a/d"

    def test_absolute_reference_wins(self):
        assert resolve_url(_BASE, "https://other.org/x") == "https://other.org/x"

    def test_root(self):
        assert resolve_url(_BASE, "/") == "https://example.com/"


class TestResolvePath:
    def test_none_gives_empty_string(self):
        assert resolve_path(_BASE, None) == ""

    def test_query_string_dropped(self):
        assert resolve_path(_BASE, "/blog?page=2") == "https://example.com/blog"

    def test_only_path_of_full_url_used(self):
        assert resolve_path(_BASE, "http://localhost:4000/about") == "https://example.com/about"


class TestFormatIso8601:
    def test_date(self):
        assert format_iso8601(date(2024, 1, 1)) == "2024-01-01"

    def test_utc_datetime_uses_z(self):
        value = datetime(2024, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
        assert format_iso8601(value) == "2024-12-31T23:59:59Z"

    def test_offset_datetime_keeps_offset(self):
        value = datetime(2024, 6, 1, 8, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_iso8601(value) == "2024-06-01T08:30:00+02:00"

    def test_naive_datetime_has_no_offset(self):
        assert format_iso8601(datetime(2023, 1, 1, 12, 0, 0)) == "2023-01-01T12:00:00"

    def test_string_passes_through(self):
        assert format_iso8601("2024-03-05") == "2024-03-05"

    def test_none(self):
        assert format_iso8601(None) is None
