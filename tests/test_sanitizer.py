"""Tests for sanitizer.strip_html_tags."""

from seo_tools.services.sanitizer import strip_html_tags


class TestStripHtmlTags:
    def test_strips_paragraph_and_inline_tags(self):
        assert strip_html_tags("<p>We need <strong>a developer</strong></p>") == "We need a developer"

    def test_strips_self_closing_tags(self):
        assert strip_html_tags("Line one<br/>Line two") == "Line oneLine two"

    def test_strips_tags_with_attributes(self):
        html = '<a href="/jobs" class="link">Jobs</a>'
        assert strip_html_tags(html) == "Jobs"

    def test_none_passes_through(self):
        assert strip_html_tags(None) is None

    def test_plain_text_unchanged(self):
        assert strip_html_tags("No markup here.") == "No markup here."

    def test_empty_string(self):
        assert strip_html_tags("") == ""

    def test_entities_are_left_alone(self):
        assert strip_html_tags("<p>Fish &amp; chips</p>") == "Fish &amp; chips"

    def test_does_not_collapse_whitespace(self):
        assert strip_html_tags("<p>a</p> <p>b</p>") == "a b"


class TestStripHtmlTagsRegexLimitations:
    """The stripper is a tag-boundary regex, not a parser."""

    def test_gt_inside_attribute_ends_tag_early(self):
        html = '<img alt="a > b">caption'
        assert strip_html_tags(html) == ' b">caption'

    def test_unclosed_tag_is_kept(self):
        assert strip_html_tags("text <b unclosed") == "text <b unclosed"

    def test_stray_gt_is_kept(self):
        assert strip_html_tags("5 > 3") == "5 > 3"

    def test_stray_lt_swallows_until_next_gt(self):
        assert strip_html_tags("3 < 5 and <b>bold</b>") == "3 bold"
