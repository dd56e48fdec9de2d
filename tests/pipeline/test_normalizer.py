"""Tests for content normalization."""

import pytest

from verifact.config.settings import settings
from verifact.pipeline import EmptyContentError, normalize
from verifact.schemas import PageMetadata


class TestNormalize:
    """Tests for normalize()."""

    def test_strips_whitespace(self):
        content = normalize("  \n Breaking news today. \t\n")
        assert content.text == "Breaking news today."

    def test_truncates_to_cap(self):
        content = normalize("abcdefghij", cap_length=4)
        assert content.text == "abcd"

    def test_default_cap_from_settings(self):
        content = normalize("y" * (settings.content_max_chars + 50))
        assert len(content.text) == settings.content_max_chars

    def test_short_text_untouched(self):
        assert normalize("Short text", cap_length=2000).text == "Short text"

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t\n", None])
    def test_empty_content_aborts(self, raw):
        with pytest.raises(EmptyContentError):
            normalize(raw)

    def test_empty_content_error_is_value_error(self):
        assert issubclass(EmptyContentError, ValueError)

    def test_invalid_cap(self):
        with pytest.raises(ValueError, match="cap_length"):
            normalize("text", cap_length=0)

    def test_metadata_carried(self):
        metadata = PageMetadata(url="https://www.bbc.com/news/world")
        content = normalize("News", metadata=metadata)
        assert content.metadata.hostname == "www.bbc.com"

    def test_default_metadata(self):
        content = normalize("News")
        assert content.metadata.hostname == ""
        assert content.metadata.date_candidates == ()
