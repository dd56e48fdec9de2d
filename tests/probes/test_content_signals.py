"""Tests for red flags, language detection and the news-page heuristic."""

import pytest

from verifact.probes.content_signals import (
    detect_language,
    detect_red_flags,
    is_news_page,
)

ATTRIBUTED = "Officials confirmed the figures, according to the ministry."


class TestRedFlags:
    """Tests for detect_red_flags()."""

    def test_clean_text_has_no_flags(self):
        assert detect_red_flags(ATTRIBUTED) == ()

    def test_emotional_language(self):
        flags = detect_red_flags("A shocking report, according to insiders.")
        assert flags == ("Contains emotional language",)

    def test_emotional_language_is_case_insensitive(self):
        assert "Contains emotional language" in detect_red_flags("SCANDAL at city hall source")

    def test_capital_run_of_ten(self):
        flags = detect_red_flags("ABSOLUTELYX true, according to staff.")
        assert flags == ("Excessive use of capital letters",)

    def test_capital_run_of_nine_is_fine(self):
        assert detect_red_flags("ABSOLUTEL true, according to staff.") == ()

    def test_spaced_capitals_do_not_count(self):
        assert detect_red_flags("THE BIG NEWS TODAY source") == ()

    def test_no_sources(self):
        assert detect_red_flags("The mayor resigned today.") == ("No sources cited",)

    def test_sources_substring_counts(self):
        """'sources' contains 'source'."""
        assert detect_red_flags("Sources say the mayor resigned.") == ()

    def test_all_flags_in_fixed_order(self):
        flags = detect_red_flags("UNBELIEVABLE!!! The mayor was EXPOSED")
        assert flags == (
            "Contains emotional language",
            "Excessive use of capital letters",
            "No sources cited",
        )

    def test_repeated_calls_are_identical(self):
        text = "Outrageous claims with no attribution"
        assert detect_red_flags(text) == detect_red_flags(text)


class TestDetectLanguage:
    """Tests for detect_language()."""

    def test_english_defaults_to_base(self):
        assert detect_language("The government announced new measures today.") == "en"

    def test_spanish(self):
        assert detect_language("El gobierno dijo que la medida no es temporal y que se aplica en todo el país") == "es"

    def test_french(self):
        assert detect_language("Le président a dit qu'il va avoir une réunion et il parle à la presse") == "fr"

    def test_german(self):
        assert detect_language("Die Regierung und der Kanzler sprechen mit den Ländern über das Gesetz") == "de"

    def test_tie_goes_to_earlier_language(self):
        """One match each for es and fr: es is evaluated first."""
        assert detect_language("la le") == "es"

    def test_shared_words_favor_first_language(self):
        """'de' and 'en' appear in both the es and fr lists."""
        assert detect_language("de en de en") == "es"

    def test_only_first_fifty_tokens_count(self):
        text = " ".join(["word"] * 50 + ["der", "die", "und"])
        assert detect_language(text) == "en"

    def test_custom_base_language(self):
        assert detect_language("hello world", base_language="nl") == "nl"

    def test_empty_text(self):
        assert detect_language("") == "en"


class TestIsNewsPage:
    @pytest.mark.parametrize(
        "url,title",
        [
            ("https://example.com/news/item", ""),
            ("https://example.com/a", "Breaking: storm hits coast"),
            ("https://example.com/STORY/1", None),
            (None, "Annual Report 2026"),
        ],
    )
    def test_news_pages(self, url, title):
        assert is_news_page(url, title)

    def test_other_pages(self):
        assert not is_news_page("https://example.com/shop/cart", "Your cart")

    def test_missing_everything(self):
        assert not is_news_page(None, None)
