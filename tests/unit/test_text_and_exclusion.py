"""
Unit tests for text normalization and the exclusion filter.
"""

import pytest

from culinary_contacts.parsing.exclusion import ExclusionFilter, get_default_filter
from culinary_contacts.parsing.text import (
    collapse_whitespace,
    normalize,
    normalize_key,
    squash,
    truncate,
)


class TestNormalize:
    def test_strips_symbols(self):
        assert normalize("Bar Boulud •") == "Bar Boulud "
        assert normalize("Joe's Pizza!") == "Joe's Pizza"

    def test_keeps_basic_punctuation(self):
        assert normalize("Smith & Wollensky, Inc.") == "Smith & Wollensky, Inc."

    def test_drops_underscores(self):
        assert normalize("foo_bar") == "foobar"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        assert normalize(value) == ""

    def test_normalize_is_idempotent(self):
        text = "Café • Boulud™ (NYC)"
        assert normalize(normalize(text)) == normalize(text)


class TestWhitespaceHelpers:
    def test_collapse_whitespace(self):
        assert collapse_whitespace("  a \t b\n c  ") == "a b c"

    def test_normalize_key(self):
        assert normalize_key("  Le  Bernardin • ") == "le bernardin"

    def test_squash(self):
        assert squash("Whole FoodsMarket") == "wholefoodsmarket"

    def test_truncate(self):
        assert truncate("short", 50) == "short"
        assert truncate("x" * 60, 50) == "x" * 47 + "..."
        assert len(truncate("x" * 60, 50)) == 50
        assert truncate(None, 50) == ""


class TestExclusionFilter:
    def test_exact_term_match(self):
        result = get_default_filter().check("Restaurant Associates")
        assert result
        assert result.matched_term == "restaurant associates"

    def test_containment_ignores_case_and_spacing(self):
        assert get_default_filter().is_excluded("EUREST at Google NYC")
        assert get_default_filter().is_excluded("CompassGroup")

    def test_partial_terms_checked_first(self):
        exclusions = ExclusionFilter(exact_terms=("Market",), partial_terms=("whole foods",))
        assert exclusions.check("Whole Foods Market").matched_term == "whole foods"

    def test_not_excluded(self):
        result = get_default_filter().check("Le Bernardin")
        assert not result
        assert result.matched_term is None

    @pytest.mark.parametrize("value", [None, "", "   ", "•"])
    def test_empty_is_never_excluded(self, value):
        assert not get_default_filter().is_excluded(value)

    def test_extra_terms(self):
        exclusions = ExclusionFilter(extra_terms=["Hospitality Staffing Co"])
        assert exclusions.is_excluded("Hospitality Staffing Co - Brooklyn")
        assert exclusions.term_count == ExclusionFilter().term_count + 1

    def test_extra_terms_from_settings(self, monkeypatch):
        monkeypatch.setenv("EXTRA_EXCLUDED_COMPANIES", '["Acme Staffing"]')
        assert get_default_filter().is_excluded("ACME Staffing LLC")

    def test_blank_terms_ignored(self):
        exclusions = ExclusionFilter(exact_terms=("", "  "), partial_terms=())
        assert exclusions.term_count == 0
        assert not exclusions.is_excluded("anything")
