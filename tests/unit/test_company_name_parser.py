"""
Unit tests for the company name parser.

The inputs are real job-card strings: company, location and category
fragments glued together by the crawler.
"""

import pytest

from culinary_contacts.models import ParseStatus
from culinary_contacts.parsing.company_name import (
    PARSE_RULES,
    ParseState,
    extract_by_attribution,
    parse_company,
    repair_camel_case,
    split_off_location,
    starts_with_place,
    strip_suffixes,
)
from culinary_contacts.parsing.exclusion import ExclusionFilter


class TestResolvedNames:
    """Inputs that yield a usable company name."""

    def test_glued_location_and_category(self):
        parsed = parse_company("Seaport Entertainment GroupNew York, NY • Restaurant Group")
        assert parsed.status is ParseStatus.RESOLVED
        assert parsed.name == "Seaport Entertainment Group"

    def test_all_caps_restaurant_group_is_title_cased(self):
        parsed = parse_company("MARCUS SAMUELSSON RESTAURANT GROUP")
        assert parsed.name == "Marcus Samuelsson Restaurant Group"
        assert parsed.is_resolved

    def test_whole_name_suffix_preserved(self):
        parsed = parse_company("Union Square Hospitality Group")
        assert parsed.name == "Union Square Hospitality Group"

    def test_keyword_extraction_stops_at_place(self):
        parsed = parse_company("P.M. Pastry Sous Chef abc V Restaurants by Jorges New York")
        assert parsed.name == "Restaurants by Jorges"

    def test_trailing_generic_noun_stripped(self):
        assert parse_company("Balthazar Restaurant").name == "Balthazar"

    def test_job_title_prefix_stripped(self):
        assert parse_company("Sous Chef Balthazar").name == "Balthazar"

    def test_location_after_comma_dropped(self):
        assert parse_company("Joe's Pizza, Brooklyn").name == "Joe's Pizza"

    def test_glued_venue_word_separated(self):
        assert parse_company("CafeBoulud").name == "Cafe Boulud"

    def test_legal_suffix_stripped(self):
        assert parse_company("Momofuku Inc.").name == "Momofuku"

    def test_place_with_qualifier_is_a_company(self):
        parsed = parse_company("Brooklyn Brewery")
        assert parsed.is_resolved
        assert parsed.name == "Brooklyn Brewery"

    def test_bullet_suffix_ignored(self):
        assert parse_company("Le Bernardin • Fine Dining").name == "Le Bernardin"


class TestUnknownNames:
    """Inputs that are not a company name."""

    @pytest.mark.parametrize("raw", [None, "", "   ", "Unknown"])
    def test_empty(self, raw):
        parsed = parse_company(raw)
        assert parsed.status is ParseStatus.UNKNOWN
        assert parsed.name == "Unknown"

    def test_location_header(self):
        parsed = parse_company("New York, NY • Restaurant Group")
        assert parsed.status is ParseStatus.UNKNOWN
        assert parsed.reason == "location_header"

    @pytest.mark.parametrize("raw", ["Restaurant Group", "Hospitality", "Fine Dining", "Bar"])
    def test_generic_terms(self, raw):
        assert parse_company(raw).status is ParseStatus.UNKNOWN

    @pytest.mark.parametrize("raw", ["Brooklyn", "New York", "Manhattan", "Chicago"])
    def test_place_names(self, raw, no_exclusions):
        parsed = parse_company(raw, exclusions=no_exclusions)
        assert parsed.status is ParseStatus.UNKNOWN
        assert parsed.reason == "place_name"

    def test_short_place_prefixed_name(self, no_exclusions):
        parsed = parse_company("Chicago Loop", exclusions=no_exclusions)
        assert parsed.status is ParseStatus.UNKNOWN
        assert parsed.reason == "place_prefix"

    def test_initials_fragment(self, no_exclusions):
        assert parse_company("A B C", exclusions=no_exclusions).reason == "fragment"


class TestExcludedNames:
    """Agencies, contract caterers and geography are excluded before parsing."""

    def test_exact_exclusion(self):
        parsed = parse_company("Compass Group USA • New York, NY")
        assert parsed.status is ParseStatus.EXCLUDED
        assert parsed.name == "Excluded"
        assert parsed.reason == "compass"

    def test_partial_exclusion_inside_glued_text(self):
        parsed = parse_company("Whole FoodsMarketBrooklyn, NY")
        assert parsed.status is ParseStatus.EXCLUDED
        assert parsed.reason == "whole foods"

    def test_geography_is_excluded(self):
        assert parse_company("Washington").status is ParseStatus.EXCLUDED

    def test_custom_filter(self):
        exclusions = ExclusionFilter(exact_terms=("Acme Staffing",), partial_terms=())
        parsed = parse_company("ACME STAFFING • Queens", exclusions=exclusions)
        assert parsed.status is ParseStatus.EXCLUDED


class TestParserProperties:
    """Properties that hold for every input."""

    INPUTS = [
        "Seaport Entertainment GroupNew York, NY • Restaurant Group",
        "MARCUS SAMUELSSON RESTAURANT GROUP",
        "Union Square Hospitality Group",
        "Balthazar Restaurant",
        "Joe's Pizza, Brooklyn",
        "CafeBoulud",
        "Le Bernardin • Fine Dining",
    ]

    @pytest.mark.parametrize("raw", INPUTS)
    def test_idempotent_on_resolved_names(self, raw):
        first = parse_company(raw)
        assert first.is_resolved
        assert parse_company(first.name).name == first.name

    @pytest.mark.parametrize("raw", INPUTS + ["", "New York, NY • Restaurant Group", "!!!"])
    def test_total(self, raw):
        parsed = parse_company(raw)
        assert parsed.status in set(ParseStatus)
        assert parsed.name

    def test_resolved_names_are_trimmed(self):
        for raw in self.INPUTS:
            name = parse_company(raw).name
            assert name == name.strip()
            assert "  " not in name


class TestRules:
    """Individual rule functions."""

    def _state(self, text, glued=()):
        state = ParseState(raw=text, exclusions=ExclusionFilter((), ()), text=text)
        state.glued_places.extend(glued)
        return state

    def test_rules_are_ordered_with_rejections_first(self):
        names = [rule.__name__ for rule in PARSE_RULES]
        assert names[:3] == ["reject_trivial", "reject_excluded", "reject_location_header"]
        assert names.index("repair_glued_places") < names.index("split_off_location")

    def test_split_at_repaired_place(self):
        state = self._state("Seaport Entertainment Group New York, NY", glued=["New York"])
        split_off_location(state)
        assert state.text == "Seaport Entertainment Group"

    def test_split_at_last_comma(self):
        state = self._state("Carbone, 181 Thompson St, New York")
        split_off_location(state)
        assert state.text == "Carbone"

    def test_camel_case_keeps_protected_tokens(self):
        state = self._state("SoHoHouseNYC")
        repair_camel_case(state)
        assert "SoHo" in state.text
        assert "NYC" in state.text

    def test_camel_case_split(self):
        state = self._state("BlueHill")
        repair_camel_case(state)
        assert state.text == "Blue Hill"

    def test_by_attribution_keeps_window_before_by(self):
        state = self._state("Line Cook Restaurants by Jorge")
        extract_by_attribution(state)
        assert state.text == "Restaurants by Jorge"

    def test_protected_group_not_stripped(self):
        state = self._state("Union Square Food Group")
        strip_suffixes(state)
        assert state.text == "Union Square Food Group"

    def test_repeated_trailing_nouns_stripped(self):
        state = self._state("Smith Bar Grill")
        strip_suffixes(state)
        assert state.text == "Smith"


class TestStartsWithPlace:
    def test_full_place_name(self):
        assert starts_with_place("New York, NY")

    def test_place_must_end_at_word_break(self):
        assert not starts_with_place("Brooklyn's Finest")
        assert not starts_with_place("INdigo")

    def test_state_abbreviation_is_case_sensitive(self):
        assert starts_with_place("LA Kitchen")
        assert not starts_with_place("la Kitchen")
