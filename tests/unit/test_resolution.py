"""
Unit tests for ContactResolver strategy orchestration.

Both clients are mocks; the tests check which lookups run and how their
results are merged.
"""

from unittest.mock import MagicMock

import pytest

from culinary_contacts.models import (
    ContactCandidate,
    EnrichmentQuery,
    LookupResult,
    SearchMode,
)
from culinary_contacts.resolution.resolver import ContactResolver
from culinary_contacts.sources.domain_search import DomainSearchClient
from culinary_contacts.sources.hunter import HunterClient


def _contact(email, rank=5):
    return ContactCandidate(name="X", title="T", email=email, confidence=90, rank=rank, score=rank)


def _result(term, mode, tag, *emails, domain=None):
    return LookupResult(
        query=EnrichmentQuery(term, mode, tag),
        contacts=tuple(_contact(e) for e in emails),
        source_tag=tag,
        domain=domain,
    )


@pytest.fixture
def hunter():
    hunter = MagicMock(spec=HunterClient)
    hunter.lookup.side_effect = lambda term, mode, tag, fallback_term=None: _result(
        term, mode, tag, f"{tag}@example.com"
    )
    return hunter


@pytest.fixture
def domain_search():
    domain_search = MagicMock(spec=DomainSearchClient)
    domain_search.resolve_domain.return_value = None
    return domain_search


@pytest.fixture
def resolver(hunter, domain_search):
    return ContactResolver(hunter, domain_search)


def _calls(hunter):
    return [(c.args[0], c.args[1], c.args[2]) for c in hunter.lookup.call_args_list]


class TestPrimaryStrategy:
    def test_by_domain_when_domain_found(self, resolver, hunter, domain_search):
        domain_search.resolve_domain.return_value = "balthazarny.com"
        result = resolver.resolve("Balthazar Restaurant")
        domain_search.resolve_domain.assert_called_once_with("Balthazar")
        assert _calls(hunter) == [("balthazarny.com", SearchMode.BY_DOMAIN, "primary_domain")]
        assert result.company_name == "Balthazar"
        assert result.strategies == ("primary_domain",)

    def test_by_name_with_location_fallback(self, resolver, hunter):
        resolver.resolve("Balthazar", "80 Spring St")
        hunter.lookup.assert_called_once_with(
            "Balthazar",
            SearchMode.BY_COMPANY_NAME,
            "primary_name",
            fallback_term="80 Spring St",
        )

    def test_generic_location_is_not_a_fallback(self, resolver, hunter):
        resolver.resolve("Balthazar", "Restaurant Group")
        assert hunter.lookup.call_args.kwargs["fallback_term"] is None


class TestSkippedListings:
    @pytest.mark.parametrize(
        "raw",
        ["", "New York, NY • Restaurant Group", "Compass Group USA", "Restaurant Group"],
    )
    def test_unresolved_company(self, resolver, hunter, domain_search, raw):
        result = resolver.resolve(raw, "Brooklyn", parent_company="Union Square Hospitality Group")
        assert result.contacts == ()
        hunter.lookup.assert_not_called()
        domain_search.resolve_domain.assert_not_called()


class TestParentStrategy:
    def test_parent_looked_up_by_domain(self, resolver, hunter, domain_search):
        domain_search.resolve_domain.side_effect = lambda name: {
            "Union Square Hospitality": "ushg.com"
        }.get(name)
        result = resolver.resolve("Gramercy Tavern", parent_company="Union Square Hospitality")
        assert ("ushg.com", SearchMode.BY_DOMAIN, "parent_domain") in _calls(hunter)
        assert "parent_domain" in result.strategies

    def test_parent_without_domain_is_skipped(self, resolver, hunter):
        resolver.resolve("Gramercy Tavern", parent_company="Union Square Hospitality Group")
        assert [tag for _, _, tag in _calls(hunter)] == ["primary_name"]

    def test_parent_same_as_company(self, resolver, hunter, domain_search):
        resolver.resolve("Balthazar", parent_company="balthazar")
        assert domain_search.resolve_domain.call_count == 1

    def test_excluded_parent(self, resolver, hunter, domain_search):
        resolver.resolve("Cafe Boulud", parent_company="Restaurant Associates")
        assert domain_search.resolve_domain.call_count == 1

    def test_parent_sharing_primary_domain(self, resolver, hunter, domain_search):
        domain_search.resolve_domain.return_value = "ushg.com"
        resolver.resolve("Gramercy Tavern", parent_company="Union Square Hospitality Group")
        assert _calls(hunter) == [("ushg.com", SearchMode.BY_DOMAIN, "primary_domain")]


class TestAddressStrategy:
    def test_address_candidates_looked_up_by_name(self, resolver, hunter):
        location = "Hudson Yards, Estiatorio Milos, New York, NY"
        result = resolver.resolve("Estiatorio Milos", location)
        assert _calls(hunter) == [
            ("Estiatorio Milos", SearchMode.BY_COMPANY_NAME, "primary_name"),
            ("Hudson Yards", SearchMode.BY_COMPANY_NAME, "address_0"),
        ]
        assert result.strategies == ("primary_name", "address_0")

    def test_address_candidates_can_be_disabled(self, hunter, domain_search):
        resolver = ContactResolver(hunter, domain_search, use_address_candidates=False)
        resolver.resolve("Estiatorio Milos", "Hudson Yards, New York")
        assert len(_calls(hunter)) == 1


class TestFailureIsolation:
    def test_failing_strategy_does_not_stop_others(self, resolver, hunter, domain_search):
        def lookup(term, mode, tag, fallback_term=None):
            if tag == "primary_name":
                raise RuntimeError("provider exploded")
            return _result(term, mode, tag, "gm@hudsonyards.com")

        hunter.lookup.side_effect = lookup
        result = resolver.resolve("Estiatorio Milos", "Hudson Yards, New York")
        assert [c.email for c in result.contacts] == ["gm@hudsonyards.com"]
        assert result.strategies == ("address_0",)

    def test_domain_search_failure(self, resolver, hunter, domain_search):
        domain_search.resolve_domain.side_effect = RuntimeError("search down")
        result = resolver.resolve("Balthazar", "Hudson Yards, New York")
        assert result.strategies == ("address_0",)


class TestLookupPlan:
    def test_plan(self, resolver, hunter, domain_search):
        plan = resolver.lookup_plan(
            "Estiatorio Milos",
            "Hudson Yards, New York, NY",
            parent_company="Milos Group",
        )
        assert [(q.search_term, q.source_tag) for q in plan] == [
            ("Estiatorio Milos", "primary_name"),
            ("Milos Group", "parent_domain"),
            ("Hudson Yards", "address_0"),
        ]
        hunter.lookup.assert_not_called()
        domain_search.resolve_domain.assert_not_called()

    def test_plan_for_unknown_company(self, resolver):
        assert resolver.lookup_plan("Restaurant Group") == []
