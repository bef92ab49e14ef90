"""
Unit tests for the listing runner and the JSON Lines listing reader.
"""

import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from culinary_contacts.models import (
    CompanyContactResult,
    ContactCandidate,
    ParsedCompany,
    RawListing,
)
from culinary_contacts.pipeline.listings import listing_from_dict, load_listings
from culinary_contacts.pipeline.runner import ListingRunner
from culinary_contacts.resolution.resolver import ContactResolver

DETAIL_HTML = '<p>Part of <a class="text-muted">Union Square Hospitality Group</a></p>'


class FakeSink:
    """In-memory sink recording each flush."""

    def __init__(self, existing=()):
        self.existing = set(existing)
        self.batches = []

    def existing_urls(self):
        return set(self.existing)

    def write_records(self, records):
        self.batches.append(list(records))
        return len(records)


class FakeClock:
    def __init__(self, step=0.0):
        self.now = 0.0
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


def _listing(n, company="Balthazar", **extra):
    return RawListing(
        title=f"Job {n}",
        raw_company_text=company,
        raw_location_text="New York, NY",
        url=f"https://jobs.example.com/{n}",
        **extra,
    )


@pytest.fixture
def resolver():
    resolver = MagicMock(spec=ContactResolver)
    resolver.parse.side_effect = lambda raw: (
        ParsedCompany.unknown("generic_term") if raw == "Restaurant Group"
        else ParsedCompany.resolved(raw)
    )
    contact = ContactCandidate(
        name="Ann", title="GM", email="ann@balthazarny.com", confidence=90, rank=1, score=1
    )
    resolver.resolve_parsed.side_effect = lambda parsed, location, parent: (
        CompanyContactResult(company_name=parsed.name, contacts=(contact,))
        if parsed.is_resolved
        else CompanyContactResult.empty(parsed.name)
    )
    return resolver


class TestListingRunner:
    def test_processes_all_listings(self, resolver):
        sink = FakeSink()
        summary = ListingRunner(resolver, sink, batch_size=2).run(
            [_listing(1), _listing(2), _listing(3, company="Restaurant Group")]
        )
        assert summary.processed == 3
        assert summary.with_contacts == 2
        assert summary.unknown == 1
        assert [len(batch) for batch in sink.batches] == [2, 1]
        assert summary.rows_written == 3

    def test_skips_exported_and_duplicate_urls(self, resolver):
        sink = FakeSink(existing={"https://jobs.example.com/1"})
        summary = ListingRunner(resolver, sink).run([_listing(1), _listing(2), _listing(2)])
        assert summary.processed == 1
        assert summary.skipped_duplicates == 2

    def test_listing_failure_is_counted_not_fatal(self, resolver):
        def resolve(parsed, location, parent):
            if parsed.name == "Broken":
                raise RuntimeError("boom")
            return CompanyContactResult.empty(parsed.name)

        resolver.resolve_parsed.side_effect = resolve
        sink = FakeSink()
        summary = ListingRunner(resolver, sink).run(
            [_listing(1, company="Broken"), _listing(2)]
        )
        assert summary.failed == 1
        assert summary.processed == 1
        assert summary.failures == ["https://jobs.example.com/1"]

    def test_stops_when_budget_spent(self, resolver):
        clock = FakeClock(step=30.0)
        sink = FakeSink()
        runner = ListingRunner(resolver, sink, time_budget_minutes=1, clock=clock)
        summary = runner.run([_listing(n) for n in range(10)])
        assert summary.budget_exhausted
        assert summary.processed < 10
        assert summary.processed + summary.not_started == 10
        assert sum(len(batch) for batch in sink.batches) == summary.processed

    def test_parent_from_detail_page(self, resolver):
        sink = FakeSink()
        ListingRunner(resolver, sink).run([_listing(1, detail_html=DETAIL_HTML)])
        _, _, parent = resolver.resolve_parsed.call_args.args
        assert parent == "Union Square Hospitality Group"
        assert sink.batches[0][0].parent_company == "Union Square Hospitality Group"

    def test_listing_parent_wins_over_detail_page(self, resolver):
        sink = FakeSink()
        listing = _listing(1, detail_html=DETAIL_HTML, parent_company="Keith McNally")
        ListingRunner(resolver, sink).run([listing])
        assert resolver.resolve_parsed.call_args.args[2] == "Keith McNally"

    def test_cache_saved_once(self, resolver):
        cache = MagicMock()
        cache.enabled = True
        ListingRunner(resolver, FakeSink(), cache=cache).run([_listing(1), _listing(2)])
        cache.save.assert_called_once()

    def test_invalid_batch_size(self, resolver):
        with pytest.raises(ValueError, match="batch_size"):
            ListingRunner(resolver, FakeSink(), batch_size=0)


class TestListings:
    def test_listing_from_dict(self):
        listing = listing_from_dict(
            {
                "title": "Line Cook",
                "company": "Balthazar • New York, NY",
                "location": "80 Spring St",
                "url": " https://jobs.example.com/1 ",
                "salary": "",
            }
        )
        assert listing.title == "Line Cook"
        assert listing.raw_company_text == "Balthazar • New York, NY"
        assert listing.url == "https://jobs.example.com/1"
        assert listing.salary is None

    @pytest.mark.parametrize("data", [{}, {"title": "Cook"}, {"company": "X"}, ["list"]])
    def test_missing_fields(self, data):
        assert listing_from_dict(data) is None

    def test_load_listings(self):
        lines = [
            json.dumps({"title": "Cook", "company": "Balthazar"}),
            "",
            "{not json",
            json.dumps({"title": "Server"}),
            json.dumps({"title": "Host", "company": "Carbone"}),
        ]
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "listings.jsonl"
            path.write_text("\n".join(lines), encoding="utf-8")
            listings = load_listings(path)
            limited = load_listings(path, limit=1)
        assert [listing.raw_company_text for listing in listings] == ["Balthazar", "Carbone"]
        assert len(limited) == 1
