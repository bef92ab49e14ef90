"""
Sequential listing runner.

Takes crawled listings one at a time: reads the detail page, resolves
contacts, and hands finished records to a sink in batches. A wall-clock
budget stops new listings from starting; the listing in flight always
finishes.
"""

import logging
import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from tqdm import tqdm

from culinary_contacts.cache import ContactCache
from culinary_contacts.constants import EXPORT_BATCH_SIZE
from culinary_contacts.models import DetailPage, JobRecord, ParseStatus, RawListing
from culinary_contacts.parsing.detail_page import parse_detail_page
from culinary_contacts.resolution.resolver import ContactResolver

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Counters for one run."""

    processed: int = 0
    skipped_duplicates: int = 0
    failed: int = 0
    unknown: int = 0
    excluded: int = 0
    with_contacts: int = 0
    contacts: int = 0
    rows_written: int = 0
    not_started: int = 0
    budget_exhausted: bool = False
    elapsed_seconds: float = 0.0
    failures: list[str] = field(default_factory=list)

    def log(self, log: logging.Logger | None = None) -> None:
        log = log or logger
        log.info("=" * 70)
        log.info("Run summary")
        log.info("=" * 70)
        log.info(f"  Processed: {self.processed}")
        log.info(f"  With contacts: {self.with_contacts} ({self.contacts} contacts)")
        log.info(f"  Unknown company: {self.unknown}")
        log.info(f"  Excluded company: {self.excluded}")
        log.info(f"  Skipped (already exported): {self.skipped_duplicates}")
        log.info(f"  Failed: {self.failed}")
        log.info(f"  Rows written: {self.rows_written}")
        if self.budget_exhausted:
            log.info(f"  Time budget exhausted; {self.not_started} listings not started")
        log.info(f"  Elapsed: {self.elapsed_seconds:.1f}s")


class ListingRunner:
    """
    Runs listings through the resolver and writes them to a sink.

    The sink needs two methods: existing_urls() -> set[str] and
    write_records(records) -> int (rows written).
    """

    def __init__(
        self,
        resolver: ContactResolver,
        sink,
        cache: ContactCache | None = None,
        time_budget_minutes: float | None = None,
        batch_size: int = EXPORT_BATCH_SIZE,
        show_progress: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        self.resolver = resolver
        self.sink = sink
        self.cache = cache
        self.time_budget_seconds = time_budget_minutes * 60 if time_budget_minutes else None
        self.batch_size = batch_size
        self.show_progress = show_progress
        self.clock = clock

    def process_listing(self, listing: RawListing) -> JobRecord:
        """Resolve one listing into an exportable record."""
        detail = parse_detail_page(listing.detail_html) if listing.detail_html else DetailPage()
        parent_company = listing.parent_company or detail.parent_company

        parsed = self.resolver.parse(listing.raw_company_text)
        logger.debug(f"'{listing.raw_company_text}' -> '{parsed.name}' ({parsed.status.value})")
        result = self.resolver.resolve_parsed(parsed, listing.raw_location_text, parent_company)

        return JobRecord(
            listing=listing,
            company=parsed,
            result=result,
            parent_company=parent_company,
            job_details=detail.job_details,
        )

    def run(self, listings: Iterable[RawListing]) -> RunSummary:
        """
        Process listings in order.

        Returns:
            RunSummary with per-outcome counts
        """
        listings = list(listings)
        summary = RunSummary()
        started = self.clock()
        seen = set(self.sink.existing_urls())
        if seen:
            logger.info(f"{len(seen)} listing URLs already exported")

        pending: list[JobRecord] = []
        progress = tqdm(
            listings,
            desc="Resolving contacts",
            unit="job",
            file=sys.stderr,
            disable=not self.show_progress,
        )

        for position, listing in enumerate(progress):
            if self._budget_spent(started):
                summary.budget_exhausted = True
                summary.not_started = len(listings) - position
                logger.warning(
                    f"Time budget exhausted; stopping with {summary.not_started} listings left"
                )
                break

            if listing.url and listing.url in seen:
                summary.skipped_duplicates += 1
                logger.debug(f"Skipping already exported listing {listing.url}")
                continue

            try:
                record = self.process_listing(listing)
            except Exception as e:
                summary.failed += 1
                summary.failures.append(listing.url or listing.title)
                logger.error(f"Failed to process '{listing.title}' ({listing.url}): {e}")
                continue

            if listing.url:
                seen.add(listing.url)
            self._count(record, summary)
            pending.append(record)
            if len(pending) >= self.batch_size:
                summary.rows_written += self._flush(pending)

        progress.close()
        summary.rows_written += self._flush(pending)

        if self.cache is not None and self.cache.enabled:
            try:
                self.cache.save()
            except Exception as e:
                logger.error(f"Could not save cache snapshot: {e}")

        summary.elapsed_seconds = self.clock() - started
        return summary

    def _budget_spent(self, started: float) -> bool:
        if self.time_budget_seconds is None:
            return False
        return self.clock() - started >= self.time_budget_seconds

    def _flush(self, pending: list[JobRecord]) -> int:
        if not pending:
            return 0
        rows = self.sink.write_records(list(pending))
        logger.debug(f"Flushed {len(pending)} records ({rows} rows)")
        pending.clear()
        return rows

    @staticmethod
    def _count(record: JobRecord, summary: RunSummary) -> None:
        summary.processed += 1
        if record.company.status is ParseStatus.UNKNOWN:
            summary.unknown += 1
        elif record.company.status is ParseStatus.EXCLUDED:
            summary.excluded += 1
        if record.result.contacts:
            summary.with_contacts += 1
            summary.contacts += len(record.result.contacts)
