#!/usr/bin/env python3
"""
Resolve hiring contacts for crawled culinary job listings.

This script:
1. Reads listings from a JSON Lines file (one job card per line)
2. Parses each card's company text into a company name
3. Finds the company's domain and looks up contacts (primary company,
   parent company, companies named in the address)
4. Appends job and contact rows to the output CSV

Lookups are cached for 30 days in a diskcache snapshot (CACHE_DIR).

Usage:
    python scripts/resolve_contacts.py listings.jsonl            # Dry-run (parse + plan only)
    python scripts/resolve_contacts.py listings.jsonl --execute  # Call APIs, write CSV
    python scripts/resolve_contacts.py listings.jsonl --execute --time-budget-minutes 20
"""

import argparse
import sys
from pathlib import Path

from culinary_contacts.cache import build_cache
from culinary_contacts.cli import (
    add_execute_argument,
    positive_float,
    positive_int,
    print_dry_run_header,
    print_execute_header,
    setup_logging,
)
from culinary_contacts.config import get_settings
from culinary_contacts.export.sheet import CsvSheetWriter
from culinary_contacts.models import DetailPage
from culinary_contacts.parsing.detail_page import parse_detail_page
from culinary_contacts.pipeline import ListingRunner, load_listings
from culinary_contacts.resolution import ContactResolver
from culinary_contacts.sources import DomainSearchClient, HunterClient

DEFAULT_OUTPUT = Path("data/job_contacts.csv")


def dry_run(listings, resolver: ContactResolver, logger) -> None:
    """Show parsed names and planned lookups without calling any API."""
    print_dry_run_header("Contact Resolution", logger)
    resolved = 0
    for listing in listings:
        detail = parse_detail_page(listing.detail_html) if listing.detail_html else DetailPage()
        parent = listing.parent_company or detail.parent_company
        parsed = resolver.parse(listing.raw_company_text)
        if parsed.is_resolved:
            resolved += 1
        logger.info(f"{listing.title}: '{listing.raw_company_text}' -> {parsed.name}")
        for query in resolver.lookup_plan(
            listing.raw_company_text, listing.raw_location_text, parent
        ):
            logger.info(f"    {query.source_tag}: {query.search_term} ({query.mode.value})")

    logger.info("")
    logger.info(f"{resolved}/{len(listings)} listings have a usable company name")
    logger.info("Run with --execute to look up contacts and write the CSV")


def main():
    """Run the contact resolution script."""
    parser = argparse.ArgumentParser(
        description="Resolve hiring contacts for culinary job listings"
    )
    parser.add_argument("listings", type=Path, help="JSON Lines file of crawled listings")
    add_execute_argument(parser)
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"CSV file to append to (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--time-budget-minutes",
        type=positive_float,
        default=None,
        help="Stop starting new listings after this many minutes",
    )
    parser.add_argument("--limit", type=positive_int, default=None, help="Process at most N")
    parser.add_argument(
        "--clear-cache",
        action="store_true",
        help="Discard cached lookups before running",
    )
    args = parser.parse_args()

    logger = setup_logging("resolve_contacts", execute=args.execute)
    settings = get_settings()

    if not args.listings.exists():
        logger.error(f"Listings file not found: {args.listings}")
        sys.exit(1)
    listings = load_listings(args.listings, limit=args.limit)

    cache = build_cache(settings)
    if args.clear_cache:
        cache.clear(persist=args.execute)
    else:
        cache.load()

    hunter = HunterClient.from_settings(cache=cache, settings=settings)
    domain_search = DomainSearchClient.from_settings(settings=settings)
    resolver = ContactResolver(hunter, domain_search)

    if not args.execute:
        dry_run(listings, resolver, logger)
        return

    print_execute_header("Contact Resolution", logger)
    if not settings.hunter_api_key:
        logger.warning("HUNTER_API_KEY is not set; no contacts will be found")
    if not settings.search_api_key:
        logger.warning("SEARCH_API_KEY is not set; lookups will go by company name only")

    runner = ListingRunner(
        resolver,
        CsvSheetWriter(args.output, max_contacts=settings.max_contacts_per_job),
        cache=cache,
        time_budget_minutes=args.time_budget_minutes or settings.run_time_budget_minutes,
        batch_size=settings.export_batch_size,
        show_progress=True,
    )
    summary = runner.run(listings)
    summary.log(logger)
    logger.info(f"Hunter calls: {hunter.api_calls}, search calls: {domain_search.api_calls}")
    stats = cache.stats()
    logger.info(f"Cache: {stats['hits']} hits, {stats['misses']} misses, {stats['total']} entries")
    logger.info(f"Output: {args.output}")


if __name__ == "__main__":
    main()
