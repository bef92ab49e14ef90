"""
Reading crawled listings from JSON Lines.

One object per line:

    {"title": "Sous Chef", "company": "Union Square CafeNew York, NY",
     "location": "101 E 19th St, New York, NY", "url": "...",
     "salary": "...", "detail_html": "...", "parent_company": "..."}

Only "title" and "company" are required.
"""

import json
import logging
from pathlib import Path

from culinary_contacts.models import RawListing

logger = logging.getLogger(__name__)


def _optional(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def listing_from_dict(data: dict) -> RawListing | None:
    """Build a listing from one decoded line, or None if required fields are missing."""
    if not isinstance(data, dict):
        return None
    title = _optional(data, "title")
    company = data.get("company")
    if not title or company is None:
        return None
    return RawListing(
        title=title,
        raw_company_text=str(company),
        raw_location_text=str(data.get("location") or ""),
        url=_optional(data, "url"),
        salary=_optional(data, "salary"),
        detail_html=data.get("detail_html") or None,
        parent_company=_optional(data, "parent_company"),
    )


def load_listings(path: Path, limit: int | None = None) -> list[RawListing]:
    """
    Read listings from a JSON Lines file.

    Blank lines are ignored; malformed lines are logged and skipped.
    """
    listings: list[RawListing] = []
    skipped = 0
    with open(path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning(f"{path}:{line_number}: invalid JSON ({e})")
                skipped += 1
                continue
            listing = listing_from_dict(data)
            if listing is None:
                logger.warning(f"{path}:{line_number}: missing title or company")
                skipped += 1
                continue
            listings.append(listing)
            if limit is not None and len(listings) >= limit:
                break

    logger.info(f"Read {len(listings)} listings from {path} ({skipped} skipped)")
    return listings
