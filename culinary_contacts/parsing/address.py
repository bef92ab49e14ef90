"""
Company-name candidates from a listing's address line.

The address text on a job card sometimes carries the venue or operator
name ("Hudson Yards, Estiatorio Milos, New York, NY"). Each surviving
segment is a candidate that the caller re-parses before using it.
"""

import logging
import re

from culinary_contacts.parsing.exclusion import ExclusionFilter, get_default_filter
from culinary_contacts.parsing.text import collapse_whitespace, normalize
from culinary_contacts.parsing.vocabulary import GENERIC_ADDRESS_TERMS, STREET_ADDRESS_WORDS

logger = logging.getLogger(__name__)

_SEGMENT_DELIMITERS = re.compile(r"[,|•/\-]+")
_DIGITS_ONLY = re.compile(r"^\d+$")
_STANDALONE_NUMBER = re.compile(r"\b\d+\b")
_CITY_STATE_TAIL = re.compile(r"[A-Z]{2}$")

MIN_SEGMENT_LENGTH = 4
MAX_CITY_STATE_LENGTH = 12


def _looks_like_street(segment: str) -> bool:
    """True if the segment carries a street word or a house number."""
    tokens = segment.lower().replace(".", " ").split()
    return any(token in STREET_ADDRESS_WORDS or token.isdigit() for token in tokens)


def extract_candidates(
    raw_address: str | None,
    exclusions: ExclusionFilter | None = None,
) -> list[str]:
    """
    Split an address into ordered company-name candidates.

    Segments are dropped when they are numeric, shorter than 4 characters,
    exactly a generic industry term, a street fragment of an address that
    contains a house number, a trailing "City ST" fragment, or excluded.

    Example:
        "123 Main St, Whole Foods Market, Brooklyn, NY" -> ["Brooklyn"]
    """
    if not raw_address:
        return []

    exclusions = exclusions or get_default_filter()
    has_number = bool(_STANDALONE_NUMBER.search(raw_address))

    candidates: list[str] = []
    for part in _SEGMENT_DELIMITERS.split(raw_address):
        segment = collapse_whitespace(normalize(part))
        if len(segment) < MIN_SEGMENT_LENGTH or _DIGITS_ONLY.match(segment):
            continue
        if segment.lower() in GENERIC_ADDRESS_TERMS:
            continue
        if has_number and _looks_like_street(segment):
            continue
        if _CITY_STATE_TAIL.search(segment) and len(segment) <= MAX_CITY_STATE_LENGTH:
            continue
        excluded = exclusions.check(segment)
        if excluded:
            logger.debug(f"Dropping excluded address segment '{segment}' ({excluded.matched_term})")
            continue
        candidates.append(segment)

    return candidates
