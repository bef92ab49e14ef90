"""
Exclusion filter for companies that are never the real employer.

Staffing agencies, contract caterers and named geographies leak into the
company field of job cards. Matching is done on a "squashed" form
(normalized, lower-cased, all whitespace removed) so that run-together text
such as "Whole FoodsAustin" is still caught.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from culinary_contacts.parsing.text import normalize, squash
from culinary_contacts.parsing.vocabulary import (
    DEFAULT_EXCLUDED_COMPANIES,
    DEFAULT_PARTIAL_EXCLUSIONS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExclusionResult:
    """Outcome of an exclusion check."""

    excluded: bool
    matched_term: str | None = None

    def __bool__(self) -> bool:
        return self.excluded


NOT_EXCLUDED = ExclusionResult(excluded=False)


def _squash_terms(terms: Iterable[str]) -> dict[str, str]:
    """Map squashed form -> lower-cased display term, dropping blanks."""
    squashed: dict[str, str] = {}
    for term in terms:
        key = squash(normalize(term))
        if key:
            squashed.setdefault(key, term.strip().lower())
    return squashed


class ExclusionFilter:
    """
    Containment check against an exact list and a partial-term list.

    Partial terms are checked first (they are brand fragments such as
    "whole foods" that appear inside longer store names); exact terms are
    the known agencies and geographies.
    """

    def __init__(
        self,
        exact_terms: Iterable[str] = DEFAULT_EXCLUDED_COMPANIES,
        partial_terms: Iterable[str] = DEFAULT_PARTIAL_EXCLUSIONS,
        extra_terms: Iterable[str] = (),
    ):
        self._partial = _squash_terms(partial_terms)
        self._exact = _squash_terms([*exact_terms, *extra_terms])

    def check(self, name: str | None) -> ExclusionResult:
        squashed = squash(normalize(name))
        if not squashed:
            return NOT_EXCLUDED

        for key, term in self._partial.items():
            if key in squashed:
                logger.debug(f"Partial exclusion '{term}' matched in '{name}'")
                return ExclusionResult(excluded=True, matched_term=term)

        for key, term in self._exact.items():
            if key in squashed:
                logger.debug(f"Exclusion '{term}' matched in '{name}'")
                return ExclusionResult(excluded=True, matched_term=term)

        return NOT_EXCLUDED

    def is_excluded(self, name: str | None) -> bool:
        return self.check(name).excluded

    @property
    def term_count(self) -> int:
        return len(self._partial) + len(self._exact)


@lru_cache
def get_default_filter() -> ExclusionFilter:
    """Filter with the built-in lists plus any terms added through settings."""
    from culinary_contacts.config import get_settings

    return ExclusionFilter(extra_terms=get_settings().extra_excluded_companies)
