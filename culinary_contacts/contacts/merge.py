"""
Merge lookup results from several strategies into one contact list.

Merge order is explicit: lookups keyed by domain beat lookups keyed by
name (a domain identifies the company, a name may match a namesake),
then results with more contacts come first, then the order in which the
strategies ran. Contacts are deduplicated on lower-cased email with the
first writer winning, and the final list is sorted by (rank, score).
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from culinary_contacts.constants import NOT_AVAILABLE, PARENT_DOMAIN_TAG
from culinary_contacts.domain.validation import email_domain, normalize_domain
from culinary_contacts.models import (
    CompanyContactResult,
    ContactCandidate,
    LookupResult,
    SearchMode,
)

logger = logging.getLogger(__name__)

# Provider placeholders that never count as a real value
_PLACEHOLDERS = {"", NOT_AVAILABLE.lower(), "excluded", "error", "unknown"}


def _present(value: str | None) -> bool:
    return value is not None and str(value).strip().lower() not in _PLACEHOLDERS


def merge_priority(result: LookupResult, order: int) -> tuple[int, int, int]:
    """Sort key for strategy results: by-domain first, then more contacts, then run order."""
    by_name = 0 if result.query.mode is SearchMode.BY_DOMAIN else 1
    return (by_name, -len(result.contacts), order)


def contact_sort_key(contact: ContactCandidate) -> tuple[int, float]:
    return (contact.rank, contact.score)


def dedupe_contacts(contacts: Iterable[ContactCandidate]) -> list[ContactCandidate]:
    """Drop later contacts whose lower-cased email was already seen."""
    seen: set[str] = set()
    unique = []
    for contact in contacts:
        key = contact.email_key
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(contact)
    return unique


def merge_results(company_name: str, results: Sequence[LookupResult]) -> CompanyContactResult:
    """
    Union the strategy results for one listing.

    Args:
        company_name: Parsed company name the results belong to
        results: Lookup results in the order the strategies ran

    Returns:
        CompanyContactResult with unioned LinkedIn URLs and domains,
        deduplicated contacts tagged with their strategy and sorted by
        (rank, score)
    """
    ranked = sorted(enumerate(results), key=lambda pair: merge_priority(pair[1], pair[0]))
    ordered = [result for _, result in ranked]

    linkedin_urls = {r.linkedin.strip() for r in ordered if _present(r.linkedin)}
    ordered_domains = []
    for result in ordered:
        domain = normalize_domain(result.domain) if _present(result.domain) else None
        if domain and domain not in ordered_domains:
            ordered_domains.append(domain)
    domains = frozenset(ordered_domains)

    parent_domain = next(
        (
            normalize_domain(r.domain)
            for r in ordered
            if r.source_tag == PARENT_DOMAIN_TAG and _present(r.domain)
        ),
        None,
    )
    size = next((str(r.size) for r in ordered if _present(r.size)), None)

    tagged = (
        replace(contact, source_tag=result.source_tag)
        for result in ordered
        for contact in result.contacts
    )
    contacts = [
        replace(contact, matches_domain=email_domain(contact.email) in domains)
        for contact in dedupe_contacts(tagged)
    ]
    contacts.sort(key=contact_sort_key)

    strategies = tuple(r.source_tag for r in ordered if r.contacts)
    logger.info(
        f"Merged {len(contacts)} unique contacts for '{company_name}' "
        f"from {len(strategies)} strategies ({', '.join(strategies) or 'none'})"
    )

    return CompanyContactResult(
        company_name=company_name,
        linkedin_urls=frozenset(linkedin_urls),
        domains=domains,
        primary_domain=ordered_domains[0] if ordered_domains else None,
        parent_domain=parent_domain,
        employee_size_hint=size,
        contacts=tuple(contacts),
        strategies=strategies,
    )
