"""
Contact resolution for one job listing.

Strategies run one after another:

1. Primary: discover the company's domain and look it up by domain;
   without a domain, look the company up by name (falling back once to
   the listing's location text).
2. Parent: when the detail page names a parent company, discover its
   domain and look that up. There is no by-name lookup for parents, since a
   bare group name too often matches an unrelated namesake.
3. Address: company names found in the address line, looked up by name.

A failing strategy is logged and skipped; the rest still run. Results are
merged by culinary_contacts.contacts.merge.
"""

import logging

from culinary_contacts.constants import (
    ADDRESS_TAG_PREFIX,
    PARENT_DOMAIN_TAG,
    PRIMARY_DOMAIN_TAG,
    PRIMARY_NAME_TAG,
)
from culinary_contacts.contacts.merge import merge_results
from culinary_contacts.models import (
    CompanyContactResult,
    EnrichmentQuery,
    LookupResult,
    ParsedCompany,
    SearchMode,
)
from culinary_contacts.parsing.address import extract_candidates
from culinary_contacts.parsing.company_name import parse_company
from culinary_contacts.parsing.exclusion import ExclusionFilter, get_default_filter
from culinary_contacts.parsing.text import collapse_whitespace, normalize, normalize_key
from culinary_contacts.parsing.vocabulary import GENERIC_ADDRESS_TERMS
from culinary_contacts.sources.domain_search import DomainSearchClient
from culinary_contacts.sources.hunter import HunterClient

logger = logging.getLogger(__name__)


def clean_term(text: str | None) -> str:
    return collapse_whitespace(normalize(text))


class ContactResolver:
    """Runs the lookup strategies for a listing and merges their results."""

    def __init__(
        self,
        hunter: HunterClient,
        domain_search: DomainSearchClient,
        exclusions: ExclusionFilter | None = None,
        use_address_candidates: bool = True,
    ):
        self.hunter = hunter
        self.domain_search = domain_search
        self.exclusions = exclusions or get_default_filter()
        self.use_address_candidates = use_address_candidates

    def parse(self, raw_company: str | None) -> ParsedCompany:
        return parse_company(raw_company, exclusions=self.exclusions)

    def resolve(
        self,
        raw_company: str | None,
        raw_location: str | None = "",
        parent_company: str | None = None,
    ) -> CompanyContactResult:
        """
        Resolve contacts for a listing.

        Args:
            raw_company: Raw company text from the job card
            raw_location: Raw address/location text from the job card
            parent_company: Parent company named on the detail page

        Returns:
            CompanyContactResult; empty when the company is Unknown or
            Excluded, or when every strategy came back empty
        """
        parsed = self.parse(raw_company)
        return self.resolve_parsed(parsed, raw_location, parent_company)

    def resolve_parsed(
        self,
        parsed: ParsedCompany,
        raw_location: str | None = "",
        parent_company: str | None = None,
    ) -> CompanyContactResult:
        """Resolve contacts for an already parsed company name."""
        if not parsed.is_resolved:
            logger.info(
                f"Skipping contact lookup: company is {parsed.status.value} ({parsed.reason})"
            )
            return CompanyContactResult.empty(parsed.name)

        name = parsed.name
        excluded = self.exclusions.check(name)
        if excluded:
            logger.info(f"Skipping contact lookup: '{name}' is excluded ({excluded.matched_term})")
            return CompanyContactResult.empty(name)

        results: list[LookupResult] = []
        primary_domain: str | None = None

        try:
            primary, primary_domain = self._primary(name, raw_location)
            results.append(primary)
        except Exception as e:
            logger.warning(f"Primary lookup failed for '{name}': {e}")

        if parent_company:
            try:
                parent = self._parent(name, parent_company, primary_domain)
                if parent is not None:
                    results.append(parent)
            except Exception as e:
                logger.warning(f"Parent company lookup failed for '{parent_company}': {e}")

        if self.use_address_candidates and raw_location:
            try:
                results.extend(self._address_candidates(name, raw_location))
            except Exception as e:
                logger.warning(f"Address candidate lookups failed for '{raw_location}': {e}")

        return merge_results(name, results)

    def _location_fallback(self, name: str, raw_location: str | None) -> str | None:
        term = clean_term(raw_location)
        if not term or normalize_key(term) == normalize_key(name):
            return None
        if term.lower() in GENERIC_ADDRESS_TERMS or self.exclusions.is_excluded(term):
            return None
        return term

    def _primary(self, name: str, raw_location: str | None) -> tuple[LookupResult, str | None]:
        domain = self.domain_search.resolve_domain(name)
        if domain:
            return self.hunter.lookup(domain, SearchMode.BY_DOMAIN, PRIMARY_DOMAIN_TAG), domain
        result = self.hunter.lookup(
            name,
            SearchMode.BY_COMPANY_NAME,
            PRIMARY_NAME_TAG,
            fallback_term=self._location_fallback(name, raw_location),
        )
        return result, None

    def _parent(
        self, name: str, parent_company: str, primary_domain: str | None
    ) -> LookupResult | None:
        parent = clean_term(parent_company)
        if not parent or normalize_key(parent) == normalize_key(name):
            return None
        if self.exclusions.is_excluded(parent):
            logger.info(f"Skipping excluded parent company '{parent}'")
            return None

        domain = self.domain_search.resolve_domain(parent)
        if not domain:
            logger.info(f"No domain for parent company '{parent}'; skipping (no by-name lookup)")
            return None
        if domain == primary_domain:
            logger.debug(f"Parent '{parent}' shares domain {domain} with '{name}'")
            return None
        return self.hunter.lookup(domain, SearchMode.BY_DOMAIN, PARENT_DOMAIN_TAG)

    def address_candidates(self, name: str, raw_location: str | None) -> list[str]:
        """Parsed, distinct, non-excluded company names from the address line."""
        skip = {normalize_key(name), normalize_key(raw_location)}
        names = []
        for candidate in extract_candidates(raw_location, exclusions=self.exclusions):
            parsed = self.parse(candidate)
            if not parsed.is_resolved:
                continue
            key = normalize_key(parsed.name)
            if key in skip:
                continue
            skip.add(key)
            names.append(parsed.name)
        return names

    def _address_candidates(self, name: str, raw_location: str) -> list[LookupResult]:
        results = []
        for index, candidate in enumerate(self.address_candidates(name, raw_location)):
            tag = f"{ADDRESS_TAG_PREFIX}{index}"
            results.append(self.hunter.lookup(candidate, SearchMode.BY_COMPANY_NAME, tag))
        return results

    def lookup_plan(
        self,
        raw_company: str | None,
        raw_location: str | None = "",
        parent_company: str | None = None,
    ) -> list[EnrichmentQuery]:
        """The lookups resolve() would start with, without calling any API (dry run)."""
        parsed = self.parse(raw_company)
        if not parsed.is_resolved or self.exclusions.is_excluded(parsed.name):
            return []

        plan = [EnrichmentQuery(parsed.name, SearchMode.BY_COMPANY_NAME, PRIMARY_NAME_TAG)]
        parent = clean_term(parent_company)
        if parent and normalize_key(parent) != normalize_key(parsed.name):
            if not self.exclusions.is_excluded(parent):
                plan.append(EnrichmentQuery(parent, SearchMode.BY_DOMAIN, PARENT_DOMAIN_TAG))
        if self.use_address_candidates and raw_location:
            for index, candidate in enumerate(self.address_candidates(parsed.name, raw_location)):
                tag = f"{ADDRESS_TAG_PREFIX}{index}"
                plan.append(EnrichmentQuery(candidate, SearchMode.BY_COMPANY_NAME, tag))
        return plan
