"""
Hunter.io domain-search enrichment client.

Looks up the people behind a company, either by company name or by its
web domain. The client never raises: timeouts, HTTP errors and malformed
JSON all come back as an empty LookupResult plus a log line. Non-empty
responses are cached before they are returned.
"""

import logging

import requests

from culinary_contacts.cache import ContactCache
from culinary_contacts.constants import (
    API_TIMEOUT_SECONDS,
    ERROR_TAG,
    EXCLUDED_TAG,
    FALLBACK_LOCATION_TAG,
    HUNTER_DOMAIN_SEARCH_URL,
    HUNTER_RESULT_LIMIT,
    NO_API_KEY_TAG,
    RATE_LIMIT_COOLDOWN_SECONDS,
    RATE_LIMITED_TAG,
    REQUEST_DELAY_SECONDS,
)
from culinary_contacts.contacts.scoring import email_address, rank_contacts
from culinary_contacts.models import CacheEntry, EnrichmentQuery, LookupResult, SearchMode
from culinary_contacts.parsing.exclusion import ExclusionFilter, get_default_filter
from culinary_contacts.parsing.text import collapse_whitespace, normalize, normalize_key
from culinary_contacts.utils.rate_limiting import RateLimiter

logger = logging.getLogger(__name__)

HTTP_TOO_MANY_REQUESTS = 429


def _has_emails(record: dict) -> bool:
    emails = record.get("emails")
    return isinstance(emails, list) and len(emails) > 0


def select_company_record(data: dict, search_term: str) -> tuple[dict, str]:
    """
    Pick the company record to read from a domain-search payload.

    Name searches may return several candidate companies under
    data["results"]; the first one that has emails wins. Otherwise the
    payload itself is the record.

    Returns:
        (record, company name the contacts belong to)
    """
    results = data.get("results")
    if isinstance(results, list):
        for index, record in enumerate(results):
            if isinstance(record, dict) and _has_emails(record):
                logger.debug(f"Using result #{index + 1} of {len(results)} for '{search_term}'")
                return record, str(record.get("company") or search_term)
    return data, str(data.get("organization") or search_term)


def annotate_emails(record: dict, company: str) -> list[dict]:
    """Copy the record's email dicts, tagging each with its source company and domain."""
    emails = record.get("emails")
    if not isinstance(emails, list):
        return []
    return [
        {**email, "_original_company": company, "_original_domain": record.get("domain")}
        for email in emails
        if isinstance(email, dict) and email_address(email)
    ]


def _text(value) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


class HunterClient:
    """Domain-search client with caching, pacing and a one-shot name fallback."""

    def __init__(
        self,
        api_key: str | None,
        cache: ContactCache | None = None,
        session: requests.Session | None = None,
        limiter: RateLimiter | None = None,
        base_url: str = HUNTER_DOMAIN_SEARCH_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        cooldown_seconds: float = RATE_LIMIT_COOLDOWN_SECONDS,
        exclusions: ExclusionFilter | None = None,
        result_limit: int = HUNTER_RESULT_LIMIT,
    ):
        self.api_key = api_key
        self.cache = cache
        self.session = session or requests.Session()
        self.limiter = limiter or RateLimiter(REQUEST_DELAY_SECONDS, source_name="hunter")
        self.base_url = base_url
        self.timeout = timeout
        self.cooldown_seconds = cooldown_seconds
        self.exclusions = exclusions or get_default_filter()
        self.result_limit = result_limit
        self.api_calls = 0
        self._warned_missing_key = False

    @classmethod
    def from_settings(
        cls,
        cache: ContactCache | None = None,
        settings=None,
        session: requests.Session | None = None,
    ) -> "HunterClient":
        if settings is None:
            from culinary_contacts.config import get_settings

            settings = get_settings()
        return cls(
            api_key=settings.hunter_api_key,
            cache=cache,
            session=session,
            limiter=RateLimiter(settings.request_delay_seconds, source_name="hunter"),
            base_url=settings.hunter_api_url,
            timeout=settings.api_timeout_seconds,
            cooldown_seconds=settings.rate_limit_cooldown_seconds,
        )

    def lookup(
        self,
        search_term: str,
        mode: SearchMode,
        source_tag: str,
        fallback_term: str | None = None,
    ) -> LookupResult:
        """
        Look up contacts for a company name or domain.

        Args:
            search_term: Company name (BY_COMPANY_NAME) or domain (BY_DOMAIN)
            mode: How the provider should interpret search_term
            source_tag: Strategy tag, part of the cache key
            fallback_term: Alternate name retried once (tag "location") when
                a by-name lookup fails for a reason other than rate limiting

        Returns:
            LookupResult; empty on any failure
        """
        term = collapse_whitespace(normalize(search_term))
        query = EnrichmentQuery(search_term=term, mode=mode, source_tag=source_tag)
        if not term:
            return LookupResult.empty(query, source_tag)

        if mode is SearchMode.BY_COMPANY_NAME and self.exclusions.is_excluded(term):
            logger.info(f"Skipping lookup for excluded company '{term}'")
            return LookupResult.empty(query, EXCLUDED_TAG)

        if self.cache is not None:
            entry = self.cache.get(term, source_tag)
            if entry is not None:
                return self._from_cache(query, entry)

        if not self.api_key:
            if not self._warned_missing_key:
                logger.warning("HUNTER_API_KEY not set; enrichment lookups return no contacts")
                self._warned_missing_key = True
            return LookupResult.empty(query, NO_API_KEY_TAG)

        return self._fetch(query, fallback_term)

    def _params(self, query: EnrichmentQuery) -> dict:
        key = "domain" if query.mode is SearchMode.BY_DOMAIN else "company"
        return {key: query.search_term, "limit": self.result_limit, "api_key": self.api_key}

    def _fetch(self, query: EnrichmentQuery, fallback_term: str | None) -> LookupResult:
        logger.info(
            f"Hunter lookup ({query.source_tag}, by {query.mode.value}): '{query.search_term}'"
        )
        self.limiter()
        self.api_calls += 1

        try:
            response = self.session.get(
                self.base_url, params=self._params(query), timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Hunter request failed for '{query.search_term}': {e}")
            return self._fallback(query, fallback_term)

        if response.status_code == HTTP_TOO_MANY_REQUESTS:
            self.limiter.cool_down(self.cooldown_seconds)
            return LookupResult.empty(query, RATE_LIMITED_TAG, failed=True)

        if response.status_code >= 400:
            logger.warning(
                f"Hunter error for '{query.search_term}': HTTP {response.status_code} "
                f"{response.text[:200]}"
            )
            return self._fallback(query, fallback_term)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Hunter returned invalid JSON for '{query.search_term}': {e}")
            return self._fallback(query, fallback_term)

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            logger.warning(f"Hunter response for '{query.search_term}' has no data object")
            return self._fallback(query, fallback_term)

        return self._build_result(query, data)

    def _fallback(self, query: EnrichmentQuery, fallback_term: str | None) -> LookupResult:
        if (
            query.mode is SearchMode.BY_COMPANY_NAME
            and fallback_term
            and normalize_key(fallback_term) != normalize_key(query.search_term)
        ):
            logger.info(f"Retrying '{query.search_term}' as '{fallback_term}'")
            return self.lookup(fallback_term, SearchMode.BY_COMPANY_NAME, FALLBACK_LOCATION_TAG)
        return LookupResult.empty(query, ERROR_TAG, failed=True)

    def _build_result(self, query: EnrichmentQuery, data: dict) -> LookupResult:
        record, company = select_company_record(data, query.search_term)
        emails = annotate_emails(record, company)
        contacts = rank_contacts(emails, query.source_tag)
        linkedin = _text(record.get("linkedin"))
        domain = _text(record.get("domain"))
        size = _text(record.get("employees_count") or record.get("headcount"))

        logger.info(
            f"Hunter found {len(contacts)} contacts for '{query.search_term}' "
            f"({query.source_tag}, company '{company}', domain {domain or 'N/A'})"
        )

        if emails and self.cache is not None:
            self.cache.put(
                query.search_term,
                query.source_tag,
                emails,
                original_company=company,
                linkedin=linkedin,
                domain=domain,
                size=size,
            )

        return LookupResult(
            query=query,
            linkedin=linkedin,
            domain=domain,
            size=size,
            contacts=tuple(contacts),
            source_tag=query.source_tag,
        )

    def _from_cache(self, query: EnrichmentQuery, entry: CacheEntry) -> LookupResult:
        return LookupResult(
            query=query,
            linkedin=entry.linkedin,
            domain=entry.domain,
            size=entry.size,
            contacts=tuple(rank_contacts(entry.emails, query.source_tag)),
            source_tag=query.source_tag,
        )
