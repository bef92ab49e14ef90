"""
Company domain discovery through a Google web search (SearchAPI.io).

Searches the company name and takes the first result whose registrable
domain is not a listing, social or review site. Lookups are remembered
per client instance, since the same restaurant group posts many jobs.
"""

import logging

import requests

from culinary_contacts.constants import (
    API_TIMEOUT_SECONDS,
    REQUEST_DELAY_SECONDS,
    SEARCH_API_URL,
    UNKNOWN_NAME,
)
from culinary_contacts.domain.validation import is_aggregator_domain, normalize_domain
from culinary_contacts.parsing.exclusion import ExclusionFilter, get_default_filter
from culinary_contacts.parsing.text import collapse_whitespace, normalize, normalize_key
from culinary_contacts.utils.rate_limiting import RateLimiter

logger = logging.getLogger(__name__)

SEARCH_ENGINE = "google"


def candidate_links(payload: dict) -> list[str]:
    """Website links in result order: knowledge-graph website first, then organic results."""
    links = []
    knowledge_graph = payload.get("knowledge_graph")
    if isinstance(knowledge_graph, dict) and knowledge_graph.get("website"):
        links.append(str(knowledge_graph["website"]))
    organic = payload.get("organic_results")
    if isinstance(organic, list):
        for result in organic:
            if isinstance(result, dict) and result.get("link"):
                links.append(str(result["link"]))
    return links


def pick_company_domain(links: list[str]) -> str | None:
    """First registrable domain among links that is not an aggregator."""
    for link in links:
        domain = normalize_domain(link)
        if domain and not is_aggregator_domain(domain):
            return domain
    return None


class DomainSearchClient:
    """Resolves a company name to its website domain."""

    def __init__(
        self,
        api_key: str | None,
        session: requests.Session | None = None,
        limiter: RateLimiter | None = None,
        base_url: str = SEARCH_API_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        exclusions: ExclusionFilter | None = None,
    ):
        self.api_key = api_key
        self.session = session or requests.Session()
        self.limiter = limiter or RateLimiter(REQUEST_DELAY_SECONDS, source_name="searchapi")
        self.base_url = base_url
        self.timeout = timeout
        self.exclusions = exclusions or get_default_filter()
        self.api_calls = 0
        self._resolved: dict[str, str | None] = {}

    @classmethod
    def from_settings(cls, settings=None, session: requests.Session | None = None):
        if settings is None:
            from culinary_contacts.config import get_settings

            settings = get_settings()
        return cls(
            api_key=settings.search_api_key,
            session=session,
            limiter=RateLimiter(settings.request_delay_seconds, source_name="searchapi"),
            base_url=settings.search_api_url,
            timeout=settings.api_timeout_seconds,
        )

    def resolve_domain(self, company_name: str | None) -> str | None:
        """
        Find the website domain of a company.

        Returns None without calling out for empty, Unknown or excluded
        names, and None on no result, HTTP error or unparseable response.
        """
        name = collapse_whitespace(normalize(company_name))
        if not name or name == UNKNOWN_NAME or self.exclusions.is_excluded(name):
            return None
        if not self.api_key:
            logger.debug(f"SEARCH_API_KEY not set; no domain discovery for '{name}'")
            return None

        key = normalize_key(name)
        if key in self._resolved:
            return self._resolved[key]

        return self._search(name, key)

    def _search(self, name: str, key: str) -> str | None:
        self.limiter()
        self.api_calls += 1
        params = {"engine": SEARCH_ENGINE, "q": name, "api_key": self.api_key}

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Domain search failed for '{name}': {e}")
            return None
        except ValueError as e:
            logger.warning(f"Domain search returned invalid JSON for '{name}': {e}")
            return None

        if not isinstance(payload, dict):
            return None

        domain = pick_company_domain(candidate_links(payload))
        self._resolved[key] = domain
        if domain:
            logger.info(f"Discovered domain {domain} for '{name}'")
        else:
            logger.info(f"No company domain found for '{name}'")
        return domain
