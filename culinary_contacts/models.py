"""
Data models for company name parsing and contact resolution.

Records that travel between listings are frozen dataclasses so that no
object is ever shared and mutated across two jobs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from culinary_contacts.constants import EXCLUDED_NAME, UNKNOWN_NAME


class ParseStatus(Enum):
    """Outcome of company name parsing."""

    RESOLVED = "resolved"
    UNKNOWN = "unknown"
    EXCLUDED = "excluded"


class SearchMode(Enum):
    """How an enrichment lookup identifies the company."""

    BY_COMPANY_NAME = "company"
    BY_DOMAIN = "domain"


@dataclass(frozen=True)
class RawListing:
    """One job card as supplied by the crawler."""

    title: str
    raw_company_text: str
    raw_location_text: str = ""
    url: str | None = None
    salary: str | None = None
    detail_html: str | None = None
    parent_company: str | None = None


@dataclass(frozen=True)
class ParsedCompany:
    """Best-guess company name for a listing."""

    name: str
    status: ParseStatus
    reason: str | None = None  # Matched exclusion term or the rejecting rule

    @classmethod
    def resolved(cls, name: str) -> ParsedCompany:
        return cls(name=name, status=ParseStatus.RESOLVED)

    @classmethod
    def unknown(cls, reason: str | None = None) -> ParsedCompany:
        return cls(name=UNKNOWN_NAME, status=ParseStatus.UNKNOWN, reason=reason)

    @classmethod
    def excluded(cls, term: str | None = None) -> ParsedCompany:
        return cls(name=EXCLUDED_NAME, status=ParseStatus.EXCLUDED, reason=term)

    @property
    def is_resolved(self) -> bool:
        return self.status is ParseStatus.RESOLVED


@dataclass(frozen=True)
class EnrichmentQuery:
    """A single lookup attempt against the enrichment provider."""

    search_term: str
    mode: SearchMode
    source_tag: str


@dataclass(frozen=True)
class ContactCandidate:
    """A scored contact returned for a company."""

    name: str
    title: str
    email: str
    confidence: float  # 0 to 100, as reported by the provider
    rank: int  # Title priority rank (lower = more senior/relevant)
    score: float  # Contact score (lower = better)
    origin_company: str = ""
    origin_domain: str = ""
    source_tag: str = ""
    matches_domain: bool = False

    @property
    def email_key(self) -> str:
        return self.email.strip().lower()


@dataclass(frozen=True)
class LookupResult:
    """Result of one enrichment lookup (never raised, possibly empty)."""

    query: EnrichmentQuery
    linkedin: str | None = None
    domain: str | None = None
    size: str | None = None
    contacts: tuple[ContactCandidate, ...] = ()
    source_tag: str = ""
    failed: bool = False

    @classmethod
    def empty(cls, query: EnrichmentQuery, source_tag: str, failed: bool = False) -> LookupResult:
        return cls(query=query, source_tag=source_tag, failed=failed)


@dataclass(frozen=True)
class CompanyContactResult:
    """Merged contacts and company metadata for one listing."""

    company_name: str = ""
    linkedin_urls: frozenset[str] = frozenset()
    domains: frozenset[str] = frozenset()
    primary_domain: str | None = None
    parent_domain: str | None = None
    employee_size_hint: str | None = None
    contacts: tuple[ContactCandidate, ...] = ()
    strategies: tuple[str, ...] = ()  # Source tags that contributed contacts

    @classmethod
    def empty(cls, company_name: str = "") -> CompanyContactResult:
        return cls(company_name=company_name)


@dataclass
class CacheEntry:
    """Cached provider response for one search term and strategy."""

    key: str
    emails: list[dict]
    timestamp: datetime
    original_company: str = ""
    source_tag: str = ""
    linkedin: str | None = None
    domain: str | None = None
    size: str | None = None

    def age_days(self, now: datetime | None = None) -> float:
        now = now or datetime.now(UTC)
        return (now - self.timestamp).total_seconds() / 86400

    def to_dict(self) -> dict:
        return {
            "emails": list(self.emails),
            "timestamp": self.timestamp.isoformat(),
            "originalCompany": self.original_company,
            "source": self.source_tag,
            "linkedin": self.linkedin,
            "domain": self.domain,
            "size": self.size,
        }


@dataclass(frozen=True)
class DetailPage:
    """Fields read from a listing's detail page."""

    parent_company: str | None = None
    leadership: tuple[tuple[str, str], ...] = ()  # (name, title)
    job_details: str | None = None


@dataclass(frozen=True)
class JobRecord:
    """A processed listing ready for export."""

    listing: RawListing
    company: ParsedCompany
    result: CompanyContactResult
    parent_company: str | None = None
    job_details: str | None = None
    processed_at: datetime = field(default_factory=lambda: datetime.now(UTC))
