"""
Domain validation and normalization using tldextract.

Used to turn search-result URLs and provider domains into registrable
domains ("www.bluehillfarm.com/about" -> "bluehillfarm.com") and to
compare a contact's email domain with the company's domains.

The extractor uses the Public Suffix List snapshot bundled with
tldextract, so no network fetch happens at runtime.
"""

import re

import tldextract

_extract = tldextract.TLDExtract(suffix_list_urls=())

# Listing sites, social networks and review aggregators that show up in
# search results for a restaurant name but are never its own website
AGGREGATOR_DOMAINS = {
    "yelp.com",
    "facebook.com",
    "instagram.com",
    "twitter.com",
    "x.com",
    "tiktok.com",
    "youtube.com",
    "linkedin.com",
    "tripadvisor.com",
    "opentable.com",
    "resy.com",
    "exploretock.com",
    "culinaryagents.com",
    "indeed.com",
    "glassdoor.com",
    "ziprecruiter.com",
    "wikipedia.org",
    "google.com",
    "doordash.com",
    "grubhub.com",
    "ubereats.com",
    "seamless.com",
    "zomato.com",
    "infatuation.com",
    "theinfatuation.com",
    "eater.com",
    "timeout.com",
    "nytimes.com",
    "michelin.com",
    "bloomberg.com",
    "crunchbase.com",
    "zoominfo.com",
    "mapquest.com",
    "foursquare.com",
}


def _strip_url(value: str) -> str:
    cleaned = re.sub(r"^[a-z][a-z0-9+.-]*://", "", value.strip().lower())
    cleaned = re.sub(r"^www\.", "", cleaned)
    return cleaned.split("/")[0].split("?")[0].split("#")[0].split(":")[0]


def root_domain(value: str | None) -> str | None:
    """
    Registrable domain of a URL or hostname.

    Examples:
        "https://www.bluehillfarm.com/" -> "bluehillfarm.com"
        "events.example.co.uk" -> "example.co.uk"
    """
    if not value:
        return None
    host = _strip_url(str(value))
    if not host:
        return None
    ext = _extract(host)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return None


def is_valid_domain(domain: str | None) -> bool:
    """Registrable domain with a real suffix and a domain label of at least 2 characters."""
    if not domain or len(domain) > 255:
        return False
    ext = _extract(_strip_url(domain))
    return bool(ext.suffix) and len(ext.domain) >= 2


def normalize_domain(value: str | None) -> str | None:
    """Normalize to a validated registrable domain, or None."""
    normalized = root_domain(value)
    if normalized and is_valid_domain(normalized):
        return normalized
    return None


def email_domain(email: str | None) -> str | None:
    """Registrable domain of an email address ("jane@nyc.example.com" -> "example.com")."""
    if not email or "@" not in email:
        return None
    return normalize_domain(email.rsplit("@", 1)[1])


def is_aggregator_domain(domain: str | None) -> bool:
    """True for listing/social/review sites that are never a company's own site."""
    if not domain:
        return False
    lowered = domain.lower()
    return lowered in AGGREGATOR_DOMAINS or lowered.endswith(".gov")
