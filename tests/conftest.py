"""
Pytest configuration and shared fixtures for culinary_contacts tests.
"""

import os

import pytest

# Tests never talk to the real providers
os.environ["HUNTER_API_KEY"] = ""
os.environ["SEARCH_API_KEY"] = ""
os.environ["EXTRA_EXCLUDED_COMPANIES"] = "[]"
os.environ["REQUEST_DELAY_SECONDS"] = "0"
os.environ["RATE_LIMIT_COOLDOWN_SECONDS"] = "0"

from culinary_contacts.config import get_settings  # noqa: E402
from culinary_contacts.contacts.titles import score_title  # noqa: E402
from culinary_contacts.parsing.exclusion import ExclusionFilter, get_default_filter  # noqa: E402
from culinary_contacts.utils.rate_limiting import RateLimiter  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_cached_singletons():
    """Settings and the default exclusion filter are lru_cached; rebuild per test."""
    get_settings.cache_clear()
    get_default_filter.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_filter.cache_clear()
    score_title.cache_clear()


@pytest.fixture
def no_exclusions():
    """Exclusion filter with no terms at all."""
    return ExclusionFilter(exact_terms=(), partial_terms=())


@pytest.fixture
def no_delay():
    """Rate limiter that never sleeps."""
    return RateLimiter(0, source_name="test")


def make_response(status_code=200, payload=None, text=""):
    """Minimal stand-in for requests.Response."""
    from unittest.mock import MagicMock

    import requests

    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} error"
        )
    return response


def hunter_payload(emails, domain="example.com", organization="Example", **extra):
    """Hunter domain-search response body."""
    data = {"domain": domain, "organization": organization, "emails": emails, **extra}
    return {"data": data, "meta": {"results": len(emails)}}


def hunter_email(value, first_name="", last_name="", position=None, confidence=90, kind=None):
    email = {
        "value": value,
        "first_name": first_name,
        "last_name": last_name,
        "confidence": confidence,
    }
    if position is not None:
        email["position"] = position
    if kind is not None:
        email["type"] = kind
    return email


@pytest.fixture
def response():
    """Factory for fake HTTP responses: response(status, payload, text)."""
    return make_response


@pytest.fixture
def hunter_data():
    """Factory for Hunter response bodies: hunter_data(emails, domain=..., ...)."""
    return hunter_payload


@pytest.fixture
def email():
    """Factory for Hunter email records: email(value, first_name=..., position=...)."""
    return hunter_email
