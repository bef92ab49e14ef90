"""
Unit tests for company domain discovery and domain helpers.
"""

from unittest.mock import MagicMock

import pytest
import requests

from culinary_contacts.domain.validation import (
    email_domain,
    is_aggregator_domain,
    is_valid_domain,
    normalize_domain,
    root_domain,
)
from culinary_contacts.sources.domain_search import (
    DomainSearchClient,
    candidate_links,
    pick_company_domain,
)


class TestDomainHelpers:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("https://www.bluehillfarm.com/about", "bluehillfarm.com"),
            ("events.example.co.uk", "example.co.uk"),
            ("HTTP://WWW.Balthazarny.COM", "balthazarny.com"),
            ("balthazarny.com:443/menu?x=1", "balthazarny.com"),
        ],
    )
    def test_root_domain(self, value, expected):
        assert root_domain(value) == expected

    @pytest.mark.parametrize("value", [None, "", "localhost", "not a domain"])
    def test_invalid(self, value):
        assert normalize_domain(value) is None

    def test_is_valid_domain(self):
        assert is_valid_domain("balthazarny.com")
        assert not is_valid_domain("x.com.invalidsuffix")

    def test_email_domain(self):
        assert email_domain("jane@nyc.example.com") == "example.com"
        assert email_domain("no-at-sign") is None
        assert email_domain(None) is None

    def test_aggregators(self):
        assert is_aggregator_domain("yelp.com")
        assert is_aggregator_domain("nyc.gov")
        assert not is_aggregator_domain("balthazarny.com")
        assert not is_aggregator_domain(None)


class TestPickDomain:
    def test_knowledge_graph_first(self):
        payload = {
            "knowledge_graph": {"website": "https://www.balthazarny.com/"},
            "organic_results": [{"link": "https://www.yelp.com/biz/balthazar"}],
        }
        assert candidate_links(payload) == [
            "https://www.balthazarny.com/",
            "https://www.yelp.com/biz/balthazar",
        ]

    def test_skips_aggregators(self):
        links = [
            "https://www.yelp.com/biz/balthazar",
            "https://www.instagram.com/balthazarny",
            "https://balthazarny.com/reservations",
        ]
        assert pick_company_domain(links) == "balthazarny.com"

    def test_nothing_usable(self):
        assert pick_company_domain(["https://www.opentable.com/r/balthazar"]) is None
        assert candidate_links({"organic_results": "oops"}) == []


def _response(payload=None, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("error")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session, no_delay):
    return DomainSearchClient(api_key="search-key", session=session, limiter=no_delay)


class TestResolveDomain:
    def test_resolves(self, client, session):
        session.get.return_value = _response(
            {"organic_results": [{"link": "https://www.balthazarny.com/"}]}
        )
        assert client.resolve_domain("Balthazar") == "balthazarny.com"
        _, kwargs = session.get.call_args
        assert kwargs["params"] == {"engine": "google", "q": "Balthazar", "api_key": "search-key"}

    def test_result_remembered(self, client, session):
        session.get.return_value = _response({"organic_results": []})
        assert client.resolve_domain("Balthazar") is None
        assert client.resolve_domain("balthazar ") is None
        assert session.get.call_count == 1

    def test_http_error_not_remembered(self, client, session):
        session.get.side_effect = [
            _response(status_code=503),
            _response({"organic_results": [{"link": "https://balthazarny.com"}]}),
        ]
        assert client.resolve_domain("Balthazar") is None
        assert client.resolve_domain("Balthazar") == "balthazarny.com"

    def test_network_error(self, client, session):
        session.get.side_effect = requests.exceptions.ConnectionError("down")
        assert client.resolve_domain("Balthazar") is None

    def test_invalid_json(self, client, session):
        response = _response()
        response.json.side_effect = ValueError("bad json")
        session.get.return_value = response
        assert client.resolve_domain("Balthazar") is None

    @pytest.mark.parametrize("name", [None, "", "Unknown", "Compass Group"])
    def test_skipped_names(self, client, session, name):
        assert client.resolve_domain(name) is None
        session.get.assert_not_called()

    def test_no_api_key(self, session, no_delay):
        client = DomainSearchClient(api_key=None, session=session, limiter=no_delay)
        assert client.resolve_domain("Balthazar") is None
        session.get.assert_not_called()
