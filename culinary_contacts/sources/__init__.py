"""
External data sources.

- hunter: contact enrichment (Hunter.io domain search)
- domain_search: company website discovery (SearchAPI.io Google search)
"""

from culinary_contacts.sources.domain_search import DomainSearchClient
from culinary_contacts.sources.hunter import HunterClient

__all__ = ["DomainSearchClient", "HunterClient"]
