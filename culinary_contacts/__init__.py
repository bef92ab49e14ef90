"""
Culinary Contacts - company name and hiring contact resolution for job listings.

This package provides utilities for:
- Parsing a company name out of noisy job-card text
- Filtering out staffing agencies, chains and other excluded employers
- Looking up and ranking hiring contacts through an enrichment provider
- Caching lookups between runs
- Exporting jobs and contacts as outreach sheet rows
"""

import logging

# Set up NullHandler to prevent "No handler found" warnings
# when used as a library. Applications should configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# Re-export commonly used items
from culinary_contacts.config import Settings, get_settings
from culinary_contacts.models import (
    CompanyContactResult,
    ContactCandidate,
    ParsedCompany,
    ParseStatus,
    RawListing,
    SearchMode,
)
from culinary_contacts.parsing import parse_company
from culinary_contacts.resolution import ContactResolver

__all__ = [
    "__version__",
    # Config
    "Settings",
    "get_settings",
    # Models
    "CompanyContactResult",
    "ContactCandidate",
    "ParsedCompany",
    "ParseStatus",
    "RawListing",
    "SearchMode",
    # Entry points
    "parse_company",
    "ContactResolver",
]
