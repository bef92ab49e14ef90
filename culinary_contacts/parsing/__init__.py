"""
Parsing of raw job-card text.

- text: normalization helpers
- company_name: rule pipeline that extracts the company name
- exclusion: agency / aggregator / geography filter
- address: company-name candidates from the address line
- detail_page: parent company and job details from the detail HTML
"""

from culinary_contacts.parsing.address import extract_candidates
from culinary_contacts.parsing.company_name import parse_company
from culinary_contacts.parsing.detail_page import parse_detail_page
from culinary_contacts.parsing.exclusion import ExclusionFilter, ExclusionResult, get_default_filter
from culinary_contacts.parsing.text import normalize, normalize_key

__all__ = [
    "ExclusionFilter",
    "ExclusionResult",
    "extract_candidates",
    "get_default_filter",
    "normalize",
    "normalize_key",
    "parse_company",
    "parse_detail_page",
]
