"""
Contact ranking and merging.

- titles: title priority rank (lower = more senior/relevant)
- scoring: per-contact score and normalization of provider records
- merge: union of strategy results with explicit priority order
"""

from culinary_contacts.contacts.merge import dedupe_contacts, merge_results
from culinary_contacts.contacts.scoring import build_candidate, is_generic_email, score_contact
from culinary_contacts.contacts.titles import TITLE_PRIORITY, UNMATCHED_RANK, score_title

__all__ = [
    "TITLE_PRIORITY",
    "UNMATCHED_RANK",
    "build_candidate",
    "dedupe_contacts",
    "is_generic_email",
    "merge_results",
    "score_contact",
    "score_title",
]
