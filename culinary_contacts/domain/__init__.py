"""Domain normalization helpers."""

from culinary_contacts.domain.validation import (
    email_domain,
    is_aggregator_domain,
    normalize_domain,
    root_domain,
)

__all__ = ["email_domain", "is_aggregator_domain", "normalize_domain", "root_domain"]
