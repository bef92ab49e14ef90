"""Per-listing contact resolution."""

from culinary_contacts.resolution.resolver import ContactResolver

__all__ = ["ContactResolver"]
