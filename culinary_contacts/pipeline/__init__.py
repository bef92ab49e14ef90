"""Listing processing pipeline."""

from culinary_contacts.pipeline.listings import listing_from_dict, load_listings
from culinary_contacts.pipeline.runner import ListingRunner, RunSummary

__all__ = ["ListingRunner", "RunSummary", "listing_from_dict", "load_listings"]
