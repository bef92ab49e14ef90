"""Shared utilities: API pacing and tqdm-friendly logging."""

from culinary_contacts.utils.rate_limiting import RateLimiter
from culinary_contacts.utils.tqdm_logging import TqdmLoggingHandler

__all__ = ["RateLimiter", "TqdmLoggingHandler"]
