"""
Text normalization helpers.

Listing text arrives as several UI fragments glued together, often with
icons and stray symbols. These helpers are pure and total: any input,
including None, yields a string.
"""

import re

# Keep letters, digits, whitespace and basic punctuation (. , & ' -)
_UNSUPPORTED_CHARS = re.compile(r"[^\w\s.,&'-]|_")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """
    Strip characters outside [alphanumeric, whitespace, . , & ' -].

    Examples:
        "Bar Boulud •" -> "Bar Boulud "
        "Joe's Pizza!" -> "Joe's Pizza"
    """
    if not text:
        return ""
    return _UNSUPPORTED_CHARS.sub("", str(text))


def collapse_whitespace(text: str | None) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", str(text)).strip()


def normalize_key(text: str | None) -> str:
    """Lower-cased, normalized, whitespace-collapsed form used for cache keys."""
    return collapse_whitespace(normalize(text)).lower()


def squash(text: str | None) -> str:
    """Lower-case and remove all whitespace ("Whole FoodsMarket" -> "wholefoodsmarket")."""
    if not text:
        return ""
    return _WHITESPACE.sub("", str(text)).lower()


def truncate(text: str | None, max_length: int) -> str:
    """Truncate to max_length characters, marking the cut with '...'."""
    if not text:
        return ""
    return text if len(text) <= max_length else text[: max_length - 3] + "..."
