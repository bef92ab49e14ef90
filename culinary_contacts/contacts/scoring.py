"""
Contact scoring for raw provider records.

A provider record is a dict with some subset of value/email, first_name,
last_name, position/position_raw, confidence and type. A title, when
present, decides the score on its own; otherwise the score is built from
email shape, name presence, confidence and contact type. Lower is better.
"""

import logging
from collections.abc import Iterable

from culinary_contacts.constants import (
    BASE_CONTACT_SCORE,
    GENERIC_EMAIL_PENALTY,
    GENERIC_TYPE_PENALTY,
    INVALID_CONTACT_SCORE,
    NAMED_CONTACT_BONUS,
    NOT_AVAILABLE,
    PERSONAL_EMAIL_BONUS,
    PERSONAL_TYPE_BONUS,
    UNKNOWN_NAME,
    UNNAMED_CONTACT_PENALTY,
)
from culinary_contacts.contacts.titles import score_title
from culinary_contacts.models import ContactCandidate

logger = logging.getLogger(__name__)

# Role-based mailboxes (deprioritized against personal addresses)
GENERIC_EMAIL_PATTERNS: tuple[str, ...] = (
    "info@", "contact@", "hello@", "admin@", "support@",
    "office@", "mail@", "inquiry@", "general@", "sales@",
    "help@", "service@", "hr@", "jobs@", "careers@",
    "team@", "marketing@", "press@", "media@", "events@",
)


def is_generic_email(email: str | None) -> bool:
    """True for role-based addresses (info@, careers@, ...); empty counts as generic."""
    if not email or not isinstance(email, str):
        return True
    lowered = email.lower()
    return any(pattern in lowered for pattern in GENERIC_EMAIL_PATTERNS)


def email_address(raw: dict) -> str:
    return str(raw.get("value") or raw.get("email") or "").strip()


def contact_title(raw: dict) -> str:
    return str(raw.get("position") or raw.get("position_raw") or raw.get("title") or "").strip()


def _confidence(raw: dict) -> float:
    value = raw.get("confidence")
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    return float(value)


def score_contact(raw: dict | None) -> float:
    """
    Score a raw contact record; lower is better.

    No address -> INVALID_CONTACT_SCORE. A title returns its title rank
    directly, so any titled contact outranks every untitled one.
    """
    if not raw or not email_address(raw):
        return INVALID_CONTACT_SCORE

    title = contact_title(raw)
    if title:
        return score_title(title)

    score = float(BASE_CONTACT_SCORE)
    if is_generic_email(email_address(raw)):
        score += GENERIC_EMAIL_PENALTY
    else:
        score -= PERSONAL_EMAIL_BONUS

    if raw.get("first_name") or raw.get("last_name"):
        score -= NAMED_CONTACT_BONUS
    else:
        score += UNNAMED_CONTACT_PENALTY

    score -= _confidence(raw) / 2

    contact_type = raw.get("type")
    if contact_type == "personal":
        score -= PERSONAL_TYPE_BONUS
    elif contact_type == "generic":
        score += GENERIC_TYPE_PENALTY

    return score


def display_name(raw: dict) -> str:
    first = str(raw.get("first_name") or "").strip()
    last = str(raw.get("last_name") or "").strip()
    if first and last:
        return f"{first} {last}"
    return first or last or str(raw.get("name") or "").strip() or UNKNOWN_NAME


def build_candidate(raw: dict, source_tag: str = "") -> ContactCandidate | None:
    """Normalize a provider record into a ContactCandidate (None without an address)."""
    email = email_address(raw)
    if not email:
        logger.debug(f"Skipping contact without address: {raw}")
        return None

    title = contact_title(raw)
    return ContactCandidate(
        name=display_name(raw),
        title=title or NOT_AVAILABLE,
        email=email,
        confidence=_confidence(raw),
        rank=score_title(title),
        score=score_contact(raw),
        origin_company=str(raw.get("_original_company") or ""),
        origin_domain=str(raw.get("_original_domain") or ""),
        source_tag=source_tag,
    )


def rank_contacts(raws: Iterable[dict], source_tag: str = "") -> list[ContactCandidate]:
    """Candidates sorted by score; records without an address are dropped."""
    candidates = [c for c in (build_candidate(raw, source_tag) for raw in raws or ()) if c]
    candidates.sort(key=lambda c: c.score)
    return candidates
