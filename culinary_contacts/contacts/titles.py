"""
Title priority scoring.

Ranks a contact's job title against a fixed, ordered list of title terms:
HR and talent leadership first (they read the candidate emails), then the
C-suite, regional leadership, directors, general management and finally
generic recruiting nouns. Lower rank = better contact.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

TITLE_PRIORITY: tuple[str, ...] = (
    # HR and talent acquisition
    "chief people officer", "chief human resources officer", "chro",
    "head of hr", "head of human resources", "head of people", "head of talent",
    "hr director", "human resources director", "people director", "talent director",
    "talent acquisition director",
    "vp of hr", "vp of human resources", "vp of people", "vp of talent",
    "vp of talent acquisition",
    "people operations", "people ops", "talent operations",
    "hr manager", "human resources manager", "people manager", "talent manager",
    "talent acquisition manager",
    "hr specialist", "human resources specialist", "people specialist", "talent specialist",
    "recruiter", "talent recruiter", "technical recruiter", "executive recruiter",
    "hr", "human resources", "people", "talent", "talent acquisition",
    # C-suite
    "ceo", "chief executive officer",
    "president",
    "coo", "chief operating officer",
    "chief talent officer",
    "chief",
    # Regional and area leadership
    "regional director", "area director", "district director",
    "regional manager", "area manager", "district manager",
    "regional", "area", "district",
    # Directors
    "director of operations", "operations director",
    "director of hr", "director of human resources", "director of people",
    "director of recruiting", "recruiting director",
    "director",
    # Other executives and management
    "vice president", "vp",
    "general manager", "gm",
    "manager",
    "executive",
    "founder", "owner", "partner",
    # Generic recruiting nouns
    "recruiting", "hiring", "employment", "personnel",
)

UNMATCHED_RANK = len(TITLE_PRIORITY) + 1

_PRIORITY_INDEX = {term: index for index, term in enumerate(TITLE_PRIORITY)}
_TOKEN = re.compile(r"[a-z0-9&]+")


@dataclass(frozen=True)
class _Synonym:
    key: str
    alt: str


# Functions and seniority levels whose word order varies in real titles
_ROLES = (
    _Synonym("hr", "human resources"),
    _Synonym("talent", "talent acquisition"),
    _Synonym("people", "people operations"),
)
_LEVELS = (
    _Synonym("manager", "manager of"),
    _Synonym("director", "director of"),
    _Synonym("vp", "vice president"),
    _Synonym("head", "head of"),
    _Synonym("chief", "chief"),
)
_VP_WORDS = ("vp", "vice president")
_VP_FUNCTIONS = ("hr", "human resources", "people", "talent")


def _contains_phrase(text: str, phrase: str) -> bool:
    """Whole-word containment ("coo" is not in "line cook")."""
    return re.search(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)", text) is not None


def _role_level_patterns(role: _Synonym, level: _Synonym) -> tuple[str, ...]:
    return (
        f"{role.key} {level.key}",
        f"{level.key} of {role.key}",
        f"{level.key}, {role.key}",
        f"{role.alt} {level.key}",
        f"{level.key} of {role.alt}",
        f"{level.key}, {role.alt}",
        f"{level.alt} {role.key}",
        f"{level.alt} {role.alt}",
    )


def _canonical_rank(role: _Synonym, level: _Synonym) -> int | None:
    for form in (f"{role.key} {level.key}", f"{role.alt} {level.key}"):
        if form in _PRIORITY_INDEX:
            return _PRIORITY_INDEX[form]
    return None


def _match_role_level(title: str) -> int | None:
    for role in _ROLES:
        for level in _LEVELS:
            rank = _canonical_rank(role, level)
            if rank is None:
                continue
            if any(_contains_phrase(title, p) for p in _role_level_patterns(role, level)):
                return rank
    return None


def _match_vp_function(title: str) -> int | None:
    if not any(_contains_phrase(title, w) for w in _VP_WORDS):
        return None
    if not any(_contains_phrase(title, f) for f in _VP_FUNCTIONS):
        return None
    for index, term in enumerate(TITLE_PRIORITY):
        if term.startswith("vp of ") and _contains_phrase(title, term[len("vp of ") :]):
            return index
    return None


def _match_fallback(title: str) -> int | None:
    tokens = set(_TOKEN.findall(title))
    for index, term in enumerate(TITLE_PRIORITY):
        if term == "chief":
            if "chief" in tokens and "chief cook" not in title:
                return index
        elif " " in term:
            if all(word in tokens for word in term.split()):
                return index
        elif term in tokens:
            return index
    return None


@lru_cache(maxsize=4096)
def score_title(title: str | None) -> int:
    """
    Rank a job title; lower is more senior/relevant.

    Order of checks: exact match, role x level word-order variants
    ("Manager of HR", "Manager, Human Resources"), VP of an HR-type
    function, then an ordered whole-word scan of the priority list.

    Returns:
        Index in TITLE_PRIORITY, or UNMATCHED_RANK when nothing matches.
    """
    if not title or not title.strip():
        return UNMATCHED_RANK

    lowered = " ".join(title.lower().split())
    if lowered in _PRIORITY_INDEX:
        return _PRIORITY_INDEX[lowered]

    for matcher in (_match_role_level, _match_vp_function, _match_fallback):
        rank = matcher(lowered)
        if rank is not None:
            return rank
    return UNMATCHED_RANK
