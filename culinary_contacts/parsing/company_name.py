"""
Company name parser for job-card text.

Job cards render the company, location and category as separate UI
fragments that reach us concatenated, often with the whitespace between
them lost ("Seaport Entertainment GroupNew York, NY • Restaurant Group").
The parser first rebuilds word boundaries, then isolates the company
segment, then rejects anything that is only a generic term or a place.

The cascade is an ordered list of small rule functions over a mutable
ParseState. A rule either edits the state and returns None, or returns a
final ParsedCompany, which ends the pipeline.

Usage:
    from culinary_contacts.parsing.company_name import parse_company

    parsed = parse_company("MARCUS SAMUELSSON RESTAURANT GROUP")
    parsed.name  # "Marcus Samuelsson Restaurant Group"
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from culinary_contacts.constants import UNKNOWN_NAME
from culinary_contacts.models import ParsedCompany
from culinary_contacts.parsing.exclusion import ExclusionFilter, get_default_filter
from culinary_contacts.parsing.text import collapse_whitespace, normalize
from culinary_contacts.parsing.vocabulary import (
    ALL_CAPS_WHOLE_NAME_SUFFIXES,
    GENERIC_SUFFIXES,
    GENERIC_TERMS,
    JOB_TITLE_PREFIXES,
    LEGAL_SUFFIXES,
    PLACE_NAMES_BY_LENGTH,
    PLACE_NAMES_LOWER,
    PLACE_PREFIX_QUALIFIERS,
    PROTECTED_GROUP_LEAD_WORDS,
    PROTECTED_TOKENS,
    RESTAURANT_KEYWORDS,
    STANDALONE_GENERIC_WORDS,
    TRAILING_GENERIC_NOUNS,
    UNSPLITTABLE_BRAND_TOKENS,
    VENUE_SUFFIX_WORDS,
    WHOLE_NAME_SUFFIXES,
)

logger = logging.getLogger(__name__)

BULLET = "•"

# A place name must not continue into a longer word ("INdigo", "Brooklyn's")
_PLACE_END = r"(?![\w'])"
_LONG_PLACES = [p for p in PLACE_NAMES_BY_LENGTH if len(p) > 2]
_STATE_ABBREVIATIONS = [p for p in PLACE_NAMES_BY_LENGTH if len(p) <= 2]

# Two-letter abbreviations only count in upper case ("LA", not "la")
_PLACE_PREFIX = re.compile(
    r"^(?:(?i:%s)|%s)%s"
    % (
        "|".join(re.escape(p) for p in _LONG_PLACES),
        "|".join(re.escape(p) for p in _STATE_ABBREVIATIONS),
        _PLACE_END,
    )
)
_PLACE_ANYWHERE = re.compile(
    r"\b(?:%s)%s" % ("|".join(re.escape(p) for p in PLACE_NAMES_BY_LENGTH), _PLACE_END)
)

_VENUE_GLUE = re.compile(
    r"\b((?i:%s))([A-Z][a-z]+)" % "|".join(VENUE_SUFFIX_WORDS)
)
_ALL_CAPS_WHOLE_NAME = re.compile(
    r"^[A-Z\s.'&]+\s+(?:%s)$" % "|".join(ALL_CAPS_WHOLE_NAME_SUFFIXES)
)
_WHOLE_NAME = re.compile(r"^.+\s+(?:%s)$" % "|".join(WHOLE_NAME_SUFFIXES), re.IGNORECASE)
_CAMEL_JOIN = re.compile(r"([a-z])([A-Z])")
_PROTECTED_SPLIT = re.compile("(%s)" % "|".join(re.escape(t) for t in PROTECTED_TOKENS))
_LEGAL_SUFFIX = re.compile(
    r"\s+(?:%s)\.?$" % "|".join(re.escape(s) for s in LEGAL_SUFFIXES), re.IGNORECASE
)
_PROTECTED_GROUP = re.compile(
    r"(?:%s)\s+group$" % "|".join(PROTECTED_GROUP_LEAD_WORDS), re.IGNORECASE
)
_TRAILING_GENERIC = re.compile(
    r"\s+(?:%s)$" % "|".join(TRAILING_GENERIC_NOUNS), re.IGNORECASE
)
_KEYWORD_PATTERNS = [
    (keyword, re.compile(r"\b" + re.escape(keyword))) for keyword in RESTAURANT_KEYWORDS
]
_JOB_TITLE_PREFIXES_BY_LENGTH = sorted(JOB_TITLE_PREFIXES, key=len, reverse=True)

# Characters of context kept before " by " ("Restaurants by Jorge")
BY_WINDOW_CHARS = 11


@dataclass
class ParseState:
    """Working state threaded through the parse rules."""

    raw: str
    exclusions: ExclusionFilter
    text: str = ""
    preserved: bool = False  # Whole-name form or keyword extraction found
    glued_places: list[str] = field(default_factory=list)


Rule = Callable[[ParseState], ParsedCompany | None]


def starts_with_place(text: str) -> bool:
    """True if text begins with a known place name followed by a word break."""
    return bool(_PLACE_PREFIX.match(text))


def _title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


# ---------------------------------------------------------------------------
# Rules, in pipeline order
# ---------------------------------------------------------------------------


def reject_trivial(state: ParseState) -> ParsedCompany | None:
    stripped = state.raw.strip()
    if not stripped or stripped == UNKNOWN_NAME:
        return ParsedCompany.unknown("empty")
    return None


def reject_excluded(state: ParseState) -> ParsedCompany | None:
    result = state.exclusions.check(state.raw)
    if result.excluded:
        logger.info(f"Excluded company '{result.matched_term}' in '{state.raw}'")
        return ParsedCompany.excluded(result.matched_term)
    return None


def reject_location_header(state: ParseState) -> ParsedCompany | None:
    """A place followed by a bullet ("New York, NY • Restaurant Group") is a location header."""
    if BULLET in state.raw and starts_with_place(normalize(state.raw).strip()):
        logger.debug(f"Location header, not a company: '{state.raw}'")
        return ParsedCompany.unknown("location_header")
    return None


def isolate_company_segment(state: ParseState) -> None:
    state.text = collapse_whitespace(normalize(state.raw.split(BULLET)[0]))


def repair_glued_places(state: ParseState) -> None:
    """Insert the space lost before a place name ("GroupNew York" -> "Group New York")."""
    for place in PLACE_NAMES_BY_LENGTH:
        if len(place) < 5 or place not in state.text or f" {place}" in state.text:
            continue
        pattern = re.compile(r"([a-z])" + re.escape(place))
        if pattern.search(state.text):
            state.text = pattern.sub(lambda m: f"{m.group(1)} {place}", state.text, count=1)
            state.glued_places.append(place)
            logger.debug(f"Separated glued place '{place}': '{state.text}'")


def repair_glued_venue_words(state: ParseState) -> None:
    """Split a venue word from the capitalized word glued after it ("BarBoulud")."""
    if " - " in state.text or any(token in state.text for token in UNSPLITTABLE_BRAND_TOKENS):
        return
    repaired = _VENUE_GLUE.sub(r"\1 \2", state.text, count=1)
    if repaired != state.text:
        logger.debug(f"Separated glued venue word: '{repaired}'")
        state.text = repaired


def preserve_whole_name(state: ParseState) -> None:
    """Keep "<Name> Restaurant Group" style names intact through later stripping."""
    if _ALL_CAPS_WHOLE_NAME.match(state.text):
        state.text = _title_case(state.text)
        state.preserved = True
    elif _WHOLE_NAME.match(state.text):
        state.preserved = True


def _is_generic_fragment(candidate: str) -> bool:
    lowered = candidate.lower()
    if lowered in GENERIC_TERMS:
        return True
    word_count = len([w for w in candidate.split() if len(w) > 1])
    return word_count <= 3 and lowered.endswith(GENERIC_SUFFIXES)


def _next_place_index(text: str, start: int) -> int:
    match = _PLACE_ANYWHERE.search(text, start + 1)
    return match.start() if match else len(text)


def extract_around_keyword(state: ParseState) -> None:
    """
    Pull the venue name out of a longer string around a restaurant keyword.

    "P.M. Pastry Sous Chef abc V Restaurants by Jorges New York" ->
    "Restaurants by Jorges". Only applies when at least two words precede
    the keyword, and the fragment must be more than the keyword itself.
    """
    if state.preserved:
        return

    lowered = state.text.lower()
    for keyword, pattern in _KEYWORD_PATTERNS:
        match = pattern.search(lowered)
        if not match or match.start() <= 3:
            continue
        index = match.start()
        if len(state.text[:index].split()) < 2:
            continue

        candidate = state.text[index : _next_place_index(state.text, index)].strip(" ,")
        if _is_generic_fragment(candidate):
            logger.debug(f"Skipping generic fragment '{candidate}'")
            continue
        if len(candidate) > len(keyword) + 2:
            logger.debug(f"Extracted '{candidate}' around keyword '{keyword}'")
            state.text = candidate
            state.preserved = True
            return


def split_off_location(state: ParseState) -> None:
    """Cut the trailing location: at a glued place name, else at the last comma."""
    if state.preserved:
        return

    for place in _LONG_PLACES:
        if place in state.glued_places:
            pattern = re.compile(r"\s" + re.escape(place) + r"(?=$|[\s,.])")
        else:
            pattern = re.compile(r"(?<=[A-Za-z])" + re.escape(place) + r"(?=$|[\s,.])")
        match = pattern.search(state.text)
        if match:
            state.text = state.text[: match.start()].strip(" ,")
            logger.debug(f"Cut location '{place}': '{state.text}'")
            return

    comma = state.text.rfind(",")
    if comma == -1:
        return
    head = state.text[:comma].strip()
    earlier = head.rfind(",")
    state.text = head[:earlier].strip() if earlier != -1 else head


def repair_camel_case(state: ParseState) -> None:
    """Split residual camelCase joins, leaving protected tokens ("SoHo") whole."""
    chunks = _PROTECTED_SPLIT.split(state.text)
    state.text = "".join(
        chunk if chunk in PROTECTED_TOKENS else _CAMEL_JOIN.sub(r"\1 \2", chunk)
        for chunk in chunks
    )


def extract_by_attribution(state: ParseState) -> None:
    """Keep the proper name just before " by " ("Sous Chef Restaurants by Jorge")."""
    if state.preserved:
        return
    index = state.text.find(" by ")
    if index <= 0:
        return
    start = max(0, index - BY_WINDOW_CHARS)
    while start > 0 and not state.text[start - 1].isspace():
        start -= 1
    state.text = state.text[start:].strip()


def strip_suffixes(state: ParseState) -> None:
    state.text = _LEGAL_SUFFIX.sub("", state.text).strip()
    while not _PROTECTED_GROUP.search(state.text):
        stripped = _TRAILING_GENERIC.sub("", state.text).strip()
        if stripped == state.text:
            break
        state.text = stripped


def strip_job_title_prefix(state: ParseState) -> None:
    lowered = state.text.lower()
    for prefix in _JOB_TITLE_PREFIXES_BY_LENGTH:
        if lowered.startswith(prefix + " "):
            state.text = state.text[len(prefix) :].strip()
            logger.debug(f"Removed job title prefix '{prefix}': '{state.text}'")
            return


def classify(state: ParseState) -> ParsedCompany:
    name = state.text.strip()
    lowered = name.lower()
    words = name.split()

    if not name:
        return ParsedCompany.unknown("empty")
    if lowered in GENERIC_TERMS:
        return ParsedCompany.unknown("generic_term")
    if len(words) == 1 and lowered in STANDALONE_GENERIC_WORDS:
        return ParsedCompany.unknown("generic_term")
    if lowered in PLACE_NAMES_LOWER:
        return ParsedCompany.unknown("place_name")
    if (
        len(name) < 20
        and not any(term in lowered for term in PLACE_PREFIX_QUALIFIERS)
        and len(words) > 1
        and starts_with_place(name)
    ):
        return ParsedCompany.unknown("place_prefix")
    if len(name) < 3 or (len(name) <= 5 and all(len(word) == 1 for word in words)):
        return ParsedCompany.unknown("fragment")

    return ParsedCompany.resolved(name)


PARSE_RULES: tuple[Rule, ...] = (
    reject_trivial,
    reject_excluded,
    reject_location_header,
    isolate_company_segment,
    repair_glued_places,
    repair_glued_venue_words,
    preserve_whole_name,
    extract_around_keyword,
    split_off_location,
    repair_camel_case,
    extract_by_attribution,
    strip_suffixes,
    strip_job_title_prefix,
)


def parse_company(
    raw_company_text: str | None,
    exclusions: ExclusionFilter | None = None,
) -> ParsedCompany:
    """
    Parse the company name out of raw job-card text.

    Total: every input produces a ParsedCompany (Resolved, Unknown or Excluded).

    Args:
        raw_company_text: Raw "company • location" text from the job card
        exclusions: Exclusion filter (default: built-in lists plus settings)

    Returns:
        ParsedCompany
    """
    state = ParseState(raw=raw_company_text or "", exclusions=exclusions or get_default_filter())
    for rule in PARSE_RULES:
        outcome = rule(state)
        if outcome is not None:
            return outcome

    parsed = classify(state)
    logger.debug(f"Parsed '{state.raw}' -> {parsed.status.value} '{parsed.name}'")
    return parsed
