"""
Read the fields we need from a listing's detail page.

The detail page carries the "Part of <Parent>" link that names the
restaurant group a venue belongs to, a leadership list, and the job
description text.
"""

import logging

from bs4 import BeautifulSoup

from culinary_contacts.constants import NOT_AVAILABLE
from culinary_contacts.models import DetailPage
from culinary_contacts.parsing.text import collapse_whitespace

logger = logging.getLogger(__name__)

PARENT_MARKER = "Part of"


def extract_parent_company(soup: BeautifulSoup) -> str | None:
    """Name in the muted link of the first paragraph containing "Part of"."""
    for paragraph in soup.find_all("p"):
        if PARENT_MARKER not in paragraph.get_text():
            continue
        link = paragraph.select_one("a.text-muted")
        if link is not None:
            name = collapse_whitespace(link.get_text())
            if name:
                return name
    return None


def extract_leadership(soup: BeautifulSoup) -> tuple[tuple[str, str], ...]:
    """(name, title) pairs from the leadership section; entries without a name are skipped."""
    leaders = []
    for section in soup.select(".leadership-section"):
        for leader in section.select("a.text-body"):
            name_el = leader.select_one(".font-weight-bold")
            name = collapse_whitespace(name_el.get_text()) if name_el else ""
            if not name:
                continue
            title_el = leader.find("p")
            title = collapse_whitespace(title_el.get_text()) if title_el else ""
            leaders.append((name, title or NOT_AVAILABLE))
    return tuple(leaders)


def extract_job_details(soup: BeautifulSoup) -> str | None:
    blocks = soup.select("#job-details .text-muted div")
    text = " ".join(div.get_text(" ", strip=True) for div in blocks)
    return collapse_whitespace(text) or None


def parse_detail_page(html: str | None) -> DetailPage:
    """
    Parse a detail page. Empty or unparseable HTML yields an empty DetailPage.

    Args:
        html: Raw HTML of the listing's detail page

    Returns:
        DetailPage with parent company, leadership and job details
    """
    if not html or not html.strip():
        return DetailPage()

    soup = BeautifulSoup(html, "html.parser")
    page = DetailPage(
        parent_company=extract_parent_company(soup),
        leadership=extract_leadership(soup),
        job_details=extract_job_details(soup),
    )
    if page.parent_company:
        logger.debug(f"Found parent company link: '{page.parent_company}'")
    return page
