"""
Spreadsheet-style export of processed listings.

Each listing becomes a block of rows:

    job row        Title, Company, Parent Company, Location, ... Date Added
    contact rows   one per top contact, with a mailto link in "Send Email"
    blank row      separator (only when the job has contacts)

CsvSheetWriter appends blocks to a CSV file, writing the header once.
"""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import quote

from culinary_contacts.constants import MAX_CELL_LENGTH, MAX_CONTACTS_PER_JOB, NOT_AVAILABLE
from culinary_contacts.models import ContactCandidate, JobRecord
from culinary_contacts.parsing.text import truncate

logger = logging.getLogger(__name__)

HEADERS = [
    "Title",
    "Company",
    "Parent Company",
    "Location",
    "Salary",
    "Contact Name",
    "Contact Title",
    "Email Address",
    "Send Email",
    "URL",
    "Job Details",
    "LinkedIn",
    "Domain",
    "Company Size",
    "Date Added",
]
URL_COLUMN = HEADERS.index("URL")
CONTACT_MARKER = "→"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

EMAIL_SUBJECT = "Exceptional Candidate for {title} Position"
EMAIL_BODY = (
    "{greeting}\n\n"
    "I have a great candidate for your {title} position and would love to "
    "tell you more.\n\n"
    "Best regards,"
)


def mailto_link(contact: ContactCandidate, job_title: str) -> str:
    first_name = contact.name.split()[0] if contact.name.strip() else ""
    if first_name.lower() == "unknown":
        first_name = ""
    greeting = f"Hi {first_name}," if first_name else "Hi!"
    subject = quote(EMAIL_SUBJECT.format(title=job_title))
    body = quote(EMAIL_BODY.format(greeting=greeting, title=job_title))
    return f"mailto:{contact.email}?subject={subject}&body={body}"


def job_row(record: JobRecord) -> list[str]:
    listing = record.listing
    result = record.result
    linkedin = sorted(result.linkedin_urls)[0] if result.linkedin_urls else ""
    return [
        listing.title or "",
        record.company.name,
        record.parent_company or NOT_AVAILABLE,
        listing.raw_location_text or "",
        listing.salary or "",
        "",
        "",
        "",
        "",
        listing.url or "",
        truncate(record.job_details, MAX_CELL_LENGTH),
        linkedin,
        result.primary_domain or "",
        result.employee_size_hint or "",
        record.processed_at.strftime(DATE_FORMAT),
    ]


def contact_row(contact: ContactCandidate, job_title: str) -> list[str]:
    row = [""] * len(HEADERS)
    row[0] = CONTACT_MARKER
    row[5] = contact.name or "Unknown"
    row[6] = contact.title or NOT_AVAILABLE
    row[7] = contact.email
    row[8] = mailto_link(contact, job_title)
    return row


def record_rows(record: JobRecord, max_contacts: int = MAX_CONTACTS_PER_JOB) -> list[list[str]]:
    """Job row, then its top contacts, then a blank separator if there were contacts."""
    rows = [job_row(record)]
    contacts = record.result.contacts[:max_contacts]
    for contact in contacts:
        rows.append(contact_row(contact, record.listing.title))
    if contacts:
        rows.append([""] * len(HEADERS))
    return rows


class CsvSheetWriter:
    """Appends job blocks to a CSV file that mirrors the outreach sheet."""

    def __init__(self, path: Path, max_contacts: int = MAX_CONTACTS_PER_JOB):
        self.path = Path(path)
        self.max_contacts = max_contacts

    def existing_urls(self) -> set[str]:
        """URLs of jobs already in the file."""
        if not self.path.exists():
            return set()
        with open(self.path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            next(reader, None)
            return {
                row[URL_COLUMN]
                for row in reader
                if len(row) > URL_COLUMN and row[URL_COLUMN] and row[0] != CONTACT_MARKER
            }

    def write_records(self, records: Iterable[JobRecord]) -> int:
        """
        Append records to the file.

        Returns:
            Number of rows written (header excluded)
        """
        rows = []
        for record in records:
            rows.extend(record_rows(record, self.max_contacts))
        if not rows:
            return 0

        write_header = not self.path.exists() or self.path.stat().st_size == 0
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            if write_header:
                writer.writerow(HEADERS)
            writer.writerows(rows)
        logger.info(f"Wrote {len(rows)} rows to {self.path}")
        return len(rows)
