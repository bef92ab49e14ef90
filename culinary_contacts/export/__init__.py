"""Export of processed listings."""

from culinary_contacts.export.sheet import HEADERS, CsvSheetWriter, record_rows

__all__ = ["HEADERS", "CsvSheetWriter", "record_rows"]
