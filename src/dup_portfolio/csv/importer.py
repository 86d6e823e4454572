"""CSV import functionality."""

import csv
import io
import logging
from typing import Optional

from dup_portfolio.core.exceptions import ValidationError
from dup_portfolio.domain.views import ImportSummary
from dup_portfolio.services.entry_service import EntryService, EntryCreate

logger = logging.getLogger(__name__)

# Input columns, in template order
CSV_COLUMNS = [
    "date",
    "stock",
    "quantity",
    "buying_price",
    "current_price",
]

# Columns appended on export
DERIVED_COLUMNS = [
    "total_invested",
    "total_current",
    "pnl",
]

MAX_IMPORT_ROWS = 10_000


def _get_field(row: dict, header_map: dict, field: str) -> Optional[str]:
    """Get a field value from a CSV row, handling header normalization."""
    key = header_map.get(field)
    if key is None:
        return None
    value = row.get(key)
    return value.strip() if value is not None else None


class CsvImporter:
    """
    CSV importer for bulk entry loading.

    Each row goes through the same validation as a single add; valid rows
    are imported and invalid ones reported per row.
    """

    def __init__(self, entry_service: EntryService):
        self._entries = entry_service

    def import_bytes(self, raw: bytes) -> ImportSummary:
        """Import entries from raw CSV bytes (UTF-8, BOM tolerated)."""
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise ValidationError("File is not valid UTF-8.")
        return self.import_text(text)

    def import_text(self, text: str) -> ImportSummary:
        """Import entries from CSV text."""
        reader = csv.DictReader(io.StringIO(text))
        if reader.fieldnames is None:
            raise ValidationError("CSV file is empty or has no header row.")

        header_map = {h.strip().lower(): h for h in reader.fieldnames if h}
        missing = [c for c in CSV_COLUMNS if c not in header_map]
        if missing:
            raise ValidationError(f"Missing required column(s): {', '.join(missing)}")

        summary = ImportSummary()
        for row_num, row in enumerate(reader, start=2):  # row 1 is header
            if row_num - 1 > MAX_IMPORT_ROWS:
                summary.errors.append(
                    f"Exceeded maximum of {MAX_IMPORT_ROWS} rows. Extra rows ignored."
                )
                break

            data = EntryCreate(**{c: _get_field(row, header_map, c) for c in CSV_COLUMNS})
            try:
                entry_id = self._entries.add_entry(data)
            except ValidationError as exc:
                summary.error_count += 1
                summary.errors.append(f"Row {row_num}: {exc.message}")
                continue
            summary.imported_count += 1
            summary.entry_ids.append(entry_id)

        logger.info(
            "CSV import finished: %d imported, %d rejected",
            summary.imported_count,
            summary.error_count,
        )
        return summary
