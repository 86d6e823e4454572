"""CSV template generation."""

import csv
import io

from dup_portfolio.csv.importer import CSV_COLUMNS

_EXAMPLE_ROWS = [
    {
        "date": "2024-01-15",
        "stock": "AAPL",
        "quantity": "10",
        "buying_price": "185.50",
        "current_price": "190.00",
    },
    {
        "date": "2024-01-15",
        "stock": "MSFT",
        "quantity": "2.5",
        "buying_price": "375.00",
        "current_price": "370.25",
    },
]


class CsvTemplateGenerator:
    """Generator for CSV import templates."""

    def generate_template(self) -> str:
        """Return a CSV string with the header and example rows."""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for row in _EXAMPLE_ROWS:
            writer.writerow(row)
        return output.getvalue()
