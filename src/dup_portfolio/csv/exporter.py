"""CSV export functionality."""

import csv
import io
from pathlib import Path

from dup_portfolio.domain.views import PortfolioView
from dup_portfolio.csv.importer import CSV_COLUMNS, DERIVED_COLUMNS


class CsvExporter:
    """
    CSV exporter for the aggregated ledger.

    Rows follow the chronological order of the view.
    """

    def ledger_to_csv(self, view: PortfolioView) -> str:
        """Serialize the sorted ledger, including derived columns."""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=CSV_COLUMNS + DERIVED_COLUMNS)
        writer.writeheader()
        for entry in view.sorted_entries:
            writer.writerow({
                "date": entry.date,
                "stock": entry.stock,
                "quantity": str(entry.quantity),
                "buying_price": str(entry.buying_price),
                "current_price": str(entry.current_price),
                "total_invested": str(entry.total_invested),
                "total_current": str(entry.total_current),
                "pnl": str(entry.pnl),
            })
        return output.getvalue()

    def date_series_to_csv(self, view: PortfolioView) -> str:
        """Serialize the datewise P&L summary."""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=["date", "pnl"])
        writer.writeheader()
        for bucket in view.date_series:
            writer.writerow({"date": bucket.date, "pnl": str(bucket.pnl)})
        return output.getvalue()

    def export_ledger(self, view: PortfolioView, path: str) -> None:
        """Write the ledger CSV to a file."""
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.ledger_to_csv(view), encoding="utf-8", newline="")
