"""CSV import/export utilities."""

from dup_portfolio.csv.importer import CsvImporter
from dup_portfolio.csv.exporter import CsvExporter
from dup_portfolio.csv.template import CsvTemplateGenerator

__all__ = [
    "CsvImporter",
    "CsvExporter",
    "CsvTemplateGenerator",
]
