"""Entry endpoints: add, read, CSV import/export."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from dup_portfolio.api.deps import (
    get_entry_service,
    get_portfolio_service,
    get_csv_importer,
    get_csv_exporter,
    get_csv_template_generator,
)
from dup_portfolio.api.schemas import (
    EntryCreateRequest,
    EntryResponse,
    EntryListResponse,
    EntryCreatedResponse,
    ImportSummaryResponse,
)
from dup_portfolio.csv import CsvImporter, CsvExporter, CsvTemplateGenerator
from dup_portfolio.services import EntryService, EntryCreate, PortfolioService

router = APIRouter(prefix="/entries", tags=["entries"])


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def to_entry_create(data: EntryCreateRequest) -> EntryCreate:
    """Map the request schema onto the service input."""
    return EntryCreate(
        date=data.date,
        stock=data.stock,
        quantity=data.quantity,
        buying_price=data.buying_price,
        current_price=data.current_price,
    )


@router.get("", response_model=EntryListResponse)
def list_entries(
    entries: EntryService = Depends(get_entry_service),
) -> EntryListResponse:
    """List stored entries in insertion order."""
    items = entries.list_entries()
    return EntryListResponse(
        entries=[EntryResponse.from_entry(e) for e in items],
        count=len(items),
    )


@router.post("", response_model=EntryCreatedResponse, status_code=201)
def add_entry(
    data: EntryCreateRequest,
    entries: EntryService = Depends(get_entry_service),
) -> EntryCreatedResponse:
    """Validate, valuate and store one entry. Re-read /portfolio for the new view."""
    entry_id = entries.add_entry(to_entry_create(data))
    return EntryCreatedResponse(entry_id=entry_id)


@router.get("/export")
def export_ledger(
    portfolio: PortfolioService = Depends(get_portfolio_service),
    exporter: CsvExporter = Depends(get_csv_exporter),
):
    """Download the chronological ledger as CSV."""
    return _csv_response(exporter.ledger_to_csv(portfolio.get_view()), "ledger.csv")


@router.get("/date-series/export")
def export_date_series(
    portfolio: PortfolioService = Depends(get_portfolio_service),
    exporter: CsvExporter = Depends(get_csv_exporter),
):
    """Download the datewise P&L summary as CSV."""
    return _csv_response(exporter.date_series_to_csv(portfolio.get_view()), "datewise_pnl.csv")


@router.get("/template")
def download_template(
    generator: CsvTemplateGenerator = Depends(get_csv_template_generator),
):
    """Download a template CSV with header and example rows."""
    return _csv_response(generator.generate_template(), "entries_template.csv")


@router.post("/import", response_model=ImportSummaryResponse, status_code=201)
def import_entries(
    file: UploadFile = File(...),
    importer: CsvImporter = Depends(get_csv_importer),
) -> ImportSummaryResponse:
    """Bulk-import entries from CSV. Valid rows are kept even when others fail."""
    raw = file.file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Uploaded file is empty.")

    summary = importer.import_bytes(raw)
    return ImportSummaryResponse(
        imported_count=summary.imported_count,
        error_count=summary.error_count,
        errors=summary.errors,
        entry_ids=summary.entry_ids,
    )


@router.get("/{entry_id}", response_model=EntryResponse)
def get_entry(
    entry_id: int,
    entries: EntryService = Depends(get_entry_service),
) -> EntryResponse:
    """Get one stored entry."""
    return EntryResponse.from_entry(entries.get_entry(entry_id))
