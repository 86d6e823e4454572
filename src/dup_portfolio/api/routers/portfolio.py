"""Portfolio view and settings endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from dup_portfolio.api.deps import (
    get_entry_service,
    get_settings_service,
    get_portfolio_service,
)
from dup_portfolio.api.routers.entries import to_entry_create
from dup_portfolio.api.schemas import (
    EntryCreateRequest,
    EntryCreatedResponse,
    EntryResponse,
    PortfolioViewResponse,
    SettingsUpdateRequest,
    SettingsResponse,
    PortfolioSnapshotResponse,
    PortfolioCommandRequest,
)
from dup_portfolio.services import EntryService, SettingsService, PortfolioService

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioViewResponse)
def get_portfolio(
    portfolio: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioViewResponse:
    """
    Return the aggregated portfolio view.

    Entries are sorted by date (stable for equal dates); money fields are
    rounded to cents here and nowhere earlier.
    """
    return PortfolioViewResponse.from_view(portfolio.get_view())


@router.get("/snapshot", response_model=PortfolioSnapshotResponse)
def get_snapshot(
    entries: EntryService = Depends(get_entry_service),
    settings: SettingsService = Depends(get_settings_service),
) -> PortfolioSnapshotResponse:
    """Return stored entries in insertion order and the raw settings record."""
    stored = settings.stored_settings()
    return PortfolioSnapshotResponse(
        entries=[EntryResponse.from_entry(e) for e in entries.list_entries()],
        portfolio=SettingsResponse.from_settings(stored) if stored else None,
    )


@router.put("/settings", response_model=SettingsResponse)
def replace_settings(
    data: SettingsUpdateRequest,
    settings: SettingsService = Depends(get_settings_service),
) -> SettingsResponse:
    """Replace the starting amount (creates the record on first use)."""
    return SettingsResponse.from_settings(settings.replace_settings(data.starting_amount))


@router.post("")
def post_command(
    command: PortfolioCommandRequest,
    entries: EntryService = Depends(get_entry_service),
    settings: SettingsService = Depends(get_settings_service),
):
    """
    Dispatch a command envelope.

    ``{"type": "entry", "data": {...}}`` adds an entry;
    ``{"type": "portfolio", "data": {"startingAmount": ...}}`` replaces settings.
    """
    try:
        if command.type == "entry":
            data = EntryCreateRequest.model_validate(command.data)
            entry_id = entries.add_entry(to_entry_create(data))
            return EntryCreatedResponse(entry_id=entry_id)
        if command.type == "portfolio":
            data = SettingsUpdateRequest.model_validate(command.data)
            return SettingsResponse.from_settings(
                settings.replace_settings(data.starting_amount)
            )
    except PydanticValidationError as e:
        raise RequestValidationError(e.errors())

    raise HTTPException(status_code=400, detail=f"Unknown command type: {command.type}")
