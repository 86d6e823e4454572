"""Pydantic schemas for portfolio view and settings endpoints."""

from decimal import Decimal
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field

from dup_portfolio.core.util import round2
from dup_portfolio.domain.models import PortfolioSettings
from dup_portfolio.domain.views import PortfolioView
from dup_portfolio.api.schemas.entry import EntryResponse


class DateBucketResponse(BaseModel):
    """Summed P&L for one date."""

    date: str
    pnl: float


class PortfolioViewResponse(BaseModel):
    """Full portfolio view: chronological ledger, summary figures and date series."""

    entries: list[EntryResponse]
    total_pnl: float
    starting_amount: float
    final_portfolio_amount: float
    # null when the ledger is empty
    as_of_date: Optional[str] = None
    date_series: list[DateBucketResponse]
    unparseable_dates: list[str] = Field(default_factory=list)
    has_unparseable_dates: bool = False

    @classmethod
    def from_view(cls, view: PortfolioView) -> "PortfolioViewResponse":
        return cls(
            entries=[EntryResponse.from_entry(e) for e in view.sorted_entries],
            total_pnl=round2(view.total_pnl),
            starting_amount=round2(view.starting_amount),
            final_portfolio_amount=round2(view.final_portfolio_amount),
            as_of_date=view.as_of_date,
            date_series=[
                DateBucketResponse(date=b.date, pnl=round2(b.pnl))
                for b in view.date_series
            ],
            unparseable_dates=list(view.unparseable_dates),
            has_unparseable_dates=view.has_unparseable_dates,
        )


class SettingsUpdateRequest(BaseModel):
    """Request schema for replacing the starting amount."""

    starting_amount: Decimal = Field(
        ...,
        validation_alias=AliasChoices("starting_amount", "startingAmount"),
        description="Contributed capital baseline",
    )


class SettingsResponse(BaseModel):
    """Stored portfolio settings."""

    starting_amount: float
    acknowledged: bool = True

    @classmethod
    def from_settings(cls, settings: PortfolioSettings) -> "SettingsResponse":
        return cls(starting_amount=float(settings.starting_amount))


class PortfolioSnapshotResponse(BaseModel):
    """Raw stored state: entries in insertion order plus settings (null if never saved)."""

    entries: list[EntryResponse]
    portfolio: Optional[SettingsResponse] = None


class PortfolioCommandRequest(BaseModel):
    """Command envelope: ``type`` is ``entry`` or ``portfolio``."""

    type: str
    data: dict[str, Any]
