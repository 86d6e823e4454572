"""Pydantic schemas for entry endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from dup_portfolio.core.util import round2
from dup_portfolio.domain.models import ValuedEntry


class EntryCreateRequest(BaseModel):
    """Request schema for adding an entry. Accepts snake_case or camelCase keys."""

    date: str = Field(..., max_length=64, description="Calendar date, ISO text (YYYY-MM-DD)")
    stock: str = Field(..., max_length=64, description="Stock symbol (free text)")
    quantity: Decimal = Field(..., description="Quantity held; may be fractional or negative")
    buying_price: Decimal = Field(
        ...,
        validation_alias=AliasChoices("buying_price", "buyingPrice"),
        description="Unit cost",
    )
    current_price: Decimal = Field(
        ...,
        validation_alias=AliasChoices("current_price", "currentPrice"),
        description="Unit mark",
    )


class EntryResponse(BaseModel):
    """Response schema for a single valued entry. Money fields are rounded to cents."""

    entry_id: Optional[int] = None
    date: str
    stock: str
    quantity: float
    buying_price: float
    current_price: float
    total_invested: float
    total_current: float
    pnl: float

    @classmethod
    def from_entry(cls, entry: ValuedEntry) -> "EntryResponse":
        return cls(
            entry_id=entry.entry_id,
            date=entry.date,
            stock=entry.stock,
            quantity=float(entry.quantity),
            buying_price=round2(entry.buying_price),
            current_price=round2(entry.current_price),
            total_invested=round2(entry.total_invested),
            total_current=round2(entry.total_current),
            pnl=round2(entry.pnl),
        )


class EntryListResponse(BaseModel):
    """Response schema for listing entries."""

    entries: list[EntryResponse]
    count: int


class EntryCreatedResponse(BaseModel):
    """Response for a successful add. Carries no view; clients re-read /portfolio."""

    entry_id: int


class ImportSummaryResponse(BaseModel):
    """Response schema for CSV import results."""

    imported_count: int
    error_count: int
    errors: list[str]
    entry_ids: list[int]
