"""Pydantic schemas for API request/response."""

from dup_portfolio.api.schemas.entry import (
    EntryCreateRequest,
    EntryResponse,
    EntryListResponse,
    EntryCreatedResponse,
    ImportSummaryResponse,
)
from dup_portfolio.api.schemas.portfolio import (
    DateBucketResponse,
    PortfolioViewResponse,
    SettingsUpdateRequest,
    SettingsResponse,
    PortfolioSnapshotResponse,
    PortfolioCommandRequest,
)

__all__ = [
    "EntryCreateRequest",
    "EntryResponse",
    "EntryListResponse",
    "EntryCreatedResponse",
    "ImportSummaryResponse",
    "DateBucketResponse",
    "PortfolioViewResponse",
    "SettingsUpdateRequest",
    "SettingsResponse",
    "PortfolioSnapshotResponse",
    "PortfolioCommandRequest",
]
