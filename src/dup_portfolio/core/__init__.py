"""Core utilities and shared functionality."""

from dup_portfolio.core.timezone import (
    now_eastern,
    parse_entry_date,
    EASTERN_TZ,
)
from dup_portfolio.core.exceptions import (
    AppError,
    ValidationError,
    InvalidEntryError,
    NotFoundError,
)

__all__ = [
    "now_eastern",
    "parse_entry_date",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "InvalidEntryError",
    "NotFoundError",
]
