"""Service layer - business logic orchestration."""

from dup_portfolio.services.entry_service import EntryService, EntryCreate, validate_entry
from dup_portfolio.services.settings_service import SettingsService
from dup_portfolio.services.portfolio_service import PortfolioService
from dup_portfolio.services.ledger_aggregator import aggregate

__all__ = [
    "EntryService",
    "EntryCreate",
    "validate_entry",
    "SettingsService",
    "PortfolioService",
    "aggregate",
]
