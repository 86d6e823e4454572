"""Domain models package."""

from dup_portfolio.domain.models.entry import RawEntry, ValuedEntry
from dup_portfolio.domain.models.settings import PortfolioSettings, SETTINGS_ROW_ID

__all__ = [
    "RawEntry",
    "ValuedEntry",
    "PortfolioSettings",
    "SETTINGS_ROW_ID",
]
