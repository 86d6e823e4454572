"""Domain layer - pure business models with no external dependencies."""

from dup_portfolio.domain.models import (
    RawEntry,
    ValuedEntry,
    PortfolioSettings,
)
from dup_portfolio.domain.valuation import valuate, revalue

__all__ = [
    "RawEntry",
    "ValuedEntry",
    "PortfolioSettings",
    "valuate",
    "revalue",
]
