"""View models for service outputs."""

from dup_portfolio.domain.views.portfolio import (
    DateBucket,
    PortfolioView,
    ImportSummary,
)

__all__ = [
    "DateBucket",
    "PortfolioView",
    "ImportSummary",
]
