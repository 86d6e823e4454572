"""View models for portfolio aggregation outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from dup_portfolio.domain.models import ValuedEntry


@dataclass(frozen=True)
class DateBucket:
    """Summed P&L of all entries sharing one literal date string."""

    date: str
    pnl: Decimal


@dataclass(frozen=True)
class PortfolioView:
    """
    Aggregated portfolio state handed to the presentation layer.

    ``as_of_date`` is None when the ledger is empty.
    ``unparseable_dates`` lists dates that could not be ordered and were
    sorted after every parseable date.
    """

    sorted_entries: tuple[ValuedEntry, ...]
    total_pnl: Decimal
    final_portfolio_amount: Decimal
    starting_amount: Decimal
    as_of_date: Optional[str] = None
    date_series: tuple[DateBucket, ...] = field(default_factory=tuple)
    unparseable_dates: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Return True when the view was built from zero entries."""
        return not self.sorted_entries

    @property
    def has_unparseable_dates(self) -> bool:
        return bool(self.unparseable_dates)


@dataclass
class ImportSummary:
    """Summary of CSV import operation."""

    imported_count: int = 0
    error_count: int = 0
    errors: list[str] = field(default_factory=list)
    entry_ids: list[int] = field(default_factory=list)
