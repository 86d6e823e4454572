"""Ledger aggregation: valued entries + starting capital -> portfolio view."""

import logging
from datetime import datetime
from decimal import Decimal, localcontext
from typing import Iterable, Optional, Sequence

from dup_portfolio.core.timezone import parse_entry_date
from dup_portfolio.domain.models import ValuedEntry
from dup_portfolio.domain.valuation import LEDGER_PRECISION
from dup_portfolio.domain.views import DateBucket, PortfolioView

logger = logging.getLogger(__name__)

# Parseable dates sort on (0, datetime); unparseable ones on (1,) after all of them.
_SortKey = tuple


def _sort_key(parsed: Optional[datetime]) -> _SortKey:
    if parsed is None:
        return (1,)
    return (0, parsed)


def sort_chronologically(
    entries: Sequence[ValuedEntry],
) -> tuple[list[ValuedEntry], list[str]]:
    """
    Sort entries ascending by calendar date.

    The sort is stable, so entries sharing a date keep their input order.
    Returns the sorted entries and the dates that could not be parsed, in
    the order they were first seen.
    """
    keyed: list[tuple[_SortKey, ValuedEntry]] = []
    unparseable: dict[str, None] = {}
    for entry in entries:
        parsed = parse_entry_date(entry.date)
        if parsed is None:
            unparseable.setdefault(entry.date, None)
        keyed.append((_sort_key(parsed), entry))

    keyed.sort(key=lambda item: item[0])
    return [entry for _, entry in keyed], list(unparseable)


def bucket_by_date(sorted_entries: Iterable[ValuedEntry]) -> list[DateBucket]:
    """
    Sum P&L per literal date string.

    Buckets come out in first-seen order, which for a chronologically
    sorted ledger is ascending date order.
    """
    totals: dict[str, Decimal] = {}
    for entry in sorted_entries:
        totals[entry.date] = totals.get(entry.date, Decimal("0")) + entry.pnl
    return [DateBucket(date=date, pnl=pnl) for date, pnl in totals.items()]


def aggregate(
    entries: Sequence[ValuedEntry],
    starting_amount: Decimal,
) -> PortfolioView:
    """
    Build the portfolio view from all valued entries and the starting amount.

    Never raises for bad data: entries with unparseable dates are kept,
    sorted last, and reported in ``unparseable_dates``.
    """
    sorted_entries, unparseable = sort_chronologically(entries)
    if unparseable:
        logger.warning(
            "Sorting %d unparseable entry date(s) last: %s",
            len(unparseable),
            ", ".join(repr(d) for d in unparseable),
        )

    with localcontext() as ctx:
        ctx.prec = LEDGER_PRECISION
        total_pnl = sum((entry.pnl for entry in sorted_entries), Decimal("0"))
        final_amount = starting_amount + total_pnl
        date_series = tuple(bucket_by_date(sorted_entries))
    as_of_date = sorted_entries[-1].date if sorted_entries else None

    return PortfolioView(
        sorted_entries=tuple(sorted_entries),
        total_pnl=total_pnl,
        final_portfolio_amount=final_amount,
        starting_amount=starting_amount,
        as_of_date=as_of_date,
        date_series=date_series,
        unparseable_dates=tuple(unparseable),
    )
