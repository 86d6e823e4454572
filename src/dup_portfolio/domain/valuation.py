"""Entry valuation: raw entry -> valued entry."""

from dataclasses import replace
from decimal import localcontext
from typing import Any

from dup_portfolio.domain.models import RawEntry, ValuedEntry

# Working precision for ledger arithmetic. Products and sums of inputs
# within core.util.within_ledger_bounds fit without rounding.
LEDGER_PRECISION = 80


def valuate(raw: RawEntry) -> ValuedEntry:
    """
    Compute invested capital, current value and P&L for one entry.

    Pure and total over validated input. Negative quantities propagate
    algebraically.
    """
    with localcontext() as ctx:
        ctx.prec = LEDGER_PRECISION
        total_invested = raw.quantity * raw.buying_price
        total_current = raw.quantity * raw.current_price
        pnl = total_current - total_invested
    return ValuedEntry(
        date=raw.date,
        stock=raw.stock,
        quantity=raw.quantity,
        buying_price=raw.buying_price,
        current_price=raw.current_price,
        total_invested=total_invested,
        total_current=total_current,
        pnl=pnl,
    )


def revalue(entry: ValuedEntry, **changes: Any) -> ValuedEntry:
    """
    Return ``entry`` with input fields changed and all figures recomputed.

    Identity and creation time are carried over unchanged.
    """
    raw = replace(entry.raw, **changes)
    return replace(
        valuate(raw),
        entry_id=entry.entry_id,
        created_at_est=entry.created_at_est,
    )
