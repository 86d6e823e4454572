"""Entry domain models."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class RawEntry:
    """
    One recorded stock mark as supplied by the caller.

    Numeric fields are Decimals that already passed validation.
    The date is kept as the literal ISO text the caller gave.
    """

    date: str
    stock: str
    quantity: Decimal
    buying_price: Decimal
    current_price: Decimal


@dataclass(frozen=True)
class ValuedEntry:
    """
    Raw entry augmented with invested capital, current value and P&L.

    Never construct one by hand with derived figures; use
    ``dup_portfolio.domain.valuation.valuate`` so that
    ``pnl == total_current - total_invested`` always holds.
    """

    date: str
    stock: str
    quantity: Decimal
    buying_price: Decimal
    current_price: Decimal
    total_invested: Decimal
    total_current: Decimal
    pnl: Decimal
    entry_id: Optional[int] = None
    created_at_est: Optional[datetime] = field(default=None, compare=False)

    @property
    def raw(self) -> RawEntry:
        """Return the caller-supplied fields of this entry."""
        return RawEntry(
            date=self.date,
            stock=self.stock,
            quantity=self.quantity,
            buying_price=self.buying_price,
            current_price=self.current_price,
        )

    @property
    def is_persisted(self) -> bool:
        """Return True once the store has assigned an identity."""
        return self.entry_id is not None

    def with_identity(
        self,
        entry_id: int,
        created_at_est: Optional[datetime] = None,
    ) -> "ValuedEntry":
        """Return a copy carrying the identity assigned by the store."""
        return replace(self, entry_id=entry_id, created_at_est=created_at_est)
