"""Entry service: validation, valuation and persistence of new entries."""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dup_portfolio.core.timezone import now_eastern
from dup_portfolio.core.exceptions import InvalidEntryError, NotFoundError
from dup_portfolio.core.util import MAX_DECIMAL_PLACES, MAX_INTEGER_DIGITS, within_ledger_bounds
from dup_portfolio.domain.models import RawEntry, ValuedEntry
from dup_portfolio.domain.valuation import valuate
from dup_portfolio.repositories.protocols import EntryRepository

logger = logging.getLogger(__name__)


@dataclass
class EntryCreate:
    """Unvalidated input for adding an entry."""

    date: Any
    stock: Any
    quantity: Any
    buying_price: Any
    current_price: Any


def _to_finite_decimal(value: Any, field: str) -> Decimal:
    """Coerce a numeric value to a finite Decimal or raise InvalidEntryError."""
    if value is None:
        raise InvalidEntryError(field, "value is required")
    if isinstance(value, bool):
        raise InvalidEntryError(field, "must be a number")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float, str)):
        text = str(value).strip()
        if not text:
            raise InvalidEntryError(field, "value is required")
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise InvalidEntryError(field, f"not a number: {value!r}")
    else:
        raise InvalidEntryError(field, "must be a number")

    if not number.is_finite():
        raise InvalidEntryError(field, "must be finite")
    if not within_ledger_bounds(number):
        raise InvalidEntryError(
            field,
            f"must be below 1e{MAX_INTEGER_DIGITS} with at most "
            f"{MAX_DECIMAL_PLACES} decimal places",
        )
    return number


def validate_entry(data: EntryCreate) -> RawEntry:
    """
    Validate caller input and return a RawEntry ready for valuation.

    Quantity may be negative (shorts and corrections); prices may not.
    The date text is kept verbatim.
    """
    if not isinstance(data.date, str):
        raise InvalidEntryError("date", "must be a string")
    if not isinstance(data.stock, str):
        raise InvalidEntryError("stock", "must be a string")

    quantity = _to_finite_decimal(data.quantity, "quantity")
    buying_price = _to_finite_decimal(data.buying_price, "buying_price")
    current_price = _to_finite_decimal(data.current_price, "current_price")

    if buying_price < 0:
        raise InvalidEntryError("buying_price", "must be >= 0")
    if current_price < 0:
        raise InvalidEntryError("current_price", "must be >= 0")

    return RawEntry(
        date=data.date,
        stock=data.stock.strip(),
        quantity=quantity,
        buying_price=buying_price,
        current_price=current_price,
    )


class EntryService:
    """
    Service for adding and reading ledger entries.

    Writes return only the new identity; callers re-read the portfolio
    view rather than patching local state.
    """

    def __init__(self, entry_repo: EntryRepository):
        self._entry_repo = entry_repo

    def add_entry(self, data: EntryCreate) -> int:
        """
        Validate, valuate and persist one entry.

        Raises InvalidEntryError before anything is written.
        """
        raw = validate_entry(data)
        valued = valuate(raw)
        created = self._entry_repo.create(replace(valued, created_at_est=now_eastern()))
        logger.info(
            "Added entry %s: %s x%s on %s (pnl %s)",
            created.entry_id,
            created.stock,
            created.quantity,
            created.date,
            created.pnl,
        )
        return created.entry_id

    def get_entry(self, entry_id: int) -> ValuedEntry:
        """Get entry by ID."""
        entry = self._entry_repo.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("Entry", str(entry_id))
        return entry

    def list_entries(self) -> list[ValuedEntry]:
        """List all entries in insertion order."""
        return self._entry_repo.list_all()

    def count_entries(self) -> int:
        return self._entry_repo.count()
