"""Entry repository protocol."""

from typing import Protocol, Optional

from dup_portfolio.domain.models import ValuedEntry


class EntryRepository(Protocol):
    """Interface for ledger entry data access."""

    def create(self, entry: ValuedEntry) -> ValuedEntry:
        """Persist a new entry and return it with its assigned identity."""
        ...

    def get_by_id(self, entry_id: int) -> Optional[ValuedEntry]:
        """Retrieve entry by ID."""
        ...

    def list_all(self) -> list[ValuedEntry]:
        """List all entries in insertion order."""
        ...

    def count(self) -> int:
        """Return the number of stored entries."""
        ...
